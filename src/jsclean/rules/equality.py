"""Strict-equality rule: ``==``/``!=`` become ``===``/``!==``.

Comparisons against the literal ``null`` keep their loose operator, since
``x == null`` deliberately matches both ``null`` and ``undefined``.
"""

from __future__ import annotations

from jsclean.tree.nodes import BinaryExpression, Literal, Node, Program
from jsclean.tree.traverse import iter_preorder

__all__ = ["exact_equals"]

_STRICT = {"==": "===", "!=": "!=="}


def _is_null(node: Node) -> bool:
    return isinstance(node, Literal) and node.raw == "null"


def exact_equals(program: Program) -> None:
    for node in iter_preorder(program):
        if not isinstance(node, BinaryExpression) or node.operator not in _STRICT:
            continue
        if _is_null(node.left) or _is_null(node.right):
            continue
        node.operator = _STRICT[node.operator]
