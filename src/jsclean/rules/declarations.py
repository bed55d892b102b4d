"""Variable splitting: ``var a, b`` becomes ``var a; var b``.

Only declarations that sit directly in a statement list are split; a
declaration in a for-loop head or behind ``export`` keeps its declarators.
"""

from __future__ import annotations

from jsclean.tree.nodes import (
    BlockStatement,
    Node,
    Program,
    SwitchCase,
    VariableDeclaration,
)
from jsclean.tree.traverse import iter_preorder

__all__ = ["separate_vars", "split_declaration"]


def split_declaration(decl: VariableDeclaration) -> list[VariableDeclaration]:
    """Return one single-binding declaration per declarator of *decl*.

    The comments of *decl* move to the first result.
    """
    if len(decl.declarations) < 2:
        return [decl]
    parts = [
        VariableDeclaration(
            kind=decl.kind,
            declarations=[declarator],
            start=declarator.start,
            end=declarator.end,
            line=declarator.line,
        )
        for declarator in decl.declarations
    ]
    parts[0].comments = decl.comments
    parts[0].start = decl.start
    return parts


def _split_all(statements: list[Node]) -> list[Node]:
    result: list[Node] = []
    for stmt in statements:
        if isinstance(stmt, VariableDeclaration):
            result.extend(split_declaration(stmt))
        else:
            result.append(stmt)
    return result


def separate_vars(program: Program) -> None:
    for node in iter_preorder(program):
        if isinstance(node, Program | BlockStatement):
            node.body = _split_all(node.body)
        elif isinstance(node, SwitchCase):
            node.consequent = _split_all(node.consequent)
