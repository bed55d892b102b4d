"""Sort keys and the function/property sorting rules.

All sorting uses one key ordering: numbers first (numeric order), then
strings (identifier names and string values, compared lexicographically),
other literals by raw text and other nodes by their kind tag.  An object key
written as the canonical string form of a number (``'1'``, ``'2.5'``) names
the same property as that number and sorts with it.  A missing key
(``default`` case, computed key, spread element) maps to a sentinel that
sorts after everything.  Ties keep their input order (``sorted`` is stable),
so sorting already-sorted output changes nothing.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from jsclean.tree.nodes import (
    BlockStatement,
    ClassBody,
    FunctionDeclaration,
    Identifier,
    Literal,
    MethodDefinition,
    Node,
    ObjectExpression,
    Program,
    Property,
    SwitchCase,
)
from jsclean.tree.traverse import iter_preorder

__all__ = [
    "MISSING_KEY",
    "case_key",
    "hoist_comments",
    "method_key",
    "property_key",
    "sort_functions",
    "sort_key",
    "sort_properties",
]

SortKey = tuple[int, Any]

MISSING_KEY: SortKey = (2, "")

_CANONICAL_NUMBER = re.compile(r"0|[1-9][0-9]*|(?:0|[1-9][0-9]*)\.[0-9]*[1-9]")
_MAX_SAFE_INTEGER = 2**53 - 1


def sort_key(node: Node | None) -> SortKey:
    """Return the ordering key of a case test, property key or function name."""
    if node is None:
        return MISSING_KEY
    if isinstance(node, Identifier):
        return (1, node.name)
    if isinstance(node, Literal):
        value = node.value
        if isinstance(value, str):
            return (1, value)
        if isinstance(value, int | float) and not isinstance(value, bool):
            return (0, value)
        return (1, node.raw)
    return (1, str(node.type))


def case_key(case: SwitchCase) -> SortKey:
    return sort_key(case.test)


def _canonical_number(text: str) -> int | float | None:
    """The number whose string form is exactly *text*, as ``String(n)`` prints it."""
    if not _CANONICAL_NUMBER.fullmatch(text):
        return None
    if "." not in text:
        n = int(text)
        return n if n <= _MAX_SAFE_INTEGER else None
    f = float(text)
    return f if repr(f) == text else None


def property_key(prop: Node) -> SortKey:
    """Key of an object member; ``'1'`` and ``1`` name the same property and tie."""
    if not isinstance(prop, Property) or prop.computed:
        return MISSING_KEY
    key = prop.key
    if isinstance(key, Literal) and isinstance(key.value, str):
        number = _canonical_number(key.value)
        if number is not None:
            return (0, number)
    return sort_key(key)


def hoist_comments(group: list[Node]) -> None:
    """Move every comment owned by a member of *group* onto its first member."""
    if not group:
        return
    collected = []
    for node in group:
        collected.extend(node.comments)
        node.comments = []
    group[0].comments = collected


# ---------------------------------------------------------------------------
# Function declarations and class methods
# ---------------------------------------------------------------------------

_CONSTRUCTOR_KEY: SortKey = (-1, "")


def _function_key(node: Node) -> SortKey:
    assert isinstance(node, FunctionDeclaration)
    return sort_key(node.id)


def method_key(node: Node) -> SortKey:
    """Order of a class method: the constructor first, then by name."""
    assert isinstance(node, MethodDefinition)
    if node.computed:
        return MISSING_KEY
    key = sort_key(node.key)
    if key == (1, "constructor") and not node.static:
        return _CONSTRUCTOR_KEY
    return key


def _sort_runs(
    body: list[Node], kind: type[Node], key: Callable[[Node], SortKey]
) -> list[Node]:
    result: list[Node] = []
    i = 0
    while i < len(body):
        if not isinstance(body[i], kind):
            result.append(body[i])
            i += 1
            continue
        j = i + 1
        while j < len(body) and isinstance(body[j], kind) and not body[j].comments:
            j += 1
        run = sorted(body[i:j], key=key)
        hoist_comments(run)
        result.extend(run)
        i = j
    return result


def sort_functions(program: Program) -> None:
    """Sort runs of adjacent function declarations, and of class methods, by name.

    A member that owns comments ends the run before it and starts a new one;
    the comments of a run end up on its first sorted member.  A class field
    ends a run of methods.
    """
    for node in iter_preorder(program):
        if isinstance(node, Program | BlockStatement):
            node.body = _sort_runs(node.body, FunctionDeclaration, _function_key)
        elif isinstance(node, ClassBody):
            node.body = _sort_runs(node.body, MethodDefinition, method_key)


# ---------------------------------------------------------------------------
# Object properties
# ---------------------------------------------------------------------------


def sort_properties(program: Program) -> None:
    """Sort the properties of every object literal by key."""
    for node in iter_preorder(program):
        if isinstance(node, ObjectExpression):
            node.properties.sort(key=property_key)
