"""Switch statement rules: trailing ``break`` and case sorting.

A *fallthrough block* is a maximal run of consecutive cases ending in the
first case whose consequent ends in a terminator (``break``, ``continue``,
``return`` or ``throw``).  Blocks are recomputed on every call since other
rules change case contents.
"""

from __future__ import annotations

from jsclean.rules.sorting import case_key
from jsclean.tree.nodes import (
    BreakStatement,
    ContinueStatement,
    Node,
    Program,
    ReturnStatement,
    SwitchCase,
    SwitchStatement,
    ThrowStatement,
)
from jsclean.tree.traverse import iter_preorder

__all__ = [
    "fallthrough_blocks",
    "has_terminator",
    "is_terminator",
    "sort_cases",
    "trailing_break",
]

_TERMINATORS = (BreakStatement, ContinueStatement, ReturnStatement, ThrowStatement)


def is_terminator(node: Node) -> bool:
    return isinstance(node, _TERMINATORS)


def has_terminator(case: SwitchCase) -> bool:
    """True if the consequent of *case* ends in a terminator statement."""
    return bool(case.consequent) and is_terminator(case.consequent[-1])


def fallthrough_blocks(cases: list[SwitchCase]) -> list[list[SwitchCase]]:
    """Partition *cases* into fallthrough blocks, in order."""
    blocks: list[list[SwitchCase]] = []
    current: list[SwitchCase] = []
    for case in cases:
        current.append(case)
        if has_terminator(case):
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


# ---------------------------------------------------------------------------
# Trailing break
# ---------------------------------------------------------------------------


def trailing_break(program: Program) -> None:
    """Append ``break`` to the last case of a switch when it lacks a terminator."""
    for node in iter_preorder(program):
        if not isinstance(node, SwitchStatement) or not node.cases:
            continue
        last = node.cases[-1]
        if has_terminator(last):
            continue
        last.consequent.append(BreakStatement(start=last.end, end=last.end, line=last.line))


# ---------------------------------------------------------------------------
# Case sorting
# ---------------------------------------------------------------------------


def _sort_within(block: list[SwitchCase]) -> list[SwitchCase]:
    """Sort the labels of a block whose interior cases are bare labels."""
    if len(block) < 2 or any(case.consequent for case in block[:-1]):
        return block
    consequent = block[-1].consequent
    block[-1].consequent = []
    ordered = sorted(block, key=case_key)
    ordered[-1].consequent = consequent
    return ordered


def sort_cases(program: Program) -> None:
    """Sort case labels within fallthrough blocks, then the blocks themselves.

    Block order is left alone when the final block does not end in a
    terminator, since moving it would change which cases fall into it.
    """
    for node in iter_preorder(program):
        if not isinstance(node, SwitchStatement) or len(node.cases) < 2:
            continue
        blocks = [_sort_within(block) for block in fallthrough_blocks(node.cases)]
        if has_terminator(blocks[-1][-1]):
            blocks.sort(key=lambda block: case_key(block[0]))
        node.cases = [case for block in blocks for case in block]
