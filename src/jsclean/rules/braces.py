"""Brace rules for loop bodies and if/else branches.

``insert_braces`` wraps every non-block body in a single-statement block.
``strip_braces`` goes the other way and unwraps blocks holding at most one
statement.  The two are configuration alternatives and never run together.
"""

from __future__ import annotations

from jsclean.tree.nodes import (
    BlockStatement,
    ClassDeclaration,
    DoWhileStatement,
    EmptyStatement,
    ForInStatement,
    ForOfStatement,
    ForStatement,
    FunctionDeclaration,
    IfStatement,
    LabeledStatement,
    Node,
    Program,
    VariableDeclaration,
    WhileStatement,
)
from jsclean.tree.traverse import iter_postorder, iter_preorder

__all__ = ["insert_braces", "strip_braces"]

_LOOPS = (DoWhileStatement, ForInStatement, ForOfStatement, ForStatement, WhileStatement)

# Statements whose body ends the statement, so an else after them reaches into it.
_OPEN_BODIES = (ForInStatement, ForOfStatement, ForStatement, WhileStatement, LabeledStatement)


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


def _brace(body: Node) -> BlockStatement:
    if isinstance(body, BlockStatement):
        return body
    if isinstance(body, EmptyStatement):
        return BlockStatement(start=body.start, end=body.end, line=body.line)
    return BlockStatement(body=[body], start=body.start, end=body.end, line=body.line)


def insert_braces(program: Program) -> None:
    """Wrap loop bodies and if/else branches in blocks; ``else if`` stays as is."""
    for node in iter_preorder(program):
        if isinstance(node, _LOOPS):
            node.body = _brace(node.body)
        elif isinstance(node, IfStatement):
            node.consequent = _brace(node.consequent)
            if node.alternate is not None and not isinstance(node.alternate, IfStatement):
                node.alternate = _brace(node.alternate)


# ---------------------------------------------------------------------------
# Stripping
# ---------------------------------------------------------------------------


def _is_lexical(node: Node) -> bool:
    if isinstance(node, VariableDeclaration):
        return node.kind != "var"
    return isinstance(node, ClassDeclaration | FunctionDeclaration)


def _ends_in_open_if(node: Node) -> bool:
    """True if a following ``else`` would bind to an if inside *node*."""
    while True:
        if isinstance(node, IfStatement):
            if node.alternate is None:
                return True
            node = node.alternate
        elif isinstance(node, _OPEN_BODIES):
            node = node.body
        else:
            return False


def _unbrace(body: Node | None, before_else: bool = False) -> Node | None:
    if not isinstance(body, BlockStatement) or body.trailing_comments:
        return body
    if not body.body:
        return EmptyStatement(start=body.start, end=body.end, line=body.line)
    if len(body.body) > 1:
        return body
    inner = body.body[0]
    if inner.comments or _is_lexical(inner):
        return body
    if before_else and _ends_in_open_if(inner):
        return body
    return inner


def strip_braces(program: Program) -> None:
    """Unwrap blocks of zero or one uncommented statement in loop and if bodies."""
    for node in iter_postorder(program):
        if isinstance(node, _LOOPS):
            node.body = _unbrace(node.body)
        elif isinstance(node, IfStatement):
            node.consequent = _unbrace(node.consequent, before_else=node.alternate is not None)
            node.alternate = _unbrace(node.alternate)
