"""Comment attacher: gives every comment exactly one owning node.

Attachment runs in two passes over the freshly read tree:

1. *Leading association*: a pre-order walk hands each pending comment to the
   first node that starts after it.  Comments left over when a node is exited
   (nothing follows them inside it) become trailing comments of a container
   node, or ordinary comments of any other node.
2. *Bubble-up*: a post-order walk moves comments off nodes that are not in an
   owning position onto their parent, until they reach a statement-level
   owner (or an element of an array/object literal, where they stay local).

Owning positions are the members of ``Program``/``BlockStatement``/
``ClassBody`` bodies, switch cases and the statements of their consequents,
a ``VariableDeclaration`` used as a for-loop init, and array/object literal
elements.
"""

from __future__ import annotations

import logging
from collections import deque
from operator import attrgetter

from jsclean.errors import AttachmentError
from jsclean.tree.nodes import (
    ArrayExpression,
    BlockStatement,
    ClassBody,
    Comment,
    ForStatement,
    Node,
    NodeType,
    ObjectExpression,
    Program,
    SwitchCase,
    SwitchStatement,
    VariableDeclaration,
)
from jsclean.tree.traverse import child_nodes, iter_postorder, iter_preorder

__all__ = ["CONTAINER_TYPES", "attach_comments", "owning_nodes"]

logger = logging.getLogger(__name__)

# Nodes whose closing bracket can carry trailing comments.
CONTAINER_TYPES = frozenset(
    {
        NodeType.PROGRAM,
        NodeType.BLOCK_STATEMENT,
        NodeType.CLASS_BODY,
        NodeType.SWITCH_STATEMENT,
        NodeType.OBJECT_EXPRESSION,
        NodeType.ARRAY_EXPRESSION,
    }
)

_by_start = attrgetter("start")


def _owned_children(node: Node) -> list[Node]:
    """Children of *node* that sit in an owning position."""
    match node:
        case Program(body=body) | BlockStatement(body=body) | ClassBody(body=body):
            return list(body)
        case SwitchStatement(cases=cases):
            return list(cases)
        case SwitchCase(consequent=consequent):
            return list(consequent)
        case ForStatement(init=VariableDeclaration() as init):
            return [init]
        case ArrayExpression(elements=elements):
            return [e for e in elements if e is not None]
        case ObjectExpression(properties=properties):
            return list(properties)
    return []


def owning_nodes(program: Program) -> set[Node]:
    """Return the set of nodes allowed to own comments."""
    owners: set[Node] = set()
    for node in iter_preorder(program):
        owners.update(_owned_children(node))
    return owners


def _associate(program: Program, comments: list[Comment]) -> None:
    pending = deque(sorted(comments, key=_by_start))
    stack: list[tuple[Node, bool]] = [(program, False)]
    while stack and pending:
        node, leaving = stack.pop()
        if leaving:
            target = (
                node.trailing_comments if node.type in CONTAINER_TYPES else node.comments
            )
            while pending and pending[0].start < node.end:
                target.append(pending.popleft())
            continue
        while pending and pending[0].end <= node.start:
            node.comments.append(pending.popleft())
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(list(child_nodes(node))))
    # anything past the end of the program text
    program.trailing_comments.extend(pending)


def _bubble_up(program: Program, owners: set[Node]) -> None:
    parents: dict[Node, Node] = {}
    for node in iter_preorder(program):
        for child in child_nodes(node):
            parents[child] = node
    for node in iter_postorder(program):
        if node.comments and node not in owners and node in parents:
            parents[node].comments.extend(node.comments)
            node.comments = []
    for node in owners:
        if len(node.comments) > 1:
            node.comments.sort(key=_by_start)


def _check(program: Program, owners: set[Node], expected: int) -> None:
    total = 0
    for node in iter_preorder(program):
        if node.comments and node not in owners:
            msg = f"{len(node.comments)} comment(s) left on non-owning {node.type} at line {node.line}"
            raise AttachmentError(msg, node_type=node.type)
        if node.trailing_comments and node.type not in CONTAINER_TYPES:
            msg = f"trailing comment(s) on non-container {node.type} at line {node.line}"
            raise AttachmentError(msg, node_type=node.type)
        total += len(node.comments) + len(node.trailing_comments)
    if total != expected:
        msg = f"attached {total} comment(s), expected {expected}"
        raise AttachmentError(msg, node_type=program.type)


def attach_comments(program: Program, comments: list[Comment]) -> Program:
    """Attach *comments* to their owning nodes in *program*, in place.

    Args:
        program:  Root node as produced by the reader, with no comments attached.
        comments: All comments of the source, in any order.

    Returns:
        The same ``program``, for chaining.

    Raises:
        AttachmentError: If a comment ends up on a node that may not own it, or
            the number of attached comments differs from ``len(comments)``.
    """
    _associate(program, comments)
    owners = owning_nodes(program)
    _bubble_up(program, owners)
    _check(program, owners, len(comments))
    logger.debug("attached %d comments to %d owners", len(comments), len(owners))
    return program
