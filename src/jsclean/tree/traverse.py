"""Generic traversal over the node model.

Children are discovered from dataclass fields: any attribute that holds a
``Node`` or a list containing nodes, in field declaration order (which is
source order for every variant).  The pre-order walker computes a node's
children only after the node has been yielded, so a visitor may replace or
reorder children of the node it is looking at.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import fields
from functools import cache

from jsclean.tree.nodes import BASE_FIELDS, Node

__all__ = ["child_nodes", "iter_postorder", "iter_preorder"]


@cache
def _child_field_names(cls: type[Node]) -> tuple[str, ...]:
    return tuple(f.name for f in fields(cls) if f.name not in BASE_FIELDS)


def child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct children of *node* in source order, skipping holes."""
    for name in _child_field_names(type(node)):
        value = getattr(node, name)
        if isinstance(value, Node):
            yield value
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, Node):
                    yield item


def iter_preorder(root: Node) -> Iterator[Node]:
    """Depth-first, parents before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(child_nodes(node))))


def iter_postorder(root: Node) -> Iterator[Node]:
    """Depth-first, children before parents."""
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(list(child_nodes(node))))
