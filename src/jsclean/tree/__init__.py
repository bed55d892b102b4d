"""Tree layer: node model, tree-sitter reader, traversal and comment attachment."""

from __future__ import annotations

from jsclean.tree.comments import attach_comments
from jsclean.tree.nodes import Comment, CommentKind, Node, NodeType, Program
from jsclean.tree.reader import ParseResult, parse

__all__ = [
    "Comment",
    "CommentKind",
    "Node",
    "NodeType",
    "ParseResult",
    "Program",
    "attach_comments",
    "parse",
]
