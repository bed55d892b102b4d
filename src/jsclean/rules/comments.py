"""Comment capitalization: ``// note`` becomes ``// Note``."""

from __future__ import annotations

from jsclean.tree.nodes import Comment, CommentKind, Program
from jsclean.tree.traverse import iter_preorder

__all__ = ["cap_comments", "capitalize"]


def capitalize(text: str) -> str:
    """Uppercase the first non-whitespace character of *text* if it is lowercase."""
    i = len(text) - len(text.lstrip())
    if i < len(text) and text[i].islower():
        return text[:i] + text[i].upper() + text[i + 1 :]
    return text


def _cap(comments: list[Comment]) -> None:
    for comment in comments:
        if comment.kind is CommentKind.LINE:
            comment.value = capitalize(comment.value)


def cap_comments(program: Program) -> None:
    for node in iter_preorder(program):
        _cap(node.comments)
        _cap(node.trailing_comments)
