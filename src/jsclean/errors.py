"""Exception types raised by jsclean.

Syntax problems in the input surface as ``ParseError`` (a ``ValueError``) with
the offending position.  ``AttachmentError`` is an internal integrity failure:
a correct reader never produces input that triggers it.  ``NestingError``
reports input nested more deeply than the recursive stages can follow.
"""

from __future__ import annotations

__all__ = [
    "AttachmentError",
    "JSCleanError",
    "NestingError",
    "ParseError",
    "UnsupportedSyntaxError",
]


class JSCleanError(Exception):
    """Base class for all jsclean errors."""


class ParseError(JSCleanError, ValueError):
    """The input is not a syntactically valid program.

    Attributes:
        line:   1-based line of the first offending token.
        column: 1-based column of the first offending token.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        self.line = line
        self.column = column
        if line:
            message = f"line {line}, column {column}: {message}"
        super().__init__(message)


class UnsupportedSyntaxError(ParseError):
    """Valid syntax that the node model does not cover (JSX, decorators, ...)."""


class AttachmentError(JSCleanError, AssertionError):
    """A comment ended up on a node that may not own comments.

    Attributes:
        node_type: Tag of the offending node.
    """

    def __init__(self, message: str, node_type: str = "") -> None:
        self.node_type = node_type
        super().__init__(message)


class NestingError(JSCleanError, RecursionError):
    """The input nests expressions or statements beyond the interpreter's recursion limit."""
