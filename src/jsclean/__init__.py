"""jsclean - canonical reformatting for JavaScript source."""

from __future__ import annotations

from jsclean.api import format_source, is_formatted
from jsclean.config import FormatOptions
from jsclean.errors import (
    AttachmentError,
    JSCleanError,
    NestingError,
    ParseError,
    UnsupportedSyntaxError,
)
from jsclean.formatter import Formatter
from jsclean.result import FormatResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "AttachmentError",
    "FormatOptions",
    "FormatResult",
    "Formatter",
    "JSCleanError",
    "NestingError",
    "ParseError",
    "UnsupportedSyntaxError",
    "format_source",
    "is_formatted",
]
