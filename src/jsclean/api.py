"""Public API functions for jsclean.

Each call creates a fresh ``Formatter`` so no state is shared between calls.
"""

from __future__ import annotations

from jsclean.config import FormatOptions
from jsclean.formatter import Formatter

__all__ = ["format_source", "is_formatted"]


def format_source(text: str, options: FormatOptions | None = None) -> str:
    """Return *text* reformatted.

    Args:
        text:    JavaScript source (a leading ``#!`` line is preserved).
        options: Rule toggles and layout settings. Defaults to
                 ``FormatOptions()`` when None.

    Returns:
        The formatted source, ending in exactly one newline.

    Raises:
        ParseError: If *text* is not valid JavaScript.
    """
    return Formatter(options).format(text).output


def is_formatted(text: str, options: FormatOptions | None = None) -> bool:
    """Return True if formatting *text* would leave it unchanged."""
    return not Formatter(options).format(text).changed
