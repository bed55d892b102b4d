"""FormatResult dataclass returned by ``Formatter.format()``."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FormatResult"]


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Result of formatting one source text.

    Attributes:
        output: The formatted source, ending in exactly one newline.
        changed: True when ``output`` differs from the input text.  The CLI
            rewrites a file only when this is set.
        computation_time_ms: Wall-clock duration of parse, transform and emit
            in milliseconds.  Cached results report the original duration.
    """

    output: str
    changed: bool
    computation_time_ms: float
