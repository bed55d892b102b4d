"""FormatOptions: immutable toggles for the transform rules and the emitter.

One boolean per optional rule plus the emitter's indentation unit and
statement-terminator style.  Options are built once per run and only read
afterwards.  ``from_mapping`` accepts the camelCase names used by the
JavaScript tooling (``exactEquals``), kebab-case CLI names and snake_case.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

__all__ = ["FormatOptions"]

# Matches camelCase boundary: lowercase letter or digit followed by uppercase letter
# e.g. "exactEquals" -> "exact_Equals" via "\1_\2"
_UPPER_LOWER = re.compile(r"([a-z0-9])([A-Z])")

# Matches kebab-case separators and runs of underscores
_SEP = re.compile(r"[-_]+")

_INDENT = re.compile(r"[ \t]+")


def _option_name(key: str) -> str:
    """Normalize ``exactEquals`` / ``exact-equals`` / ``exact_equals`` to snake_case."""
    s = _UPPER_LOWER.sub(r"\1_\2", key)
    return _SEP.sub("_", s).strip("_").lower()


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable configuration for one formatting run.

    Attributes:
        exact_equals:    Rewrite ``==``/``!=`` to ``===``/``!==`` unless an operand is ``null``.
        extra_braces:    Wrap non-block loop bodies and if-branches in braces.
        strip_braces:    Unwrap blocks holding at most one uncommented statement.
                         Mutually exclusive with ``extra_braces``.
        cap_comments:    Uppercase the first letter of line comments.
        separate_vars:   Split ``var a, b`` into one declaration per binding.
        sort_cases:      Sort switch cases within and across fallthrough blocks.
        sort_functions:  Sort runs of adjacent function declarations and class methods by name.
        sort_properties: Sort object literal properties by key.
        trailing_break:  Append ``break`` to an unterminated final switch case.
        semicolons:      Terminate statements with ``;``.
        indent:          Indentation unit, spaces and/or tabs.
    """

    exact_equals: bool = True
    extra_braces: bool = True
    strip_braces: bool = False
    cap_comments: bool = True
    separate_vars: bool = True
    sort_cases: bool = True
    sort_functions: bool = True
    sort_properties: bool = True
    trailing_break: bool = True
    semicolons: bool = True
    indent: str = "\t"

    def __post_init__(self) -> None:
        if not isinstance(self.indent, str) or not _INDENT.fullmatch(self.indent):
            msg = f"indent must be a non-empty run of spaces or tabs, got {self.indent!r}"
            raise ValueError(msg)
        if self.extra_braces and self.strip_braces:
            msg = "extra_braces and strip_braces cannot both be enabled"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> FormatOptions:
        """Build options from a flag mapping such as ``{"exactEquals": False}``.

        ``spaces`` (an integer width) is accepted as a shorthand for an
        indent of that many spaces.

        Raises:
            ValueError: On an unrecognized key or a non-positive ``spaces``.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _option_name(key)
            if name == "spaces":
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    msg = f"spaces must be a positive integer, got {value!r}"
                    raise ValueError(msg)
                values["indent"] = " " * value
                continue
            if name not in known:
                msg = f"unrecognized option {key!r}"
                raise ValueError(msg)
            values[name] = value
        return cls(**values)
