"""Emit stage: recursive-descent printer and string literal encoding."""

from __future__ import annotations

from jsclean.emit.emitter import Emitter, emit
from jsclean.emit.strings import quote_string

__all__ = ["Emitter", "emit", "quote_string"]
