"""String literal re-encoding.

Strings are written from their decoded value, never from the source text, so
every spelling of the same value (``"a"``, ``'\\x61'``, ``'\\u0061'``) comes
out identical.  The quote is ``'`` unless the value contains one.  Printable
ASCII passes through; other code units become ``\\xhh`` below 0x100 and
``\\uhhhh`` otherwise, with characters outside the BMP split into a UTF-16
surrogate pair.  Hex digits are lowercase.
"""

from __future__ import annotations

__all__ = ["quote_string"]

_SHORT_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\\": "\\\\",
}


def _escape(ch: str, quote: str) -> str:
    if ch in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[ch]
    if ch == quote:
        return "\\" + quote
    n = ord(ch)
    if 32 <= n <= 126:
        return ch
    if n < 0x100:
        return f"\\x{n:02x}"
    if n < 0x10000:
        return f"\\u{n:04x}"
    n -= 0x10000
    return f"\\u{0xD800 + (n >> 10):04x}\\u{0xDC00 + (n & 0x3FF):04x}"


def quote_string(value: str) -> str:
    """Return *value* as a JavaScript string literal.

    Example::

        quote_string("a\\tb")   # 'a\\tb' (single quotes)
        quote_string("it's")    # "it's" (double quotes)
    """
    quote = '"' if "'" in value else "'"
    return quote + "".join(_escape(ch, quote) for ch in value) + quote
