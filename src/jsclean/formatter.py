"""Formatter: orchestrator that wires reader + attacher + rules + emitter.

``format()`` runs the whole pipeline on one source text:

- parse the text with the tree-sitter reader (hashbang split off first),
- attach every comment to its owning node,
- run the enabled rules in their fixed order, mutating the fresh tree,
- emit and normalize the text.

Every call builds its own tree; nothing but the immutable ``FormatOptions``
is shared between calls.  Results are memoized per instance in an
``LRUCache`` keyed by the input text, so formatting the same file twice
(for instance ``--check`` followed by a rewrite) parses it once.
"""

from __future__ import annotations

import logging
import time

from cachetools import LRUCache

from jsclean.config import FormatOptions
from jsclean.emit import emit
from jsclean.errors import NestingError
from jsclean.result import FormatResult
from jsclean.rules import apply_rules
from jsclean.tree import attach_comments, parse

__all__ = ["Formatter"]

logger = logging.getLogger(__name__)


class Formatter:
    """Runs Parse -> Attach -> Transform -> Emit for one set of options.

    Two ``Formatter`` instances never share cache state.

    Example::

        from jsclean.formatter import Formatter

        fmt = Formatter()
        result = fmt.format("var a = 1, b = 2")
        print(result.output)    # "var a = 1;\\nvar b = 2;\\n"
        print(result.changed)   # True
    """

    def __init__(self, options: FormatOptions | None = None, max_cache_size: int = 128) -> None:
        """Initialise the formatter.

        Args:
            options: Rule toggles and layout settings.  Defaults to
                ``FormatOptions()`` when None.
            max_cache_size: Maximum number of results held in the per-instance
                LRU cache.  Defaults to 128.
        """
        self._options = options if options is not None else FormatOptions()
        self._cache: LRUCache[str, FormatResult] = LRUCache(maxsize=max_cache_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def options(self) -> FormatOptions:
        return self._options

    @property
    def max_cache_size(self) -> int:
        """The maximum number of results this formatter caches."""
        return int(self._cache.maxsize)

    @property
    def cache_size(self) -> int:
        """The current number of cached results."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def format(self, text: str) -> FormatResult:
        """Format JavaScript *text*.

        Args:
            text: Complete source of one script or module.

        Returns:
            A ``FormatResult`` with the formatted output and a change flag.

        Raises:
            ParseError: If *text* is not valid JavaScript (or uses syntax the
                node model does not cover).
            AttachmentError: On a comment attachment integrity failure.
            NestingError: If *text* nests deeper than the recursion limit allows.
        """
        cached = self._cache.get(text)
        if cached is not None:
            logger.debug("cache hit for %d characters", len(text))
            return cached

        t0 = time.perf_counter()
        try:
            parsed = parse(text)
            program = attach_comments(parsed.program, parsed.comments)
            apply_rules(program, self._options)
            output = emit(program, self._options)
        except RecursionError as exc:
            msg = "input is nested too deeply to format"
            raise NestingError(msg) from exc
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        result = FormatResult(
            output=output,
            changed=output != text,
            computation_time_ms=elapsed_ms,
        )
        self._cache[text] = result
        return result
