"""pytest plugin for jsclean.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

import difflib
from typing import Any

import pytest

from jsclean import FormatOptions, format_source


@pytest.fixture(scope="session")
def assert_js_formatted() -> Any:
    """Fixture that returns a callable formatting asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to format_source() which creates a fresh Formatter per call).

    Usage in tests::

        def test_sorted(assert_js_formatted):
            assert_js_formatted("x = {b: 1, a: 2}", "x = {\\n\\ta: 2,\\n\\tb: 1,\\n};\\n")

    Returns:
        A callable ``_assert(source, expected, options=None) -> None`` that
        raises ``AssertionError`` with a unified diff when the formatted
        source differs from ``expected``.
    """

    def _assert(source: str, expected: str, options: FormatOptions | None = None) -> None:
        actual = format_source(source, options)
        if actual != expected:
            diff = "".join(
                difflib.unified_diff(
                    expected.splitlines(keepends=True),
                    actual.splitlines(keepends=True),
                    fromfile="expected",
                    tofile="actual",
                )
            )
            raise AssertionError(f"formatted source differs from expected:\n{diff}")

    return _assert
