"""Tests for the strict-equality rule."""

from __future__ import annotations

import pytest

from jsclean.rules.equality import exact_equals
from jsclean.tree.nodes import BinaryExpression, Program
from jsclean.tree.reader import parse
from jsclean.tree.traverse import iter_preorder


def _operators(source: str) -> list[str]:
    program: Program = parse(source).program
    exact_equals(program)
    return [n.operator for n in iter_preorder(program) if isinstance(n, BinaryExpression)]


class TestExactEquals:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("a == 1", ["==="]),
            ("a != b", ["!=="]),
            ("'x' == y", ["==="]),
            ("a == undefined", ["==="]),
        ],
    )
    def test_loose_becomes_strict(self, source: str, expected: list[str]) -> None:
        assert _operators(source) == expected

    @pytest.mark.parametrize("source", ["a == null", "null != a", "a.b != null"])
    def test_null_comparison_is_kept(self, source: str) -> None:
        assert _operators(source) in (["=="], ["!="])

    @pytest.mark.parametrize("source", ["a === 1", "a !== 1", "a < 1", "a + b"])
    def test_other_operators_untouched(self, source: str) -> None:
        assert _operators(source) == [source.split()[1]]

    def test_nested_comparisons(self) -> None:
        assert _operators("f(a == b, function () { return c != null; })") == ["===", "!="]

    def test_comparison_of_comparisons(self) -> None:
        assert _operators("(a == b) == (c == null)") == ["===", "===", "=="]
