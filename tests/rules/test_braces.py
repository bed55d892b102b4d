"""Tests for brace insertion and brace stripping."""

from __future__ import annotations

import pytest

from jsclean import FormatOptions, format_source
from jsclean.rules.braces import insert_braces, strip_braces
from jsclean.tree.nodes import (
    BlockStatement,
    EmptyStatement,
    ExpressionStatement,
    IfStatement,
    Program,
    WhileStatement,
)
from jsclean.tree.reader import parse

STRIP = FormatOptions(extra_braces=False, strip_braces=True)
NEITHER = FormatOptions(extra_braces=False)


def _program(source: str) -> Program:
    return parse(source).program


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


class TestInsertBraces:
    def test_wraps_if_branches(self) -> None:
        program = _program("if (a) b(); else c();")
        insert_braces(program)
        stmt = program.body[0]
        assert isinstance(stmt, IfStatement)
        assert isinstance(stmt.consequent, BlockStatement)
        assert isinstance(stmt.alternate, BlockStatement)

    def test_else_if_not_wrapped(self) -> None:
        program = _program("if (a) b(); else if (c) d();")
        insert_braces(program)
        stmt = program.body[0]
        assert isinstance(stmt, IfStatement)
        assert isinstance(stmt.alternate, IfStatement)
        assert isinstance(stmt.alternate.consequent, BlockStatement)

    def test_empty_body_becomes_empty_block(self) -> None:
        program = _program("while (a);")
        insert_braces(program)
        loop = program.body[0]
        assert isinstance(loop, WhileStatement)
        assert isinstance(loop.body, BlockStatement)
        assert loop.body.body == []

    def test_existing_block_kept(self) -> None:
        program = _program("while (a) { b(); }")
        block = program.body[0].body  # type: ignore[attr-defined]
        insert_braces(program)
        assert program.body[0].body is block  # type: ignore[attr-defined]

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("if (a) b()", "if (a) {\n\tb();\n}\n"),
            ("if (a) b(); else c()", "if (a) {\n\tb();\n} else {\n\tc();\n}\n"),
            ("if (a) b(); else if (c) d()", "if (a) {\n\tb();\n} else if (c) {\n\td();\n}\n"),
            ("while (a) b()", "while (a) {\n\tb();\n}\n"),
            ("for (;;);", "for (;;) {}\n"),
            ("for (k in o) f(k)", "for (k in o) {\n\tf(k);\n}\n"),
            ("do x(); while (y)", "do {\n\tx();\n} while (y);\n"),
        ],
    )
    def test_formatted(self, source: str, expected: str) -> None:
        assert format_source(source) == expected

    def test_disabled(self) -> None:
        assert format_source("if (a) b()", NEITHER) == "if (a)\n\tb();\n"

    def test_nested_bodies(self) -> None:
        assert format_source("if (a) while (b) c()") == (
            "if (a) {\n\twhile (b) {\n\t\tc();\n\t}\n}\n"
        )


# ---------------------------------------------------------------------------
# Stripping
# ---------------------------------------------------------------------------


class TestStripBraces:
    def test_single_statement_unwrapped(self) -> None:
        program = _program("if (a) { b(); }")
        strip_braces(program)
        assert isinstance(program.body[0].consequent, ExpressionStatement)  # type: ignore[attr-defined]

    def test_empty_block_becomes_empty_statement(self) -> None:
        program = _program("while (a) {}")
        strip_braces(program)
        assert isinstance(program.body[0].body, EmptyStatement)  # type: ignore[attr-defined]

    def test_function_bodies_untouched(self) -> None:
        program = _program("function f() { return 1; }")
        strip_braces(program)
        assert isinstance(program.body[0].body, BlockStatement)  # type: ignore[attr-defined]

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("if (a) { b(); }", "if (a)\n\tb();\n"),
            ("while (a) {}", "while (a)\n\t;\n"),
            ("if (a) { b(); c(); }", "if (a) {\n\tb();\n\tc();\n}\n"),
            ("if (a) { let x = 1; }", "if (a) {\n\tlet x = 1;\n}\n"),
            ("if (a) {\n// note\nb();\n}", "if (a) {\n\t// Note\n\tb();\n}\n"),
            ("if (a) { b(); } else { c(); }", "if (a)\n\tb();\nelse\n\tc();\n"),
        ],
    )
    def test_formatted(self, source: str, expected: str) -> None:
        assert format_source(source, STRIP) == expected

    def test_trailing_comment_keeps_block(self) -> None:
        assert format_source("if (a) { b(); // c\n}", STRIP) == "if (a) {\n\tb();\n\n\t// C\n}\n"

    def test_open_if_before_else_keeps_block(self) -> None:
        source = "if (a) { if (b) c(); } else d();"
        assert format_source(source, STRIP) == "if (a) {\n\tif (b)\n\t\tc();\n} else\n\td();\n"

    def test_open_if_inside_loop_before_else_keeps_block(self) -> None:
        source = "if (a) { for (;;) if (b) c(); } else d();"
        assert format_source(source, STRIP) == (
            "if (a) {\n\tfor (;;)\n\t\tif (b)\n\t\t\tc();\n} else\n\td();\n"
        )

    def test_closed_if_before_else_unwrapped(self) -> None:
        source = "if (a) { if (b) c(); else e(); } else d();"
        assert format_source(source, STRIP) == (
            "if (a)\n\tif (b)\n\t\tc();\n\telse\n\t\te();\nelse\n\td();\n"
        )

    def test_open_if_without_else_unwrapped(self) -> None:
        assert format_source("if (a) { if (b) c(); }", STRIP) == "if (a)\n\tif (b)\n\t\tc();\n"
