"""Tests for variable declaration splitting."""

from __future__ import annotations

from jsclean import FormatOptions, format_source
from jsclean.rules.declarations import separate_vars, split_declaration
from jsclean.tree.comments import attach_comments
from jsclean.tree.nodes import ForStatement, VariableDeclaration
from jsclean.tree.reader import parse


class TestSplitDeclaration:
    def test_one_part_per_declarator(self) -> None:
        decl = parse("let a = 1, b, c = 3;").program.body[0]
        assert isinstance(decl, VariableDeclaration)
        parts = split_declaration(decl)
        assert len(parts) == 3
        assert all(p.kind == "let" for p in parts)
        assert [len(p.declarations) for p in parts] == [1, 1, 1]

    def test_single_declarator_returned_as_is(self) -> None:
        decl = parse("var a = 1;").program.body[0]
        assert isinstance(decl, VariableDeclaration)
        assert split_declaration(decl) == [decl]

    def test_comments_move_to_first(self) -> None:
        result = parse("// lead\nvar a = 1, b = 2;")
        program = attach_comments(result.program, result.comments)
        decl = program.body[0]
        assert isinstance(decl, VariableDeclaration)
        first, second = split_declaration(decl)
        assert [c.value for c in first.comments] == [" lead"]
        assert second.comments == []


class TestSeparateVars:
    def test_program_level(self) -> None:
        assert format_source("var a = 1, b = 2;") == "var a = 1;\nvar b = 2;\n"

    def test_inside_block_keeps_position(self) -> None:
        source = "function f() { x(); var a = 1, b = 2; y(); }"
        assert format_source(source) == (
            "function f() {\n\tx();\n\tvar a = 1;\n\tvar b = 2;\n\ty();\n}\n"
        )

    def test_inside_switch_case(self) -> None:
        source = "switch (x) { case 1: var a, b; break; }"
        assert format_source(source) == "switch (x) {\ncase 1:\n\tvar a;\n\tvar b;\n\tbreak;\n}\n"

    def test_leading_comment_stays_on_first(self) -> None:
        source = "{\n// pair\nconst a = 1, b = 2;\n}"
        assert format_source(source) == "{\n\t// Pair\n\tconst a = 1;\n\tconst b = 2;\n}\n"

    def test_for_init_not_split(self) -> None:
        program = parse("for (var i = 0, n = a.length; i < n; i++) {}").program
        separate_vars(program)
        loop = program.body[0]
        assert isinstance(loop, ForStatement)
        assert isinstance(loop.init, VariableDeclaration)
        assert len(loop.init.declarations) == 2

    def test_export_not_split(self) -> None:
        assert format_source("export const a = 1, b = 2;") == "export const a = 1, b = 2;\n"

    def test_disabled(self) -> None:
        options = FormatOptions(separate_vars=False)
        assert format_source("var a = 1, b = 2;", options) == "var a = 1, b = 2;\n"
