"""Tests for comment attachment.

Covers leading association, bubbling to statement-level owners, comments that
stay local inside array and object literals, trailing comments of containers,
for-loop init ownership, and the integrity checks.
"""

from __future__ import annotations

import pytest

from jsclean.errors import AttachmentError
from jsclean.tree.comments import CONTAINER_TYPES, attach_comments, owning_nodes
from jsclean.tree.nodes import (
    Comment,
    CommentKind,
    ExpressionStatement,
    Identifier,
    NodeType,
    Program,
)
from jsclean.tree.reader import parse
from jsclean.tree.traverse import iter_preorder

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def attached(source: str) -> Program:
    result = parse(source)
    return attach_comments(result.program, result.comments)


def values(comments: list[Comment]) -> list[str]:
    return [c.value.strip() for c in comments]


def total_comments(program: Program) -> int:
    return sum(len(n.comments) + len(n.trailing_comments) for n in iter_preorder(program))


# ---------------------------------------------------------------------------
# Leading association and bubble-up
# ---------------------------------------------------------------------------


class TestStatementOwnership:
    def test_leading_comment_on_statement(self) -> None:
        program = attached("// c\nx;")
        assert values(program.body[0].comments) == ["c"]

    def test_comment_after_statement_leads_next(self) -> None:
        program = attached("a(); // c\nb();")
        assert program.body[0].comments == []
        assert values(program.body[1].comments) == ["c"]

    def test_expression_comment_bubbles_to_statement(self) -> None:
        program = attached("x = f(/* c */ a);")
        stmt = program.body[0]
        assert values(stmt.comments) == ["c"]
        others = [n for n in iter_preorder(program) if n is not stmt and n.comments]
        assert others == []

    def test_bubbled_comments_keep_source_order(self) -> None:
        program = attached("/* a */ x = /* b */ 1;")
        assert values(program.body[0].comments) == ["a", "b"]

    def test_parameter_comment_moves_to_function(self) -> None:
        program = attached("function f(/* c */ a) {}")
        assert values(program.body[0].comments) == ["c"]

    def test_nested_statement_owns_its_comment(self) -> None:
        program = attached("function f() {\n// c\nreturn 1;\n}")
        fn = program.body[0]
        assert fn.comments == []
        assert values(fn.body.body[0].comments) == ["c"]  # type: ignore[attr-defined]

    def test_switch_case_owns_comment(self) -> None:
        program = attached("switch (x) {\n// c\ncase 1: break;\n}")
        switch = program.body[0]
        assert values(switch.cases[0].comments) == ["c"]  # type: ignore[attr-defined]

    def test_case_test_comment_bubbles_to_case(self) -> None:
        program = attached("switch (x) { case /* c */ 1: break; }")
        assert values(program.body[0].cases[0].comments) == ["c"]  # type: ignore[attr-defined]

    def test_for_init_declaration_owns_comment(self) -> None:
        program = attached("for (/* c */ var i = 0;;) {}")
        loop = program.body[0]
        assert loop.comments == []
        assert values(loop.init.comments) == ["c"]  # type: ignore[attr-defined]

    def test_class_member_owns_comment(self) -> None:
        program = attached("class A {\n// c\nm() {}\n}")
        member = program.body[0].body.body[0]  # type: ignore[attr-defined]
        assert values(member.comments) == ["c"]


class TestLiteralOwnership:
    def test_object_property_keeps_comment(self) -> None:
        program = attached("x = {\n// c\na: 1\n};")
        obj = program.body[0].expression.right  # type: ignore[attr-defined]
        assert values(obj.properties[0].comments) == ["c"]
        assert program.body[0].comments == []

    def test_array_element_keeps_comment(self) -> None:
        program = attached("x = [\n// c\n1\n];")
        arr = program.body[0].expression.right  # type: ignore[attr-defined]
        assert values(arr.elements[0].comments) == ["c"]

    def test_comment_inside_property_value_stops_at_property(self) -> None:
        program = attached("x = {a: f(/* c */ 1)};")
        obj = program.body[0].expression.right  # type: ignore[attr-defined]
        assert values(obj.properties[0].comments) == ["c"]


class TestTrailingComments:
    def test_end_of_block(self) -> None:
        program = attached("function f() {\na();\n// c\n}")
        block = program.body[0].body  # type: ignore[attr-defined]
        assert values(block.trailing_comments) == ["c"]

    def test_end_of_program(self) -> None:
        program = attached("a();\n// c\n")
        assert values(program.trailing_comments) == ["c"]
        assert program.body[0].comments == []

    def test_empty_object(self) -> None:
        program = attached("x = {\n// c\n};")
        obj = program.body[0].expression.right  # type: ignore[attr-defined]
        assert values(obj.trailing_comments) == ["c"]

    def test_end_of_switch(self) -> None:
        program = attached("switch (x) {\ncase 1:\n}")
        assert program.body[0].trailing_comments == []
        program = attached("switch (x) {\n// c\n}")
        assert values(program.body[0].trailing_comments) == ["c"]


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------


class TestInvariants:
    @pytest.mark.parametrize(
        "source",
        [
            "// a\nx; /* b */ y(/* c */); // d",
            "if (a) { // b\n} else { /* c */ }",
            "var o = { /* a */ b: [ // c\n1, /* d */ 2 ] };",
            "function f(/* a */) { // b\n return /* c */ 1; }\n// e",
        ],
    )
    def test_count_is_conserved(self, source: str) -> None:
        result = parse(source)
        program = attach_comments(result.program, result.comments)
        assert total_comments(program) == len(result.comments)

    def test_only_owners_hold_comments(self) -> None:
        program = attached("x = a ? /* b */ c : d; for (;;) /* e */ f();")
        owners = owning_nodes(program)
        for node in iter_preorder(program):
            if node.comments:
                assert node in owners
            if node.trailing_comments:
                assert node.type in CONTAINER_TYPES

    def test_owners_include_statements(self) -> None:
        program = attached("a(); b();")
        owners = owning_nodes(program)
        assert all(stmt in owners for stmt in program.body)
        assert program not in owners


class TestIntegrityFailures:
    def test_comment_on_non_owner(self) -> None:
        program = Program(comments=[Comment(CommentKind.LINE, "x")])
        with pytest.raises(AttachmentError) as exc_info:
            attach_comments(program, [])
        assert exc_info.value.node_type == NodeType.PROGRAM

    def test_trailing_on_non_container(self) -> None:
        stmt = ExpressionStatement(
            expression=Identifier(name="a"),
            trailing_comments=[Comment(CommentKind.LINE, "x")],
        )
        with pytest.raises(AttachmentError, match="non-container"):
            attach_comments(Program(body=[stmt]), [])

    def test_count_mismatch(self) -> None:
        program = Program(trailing_comments=[Comment(CommentKind.LINE, "x")])
        with pytest.raises(AttachmentError, match="expected 0"):
            attach_comments(program, [])

    def test_is_assertion_error(self) -> None:
        program = Program(comments=[Comment(CommentKind.BLOCK, "x")])
        with pytest.raises(AssertionError):
            attach_comments(program, [])
