"""Tests for child discovery and the pre-/post-order walkers."""

from __future__ import annotations

from jsclean.tree.nodes import (
    ArrayExpression,
    BinaryExpression,
    BlockStatement,
    ExpressionStatement,
    Identifier,
    IfStatement,
    Literal,
    Program,
)
from jsclean.tree.traverse import child_nodes, iter_postorder, iter_preorder

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _sample() -> Program:
    """``if (a < 1) b; else c;`` built by hand."""
    return Program(
        body=[
            IfStatement(
                test=BinaryExpression(
                    operator="<",
                    left=Identifier(name="a"),
                    right=Literal(value=1, raw="1"),
                ),
                consequent=ExpressionStatement(expression=Identifier(name="b")),
                alternate=ExpressionStatement(expression=Identifier(name="c")),
            )
        ]
    )


def _labels(nodes: object) -> list[str]:
    out = []
    for node in nodes:  # type: ignore[attr-defined]
        if isinstance(node, Identifier):
            out.append(node.name)
        elif isinstance(node, Literal):
            out.append(node.raw)
        else:
            out.append(str(node.type))
    return out


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestChildNodes:
    def test_children_in_field_order(self) -> None:
        stmt = _sample().body[0]
        assert _labels(child_nodes(stmt)) == [
            "binary_expression",
            "expression_statement",
            "expression_statement",
        ]

    def test_missing_children_are_skipped(self) -> None:
        stmt = IfStatement(
            test=Identifier(name="a"),
            consequent=BlockStatement(),
        )
        assert len(list(child_nodes(stmt))) == 2

    def test_array_holes_are_skipped(self) -> None:
        arr = ArrayExpression(elements=[Identifier(name="a"), None, Identifier(name="b")])
        assert _labels(child_nodes(arr)) == ["a", "b"]

    def test_leaf_has_no_children(self) -> None:
        assert list(child_nodes(Identifier(name="x"))) == []


class TestWalkers:
    def test_preorder_parents_first(self) -> None:
        assert _labels(iter_preorder(_sample())) == [
            "program",
            "if_statement",
            "binary_expression",
            "a",
            "1",
            "expression_statement",
            "b",
            "expression_statement",
            "c",
        ]

    def test_postorder_children_first(self) -> None:
        assert _labels(iter_postorder(_sample())) == [
            "a",
            "1",
            "binary_expression",
            "b",
            "expression_statement",
            "c",
            "expression_statement",
            "if_statement",
            "program",
        ]

    def test_preorder_sees_replaced_children(self) -> None:
        program = _sample()
        seen = []
        for node in iter_preorder(program):
            if isinstance(node, IfStatement):
                node.consequent = BlockStatement(body=[node.consequent])
            seen.append(node.type)
        assert "block_statement" in seen
