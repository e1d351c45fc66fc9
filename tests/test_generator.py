"""Tests for rendering expression trees back to template syntax."""

import pytest

from mustachio.expressions import Filter, Identifier, ImplicitIterator, Scoped
from mustachio.generator import ExpressionGenerator, generate_expression


class TestExpressionGenerator:
    """Each node kind renders to its surface syntax."""

    @pytest.mark.parametrize(
        "expression,expected",
        [
            (ImplicitIterator(), "."),
            (Identifier("name"), "name"),
            (Scoped(Identifier("a"), "b"), "a.b"),
            (Scoped(Scoped(Identifier("a"), "b"), "c"), "a.b.c"),
            (Scoped(ImplicitIterator(), "name"), "..name"),
            (Filter(Identifier("f"), Identifier("x")), "f(x)"),
            (Filter(Identifier("f"), ImplicitIterator()), "f(.)"),
            (Filter(Scoped(Identifier("filters"), "upper"), Scoped(Identifier("a"), "b")), "filters.upper(a.b)"),
            (Filter(Identifier("f"), Filter(Identifier("g"), Identifier("x"))), "f(g(x))"),
        ],
    )
    def test_render(self, expression, expected: str) -> None:
        assert generate_expression(expression) == expected

    def test_curried_filter_renders_as_nested_calls(self) -> None:
        """f(a, b) has no surface syntax of its own and renders as f(a)(b)."""
        curried = Filter(
            Filter(Identifier("f"), Identifier("a"), partial_application=True),
            Identifier("b"),
        )
        assert generate_expression(curried) == "f(a)(b)"

    def test_partial_application_flag_does_not_change_output(self) -> None:
        plain = Filter(Identifier("f"), Identifier("x"))
        partial = Filter(Identifier("f"), Identifier("x"), partial_application=True)
        assert generate_expression(plain) == generate_expression(partial)

    def test_generator_is_reusable(self) -> None:
        """Each call starts from an empty buffer."""
        generator = ExpressionGenerator()

        assert generator.string_from_expression(Identifier("a")) == "a"
        assert generator.string_from_expression(Identifier("b")) == "b"

    def test_non_expression_rejected(self) -> None:
        with pytest.raises(TypeError):
            generate_expression("name")  # type: ignore[arg-type]


class TestExpressionNodes:
    """Expression nodes are immutable values."""

    def test_repr_uses_template_syntax(self) -> None:
        assert repr(Scoped(Identifier("a"), "b")) == "Expression(a.b)"
        assert repr(ImplicitIterator()) == "Expression(.)"

    def test_equality(self) -> None:
        assert Scoped(Identifier("a"), "b") == Scoped(Identifier("a"), "b")
        assert Identifier("a") != Identifier("b")

    def test_immutability(self) -> None:
        node = Identifier("a")
        with pytest.raises(AttributeError):
            node.name = "b"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Identifier("a"), Identifier("a"), ImplicitIterator()}) == 2
