"""Expression generator: expression trees back to template syntax.

The inverse of expression parsing for the grammar::

    expr := '.' | ident | expr '.' ident | expr '(' expr ')'

Multi-argument filters have no surface syntax of their own. A curried
``f(a, b)`` is generated as ``f(a)(b)``, which does not parse back to the
same tree.

Thread Safety:
Output is accumulated in a list local to each call. A single
ExpressionGenerator can be shared across threads.

"""

from __future__ import annotations

from mustachio.expressions import Expression, Filter, Identifier, ImplicitIterator, Scoped


class ExpressionGenerator:
    """Renders expressions as template text.

    Usage:
            >>> generator = ExpressionGenerator()
            >>> generator.string_from_expression(Scoped(Identifier("a"), "b"))
            'a.b'

    """

    __slots__ = ()

    def string_from_expression(self, expression: Expression) -> str:
        """Render ``expression`` to its template syntax."""
        parts: list[str] = []
        self._render(expression, parts)
        return "".join(parts)

    def _render(self, expression: Expression, parts: list[str]) -> None:
        match expression:
            case ImplicitIterator():
                # {{ . }}
                parts.append(".")
            case Identifier(name=name):
                # {{ identifier }}
                parts.append(name)
            case Scoped(base=base, identifier=identifier):
                # {{ <expression>.identifier }}
                self._render(base, parts)
                parts.append(".")
                parts.append(identifier)
            case Filter(callee=callee, argument=argument):
                # {{ <expression>(<expression>) }}
                self._render(callee, parts)
                parts.append("(")
                self._render(argument, parts)
                parts.append(")")
            case _:
                raise TypeError(f"Not an expression: {expression!r}")


_GENERATOR = ExpressionGenerator()


def generate_expression(expression: Expression) -> str:
    """Render ``expression`` to its template syntax.

    Example:
        >>> generate_expression(Filter(Identifier("f"), Identifier("x")))
        'f(x)'
    """
    return _GENERATOR.string_from_expression(expression)
