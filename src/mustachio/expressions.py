"""Typed expression nodes for Mustachio.

Expressions are what a tag's content means once parsed: ``.``, ``name``,
``person.name``, ``uppercase(person.name)``. Parsing them is the job of the
template builder; this module only defines the tree.

Node Hierarchy:
Expression (base)
├── ImplicitIterator     .
├── Identifier           name
├── Scoped               <base>.name
└── Filter               <callee>(<argument>)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, repr=False)
class Expression:
    """Base class for all expression nodes."""

    def __repr__(self) -> str:
        from mustachio.generator import generate_expression

        return f"Expression({generate_expression(self)})"


@dataclass(frozen=True, slots=True, repr=False)
class ImplicitIterator(Expression):
    """The current context: ``.``"""


@dataclass(frozen=True, slots=True, repr=False)
class Identifier(Expression):
    """A name looked up in the context stack: ``name``"""

    name: str


@dataclass(frozen=True, slots=True, repr=False)
class Scoped(Expression):
    """A name looked up in the value of another expression.

    Template: ``person.name``

    """

    base: Expression
    identifier: str


@dataclass(frozen=True, slots=True, repr=False)
class Filter(Expression):
    """A filter applied to one argument.

    Template: ``uppercase(name)``

    A filter of several arguments is curried: ``f(a, b)`` is
    ``Filter(Filter(f, a, partial_application=True), b)``.

    """

    callee: Expression
    argument: Expression
    partial_application: bool = False
