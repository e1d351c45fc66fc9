"""Protocols for Mustachio.

Defines the contract between the lexer and whatever consumes its tokens
(typically a template builder assembling an AST).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mustachio.errors import ParseError
    from mustachio.tokens import Token


class TokenConsumer(Protocol):
    """Receiver for tokens pushed by ``Lexer.parse``.

    Tokens arrive synchronously, in source order, exactly once each.
    Returning False from ``should_continue_after`` halts the scan
    immediately. ``did_fail`` is called at most once and nothing is
    delivered after it.

    Thread Safety:
        Called only from the thread running ``Lexer.parse``.

    """

    def should_continue_after(self, token: Token) -> bool:
        """Receive one token; return False to stop tokenizing."""
        ...

    def did_fail(self, error: ParseError) -> None:
        """Receive the terminal tokenization error."""
        ...


class TokenCollector:
    """TokenConsumer that accumulates tokens into a list.

    Usage:
            >>> collector = TokenCollector()
            >>> Lexer("Hello {{name}}").parse(collector)
            >>> [t.type.name for t in collector.tokens]
            ['TEXT', 'ESCAPED_VARIABLE']

    Args:
        limit: Request an early stop once this many tokens were received

    """

    __slots__ = ("tokens", "error", "limit")

    def __init__(self, limit: int | None = None) -> None:
        self.tokens: list[Token] = []
        self.error: ParseError | None = None
        self.limit = limit

    def should_continue_after(self, token: Token) -> bool:
        self.tokens.append(token)
        return self.limit is None or len(self.tokens) < self.limit

    def did_fail(self, error: ParseError) -> None:
        self.error = error
