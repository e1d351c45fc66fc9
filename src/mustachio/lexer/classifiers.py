"""Tag classification mixin for the Mustachio lexer.

Classifiers are pure logic: they inspect the source between known offsets
and never move the lexer's position.
"""

from __future__ import annotations

from mustachio.lexer.modes import SET_DELIMITERS_WHITESPACE, SIGIL_TOKEN_TYPES
from mustachio.tokens import TokenType


class TagClassifierMixin:
    """Mixin classifying closed tags by their sigil."""

    __slots__ = ()

    _source: str

    def _classify_tag(self, content_start: int, content_end: int) -> tuple[TokenType, str | None]:
        """Classify a tag whose interior spans ``[content_start, content_end)``.

        The first interior character selects the type and is stripped from
        the content. An unrecognized character (or an empty interior) makes
        an escaped variable whose content is the whole interior.

        Args:
            content_start: Offset right after the opening marker
            content_end: Offset where the closing marker starts

        Returns:
            ``(token_type, content)``; content is None for comments.
        """
        if content_start < content_end:
            token_type = SIGIL_TOKEN_TYPES.get(self._source[content_start])
            if token_type is TokenType.COMMENT:
                return token_type, None
            if token_type is not None:
                return token_type, self._source[content_start + 1 : content_end]
        return TokenType.ESCAPED_VARIABLE, self._source[content_start:content_end]

    def _split_set_delimiters(self, content_start: int, content_end: int) -> list[str]:
        """Split a set-delimiters interior on runs of spaces and newlines.

        Example:
            ``{{= <% %> =}}`` -> ``["<%", "%>"]``
        """
        components: list[str] = []
        component_start = -1
        for pos in range(content_start, content_end):
            if self._source[pos] in SET_DELIMITERS_WHITESPACE:
                if component_start != -1:
                    components.append(self._source[component_start:pos])
                    component_start = -1
            elif component_start == -1:
                component_start = pos
        if component_start != -1:
            components.append(self._source[component_start:content_end])
        return components
