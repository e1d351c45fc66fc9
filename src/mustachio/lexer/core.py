"""State-machine lexer for Mustache templates.

Single pass, left to right, one character at a time. Multi-character
markers are matched with ``str.startswith`` lookahead and consumed whole, so
the position never moves backwards.

No regex in the hot path.

Thread Safety:
All scan state (mode, position, line counter, active delimiters) lives in
local variables of one ``tokenize()`` call. Lexer instances hold only the
immutable inputs, so separate instances can run in parallel threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from mustachio.config import get_parse_config
from mustachio.delimiters import TagDelimiterPair, TagDelimiters, derive_tag_delimiters
from mustachio.errors import ParseError
from mustachio.lexer.classifiers import TagClassifierMixin
from mustachio.lexer.modes import DELIMITED_TOKEN_TYPES, LexerMode
from mustachio.tokens import Token, TokenType
from mustachio.utils.logger import get_logger

if TYPE_CHECKING:
    from mustachio.protocols import TokenConsumer

logger = get_logger(__name__)

UNCLOSED_TAG_MESSAGE = "Unclosed Mustache tag"
INVALID_SET_DELIMITERS_MESSAGE = "Invalid set delimiters tag"


class Lexer(TagClassifierMixin):
    """State-machine lexer for Mustache templates.

    Usage:
            >>> lexer = Lexer("Hello {{#people}}{{name}}{{/people}}")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(TEXT, 'Hello ', line 1)
        Token(SECTION, 'people', line 1)
        Token(ESCAPED_VARIABLE, 'name', line 1)
        Token(CLOSE, 'people', line 1)

    Two ways to drive it:
        - ``tokenize()`` yields tokens and raises ParseError on failure.
          Stop iterating (or close the iterator) to stop scanning.
        - ``parse(consumer)`` pushes tokens to a TokenConsumer, which may
          request an early stop, and reports failure through ``did_fail``.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_template_id",
        "_tag_delimiter_pair",  # Pair active at the start of the template
    )

    def __init__(
        self,
        source: str,
        template_id: str | None = None,
        tag_delimiter_pair: tuple[str, str] | None = None,
    ) -> None:
        """Initialize lexer with template text.

        Args:
            source: Template source text
            template_id: Optional template identifier for error messages
            tag_delimiter_pair: Initial ``(opening, closing)`` markers; the
                active ParseConfig provides them when None

        Raises:
            ValueError: If either marker is empty.
        """
        if tag_delimiter_pair is None:
            tag_delimiter_pair = get_parse_config().tag_delimiter_pair
        self._source = source
        self._source_len = len(source)
        self._template_id = template_id
        self._tag_delimiter_pair = TagDelimiterPair(*tag_delimiter_pair)
        # Reject empty markers now rather than on first iteration
        derive_tag_delimiters(self._tag_delimiter_pair)

    @property
    def tag_delimiter_pair(self) -> TagDelimiterPair:
        """Delimiters the template starts with."""
        return self._tag_delimiter_pair

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Raises:
            ParseError: On an unclosed tag or a malformed set-delimiters
                tag, after every earlier token has been yielded.

        Complexity: O(n * m) where m is the longest marker length
        """
        source = self._source
        source_len = self._source_len
        delimiters = derive_tag_delimiters(self._tag_delimiter_pair)

        mode = LexerMode.START
        start = 0  # Offset where the pending token opened
        start_lineno = 1  # Line where the pending token opened
        lineno = 1
        pos = 0

        while pos < source_len:
            char = source[pos]

            if mode is LexerMode.START or mode is LexerMode.TEXT:
                if char == "\n":
                    if mode is LexerMode.START:
                        mode, start, start_lineno = LexerMode.TEXT, pos, lineno
                    lineno += 1
                    pos += 1
                    continue

                opened = self._match_tag_start(pos, delimiters)
                if opened is None:
                    if mode is LexerMode.START:
                        mode, start, start_lineno = LexerMode.TEXT, pos, lineno
                    pos += 1
                    continue

                if mode is LexerMode.TEXT and start != pos:
                    yield self._make_token(TokenType.TEXT, source[start:pos], start_lineno, start, pos)

                mode, marker_length = opened
                start, start_lineno = pos, lineno
                lineno += source.count("\n", pos, pos + marker_length)
                pos += marker_length
                continue

            if char == "\n":
                lineno += 1
                pos += 1
                continue

            if mode is LexerMode.TAG:
                if source.startswith(delimiters.tag_end, pos):
                    token_type, content = self._classify_tag(start + delimiters.tag_start_length, pos)
                    end = pos + delimiters.tag_end_length
                    pair = delimiters.tag_delimiter_pair if token_type in DELIMITED_TOKEN_TYPES else None
                    yield self._make_token(token_type, content, start_lineno, start, end, pair)
                    lineno += source.count("\n", pos, end)
                    mode, pos = LexerMode.START, end
                    continue

            elif mode is LexerMode.UNESCAPED_TAG:
                # unescaped markers are only set while the default pair is active
                tag_end = delimiters.unescaped_tag_end
                if tag_end is not None and source.startswith(tag_end, pos):
                    content = source[start + delimiters.unescaped_tag_start_length : pos]
                    end = pos + delimiters.unescaped_tag_end_length
                    yield self._make_token(
                        TokenType.UNESCAPED_VARIABLE,
                        content,
                        start_lineno,
                        start,
                        end,
                        delimiters.tag_delimiter_pair,
                    )
                    mode, pos = LexerMode.START, end
                    continue

            elif mode is LexerMode.SET_DELIMITERS_TAG:
                if source.startswith(delimiters.set_delimiters_end, pos):
                    components = self._split_set_delimiters(
                        start + delimiters.set_delimiters_start_length, pos
                    )
                    if len(components) != 2:
                        raise self._error(INVALID_SET_DELIMITERS_MESSAGE, start_lineno)

                    end = pos + delimiters.set_delimiters_end_length
                    yield self._make_token(TokenType.SET_DELIMITERS, None, start_lineno, start, end)
                    delimiters = derive_tag_delimiters(TagDelimiterPair(*components))
                    logger.debug(
                        "Tag delimiters set to %r at line %d of %s",
                        tuple(delimiters.tag_delimiter_pair),
                        start_lineno,
                        self._template_id or "<template>",
                    )
                    lineno += source.count("\n", pos, end)
                    mode, pos = LexerMode.START, end
                    continue

            pos += 1

        # EOF
        if mode is LexerMode.TEXT:
            yield self._make_token(TokenType.TEXT, source[start:], start_lineno, start, source_len)
        elif mode is not LexerMode.START:
            raise self._error(UNCLOSED_TAG_MESSAGE, start_lineno)

    def parse(self, consumer: TokenConsumer) -> None:
        """Push every token to ``consumer``.

        Stops as soon as ``consumer.should_continue_after`` returns False.
        A ParseError is delivered once to ``consumer.did_fail`` and ends the
        parse; it is not raised.

        Args:
            consumer: Receiver of tokens and of the terminal error
        """
        tokens = self.tokenize()
        while True:
            try:
                token = next(tokens)
            except StopIteration:
                return
            except ParseError as error:
                consumer.did_fail(error)
                return
            if not consumer.should_continue_after(token):
                tokens.close()
                return

    # =========================================================================
    # Scanning helpers
    # =========================================================================

    def _match_tag_start(self, pos: int, delimiters: TagDelimiters) -> tuple[LexerMode, int] | None:
        """Match an opening marker at ``pos``.

        ``{{{`` and ``{{=`` share a prefix with ``{{`` so they are tested
        first.

        Returns:
            ``(mode_to_enter, marker_length)`` or None when no marker starts here.
        """
        source = self._source
        unescaped_start = delimiters.unescaped_tag_start
        if unescaped_start is not None and source.startswith(unescaped_start, pos):
            return LexerMode.UNESCAPED_TAG, delimiters.unescaped_tag_start_length
        if source.startswith(delimiters.set_delimiters_start, pos):
            return LexerMode.SET_DELIMITERS_TAG, delimiters.set_delimiters_start_length
        if source.startswith(delimiters.tag_start, pos):
            return LexerMode.TAG, delimiters.tag_start_length
        return None

    def _make_token(
        self,
        token_type: TokenType,
        content: str | None,
        lineno: int,
        start_pos: int,
        end_pos: int,
        tag_delimiter_pair: TagDelimiterPair | None = None,
    ) -> Token:
        return Token(
            type=token_type,
            content=content,
            _lineno=lineno,
            _start_offset=start_pos,
            _end_offset=end_pos,
            tag_delimiter_pair=tag_delimiter_pair,
            _template_id=self._template_id,
            _template_string=self._source,
        )

    def _error(self, message: str, lineno: int) -> ParseError:
        logger.debug("Tokenization failed: %s (line %d)", message, lineno)
        return ParseError(message, lineno=lineno, template_id=self._template_id)
