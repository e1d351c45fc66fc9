"""Lexer operating modes and constants.

This module defines the finite state machine modes for the lexer
and the sigil table used to classify tags.
"""

from __future__ import annotations

from enum import Enum, auto

from mustachio.tokens import TokenType


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - START: Between tokens, nothing pending
    - TEXT: Inside a run of literal text
    - TAG: Inside a tag opened by the active opening marker
    - UNESCAPED_TAG: Inside ``{{{ ... }}}`` (default delimiters only)
    - SET_DELIMITERS_TAG: Inside ``{{= ... =}}``

    """

    START = auto()
    TEXT = auto()
    TAG = auto()
    UNESCAPED_TAG = auto()
    SET_DELIMITERS_TAG = auto()


# Leading character of a tag's interior -> token type.
# Anything else makes an escaped variable and stays part of the content.
SIGIL_TOKEN_TYPES: dict[str, TokenType] = {
    "!": TokenType.COMMENT,
    "#": TokenType.SECTION,
    "^": TokenType.INVERTED_SECTION,
    "$": TokenType.BLOCK,
    "/": TokenType.CLOSE,
    ">": TokenType.PARTIAL,
    "<": TokenType.PARTIAL_OVERRIDE,
    "&": TokenType.UNESCAPED_VARIABLE,
    "%": TokenType.PRAGMA,
}

# Token types that remember the delimiter pair they were scanned under
DELIMITED_TOKEN_TYPES = frozenset(
    {
        TokenType.SECTION,
        TokenType.INVERTED_SECTION,
        TokenType.UNESCAPED_VARIABLE,
        TokenType.ESCAPED_VARIABLE,
    }
)

# Separators inside a set-delimiters tag
SET_DELIMITERS_WHITESPACE = frozenset({" ", "\n"})
