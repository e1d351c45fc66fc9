"""
Mustachio — Mustache template lexer for Python

Turns Mustache template text into a stream of typed tokens (text, variables,
sections, partials, comments, pragmas, ...), honoring set-delimiters tags
mid-stream, and renders expression trees back to template syntax.

Quick Start:
    >>> from mustachio import tokenize
    >>> [t.type.name for t in tokenize("Hello {{name}}!")]
    ['TEXT', 'ESCAPED_VARIABLE', 'TEXT']

    >>> # Push tokens to a consumer that can stop early
    >>> from mustachio import Lexer, TokenCollector
    >>> collector = TokenCollector(limit=1)
    >>> Lexer("{{#items}}{{.}}{{/items}}").parse(collector)
    >>> collector.tokens
    [Token(SECTION, 'items', line 1)]

Custom Delimiters:
    >>> tokens = tokenize("[[name]]", tag_delimiter_pair=("[[", "]]"))
"""

from mustachio.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from mustachio.delimiters import (
    DEFAULT_TAG_DELIMITER_PAIR,
    TagDelimiterPair,
    TagDelimiters,
    derive_tag_delimiters,
)
from mustachio.errors import MustachioError, ParseError
from mustachio.expressions import Expression, Filter, Identifier, ImplicitIterator, Scoped
from mustachio.generator import ExpressionGenerator, generate_expression
from mustachio.lexer import Lexer, LexerMode
from mustachio.location import SourceLocation
from mustachio.protocols import TokenCollector, TokenConsumer
from mustachio.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    template_id: str | None = None,
    tag_delimiter_pair: tuple[str, str] | None = None,
) -> list[Token]:
    """Tokenize a whole template.

    Args:
        source: Template source text
        template_id: Optional template identifier for error messages
        tag_delimiter_pair: Initial delimiters (from the active ParseConfig if None)

    Returns:
        Every token, in source order

    Raises:
        ParseError: On an unclosed tag or a malformed set-delimiters tag

    Example:
        >>> tokenize("{{=<% %>=}}<% name %>")[1].tag_delimiter_pair
        TagDelimiterPair(opening='<%', closing='%>')
    """
    lexer = Lexer(source, template_id=template_id, tag_delimiter_pair=tag_delimiter_pair)
    return list(lexer.tokenize())


__all__ = [
    # Tokenizing
    "tokenize",
    "Lexer",
    "LexerMode",
    "Token",
    "TokenType",
    "TokenConsumer",
    "TokenCollector",
    "SourceLocation",
    # Delimiters
    "DEFAULT_TAG_DELIMITER_PAIR",
    "TagDelimiterPair",
    "TagDelimiters",
    "derive_tag_delimiters",
    # Expressions
    "Expression",
    "ImplicitIterator",
    "Identifier",
    "Scoped",
    "Filter",
    "ExpressionGenerator",
    "generate_expression",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "MustachioError",
    "ParseError",
    # Version
    "__version__",
]
