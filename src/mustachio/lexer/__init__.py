"""State-machine lexer for Mustachio Mustache templates.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (scan loop, pull and push drivers)
├── modes.py             # LexerMode enum, sigil table
└── classifiers.py       # Tag classification mixin

Usage:
    >>> from mustachio.lexer import Lexer
    >>> for token in Lexer("{{! note }}Hi {{name}}").tokenize():
    ...     print(token)
Token(COMMENT, line 1)
Token(TEXT, 'Hi ', line 1)
Token(ESCAPED_VARIABLE, 'name', line 1)

"""

from mustachio.lexer.core import Lexer
from mustachio.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
