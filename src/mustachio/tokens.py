"""Token and TokenType definitions for the Mustachio lexer.

The lexer produces a stream of Token objects that a template builder
consumes. Each Token has a type, an optional raw content, the delimiter pair
active when it was scanned (for sections and variables), and the exact
source range it occupies.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mustachio.delimiters import TagDelimiterPair
    from mustachio.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    # Literal template text
    TEXT = auto()

    # Tags
    COMMENT = auto()  # {{! ... }}
    SECTION = auto()  # {{# ... }}
    INVERTED_SECTION = auto()  # {{^ ... }}
    BLOCK = auto()  # {{$ ... }}
    CLOSE = auto()  # {{/ ... }}
    PARTIAL = auto()  # {{> ... }}
    PARTIAL_OVERRIDE = auto()  # {{< ... }}
    UNESCAPED_VARIABLE = auto()  # {{& ... }} or {{{ ... }}}
    ESCAPED_VARIABLE = auto()  # {{ ... }}
    PRAGMA = auto()  # {{% ... }}
    SET_DELIMITERS = auto()  # {{= ... =}}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        content: Raw interior text for text and content-bearing tags, else None
        tag_delimiter_pair: Pair active when a section or variable tag was
            scanned; None for every other type
        _lineno: Line on which the token opened (1-indexed)
        _start_offset: Absolute start position in the template string
        _end_offset: Absolute end position in the template string
        _template_id: Optional template identifier
        _template_string: The full template string

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    content: str | None
    _lineno: int
    _start_offset: int
    _end_offset: int
    tag_delimiter_pair: TagDelimiterPair | None = None
    _template_id: str | None = None
    _template_string: str = field(default="", repr=False, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from mustachio.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            offset=self._start_offset,
            end_offset=self._end_offset,
            template_id=self._template_id,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.content is None:
            return f"Token({self.type.name}, line {self._lineno})"
        val = self.content
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, line {self._lineno})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def template_id(self) -> str | None:
        return self._template_id

    @property
    def template_string(self) -> str:
        return self._template_string

    @property
    def range(self) -> tuple[int, int]:
        """``(start, end)`` offsets into the template string."""
        return self._start_offset, self._end_offset

    @property
    def text(self) -> str:
        """Exact template text this token spans, markers included."""
        return self._template_string[self._start_offset : self._end_offset]
