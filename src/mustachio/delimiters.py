"""Tag delimiter pairs and the marker table derived from them.

A template starts with a delimiter pair (``{{`` and ``}}`` by default) and a
set-delimiters tag such as ``{{=<% %>=}}`` swaps it mid-stream. The lexer
never inspects the pair directly: it scans against a TagDelimiters table that
holds every literal marker it needs and their lengths.

Triple-brace unescaped tags (``{{{name}}}``) exist only under the literal
default pair. Under any other pair the table carries no unescaped markers.

Thread Safety:
All values here are immutable. The derivation cache only stores immutable
tables, so it is safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import NamedTuple


class TagDelimiterPair(NamedTuple):
    """Opening and closing tag markers.

    Compares equal to a plain ``(opening, closing)`` tuple.

    """

    opening: str
    closing: str


DEFAULT_TAG_DELIMITER_PAIR = TagDelimiterPair("{{", "}}")

UNESCAPED_TAG_START = "{{{"
UNESCAPED_TAG_END = "}}}"


@dataclass(frozen=True, slots=True)
class TagDelimiters:
    """Every marker the lexer scans for under one delimiter pair.

    Attributes:
        tag_delimiter_pair: The pair this table was derived from
        tag_start_length: Length of the opening marker
        tag_end_length: Length of the closing marker
        unescaped_tag_start: ``{{{`` under the default pair, else None
        unescaped_tag_start_length: Its length, 0 when absent
        unescaped_tag_end: ``}}}`` under the default pair, else None
        unescaped_tag_end_length: Its length, 0 when absent
        set_delimiters_start: Opening marker followed by ``=``
        set_delimiters_start_length: Its length
        set_delimiters_end: ``=`` followed by the closing marker
        set_delimiters_end_length: Its length

    """

    tag_delimiter_pair: TagDelimiterPair
    tag_start_length: int
    tag_end_length: int
    unescaped_tag_start: str | None
    unescaped_tag_start_length: int
    unescaped_tag_end: str | None
    unescaped_tag_end_length: int
    set_delimiters_start: str
    set_delimiters_start_length: int
    set_delimiters_end: str
    set_delimiters_end_length: int

    @property
    def tag_start(self) -> str:
        """Opening marker of the active pair."""
        return self.tag_delimiter_pair.opening

    @property
    def tag_end(self) -> str:
        """Closing marker of the active pair."""
        return self.tag_delimiter_pair.closing

    @property
    def uses_standard_delimiters(self) -> bool:
        """True when triple-brace unescaped tags are recognized."""
        return self.unescaped_tag_start is not None

    @classmethod
    def from_pair(cls, tag_delimiter_pair: tuple[str, str]) -> TagDelimiters:
        """Derive the marker table for a delimiter pair.

        Args:
            tag_delimiter_pair: ``(opening, closing)``, both non-empty

        Returns:
            The (cached) TagDelimiters for that pair.

        Raises:
            ValueError: If either marker is empty.
        """
        return derive_tag_delimiters(TagDelimiterPair(*tag_delimiter_pair))


@lru_cache(maxsize=64)
def derive_tag_delimiters(tag_delimiter_pair: TagDelimiterPair) -> TagDelimiters:
    """Derive the marker table for a delimiter pair.

    Pure function of the pair; results are cached.

    Example:
        >>> table = derive_tag_delimiters(TagDelimiterPair("<%", "%>"))
        >>> table.set_delimiters_start, table.set_delimiters_end
        ('<%=', '=%>')
        >>> table.unescaped_tag_start is None
        True
    """
    opening, closing = tag_delimiter_pair
    if not opening or not closing:
        raise ValueError(f"Tag delimiters must be non-empty, got {tuple(tag_delimiter_pair)!r}")

    standard = tag_delimiter_pair == DEFAULT_TAG_DELIMITER_PAIR
    unescaped_start = UNESCAPED_TAG_START if standard else None
    unescaped_end = UNESCAPED_TAG_END if standard else None
    set_delimiters_start = f"{opening}="
    set_delimiters_end = f"={closing}"

    return TagDelimiters(
        tag_delimiter_pair=TagDelimiterPair(opening, closing),
        tag_start_length=len(opening),
        tag_end_length=len(closing),
        unescaped_tag_start=unescaped_start,
        unescaped_tag_start_length=len(unescaped_start) if unescaped_start else 0,
        unescaped_tag_end=unescaped_end,
        unescaped_tag_end_length=len(unescaped_end) if unescaped_end else 0,
        set_delimiters_start=set_delimiters_start,
        set_delimiters_start_length=len(set_delimiters_start),
        set_delimiters_end=set_delimiters_end,
        set_delimiters_end_length=len(set_delimiters_end),
    )
