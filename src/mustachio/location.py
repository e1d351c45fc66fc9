"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking where a token sits in its
template.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Attributes:
        lineno: Line on which the token opened (1-indexed)
        offset: Absolute start offset in the template string
        end_offset: Absolute end offset in the template string (exclusive)
        template_id: Template identifier (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, offset=12, end_offset=20)
            >>> str(loc)
            '3'

            >>> loc = SourceLocation(1, 0, 8, "layout.mustache")
            >>> str(loc)
            'layout.mustache:1'

    """

    lineno: int
    offset: int = 0
    end_offset: int = 0
    template_id: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "layout.mustache:10" or "10"
        """
        if self.template_id:
            return f"{self.template_id}:{self.lineno}"
        return f"{self.lineno}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's end offset
        """
        return SourceLocation(
            lineno=self.lineno,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            template_id=self.template_id,
        )
