"""Exception classes for Mustachio.

Provides standardized exceptions for error handling throughout Mustachio.
"""

from __future__ import annotations


class MustachioError(Exception):
    """Base exception for all Mustachio errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MustachioError):
    """Error during template tokenization.

    Raised (or delivered to a token consumer) when the lexer meets an
    unclosed tag or a malformed set-delimiters tag. Always terminal: the
    lexer produces no token after it.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        template_id: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line on which the offending tag opened (1-indexed)
            template_id: Identifier of the template (optional, diagnostics only)
        """
        self.message = message
        self.lineno = lineno
        self.template_id = template_id

        location = ""
        if template_id:
            location = f"{template_id}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
