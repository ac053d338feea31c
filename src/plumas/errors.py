"""Exception classes for Plumas.

Malformed Markdown never raises: the parser degrades ambiguous syntax to
plain text. These exceptions cover internal failures and misuse of the IR
at the render boundary.
"""

from __future__ import annotations


class PlumasError(Exception):
    """Base exception for all Plumas errors.
    
    Subclass this for specific error categories.
    """

    pass


class ParseError(PlumasError):
    """Error during Markdown parsing.
    
    Raised inside a detector when a construct that looked valid turns out
    not to be. Detectors catch it and fall back to the next interpretation.
    """

    def __init__(self, message: str, lineno: int | None = None) -> None:
        """Initialize parse error with optional location.
        
        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
        """
        self.message = message
        self.lineno = lineno

        location = f"{lineno}: " if lineno is not None else ""
        super().__init__(f"{location}{message}")


class TableFormatError(ParseError):
    """A table candidate could not be turned into a Table node."""

    pass


class RenderError(PlumasError):
    """Error at the render boundary.
    
    Raised when a consumer-side helper (visitor, text extraction) is handed
    an object that is not an IR node.
    """

    pass
