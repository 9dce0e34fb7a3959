"""strictjson exception hierarchy with structured diagnostics.

Grammar violations travel through the parser as ParseError values; these
exceptions exist for callers that prefer raise/except over result checks.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from strictjson.syntax.cursor import ParseError

__all__ = ["JsonError", "JsonSyntaxError"]


class JsonError(Exception):
    """Base exception for all strictjson errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JsonError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class JsonSyntaxError(JsonError):
    """JSON text does not conform to the RFC 8259 grammar.

    Wraps the ParseError value produced by the parser. The exception text is
    the one-line "{message} at line {line}, col {col}" rendering; the
    Rust-style rendering is available through ``diagnostic.format_error()``.

    Attributes:
        parse_error: The underlying ParseError value
        diagnostic: Diagnostic bound to the error's source span
    """

    def __init__(self, parse_error: "ParseError") -> None:
        """Initialize JsonSyntaxError.

        Args:
            parse_error: Error value returned by the grammar layer
        """
        super().__init__(parse_error.format_error())
        self.parse_error = parse_error
        self.diagnostic = parse_error.to_diagnostic()

    @property
    def message(self) -> str:
        """Error description without the location suffix."""
        return self.parse_error.message

    @property
    def line(self) -> int:
        """1-based line of the offending position."""
        return self.parse_error.line

    @property
    def column(self) -> int:
        """1-based column of the offending position."""
        return self.parse_error.column

    @property
    def position(self) -> int:
        """0-based character offset of the offending position."""
        return self.parse_error.position
