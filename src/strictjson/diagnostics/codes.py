"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3099: Structural syntax errors (values, objects, arrays, input)
        3100-3199: String literal errors (escapes, control characters)
        3200-3299: Number literal errors
        4000-4099: Tree traversal errors
    """

    # Structural syntax errors (3000-3099)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_CHARACTER = 3002
    EXPECTED_TOKEN = 3003
    TRAILING_CHARACTERS = 3004
    NESTING_DEPTH_EXCEEDED = 3005
    INVALID_OBJECT_KEY = 3006
    DUPLICATE_OBJECT_KEY = 3007

    # String literal errors (3100-3199)
    UNTERMINATED_STRING = 3101
    UNTERMINATED_ESCAPE = 3102
    INVALID_ESCAPE = 3103
    INCOMPLETE_UNICODE_ESCAPE = 3104
    INVALID_HEX_DIGIT = 3105
    UNESCAPED_CONTROL_CHARACTER = 3106

    # Number literal errors (3200-3299)
    NUMBER_LEADING_ZERO = 3201
    NUMBER_EXPECTED_DIGITS = 3202
    NUMBER_EXPECTED_FRACTION_DIGITS = 3203
    NUMBER_EXPECTED_EXPONENT_DIGITS = 3204

    # Tree traversal errors (4000-4099)
    MAX_DEPTH_EXCEEDED = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, CI annotations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None until bound to a position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[NUMBER_LEADING_ZERO]: Numbers with leading zero are invalid
              --> line 1, column 1
              = help: Remove the leading zero or add a decimal point
              = note: see https://www.rfc-editor.org/rfc/rfc8259#section-6

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
