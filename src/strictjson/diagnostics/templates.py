"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in parser error paths!
    This keeps message text in one place while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Templates return unbound Diagnostics (span=None). The parser binds them
    to a source position through Cursor.error().
    """

    # RFC 8259 section anchors
    _DOCS_BASE = "https://www.rfc-editor.org/rfc/rfc8259"

    # ------------------------------------------------------------------
    # Structure (values, objects, arrays, whole document)
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Args:
            position: Offset at which the read was attempted

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected EOF at position {position}",
        )

    @staticmethod
    def value_expected_at_eof() -> Diagnostic:
        """Input ended where a value was required.

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message="Unexpected end of input while expecting a value",
            hint="The document is truncated or empty",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-3",
        )

    @staticmethod
    def unexpected_character(char: str) -> Diagnostic:
        """Character cannot start any JSON value.

        Args:
            char: The offending character

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=f"Unexpected character '{char}' while parsing a value",
            hint="Values start with '{', '[', '\"', a digit, '-', true, false or null",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-3",
        )

    @staticmethod
    def expected_character(char: str) -> Diagnostic:
        """Required punctuation is missing.

        Args:
            char: The character the grammar requires (':', ',', ...)

        Returns:
            Diagnostic for EXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_TOKEN,
            message=f"Expected '{char}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2",
        )

    @staticmethod
    def expected_literal(literal: str) -> Diagnostic:
        """Literal name (true/false/null) is misspelled or truncated.

        Args:
            literal: The literal text the grammar requires

        Returns:
            Diagnostic for EXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_TOKEN,
            message=f'Expected "{literal}"',
            hint="Literal names are lowercase: true, false, null",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-3",
        )

    @staticmethod
    def trailing_characters() -> Diagnostic:
        """Non-whitespace content follows a complete value.

        Returns:
            Diagnostic for TRAILING_CHARACTERS
        """
        return Diagnostic(
            code=DiagnosticCode.TRAILING_CHARACTERS,
            message="Trailing characters after valid JSON value",
            hint="A JSON text holds exactly one top-level value",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Arrays/objects nest deeper than the configured limit.

        Args:
            max_depth: The configured nesting limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=f"Maximum nesting depth of {max_depth} exceeded",
            hint="Raise max_nesting_depth if this document is legitimate",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-9",
        )

    @staticmethod
    def invalid_object_key() -> Diagnostic:
        """Object member does not start with a string key.

        Returns:
            Diagnostic for INVALID_OBJECT_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_OBJECT_KEY,
            message="Object keys must be strings starting with '\"'",
            hint="Quote the key; trailing commas are not allowed",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-4",
        )

    @staticmethod
    def duplicate_object_key(key: str) -> Diagnostic:
        """Key repeated inside one object under the REJECT policy.

        Args:
            key: The repeated key

        Returns:
            Diagnostic for DUPLICATE_OBJECT_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_OBJECT_KEY,
            message=f"Duplicate object key '{key}'",
            hint="Use DuplicateKeyPolicy.LAST_WINS to accept repeated keys",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-4",
        )

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    @staticmethod
    def unterminated_string() -> Diagnostic:
        """Input ended before the closing quote.

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message="Unterminated string literal",
            hint="Add the closing '\"'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def unterminated_escape() -> Diagnostic:
        """Input ended right after a backslash.

        Returns:
            Diagnostic for UNTERMINATED_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_ESCAPE,
            message="Unterminated escape sequence in string",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def invalid_escape(char: str) -> Diagnostic:
        """Backslash followed by a character with no escape meaning.

        Args:
            char: The character after the backslash

        Returns:
            Diagnostic for INVALID_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ESCAPE,
            message=f"Invalid escape character '\\{char}'",
            hint='Valid escapes: \\" \\\\ \\/ \\b \\f \\n \\r \\t \\uXXXX',
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def incomplete_unicode_escape() -> Diagnostic:
        """Fewer than four characters remain after \\u.

        Returns:
            Diagnostic for INCOMPLETE_UNICODE_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_UNICODE_ESCAPE,
            message="Incomplete \\u escape",
            hint="\\u must be followed by exactly four hex digits",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def invalid_hex_digit() -> Diagnostic:
        """Non-hex character inside a \\u escape.

        Returns:
            Diagnostic for INVALID_HEX_DIGIT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_HEX_DIGIT,
            message="Invalid hex digit in \\u escape",
            hint="Hex digits are 0-9, a-f and A-F",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def unescaped_control_character() -> Diagnostic:
        """Raw U+0000..U+001F inside a string.

        Returns:
            Diagnostic for UNESCAPED_CONTROL_CHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.UNESCAPED_CONTROL_CHARACTER,
            message="Unescaped control character in string",
            hint="Write control characters as \\n, \\t or \\u00XX",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    @staticmethod
    def leading_zero() -> Diagnostic:
        """Integer part has a superfluous leading zero (01, -00).

        Returns:
            Diagnostic for NUMBER_LEADING_ZERO
        """
        return Diagnostic(
            code=DiagnosticCode.NUMBER_LEADING_ZERO,
            message="Numbers with leading zero are invalid",
            hint="Remove the leading zero or add a decimal point",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-6",
        )

    @staticmethod
    def expected_digits() -> Diagnostic:
        """Minus sign not followed by a digit.

        Returns:
            Diagnostic for NUMBER_EXPECTED_DIGITS
        """
        return Diagnostic(
            code=DiagnosticCode.NUMBER_EXPECTED_DIGITS,
            message="Expected digits",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-6",
        )

    @staticmethod
    def expected_fraction_digits() -> Diagnostic:
        """Decimal point not followed by a digit.

        Returns:
            Diagnostic for NUMBER_EXPECTED_FRACTION_DIGITS
        """
        return Diagnostic(
            code=DiagnosticCode.NUMBER_EXPECTED_FRACTION_DIGITS,
            message="Expected digits after decimal point",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-6",
        )

    @staticmethod
    def expected_exponent_digits() -> Diagnostic:
        """Exponent marker not followed by a digit.

        Returns:
            Diagnostic for NUMBER_EXPECTED_EXPONENT_DIGITS
        """
        return Diagnostic(
            code=DiagnosticCode.NUMBER_EXPECTED_EXPONENT_DIGITS,
            message="Expected digits in exponent",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-6",
        )

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    @staticmethod
    def traversal_depth_exceeded(max_depth: int) -> Diagnostic:
        """Visitor recursion went deeper than its guard allows.

        Args:
            max_depth: The guard's limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=f"Maximum traversal depth of {max_depth} exceeded",
            hint="The value tree is nested deeper than the visitor's max_depth",
        )
