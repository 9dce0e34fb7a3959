"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Grammar failures are ParseError VALUES, never exceptions
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    Only LF (\\n) advances the line counter. CR is insignificant whitespace
    between tokens and counts as an ordinary column, so CRLF files report
    correct line numbers while CR-only files report everything on line 1.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from strictjson.constants import WHITESPACE_CHARS
from strictjson.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, SourceSpan

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (important for large documents)
        3. Simple position - Just an integer offset (code points)
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor('{"a": 1}', 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        '"'
        >>> cursor.current  # Original unchanged (immutability)
        '{'
        >>> Cursor("[]", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input. Grammar code checks is_eof first;
                reaching this is a parser bug, not bad input.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged),
            clamped to the end of the source
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Args:
            end_pos: End position (exclusive)

        Returns:
            Source substring from current position to end_pos

        Example:
            >>> start = Cursor("-12.5e3,", 0)
            >>> start.slice_to(7)
            '-12.5e3'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Returns:
            String of up to n characters starting at current position.
            May return fewer characters if near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def skip_whitespace(self) -> "Cursor":
        """Skip JSON whitespace (space, tab, LF, CR).

        Returns:
            New cursor advanced past all consecutive whitespace characters

        Example:
            >>> Cursor(" \\t\\r\\n true", 0).skip_whitespace().pos
            5
        """
        source = self.source
        pos = self.pos
        end = len(source)
        while pos < end and source[pos] in WHITESPACE_CHARS:
            pos += 1
        if pos == self.pos:
            return self
        return Cursor(source, pos)

    def try_consume(self, char: str) -> "Cursor | None":
        """Consume character if it matches, return None otherwise.

        Does NOT skip whitespace. Use for optional characters.

        Args:
            char: Expected character (single character string)

        Returns:
            New cursor advanced by 1 if current character matches,
            None if no match or at EOF

        Example:
            >>> Cursor("-1", 0).try_consume("-").pos
            1
            >>> Cursor("1", 0).try_consume("-") is None
            True
        """
        if not self.is_eof and self.source[self.pos] == char:
            return self.advance()
        return None

    def expect(self, char: str) -> "Cursor | ParseError":
        """Skip whitespace, then require char.

        Args:
            char: Required character

        Returns:
            Cursor advanced past char, or ParseError ("Expected 'c'")
            located at the mismatching character (or EOF)

        Example:
            >>> Cursor('  : 1', 0).expect(":").pos
            3
            >>> Cursor('"a" 1', 3).expect(":").format_error()
            "Expected ':' at line 1, col 5"
        """
        cursor = self.skip_whitespace()
        consumed = cursor.try_consume(char)
        if consumed is None:
            return cursor.error(ErrorTemplate.expected_character(char))
        return consumed

    def expect_literal(self, literal: str) -> "Cursor | ParseError":
        """Skip whitespace, then require the exact literal text.

        Comparison is case-sensitive and character by character. The first
        character that differs is consumed before the error is raised, so
        the error sits one past it; running out of input errors at EOF.

        Args:
            literal: Required text (e.g. "true")

        Returns:
            Cursor advanced past the literal, or ParseError
            ('Expected "literal"') after the first mismatch (or at EOF)

        Example:
            >>> Cursor("null", 0).expect_literal("null").pos
            4
            >>> Cursor("nul", 0).expect_literal("null").position
            3
            >>> Cursor("nulL", 0).expect_literal("null").position
            4
        """
        cursor = self.skip_whitespace()
        source = cursor.source
        for offset, expected_char in enumerate(literal):
            pos = cursor.pos + offset
            if pos >= len(source):
                return Cursor(source, pos).error(ErrorTemplate.expected_literal(literal))
            if source[pos] != expected_char:
                return Cursor(source, pos + 1).error(ErrorTemplate.expected_literal(literal))
        return cursor.advance(len(literal))

    def error(self, diagnostic: Diagnostic) -> "ParseError":
        """Bind an error template to the current position.

        Args:
            diagnostic: Unbound diagnostic from ErrorTemplate

        Returns:
            ParseError located at this cursor
        """
        return ParseError(
            message=diagnostic.message,
            cursor=self,
            code=diagnostic.code,
            hint=diagnostic.hint,
            help_url=diagnostic.help_url,
        )

    def count_newlines_before(self) -> int:
        """Count newlines before current position without substring copy.

        Example:
            >>> Cursor("[\\n1,\\n2]", 5).count_newlines_before()
            2
        """
        return self.source.count("\n", 0, self.pos)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Every character before the position is scanned: each LF starts a new
        line at column 1, any other character moves one column right.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!

        Example:
            >>> source = '{\\n  "a": 01\\n}'
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 2).compute_line_col()
            (2, 1)
            >>> Cursor(source, 9).compute_line_col()
            (2, 8)
        """
        line = self.count_newlines_before() + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every grammar function has signature:
            def parse_foo(cursor: Cursor, ...) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> cursor = Cursor("true", 0)
        >>> result = ParseResult(True, cursor.advance(4))
        >>> result.value
        True
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse error with location and context.

    The single failure value of the grammar layer. Returned, not raised;
    JsonSyntaxError wraps it for exception-based callers.

    Attributes:
        message: Human-readable description (no location)
        cursor: Cursor at the offending position
        code: Diagnostic code identifying the violation
        hint: Suggestion for fixing the input (optional)
        help_url: RFC 8259 reference (optional)

    Example:
        >>> error = Cursor("01", 0).error(ErrorTemplate.leading_zero())
        >>> error.format_error()
        'Numbers with leading zero are invalid at line 1, col 1'
    """

    message: str
    cursor: Cursor
    code: DiagnosticCode = DiagnosticCode.EXPECTED_TOKEN
    hint: str | None = None
    help_url: str | None = None

    @property
    def position(self) -> int:
        """0-based character offset of the error."""
        return self.cursor.pos

    @property
    def line(self) -> int:
        """1-based line of the error."""
        return self.cursor.compute_line_col()[0]

    @property
    def column(self) -> int:
        """1-based column of the error."""
        return self.cursor.compute_line_col()[1]

    def format_error(self) -> str:
        """Format error with line and column.

        Returns:
            "{message} at line {line}, col {col}"

        Example:
            >>> cursor = Cursor('{"a":1,}', 7)
            >>> cursor.error(ErrorTemplate.invalid_object_key()).format_error()
            'Object keys must be strings starting with \\'"\\' at line 1, col 8'
        """
        line, col = self.cursor.compute_line_col()
        return f"{self.message} at line {line}, col {col}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> source = '{\\n  "a": 01\\n}'
            >>> error = Cursor(source, 9).error(ErrorTemplate.leading_zero())
            >>> print(error.format_with_context())
            Numbers with leading zero are invalid at line 2, col 8
            <BLANKLINE>
               1 | {
               2 |   "a": 01
                 |        ^
               3 | }
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == line:
                pointer = " " * (len(line_num_str) - 2) + "| " + " " * (col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a Diagnostic bound to this error's source span.

        Returns:
            Diagnostic with a zero-width SourceSpan at the error position
        """
        line, col = self.cursor.compute_line_col()
        return Diagnostic(
            code=self.code,
            message=self.message,
            span=SourceSpan(start=self.position, end=self.position, line=line, column=col),
            hint=self.hint,
            help_url=self.help_url,
        )
