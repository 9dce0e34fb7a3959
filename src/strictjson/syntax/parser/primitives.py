"""Primitive parsing utilities for the JSON parser.

This module provides low-level parsers for string literals, number
literals and the three keyword literals per RFC 8259.

Error Context:
    Every function returns ParseResult on success and a ParseError value on
    failure. Nothing here raises for malformed input.
"""

from strictjson.constants import ASCII_DIGITS, HEX_DIGITS
from strictjson.diagnostics import ErrorTemplate
from strictjson.syntax.cursor import Cursor, ParseError, ParseResult
from strictjson.syntax.numbers import classify_number
from strictjson.syntax.values import JsonBool, JsonNull, JsonNumber

__all__ = [
    "parse_escape_sequence",
    "parse_hex4",
    "parse_literal",
    "parse_number",
    "parse_string",
]

# \uXXXX carries exactly 4 hex digits (one UTF-16 code unit)
_UNICODE_ESCAPE_LEN: int = 4

# Characters below U+0020 must be escaped inside strings
_CONTROL_CHAR_LIMIT: int = 0x20

_HIGH_SURROGATE_START: int = 0xD800
_HIGH_SURROGATE_END: int = 0xDBFF
_LOW_SURROGATE_START: int = 0xDC00
_LOW_SURROGATE_END: int = 0xDFFF

# Single-character escapes (everything except \u)
_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Keyword literals and the values they produce
_LITERALS: dict[str, JsonNull | JsonBool] = {
    "null": JsonNull(),
    "true": JsonBool(True),
    "false": JsonBool(False),
}


def parse_hex4(cursor: Cursor) -> ParseResult[int] | ParseError:
    """Parse the four hex digits of a \\u escape.

    Errors are located after the consumed input: right after the ``u`` when
    fewer than four characters remain, and right after the offending
    character for a bad digit.

    Args:
        cursor: Position of the first hex digit (right after ``\\u``)

    Returns:
        ParseResult with the 16-bit code unit, or ParseError:
        - "Incomplete \\u escape" if fewer than 4 chars remain
        - "Invalid hex digit in \\u escape" one past the offending character

    Example:
        >>> parse_hex4(Cursor("\\\\u00e9", 2)).value
        233
        >>> parse_hex4(Cursor("\\\\u0G00", 2)).position
        4
    """
    hex_digits = cursor.slice_ahead(_UNICODE_ESCAPE_LEN)
    if len(hex_digits) < _UNICODE_ESCAPE_LEN:
        return cursor.error(ErrorTemplate.incomplete_unicode_escape())
    for offset, ch in enumerate(hex_digits):
        if ch not in HEX_DIGITS:
            return cursor.advance(offset + 1).error(ErrorTemplate.invalid_hex_digit())
    return ParseResult(int(hex_digits, 16), cursor.advance(_UNICODE_ESCAPE_LEN))


def parse_escape_sequence(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse escape sequence starting at the backslash.

    Supported escape sequences:
        \\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX

    A \\uXXXX escape always yields a single code point, so a surrogate code
    unit comes back as a lone surrogate; parse_string decides whether to
    merge pairs.

    Args:
        cursor: Position OF the backslash

    Returns:
        ParseResult(decoded_text, cursor_after_escape), or ParseError
        located after the consumed part of the escape (end of input for a
        trailing backslash, one past the escape character otherwise)

    Example:
        >>> parse_escape_sequence(Cursor("\\\\q", 0)).position
        2
    """
    after_backslash = cursor.advance()
    if after_backslash.is_eof:
        return after_backslash.error(ErrorTemplate.unterminated_escape())

    escape_ch = after_backslash.current
    after_escape = after_backslash.advance()
    simple = _SIMPLE_ESCAPES.get(escape_ch)
    if simple is not None:
        return ParseResult(simple, after_escape)

    if escape_ch == "u":
        hex_result = parse_hex4(after_escape)
        if isinstance(hex_result, ParseError):
            return hex_result
        return ParseResult(chr(hex_result.value), hex_result.cursor)

    return after_escape.error(ErrorTemplate.invalid_escape(escape_ch))


def _is_high_surrogate(text: str) -> bool:
    return len(text) == 1 and _HIGH_SURROGATE_START <= ord(text) <= _HIGH_SURROGATE_END


def _is_low_surrogate(text: str) -> bool:
    return len(text) == 1 and _LOW_SURROGATE_START <= ord(text) <= _LOW_SURROGATE_END


def _combine_pair(high: str, low: str) -> str:
    return chr(
        0x10000
        + ((ord(high) - _HIGH_SURROGATE_START) << 10)
        + (ord(low) - _LOW_SURROGATE_START)
    )


def parse_string(
    cursor: Cursor, *, combine_surrogates: bool = False
) -> ParseResult[str] | ParseError:
    """Parse string literal: '"' *char '"'

    Unescaped runs are copied in slices rather than one character at a time.
    Characters U+0000..U+001F must be escaped; everything else, including
    non-ASCII, passes through unchanged.

    Args:
        cursor: Position of the opening quote
        combine_surrogates: Merge an escaped high surrogate immediately
            followed by an escaped low surrogate into one code point

    Returns:
        ParseResult(decoded_string, cursor_after_closing_quote), or ParseError

    Example:
        >>> parse_string(Cursor('"a\\\\tb"', 0)).value
        'a\\tb'
        >>> len(parse_string(Cursor('"\\\\ud83d\\\\ude00"', 0)).value)
        2
        >>> len(parse_string(Cursor('"\\\\ud83d\\\\ude00"', 0), combine_surrogates=True).value)
        1
    """
    if cursor.is_eof or cursor.current != '"':
        return cursor.error(ErrorTemplate.expected_character('"'))

    source = cursor.source
    end = len(source)
    pos = cursor.pos + 1
    chunks: list[str] = []
    # True while the last chunk is a high surrogate produced by an escape
    pending_high = False

    while pos < end:
        run_start = pos
        while pos < end:
            ch = source[pos]
            if ch == '"' or ch == "\\" or ord(ch) < _CONTROL_CHAR_LIMIT:
                break
            pos += 1
        if pos > run_start:
            chunks.append(source[run_start:pos])
            pending_high = False
        if pos >= end:
            break

        ch = source[pos]
        if ch == '"':
            return ParseResult("".join(chunks), Cursor(source, pos + 1))
        if ch != "\\":
            # Located one past the rejected character
            return Cursor(source, pos + 1).error(ErrorTemplate.unescaped_control_character())

        escape_result = parse_escape_sequence(Cursor(source, pos))
        if isinstance(escape_result, ParseError):
            return escape_result
        decoded = escape_result.value
        pos = escape_result.cursor.pos

        if combine_surrogates and pending_high and _is_low_surrogate(decoded):
            chunks[-1] = _combine_pair(chunks[-1], decoded)
            pending_high = False
        else:
            chunks.append(decoded)
            pending_high = _is_high_surrogate(decoded)

    return Cursor(source, end).error(ErrorTemplate.unterminated_string())


def _skip_digits(cursor: Cursor) -> Cursor:
    source = cursor.source
    pos = cursor.pos
    end = len(source)
    while pos < end and source[pos] in ASCII_DIGITS:
        pos += 1
    return cursor if pos == cursor.pos else Cursor(source, pos)


def parse_number(cursor: Cursor) -> ParseResult[JsonNumber] | ParseError:
    """Parse number literal: -? int frac? exp?

    Grammar (RFC 8259 section 6):
        int  = "0" / ( digit1-9 *DIGIT )
        frac = "." 1*DIGIT
        exp  = ( "e" / "E" ) [ "-" / "+" ] 1*DIGIT

    Only ASCII digits count. A leading "+" is not part of the grammar and
    never reaches this function (parse_value rejects it).

    Examples:
        42 -> JsonInteger(42)
        -3.14 -> JsonDecimal(Decimal("-3.14"))
        1e400 -> JsonFloat(inf)

    Args:
        cursor: Position of the first character ("-" or a digit)

    Returns:
        ParseResult with the classified number, or ParseError:
        - "Numbers with leading zero are invalid" at the number start
        - "Expected digits" / "Expected digits after decimal point" /
          "Expected digits in exponent" at the position missing digits
    """
    start = cursor
    after_sign = cursor.try_consume("-") or cursor

    # Integer part
    if after_sign.is_eof or after_sign.current not in ASCII_DIGITS:
        return after_sign.error(ErrorTemplate.expected_digits())
    if after_sign.current == "0":
        cursor = after_sign.advance()
        if not cursor.is_eof and cursor.current in ASCII_DIGITS:
            return start.error(ErrorTemplate.leading_zero())
    else:
        cursor = _skip_digits(after_sign)

    integral = True

    # Fraction
    after_dot = cursor.try_consume(".")
    if after_dot is not None:
        integral = False
        cursor = _skip_digits(after_dot)
        if cursor is after_dot:
            return after_dot.error(ErrorTemplate.expected_fraction_digits())

    # Exponent
    after_e = cursor.try_consume("e") or cursor.try_consume("E")
    if after_e is not None:
        integral = False
        after_exp_sign = after_e.try_consume("+") or after_e.try_consume("-") or after_e
        cursor = _skip_digits(after_exp_sign)
        if cursor is after_exp_sign:
            return after_exp_sign.error(ErrorTemplate.expected_exponent_digits())

    literal = start.slice_to(cursor.pos)
    return ParseResult(classify_number(literal, integral=integral), cursor)


def parse_literal(cursor: Cursor, literal: str) -> ParseResult[JsonNull | JsonBool] | ParseError:
    """Parse one of the keyword literals ``null``, ``true``, ``false``.

    Args:
        cursor: Position of the literal's first character
        literal: Keyword to match (case-sensitive)

    Returns:
        ParseResult with JsonNull or JsonBool, or ParseError one past the first
        mismatching character (or at end of input)

    Example:
        >>> parse_literal(Cursor("true", 0), "true").value
        JsonBool(value=True)
        >>> parse_literal(Cursor("tru", 0), "true").format_error()
        'Expected "true" at line 1, col 4'
        >>> parse_literal(Cursor("trux", 0), "true").format_error()
        'Expected "true" at line 1, col 5'
    """
    consumed = cursor.expect_literal(literal)
    if isinstance(consumed, ParseError):
        return consumed
    return ParseResult(_LITERALS[literal], consumed)
