"""Tests for the JSON parser: grammar rules, limits and public entry points."""

from __future__ import annotations

import json
import logging
from decimal import Decimal

import pytest
from hypothesis import given

from strictjson import (
    DuplicateKeyPolicy,
    JsonArray,
    JsonBool,
    JsonDecimal,
    JsonFloat,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonParser,
    JsonString,
    JsonSyntaxError,
    ParseError,
    parse,
    to_python,
    try_parse,
)
from strictjson.diagnostics import DiagnosticCode
from strictjson.syntax.cursor import Cursor, ParseResult
from strictjson.syntax.parser import ParseContext
from strictjson.syntax.parser.rules import parse_array, parse_object, parse_value
from tests.strategies import json_documents, json_whitespace


def _error(source: str, **options: object) -> ParseError:
    result = try_parse(source, **options)  # type: ignore[arg-type]
    assert isinstance(result, ParseError), result
    return result


# ============================================================================
# VALUE DISPATCH
# ============================================================================


class TestValueDispatch:
    """Test dispatch on the first significant character."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("null", JsonNull()),
            ("true", JsonBool(True)),
            ("false", JsonBool(False)),
            ('"A"', JsonString("A")),
            ("7", JsonInteger(7)),
            ("-7.5", JsonDecimal(Decimal("-7.5"))),
            ("[]", JsonArray()),
            ("{}", JsonObject()),
        ],
    )
    def test_every_value_kind(self, source: str, expected: object) -> None:
        """Each top-level value kind parses."""
        assert parse(source) == expected

    def test_surrounding_whitespace(self) -> None:
        """Whitespace before and after the value is insignificant."""
        assert parse(" \t\r\n 1 \n") == JsonInteger(1)

    def test_empty_input(self) -> None:
        """Empty text has no value."""
        error = _error("")

        assert error.message == "Unexpected end of input while expecting a value"
        assert error.code == DiagnosticCode.UNEXPECTED_EOF

    def test_whitespace_only_input(self) -> None:
        """Whitespace-only text reports EOF after the whitespace."""
        assert _error("   ").position == 3

    @pytest.mark.parametrize(
        ("source", "char"),
        [("+1", "+"), ("'a'", "'"), ("NaN", "N"), ("Infinity", "I"), ("]", "]")],
    )
    def test_unexpected_character(self, source: str, char: str) -> None:
        """Anything outside the dispatch table is rejected at that character."""
        error = _error(source)

        assert error.message == f"Unexpected character '{char}' while parsing a value"
        assert error.position == 0

    def test_rule_functions_return_values_directly(self) -> None:
        """parse_value can be driven with an explicit context."""
        result = parse_value(Cursor(" [1] ", 0), ParseContext())

        assert isinstance(result, ParseResult)
        assert result.value == JsonArray((JsonInteger(1),))
        assert result.cursor.pos == 4


# ============================================================================
# OBJECTS
# ============================================================================


class TestObjects:
    """Test object parsing."""

    def test_empty_object(self) -> None:
        """{} has no members."""
        result = parse("{}")

        assert isinstance(result, JsonObject)
        assert len(result) == 0

    def test_whitespace_laden_object(self) -> None:
        """Whitespace around every token is accepted."""
        result = parse('{ "x" : [1,2,3] }')

        assert result == JsonObject(
            {"x": JsonArray((JsonInteger(1), JsonInteger(2), JsonInteger(3)))}
        )

    def test_member_order_preserved(self) -> None:
        """Iteration follows document order."""
        result = parse('{"b": 1, "a": 2, "c": 3}')

        assert isinstance(result, JsonObject)
        assert list(result.keys()) == ["b", "a", "c"]

    def test_duplicate_key_last_wins(self) -> None:
        """The later value replaces the earlier one."""
        result = parse('{"a":1,"a":2}')

        assert result == JsonObject({"a": JsonInteger(2)})

    def test_duplicate_key_keeps_first_position(self) -> None:
        """An overwritten key stays where it first appeared."""
        result = parse('{"a":1,"b":2,"a":3}')

        assert isinstance(result, JsonObject)
        assert list(result.items()) == [("a", JsonInteger(3)), ("b", JsonInteger(2))]

    def test_duplicate_key_rejected_by_policy(self) -> None:
        """REJECT fails at the repeated key."""
        error = _error('{"a":1, "a":2}', duplicate_keys=DuplicateKeyPolicy.REJECT)

        assert error.message == "Duplicate object key 'a'"
        assert error.column == 9
        assert error.code == DiagnosticCode.DUPLICATE_OBJECT_KEY

    def test_duplicate_policy_accepts_string(self) -> None:
        """Policy may be given by its string value."""
        assert _error('{"a":1,"a":2}', duplicate_keys="reject").position == 7

    def test_nested_duplicates_are_scoped_per_object(self) -> None:
        """The same key in sibling objects is not a duplicate."""
        result = parse('[{"a":1},{"a":2}]', duplicate_keys=DuplicateKeyPolicy.REJECT)

        assert isinstance(result, JsonArray)
        assert len(result) == 2

    def test_trailing_comma_rejected_at_brace(self) -> None:
        """{"a":1,} fails at the closing brace."""
        error = _error('{"a":1,}')

        assert error.format_error() == (
            "Object keys must be strings starting with '\"' at line 1, col 8"
        )

    @pytest.mark.parametrize(("source", "position"), [("{a:1}", 1), ("{1:1}", 1), ("{", 1)])
    def test_unquoted_key(self, source: str, position: int) -> None:
        """Keys must be string literals."""
        error = _error(source)

        assert error.code == DiagnosticCode.INVALID_OBJECT_KEY
        assert error.position == position

    def test_missing_colon(self) -> None:
        """Colon is required between key and value."""
        error = _error('{"a" 1}')

        assert error.message == "Expected ':'"
        assert error.position == 5

    def test_missing_comma(self) -> None:
        """Members are separated by commas."""
        error = _error('{"a":1 "b":2}')

        assert error.message == "Expected ','"
        assert error.position == 7

    def test_unclosed_object(self) -> None:
        """EOF after a member expects a comma."""
        assert _error('{"a":1').message == "Expected ','"

    def test_object_api(self) -> None:
        """JsonObject behaves as a read-only mapping."""
        result = parse('{"k": null}')

        assert isinstance(result, JsonObject)
        assert "k" in result
        assert result["k"] == JsonNull()
        assert result.get("missing") is None
        with pytest.raises(TypeError):
            result.members["k"] = JsonNull()  # type: ignore[index]

    def test_parse_object_directly(self) -> None:
        """parse_object stops after the closing brace."""
        result = parse_object(Cursor('{"a":[]} tail', 0), ParseContext())

        assert isinstance(result, ParseResult)
        assert result.cursor.pos == 8


# ============================================================================
# ARRAYS
# ============================================================================


class TestArrays:
    """Test array parsing."""

    def test_empty_array(self) -> None:
        """[] has no items."""
        assert parse("[ ]") == JsonArray(())

    def test_mixed_items(self) -> None:
        """Items of any kind, in order."""
        result = parse('[1, "two", [3], {"four": 4}, null]')

        assert isinstance(result, JsonArray)
        assert [item.kind for item in result] == ["integer", "string", "array", "object", "null"]

    def test_trailing_comma(self) -> None:
        """[1,] fails at the closing bracket."""
        error = _error("[1,]")

        assert error.message == "Unexpected character ']' while parsing a value"
        assert error.position == 3

    def test_missing_comma(self) -> None:
        """[1 2] fails at the second value."""
        error = _error("[1 2]")

        assert error.message == "Expected ','"
        assert error.position == 3

    def test_unclosed_array(self) -> None:
        """EOF inside an array."""
        error = _error("[1,")

        assert error.message == "Unexpected end of input while expecting a value"

    def test_parse_array_directly(self) -> None:
        """parse_array stops after the closing bracket."""
        result = parse_array(Cursor("[[],[]],", 0), ParseContext())

        assert isinstance(result, ParseResult)
        assert result.cursor.pos == 7


# ============================================================================
# TOP LEVEL
# ============================================================================


class TestTopLevel:
    """Test the document-level contract."""

    def test_string_document(self) -> None:
        """A bare string is a valid document."""
        assert parse('"A"') == JsonString("A")

    def test_trailing_characters(self) -> None:
        """truex is not true followed by garbage that is ignored."""
        error = _error("truex")

        assert error.message == "Trailing characters after valid JSON value"
        assert error.position == 4

    def test_two_values(self) -> None:
        """Only one top-level value is allowed."""
        assert _error("1 2").column == 3

    def test_line_numbers_in_multiline_document(self) -> None:
        """Errors on later lines report the right line and column."""
        error = _error('{\n  "a": 01\n}')

        assert (error.line, error.column) == (2, 8)

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ('"\x01"', "Unescaped control character in string at line 1, col 3"),
            ('"\\q"', "Invalid escape character '\\q' at line 1, col 4"),
            ('"\\', "Unterminated escape sequence in string at line 1, col 3"),
            ('"\\u12"', "Incomplete \\u escape at line 1, col 4"),
            ('"\\u12G4"', "Invalid hex digit in \\u escape at line 1, col 7"),
            ("trux", 'Expected "true" at line 1, col 5'),
        ],
    )
    def test_rejected_character_reported_after_itself(self, source: str, expected: str) -> None:
        """Errors raised after consuming a bad character point just past it."""
        assert _error(source).format_error() == expected

    def test_non_str_input_raises_type_error(self) -> None:
        """None and bytes are usage errors, not syntax errors."""
        with pytest.raises(TypeError, match="must be str"):
            parse(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            try_parse(b"[]")  # type: ignore[arg-type]

    def test_parse_raises_json_syntax_error(self) -> None:
        """parse() raises with the formatted message and location."""
        with pytest.raises(JsonSyntaxError) as exc_info:
            parse("01")

        error = exc_info.value
        assert str(error) == "Numbers with leading zero are invalid at line 1, col 1"
        assert (error.line, error.column, error.position) == (1, 1, 0)
        assert error.message == "Numbers with leading zero are invalid"
        assert error.diagnostic.code == DiagnosticCode.NUMBER_LEADING_ZERO

    def test_form_feed_is_not_whitespace(self) -> None:
        """Only the four RFC 8259 whitespace characters are skipped."""
        assert _error("\f1").code == DiagnosticCode.UNEXPECTED_CHARACTER

    def test_lone_surrogates_default(self) -> None:
        """Default parse keeps an escaped pair as two code units."""
        result = parse('"\\ud83d\\ude00"')

        assert isinstance(result, JsonString)
        assert result.value == "\ud83d\ude00"
        assert result.has_lone_surrogates()

    def test_surrogates_combined_option(self) -> None:
        """combine_surrogates=True yields one scalar value."""
        result = parse('"\\ud83d\\ude00"', combine_surrogates=True)

        assert result == JsonString("\U0001f600")
        assert isinstance(result, JsonString)
        assert not result.has_lone_surrogates()

    def test_surrogates_combined_in_keys(self) -> None:
        """The option applies to object keys as well."""
        result = parse('{"\\ud83d\\ude00": 1}', combine_surrogates=True)

        assert isinstance(result, JsonObject)
        assert list(result.keys()) == ["\U0001f600"]


# ============================================================================
# LIMITS AND CONFIGURATION
# ============================================================================


class TestLimits:
    """Test size and depth limits."""

    def test_depth_limit(self) -> None:
        """Opening one container past the limit fails at its bracket."""
        error = _error("[[[1]]]", max_nesting_depth=2)

        assert error.message == "Maximum nesting depth of 2 exceeded"
        assert error.position == 2
        assert error.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED

    def test_depth_limit_exact(self) -> None:
        """Exactly max_nesting_depth levels are allowed."""
        assert parse('[{"a":[]}]', max_nesting_depth=3) is not None

    def test_default_depth_is_safe(self) -> None:
        """Deep input fails cleanly instead of exhausting the stack."""
        source = "[" * 100_000 + "]" * 100_000
        error = _error(source)

        assert error.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED

    def test_source_size_limit(self) -> None:
        """Oversize input is a ValueError before scanning."""
        with pytest.raises(ValueError, match="exceeds maximum"):
            parse("[1, 2, 3]", max_source_size=4)

    def test_source_size_limit_disabled(self) -> None:
        """max_source_size=0 disables the check."""
        assert parse("[1, 2, 3]", max_source_size=0) is not None

    @pytest.mark.parametrize(
        "options",
        [
            {"max_source_size": -1},
            {"max_nesting_depth": 0},
            {"duplicate_keys": "first_wins"},
        ],
    )
    def test_invalid_configuration(self, options: dict[str, object]) -> None:
        """Bad constructor arguments raise ValueError."""
        with pytest.raises(ValueError):
            JsonParser(**options)  # type: ignore[arg-type]

    def test_parser_properties(self) -> None:
        """Configuration is readable back."""
        parser = JsonParser(
            max_nesting_depth=10,
            duplicate_keys=DuplicateKeyPolicy.REJECT,
            combine_surrogates=True,
        )

        assert parser.max_nesting_depth == 10
        assert parser.duplicate_keys is DuplicateKeyPolicy.REJECT
        assert parser.combine_surrogates is True
        assert parser.max_source_size > 0

    def test_depth_clamped_to_recursion_limit(self, caplog: pytest.LogCaptureFixture) -> None:
        """Requests beyond the interpreter's recursion budget are clamped."""
        with caplog.at_level(logging.WARNING, logger="strictjson.core.depth_guard"):
            parser = JsonParser(max_nesting_depth=10**9)

        assert parser.max_nesting_depth < 10**9
        assert "Clamping" in caplog.text

    def test_parser_is_reusable(self) -> None:
        """One parser instance handles many documents."""
        parser = JsonParser()

        assert parser.parse("1") == JsonInteger(1)
        assert isinstance(parser.try_parse("{"), ParseError)
        assert parser.parse("[]") == JsonArray()

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Parse start and failure are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="strictjson.syntax.parser.core"):
            try_parse("[1,")

        assert "Parsing JSON source (3 characters)" in caplog.text
        assert "JSON parse failed" in caplog.text


# ============================================================================
# PROPERTIES
# ============================================================================


class TestParserProperties:
    """Property tests against the standard library encoder."""

    @given(json_documents)
    def test_round_trip_through_json_dumps(self, document: object) -> None:
        """text -> tree -> python equals the encoded value."""
        assert to_python(parse(json.dumps(document, ensure_ascii=False))) == document

    @given(json_documents)
    def test_round_trip_stable(self, document: object) -> None:
        """text -> tree -> text -> tree gives an equal tree."""
        first = parse(json.dumps(document))
        second = parse(json.dumps(to_python(first)))

        assert first == second

    @given(json_documents, json_whitespace, json_whitespace)
    def test_whitespace_insensitive(self, document: object, before: str, after: str) -> None:
        """Insignificant whitespace never changes the result."""
        text = json.dumps(document, indent=1)

        assert parse(before + text + after) == parse(json.dumps(document))

    def test_float_tier_value(self) -> None:
        """1e400 parses to positive infinity."""
        result = parse("[1e400]")

        assert isinstance(result, JsonArray)
        assert isinstance(result[0], JsonFloat)
