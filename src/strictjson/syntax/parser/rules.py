"""Grammar rules for the JSON parser.

Recursive descent over RFC 8259:

    value  = object / array / string / number / "true" / "false" / "null"
    object = "{" [ member *( "," member ) ] "}"
    member = string ":" value
    array  = "[" [ value *( "," value ) ] "]"

Each rule takes a Cursor plus the ParseContext and returns
``ParseResult[T] | ParseError``. One nesting level costs two interpreter
frames (parse_value plus parse_object/parse_array).
"""

from dataclasses import dataclass

from strictjson.constants import ASCII_DIGITS, MAX_DEPTH
from strictjson.diagnostics import ErrorTemplate
from strictjson.enums import DuplicateKeyPolicy
from strictjson.syntax.cursor import Cursor, ParseError, ParseResult
from strictjson.syntax.parser.primitives import (
    parse_literal,
    parse_number,
    parse_string,
)
from strictjson.syntax.parser.whitespace import skip_whitespace
from strictjson.syntax.values import (
    JsonArray,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = ["ParseContext", "parse_array", "parse_object", "parse_value"]


@dataclass(slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Passed down the recursion instead of living on the parser, so one
    JsonParser can serve concurrent calls.

    Attributes:
        max_nesting_depth: Maximum number of nested arrays/objects
        current_depth: Current nesting depth (0 = top level)
        duplicate_keys: What to do with a repeated object key
        combine_surrogates: Merge escaped surrogate pairs in strings
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS
    combine_surrogates: bool = False

    def is_depth_exceeded(self) -> bool:
        """Check if opening another container would exceed the limit."""
        return self.current_depth >= self.max_nesting_depth

    def enter_container(self) -> "ParseContext":
        """Create new context with incremented depth for entering an array/object."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
            duplicate_keys=self.duplicate_keys,
            combine_surrogates=self.combine_surrogates,
        )


def parse_value(cursor: Cursor, context: ParseContext) -> ParseResult[JsonValue] | ParseError:
    """Parse any JSON value, dispatching on the first significant character.

    Args:
        cursor: Current position (leading whitespace allowed)
        context: Parse configuration and depth

    Returns:
        ParseResult with the value, or ParseError
    """
    cursor = skip_whitespace(cursor)
    if cursor.is_eof:
        return cursor.error(ErrorTemplate.value_expected_at_eof())

    match cursor.current:
        case "{":
            return parse_object(cursor, context)
        case "[":
            return parse_array(cursor, context)
        case '"':
            string_result = parse_string(cursor, combine_surrogates=context.combine_surrogates)
            if isinstance(string_result, ParseError):
                return string_result
            return ParseResult(JsonString(string_result.value), string_result.cursor)
        case "t":
            return parse_literal(cursor, "true")
        case "f":
            return parse_literal(cursor, "false")
        case "n":
            return parse_literal(cursor, "null")
        case ch if ch == "-" or ch in ASCII_DIGITS:
            return parse_number(cursor)
        case ch:
            return cursor.error(ErrorTemplate.unexpected_character(ch))


def parse_object(cursor: Cursor, context: ParseContext) -> ParseResult[JsonObject] | ParseError:
    """Parse object: '{' [ member *( ',' member ) ] '}'

    Duplicate keys follow context.duplicate_keys: LAST_WINS overwrites the
    earlier value in place (the key keeps its first position), REJECT fails
    at the opening quote of the repeated key.

    Args:
        cursor: Position of '{'
        context: Parse configuration and depth

    Returns:
        ParseResult with JsonObject, or ParseError
    """
    if context.is_depth_exceeded():
        return cursor.error(ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth))
    nested = context.enter_container()

    cursor = skip_whitespace(cursor.advance())  # Skip '{'
    members: dict[str, JsonValue] = {}

    closed = cursor.try_consume("}")
    if closed is not None:
        return ParseResult(JsonObject(members), closed)

    while True:
        cursor = skip_whitespace(cursor)
        if cursor.is_eof or cursor.current != '"':
            return cursor.error(ErrorTemplate.invalid_object_key())

        key_start = cursor
        key_result = parse_string(cursor, combine_surrogates=context.combine_surrogates)
        if isinstance(key_result, ParseError):
            return key_result
        key = key_result.value

        if key in members and context.duplicate_keys is DuplicateKeyPolicy.REJECT:
            return key_start.error(ErrorTemplate.duplicate_object_key(key))

        colon = key_result.cursor.expect(":")
        if isinstance(colon, ParseError):
            return colon

        value_result = parse_value(colon, nested)
        if isinstance(value_result, ParseError):
            return value_result
        members[key] = value_result.value

        cursor = skip_whitespace(value_result.cursor)
        closed = cursor.try_consume("}")
        if closed is not None:
            return ParseResult(JsonObject(members), closed)

        comma = cursor.expect(",")
        if isinstance(comma, ParseError):
            return comma
        cursor = comma


def parse_array(cursor: Cursor, context: ParseContext) -> ParseResult[JsonArray] | ParseError:
    """Parse array: '[' [ value *( ',' value ) ] ']'

    Args:
        cursor: Position of '['
        context: Parse configuration and depth

    Returns:
        ParseResult with JsonArray, or ParseError
    """
    if context.is_depth_exceeded():
        return cursor.error(ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth))
    nested = context.enter_container()

    cursor = skip_whitespace(cursor.advance())  # Skip '['
    items: list[JsonValue] = []

    closed = cursor.try_consume("]")
    if closed is not None:
        return ParseResult(JsonArray(tuple(items)), closed)

    while True:
        value_result = parse_value(cursor, nested)
        if isinstance(value_result, ParseError):
            return value_result
        items.append(value_result.value)

        cursor = skip_whitespace(value_result.cursor)
        closed = cursor.try_consume("]")
        if closed is not None:
            return ParseResult(JsonArray(tuple(items)), closed)

        comma = cursor.expect(",")
        if isinstance(comma, ParseError):
            return comma
        cursor = comma
