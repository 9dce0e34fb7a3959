"""JSON syntax package.

Provides the parser, value tree definitions and visitor pattern.

Python 3.13+.
"""

from strictjson.enums import DuplicateKeyPolicy

from .cursor import Cursor, ParseError, ParseResult
from .parser import JsonParser
from .values import (
    JsonArray,
    JsonBool,
    JsonDecimal,
    JsonFloat,
    JsonInteger,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .visitor import JsonVisitor, to_python

__all__ = [
    "Cursor",
    "JsonArray",
    "JsonBool",
    "JsonDecimal",
    "JsonFloat",
    "JsonInteger",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonValue",
    "JsonVisitor",
    "ParseError",
    "ParseResult",
    "parse",
    "to_python",
    "try_parse",
]


def parse(
    source: str,
    *,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
    duplicate_keys: DuplicateKeyPolicy | str = DuplicateKeyPolicy.LAST_WINS,
    combine_surrogates: bool = False,
) -> JsonValue:
    """Parse JSON text into a value tree.

    Convenience function for JsonParser(...).parse().

    Args:
        source: JSON document
        max_source_size: Maximum source length (default: 10 MiB, 0 disables)
        max_nesting_depth: Maximum array/object nesting (default: 200)
        duplicate_keys: "last_wins" (default) or "reject"
        combine_surrogates: Merge escaped surrogate pairs (default: False)

    Returns:
        The root JsonValue

    Raises:
        JsonSyntaxError: On the first grammar violation
        TypeError: If source is not a str
        ValueError: If source exceeds max_source_size

    Example:
        >>> from strictjson.syntax import parse
        >>> parse('{"a": 1, "a": 2}')["a"]
        JsonInteger(value=2)
    """
    parser = JsonParser(
        max_source_size=max_source_size,
        max_nesting_depth=max_nesting_depth,
        duplicate_keys=duplicate_keys,
        combine_surrogates=combine_surrogates,
    )
    return parser.parse(source)


def try_parse(
    source: str,
    *,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
    duplicate_keys: DuplicateKeyPolicy | str = DuplicateKeyPolicy.LAST_WINS,
    combine_surrogates: bool = False,
) -> JsonValue | ParseError:
    """Parse JSON text, returning a ParseError value instead of raising.

    Convenience function for JsonParser(...).try_parse(). Takes the same
    options as parse().

    Example:
        >>> from strictjson.syntax import try_parse
        >>> try_parse('{"a":1,}').column
        8
    """
    parser = JsonParser(
        max_source_size=max_source_size,
        max_nesting_depth=max_nesting_depth,
        duplicate_keys=duplicate_keys,
        combine_surrogates=combine_surrogates,
    )
    return parser.try_parse(source)
