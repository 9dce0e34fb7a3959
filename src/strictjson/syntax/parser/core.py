"""Core JSON parser implementation.

This module provides the JsonParser class that orchestrates parsing of JSON
text into the value tree defined in :mod:`strictjson.syntax.values`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~strictjson.syntax.cursor.Cursor`)
    to traverse source text. Each sub-parser (in :mod:`~strictjson.syntax.parser.rules`
    and :mod:`~strictjson.syntax.parser.primitives`) returns either a
    :class:`~strictjson.syntax.cursor.ParseResult` containing the parsed value
    and updated cursor position, or a :class:`~strictjson.syntax.cursor.ParseError`.

Security:
    Includes configurable input size and nesting depth limits to prevent
    DoS via unbounded memory allocation or stack exhaustion.

See Also:
    - :mod:`strictjson.syntax.values` - Value tree node types
    - :mod:`strictjson.syntax.cursor` - Cursor, ParseResult and ParseError
    - :mod:`strictjson.syntax.parser.rules` - Grammar rules
"""

import logging

from strictjson.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from strictjson.core.depth_guard import depth_clamp
from strictjson.diagnostics import ErrorTemplate, JsonSyntaxError
from strictjson.enums import DuplicateKeyPolicy
from strictjson.syntax.cursor import Cursor, ParseError
from strictjson.syntax.parser.rules import ParseContext, parse_value
from strictjson.syntax.parser.whitespace import skip_whitespace
from strictjson.syntax.values import JsonValue

__all__ = ["JsonParser"]

logger = logging.getLogger(__name__)

# parse_value + parse_object/parse_array per nesting level
_FRAMES_PER_LEVEL: int = 2


class JsonParser:
    """Strict RFC 8259 JSON parser using the immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Grammar failures are values; parse() raises, try_parse() returns them
    - Error messages include line:column with source context

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MiB characters
    - Configurable max_nesting_depth prevents stack exhaustion from
      deeply nested [[[[...]]]] input

    Thread Safety:
    - Holds configuration only; every call builds its own cursor and
      context, so one instance may be shared between threads.

    Attributes:
        max_source_size: Maximum allowed source length in characters
        max_nesting_depth: Maximum nested arrays/objects
        duplicate_keys: Policy for repeated object keys
        combine_surrogates: Whether escaped surrogate pairs are merged
    """

    __slots__ = (
        "_combine_surrogates",
        "_duplicate_keys",
        "_max_nesting_depth",
        "_max_source_size",
    )

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
        duplicate_keys: DuplicateKeyPolicy | str = DuplicateKeyPolicy.LAST_WINS,
        combine_surrogates: bool = False,
    ) -> None:
        """Initialize parser with optional limits and decoding options.

        Args:
            max_source_size: Maximum source length (default: 10 MiB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 200).
                              Clamped against the interpreter recursion limit.
                              Tree visitors default to the same 200 levels;
                              when raising this limit, pass it on, e.g.
                              to_python(tree, max_depth=parser.max_nesting_depth).
            duplicate_keys: "last_wins" (default) or "reject"
            combine_surrogates: Merge \\uD83D\\uDE00 style pairs into one
                               code point (default: keep code units)

        Raises:
            ValueError: If a limit is negative, max_nesting_depth is 0, or
                duplicate_keys names no known policy
        """
        source_limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        if source_limit < 0:
            msg = f"max_source_size must be >= 0, got {source_limit}"
            raise ValueError(msg)

        depth_limit = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        if depth_limit < 1:
            msg = f"max_nesting_depth must be >= 1, got {depth_limit}"
            raise ValueError(msg)

        self._max_source_size = source_limit
        self._max_nesting_depth = depth_clamp(depth_limit, frames_per_level=_FRAMES_PER_LEVEL)
        self._duplicate_keys = DuplicateKeyPolicy(duplicate_keys)
        self._combine_surrogates = combine_surrogates

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source length in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    @property
    def duplicate_keys(self) -> DuplicateKeyPolicy:
        """Policy for repeated object keys."""
        return self._duplicate_keys

    @property
    def combine_surrogates(self) -> bool:
        """Whether escaped surrogate pairs are merged."""
        return self._combine_surrogates

    def parse(self, source: str) -> JsonValue:
        """Parse JSON text into a value tree.

        Args:
            source: Complete JSON document

        Returns:
            The root JsonValue

        Raises:
            TypeError: If source is not a str (including None)
            ValueError: If source exceeds max_source_size (DoS prevention)
            JsonSyntaxError: On the first grammar violation

        Example:
            >>> parser = JsonParser()
            >>> parser.parse('{"a": [1, 2]}')["a"][1]
            JsonInteger(value=2)
            >>> parser.parse("truex")
            Traceback (most recent call last):
                ...
            strictjson.diagnostics.errors.JsonSyntaxError: Trailing characters after valid JSON value at line 1, col 5
        """
        result = self.try_parse(source)
        if isinstance(result, ParseError):
            raise JsonSyntaxError(result)
        return result

    def try_parse(self, source: str) -> JsonValue | ParseError:
        """Parse JSON text, returning grammar violations as values.

        Usage errors (wrong type, oversize input) still raise: they are not
        properties of the JSON text.

        Args:
            source: Complete JSON document

        Returns:
            The root JsonValue, or the ParseError for the first violation

        Raises:
            TypeError: If source is not a str (including None)
            ValueError: If source exceeds max_source_size

        Example:
            >>> error = JsonParser().try_parse("01")
            >>> error.format_error()
            'Numbers with leading zero are invalid at line 1, col 1'
        """
        if not isinstance(source, str):
            msg = f"JSON source must be str, got {type(source).__name__}"
            raise TypeError(msg)

        # Validate input size (DoS prevention)
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in JsonParser constructor to increase limit."
            )
            raise ValueError(msg)

        logger.debug("Parsing JSON source (%d characters)", len(source))

        context = ParseContext(
            max_nesting_depth=self._max_nesting_depth,
            duplicate_keys=self._duplicate_keys,
            combine_surrogates=self._combine_surrogates,
        )
        result = parse_value(Cursor(source, 0), context)
        if isinstance(result, ParseError):
            logger.debug("JSON parse failed: %s", result.format_error())
            return result

        cursor = skip_whitespace(result.cursor)
        if not cursor.is_eof:
            error = cursor.error(ErrorTemplate.trailing_characters())
            logger.debug("JSON parse failed: %s", error.format_error())
            return error

        return result.value
