"""JSON value tree node definitions.

A closed tagged union: every parsed document is one of eight frozen
dataclasses, combined in the ``JsonValue`` type alias. Consumers match on
the variants (``match value: case JsonObject(members=m): ...``) instead of
inspecting loosely typed Python objects.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import ClassVar

from strictjson.constants import INT64_MAX, INT64_MIN
from strictjson.enums import JsonKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scalars
    "JsonNull",
    "JsonBool",
    "JsonInteger",
    "JsonDecimal",
    "JsonFloat",
    "JsonString",
    # Containers
    "JsonArray",
    "JsonObject",
    # Type aliases
    "JsonNumber",
    "JsonValue",
]

# ============================================================================
# SCALARS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The ``null`` literal. All instances compare equal."""

    kind: ClassVar[JsonKind] = JsonKind.NULL


@dataclass(frozen=True, slots=True)
class JsonBool:
    """``true`` or ``false``."""

    value: bool
    kind: ClassVar[JsonKind] = JsonKind.BOOL


@dataclass(frozen=True, slots=True)
class JsonInteger:
    """Integral number inside the signed 64-bit range.

    Produced only for literals without fraction or exponent. Larger
    integral literals become JsonDecimal (or JsonFloat).
    """

    value: int
    kind: ClassVar[JsonKind] = JsonKind.INTEGER

    def __post_init__(self) -> None:
        """Validate the signed 64-bit range."""
        if not INT64_MIN <= self.value <= INT64_MAX:
            msg = f"JsonInteger value {self.value} is outside the signed 64-bit range"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class JsonDecimal:
    """Exact decimal number.

    Holds ``Decimal(literal)`` unchanged, so ``1.50`` keeps its trailing zero
    in ``str()`` while comparing equal to ``Decimal("1.5")``.
    """

    value: Decimal
    kind: ClassVar[JsonKind] = JsonKind.DECIMAL


@dataclass(frozen=True, slots=True)
class JsonFloat:
    """Binary double approximation for literals beyond decimal limits.

    May be ``inf``/``-inf`` (overflow) or ``0.0`` (underflow); never NaN,
    because the grammar has no NaN literal.
    """

    value: float
    kind: ClassVar[JsonKind] = JsonKind.FLOAT


@dataclass(frozen=True, slots=True)
class JsonString:
    """Decoded string literal.

    By default each ``\\uXXXX`` escape is one code point, so an escaped
    surrogate pair is stored as two lone surrogates (UTF-16 code unit
    semantics). Parse with ``combine_surrogates=True`` to merge pairs.
    """

    value: str
    kind: ClassVar[JsonKind] = JsonKind.STRING

    def has_lone_surrogates(self) -> bool:
        """Check for code points in U+D800..U+DFFF (not encodable as UTF-8)."""
        return any(0xD800 <= ord(ch) <= 0xDFFF for ch in self.value)


# ============================================================================
# CONTAINERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonArray:
    """Ordered sequence of values."""

    items: tuple["JsonValue", ...] = ()
    kind: ClassVar[JsonKind] = JsonKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["JsonValue"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "JsonValue":
        return self.items[index]


@dataclass(frozen=True, slots=True)
class JsonObject:
    """String-keyed mapping of values.

    Keys are unique. Iteration follows first-insertion order even though
    JSON semantics do not require it, so traversal is deterministic.
    Equality ignores order, like ``dict``.

    The members mapping is a read-only view; passing a plain dict copies it.
    """

    members: Mapping[str, "JsonValue"] = field(default_factory=dict)
    kind: ClassVar[JsonKind] = JsonKind.OBJECT

    def __post_init__(self) -> None:
        """Freeze members behind a read-only proxy."""
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> "JsonValue":
        return self.members[key]

    def get(self, key: str, default: "JsonValue | None" = None) -> "JsonValue | None":
        """Return the value for key, or default when absent."""
        return self.members.get(key, default)

    def keys(self) -> Iterator[str]:
        """Keys in insertion order."""
        return iter(self.members.keys())

    def items(self) -> Iterator[tuple[str, "JsonValue"]]:
        """(key, value) pairs in insertion order."""
        return iter(self.members.items())


# ============================================================================
# TYPE ALIASES
# ============================================================================

type JsonNumber = JsonInteger | JsonDecimal | JsonFloat

type JsonValue = (
    JsonNull
    | JsonBool
    | JsonInteger
    | JsonDecimal
    | JsonFloat
    | JsonString
    | JsonArray
    | JsonObject
)
