"""Enumerations for strictjson type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class JsonKind(StrEnum):
    """Variant tag of a parsed JSON value.

    StrEnum provides automatic string conversion: str(JsonKind.OBJECT) == "object"
    """

    NULL = "null"
    """The null literal"""

    BOOL = "bool"
    """true or false"""

    INTEGER = "integer"
    """Integral number within the signed 64-bit range"""

    DECIMAL = "decimal"
    """Fractional/exponent number (or oversized integer) within decimal limits"""

    FLOAT = "float"
    """Number outside decimal limits, approximated as a double"""

    STRING = "string"
    """String literal with escapes decoded"""

    ARRAY = "array"
    """Ordered sequence of values"""

    OBJECT = "object"
    """String-keyed mapping of values"""


class DuplicateKeyPolicy(StrEnum):
    """How the parser treats a key repeated inside one object.

    StrEnum provides automatic string conversion: str(DuplicateKeyPolicy.REJECT) == "reject"
    """

    LAST_WINS = "last_wins"
    """Later value overwrites the earlier one; key keeps its first position"""

    REJECT = "reject"
    """Repeated key is a syntax error"""


__all__ = [
    "DuplicateKeyPolicy",
    "JsonKind",
]
