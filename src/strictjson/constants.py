"""Shared constants for strictjson.

Centralized configuration constants used across the syntax, core and
diagnostics packages. Placing them here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and tree traversal
- Input limits: DoS prevention via size constraints
- Numeric limits: Thresholds for integer/decimal/float classification

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Numeric limits
    "INT64_MIN",
    "INT64_MAX",
    "DECIMAL_MAX_SCALE",
    "DECIMAL_MAX_COEFFICIENT",
    # Grammar character classes
    "WHITESPACE_CHARS",
    "ASCII_DIGITS",
    "HEX_DIGITS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# One limit is shared by the parser (array/object nesting) and the tree
# visitors (to_python and custom JsonVisitor subclasses). A tree the parser
# accepts can therefore always be traversed with default settings.
#
# Each nesting level costs two interpreter frames during parsing
# (parse_value -> parse_array/parse_object), so 200 levels stays well inside
# the default recursion limit of 1000.
# ============================================================================

MAX_DEPTH: int = 200

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Prevents DoS attacks via unbounded memory allocation from huge documents.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Integral literals inside this range become JsonInteger.
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Decimal limits mirror a 128-bit decimal type: a 96-bit unsigned
# coefficient and a scale (digits after the point) of at most 28.
# Literals outside these limits fall back to JsonFloat.
DECIMAL_MAX_SCALE: int = 28
DECIMAL_MAX_COEFFICIENT: int = 2**96 - 1

# ============================================================================
# GRAMMAR CHARACTER CLASSES
# ============================================================================

# RFC 8259 insignificant whitespace: space, tab, LF, CR.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\r")

# ASCII digits only; str.isdigit() accepts Unicode digits like "²".
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")
