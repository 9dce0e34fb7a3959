"""Numeric classification for JSON number literals.

A syntactically valid literal maps to exactly one numeric variant, decided
from its lexical form alone, in a fixed three-tier order:

1. Exact integer: no fraction/exponent and inside the signed 64-bit range
   -> JsonInteger
2. Exact decimal: fits the 128-bit decimal limits (96-bit coefficient,
   scale 0..28 after trailing zeros are removed) -> JsonDecimal
3. Approximate float: everything else -> JsonFloat (inf/0.0 on
   overflow/underflow; this tier never fails)

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from strictjson.constants import (
    DECIMAL_MAX_COEFFICIENT,
    DECIMAL_MAX_SCALE,
    INT64_MAX,
    INT64_MIN,
)

from .values import JsonDecimal, JsonFloat, JsonInteger, JsonNumber

__all__ = ["classify_number", "fits_decimal", "fits_int64"]

# 2**96 - 1 has 29 digits; INT64_MAX has 19.
_MAX_COEFFICIENT_DIGITS: int = len(str(DECIMAL_MAX_COEFFICIENT))
_MAX_INT64_DIGITS: int = len(str(INT64_MAX))


def fits_int64(value: int) -> bool:
    """Check the signed 64-bit integer range."""
    return INT64_MIN <= value <= INT64_MAX


def fits_decimal(value: Decimal) -> bool:
    """Check whether value is exactly representable within decimal limits.

    Trailing zeros of the coefficient are dropped first, so ``1.000`` has
    scale 0 and ``1E+3`` is the integer 1000. Works on the digit tuple so
    that literals with thousands of digits are rejected without building
    huge integers.

    Args:
        value: Decimal built from a JSON literal

    Returns:
        True if coefficient <= 2**96 - 1 and 0 <= scale <= 28

    Example:
        >>> fits_decimal(Decimal("123456789012345678901"))
        True
        >>> fits_decimal(Decimal("1e400"))
        False
        >>> fits_decimal(Decimal("1e-29"))
        False
    """
    if not value.is_finite():
        return False

    _, digits, exponent = value.as_tuple()
    assert isinstance(exponent, int)  # finite decimals carry an int exponent

    significant = len(digits)
    while significant and digits[significant - 1] == 0:
        significant -= 1
        exponent += 1
    if significant == 0:
        return True

    if exponent < 0 and -exponent > DECIMAL_MAX_SCALE:
        return False
    scaled_digits = significant + max(exponent, 0)
    if scaled_digits > _MAX_COEFFICIENT_DIGITS:
        return False

    coefficient = int("".join(map(str, digits[:significant]))) * 10 ** max(exponent, 0)
    return coefficient <= DECIMAL_MAX_COEFFICIENT


def classify_number(literal: str, *, integral: bool) -> JsonNumber:
    """Convert a validated number lexeme to its numeric variant.

    Args:
        literal: Complete lexeme as matched by the number grammar
        integral: True when the lexeme has no fraction and no exponent

    Returns:
        JsonInteger, JsonDecimal or JsonFloat

    Example:
        >>> classify_number("42", integral=True)
        JsonInteger(value=42)
        >>> classify_number("12.5", integral=False)
        JsonDecimal(value=Decimal('12.5'))
        >>> classify_number("1e400", integral=False)
        JsonFloat(value=inf)
    """
    # int() refuses very long digit strings (sys.int_info.str_digits_check_threshold);
    # anything past 19 digits is outside int64 anyway.
    if integral and len(literal.lstrip("-")) <= _MAX_INT64_DIGITS:
        as_int = int(literal)
        if fits_int64(as_int):
            return JsonInteger(as_int)

    try:
        as_decimal = Decimal(literal)
    except ArithmeticError:
        # Exponent beyond the decimal module's own range
        as_decimal = None
    if as_decimal is not None and fits_decimal(as_decimal):
        return JsonDecimal(as_decimal)

    return JsonFloat(float(literal))
