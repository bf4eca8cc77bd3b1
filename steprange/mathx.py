"""Numeric helpers used by Range.

Stepping a float range by repeated addition drifts (``0.1 + 0.2`` is not
``0.3``). Range works around that by rounding every produced value to the
largest number of decimal digits found among its bounds and step, so these
helpers deal with decimal digit counts and decimal rounding of floats.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, TypeAlias

from steprange.util import DEFAULT_STEP

Number: TypeAlias = int | float

# Enough significant digits to quantize any finite float to MAX_PRECISION places
_DECIMAL_CONTEXT_PRECISION = 450


def get_precision(value: Number) -> int:
    """Return the number of significant fractional digits of ``value``.

    The count is read from the shortest decimal representation, so
    ``0.1`` has one digit, ``1e-07`` has seven and ``2.0`` has none.

    Example:
        >>> get_precision(0.25)
        2
        >>> get_precision(1.5e-07)
        8
    """
    if isinstance(value, int) or not math.isfinite(value):
        return 0

    mantissa, _, exponent = repr(abs(float(value))).partition("e")
    _, _, fraction = mantissa.partition(".")
    digits = len(fraction.rstrip("0")) - (int(exponent) if exponent else 0)
    return max(digits, 0)


def modulo(number: Number, divisor: Number) -> Number:
    """True modulo: the result takes the sign of the divisor.

    For a positive divisor the remainder is never negative, whatever the
    sign of ``number``: ``modulo(-2, 10) == 8``.
    """
    return number % divisor


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def to_fixed(value: Number, precision: int) -> Number:
    """Round ``value`` to ``precision`` decimal places, halves away from zero.

    Rounding works on the exact decimal expansion of the float (no banker's
    rounding). Ints, infinities and NaN are returned unchanged.
    """
    if isinstance(value, int) or not math.isfinite(value):
        return value

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_CONTEXT_PRECISION
        rounded = Decimal(value).quantize(
            Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP
        )
    return float(rounded)


def as_number(value: Any) -> Number:
    """Coerce ``value`` to a number, yielding NaN when that is not possible.

    Ints and floats pass through, booleans become ints, numeric strings are
    parsed and objects implementing ``__float__`` are converted.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def normalize_step(step: Any = DEFAULT_STEP) -> Number:
    """Validate a step size, falling back to the default for NaN/missing input.

    Raises:
        ValueError: If the step is zero or negative
    """
    value = as_number(step)
    if math.isnan(value):
        return DEFAULT_STEP
    if value <= 0:
        raise ValueError(
            f"Step cannot be 0 or negative number, got {step!r}.\n"
            f"Direction comes from the bounds, not the step sign.\n"
            f"Hint: Use a positive step and swap the bounds to walk downwards:\n"
            f"  Range(10, 0, 2)  # 10, 8, 6, 4, 2, 0"
        )
    return value
