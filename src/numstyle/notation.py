"""Positional and exponential notation.

Plain number-to-string conversion, fixed-point rounding, scientific and
engineering notation, and integer base conversion (hex/binary/octal).

Rounding is always done on the exact binary value of the double, half away
from zero, which is what display code expects (``0.125 -> "0.13"``).

Usage:
    from numstyle.notation import to_exponential, to_engineering, to_base

    to_exponential(12345, 2)      # "1.23e+4"
    to_exponential(12345)         # "1.2345e+4"
    to_engineering(12345)         # "12.35e3"
    to_base(255, 16, "0x")        # "0xFF"
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Wide enough to hold every finite double exactly, with room for scaling.
_CONTEXT = Context(prec=1100, rounding=ROUND_HALF_UP, Emin=-2000, Emax=2000)

# Plain conversion switches to exponent form outside [1e-7, 1e21).
_PLAIN_MAX_POINT = 21
_PLAIN_MIN_POINT = -6

#: Width used to render negative integers in positional bases.
WORD_BITS = 64
_WORD_MASK = (1 << WORD_BITS) - 1

_BASE_SPECS: dict[int, str] = {2: "b", 8: "o", 16: "X"}


# ==============================================================================
# Digit helpers
# ==============================================================================


def shortest_digits(value: float) -> tuple[str, int]:
    """Shortest round-trip digits of a positive finite float.

    Args:
        value: Positive finite value

    Returns:
        (digits, point) where value == 0.<digits> * 10**point
    """
    dec = Decimal(repr(value)).normalize()
    sign, digit_tuple, exponent = dec.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    return digits, len(digits) + int(exponent)


def quantize(value: float, fraction_digits: int) -> Decimal:
    """Round |value| to a fixed number of fraction digits, half away from zero."""
    exact = Decimal(abs(value))
    return exact.quantize(Decimal(1).scaleb(-fraction_digits), context=_CONTEXT)


def fixed_magnitude(value: float, fraction_digits: int) -> str:
    """Fixed-point digits of |value| without sign or grouping."""
    return f"{quantize(value, fraction_digits):f}"


def group_digits(int_part: str, separator: str = ",") -> str:
    """Apply 3-digit grouping to an unsigned integer digit string."""
    groups = []
    while len(int_part) > 3:
        groups.insert(0, int_part[-3:])
        int_part = int_part[:-3]
    groups.insert(0, int_part)
    return separator.join(groups)


# ==============================================================================
# Conversions
# ==============================================================================


def to_plain_string(value: float) -> str:
    """Default number-to-string conversion.

    Integers render without a fractional part, and exponent form is used
    only for very large or very small magnitudes.

    Example:
        to_plain_string(5.0)     # "5"
        to_plain_string(0.1)     # "0.1"
        to_plain_string(1e21)    # "1e+21"
        to_plain_string(1.5e-7)  # "1.5e-7"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = shortest_digits(abs(value))
    k = len(digits)

    if k <= point <= _PLAIN_MAX_POINT:
        body = digits + "0" * (point - k)
    elif 0 < point <= _PLAIN_MAX_POINT:
        body = f"{digits[:point]}.{digits[point:]}"
    elif _PLAIN_MIN_POINT < point <= 0:
        body = "0." + "0" * (-point) + digits
    else:
        body = _exponent_form(digits, point - 1)
    return sign + body


def to_fixed(value: float, fraction_digits: int = 2) -> str:
    """Fixed-point rendering with a leading minus for negative values."""
    if not math.isfinite(value) or abs(value) >= 1e21:
        return to_plain_string(value)
    sign = "-" if value < 0 else ""
    return sign + fixed_magnitude(value, fraction_digits)


def to_exponential(value: float, fraction_digits: int | None = None) -> str:
    """Exponential notation.

    Args:
        value: Value to format
        fraction_digits: Mantissa fraction digits, or None for the shortest
            representation that round-trips

    Returns:
        String like "1.23e+4"; infinities render as "Infinity"/"-Infinity"
    """
    if not math.isfinite(value):
        return to_plain_string(value)

    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    if fraction_digits is None:
        if magnitude == 0:
            return sign + "0e+0"
        digits, point = shortest_digits(magnitude)
        return sign + _exponent_form(digits, point - 1)

    if magnitude == 0:
        mantissa = Decimal(0).quantize(Decimal(1).scaleb(-fraction_digits))
        return f"{sign}{mantissa:f}e+0"

    exact = Decimal(magnitude)
    exponent = exact.adjusted()
    step = Decimal(1).scaleb(-fraction_digits)
    mantissa = exact.scaleb(-exponent, context=_CONTEXT).quantize(step, context=_CONTEXT)
    if mantissa >= 10:
        exponent += 1
        mantissa = exact.scaleb(-exponent, context=_CONTEXT).quantize(step, context=_CONTEXT)
    return f"{sign}{mantissa:f}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def engineering_exponent(value: float) -> int:
    """Largest multiple of 3 not above floor(log10(|value|))."""
    return (Decimal(abs(value)).adjusted() // 3) * 3


def to_engineering(value: float, fraction_digits: int = 2) -> str:
    """Engineering notation: exponent is always a multiple of 3.

    Example:
        to_engineering(12345)     # "12.35e3"
        to_engineering(0.00123)   # "1.23e-3"
        to_engineering(999999)    # "1.00e6"
    """
    if not math.isfinite(value):
        return to_plain_string(value)
    if value == 0:
        return f"{fixed_magnitude(0.0, fraction_digits)}e0"

    sign = "-" if value < 0 else ""
    exact = Decimal(abs(value))
    exponent = engineering_exponent(value)
    step = Decimal(1).scaleb(-fraction_digits)
    mantissa = exact.scaleb(-exponent, context=_CONTEXT).quantize(step, context=_CONTEXT)
    if mantissa >= 1000:
        exponent += 3
        mantissa = exact.scaleb(-exponent, context=_CONTEXT).quantize(step, context=_CONTEXT)
    return f"{sign}{mantissa:f}e{exponent}"


def to_base(value: float, base: int, prefix: str = "") -> str:
    """Truncate to an unsigned integer and render in base 2, 8 or 16.

    Negative values wrap to their WORD_BITS two's complement. Infinities
    have no integer form and use plain conversion.

    Example:
        to_base(255.9, 16, "0x")   # "0xFF"
        to_base(-1, 2, "0b")       # "0b" + "1" * 64
    """
    try:
        spec = _BASE_SPECS[base]
    except KeyError:
        raise ValueError(f"Unsupported base: {base}. Available: 2, 8, 16") from None

    if not math.isfinite(value):
        return to_plain_string(value)

    integer = int(value)
    if integer < 0:
        integer &= _WORD_MASK
    return prefix + format(integer, spec)


def _exponent_form(digits: str, exponent: int) -> str:
    mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
