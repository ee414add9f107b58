"""Roman numerals and English ordinals."""

from __future__ import annotations

import logging
import re

from numstyle.errors import RomanNumeralError

logger = logging.getLogger(__name__)

ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

ROMAN_MIN = 1
ROMAN_MAX = 3999

_ROMAN_VALUES: dict[str, int] = {symbol: value for value, symbol in ROMAN_NUMERALS if len(symbol) == 1}
_ROMAN_CHARS = re.compile(r"^[MDCLXVI]+$")


def to_roman(number: int) -> str:
    """Convert an integer to a Roman numeral.

    Traditional numerals have no zero, negatives, or values past 3999, so
    anything outside [1, 3999] yields an empty string.

    Example:
        to_roman(1994)  # "MCMXCIV"
        to_roman(0)     # ""
    """
    if not ROMAN_MIN <= number <= ROMAN_MAX:
        logger.debug("Roman numeral out of range: %s", number)
        return ""

    result = []
    remaining = number
    for value, symbol in ROMAN_NUMERALS:
        count, remaining = divmod(remaining, value)
        result.append(symbol * count)
        if remaining == 0:
            break
    return "".join(result)


def from_roman(text: str) -> int:
    """Parse a canonical Roman numeral.

    Args:
        text: Numeral (case-insensitive, surrounding whitespace ignored)

    Returns:
        Integer value in [1, 3999]

    Raises:
        RomanNumeralError: For empty, malformed or non-canonical input
            such as "IIII" or "IC"
    """
    numeral = text.strip().upper()
    if not numeral:
        raise RomanNumeralError(text, "empty")
    if not _ROMAN_CHARS.match(numeral):
        raise RomanNumeralError(text, "not made of Roman numeral symbols")

    total = 0
    for current, following in zip(numeral, numeral[1:] + " "):
        value = _ROMAN_VALUES[current]
        if following != " " and value < _ROMAN_VALUES[following]:
            total -= value
        else:
            total += value

    if to_roman(total) != numeral:
        raise RomanNumeralError(text)
    return total


def ordinal_suffix(number: int) -> str:
    """Render an integer with its English ordinal suffix.

    The sign stays in the numeric prefix and the suffix follows the
    magnitude, so -1 is "-1st" and -12 is "-12th".

    Example:
        ordinal_suffix(1)    # "1st"
        ordinal_suffix(12)   # "12th"
        ordinal_suffix(23)   # "23rd"
    """
    magnitude = abs(number)
    last_digit = magnitude % 10
    last_two = magnitude % 100
    if last_digit == 1 and last_two != 11:
        suffix = "st"
    elif last_digit == 2 and last_two != 12:
        suffix = "nd"
    elif last_digit == 3 and last_two != 13:
        suffix = "rd"
    else:
        suffix = "th"
    return f"{number}{suffix}"
