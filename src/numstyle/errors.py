"""Exception hierarchy for numstyle.

Only caller errors raise. Unformattable values (NaN, non-numeric input) are
signalled by a ``None`` result instead, and numeric edge cases degrade to
documented strings.
"""

from __future__ import annotations


class NumberFormatError(Exception):
    """Base exception for formatting errors."""

    def __init__(self, message: str, style: str | None = None) -> None:
        self.style = style
        super().__init__(f"[{style}] {message}" if style else message)


class InvalidCurrencyCodeError(NumberFormatError, ValueError):
    """Currency code is malformed or not a known ISO 4217 code."""

    def __init__(self, code: str, style: str | None = None) -> None:
        self.code = code
        super().__init__(f"Invalid ISO 4217 currency code: {code!r}", style)


class RomanNumeralError(NumberFormatError, ValueError):
    """Text is not a canonical Roman numeral."""

    def __init__(self, text: str, reason: str = "not a canonical Roman numeral") -> None:
        self.text = text
        super().__init__(f"{text!r} is {reason}")


class ConfigError(NumberFormatError):
    """Invalid formatter configuration."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(f"{key}: {message}" if key else message)
