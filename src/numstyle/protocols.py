"""Core types and protocols for numstyle.

Defines the style tags accepted by the formatter, the request/result value
objects, and the narrow locale-formatting capability that the decimal,
percent and currency styles are routed through.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class NumberStyle(str, Enum):
    """Output style tags.

    The string values are the contract with callers and are matched exactly.
    """

    DECIMAL = "decimal"
    PERCENT = "percent"
    CURRENCY = "currency"
    CURRENCY_SYMBOL_ONLY = "currency-symbol-only"
    CURRENCY_CODE_ONLY = "currency-code-only"
    CURRENCY_NAME_ONLY = "currency-name-only"
    SCIENTIFIC = "scientific"
    ENGINEERING = "engineering"
    HEXADECIMAL = "hexadecimal"
    BINARY = "binary"
    OCTAL = "octal"
    ROMAN = "roman"
    ORDINAL = "ordinal"
    TIME_SECONDS = "time-seconds"
    TIME_MINUTES = "time-minutes"
    TIME_HOURS = "time-hours"
    BYTES = "bytes"
    KILOBYTES = "kilobytes"
    MILLIS = "millis"
    SCIENTIFIC_LONG = "scientific-long"

    @classmethod
    def from_tag(cls, tag: "str | NumberStyle") -> "NumberStyle | None":
        """Resolve a tag string to a style.

        Args:
            tag: Style tag or NumberStyle member.

        Returns:
            Matching style, or None for an unrecognized tag.
        """
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def is_currency(self) -> bool:
        """Check if this style renders a currency amount."""
        return self in _CURRENCY_STYLES

    @property
    def currency_display(self) -> "CurrencyDisplay | None":
        """Currency display mode for currency styles."""
        return _CURRENCY_STYLES.get(self)


class CurrencyDisplay(str, Enum):
    """How the currency is identified next to the amount."""

    SYMBOL = "symbol"
    CODE = "code"
    NAME = "name"


_CURRENCY_STYLES: dict[NumberStyle, CurrencyDisplay] = {
    NumberStyle.CURRENCY: CurrencyDisplay.SYMBOL,
    NumberStyle.CURRENCY_SYMBOL_ONLY: CurrencyDisplay.SYMBOL,
    NumberStyle.CURRENCY_CODE_ONLY: CurrencyDisplay.CODE,
    NumberStyle.CURRENCY_NAME_ONLY: CurrencyDisplay.NAME,
}


@dataclass(frozen=True)
class FormatRequest:
    """A single formatting request.

    Attributes:
        value: Numeric value to format
        style: Style tag (unrecognized tags fall back to plain conversion)
        currency_code: ISO 4217 code used by currency styles (None uses
            the configured default currency)
    """

    value: float
    style: "NumberStyle | str"
    currency_code: str | None = None


@dataclass(frozen=True)
class FormattedNumber:
    """Result of number formatting.

    Attributes:
        value: Original numeric value
        style: Style that produced the output (None for plain fallback)
        formatted: Formatted string representation
        parts: Component parts (for advanced rendering)
    """

    value: float
    style: NumberStyle | None
    formatted: str
    parts: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.formatted


class BaseLocaleNumberFormatter(ABC):
    """Locale-aware grouping, percent and currency rendering.

    Implementations bind the formatter to one locale's symbols and currency
    conventions. Values are plain floats; NaN never reaches this layer.
    """

    locale: str = ""

    @abstractmethod
    def format_decimal(self, value: float, fraction_digits: int = 2) -> FormattedNumber:
        """Format with grouping and a fixed number of fraction digits."""

    @abstractmethod
    def format_percent(self, value: float, fraction_digits: int = 2) -> FormattedNumber:
        """Format a ratio as a percentage (0.5 -> 50.00%)."""

    @abstractmethod
    def format_currency(
        self,
        value: float,
        currency_code: str,
        display: CurrencyDisplay = CurrencyDisplay.SYMBOL,
    ) -> FormattedNumber:
        """Format a currency amount.

        Raises:
            InvalidCurrencyCodeError: If the code is not a known ISO 4217 code.
        """
