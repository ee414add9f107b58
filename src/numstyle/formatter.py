"""Number-to-display-string formatting.

This module provides the NumberFormatter, which renders a numeric value in
one of a fixed set of named styles:

- Grouped decimals and percentages
- Currency amounts (symbol, ISO code or display name)
- Scientific, engineering and long exponential notation
- Hexadecimal, binary and octal
- Roman numerals and English ordinals
- Clock durations from seconds, minutes, hours or milliseconds
- Human-readable byte sizes

Usage:
    from numstyle import NumberFormatter, format_number

    formatter = NumberFormatter()
    formatter.format(1234.5, "currency")          # "$1,234.50"
    formatter.format(1234.5, "currency", "EUR")   # "€1,234.50"
    formatter.format(3661, "time-seconds")        # "01:01:01"
    formatter.format(float("nan"), "decimal")     # None

    format_number(255, "hexadecimal")             # "0xFF"
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache, partial
from typing import Any, Callable

from numstyle.config import FormatterConfig, load_config
from numstyle.durations import format_duration, format_milliseconds
from numstyle.locales import EnUsNumberFormatter
from numstyle.notation import to_base, to_engineering, to_exponential, to_plain_string
from numstyle.numerals import ordinal_suffix, to_roman
from numstyle.protocols import (
    BaseLocaleNumberFormatter,
    CurrencyDisplay,
    FormatRequest,
    FormattedNumber,
    NumberStyle,
)
from numstyle.sizes import format_byte_size

logger = logging.getLogger(__name__)

Handler = Callable[[float, str], FormattedNumber]


def coerce_value(value: Any) -> float | None:
    """Convert input to a float, or None if it is not a number.

    Anything float() accepts is a number (ints, Decimals, numpy and polars
    scalars, numeric strings). NaN is not.
    """
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Value is not numeric: %r", value)
        return None
    if math.isnan(number):
        return None
    return number


class NumberFormatter:
    """Stateless number formatter dispatching on style tags.

    Example:
        formatter = NumberFormatter()

        formatter.format(0.1234, "percent")      # "12.34%"
        formatter.format(12345, "engineering")   # "12.35e3"
        formatter.format(21, "ordinal")          # "21st"
        formatter.format(1048576, "bytes")       # "1.00 MB"

    Instances hold only immutable configuration and are safe to share
    between threads.
    """

    def __init__(
        self,
        config: FormatterConfig | None = None,
        locale_formatter: BaseLocaleNumberFormatter | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            config: Formatter settings (defaults when omitted)
            locale_formatter: Decimal/percent/currency binding
        """
        self.config = config or FormatterConfig()
        self.locale_formatter = locale_formatter or EnUsNumberFormatter()
        self._handlers: dict[NumberStyle, Handler] = {
            NumberStyle.DECIMAL: self._format_decimal,
            NumberStyle.PERCENT: self._format_percent,
            NumberStyle.SCIENTIFIC: self._format_scientific,
            NumberStyle.ENGINEERING: self._format_engineering,
            NumberStyle.HEXADECIMAL: self._format_hexadecimal,
            NumberStyle.BINARY: self._format_binary,
            NumberStyle.OCTAL: self._format_octal,
            NumberStyle.ROMAN: self._format_roman,
            NumberStyle.ORDINAL: self._format_ordinal,
            NumberStyle.TIME_SECONDS: self._format_time_seconds,
            NumberStyle.TIME_MINUTES: self._format_time_minutes,
            NumberStyle.TIME_HOURS: self._format_time_hours,
            NumberStyle.BYTES: self._format_bytes,
            NumberStyle.KILOBYTES: self._format_kilobytes,
            NumberStyle.MILLIS: self._format_millis,
            NumberStyle.SCIENTIFIC_LONG: self._format_scientific_long,
        }
        for style in NumberStyle:
            if style.is_currency:
                self._handlers[style] = partial(
                    self._format_currency, display=style.currency_display
                )

    @property
    def styles(self) -> tuple[NumberStyle, ...]:
        """Styles with a registered handler."""
        return tuple(self._handlers)

    def format(
        self,
        value: Any,
        style: NumberStyle | str,
        currency_code: str | None = None,
    ) -> str | None:
        """Format a number.

        Args:
            value: Number to format
            style: Style tag; unrecognized tags use plain conversion
            currency_code: ISO 4217 code for currency styles (defaults to
                the configured currency)

        Returns:
            Formatted string, or None if value is NaN or not numeric

        Raises:
            InvalidCurrencyCodeError: If a currency style gets a bad code
        """
        result = self.format_detailed(value, style, currency_code)
        return result.formatted if result is not None else None

    def format_request(self, request: FormatRequest) -> str | None:
        """Format a FormatRequest."""
        return self.format(request.value, request.style, request.currency_code)

    def format_detailed(
        self,
        value: Any,
        style: NumberStyle | str,
        currency_code: str | None = None,
    ) -> FormattedNumber | None:
        """Format a number, keeping the component parts.

        Same contract as format(), but returns the FormattedNumber.
        """
        number = coerce_value(value)
        if number is None:
            return None

        resolved = NumberStyle.from_tag(style)
        if resolved is None:
            if self.config.log_fallbacks:
                logger.debug("Unknown style %r, using plain conversion", style)
            return FormattedNumber(value=number, style=None, formatted=to_plain_string(number))

        code = currency_code if currency_code is not None else self.config.default_currency
        result = self._handlers[resolved](number, code)
        return FormattedNumber(
            value=number,
            style=resolved,
            formatted=result.formatted,
            parts=result.parts,
        )

    # ------------------------------------------------------------------
    # Locale-aware styles
    # ------------------------------------------------------------------

    def _format_decimal(self, value: float, currency_code: str) -> FormattedNumber:
        return self.locale_formatter.format_decimal(value, 2)

    def _format_percent(self, value: float, currency_code: str) -> FormattedNumber:
        return self.locale_formatter.format_percent(value, 2)

    def _format_currency(
        self,
        value: float,
        currency_code: str,
        display: CurrencyDisplay = CurrencyDisplay.SYMBOL,
    ) -> FormattedNumber:
        return self.locale_formatter.format_currency(value, currency_code, display)

    # ------------------------------------------------------------------
    # Notation
    # ------------------------------------------------------------------

    def _format_scientific(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, to_exponential(value, 2))

    def _format_scientific_long(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, to_exponential(value))

    def _format_engineering(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, to_engineering(value, 2))

    def _format_hexadecimal(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, to_base(value, 16, "0x"))

    def _format_binary(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, to_base(value, 2, "0b"))

    def _format_octal(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, to_base(value, 8, "0o"))

    # ------------------------------------------------------------------
    # Numerals
    # ------------------------------------------------------------------

    def _format_roman(self, value: float, currency_code: str) -> FormattedNumber:
        if not math.isfinite(value):
            return _plain(value, "")
        return _plain(value, to_roman(math.floor(value)))

    def _format_ordinal(self, value: float, currency_code: str) -> FormattedNumber:
        if not math.isfinite(value):
            return _plain(value, to_plain_string(value))
        return _plain(value, ordinal_suffix(math.floor(value)))

    # ------------------------------------------------------------------
    # Durations and sizes
    # ------------------------------------------------------------------

    def _format_time_seconds(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, format_duration(value))

    def _format_time_minutes(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, format_duration(value * 60))

    def _format_time_hours(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, format_duration(value * 3600))

    def _format_millis(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, format_milliseconds(value))

    def _format_bytes(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, format_byte_size(value))

    def _format_kilobytes(self, value: float, currency_code: str) -> FormattedNumber:
        return _plain(value, format_byte_size(value * 1024))


def _plain(value: float, formatted: str) -> FormattedNumber:
    return FormattedNumber(value=value, style=None, formatted=formatted)


@lru_cache(maxsize=1)
def get_formatter() -> NumberFormatter:
    """Get the shared formatter built from load_config().

    The result is cached; call get_formatter.cache_clear() after changing
    NUMSTYLE_* environment variables.
    """
    return NumberFormatter(load_config())


def format_number(
    value: Any,
    style: NumberStyle | str,
    currency_code: str | None = None,
) -> str | None:
    """Format a number with the shared formatter.

    Args:
        value: Number to format
        style: Style tag
        currency_code: ISO 4217 code for currency styles

    Returns:
        Formatted string, or None if value is NaN or not numeric
    """
    return get_formatter().format(value, style, currency_code)
