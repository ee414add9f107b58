"""Tests for en_US decimal, percent and currency formatting."""

from __future__ import annotations

import math

import pytest

from numstyle.errors import InvalidCurrencyCodeError, NumberFormatError
from numstyle.locales import (
    ISO_4217_CODES,
    EnUsNumberFormatter,
    get_currency_info,
    get_supported_currencies,
)
from numstyle.protocols import BaseLocaleNumberFormatter, CurrencyDisplay

NBSP = "\u00a0"


@pytest.fixture
def locale_formatter() -> EnUsNumberFormatter:
    return EnUsNumberFormatter()


class TestCurrencyInfo:
    """Tests for the ISO 4217 table."""

    def test_lookup_is_case_insensitive(self):
        assert get_currency_info("usd").code == "USD"
        assert get_currency_info(" eur ").symbol == "€"

    def test_minor_units(self):
        assert get_currency_info("USD").decimal_digits == 2
        assert get_currency_info("JPY").decimal_digits == 0
        assert get_currency_info("KWD").decimal_digits == 3

    def test_code_used_as_symbol_when_missing(self):
        assert get_currency_info("CHF").symbol == "CHF"

    def test_display_name_plural(self):
        info = get_currency_info("SEK")
        assert info.display_name("1") == "Swedish krona"
        assert info.display_name("1.00") == "Swedish kronor"

    @pytest.mark.parametrize("code", ["XYZ", "US", "USDX", "", "12A", "U$D"])
    def test_invalid_codes(self, code):
        """Test malformed and unknown codes are rejected."""
        with pytest.raises(InvalidCurrencyCodeError) as exc_info:
            get_currency_info(code)
        assert exc_info.value.code == code

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            get_currency_info("XYZ")
        with pytest.raises(NumberFormatError):
            get_currency_info("XYZ")

    def test_supported_currencies_sorted(self):
        codes = get_supported_currencies()
        assert codes == sorted(codes)
        assert {"USD", "EUR", "JPY", "GBP"} <= set(codes)

    @pytest.mark.parametrize("code", ["GHS", "NPR", "ZMW", "ETB", "TZS"])
    def test_untabled_iso_code(self, code):
        """Test ISO 4217 codes without display data fall back to the code."""
        info = get_currency_info(code.lower())
        assert info.code == info.symbol == info.name == info.plural_name == code
        assert info.decimal_digits == 2

    def test_tabled_codes_are_iso(self):
        for code in ("USD", "EUR", "JPY", "KWD", "XAF", "XOF", "XCD"):
            assert code in ISO_4217_CODES
        assert "XYZ" not in ISO_4217_CODES


class TestDecimal:
    """Tests for grouped decimal formatting."""

    def test_is_locale_formatter(self, locale_formatter):
        assert isinstance(locale_formatter, BaseLocaleNumberFormatter)
        assert locale_formatter.locale == "en_US"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1234567.891, "1,234,567.89"),
            (0, "0.00"),
            (999.999, "1,000.00"),
            (-1234.5, "-1,234.50"),
            (0.125, "0.13"),
            (1e21, "1,000,000,000,000,000,000,000.00"),
        ],
    )
    def test_format_decimal(self, locale_formatter, value, expected):
        assert locale_formatter.format_decimal(value).formatted == expected

    def test_rounded_to_zero_keeps_sign(self, locale_formatter):
        assert locale_formatter.format_decimal(-0.001).formatted == "-0.00"

    def test_infinity(self, locale_formatter):
        assert locale_formatter.format_decimal(math.inf).formatted == "∞"
        assert locale_formatter.format_decimal(-math.inf).formatted == "-∞"

    def test_parts(self, locale_formatter):
        result = locale_formatter.format_decimal(-1234.5)
        assert result.parts == {"amount": "1,234.50"}


class TestPercent:
    """Tests for percentage formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.1234, "12.34%"),
            (0.5, "50.00%"),
            (12.5, "1,250.00%"),
            (-0.5, "-50.00%"),
            (0, "0.00%"),
        ],
    )
    def test_format_percent(self, locale_formatter, value, expected):
        assert locale_formatter.format_percent(value).formatted == expected

    def test_infinity(self, locale_formatter):
        assert locale_formatter.format_percent(math.inf).formatted == "∞%"


class TestCurrency:
    """Tests for currency display variants."""

    @pytest.mark.parametrize(
        "value,code,expected",
        [
            (1234.5, "USD", "$1,234.50"),
            (-1234.5, "USD", "-$1,234.50"),
            (1234.5, "EUR", "€1,234.50"),
            (1234.5, "GBP", "£1,234.50"),
            (1234.56, "JPY", "¥1,235"),
            (5, "CAD", "CA$5.00"),
            (1234.5, "CHF", f"CHF{NBSP}1,234.50"),
            (1, "KWD", f"KWD{NBSP}1.000"),
            (1000, "XOF", f"F CFA{NBSP}1,000"),
        ],
    )
    def test_symbol_display(self, locale_formatter, value, code, expected):
        """Test symbol placement, spacing and minor units."""
        assert locale_formatter.format_currency(value, code).formatted == expected

    def test_code_display(self, locale_formatter):
        result = locale_formatter.format_currency(1234.5, "USD", CurrencyDisplay.CODE)
        assert result.formatted == f"USD{NBSP}1,234.50"

    def test_code_display_negative(self, locale_formatter):
        result = locale_formatter.format_currency(-1, "EUR", CurrencyDisplay.CODE)
        assert result.formatted == f"-EUR{NBSP}1.00"

    @pytest.mark.parametrize(
        "value,code,expected",
        [
            (1234.5, "USD", "1,234.50 US dollars"),
            (1, "USD", "1.00 US dollars"),
            (1, "JPY", "1 Japanese yen"),
            (1, "SEK", "1.00 Swedish kronor"),
            (-2, "EUR", "-2.00 euros"),
        ],
    )
    def test_name_display(self, locale_formatter, value, code, expected):
        """Test display names and plural selection."""
        result = locale_formatter.format_currency(value, code, CurrencyDisplay.NAME)
        assert result.formatted == expected

    def test_infinity(self, locale_formatter):
        assert locale_formatter.format_currency(math.inf, "USD").formatted == "$∞"
        assert locale_formatter.format_currency(-math.inf, "USD").formatted == "-$∞"

    def test_parts(self, locale_formatter):
        result = locale_formatter.format_currency(9.5, "USD")
        assert result.parts == {"symbol": "$", "amount": "9.50", "code": "USD"}

    def test_invalid_code(self, locale_formatter):
        with pytest.raises(InvalidCurrencyCodeError):
            locale_formatter.format_currency(1, "ZZZ")
