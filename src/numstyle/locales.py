"""Locale-aware decimal, percent and currency rendering.

Output is pinned to US English conventions (CLDR ``en_US``): comma grouping,
period decimal point, and CLDR English currency symbols and display names.

Usage:
    from numstyle.locales import EnUsNumberFormatter
    from numstyle.protocols import CurrencyDisplay

    fmt = EnUsNumberFormatter()
    fmt.format_decimal(1234567.891).formatted               # "1,234,567.89"
    fmt.format_percent(0.1234).formatted                    # "12.34%"
    fmt.format_currency(-1234.5, "USD").formatted           # "-$1,234.50"
    fmt.format_currency(1234.5, "EUR", CurrencyDisplay.CODE).formatted
    # "EUR 1,234.50"
    fmt.format_currency(1234.5, "USD", CurrencyDisplay.NAME).formatted
    # "1,234.50 US dollars"
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from numstyle.errors import InvalidCurrencyCodeError
from numstyle.notation import fixed_magnitude, group_digits
from numstyle.protocols import BaseLocaleNumberFormatter, CurrencyDisplay, FormattedNumber

logger = logging.getLogger(__name__)


# ==============================================================================
# Locale Data: Number Symbols
# ==============================================================================


@dataclass(frozen=True)
class NumberSymbols:
    """Locale-specific number symbols.

    Based on CLDR number symbols data.
    """

    decimal: str = "."
    group: str = ","
    minus: str = "-"
    percent: str = "%"
    infinity: str = "∞"
    currency_spacing: str = "\u00a0"


EN_US_SYMBOLS = NumberSymbols()


# ==============================================================================
# Locale Data: Currency Information
# ==============================================================================


@dataclass(frozen=True)
class CurrencyInfo:
    """Currency formatting information.

    Attributes:
        code: ISO 4217 alphabetic code
        symbol: en_US display symbol (the code itself when CLDR has none)
        name: Singular display name
        plural_name: Display name for every amount other than exactly 1
        decimal_digits: ISO 4217 minor units
    """

    code: str
    symbol: str
    name: str
    plural_name: str
    decimal_digits: int = 2

    def display_name(self, amount: str) -> str:
        """Select the display name for a rendered amount."""
        return self.name if amount == "1" else self.plural_name


def _currency(
    code: str,
    symbol: str | None,
    name: str,
    plural_name: str | None = None,
    decimal_digits: int = 2,
) -> CurrencyInfo:
    return CurrencyInfo(
        code=code,
        symbol=symbol or code,
        name=name,
        plural_name=plural_name or f"{name}s",
        decimal_digits=decimal_digits,
    )


_CURRENCIES: dict[str, CurrencyInfo] = {
    info.code: info
    for info in (
        # Americas
        _currency("USD", "$", "US dollar"),
        _currency("CAD", "CA$", "Canadian dollar"),
        _currency("MXN", "MX$", "Mexican peso"),
        _currency("BRL", "R$", "Brazilian real"),
        _currency("ARS", None, "Argentine peso"),
        _currency("CLP", None, "Chilean peso", decimal_digits=0),
        _currency("COP", None, "Colombian peso"),
        _currency("PEN", None, "Peruvian sol"),
        _currency("PYG", None, "Paraguayan guarani", decimal_digits=0),
        _currency("XCD", "EC$", "East Caribbean dollar"),
        # Europe
        _currency("EUR", "€", "euro"),
        _currency("GBP", "£", "British pound"),
        _currency("CHF", None, "Swiss franc"),
        _currency("SEK", None, "Swedish krona", "Swedish kronor"),
        _currency("NOK", None, "Norwegian krone", "Norwegian kroner"),
        _currency("DKK", None, "Danish krone", "Danish kroner"),
        _currency("ISK", None, "Icelandic króna", "Icelandic krónur", decimal_digits=0),
        _currency("PLN", None, "Polish zloty", "Polish zlotys"),
        _currency("CZK", None, "Czech koruna", "Czech korunas"),
        _currency("HUF", None, "Hungarian forint"),
        _currency("RON", None, "Romanian leu", "Romanian lei"),
        _currency("BGN", None, "Bulgarian lev", "Bulgarian leva"),
        _currency("RUB", None, "Russian ruble"),
        _currency("UAH", None, "Ukrainian hryvnia"),
        _currency("TRY", None, "Turkish lira", "Turkish Lira"),
        # Asia-Pacific
        _currency("JPY", "¥", "Japanese yen", "Japanese yen", decimal_digits=0),
        _currency("CNY", "CN¥", "Chinese yuan", "Chinese yuan"),
        _currency("HKD", "HK$", "Hong Kong dollar"),
        _currency("TWD", "NT$", "New Taiwan dollar"),
        _currency("KRW", "₩", "South Korean won", "South Korean won", decimal_digits=0),
        _currency("INR", "₹", "Indian rupee"),
        _currency("PKR", None, "Pakistani rupee"),
        _currency("LKR", None, "Sri Lankan rupee"),
        _currency("BDT", None, "Bangladeshi taka", "Bangladeshi takas"),
        _currency("IDR", None, "Indonesian rupiah", "Indonesian rupiahs"),
        _currency("MYR", None, "Malaysian ringgit"),
        _currency("SGD", None, "Singapore dollar"),
        _currency("THB", None, "Thai baht", "Thai baht"),
        _currency("VND", "₫", "Vietnamese dong", "Vietnamese dong", decimal_digits=0),
        _currency("PHP", "₱", "Philippine peso"),
        _currency("AUD", "A$", "Australian dollar"),
        _currency("NZD", "NZ$", "New Zealand dollar"),
        # Middle East & Africa
        _currency("ILS", "₪", "Israeli new shekel"),
        _currency("AED", None, "UAE dirham"),
        _currency("SAR", None, "Saudi riyal"),
        _currency("QAR", None, "Qatari riyal"),
        _currency("KWD", None, "Kuwaiti dinar", decimal_digits=3),
        _currency("BHD", None, "Bahraini dinar", decimal_digits=3),
        _currency("OMR", None, "Omani rial", decimal_digits=3),
        _currency("JOD", None, "Jordanian dinar", decimal_digits=3),
        _currency("TND", None, "Tunisian dinar", decimal_digits=3),
        _currency("EGP", None, "Egyptian pound"),
        _currency("MAD", None, "Moroccan dirham"),
        _currency("NGN", None, "Nigerian naira", "Nigerian nairas"),
        _currency("KES", None, "Kenyan shilling"),
        _currency("UGX", None, "Ugandan shilling", decimal_digits=0),
        _currency("ZAR", None, "South African rand", "South African rand"),
        _currency("XAF", "FCFA", "Central African CFA franc", decimal_digits=0),
        _currency("XOF", "F CFA", "West African CFA franc", decimal_digits=0),
    )
}

# ISO 4217 list one, active alphabetic codes.
ISO_4217_CODES: frozenset[str] = frozenset(
    """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB
    BOV BRL BSD BTN BWP BYN BZD CAD CDF CHE CHF CHW CLF CLP CNY COP COU CRC CUP
    CVE CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ
    GYD HKD HNL HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW
    KRW KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR
    MVR MWK MXN MXV MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN
    PYG QAR RON RSD RUB RWF SAR SBD SCR SDG SEK SGD SHP SLE SOS SRD SSP STN SVC
    SYP SZL THB TJS TMT TND TOP TRY TTD TWD TZS UAH UGX USD USN UYI UYU UYW UZS
    VED VES VND VUV WST XAF XAG XAU XBA XBB XBC XBD XCD XCG XDR XOF XPD XPF XPT
    XSU XTS XUA XXX YER ZAR ZMW ZWG
    """.split()
)

_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


def get_currency_info(code: str) -> CurrencyInfo:
    """Get currency information.

    Args:
        code: ISO 4217 currency code (case-insensitive)

    Returns:
        CurrencyInfo for the currency. ISO 4217 codes without CLDR display
        data use the code as symbol and name, with 2 minor units.

    Raises:
        InvalidCurrencyCodeError: If the code is malformed or not in ISO 4217
    """
    normalized = code.strip().upper() if isinstance(code, str) else ""
    if not _CODE_PATTERN.match(normalized) or normalized not in ISO_4217_CODES:
        logger.warning("Rejected currency code %r", code)
        raise InvalidCurrencyCodeError(str(code))
    return _CURRENCIES.get(
        normalized, CurrencyInfo(normalized, normalized, normalized, normalized)
    )


def get_supported_currencies() -> list[str]:
    """Get the sorted list of supported ISO 4217 codes."""
    return sorted(ISO_4217_CODES)


# ==============================================================================
# Formatter
# ==============================================================================


class EnUsNumberFormatter(BaseLocaleNumberFormatter):
    """US English binding of the locale formatting capability.

    Example:
        formatter = EnUsNumberFormatter()

        formatter.format_decimal(1234567.891)
        # -> FormattedNumber(formatted="1,234,567.89")

        formatter.format_currency(1234.56, "JPY")
        # -> FormattedNumber(formatted="¥1,235")
    """

    locale = "en_US"

    def __init__(self, symbols: NumberSymbols = EN_US_SYMBOLS) -> None:
        self.symbols = symbols

    def format_decimal(self, value: float, fraction_digits: int = 2) -> FormattedNumber:
        negative, amount = self._amount(value, fraction_digits)
        formatted = f"{self.symbols.minus}{amount}" if negative else amount
        return FormattedNumber(
            value=value,
            style=None,
            formatted=formatted,
            parts={"amount": amount},
        )

    def format_percent(self, value: float, fraction_digits: int = 2) -> FormattedNumber:
        negative, amount = self._amount(value * 100, fraction_digits)
        sign = self.symbols.minus if negative else ""
        return FormattedNumber(
            value=value,
            style=None,
            formatted=f"{sign}{amount}{self.symbols.percent}",
            parts={"amount": amount, "percent": self.symbols.percent},
        )

    def format_currency(
        self,
        value: float,
        currency_code: str,
        display: CurrencyDisplay = CurrencyDisplay.SYMBOL,
    ) -> FormattedNumber:
        info = get_currency_info(currency_code)
        negative, amount = self._amount(value, info.decimal_digits)
        sign = self.symbols.minus if negative else ""

        if display == CurrencyDisplay.NAME:
            name = info.display_name(amount)
            return FormattedNumber(
                value=value,
                style=None,
                formatted=f"{sign}{amount} {name}",
                parts={"amount": amount, "name": name, "code": info.code},
            )

        symbol = info.code if display == CurrencyDisplay.CODE else info.symbol
        # Letters next to digits get a no-break space; "$1" vs "CHF 1"
        spacing = ""
        if symbol[-1].isalpha() and amount[:1].isdigit():
            spacing = self.symbols.currency_spacing

        return FormattedNumber(
            value=value,
            style=None,
            formatted=f"{sign}{symbol}{spacing}{amount}",
            parts={"symbol": symbol, "amount": amount, "code": info.code},
        )

    def _amount(self, value: float, fraction_digits: int) -> tuple[bool, str]:
        """Split into (is_negative, grouped unsigned amount)."""
        negative = math.copysign(1.0, value) < 0
        if math.isinf(value):
            return negative, self.symbols.infinity

        digits = fixed_magnitude(value, fraction_digits)
        int_part, _, frac_part = digits.partition(".")
        int_part = group_digits(int_part, self.symbols.group)
        if frac_part:
            return negative, f"{int_part}{self.symbols.decimal}{frac_part}"
        return negative, int_part
