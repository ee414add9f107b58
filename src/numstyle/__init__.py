"""numstyle - number-to-display-string formatting.

Renders numbers as grouped decimals, percentages, currency amounts,
scientific/engineering notation, hex/binary/octal, Roman numerals, ordinals,
clock durations and byte sizes, using US English conventions.

Example:
    from numstyle import format_number

    format_number(1234.5, "currency")        # "$1,234.50"
    format_number(0.1234, "percent")         # "12.34%"
    format_number(1994, "roman")             # "MCMXCIV"
    format_number(90061000, "millis")        # "25:01:01.000"
    format_number(float("nan"), "decimal")   # None
"""

from numstyle.config import FormatterConfig, load_config
from numstyle.durations import format_duration, format_milliseconds
from numstyle.errors import (
    ConfigError,
    InvalidCurrencyCodeError,
    NumberFormatError,
    RomanNumeralError,
)
from numstyle.formatter import NumberFormatter, format_number, get_formatter
from numstyle.locales import EnUsNumberFormatter, get_supported_currencies
from numstyle.numerals import from_roman, ordinal_suffix, to_roman
from numstyle.protocols import (
    BaseLocaleNumberFormatter,
    CurrencyDisplay,
    FormatRequest,
    FormattedNumber,
    NumberStyle,
)
from numstyle.sizes import format_byte_size

__version__ = "0.1.0"

__all__ = [
    # Formatter
    "NumberFormatter",
    "format_number",
    "get_formatter",
    # Types
    "NumberStyle",
    "CurrencyDisplay",
    "FormatRequest",
    "FormattedNumber",
    "BaseLocaleNumberFormatter",
    "EnUsNumberFormatter",
    "get_supported_currencies",
    # Helpers
    "to_roman",
    "from_roman",
    "ordinal_suffix",
    "format_duration",
    "format_milliseconds",
    "format_byte_size",
    # Configuration
    "FormatterConfig",
    "load_config",
    # Errors
    "NumberFormatError",
    "InvalidCurrencyCodeError",
    "RomanNumeralError",
    "ConfigError",
]
