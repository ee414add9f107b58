"""Polars adapters: format whole columns for display.

Usage:
    import polars as pl
    from numstyle.frame import format_columns

    df = pl.DataFrame({"price": [9.5, 1234.0], "size": [512, 1048576]})
    format_columns(df, {"price": "currency", "size": "bytes"})
    # price: ["$9.50", "$1,234.00"], size: ["512.00 Bytes", "1.00 MB"]
"""

from __future__ import annotations

import logging
from typing import Mapping

import polars as pl

from numstyle.errors import NumberFormatError
from numstyle.formatter import NumberFormatter, get_formatter
from numstyle.protocols import NumberStyle

logger = logging.getLogger(__name__)

NUMERIC_TYPES: set[type[pl.DataType]] = {
    pl.Int8, pl.Int16, pl.Int32, pl.Int64,
    pl.UInt8, pl.UInt16, pl.UInt32, pl.UInt64,
    pl.Float32, pl.Float64,
}


def _is_numeric(dtype: pl.DataType) -> bool:
    return dtype.base_type() in NUMERIC_TYPES


def format_series(
    series: pl.Series,
    style: NumberStyle | str,
    currency_code: str | None = None,
    *,
    formatter: NumberFormatter | None = None,
) -> pl.Series:
    """Format every value of a numeric series.

    Args:
        series: Numeric series
        style: Style tag
        currency_code: ISO 4217 code for currency styles
        formatter: Formatter to use (defaults to the shared one)

    Returns:
        String series with the same name and length; nulls and NaN stay null

    Raises:
        NumberFormatError: If the series is not numeric
        InvalidCurrencyCodeError: If a currency style gets a bad code
    """
    if not _is_numeric(series.dtype):
        raise NumberFormatError(
            f"Column '{series.name}' has non-numeric dtype {series.dtype}",
            str(style),
        )

    formatter = formatter or get_formatter()
    values = [
        formatter.format(value, style, currency_code) if value is not None else None
        for value in series.to_list()
    ]
    return pl.Series(series.name, values, dtype=pl.Utf8)


def format_columns(
    df: pl.DataFrame,
    styles: Mapping[str, NumberStyle | str],
    currency_code: str | None = None,
    *,
    formatter: NumberFormatter | None = None,
) -> pl.DataFrame:
    """Replace columns with their formatted strings.

    Args:
        df: Source frame (left unchanged)
        styles: Mapping of column name to style tag
        currency_code: ISO 4217 code for currency styles
        formatter: Formatter to use (defaults to the shared one)

    Returns:
        New frame with the listed columns formatted

    Raises:
        NumberFormatError: If a column is missing or not numeric
    """
    missing = [name for name in styles if name not in df.columns]
    if missing:
        raise NumberFormatError(f"Columns not found: {', '.join(missing)}")

    formatter = formatter or get_formatter()
    logger.debug("Formatting %d columns over %d rows", len(styles), df.height)
    return df.with_columns(
        [
            format_series(df.get_column(name), style, currency_code, formatter=formatter)
            for name, style in styles.items()
        ]
    )
