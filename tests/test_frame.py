"""Tests for polars column formatting."""

from __future__ import annotations

import polars as pl
import pytest

from numstyle.config import FormatterConfig
from numstyle.errors import InvalidCurrencyCodeError, NumberFormatError
from numstyle.formatter import NumberFormatter
from numstyle.frame import format_columns, format_series


@pytest.fixture
def sample_df() -> pl.DataFrame:
    """Create a frame with mixed column types."""
    return pl.DataFrame(
        {
            "name": ["a", "b", "c"],
            "price": [9.5, 1234.0, None],
            "size": [512, 1048576, 0],
            "elapsed": [3661.0, 59.0, float("nan")],
        }
    )


class TestFormatSeries:
    """Tests for format_series."""

    def test_currency(self, sample_df):
        result = format_series(sample_df["price"], "currency")
        assert result.name == "price"
        assert result.dtype == pl.Utf8
        assert result.to_list() == ["$9.50", "$1,234.00", None]

    def test_integer_series(self, sample_df):
        result = format_series(sample_df["size"], "bytes")
        assert result.to_list() == ["512.00 Bytes", "1.00 MB", "0 Byte"]

    def test_nan_becomes_null(self, sample_df):
        result = format_series(sample_df["elapsed"], "time-seconds")
        assert result.to_list() == ["01:01:01", "00:00:59", None]

    def test_currency_code(self, sample_df):
        result = format_series(sample_df["price"], "currency", "EUR")
        assert result.to_list()[0] == "€9.50"

    def test_custom_formatter(self, sample_df):
        formatter = NumberFormatter(FormatterConfig(default_currency="GBP"))
        result = format_series(sample_df["price"], "currency", formatter=formatter)
        assert result.to_list()[0] == "£9.50"

    def test_non_numeric_raises(self, sample_df):
        with pytest.raises(NumberFormatError, match="non-numeric"):
            format_series(sample_df["name"], "decimal")

    def test_invalid_currency_propagates(self, sample_df):
        with pytest.raises(InvalidCurrencyCodeError):
            format_series(sample_df["price"], "currency", "XYZ")

    def test_empty_series(self):
        result = format_series(pl.Series("x", [], dtype=pl.Float64), "decimal")
        assert result.len() == 0
        assert result.dtype == pl.Utf8


class TestFormatColumns:
    """Tests for format_columns."""

    def test_formats_listed_columns(self, sample_df):
        result = format_columns(sample_df, {"price": "currency", "size": "bytes"})
        assert result.columns == sample_df.columns
        assert result["price"].to_list() == ["$9.50", "$1,234.00", None]
        assert result["size"].to_list() == ["512.00 Bytes", "1.00 MB", "0 Byte"]
        assert result["elapsed"].dtype == pl.Float64

    def test_source_unchanged(self, sample_df):
        format_columns(sample_df, {"size": "kilobytes"})
        assert sample_df["size"].dtype == pl.Int64

    def test_missing_columns(self, sample_df):
        with pytest.raises(NumberFormatError, match="Columns not found: missing"):
            format_columns(sample_df, {"missing": "decimal"})
