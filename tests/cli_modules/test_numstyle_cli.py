"""Tests for the numstyle command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from numstyle.cli import app


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def euro_config(tmp_path: Path) -> Path:
    """Create a config file with EUR as the default currency."""
    path = tmp_path / "numstyle.yaml"
    path.write_text("numstyle:\n  default_currency: EUR\n")
    return path


# =============================================================================
# format
# =============================================================================


class TestFormatCommand:
    """Tests for 'numstyle format'."""

    def test_default_style_is_decimal(self, runner):
        result = runner.invoke(app, ["format", "1234567.891"])
        assert result.exit_code == 0
        assert result.output.strip() == "1,234,567.89"

    def test_style_option(self, runner):
        result = runner.invoke(app, ["format", "1234.5", "--style", "currency"])
        assert result.exit_code == 0
        assert result.output.strip() == "$1,234.50"

    def test_currency_option(self, runner):
        result = runner.invoke(app, ["format", "1234.5", "-s", "currency", "-c", "JPY"])
        assert result.exit_code == 0
        assert result.output.strip() == "¥1,235"

    def test_negative_value(self, runner):
        result = runner.invoke(app, ["format", "--style", "time-seconds", "--", "-3661"])
        assert result.exit_code == 0
        assert result.output.strip() == "-01:01:01"

    def test_config_file(self, runner, euro_config):
        result = runner.invoke(
            app, ["format", "1234.5", "--style", "currency", "--config", str(euro_config)]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "€1,234.50"

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(
            app, ["format", "1", "--config", str(tmp_path / "missing.yaml")]
        )
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_not_a_number(self, runner):
        result = runner.invoke(app, ["format", "abc"])
        assert result.exit_code == 1
        assert "Not a number" in result.output

    def test_invalid_currency(self, runner):
        result = runner.invoke(app, ["format", "1", "--style", "currency", "--currency", "XYZ"])
        assert result.exit_code == 1
        assert "Invalid ISO 4217 currency code" in result.output

    def test_unknown_style(self, runner):
        result = runner.invoke(app, ["format", "2.50", "--style", "fancy"])
        assert result.exit_code == 0
        assert result.output.strip() == "2.5"

    def test_verbose(self, runner):
        result = runner.invoke(app, ["--verbose", "format", "5", "--style", "roman"])
        assert result.exit_code == 0
        assert "V" in result.output


# =============================================================================
# styles
# =============================================================================


class TestStylesCommand:
    """Tests for 'numstyle styles'."""

    def test_lists_every_style(self, runner):
        result = runner.invoke(app, ["styles"])
        assert result.exit_code == 0
        for tag in ("decimal", "engineering", "time-hours", "kilobytes"):
            assert tag in result.output
        assert "$1,234.57" in result.output
        assert "MCCXXXIV" in result.output

    def test_custom_value(self, runner):
        result = runner.invoke(app, ["styles", "--value", "255"])
        assert result.exit_code == 0
        assert "0xFF" in result.output

    def test_invalid_currency(self, runner):
        result = runner.invoke(app, ["styles", "--currency", "XYZ"])
        assert result.exit_code == 1


# =============================================================================
# roman
# =============================================================================


class TestRomanCommand:
    """Tests for 'numstyle roman'."""

    def test_parse(self, runner):
        result = runner.invoke(app, ["roman", "MCMXCIV"])
        assert result.exit_code == 0
        assert result.output.strip() == "1994"

    def test_invalid(self, runner):
        result = runner.invoke(app, ["roman", "IIII"])
        assert result.exit_code == 1
        assert "Error" in result.output
