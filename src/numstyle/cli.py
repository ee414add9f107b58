"""Command-line interface for numstyle."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from numstyle.config import load_config
from numstyle.errors import NumberFormatError
from numstyle.formatter import NumberFormatter
from numstyle.numerals import from_roman
from numstyle.protocols import NumberStyle

SAMPLE_VALUE = 1234.5678

app = typer.Typer(
    name="numstyle",
    help="Format numbers as display strings",
    add_completion=False,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable debug logging"),
    ] = False,
) -> None:
    """Format numbers as display strings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_formatter(config_file: Optional[Path]) -> NumberFormatter:
    try:
        return NumberFormatter(load_config(config_file))
    except NumberFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command(name="format")
def format_cmd(
    value: Annotated[str, typer.Argument(help="Number to format")],
    style: Annotated[
        str,
        typer.Option("--style", "-s", help="Style tag (see 'numstyle styles')"),
    ] = NumberStyle.DECIMAL.value,
    currency: Annotated[
        Optional[str],
        typer.Option("--currency", "-c", help="ISO 4217 code for currency styles"),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", help="YAML configuration file"),
    ] = None,
) -> None:
    """Format a single value."""
    formatter = _build_formatter(config_file)

    try:
        result = formatter.format(value, style, currency)
    except NumberFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if result is None:
        typer.echo(f"Error: Not a number: {value}", err=True)
        raise typer.Exit(1)
    typer.echo(result)


@app.command(name="styles")
def styles_cmd(
    value: Annotated[
        float,
        typer.Option("--value", help="Sample value to render"),
    ] = SAMPLE_VALUE,
    currency: Annotated[
        Optional[str],
        typer.Option("--currency", "-c", help="ISO 4217 code for currency styles"),
    ] = None,
) -> None:
    """List every style tag with a sample rendering."""
    formatter = NumberFormatter()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Style", style="cyan")
    table.add_column("Sample", style="white")

    try:
        for style in NumberStyle:
            table.add_row(style.value, formatter.format(value, style, currency) or "")
    except NumberFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    console = Console()
    console.print(table)


@app.command(name="roman")
def roman_cmd(
    text: Annotated[str, typer.Argument(help="Roman numeral to parse")],
) -> None:
    """Print the integer value of a Roman numeral."""
    try:
        typer.echo(from_roman(text))
    except NumberFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
