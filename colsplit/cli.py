"""Command-line interface for colsplit."""

import logging
import warnings
from pathlib import Path
from typing import Any

import pandas as pd
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from colsplit import __version__
from colsplit.config import DEFAULT_SEPARATOR
from colsplit.errors import SeparateError
from colsplit.job import load_job
from colsplit.logging_config import setup_logging
from colsplit.models import ExtraPolicy, FillPolicy
from colsplit.table import separate

app = typer.Typer(
    name="colsplit",
    help="Split one column of a CSV file into several columns.",
)
console = Console()


def read_csv(path: Path, delimiter: str) -> pd.DataFrame:
    """Read a CSV file with every column as text and empty cells missing."""
    return pd.read_csv(path, sep=delimiter, dtype=str, keep_default_na=False, na_values=[""])


def parse_positions(text: str) -> list[int]:
    """Parse "3,-2" into [3, -2]."""
    try:
        return [int(p) for p in text.split(",") if p.strip()]
    except ValueError as e:
        raise typer.BadParameter(f"Positions must be integers, got {text!r}") from e


def column_ref(frame: pd.DataFrame, column: str) -> str | int:
    """Use `column` as a label, or as a position when no such label exists."""
    if column not in frame.columns and column.lstrip("-").isdigit():
        return int(column)
    return column


def render_table(frame: pd.DataFrame) -> Table:
    table = Table(show_header=True, header_style="bold")
    for label in frame.columns:
        table.add_column(str(label))
    for row in frame.itertuples(index=False):
        table.add_row(
            *(Text("NA", style="dim") if pd.isna(v) else Text(str(v)) for v in row)
        )
    return table


def _run_separate(
    frame: pd.DataFrame,
    kwargs: dict[str, Any],
    output: Path | None,
    delimiter: str,
) -> None:
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = separate(frame, **kwargs)
    except SeparateError as e:
        console.print("[bold red]Error:[/bold red]", Text(str(e)))
        raise typer.Exit(1) from e

    for warning in caught:
        console.print("[yellow]Warning:[/yellow]", Text(str(warning.message)))

    if output is None:
        console.print(render_table(result))
        return

    result.to_csv(output, sep=delimiter, index=False)
    console.print(f"[bold green]Saved to:[/bold green] {output}")


@app.command()
def split(
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="CSV file to read",
    ),
    column: str = typer.Argument(..., help="Column label (or 0-based position) to split"),
    into: str = typer.Option(
        ...,
        "--into",
        "-i",
        help="Comma separated names of the new columns",
    ),
    sep: str | None = typer.Option(
        None,
        "--sep",
        "-s",
        help=f"Regular expression to split on (default: {DEFAULT_SEPARATOR})",
    ),
    positions: str | None = typer.Option(
        None,
        "--positions",
        "-p",
        help="Comma separated character positions to split at, e.g. 3,-2",
    ),
    extra: ExtraPolicy = typer.Option(ExtraPolicy.WARN, help="Rows with too many pieces"),
    fill: FillPolicy = typer.Option(FillPolicy.WARN, help="Rows with too few pieces"),
    keep: bool = typer.Option(False, "--keep", help="Keep the original column"),
    convert: bool = typer.Option(False, "--convert", help="Guess types of new columns"),
    delimiter: str = typer.Option(",", "--delimiter", "-d", help="CSV field delimiter"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write CSV here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug trace"),
) -> None:
    """Split COLUMN of a CSV file into the columns named by --into."""
    if sep is not None and positions is not None:
        raise typer.BadParameter("Use either --sep or --positions, not both")
    if verbose:
        setup_logging(logging.DEBUG)

    frame = read_csv(input_path, delimiter)
    kwargs = {
        "col": column_ref(frame, column),
        "into": [name.strip() for name in into.split(",")],
        "sep": parse_positions(positions) if positions is not None else (sep or DEFAULT_SEPARATOR),
        "remove": not keep,
        "convert": convert,
        "extra": extra,
        "fill": fill,
    }
    _run_separate(frame, kwargs, output, delimiter)


@app.command()
def run(
    job_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML job file"),
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV file"),
    delimiter: str = typer.Option(",", "--delimiter", "-d", help="CSV field delimiter"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write CSV here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug trace"),
) -> None:
    """Run the split described by a YAML job file on a CSV file."""
    if verbose:
        setup_logging(logging.DEBUG)
    try:
        job = load_job(job_path)
    except SeparateError as e:
        console.print("[bold red]Error:[/bold red]", Text(str(e)))
        raise typer.Exit(1) from e

    frame = read_csv(input_path, delimiter)
    _run_separate(frame, job.separate_kwargs(), output, delimiter)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"colsplit {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
