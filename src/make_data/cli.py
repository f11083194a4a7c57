"""CLI entrypoint for make-data."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from make_data.column_types import parse_column_types
from make_data.config import load_config
from make_data.console import console, print_big_help, show_banner
from make_data.exceptions import ConfigError, OutputFileError
from make_data.generators import ValueGenerator
from make_data.output_paths import ensure_output_directory, unique_output_path
from make_data.writer import write_dataset

app = typer.Typer(help="Generate CSV files of random and fake data for testing.")


def _vprint(enabled: bool, message: str) -> None:
    """Print verbose progress messages."""
    if enabled:
        console.print(f"[cyan]verbose:[/cyan] {escape(message)}")


def _warn(message: str) -> None:
    """Print a non-fatal warning."""
    console.print(f"[yellow]{escape(message)}[/yellow]")


def _package_version() -> str:
    try:
        return version("make-data")
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"make-data {_package_version()}")
        raise typer.Exit()


@app.command()
def generate(
    rows: Annotated[
        int | None, typer.Option("--rows", "-r", help="Number of rows to generate. Default: 10.")
    ] = None,
    columns: Annotated[
        str | None,
        typer.Option(
            "--columns",
            "-c",
            help="Column types, comma-separated. Default: int,float,word,name,phone.",
        ),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output CSV file name. Default: output.csv."),
    ] = None,
    myrange: Annotated[
        int | None,
        typer.Option(
            "--myrange",
            "-m",
            help="Exclusive upper bound for random numbers. Default: 100.",
        ),
    ] = None,
    bighelp: Annotated[bool, typer.Option("--bighelp", "-b", help="Show extended help.")] = False,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Seed for reproducible output.")
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option(help="Directory for generated files. Default: 0_out.")
    ] = None,
    config: Annotated[Path | None, typer.Option(help="Optional YAML config path.")] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose/--no-verbose", help="Enable detailed logs."),
    ] = False,
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Generate a CSV file populated with random and fake values."""
    show_banner()
    if bighelp:
        print_big_help()
        return

    _vprint(verbose, "Loading runtime configuration (YAML + env + CLI overrides).")
    try:
        runtime_config = load_config(
            config_path=config,
            overrides={
                "rows": rows,
                "columns": columns,
                "output": output,
                "myrange": myrange,
                "output_dir": output_dir,
                "seed": seed,
            },
        )
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc

    out_dir = Path(runtime_config.output_dir)
    _vprint(verbose, f"Ensuring output directory exists: {out_dir}")
    ensure_output_directory(out_dir, on_error=_warn)

    output_path = unique_output_path(out_dir, runtime_config.output)
    console.print(f"Output will be written to: {escape(str(output_path))}")

    column_types = parse_column_types(runtime_config.columns)
    _vprint(verbose, f"Column types: {', '.join(item.value for item in column_types)}")
    console.print(f"Range for random numbers: {runtime_config.myrange}")

    generator = ValueGenerator(runtime_config.myrange, seed=runtime_config.seed)
    try:
        report = write_dataset(output_path, column_types, generator, runtime_config.rows)
    except OutputFileError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc

    console.print(f"\tGenerated {report.rows} rows, using range {report.myrange}")
    console.print(f"\tOutput written to: {escape(report.output_path)}")


def main() -> None:
    """Script entrypoint."""
    app()


if __name__ == "__main__":
    main()
