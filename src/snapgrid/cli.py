"""
snapgrid CLI.

Commands:
- build: Render the grid stylesheet from gridspec.yaml
- layouts: Show registered layouts and their container widths
- colspan: Compute the percentage width of a span
- init: Write a default gridspec.yaml
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from snapgrid._version import get_version
from snapgrid.core.errors import GridError
from snapgrid.core.gridspec_loader import (
    GRIDSPEC_FILE,
    create_default_gridspec,
    gridspec_exists,
    load_gridspec_file,
    save_gridspec,
    validate_gridspec,
)
from snapgrid.core.ir.gridspec import GridConfig, GridMode

app = typer.Typer(
    help="Responsive CSS grid generator.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("snapgrid.cli")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"snapgrid {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Responsive CSS grid generator."""
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_config(config: Path) -> GridConfig:
    try:
        grid_config = load_gridspec_file(config)
    except GridError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    result = validate_gridspec(grid_config)
    for warning in result.warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {warning}")
    if not result.is_valid:
        for error in result.errors:
            err_console.print(f"[red]Error:[/red] {error}")
        raise typer.Exit(code=1)
    return grid_config


@app.command("build")
def build_command(
    config: Path = typer.Option(Path(GRIDSPEC_FILE), "--config", "-c", help="GridSpec YAML file"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write CSS to this file (default: stdout)"
    ),
) -> None:
    """Render the grid stylesheet.

    Examples:
        snapgrid build                         # CSS to stdout
        snapgrid build -c site/gridspec.yaml -o dist/grid.css
    """
    from snapgrid.core.grid_generators import render_css

    grid_config = _load_config(config)
    try:
        css = render_css(grid_config)
    except GridError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(css, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(css, encoding="utf-8")
    console.print(f"[green]Wrote[/green] {output}")


@app.command("layouts")
def layouts_command(
    config: Path = typer.Option(Path(GRIDSPEC_FILE), "--config", "-c", help="GridSpec YAML file"),
) -> None:
    """Show registered layouts and their container widths per mode."""
    from snapgrid.core.grid import Grid

    grid_config = _load_config(config)
    try:
        grid = Grid(grid_config)
    except GridError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Layouts")
    table.add_column("Layout", style="cyan")
    table.add_column("Width", justify="right")
    for mode in GridMode:
        table.add_column(f"Max width ({mode})", justify="right")

    for layout in grid.layouts:
        row = [layout.name, f"{layout.width}px"]
        row.extend(str(grid.max_width_for_layout(layout.name, mode)) for mode in GridMode)
        table.add_row(*row)

    console.print(table)


@app.command("colspan")
def colspan_command(
    span: str = typer.Argument(..., help="Column count, fraction (0.5, 2/3) or keyword (one-half)"),
    columns: int = typer.Option(12, "--columns", "-n", help="Total column count"),
) -> None:
    """Compute the percentage width of a span."""
    from snapgrid.core.spans import colspan, format_percentage

    try:
        value = colspan(span, columns)
    except GridError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    typer.echo(format_percentage(value))


@app.command("init")
def init_command(
    path: Path = typer.Option(Path("."), "--path", "-p", help="Project directory"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing gridspec.yaml"),
) -> None:
    """Write a default gridspec.yaml."""
    if gridspec_exists(path) and not force:
        err_console.print(
            f"[red]Error:[/red] {path / GRIDSPEC_FILE} already exists (use --force to overwrite)"
        )
        raise typer.Exit(code=1)

    path.mkdir(parents=True, exist_ok=True)
    saved = save_gridspec(path, create_default_gridspec())
    console.print(f"[green]Created[/green] {saved}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
