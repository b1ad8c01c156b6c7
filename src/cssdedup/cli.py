"""Click CLI for css-dedup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from cssdedup.config.hierarchy import load_settings
from cssdedup.errors.exceptions import CssDedupError
from cssdedup.types import BatchResult, DedupStats

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level)
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _kb(size: int) -> str:
    return f"{size / 1024:.1f} KB"


@click.group()
@click.version_option(package_name="css-dedup")
def cli() -> None:
    """css-dedup: remove duplicate CSS from concatenated stylesheets."""


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--ext",
    "extensions",
    multiple=True,
    help="File extension to process (repeatable). Defaults to .css.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Report savings without writing.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def run(directory: Path, extensions: tuple[str, ...], dry_run: bool, verbose: int) -> None:
    """Deduplicate every stylesheet in DIRECTORY in place."""
    settings = load_settings(extensions=list(extensions) or None)
    _setup_logging(verbose, settings.log_level)

    from cssdedup.core import CssDedup

    deduper = CssDedup(settings)
    try:
        batch = deduper.deduplicate_directory(directory, write=not dry_run)
    except (CssDedupError, OSError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    console.print(f"Found {len(batch.files)} CSS file(s) to deduplicate.")
    _print_batch(batch)
    if dry_run:
        console.print("[yellow]Dry run: no files were written.[/yellow]")


@cli.command("file")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Output file path."
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def dedupe_file(input_path: Path, output: Path | None, verbose: int) -> None:
    """Deduplicate a single stylesheet, printing to stdout unless -o is given."""
    settings = load_settings()
    _setup_logging(verbose, settings.log_level)

    from cssdedup.core import CssDedup

    try:
        css, stats = CssDedup(settings).deduplicate_text(input_path.read_text(encoding="utf-8"))
        if output:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(css, encoding="utf-8")
    except (CssDedupError, OSError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    if output:
        console.print(f"[green]Written to {escape(str(output))}[/green]")
    else:
        # Plain echo: CSS attribute selectors would be read as rich markup.
        click.echo(css, nl=False)

    if verbose >= 1:
        _print_stats(stats)


@cli.command("config")
def show_config() -> None:
    """Show the resolved configuration."""
    settings = load_settings()

    table = Table(title="Resolved Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in settings.model_dump().items():
        table.add_row(key, repr(value))

    console.print(table)


def _print_batch(batch: BatchResult) -> None:
    """Print per-file and total before/after sizes."""
    table = Table(title="Deduplication Summary", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Before", justify="right")
    table.add_column("After", justify="right")
    table.add_column("Saved", justify="right")

    for result in batch.files:
        table.add_row(
            escape(result.path.name),
            _kb(result.size_before),
            _kb(result.size_after),
            f"{_kb(result.reduction)} ({result.reduction_pct:.1f}%)",
        )

    table.add_section()
    table.add_row(
        "Total",
        _kb(batch.size_before),
        _kb(batch.size_after),
        f"{_kb(batch.reduction)} ({batch.reduction_pct:.1f}%)",
        style="bold",
    )
    console.print(table)


def _print_stats(stats: DedupStats) -> None:
    error_console.print()
    table = Table(title="Removed", show_header=True)
    table.add_column("Kind", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Duplicate rules", str(stats.rules_removed))
    table.add_row("Duplicate at-rules", str(stats.at_rules_removed))
    table.add_row("Duplicate declarations", str(stats.declarations_removed))
    table.add_row("Emptied rules", str(stats.rules_emptied))
    table.add_row("Empty containers", str(stats.containers_removed))

    error_console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
