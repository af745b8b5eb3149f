"""CLI interface for whatcanidelete."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from whatcanidelete import __version__
from whatcanidelete.analyzer import (
    CancellationToken,
    InvalidRootError,
    analyze_in_background,
    entries_in_category,
    sort_by_size,
    summarize,
)
from whatcanidelete.display import (
    console,
    show_results,
    show_rules,
    show_scanning_progress,
    show_summary,
)
from whatcanidelete.models import DEFAULT_RULES, FileCategory, FileEntry
from whatcanidelete.report import default_report_name, write_report

# Create Typer app
app = typer.Typer(
    name="whatcanidelete",
    help="Find out which files are likely safe to delete - read-only, never deletes anything",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"whatcanidelete version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library log records to the terminal when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def run_analysis(path: str) -> list[FileEntry]:
    """Analyze a folder with a progress spinner. Ctrl-C stops early."""
    if not path.strip():
        console.print("[red]Error: A folder to analyze is required[/red]")
        raise typer.Exit(1)

    folder = Path(path).expanduser()
    if not folder.is_dir():
        console.print(f"[red]Not a folder: {folder}[/red]")
        raise typer.Exit(1)

    cancel_token = CancellationToken()

    with show_scanning_progress() as progress:
        task = progress.add_task(f"Scanning {folder}...", total=None)

        def update_progress(files_done: int):
            progress.update(task, completed=files_done)

        try:
            future = analyze_in_background(folder, cancel_token, progress_callback=update_progress)
        except InvalidRootError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

        try:
            entries = future.result()
        except KeyboardInterrupt:
            cancel_token.cancel()
            entries = future.result()

    if cancel_token.is_cancelled:
        console.print("[yellow]Scan cancelled - showing partial results[/yellow]")

    return entries


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """whatcanidelete - read-only advisor for freeing disk space."""


@app.command()
def analyze(
    path: str = typer.Argument(..., help="Folder to analyze"),
    limit: Optional[int] = typer.Option(
        50, "--limit", "-n", help="Maximum number of files to list (0 for all)"
    ),
    category: Optional[FileCategory] = typer.Option(
        None, "--category", "-c", help="Only list files in this category"
    ),
    export: Optional[Path] = typer.Option(
        None, "--export", "-o", help="Also write a CSV report to this file"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log skipped files and folders"),
) -> None:
    """Analyze a folder and classify every file."""
    configure_logging(verbose)

    console.print(f"[bold blue]Analyzing {path}...[/bold blue]\n")
    entries = run_analysis(path)

    listed = entries_in_category(entries, category) if category else entries
    show_results(listed, limit=limit or None)
    console.print()
    show_summary(summarize(entries))

    if export:
        _export(entries, export)


@app.command()
def export(
    path: str = typer.Argument(..., help="Folder to analyze"),
    output: Optional[Path] = typer.Argument(
        None, help="CSV file to write (default: WhatCanIDelete_Report.csv)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log skipped files and folders"),
) -> None:
    """Analyze a folder and write a CSV report."""
    configure_logging(verbose)

    entries = run_analysis(path)
    _export(entries, output or Path(default_report_name()))
    console.print(f"[dim]{summarize(entries).text}[/dim]")


@app.command()
def rules() -> None:
    """Show the classification thresholds."""
    show_rules(DEFAULT_RULES)


def _export(entries: list[FileEntry], output: Path) -> None:
    try:
        written = write_report(sort_by_size(entries), output)
    except OSError as e:
        console.print(f"[red]Failed to write report: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Report exported to {written}.[/green]")


if __name__ == "__main__":
    app()
