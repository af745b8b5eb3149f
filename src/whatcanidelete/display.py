"""Rich terminal display for whatcanidelete."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from whatcanidelete.analyzer import sort_by_size
from whatcanidelete.models import (
    AnalysisSummary,
    ClassificationRules,
    FileCategory,
    FileEntry,
    format_size,
)

console = Console()

CATEGORY_COLORS = {
    FileCategory.LIKELY_SAFE: "green",
    FileCategory.BE_CAREFUL: "yellow",
    FileCategory.DO_NOT_DELETE: "red",
}


def category_icon(category: FileCategory) -> str:
    """Get icon for a category."""
    icons = {
        FileCategory.LIKELY_SAFE: "[green]✓[/green]",
        FileCategory.BE_CAREFUL: "[yellow]![/yellow]",
        FileCategory.DO_NOT_DELETE: "[red]✗[/red]",
    }
    return icons.get(category, "?")


def category_label(category: FileCategory) -> str:
    """Get styled label for a category."""
    color = CATEGORY_COLORS.get(category)
    if color is None:
        return "Unknown"
    return f"[{color}]{category.description}[/{color}]"


def show_results(entries: list[FileEntry], limit: Optional[int] = None) -> None:
    """Display classified files, largest first."""
    if not entries:
        console.print("[yellow]No files found.[/yellow]")
        return

    ordered = sort_by_size(entries)
    shown = ordered[:limit] if limit else ordered

    table = Table(show_header=True, header_style="bold")
    table.add_column("", width=1)
    table.add_column("File")
    table.add_column("Size", justify="right")
    table.add_column("Last Accessed", justify="right")
    table.add_column("Category")
    table.add_column("Reason", style="dim")

    for entry in shown:
        table.add_row(
            category_icon(entry.category),
            escape(entry.full_path),
            entry.size_human,
            entry.last_accessed_description,
            category_label(entry.category),
            escape(entry.reason),
        )

    console.print(table)

    hidden = len(ordered) - len(shown)
    if hidden > 0:
        console.print(f"[dim]... and {hidden} more (use --limit to show more)[/dim]")


def show_summary(summary: AnalysisSummary) -> None:
    """Display per-category totals."""
    lines = []
    for category in FileCategory:
        color = CATEGORY_COLORS[category]
        count = summary.counts.get(category, 0)
        size = summary.bytes_by_category.get(category, 0)
        lines.append(
            f"{category_icon(category)} [{color}]{category.description}:[/{color}] "
            f"{count} files ({format_size(size)})"
        )

    console.print(
        Panel(
            "\n".join(lines) + f"\n\n[bold]{summary.text}[/bold]",
            title="Summary",
            border_style="blue",
        )
    )


def show_rules(rules: ClassificationRules) -> None:
    """Display the thresholds used for classification."""
    table = Table(title="Classification Rules", show_header=True, header_style="bold")
    table.add_column("Rule")
    table.add_column("Value", justify="right")

    table.add_row("Temporary extensions", ", ".join(sorted(rules.temporary_extensions)))
    table.add_row("Likely safe after", f"{rules.stale_after.days} days idle")
    table.add_row("Be careful after", f"{rules.idle_after.days} days idle")
    table.add_row("Large file size", format_size(rules.large_file_bytes))

    console.print(table)


def show_scanning_progress() -> Progress:
    """Create spinner for scanning (total file count is unknown up front)."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed} files"),
        TimeElapsedColumn(),
        console=console,
    )
