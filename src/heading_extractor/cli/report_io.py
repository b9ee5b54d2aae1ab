"""Heading display/save helpers for the CLI."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from heading_extractor.core.exceptions import OutputWriteError
from heading_extractor.models.headings import ExtractionReport

console = Console()


def display_headings(headings: Iterable[str], out: Console | None = None) -> None:
    out = out or console
    out.print("Distinct deep-learning-related sub-headings found:", style="bold cyan")
    for heading in headings:
        # Headings are user text; brackets must not be read as rich markup
        out.print(f"- {heading}", markup=False, emoji=False, highlight=False, soft_wrap=True)


def display_summary(
    report: ExtractionReport, output_path: Path, out: Console | None = None
) -> None:
    out = out or console
    table = Table(title="Extraction Summary", border_style="cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Papers directory", escape(str(report.papers_dir)))
    table.add_row("Documents scanned", str(report.documents))
    table.add_row("Documents failed", str(len(report.failed_documents)))
    table.add_row("Distinct headings", str(report.heading_count))
    out.print(table)
    for doc in report.failed_documents:
        out.print(
            f"[yellow]Skipped unreadable document:[/yellow] {escape(doc)}",
            highlight=False,
            soft_wrap=True,
        )
    out.print(
        f"Wrote {report.heading_count} headings to {output_path}", highlight=False, soft_wrap=True
    )


def save_headings(headings: Iterable[str], filename: str | Path) -> Path:
    """Write one heading per line and return the absolute output path.

    Raises:
        OutputWriteError: If the file or its parent directory cannot be written
    """
    path = Path(filename)
    try:
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for heading in headings:
                f.write(f"{heading}\n")
    except OSError as e:
        raise OutputWriteError(str(path), e) from e
    return path.absolute()
