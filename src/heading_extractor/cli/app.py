"""Click CLI entry points for the heading extractor."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import logfire
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from heading_extractor import __version__
from heading_extractor.core import ENV_FILE
from heading_extractor.core.config import ExtractionConfig
from heading_extractor.core.exceptions import HeadingExtractorError
from heading_extractor.core.logging import configure_logging
from heading_extractor.core.workflow import run_extraction
from heading_extractor.services.samples import create_sample_papers

from .report_io import display_headings, display_summary, save_headings

err_console = Console(stderr=True)


@click.group()
def cli() -> None:
    """Heading Extractor CLI - distinct deep-learning sub-headings from papers."""
    pass


@cli.command()
@click.argument("papers_dir", required=False, type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file, one heading per line (default: distinct_headings.txt)",
)
@click.option("--workers", "-w", type=click.IntRange(min=1), default=None, help="Worker pool size")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def extract(
    papers_dir: Path | None,
    output: Path | None,
    workers: int | None,
    verbose: bool,
) -> None:
    """Extract distinct deep-learning headings from PAPERS_DIR.

    Without PAPERS_DIR a small set of sample papers is generated and scanned.
    """
    config = ExtractionConfig()
    if output is not None:
        config.output_path = output
    if workers is not None:
        config.max_workers = workers
    configure_logging(config, verbose=verbose)

    try:
        if papers_dir is None:
            papers_dir = config.sample_dir
            create_sample_papers(papers_dir)
        report = run_extraction(papers_dir, config)
        display_headings(report.headings)
        written = save_headings(report.headings, config.output_path)
    except HeadingExtractorError as e:
        logfire.error(e.message, error_code=e.error_code, **e.details)
        err_console.print(f"[red]{escape(e.message)}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)

    display_summary(report, written)


@cli.command()
def version() -> None:
    """Show version information."""
    console = Console()
    table = Table(title="Heading Extractor", border_style="cyan")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")
    table.add_row("Heading Extractor", __version__)
    pyver = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    table.add_row("Python", pyver)
    table.add_row("Settings file", escape(ENV_FILE or "none"))
    console.print(table)
