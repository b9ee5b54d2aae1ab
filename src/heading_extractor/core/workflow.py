"""Extraction workflow: discovery, parallel collection, reporting."""

from __future__ import annotations

from pathlib import Path

import logfire

from heading_extractor.core.config import ExtractionConfig
from heading_extractor.models.headings import ExtractionReport
from heading_extractor.services.collector import ParallelCollector
from heading_extractor.services.documents import discover_documents
from heading_extractor.services.heading_set import HeadingSet


def _collect(papers_dir: Path, config: ExtractionConfig) -> tuple[HeadingSet, ParallelCollector]:
    documents = discover_documents(papers_dir, config.extensions)
    collector = ParallelCollector(config)
    headings = collector.collect(documents)
    return headings, collector


def extract_distinct_headings(
    papers_dir: str | Path, config: ExtractionConfig | None = None
) -> HeadingSet:
    """Collect the distinct deep-learning headings of every document in a directory.

    Raises:
        PapersDirectoryError: If ``papers_dir`` is not a directory
    """
    headings, _ = _collect(Path(papers_dir), config or ExtractionConfig())
    return headings


def run_extraction(
    papers_dir: str | Path, config: ExtractionConfig | None = None
) -> ExtractionReport:
    """Like ``extract_distinct_headings`` but also reports per-run statistics."""
    root = Path(papers_dir)
    headings, collector = _collect(root, config or ExtractionConfig())
    report = ExtractionReport(
        papers_dir=root,
        documents=len(collector.results),
        failed_documents=sorted(collector.failed_documents),
        headings=headings.as_list(),
    )
    logfire.info(
        "Extraction finished",
        papers_dir=str(root),
        documents=report.documents,
        failed=len(report.failed_documents),
        headings=report.heading_count,
    )
    return report


__all__ = ["extract_distinct_headings", "run_extraction"]
