"""Deep-learning heading extractor - distinct sub-headings from text papers."""

from heading_extractor.core.workflow import extract_distinct_headings, run_extraction
from heading_extractor.models.headings import DocumentResult, ExtractionReport, HeuristicKind
from heading_extractor.services.collector import ParallelCollector
from heading_extractor.services.heading_set import HeadingSet
from heading_extractor.services.scanner import DocumentScanner

__version__ = "1.0.0"
__all__ = [
    "extract_distinct_headings",
    "run_extraction",
    "DocumentResult",
    "ExtractionReport",
    "HeuristicKind",
    "DocumentScanner",
    "HeadingSet",
    "ParallelCollector",
]
