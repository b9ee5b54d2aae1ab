"""Heading extraction services."""

from .classifier import classify_line
from .collector import ParallelCollector
from .documents import discover_documents, read_document_lines
from .heading_set import HeadingSet
from .normalizer import normalize_heading
from .relevance import is_relevant
from .samples import create_sample_papers
from .scanner import DocumentScanner, extract_heading

__all__ = [
    "classify_line",
    "is_relevant",
    "normalize_heading",
    "extract_heading",
    "DocumentScanner",
    "HeadingSet",
    "ParallelCollector",
    "discover_documents",
    "read_document_lines",
    "create_sample_papers",
]
