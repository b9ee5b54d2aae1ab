"""Data models for the heading extractor."""

from .headings import DocumentResult, ExtractionReport, HeadingCandidate, HeuristicKind
from .vocabulary import DEEP_LEARNING_KEYWORDS, HEADING_STOPWORDS

__all__ = [
    "HeuristicKind",
    "HeadingCandidate",
    "DocumentResult",
    "ExtractionReport",
    "DEEP_LEARNING_KEYWORDS",
    "HEADING_STOPWORDS",
]
