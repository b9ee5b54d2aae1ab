"""Data models for heading extraction."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HeuristicKind(str, Enum):
    """Structural rule that turned a line into a heading candidate."""

    MARKDOWN_HASH = "markdown-hash"
    NUMBERED_PREFIX = "numbered-prefix"
    ALL_CAPS = "all-caps"
    TITLE_CASE_FALLBACK = "title-case-fallback"


class HeadingCandidate(BaseModel):
    """Raw text extracted from a line, before relevance and normalization."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Extracted candidate text")
    kind: HeuristicKind = Field(description="Rule that matched the line")


class DocumentResult(BaseModel):
    """Result-or-error outcome of scanning one document.

    A failed result carries the error message and never any headings, so the
    collector can merge every outcome the same way.
    """

    document_id: str = Field(description="Identifier of the scanned document")
    headings: set[str] = Field(
        default_factory=set, description="Accepted headings, exact-string deduplicated"
    )
    error: str | None = Field(default=None, description="Failure message when the scan failed")
    skipped_lines: int = Field(default=0, ge=0, description="Lines dropped because they failed to decode or process")

    @model_validator(mode="after")
    def _failed_results_are_empty(self) -> DocumentResult:
        if self.error is not None and self.headings:
            raise ValueError("a failed document result cannot carry headings")
        return self

    @property
    def ok(self) -> bool:
        """True when the document was scanned without a document-level failure."""
        return self.error is None

    @classmethod
    def failed(cls, document_id: str, error: str) -> DocumentResult:
        return cls(document_id=document_id, error=error)


class ExtractionReport(BaseModel):
    """Summary of one extraction run over a papers directory."""

    papers_dir: Path = Field(description="Directory the documents were discovered in")
    documents: int = Field(default=0, ge=0, description="Number of documents scanned")
    failed_documents: list[str] = Field(
        default_factory=list, description="Documents that produced no result because of errors"
    )
    headings: list[str] = Field(
        default_factory=list, description="Merged headings in case-insensitive order"
    )

    @property
    def heading_count(self) -> int:
        return len(self.headings)


__all__ = [
    "HeuristicKind",
    "HeadingCandidate",
    "DocumentResult",
    "ExtractionReport",
]
