"""Per-document heading scan."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import logfire

from heading_extractor.core.exceptions import DocumentReadError
from heading_extractor.models.headings import DocumentResult
from heading_extractor.services.classifier import ASCII_WHITESPACE, classify_line
from heading_extractor.services.documents import read_document_lines
from heading_extractor.services.normalizer import normalize_heading
from heading_extractor.services.relevance import is_relevant

LineSupplier = Callable[[str], Iterable[str | bytes]]


def extract_heading(line: str) -> str | None:
    """Run one raw line through classification, relevance and normalization."""
    line = line.strip(ASCII_WHITESPACE)
    if not line:
        return None
    candidate = classify_line(line)
    if candidate is None or not is_relevant(candidate.text):
        return None
    return normalize_heading(candidate.text)


class DocumentScanner:
    """Extracts the accepted headings of one document at a time.

    Read failures are reported as a failed ``DocumentResult`` instead of being
    raised, so one unreadable document never affects another.
    """

    def __init__(self, line_supplier: LineSupplier = read_document_lines):
        self.line_supplier = line_supplier

    def scan_lines(self, lines: Iterable[str | bytes]) -> tuple[set[str], int]:
        """Scan an ordered sequence of lines.

        Args:
            lines: Decoded lines, or raw UTF-8 encoded lines

        Returns:
            Accepted headings and the number of lines that failed to process
        """
        headings: set[str] = set()
        skipped = 0
        for number, raw in enumerate(lines, start=1):
            try:
                line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
                heading = extract_heading(line)
            except Exception as e:
                skipped += 1
                logfire.debug(
                    "Skipping unprocessable line",
                    line_number=number,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                continue
            if heading is not None:
                headings.add(heading)
        return headings, skipped

    def scan(self, document_id: str | Path) -> DocumentResult:
        """Scan a whole document.

        Args:
            document_id: Identifier handed to the line supplier

        Returns:
            The document's headings, or a failed result if it could not be read
        """
        doc = str(document_id)
        try:
            headings, skipped = self.scan_lines(self.line_supplier(doc))
        except (OSError, UnicodeError) as e:
            err = DocumentReadError(doc, e)
            logfire.warning(err.message, document_id=doc, error_code=err.error_code)
            return DocumentResult.failed(doc, err.message)

        logfire.debug("Scanned document", document_id=doc, headings=len(headings), skipped=skipped)
        return DocumentResult(document_id=doc, headings=headings, skipped_lines=skipped)


__all__ = ["DocumentScanner", "LineSupplier", "extract_heading"]
