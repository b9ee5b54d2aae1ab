"""Domain-specific exception hierarchy for consistent error handling."""

from __future__ import annotations

from typing import Any


class HeadingExtractorError(Exception):
    """Base exception for all expected extraction errors."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Serialise the error into a structured payload."""

        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class PapersDirectoryError(HeadingExtractorError):
    """Raised when the papers directory is missing or is not a directory."""

    def __init__(self, directory: str) -> None:
        super().__init__(
            message=f"Papers directory does not exist: {directory}",
            error_code="PAPERS_DIRECTORY_NOT_FOUND",
            details={"directory": directory},
        )


class DocumentReadError(HeadingExtractorError):
    """Raised when a single document cannot be read.

    Scanners record this in a failed ``DocumentResult``; it never crosses a
    worker boundary.
    """

    def __init__(self, document_id: str, original_error: Exception | None = None) -> None:
        details: dict[str, Any] = {"document_id": document_id}
        reason = "unreadable"
        if original_error:
            details["original_error"] = str(original_error)
            reason = type(original_error).__name__
        super().__init__(
            message=f"Cannot read document {document_id}: {reason}",
            error_code="DOCUMENT_READ_ERROR",
            details=details,
        )


class SampleDataError(HeadingExtractorError):
    """Raised when the demo papers cannot be written."""

    def __init__(self, directory: str, original_error: Exception) -> None:
        super().__init__(
            message=f"Cannot write sample papers to {directory}: {type(original_error).__name__}",
            error_code="SAMPLE_DATA_ERROR",
            details={"directory": directory, "original_error": str(original_error)},
        )


class OutputWriteError(HeadingExtractorError):
    """Raised when the heading list cannot be written to its output file."""

    def __init__(self, path: str, original_error: Exception) -> None:
        super().__init__(
            message=f"Cannot write headings to {path}: {type(original_error).__name__}",
            error_code="OUTPUT_WRITE_ERROR",
            details={"path": path, "original_error": str(original_error)},
        )


__all__ = [
    "HeadingExtractorError",
    "PapersDirectoryError",
    "DocumentReadError",
    "SampleDataError",
    "OutputWriteError",
]
