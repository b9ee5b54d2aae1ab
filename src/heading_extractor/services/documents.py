"""Document discovery and raw line supply."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import logfire

from heading_extractor.core.exceptions import PapersDirectoryError

DEFAULT_EXTENSIONS = (".txt", ".md")


def discover_documents(
    directory: str | Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> list[Path]:
    """List the documents directly inside a directory.

    Args:
        directory: Papers directory
        extensions: Accepted file name suffixes, compared case-insensitively

    Returns:
        Matching regular files sorted by name

    Raises:
        PapersDirectoryError: If the directory is missing or not a directory
    """
    root = Path(directory)
    if not root.is_dir():
        raise PapersDirectoryError(str(root.absolute()))

    suffixes = tuple(ext.lower() for ext in extensions)
    documents = sorted(
        (p for p in root.iterdir() if p.is_file() and p.name.lower().endswith(suffixes)),
        key=lambda p: p.name,
    )
    logfire.debug(
        "Discovered documents", directory=str(root), documents=len(documents), extensions=suffixes
    )
    return documents


def read_document_lines(document_id: str | Path) -> list[bytes]:
    """Read a document as raw lines.

    Decoding is left to the scanner so a malformed byte sequence only costs
    the line it appears on.
    """
    return Path(document_id).read_bytes().splitlines()


__all__ = ["DEFAULT_EXTENSIONS", "discover_documents", "read_document_lines"]
