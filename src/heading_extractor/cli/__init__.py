"""Public CLI API re-exports for tests and external importers."""

from .app import cli
from .report_io import display_headings, save_headings

__all__ = [
    "cli",
    "display_headings",
    "save_headings",
]
