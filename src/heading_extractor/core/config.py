"""Configuration management for the heading extractor."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Note: .env file is loaded in heading_extractor/core/__init__.py before this module is imported


def _env_flag(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from environment variables.

    Accepts: "1", "true", "TRUE", "True" as True.
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip() in {"1", "true", "TRUE", "True"}


def _env_int_optional(name: str) -> int | None:
    v = os.getenv(name)
    if v is None or not v.strip():
        return None
    try:
        n = int(v)
    except ValueError:
        return None
    return n if n >= 1 else None


LogLevel = Literal["debug", "info", "warning", "error"]


def _env_log_level(name: str, default: LogLevel = "info") -> LogLevel:
    v = (os.getenv(name) or "").strip().lower()
    if v in {"debug", "info", "warning", "error"}:
        return v  # type: ignore[return-value]
    return default


def _env_path(name: str, default: str) -> Path:
    v = os.getenv(name)
    if v is None or not v.strip():
        return Path(default)
    return Path(v.strip())


def _env_extensions(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    parts = tuple(part.strip() for part in v.split(",") if part.strip())
    return parts or default


class ExtractionConfig(BaseModel):
    """Runtime settings for one extraction run."""

    model_config = ConfigDict(validate_assignment=True, validate_default=True, extra="forbid")

    max_workers: int | None = Field(
        default_factory=lambda: _env_int_optional("HEADINGS_MAX_WORKERS"),
        ge=1,
        description="Worker pool size override; unset means max(2, cpu_count)",
    )
    output_path: Path = Field(
        default_factory=lambda: _env_path("HEADINGS_OUTPUT_PATH", "distinct_headings.txt"),
        description="File the merged headings are written to, one per line",
    )
    sample_dir: Path = Field(
        default_factory=lambda: _env_path("HEADINGS_SAMPLE_DIR", "papers_sample"),
        description="Directory demo papers are generated in when no input is given",
    )
    extensions: tuple[str, ...] = Field(
        default_factory=lambda: _env_extensions("HEADINGS_EXTENSIONS", (".txt", ".md")),
        description="File name suffixes treated as documents (case-insensitive)",
    )
    enable_console_logging: bool = Field(
        default_factory=lambda: _env_flag("HEADINGS_CONSOLE_LOG", False),
        description="Mirror logfire records to the console",
    )
    log_level: LogLevel = Field(
        default_factory=lambda: _env_log_level("HEADINGS_LOG_LEVEL"),
        description="Lowest logfire level recorded; --verbose forces debug",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = f".{ext}"
            normalized.append(ext)
        if not normalized:
            raise ValueError("at least one document extension is required")
        return tuple(normalized)

    @property
    def pool_size(self) -> int:
        """Effective number of scanner workers."""
        if self.max_workers is not None:
            return self.max_workers
        return max(2, os.cpu_count() or 1)

