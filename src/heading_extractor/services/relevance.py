"""Deep-learning relevance check for heading candidates."""

from __future__ import annotations

from collections.abc import Iterable

from heading_extractor.models.vocabulary import DEEP_LEARNING_KEYWORDS


def is_relevant(candidate: str, keywords: Iterable[str] = DEEP_LEARNING_KEYWORDS) -> bool:
    """Return True if any keyword occurs anywhere in the lower-cased candidate."""
    low = candidate.lower()
    return any(k in low for k in keywords)


__all__ = ["is_relevant"]
