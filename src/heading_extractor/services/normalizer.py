"""Canonical form and shape checks for relevant heading candidates.

Normalization only ever trims: whitespace runs collapse to one space, a
trailing ellipsis goes, then any trailing run of ``.``, ``:``, ``;``, ``-``
or whitespace goes. The word-count, stopword and title-like checks afterwards
filter without changing the text, so normalizing an accepted heading again
returns it unchanged.
"""

from __future__ import annotations

import re

from heading_extractor.models.vocabulary import HEADING_STOPWORDS

MAX_HEADING_WORDS = 12
MAX_STOPWORD_RATIO = 0.5

_WHITESPACE = re.compile(r"\s+", re.ASCII)
_TRAILING_ELLIPSIS = re.compile(r"\.{2,}$")
_TRAILING_PUNCTUATION = re.compile(r"[.:;\-\s]+$", re.ASCII)


def clean_heading_text(candidate: str) -> str:
    """Collapse whitespace and strip trailing ellipses and punctuation."""
    text = _WHITESPACE.sub(" ", candidate).strip(" ")
    text = _TRAILING_ELLIPSIS.sub("", text)
    return _TRAILING_PUNCTUATION.sub("", text).strip(" ")


def stopword_ratio(words: list[str]) -> float:
    if not words:
        return 0.0
    stop = sum(1 for w in words if w.lower() in HEADING_STOPWORDS)
    return stop / len(words)


def is_title_like(word: str) -> bool:
    """Capitalized or upper-case word of more than one character.

    Words with no cased letters (``2.1``, ``42``) equal their upper-case form
    and therefore count as well.
    """
    if len(word) <= 1:
        return False
    return word[0].isupper() or word == word.upper()


def normalize_heading(candidate: str) -> str | None:
    """Normalize a relevant candidate.

    Args:
        candidate: Raw candidate text that already passed the relevance check

    Returns:
        The cleaned heading, or None when it does not look like a heading
    """
    normalized = clean_heading_text(candidate)

    words = normalized.split(" ") if normalized else []
    if not words or len(words) > MAX_HEADING_WORDS:
        return None
    if stopword_ratio(words) > MAX_STOPWORD_RATIO:
        return None
    if not any(is_title_like(w) for w in words):
        return None
    return normalized


__all__ = [
    "MAX_HEADING_WORDS",
    "MAX_STOPWORD_RATIO",
    "clean_heading_text",
    "is_title_like",
    "normalize_heading",
    "stopword_ratio",
]
