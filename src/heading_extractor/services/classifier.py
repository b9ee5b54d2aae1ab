"""Line classification into heading candidates.

A line is offered to each structural rule in a fixed priority order and the
first rule that matches decides the candidate text. The order matters: a line
such as ``"## 2.1 Model Architecture"`` is a markdown heading whose text keeps
its ``2.1`` prefix, because the numbered rule never sees it.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from heading_extractor.models.headings import HeadingCandidate, HeuristicKind

MARKDOWN_HEADING = re.compile(r"^#{1,6}\s+(.+)$", re.ASCII)
NUMBERED_HEADING = re.compile(r"^\s*(\d+(?:\.\d+)*)\s+(.{3,200})$", re.ASCII)
ALL_CAPS_HEADING = re.compile(r"^[A-Z0-9][A-Z0-9\s,:\-()]{2,150}$", re.ASCII)

TITLE_CASE_MAX_LENGTH = 100
TITLE_CASE_MIN_CAPITALIZED = 2

ASCII_WHITESPACE = " \t\n\r\x0b\x0c"

# ASCII whitespace only; other Unicode spaces stay inside a token.
_TOKEN_SEPARATOR = re.compile(r"\s+", re.ASCII)

Extractor = Callable[[str], str | None]


def _markdown(line: str) -> str | None:
    m = MARKDOWN_HEADING.match(line)
    return m.group(1).strip(ASCII_WHITESPACE) if m else None


def _numbered(line: str) -> str | None:
    m = NUMBERED_HEADING.match(line)
    return m.group(2).strip(ASCII_WHITESPACE) if m else None


def _all_caps(line: str) -> str | None:
    return line if ALL_CAPS_HEADING.match(line) else None


def looks_like_title_case(line: str) -> bool:
    """At least two whitespace-delimited tokens start with an uppercase letter."""
    count = 0
    for token in _TOKEN_SEPARATOR.split(line):
        if token and token[0].isupper():
            count += 1
            if count >= TITLE_CASE_MIN_CAPITALIZED:
                return True
    return False


def _title_case(line: str) -> str | None:
    if len(line) <= TITLE_CASE_MAX_LENGTH and looks_like_title_case(line):
        return line
    return None


# Evaluated in order; first match wins.
RULES: tuple[tuple[HeuristicKind, Extractor], ...] = (
    (HeuristicKind.MARKDOWN_HASH, _markdown),
    (HeuristicKind.NUMBERED_PREFIX, _numbered),
    (HeuristicKind.ALL_CAPS, _all_caps),
    (HeuristicKind.TITLE_CASE_FALLBACK, _title_case),
)


def classify_line(line: str) -> HeadingCandidate | None:
    """Classify one trimmed line.

    Args:
        line: A single line with surrounding whitespace already removed

    Returns:
        The heading candidate and the rule that produced it, or None
    """
    if not line:
        return None
    for kind, extract in RULES:
        text = extract(line)
        if text is not None:
            return HeadingCandidate(text=text, kind=kind)
    return None


__all__ = ["ASCII_WHITESPACE", "RULES", "classify_line", "looks_like_title_case"]
