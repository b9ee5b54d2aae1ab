"""Thread-safe, case-insensitive set of merged headings."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from functools import lru_cache


@lru_cache(maxsize=4096)
def _fold_char(ch: str) -> str:
    # Single-character case mapping: upper-case, then lower-case the result.
    # Mappings that expand ("\u00df" -> "SS") leave the character as it is.
    upper = ch.upper()
    if len(upper) != 1:
        upper = ch
    return upper.lower()[0]


def fold_heading(heading: str) -> str:
    """Comparison key under which two headings are equal ignoring case.

    Characters are folded one at a time, so the key has the same length as the
    heading. Sorting by the key orders headings case-insensitively.
    """
    return "".join(_fold_char(ch) for ch in heading)


class HeadingSet:
    """Headings unique under case-insensitive comparison.

    Iteration yields headings in case-insensitive ascending order. When two
    headings differ only in case, the one inserted first is kept; callers must
    not rely on which casing that is once inserts come from concurrent workers.
    """

    def __init__(self, headings: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._entries: dict[str, str] = {}
        self.update(headings)

    def add(self, heading: str) -> bool:
        """Insert a heading.

        Returns:
            True if the heading was new, False if a case variant was present
        """
        key = fold_heading(heading)
        with self._lock:
            if key in self._entries:
                return False
            self._entries[key] = heading
            return True

    def update(self, headings: Iterable[str]) -> int:
        """Insert many headings and return how many were new."""
        added = 0
        for heading in headings:
            if self.add(heading):
                added += 1
        return added

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def as_list(self) -> list[str]:
        """Snapshot of the headings in case-insensitive order."""
        with self._lock:
            return [self._entries[key] for key in sorted(self._entries)]

    def __contains__(self, heading: object) -> bool:
        if not isinstance(heading, str):
            return False
        with self._lock:
            return fold_heading(heading) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_list())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"HeadingSet({self.as_list()!r})"


__all__ = ["HeadingSet", "fold_heading"]
