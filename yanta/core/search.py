from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchQuery:
    text: str
    match_case: bool = False
    match_whole_word: bool = False

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class MatchSet:
    """Ordered match offsets plus the index of the active match (-1 when empty)."""

    matches: tuple[int, ...] = ()
    cursor: int = -1

    def __bool__(self) -> bool:
        return bool(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    @property
    def current(self) -> Optional[int]:
        if not self.matches:
            return None
        return self.matches[self.cursor]

    def selection(self, length: int) -> Optional[tuple[int, int]]:
        """Return the [start, end) range of the active match."""
        start = self.current
        if start is None:
            return None
        return start, start + length


EMPTY_MATCHES = MatchSet()


def _fold(text: str) -> str:
    # Per-character folding keeps offsets aligned with the original text;
    # characters whose lowercase form expands are compared as-is.
    out = []
    for ch in text:
        lowered = ch.lower()
        out.append(lowered if len(lowered) == 1 else ch)
    return "".join(out)


def _is_word_char(ch: str) -> bool:
    # letters and decimal digits only; superscripts and fractions are boundaries
    return ch.isalpha() or ch.isdecimal()


def _at_word_boundary(text: str, offset: int, length: int) -> bool:
    if offset > 0 and _is_word_char(text[offset - 1]):
        return False
    end = offset + length
    if end < len(text) and _is_word_char(text[end]):
        return False
    return True


def find(text: str, query: SearchQuery) -> MatchSet:
    """Scan ``text`` left to right and collect every accepted occurrence of the query.

    The scan resumes at ``match_start + len(query.text)`` after each raw hit, so
    overlapping occurrences are skipped. An empty query yields an empty set.
    """
    if not query.text:
        return EMPTY_MATCHES
    haystack = text if query.match_case else _fold(text)
    needle = query.text if query.match_case else _fold(query.text)
    step = len(needle)
    found: list[int] = []
    index = haystack.find(needle)
    while index != -1:
        if not query.match_whole_word or _at_word_boundary(text, index, step):
            found.append(index)
        index = haystack.find(needle, index + step)
    logger.debug("find %r: %d match(es)", query.text, len(found))
    if not found:
        return EMPTY_MATCHES
    return MatchSet(tuple(found), 0)


def is_valid_at(text: str, query: SearchQuery, offset: int) -> bool:
    """Return True if ``query`` still matches ``text`` exactly at ``offset``."""
    if not query.text or offset < 0:
        return False
    end = offset + len(query.text)
    if end > len(text):
        return False
    if query.match_whole_word and not _at_word_boundary(text, offset, len(query.text)):
        return False
    candidate = text[offset:end]
    if query.match_case:
        return candidate == query.text
    return _fold(candidate) == _fold(query.text)


def _cycle(match_set: MatchSet, text: str, query: SearchQuery, step: int) -> MatchSet:
    if not match_set.matches:
        return match_set
    count = len(match_set.matches)
    cursor = match_set.cursor
    for _ in range(count):
        cursor = (cursor + step + count) % count
        if is_valid_at(text, query, match_set.matches[cursor]):
            return MatchSet(match_set.matches, cursor)
    logger.debug("No match re-validated for %r; keeping cursor at %d", query.text, match_set.cursor)
    return match_set


def next_match(match_set: MatchSet, text: str, query: SearchQuery) -> MatchSet:
    return _cycle(match_set, text, query, 1)


def previous_match(match_set: MatchSet, text: str, query: SearchQuery) -> MatchSet:
    return _cycle(match_set, text, query, -1)
