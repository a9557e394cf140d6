from __future__ import annotations

import re
from dataclasses import dataclass

_WORD_SEPARATORS = re.compile(r"[ \n\r\t]+")
PARAGRAPH_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class DocumentStats:
    lines: int
    paragraphs: int
    words: int
    characters: int

    def labels(self) -> list[str]:
        return [
            f"Lines: {self.lines}",
            f"Paragraphs: {self.paragraphs}",
            f"Words: {self.words}",
            f"Characters: {self.characters}",
        ]


def count_lines(text: str) -> int:
    # An empty buffer still shows one (empty) line.
    return text.count("\n") + 1


def count_paragraphs(text: str) -> int:
    return sum(1 for chunk in text.split(PARAGRAPH_SEPARATOR) if chunk)


def count_words(text: str) -> int:
    return sum(1 for token in _WORD_SEPARATORS.split(text) if token)


def compute_stats(text: str) -> DocumentStats:
    return DocumentStats(
        lines=count_lines(text),
        paragraphs=count_paragraphs(text),
        words=count_words(text),
        characters=len(text),
    )
