"""
Sentence segmentation.

Splits whitespace-normalized page text into sentences. A boundary is
sentence-ending punctuation followed by whitespace and an uppercase letter,
unless the text scanned so far ends with a known abbreviation such as
"Dr." or "e.g.".
"""

from __future__ import annotations

import re
from typing import Iterable


# Case-sensitive; matched literally.
DEFAULT_ABBREVIATIONS: tuple[str, ...] = (
    "Mr",
    "Mrs",
    "Ms",
    "Dr",
    "St",
    "Prof",
    "etc",
    "i.e",
    "e.g",
    "vs",
)

# Punctuation, then whitespace, then an uppercase letter (not consumed).
BOUNDARY_PATTERN = re.compile(r"([.!?])\s+(?=[A-Z])")


class SentenceSegmenter:
    """
    Regex-driven sentence splitter with abbreviation protection.

    Usage:
        segmenter = SentenceSegmenter()
        segmenter.segment("Dr. Smith arrived. He left.")
        # -> ["Dr. Smith arrived.", "He left."]
    """

    def __init__(self, abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS):
        self.abbreviations = tuple(abbreviations)
        self._abbreviation_pattern = self._compile_abbreviations(self.abbreviations)

    @staticmethod
    def _compile_abbreviations(abbreviations: tuple[str, ...]) -> re.Pattern[str] | None:
        if not abbreviations:
            return None
        # Longest first so "Mrs" is tried before "Mr".
        tokens = sorted(abbreviations, key=len, reverse=True)
        alternation = "|".join(re.escape(token) for token in tokens)
        return re.compile(rf"\b(?:{alternation})\.$")

    def ends_with_abbreviation(self, span: str) -> bool:
        """True if `span` ends with an abbreviation token and its period."""
        if self._abbreviation_pattern is None:
            return False
        return self._abbreviation_pattern.search(span) is not None

    def segment(self, text: str) -> list[str]:
        """
        Split text into an ordered list of trimmed, non-empty sentences.

        The punctuation mark stays with the sentence it ends; the whitespace
        separating two sentences is dropped.
        """
        sentences: list[str] = []
        start = 0

        for match in BOUNDARY_PATTERN.finditer(text):
            span = text[start:match.end(1)]
            if self.ends_with_abbreviation(span):
                continue

            sentence = span.strip()
            if sentence:
                sentences.append(sentence)
            start = match.end()

        remainder = text[start:].strip()
        if remainder:
            sentences.append(remainder)

        return sentences


_default_segmenter = SentenceSegmenter()


def split_sentences(text: str) -> list[str]:
    """Segment text with the default abbreviation list (convenience function)."""
    return _default_segmenter.segment(text)
