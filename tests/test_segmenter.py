"""
Tests for sentence segmentation.

A boundary is punctuation + whitespace + uppercase letter, except right after
a known abbreviation.
"""

import pytest

from pagetranslate.core.segmenter import (
    DEFAULT_ABBREVIATIONS,
    SentenceSegmenter,
    split_sentences,
)


@pytest.fixture
def segmenter():
    return SentenceSegmenter()


# =============================================================================
# Boundaries
# =============================================================================


class TestBoundaries:
    def test_splits_on_each_terminator(self, segmenter):
        text = "Hello world. This is great! Is it? Yes."

        assert segmenter.segment(text) == [
            "Hello world.",
            "This is great!",
            "Is it?",
            "Yes.",
        ]

    def test_requires_uppercase_after_whitespace(self, segmenter):
        text = "It costs 3.5 dollars. or so they say. Really."

        assert segmenter.segment(text) == [
            "It costs 3.5 dollars. or so they say.",
            "Really.",
        ]

    def test_repeated_punctuation_stays_with_sentence(self, segmenter):
        assert segmenter.segment("Wait!!  What?") == ["Wait!!", "What?"]

    def test_any_whitespace_separates(self, segmenter):
        assert segmenter.segment("One.\n\tTwo.") == ["One.", "Two."]

    def test_no_punctuation_is_one_sentence(self, segmenter):
        assert segmenter.segment("  just some words here  ") == ["just some words here"]

    def test_empty_and_blank_text(self, segmenter):
        assert segmenter.segment("") == []
        assert segmenter.segment("   \n ") == []

    def test_internal_whitespace_preserved(self, segmenter):
        assert segmenter.segment("A  spaced   line. Next") == ["A  spaced   line.", "Next"]

    def test_trailing_space_from_extraction(self, segmenter):
        # Extracted page text always ends with a space.
        assert segmenter.segment("First item. Second item. ") == ["First item.", "Second item."]


# =============================================================================
# Abbreviations
# =============================================================================


class TestAbbreviations:
    def test_title_does_not_split(self, segmenter):
        assert segmenter.segment("Dr. Smith arrived. He left.") == [
            "Dr. Smith arrived.",
            "He left.",
        ]

    @pytest.mark.parametrize("abbrev", DEFAULT_ABBREVIATIONS)
    def test_every_default_abbreviation_is_protected(self, segmenter, abbrev):
        text = f"See {abbrev}. Next word here. Done."

        assert segmenter.segment(text) == [f"See {abbrev}. Next word here.", "Done."]

    def test_mrs_is_not_confused_with_mr(self, segmenter):
        assert segmenter.segment("Mrs. Jones called. Mr. Jones did not.") == [
            "Mrs. Jones called.",
            "Mr. Jones did not.",
        ]

    def test_case_sensitive(self, segmenter):
        assert segmenter.segment("Ask the dr. He knows.") == ["Ask the dr.", "He knows."]

    def test_unknown_abbreviation_splits(self, segmenter):
        assert segmenter.segment("Gen. Grant won.") == ["Gen.", "Grant won."]

    def test_abbreviation_needs_word_boundary(self, segmenter):
        assert segmenter.segment("The EDr. Team met.") == ["The EDr.", "Team met."]

    def test_dots_inside_abbreviation_are_literal(self, segmenter):
        # "ixe" must not match the "i.e" token.
        assert segmenter.segment("Call ixe. Then go.") == ["Call ixe.", "Then go."]

    def test_abbreviation_at_end_of_text_is_kept(self, segmenter):
        assert segmenter.segment("He went to see the Dr.") == ["He went to see the Dr."]

    def test_custom_abbreviation_set(self):
        segmenter = SentenceSegmenter(abbreviations=["Gen"])

        assert segmenter.segment("Gen. Grant won. Dr. Who lost.") == [
            "Gen. Grant won.",
            "Dr.",
            "Who lost.",
        ]

    def test_no_abbreviations(self):
        segmenter = SentenceSegmenter(abbreviations=[])

        assert segmenter.segment("Dr. Smith arrived.") == ["Dr.", "Smith arrived."]


# =============================================================================
# Properties
# =============================================================================


SAMPLES = [
    "Hello world. This is great! Is it? Yes.",
    "Dr. Smith arrived. He left.",
    "  A.  B.  C.  ",
    "no boundaries at all",
    ". . . A",
    "?! X",
]


class TestProperties:
    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, segmenter, text):
        assert segmenter.segment(text) == segmenter.segment(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_no_empty_sentences(self, segmenter, text):
        for sentence in segmenter.segment(text):
            assert sentence.strip()
            assert sentence == sentence.strip()

    def test_convenience_function_uses_defaults(self, segmenter):
        text = "Prof. Lee spoke. We listened."

        assert split_sentences(text) == segmenter.segment(text)
