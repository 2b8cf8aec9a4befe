"""Tests for sentence-aligned text segmentation."""

import pytest

from studio_api.core.segmenter import segment_text, split_sentence_units
from studio_api.errors import InvalidArgument


SAMPLE_TEXTS = [
    "A. B. C.",
    "One. Two. three",
    "Really?! Yes... ok",
    "...Hi. There.",
    "No punctuation at all but quite long text here",
    "Dr. Smith arrived at 3.15 p.m. and left! Did he? Yes.\nNew paragraph here. End",
    "Short. " + "x" * 50 + ". End.",
]


class TestSentenceUnits:
    """Test splitting into sentence units."""

    def test_units_keep_trailing_whitespace(self):
        """Whitespace after the terminator belongs to the sentence."""
        assert split_sentence_units("A. B. C.") == ["A. ", "B. ", "C."]

    def test_consecutive_terminators_close_one_unit(self):
        """Runs like '?!' and '...' end a single unit."""
        assert split_sentence_units("Really?! Yes... ok") == ["Really?! ", "Yes... ", "ok"]

    def test_leading_punctuation_is_kept(self):
        """Punctuation at the start of the text is not dropped."""
        assert split_sentence_units("...Hi. There.") == ["...", "Hi. ", "There."]

    def test_text_without_terminators_is_one_unit(self):
        """Text with no terminal punctuation is a single unit."""
        assert split_sentence_units("no terminators here") == ["no terminators here"]


class TestSegmentText:
    """Test greedy packing of sentence units into segments."""

    def test_short_text_is_returned_unchanged(self):
        """Text within the limit comes back as a single segment."""
        assert segment_text("Hello world. Bye.", 100) == ["Hello world. Bye."]
        assert segment_text("exact", 5) == ["exact"]

    def test_empty_text(self):
        """Empty text yields one empty segment."""
        assert segment_text("", 10) == [""]

    def test_example_packing(self):
        """Each sentence becomes its own segment when two do not fit."""
        assert segment_text("A. B. C.", 4) == ["A. ", "B. ", "C."]

    def test_units_are_packed_greedily(self):
        """Sentences are combined while they fit in the limit."""
        assert segment_text("A. B. C. D.", 6) == ["A. B. ", "C. D."]

    def test_trailing_text_without_punctuation(self):
        """Trailing text with no terminator is flushed as the final segment."""
        assert segment_text("One. Two. three", 6) == ["One. ", "Two. ", "three"]

    def test_oversized_sentence_is_kept_whole(self):
        """A sentence longer than the limit is never cut."""
        long_sentence = "x" * 50 + ". "
        segments = segment_text("Short. " + long_sentence + "End.", 20)

        assert segments == ["Short. ", long_sentence, "End."]

    def test_text_without_sentences_stays_whole(self):
        """A long text without terminators cannot be split."""
        text = "no terminators in this rather long text"
        assert segment_text(text, 5) == [text]

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    @pytest.mark.parametrize("limit", [1, 3, 7, 15, 40])
    def test_segments_reconstruct_the_input(self, text, limit):
        """Concatenating the segments gives back the exact input."""
        assert "".join(segment_text(text, limit)) == text

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    @pytest.mark.parametrize("limit", [1, 3, 7, 15, 40])
    def test_segments_respect_the_limit(self, text, limit):
        """Only single oversized sentences may exceed the limit."""
        for segment in segment_text(text, limit):
            if len(segment) > limit:
                assert len(split_sentence_units(segment)) == 1

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_segments_end_on_sentence_boundaries(self, text):
        """Segment boundaries fall between sentence units."""
        units = split_sentence_units(text)
        boundaries = set()
        position = 0
        for unit in units:
            position += len(unit)
            boundaries.add(position)

        position = 0
        for segment in segment_text(text, 10):
            position += len(segment)
            assert position in boundaries

    def test_segmentation_is_deterministic(self):
        """The same input always yields the same segments."""
        text = SAMPLE_TEXTS[5]
        assert segment_text(text, 12) == segment_text(text, 12)

    @pytest.mark.parametrize("limit", [0, -1, -100])
    def test_non_positive_limit_is_rejected(self, limit):
        """A limit of zero or below raises InvalidArgument."""
        with pytest.raises(InvalidArgument):
            segment_text("Some text.", limit)

    def test_invalid_limit_is_a_value_error(self):
        """InvalidArgument can be handled as a ValueError."""
        with pytest.raises(ValueError, match="positive integer"):
            segment_text("", 0)

    def test_non_integer_limit_is_rejected(self):
        """Limits must be integers."""
        with pytest.raises(InvalidArgument):
            segment_text("Some text.", 2.5)
