"""Tests for concurrent segment translation and result merging."""

import asyncio

import pytest

from studio_api.core.aggregator import merge_glossaries, translate_all
from studio_api.models.translation import GlossaryItem, TranslationResult


def make_result(text, *terms):
    return TranslationResult(
        translated_text=text,
        glossary=[GlossaryItem(term=term, definition=definition) for term, definition in terms],
    )


class TestMergeGlossaries:
    """Test glossary deduplication."""

    def test_first_occurrence_wins(self):
        """Later duplicates are skipped, not merged or overwritten."""
        merged = merge_glossaries([
            make_result("a", ("Hello", "greeting")),
            make_result("b", ("hello", "dup"), ("World", "planet")),
        ])

        assert [(item.term, item.definition) for item in merged] == [
            ("Hello", "greeting"),
            ("World", "planet"),
        ]

    def test_terms_are_compared_trimmed(self):
        """Surrounding whitespace does not make a term distinct."""
        merged = merge_glossaries([
            make_result("a", ("API", "interface")),
            make_result("b", ("  api ", "other")),
        ])

        assert len(merged) == 1
        assert merged[0].definition == "interface"

    def test_blank_entries_are_skipped(self):
        """Entries without a term or a definition are dropped."""
        merged = merge_glossaries([
            make_result("a", ("", "orphan definition"), ("Term", "  "), ("Kept", "yes")),
        ])

        assert [item.term for item in merged] == ["Kept"]

    def test_no_results(self):
        """Merging nothing yields an empty glossary."""
        assert merge_glossaries([]) == []


class TestTranslateAll:
    """Test the parallel dispatcher."""

    @pytest.mark.asyncio
    async def test_results_are_joined_and_glossary_deduplicated(self):
        """Translations are joined with a space and the first glossary entry is kept."""
        responses = {
            "Hello.": make_result("Xin chào.", ("Hello", "...")),
            "World.": make_result("Thế giới.", ("hello", "dup")),
        }

        async def translate_fn(segment, source_lang, target_lang):
            return responses[segment]

        result = await translate_all(["Hello.", "World."], "English", "Vietnamese", translate_fn)

        assert result.translated_text == "Xin chào. Thế giới."
        assert len(result.glossary) == 1
        assert result.glossary[0].term == "Hello"
        assert result.glossary[0].definition == "..."

    @pytest.mark.asyncio
    async def test_languages_are_passed_through(self):
        """Each call receives the segment and both languages."""
        calls = []

        async def translate_fn(segment, source_lang, target_lang):
            calls.append((segment, source_lang, target_lang))
            return make_result(segment.upper())

        await translate_all(["a. ", "b."], "English", "French", translate_fn)

        assert calls == [("a. ", "English", "French"), ("b.", "English", "French")]

    @pytest.mark.asyncio
    async def test_order_is_preserved_when_calls_finish_out_of_order(self):
        """Results follow segment order, not completion order."""
        delays = {"first": 0.03, "second": 0.0, "third": 0.01}

        async def translate_fn(segment, source_lang, target_lang):
            await asyncio.sleep(delays[segment])
            return make_result(segment.upper())

        result = await translate_all(["first", "second", "third"], "en", "vi", translate_fn)

        assert result.translated_text == "FIRST SECOND THIRD"

    @pytest.mark.asyncio
    async def test_calls_run_concurrently(self):
        """All segment calls are in flight at the same time."""
        in_flight = 0
        peak = 0

        async def translate_fn(segment, source_lang, target_lang):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return make_result(segment)

        await translate_all(["a", "b", "c", "d"], "en", "vi", translate_fn)

        assert peak == 4

    @pytest.mark.asyncio
    async def test_first_error_propagates_unchanged(self):
        """A failing segment fails the whole call with the same exception."""
        error = RuntimeError("Failed to translate text: quota exceeded")

        async def translate_fn(segment, source_lang, target_lang):
            if segment == "World.":
                raise error
            return make_result("Xin chào.")

        with pytest.raises(RuntimeError) as exc_info:
            await translate_all(["Hello.", "World."], "English", "Vietnamese", translate_fn)

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_siblings_are_not_cancelled_on_failure(self):
        """Calls still running when another fails are left to finish."""
        finished = asyncio.Event()

        async def translate_fn(segment, source_lang, target_lang):
            if segment == "bad":
                raise ValueError("boom")
            await asyncio.sleep(0.02)
            finished.set()
            return make_result(segment)

        with pytest.raises(ValueError, match="boom"):
            await translate_all(["slow", "bad"], "en", "vi", translate_fn)

        assert not finished.is_set()
        await asyncio.wait_for(finished.wait(), timeout=1)

    @pytest.mark.asyncio
    async def test_no_segments(self):
        """An empty segment list produces an empty aggregate."""

        async def translate_fn(segment, source_lang, target_lang):
            raise AssertionError("should not be called")

        result = await translate_all([], "en", "vi", translate_fn)

        assert result.translated_text == ""
        assert result.glossary == []
