"""Concurrent per-segment translation and merging of the results."""

import asyncio
from typing import Awaitable, Callable, Iterable, List, Sequence

from ..models.translation import AggregateResult, GlossaryItem, TranslationResult

TranslateFn = Callable[[str, str, str], Awaitable[TranslationResult]]

SEGMENT_JOINER = " "


def merge_glossaries(results: Iterable[TranslationResult]) -> List[GlossaryItem]:
    """Merge glossaries in order, keeping the first entry seen for each term (case-insensitive)."""
    seen = set()
    merged: List[GlossaryItem] = []
    for result in results:
        for item in result.glossary or []:
            if not item.term.strip() or not item.definition.strip():
                continue
            key = item.term.strip().lower()
            if key in seen:
                continue
            seen.add(key)
            merged.append(item)
    return merged


async def translate_all(
    segments: Sequence[str],
    source_lang: str,
    target_lang: str,
    translate_fn: TranslateFn,
) -> AggregateResult:
    """
    Translate every segment concurrently and merge the results.

    The first exception raised by ``translate_fn`` propagates unchanged and no
    partial result is produced. Calls still in flight are left to finish and
    their results are discarded.
    """
    results = await asyncio.gather(
        *(translate_fn(segment, source_lang, target_lang) for segment in segments)
    )
    return AggregateResult(
        translated_text=SEGMENT_JOINER.join(result.translated_text for result in results),
        glossary=merge_glossaries(results),
    )
