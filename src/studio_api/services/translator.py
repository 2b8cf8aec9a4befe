"""Translation of arbitrarily long texts through the language model."""

import logging
from functools import partial
from typing import List, Tuple

from ..client import StudioClient
from ..core.aggregator import translate_all
from ..core.segmenter import segment_text
from ..errors import UpstreamFailure
from ..models.translation import AggregateResult, TranslationResponse, TranslationResult
from ..prompts.studio import get_translation_prompt
from ..utils.parsing import parse_structured_response


logger = logging.getLogger("studio_api.translator")


async def translate_segment(
    client: StudioClient,
    text: str,
    source_lang: str,
    target_lang: str,
) -> TranslationResult:
    """
    Translate one segment and collect the glossary of its domain terms.

    Raises:
        UpstreamFailure: If the model call fails or returns a malformed response
    """
    prompt = get_translation_prompt(text, source_lang, target_lang)
    try:
        raw = await client.generate_json(prompt)
        parsed = parse_structured_response(raw, TranslationResponse).unwrap()
    except Exception as e:
        logger.error("Error translating text with %s: %s", client.model_name, e)
        raise UpstreamFailure(f"Failed to translate text: {e}") from e

    return TranslationResult(translated_text=parsed.translation, glossary=parsed.glossary)


async def translate_document(
    client: StudioClient,
    text: str,
    source_lang: str,
    target_lang: str,
    limit: int,
) -> Tuple[AggregateResult, List[str]]:
    """
    Split text into model-sized segments, translate them concurrently and merge the results.

    Returns:
        The aggregate result and the segments that were sent to the model
    """
    segments = segment_text(text, limit)
    logger.info("Translating %d segment(s) from %s to %s", len(segments), source_lang, target_lang)
    result = await translate_all(
        segments,
        source_lang,
        target_lang,
        partial(translate_segment, client),
    )
    return result, segments
