"""Article content generation."""

import logging

from ..client import StudioClient
from ..errors import UpstreamFailure
from ..models.writer import GeneratedContent
from ..prompts.studio import get_article_prompt
from ..utils.parsing import parse_structured_response


logger = logging.getLogger("studio_api.writer")


async def generate_article_content(
    client: StudioClient,
    topic: str,
    audience: str,
    length: str,
    tone: str,
    output_language: str = "Vietnamese",
) -> GeneratedContent:
    """Generate a title, meta description, outline, article, keywords and hashtags for a topic."""
    prompt = get_article_prompt(topic, audience, length, tone, output_language)
    try:
        raw = await client.generate_json(prompt)
        return parse_structured_response(raw, GeneratedContent).unwrap()
    except Exception as e:
        logger.error("Error generating article content with %s: %s", client.model_name, e)
        raise UpstreamFailure(f"Failed to generate article: {e}") from e
