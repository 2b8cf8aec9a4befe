"""Planning of image edits. The model describes the pipeline; nothing is executed."""

import base64
import logging

from ..client import StudioClient
from ..errors import InvalidArgument, UpstreamFailure
from ..models.image_editor import EditingPlan
from ..prompts.studio import get_editing_plan_prompt
from ..utils.parsing import parse_structured_response


logger = logging.getLogger("studio_api.image_editor")


def build_image_part(image_data: bytes, mime_type: str) -> dict:
    """Inline the image as a base64 data URI content part."""
    if not mime_type or not mime_type.startswith("image/"):
        raise InvalidArgument(f"Unsupported MIME type for image: {mime_type!r}")
    if not image_data:
        raise InvalidArgument("Image data is empty")
    encoded = base64.b64encode(image_data).decode("ascii")
    return {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{encoded}"}}


async def generate_editing_plan(
    client: StudioClient,
    image_data: bytes,
    mime_type: str,
    prompt: str,
    output_language: str = "Vietnamese",
) -> EditingPlan:
    """
    Ask the model for a step-by-step editing plan for an image.

    Raises:
        InvalidArgument: If the payload is not an image
        UpstreamFailure: If the model call fails or returns a malformed plan
    """
    content = [
        build_image_part(image_data, mime_type),
        {"type": "text", "text": get_editing_plan_prompt(prompt, output_language)},
    ]
    try:
        raw = await client.generate_json(content)
        return parse_structured_response(raw, EditingPlan).unwrap()
    except Exception as e:
        logger.error("Error generating editing plan with %s: %s", client.model_name, e)
        raise UpstreamFailure(f"Failed to generate editing plan: {e}") from e
