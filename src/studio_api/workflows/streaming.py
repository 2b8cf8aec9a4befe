"""Streaming workflows with real-time progress updates via Server-Sent Events."""

import asyncio
import json
import time
from functools import partial
from typing import AsyncGenerator, Dict, Any, List
from datetime import datetime

from ..client import StudioClient
from ..core.aggregator import translate_all
from ..core.segmenter import segment_text
from ..models.cv import CVData, CVFieldTarget
from ..services.cv_builder import apply_cv_update, stream_cv_updates
from ..services.translator import translate_segment
from ..utils.helpers import create_processing_metadata, format_error_response


CV_EVENT_TYPES = {
    "reset": "cv_field_reset",
    "chunk": "cv_chunk",
    "completed": "cv_field_completed",
    "error": "cv_field_error",
}


class ProgressEvent:
    """Progress event for SSE streaming."""

    def __init__(self, event_type: str, data: Dict[str, Any]):
        self.event_type = event_type
        self.data = data
        self.timestamp = datetime.now().isoformat()

    def payload(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "type": self.event_type,
            **self.data
        }

    def to_sse_event(self) -> Dict[str, str]:
        """Convert to an event accepted by EventSourceResponse."""
        return {"event": self.event_type, "data": json.dumps(self.payload(), ensure_ascii=False)}


async def stream_translation_progress(
    client: StudioClient,
    text: str,
    source_language: str,
    target_language: str,
    char_limit: int,
) -> AsyncGenerator[Dict[str, str], None]:
    """
    Stream a segmented translation.

    Yields:
        SSE events: initialization, planning, then completion or error
    """
    start_time = time.time()

    yield ProgressEvent("initialization", {
        "status": "starting",
        "source_language": source_language,
        "target_language": target_language,
        "model": client.model_name,
        "char_limit": char_limit
    }).to_sse_event()

    # Yield control to event loop
    await asyncio.sleep(0)

    try:
        segments = segment_text(text, char_limit)

        yield ProgressEvent("planning", {
            "status": "segments_created",
            "total_segments": len(segments),
            "segment_lengths": [len(segment) for segment in segments]
        }).to_sse_event()
        await asyncio.sleep(0)

        result = await translate_all(
            segments,
            source_language,
            target_language,
            partial(translate_segment, client),
        )

        yield ProgressEvent("completion", {
            "status": "completed",
            "translated_text": result.translated_text,
            "glossary": [item.model_dump() for item in result.glossary],
            "metadata": create_processing_metadata(
                start_time, time.time(), segments, client.model_name, char_limit
            )
        }).to_sse_event()

    except Exception as e:
        yield ProgressEvent("error", {
            "status": "failed",
            "error": str(e),
            "details": format_error_response(e, context="translation")
        }).to_sse_event()

    await asyncio.sleep(0)


async def stream_cv_generation(
    client: StudioClient,
    cv: CVData,
    targets: List[CVFieldTarget],
    output_language: str = "Vietnamese",
) -> AsyncGenerator[Dict[str, str], None]:
    """
    Stream CV field generation, applying each keyed update to the CV as it arrives.

    Yields:
        SSE events per update, then a completion event carrying the final CV
    """
    errors: Dict[str, str] = {}

    try:
        async for update in stream_cv_updates(client, cv, targets, output_language):
            cv = apply_cv_update(cv, update)
            data = {"key": update.key, "field": update.field, "index": update.index}
            if update.kind == "chunk":
                data["delta"] = update.delta
            elif update.kind == "error":
                data["error"] = update.error
                errors[update.key] = update.error
            yield ProgressEvent(CV_EVENT_TYPES[update.kind], data).to_sse_event()

        yield ProgressEvent("completion", {
            "status": "completed",
            "cv": cv.model_dump(),
            "errors": errors
        }).to_sse_event()

    except Exception as e:
        yield ProgressEvent("error", {
            "status": "failed",
            "error": str(e)
        }).to_sse_event()
