"""Tests for the translation progress stream."""

import json

import pytest
from unittest.mock import MagicMock, AsyncMock

from studio_api.workflows.streaming import ProgressEvent, stream_translation_progress


def make_client(side_effect):
    client = MagicMock()
    client.model_name = "gemini-2.5-flash"
    client.generate_json = AsyncMock(side_effect=side_effect)
    return client


async def collect(generator):
    return [(event["event"], json.loads(event["data"])) async for event in generator]


class TestProgressEvent:
    """Test SSE event rendering."""

    def test_to_sse_event(self):
        event = ProgressEvent("planning", {"total_segments": 2, "note": "Tiếng Việt"}).to_sse_event()

        assert event["event"] == "planning"
        data = json.loads(event["data"])
        assert data["type"] == "planning"
        assert data["total_segments"] == 2
        assert "timestamp" in data
        assert "Tiếng Việt" in event["data"]


class TestStreamTranslationProgress:
    """Test the streamed translation workflow."""

    @pytest.mark.asyncio
    async def test_successful_stream(self):
        async def respond(prompt):
            if "First sentence." in prompt:
                return json.dumps({"translation": "Một.", "glossary": [{"term": "First", "definition": "đầu"}]})
            return json.dumps({"translation": "Hai.", "glossary": [{"term": "first", "definition": "dup"}]})

        client = make_client(respond)

        events = await collect(stream_translation_progress(
            client, "First sentence. Second sentence.", "English", "Vietnamese", 20
        ))

        assert [name for name, _ in events] == ["initialization", "planning", "completion"]
        init, planning, completion = (data for _, data in events)
        assert init["model"] == "gemini-2.5-flash"
        assert init["char_limit"] == 20
        assert planning["total_segments"] == 2
        assert planning["segment_lengths"] == [16, 16]
        assert completion["translated_text"] == "Một. Hai."
        assert completion["glossary"] == [{"term": "First", "definition": "đầu"}]
        assert completion["metadata"]["total_segments"] == 2

    @pytest.mark.asyncio
    async def test_failing_segment_ends_with_error(self):
        async def respond(prompt):
            if "Second" in prompt:
                raise RuntimeError("quota exceeded")
            return json.dumps({"translation": "ok"})

        client = make_client(respond)

        events = await collect(stream_translation_progress(
            client, "First sentence. Second sentence.", "English", "Vietnamese", 20
        ))

        assert [name for name, _ in events] == ["initialization", "planning", "error"]
        error = events[-1][1]
        assert error["status"] == "failed"
        assert "quota exceeded" in error["error"]
        assert error["details"]["error_type"] == "UpstreamFailure"
        assert error["details"]["context"] == "translation"
