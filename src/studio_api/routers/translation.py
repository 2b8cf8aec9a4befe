"""Translation endpoints."""

import time
from typing import List

from fastapi import APIRouter, HTTPException, Depends
from sse_starlette.sse import EventSourceResponse
from ..schemas.translation import TranslationAPIRequest, TranslationAPIResponse, LanguageInfo
from ..models.translation import SUPPORTED_LANGUAGES
from ..services.translator import translate_document
from ..workflows.streaming import stream_translation_progress
from ..client import StudioClient
from ..config import Settings
from ..errors import InvalidArgument, UpstreamFailure
from ..utils.helpers import create_processing_metadata
from ..api.dependencies import get_app_settings, get_studio_client, router_limiter, select_model

router = APIRouter(prefix="/translate", tags=["Translation"])


def resolve_language(value: str) -> str:
    """Map a language name or code to its canonical name."""
    wanted = value.strip().lower()
    for code, name in SUPPORTED_LANGUAGES.items():
        if wanted in (code, name.lower()):
            return name
    raise HTTPException(
        status_code=400,
        detail=f"Language '{value}' is not supported. Supported languages: {list(SUPPORTED_LANGUAGES.values())}"
    )


def _validate_request(request: TranslationAPIRequest, settings: Settings):
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text to translate must not be blank")
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=400,
            detail=f"Text length {len(request.text)} exceeds maximum allowed {settings.max_text_length}"
        )
    return (
        resolve_language(request.source_language),
        resolve_language(request.target_language),
        request.char_limit or settings.translation_char_limit,
    )


@router.get("/languages", response_model=List[LanguageInfo])
async def get_languages():
    """List the languages the translator offers."""
    return [LanguageInfo(code=code, name=name) for code, name in SUPPORTED_LANGUAGES.items()]


@router.post(
    "",
    response_model=TranslationAPIResponse,
    dependencies=[Depends(router_limiter)],
    responses={
        200: {
            "description": "Successful translation.",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "translated_text": "Xin chào. Thế giới.",
                        "glossary": [{"term": "Hello", "definition": "Lời chào"}],
                        "metadata": {
                            "processing_time_seconds": 1.8,
                            "total_segments": 2,
                            "char_limit": 2000,
                            "model_used": "gemini-2.5-flash"
                        }
                    }
                }
            }
        },
        400: {"description": "Bad Request, e.g. blank text, unsupported language or unavailable model."},
        502: {"description": "The language model failed or returned a malformed response."},
        500: {"description": "Internal Server Error."}
    }
)
async def translate_text(
    request: TranslationAPIRequest,
    client: StudioClient = Depends(get_studio_client),
    settings: Settings = Depends(get_app_settings),
):
    """
    Translate a text of any length.

    Texts longer than the segment limit are split along sentence boundaries; all
    segments are translated concurrently and merged. If any segment fails the
    whole request fails.
    """
    try:
        source_language, target_language, char_limit = _validate_request(request, settings)
        client = select_model(client, request.model_name, request.model_params)

        start_time = time.time()
        result, segments = await translate_document(
            client, request.text, source_language, target_language, char_limit
        )

        return TranslationAPIResponse(
            success=True,
            translated_text=result.translated_text,
            glossary=result.glossary,
            metadata=create_processing_metadata(
                start_time, time.time(), segments, client.model_name, char_limit
            )
        )

    except HTTPException:
        raise
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamFailure as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


@router.post(
    "/stream",
    tags=["Streaming"],
    dependencies=[Depends(router_limiter)],
    responses={
        200: {
            "description": """
A stream of Server-Sent Events (SSE) for the translation process.

**Event Type: `planning`** (sent once the text has been segmented)
```json
{"timestamp": "...", "type": "planning", "status": "segments_created", "total_segments": 3, "segment_lengths": [1980, 1994, 412]}
```

**Event Type: `completion`** (the final event)
```json
{"timestamp": "...", "type": "completion", "status": "completed", "translated_text": "...", "glossary": [...], "metadata": {...}}
```

**Event Type: `error`** (sent instead of `completion` when any segment fails)
            """,
            "content": {
                "text/event-stream": {
                    "schema": {
                        "type": "string"
                    }
                }
            }
        }
    }
)
async def stream_translate_text(
    request: TranslationAPIRequest,
    client: StudioClient = Depends(get_studio_client),
    settings: Settings = Depends(get_app_settings),
):
    """Stream translation progress: segmentation plan, then the merged result."""
    try:
        source_language, target_language, char_limit = _validate_request(request, settings)
        client = select_model(client, request.model_name, request.model_params)

        return EventSourceResponse(
            stream_translation_progress(
                client, request.text, source_language, target_language, char_limit
            ),
            media_type="text/event-stream"
        )

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )
