"""CV builder endpoints."""

from fastapi import APIRouter, HTTPException, Depends
from sse_starlette.sse import EventSourceResponse
from ..schemas.tools import CVGenerationRequest, CVGenerationResponse
from ..services.cv_builder import build_cv, validate_targets
from ..workflows.streaming import stream_cv_generation
from ..client import StudioClient
from ..errors import InvalidArgument
from ..api.dependencies import get_studio_client, router_limiter, select_model

router = APIRouter(prefix="/cv", tags=["CV Builder"])


@router.post("/generate", response_model=CVGenerationResponse, dependencies=[Depends(router_limiter)])
async def generate_cv_fields(request: CVGenerationRequest, client: StudioClient = Depends(get_studio_client)):
    """
    Rewrite the requested CV fields and return the updated CV.

    Fields are generated concurrently. A field whose generation fails keeps
    whatever text was produced and is reported under `errors`.
    """
    try:
        validate_targets(request.cv, request.targets)
        client = select_model(client, request.model_name, request.model_params)
        cv, errors = await build_cv(client, request.cv, request.targets, request.output_language)
        return CVGenerationResponse(cv=cv, errors=errors)
    except HTTPException:
        raise
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post(
    "/generate/stream",
    tags=["Streaming"],
    dependencies=[Depends(router_limiter)],
    responses={
        200: {
            "description": """
A stream of Server-Sent Events (SSE). Every field event carries the `key` of the
field it updates (`professional_summary` or `work_description:<index>`).

**Event Type: `cv_chunk`**
```json
{"timestamp": "...", "type": "cv_chunk", "key": "work_description:0", "field": "work_description", "index": 0, "delta": "- Led..."}
```

**Event Type: `completion`** (the final event, with the fully updated CV)
```json
{"timestamp": "...", "type": "completion", "status": "completed", "cv": {...}, "errors": {}}
```
            """,
            "content": {"text/event-stream": {"schema": {"type": "string"}}}
        }
    }
)
async def stream_cv_fields(request: CVGenerationRequest, client: StudioClient = Depends(get_studio_client)):
    """Stream CV field generation with keyed updates."""
    try:
        validate_targets(request.cv, request.targets)
        client = select_model(client, request.model_name, request.model_params)
        return EventSourceResponse(
            stream_cv_generation(client, request.cv, request.targets, request.output_language),
            media_type="text/event-stream"
        )
    except HTTPException:
        raise
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
