"""System endpoints: health checks and models."""

from fastapi import APIRouter, Depends
from ..schemas.system import HealthResponse
from ..client import StudioClient
from ..api.dependencies import get_studio_client

router = APIRouter(prefix="", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check(client: StudioClient = Depends(get_studio_client)):
    """Check API status and available models."""
    return HealthResponse(
        status="healthy",
        version="1.0.0",
        default_model=client.model_name,
        available_models=client.router.get_available_models()
    )


@router.get("/models", summary="Get All Available Models")
async def get_models(client: StudioClient = Depends(get_studio_client)):
    """
    Get the models whose provider API key is configured.

    Each model includes:
    - provider: The AI provider (Google, Anthropic, OpenAI)
    - description: Model description
    - capabilities: List of model capabilities
    - context_window: Maximum context window size
    """
    return client.router.get_available_models()
