"""Common dependencies for FastAPI routes."""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi_throttle import RateLimiter

from ..client import StudioClient
from ..config import Settings, get_settings

# Rate limiter instance for generation routes
router_limiter = RateLimiter(
    times=get_settings().rate_limit_times,
    seconds=get_settings().rate_limit_seconds,
)


def get_studio_client(request: Request) -> StudioClient:
    """The client handle built by create_app; override it in tests."""
    return request.app.state.studio_client


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def select_model(
    client: StudioClient,
    model_name: Optional[str],
    model_params: Optional[Dict[str, Any]] = None,
) -> StudioClient:
    """Apply a per-request model override, rejecting models without a configured key."""
    name = model_name or client.model_name
    if not client.router.validate_model_availability(name):
        available_models = list(client.router.get_available_models().keys())
        raise HTTPException(
            status_code=400,
            detail=f"Model '{name}' is not available. Available models: {available_models}"
        )
    if model_name is None and not model_params:
        return client
    return client.with_model(name, **(model_params or {}))
