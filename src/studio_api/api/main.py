"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..client import StudioClient
from ..config import Settings, get_settings
from ..models.model_router import ModelRouter
from ..routers import cv, image_editor, system, translation, writer


logger = logging.getLogger("studio_api.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    client: StudioClient = app.state.studio_client
    logger.info("Starting AI Studio API...")
    logger.info("Default model: %s", client.model_name)
    logger.info("Available models: %s", list(client.router.get_available_models().keys()))
    yield
    # Shutdown
    logger.info("Shutting down AI Studio API...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app with an explicitly constructed model client."""
    settings = settings or get_settings()

    app = FastAPI(
        title="AI Studio API",
        description="""
Backend for four AI-assisted productivity tools backed by a hosted language model.

**Tools:**
- Translator: long texts are split into sentence-aligned segments, translated concurrently and merged, with a glossary of domain terms.
- Content writer: title, SEO meta description, outline, article, keywords and hashtags.
- Image-edit planner: a step-by-step editing plan for an uploaded image (the edit is never executed).
- CV builder: streamed professional summaries and work descriptions via Server-Sent Events.
        """,
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.studio_client = StudioClient(ModelRouter(settings), settings.default_model)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include all routers
    app.include_router(system.router)
    app.include_router(translation.router)
    app.include_router(writer.router)
    app.include_router(image_editor.router)
    app.include_router(cv.router)

    return app


app = create_app()
