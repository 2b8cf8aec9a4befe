"""Main entry point for the AI Studio API."""

import logging

import uvicorn
from studio_api.config import get_settings


def main():
    """Run the studio API server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("Starting AI Studio API...")
    print(f"Server will run on http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation available at http://{settings.api_host}:{settings.api_port}/docs")

    uvicorn.run(
        "studio_api.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
