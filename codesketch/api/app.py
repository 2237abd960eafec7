"""FastAPI application factory for CodeSketch.

Creates and configures the FastAPI app with CORS and the parser routes.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codesketch import __version__
from codesketch.setting import ServerSettings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: ServerSettings instance (defaults to environment settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="CodeSketch API",
        description="Source code to UML structure extraction",
        version=__version__,
    )

    # Permissive CORS: the parser is called from static diagram pages
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["Content-Type"],
    )

    app.state.settings = settings

    from .routes.parser import router as parser_router

    app.include_router(parser_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok", "service": "codesketch"}

    logger.info(f"FastAPI app created (CORS origins: {settings.cors_origins})")
    return app
