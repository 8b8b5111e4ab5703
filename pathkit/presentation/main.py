"""
HTTP surface for path decomposition.

Serves the inspect and transform endpoints over PathValue. Run with
`python -m pathkit.presentation.main` or point uvicorn at `app`.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pathkit.infrastructure.config.settings import get_settings
from pathkit.infrastructure.logging.config import setup_logging
from pathkit.presentation.api.routers import path_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and report the path defaults in effect."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Path API listening on %s:%s (separator %r, directory mode %o)",
        settings.host,
        settings.port,
        settings.dir_separator,
        settings.directory_mode,
    )

    yield

    logger.info("Path API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="pathkit",
        description="Decompose, transform and render paths and URIs",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.include_router(path_router)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "pathkit",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pathkit.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
