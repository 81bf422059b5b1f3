"""FastAPI application for the fitai HTTP API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..data import get_default_catalog
from ..db.engine import get_db_path, init_db
from .routers import progress, routines

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    await init_db(get_db_path())
    logger.info("Catalog ready with %d exercises", len(get_default_catalog()))
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="fitai",
        description="Training routine generation and progressive overload suggestions",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(routines.router)
    app.include_router(progress.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
