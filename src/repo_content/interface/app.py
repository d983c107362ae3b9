"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from repo_content.interface.dependencies import shutdown, startup
from repo_content.interface.error_handlers import register_error_handlers
from repo_content.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open and close the shared HTTP client."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Repo Content Fetcher",
        version="1.0.0",
        description=(
            "Takes a public GitHub repository URL and returns the raw text of "
            "its relevant source, config and documentation files, each tagged "
            "with its path, ready for indexing."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    return app
