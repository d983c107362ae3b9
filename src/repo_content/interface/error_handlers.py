"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to an HTTP status code and the standard
``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from repo_content.domain.exceptions import (
    InvalidUrlError,
    NoRelevantFilesError,
    RepositoryContentError,
)

logger = logging.getLogger(__name__)


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def status_for(exc: RepositoryContentError) -> int:
    """Pick the HTTP status for a wrapped pipeline failure."""
    if isinstance(exc.reason, NoRelevantFilesError):
        return 422
    if exc.status_code == 404:
        return 404
    return 502


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(InvalidUrlError)
    async def invalid_url_handler(request: Request, exc: InvalidUrlError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(422, str(exc))

    @app.exception_handler(RepositoryContentError)
    async def pipeline_handler(
        request: Request, exc: RepositoryContentError
    ) -> JSONResponse:
        logger.warning("%s: %s", type(exc.reason).__name__, exc)
        return _error_json(status_for(exc), str(exc))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
