"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from repo_content.infrastructure.config import get_settings
from repo_content.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_content.services.fetch_repo_content import FetchRepoContentUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    # No connection cap: every selected file is requested at once.
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout),
        limits=httpx.Limits(max_connections=None, max_keepalive_connections=20),
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> FetchRepoContentUseCase:
    """Build the use case with the GitHub adapter injected."""
    settings = get_settings()

    if _http_client is None:
        raise RuntimeError("startup() was not called")

    github_adapter = GitHubRestAdapter(
        client=_http_client,
        api_base=settings.github_api_base,
        raw_base=settings.raw_content_base,
    )
    return FetchRepoContentUseCase(
        repo_fetcher=github_adapter,
        max_files_to_fetch=settings.max_files_to_fetch,
    )
