"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from repo_content.interface.dependencies import get_use_case
from repo_content.interface.schemas import (
    Document,
    ErrorResponse,
    RepoContentRequest,
    RepoContentResponse,
)
from repo_content.services.fetch_repo_content import FetchRepoContentUseCase

router = APIRouter()


@router.post(
    "/repo-content",
    response_model=RepoContentResponse,
    response_model_by_alias=True,
    responses={
        404: {"model": ErrorResponse, "description": "Repository or branch not found"},
        422: {"model": ErrorResponse, "description": "Invalid URL or no relevant files"},
        502: {"model": ErrorResponse, "description": "GitHub request failed"},
    },
)
async def fetch_repo_content(
    body: RepoContentRequest,
    use_case: FetchRepoContentUseCase = Depends(get_use_case),
) -> RepoContentResponse:
    """Return the text of the relevant files of a public GitHub repository."""
    records = await use_case.execute(body.repo_url)
    return RepoContentResponse(documents=[Document.from_record(r) for r in records])


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
