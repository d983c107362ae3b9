"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from repo_content.domain.entities import TreeEntry, TreeEntryType
from repo_content.domain.exceptions import (
    BranchResolutionError,
    ContentFetchError,
    ForgeRequestError,
    TreeFetchError,
    TreeShaResolutionError,
)
from repo_content.domain.value_objects import RepoReference
from repo_content.infrastructure.github_payloads import (
    BranchInfoPayload,
    RepoInfoPayload,
    TreePayload,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_RAW_BASE = "https://raw.githubusercontent.com"
_USER_AGENT = "repo-content-fetcher/1.0"

_PayloadT = TypeVar("_PayloadT", bound=BaseModel)


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API.

    All requests are anonymous; the adapter never sends an ``Authorization``
    header.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_base: str = _GITHUB_API,
        raw_base: str = _RAW_BASE,
    ) -> None:
        self._client = client
        self._api_base = api_base.rstrip("/")
        self._raw_base = raw_base.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }

    async def fetch_default_branch(self, ref: RepoReference) -> str:
        """GET /repos/{owner}/{repo} → default_branch."""
        resp = await self._api_get(
            f"/repos/{ref.owner}/{ref.name}", BranchResolutionError
        )
        payload = _parse(resp, RepoInfoPayload, BranchResolutionError)
        if not payload.default_branch:
            raise BranchResolutionError(
                "Unable to detect default branch for this repository."
            )
        return payload.default_branch

    async def fetch_tree_sha(self, ref: RepoReference, branch: str) -> str:
        """GET /repos/{owner}/{repo}/branches/{branch} → commit.commit.tree.sha."""
        resp = await self._api_get(
            f"/repos/{ref.owner}/{ref.name}/branches/{quote(branch)}",
            TreeShaResolutionError,
        )
        payload = _parse(resp, BranchInfoPayload, TreeShaResolutionError)
        if not payload.tree_sha:
            raise TreeShaResolutionError(
                "Unable to retrieve tree SHA for default branch."
            )
        return payload.tree_sha

    async def fetch_tree(self, ref: RepoReference, tree_sha: str) -> list[TreeEntry]:
        """GET /repos/{owner}/{repo}/git/trees/{sha}?recursive=1 → [TreeEntry]."""
        resp = await self._api_get(
            f"/repos/{ref.owner}/{ref.name}/git/trees/{tree_sha}",
            TreeFetchError,
            params={"recursive": "1"},
        )
        payload = _parse(resp, TreePayload, TreeFetchError)
        if payload.tree is None:
            raise TreeFetchError("Invalid response from GitHub API.")

        if payload.truncated:
            logger.warning(
                "Tree for %s was truncated by GitHub; only %d entries returned",
                ref.full_name,
                len(payload.tree),
            )

        return [
            TreeEntry(
                path=item.path,
                type=TreeEntryType.parse(item.type),
                identifier=item.sha or "",
            )
            for item in payload.tree
        ]

    async def fetch_file_content(self, ref: RepoReference, branch: str, path: str) -> str:
        """Fetch raw file text via raw.githubusercontent.com."""
        # Escape "#", "?" and control characters; "/" stays a separator.
        raw_url = (
            f"{self._raw_base}/{ref.owner}/{ref.name}/{quote(branch)}/{quote(path)}"
        )
        resp = await self._get(
            raw_url, ContentFetchError, headers={"User-Agent": _USER_AGENT}
        )
        return resp.text

    async def _api_get(
        self,
        endpoint: str,
        error_cls: type[ForgeRequestError],
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET, raising *error_cls* on any failure."""
        return await self._get(
            f"{self._api_base}{endpoint}",
            error_cls,
            headers=self._api_headers,
            params=params,
        )

    async def _get(
        self,
        url: str,
        error_cls: type[ForgeRequestError],
        headers: dict[str, str],
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            resp = await self._client.get(url, headers=headers, params=params)
        except httpx.InvalidURL as exc:
            raise error_cls(f"Cannot request {url!r}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise error_cls(f"Network error fetching {url}: {exc}") from exc

        if resp.is_success:
            return resp

        logger.debug("GET %s returned HTTP %d", url, resp.status_code)
        raise error_cls(
            f"Request failed with status code {resp.status_code}",
            status_code=resp.status_code,
        )


def _parse(
    resp: httpx.Response,
    model: type[_PayloadT],
    error_cls: type[ForgeRequestError],
) -> _PayloadT:
    """Validate a JSON body against *model*, raising *error_cls* on mismatch."""
    try:
        return model.model_validate_json(resp.content)
    except ValidationError as exc:
        raise error_cls("Invalid response from GitHub API.") from exc
