from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

import httpx
import pytest

from repo_content.infrastructure.github_rest_adapter import GitHubRestAdapter

T = TypeVar("T")

API = "https://api.github.com"
RAW = "https://raw.githubusercontent.com"


class FakeGitHub:
    """In-memory stand-in for the GitHub API and raw-content host.

    Serves a single repository ``owner/repo`` whose default branch is ``main``
    and whose tree SHA is ``tree-sha``.  ``files`` maps path → raw text;
    ``overrides`` maps a request URL path to a canned response.
    """

    def __init__(self) -> None:
        self.default_branch: str | None = "main"
        self.tree_sha = "tree-sha"
        self.files: dict[str, str] = {}
        self.extra_tree: list[dict[str, Any]] = []
        self.overrides: dict[str, httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def add_file(self, path: str, content: str | None = None) -> None:
        self.files[path] = content if content is not None else f"contents of {path}"

    @property
    def raw_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "raw.githubusercontent.com"]

    def tree_payload(self) -> list[dict[str, Any]]:
        blobs = [{"path": p, "type": "blob", "sha": f"sha-{i}"} for i, p in enumerate(self.files)]
        return blobs + self.extra_tree

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.overrides:
            return self.overrides[path]

        if request.url.host == "raw.githubusercontent.com":
            prefix = f"/owner/repo/{self.default_branch}/"
            file_path = path[len(prefix):]
            if path.startswith(prefix) and file_path in self.files:
                return httpx.Response(200, text=self.files[file_path])
            return httpx.Response(404, text="404: Not Found")

        if path == "/repos/owner/repo":
            return httpx.Response(200, json={"default_branch": self.default_branch})
        if path == f"/repos/owner/repo/branches/{self.default_branch}":
            return httpx.Response(
                200, json={"commit": {"commit": {"tree": {"sha": self.tree_sha}}}}
            )
        if path == f"/repos/owner/repo/git/trees/{self.tree_sha}":
            return httpx.Response(200, json={"tree": self.tree_payload(), "truncated": False})
        return httpx.Response(404, json={"message": "Not Found"})

    def adapter(self, client: httpx.AsyncClient) -> GitHubRestAdapter:
        return GitHubRestAdapter(client=client, api_base=API, raw_base=RAW)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def run_with_adapter(
    fake_github: FakeGitHub,
) -> Callable[[Callable[[GitHubRestAdapter], Coroutine[Any, Any, T]]], T]:
    """Run ``fn(adapter)`` against the fake GitHub inside a fresh event loop."""

    def _run(fn: Callable[[GitHubRestAdapter], Coroutine[Any, Any, T]]) -> T:
        async def _main() -> T:
            async with fake_github.client() as client:
                return await fn(fake_github.adapter(client))

        return asyncio.run(_main())

    return _run
