"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_content.domain.entities import TreeEntry
from repo_content.domain.value_objects import RepoReference


class RepoFetcher(Protocol):
    """Abstract contract for reading a repository from GitHub."""

    async def fetch_default_branch(self, ref: RepoReference) -> str:
        """Return the repository's default branch name."""
        ...

    async def fetch_tree_sha(self, ref: RepoReference, branch: str) -> str:
        """Return the tree SHA of the branch's head commit."""
        ...

    async def fetch_tree(self, ref: RepoReference, tree_sha: str) -> list[TreeEntry]:
        """Return every entry of the tree, recursively, in API order."""
        ...

    async def fetch_file_content(self, ref: RepoReference, branch: str, path: str) -> str:
        """Return the raw text of a single file on the branch."""
        ...
