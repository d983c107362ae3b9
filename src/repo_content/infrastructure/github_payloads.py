"""Typed shapes of the GitHub REST responses the adapter reads.

Every nested field is optional so a missing value surfaces as ``None`` and the
adapter can raise the matching stage error instead of crashing on a lookup.
"""

from __future__ import annotations

from pydantic import BaseModel


class RepoInfoPayload(BaseModel):
    """``GET /repos/{owner}/{repo}``."""

    default_branch: str | None = None


class _TreeRef(BaseModel):
    sha: str | None = None


class _GitCommit(BaseModel):
    tree: _TreeRef | None = None


class _BranchCommit(BaseModel):
    commit: _GitCommit | None = None


class BranchInfoPayload(BaseModel):
    """``GET /repos/{owner}/{repo}/branches/{branch}``."""

    commit: _BranchCommit | None = None

    @property
    def tree_sha(self) -> str | None:
        if self.commit and self.commit.commit and self.commit.commit.tree:
            return self.commit.commit.tree.sha
        return None


class TreeItemPayload(BaseModel):
    path: str
    type: str | None = None
    sha: str | None = None


class TreePayload(BaseModel):
    """``GET /repos/{owner}/{repo}/git/trees/{sha}?recursive=1``."""

    tree: list[TreeItemPayload] | None = None
    truncated: bool = False
