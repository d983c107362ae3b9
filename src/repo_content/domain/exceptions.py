"""Domain exception hierarchy.

Pipeline stages raise the specific errors below.  The use case catches them
once and re-raises a single :class:`RepositoryContentError`; the interface
layer translates that envelope into an HTTP response.
"""

from __future__ import annotations


class RepoContentError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidUrlError(RepoContentError):
    """The supplied URL does not contain a ``github.com/<owner>/<repo>`` pair."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class ForgeRequestError(RepoContentError):
    """A GitHub request failed or answered with an unexpected shape."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BranchResolutionError(ForgeRequestError):
    """The default branch could not be determined."""


class TreeShaResolutionError(ForgeRequestError):
    """The branch info did not lead to a tree SHA."""


class TreeFetchError(ForgeRequestError):
    """The recursive tree lookup failed or returned no ``tree`` collection."""


class ContentFetchError(ForgeRequestError):
    """A raw file download failed."""


# ── Processing errors ───────────────────────────────────────────────────────


class NoRelevantFilesError(RepoContentError):
    """The relevance filter matched nothing in the repository tree."""


# ── Envelope ────────────────────────────────────────────────────────────────


class RepositoryContentError(RepoContentError):
    """Uniform failure returned to callers of the pipeline.

    ``reason`` is the stage error that caused the failure; ``status_code`` is
    the upstream HTTP status when one was received.
    """

    PREFIX = "Failed to fetch repository content:"

    def __init__(self, reason: Exception, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            message = f"{self.PREFIX} {status_code} {reason}"
        else:
            message = f"{self.PREFIX} {reason}"
        super().__init__(message)
