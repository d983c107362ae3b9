"""Fetch-repository-content use case — the main retrieval pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`RepoFetcher` port and the pure filtering module; the interface
layer injects the concrete GitHub adapter at runtime.
"""

from __future__ import annotations

import asyncio
import logging

from repo_content.domain.entities import ContentRecord, TreeEntry
from repo_content.domain.exceptions import (
    ForgeRequestError,
    NoRelevantFilesError,
    RepoContentError,
    RepositoryContentError,
)
from repo_content.domain.ports.repo_fetcher import RepoFetcher
from repo_content.domain.value_objects import RepoReference
from repo_content.services.file_filter import MAX_SELECTED_FILES, select_relevant_files

logger = logging.getLogger(__name__)


class FetchRepoContentUseCase:
    """Orchestrates the URL → branch → tree → filter → contents pipeline.

    Parameters
    ----------
    repo_fetcher:
        Adapter that can resolve branches and trees and download raw files.
    max_files_to_fetch:
        Upper bound on the number of files downloaded per repository.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        max_files_to_fetch: int = MAX_SELECTED_FILES,
    ) -> None:
        self._fetcher = repo_fetcher
        self._max_files = max_files_to_fetch

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(self, repo_url: str) -> list[ContentRecord]:
        """Return one :class:`ContentRecord` per relevant file, in tree order.

        Raises :class:`InvalidUrlError` untouched when the URL does not parse;
        every later failure is wrapped in :class:`RepositoryContentError`.
        """
        logger.info("Fetching repo: %s", repo_url)
        ref = RepoReference.from_string(repo_url)

        try:
            return await self._run(ref)
        except RepoContentError as exc:
            logger.error("Error fetching repo content for %s: %s", ref.full_name, exc)
            status = exc.status_code if isinstance(exc, ForgeRequestError) else None
            raise RepositoryContentError(exc, status_code=status) from exc

    # ── Pipeline ────────────────────────────────────────────────────────

    async def _run(self, ref: RepoReference) -> list[ContentRecord]:
        branch = await self._fetcher.fetch_default_branch(ref)
        logger.info("Detected default branch: %s", branch)

        tree_sha = await self._fetcher.fetch_tree_sha(ref, branch)
        tree = await self._fetcher.fetch_tree(ref, tree_sha)

        selection = select_relevant_files(tree, limit=self._max_files)
        if not selection:
            raise NoRelevantFilesError(
                "No relevant code or text files found in this repository."
            )

        logger.info(
            "Fetching %d of %d tree entries from %s",
            len(selection),
            len(tree),
            ref.full_name,
        )
        return await self._fetch_contents(ref, branch, selection)

    async def _fetch_contents(
        self,
        ref: RepoReference,
        branch: str,
        selection: list[TreeEntry],
    ) -> list[ContentRecord]:
        """Download every selected file at once; the first failure fails all."""

        async def _fetch_one(entry: TreeEntry) -> ContentRecord:
            content = await self._fetcher.fetch_file_content(ref, branch, entry.path)
            return ContentRecord.for_path(entry.path, content)

        return list(await asyncio.gather(*(_fetch_one(entry) for entry in selection)))
