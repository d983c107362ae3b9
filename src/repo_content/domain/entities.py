"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TreeEntryType(str, Enum):
    """Kind of node reported by the GitHub tree API."""

    BLOB = "blob"
    TREE = "tree"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str | None) -> TreeEntryType:
        if raw == cls.BLOB.value:
            return cls.BLOB
        if raw == cls.TREE.value:
            return cls.TREE
        return cls.OTHER  # submodule commits and anything unknown


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single node from the recursive tree (blob, sub-tree or other)."""

    path: str
    type: TreeEntryType
    identifier: str = ""

    @property
    def is_blob(self) -> bool:
        return self.type is TreeEntryType.BLOB


@dataclass(frozen=True, slots=True)
class SourceMetadata:
    """Where a piece of content came from."""

    source: str


@dataclass(frozen=True, slots=True)
class ContentRecord:
    """Raw text of one repository file plus its original path.

    ``to_dict`` produces the ``{"pageContent", "metadata": {"source"}}`` shape
    document loaders downstream expect.
    """

    page_content: str
    metadata: SourceMetadata

    @classmethod
    def for_path(cls, path: str, content: str) -> ContentRecord:
        return cls(page_content=content, metadata=SourceMetadata(source=path))

    def to_dict(self) -> dict[str, object]:
        return {
            "pageContent": self.page_content,
            "metadata": {"source": self.metadata.source},
        }
