"""File filtering — decide which tree entries are worth downloading."""

from __future__ import annotations

from collections.abc import Iterable

from repo_content.domain.entities import TreeEntry

MAX_SELECTED_FILES = 100

RELEVANT_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".js", ".jsx", ".ts", ".tsx", ".py",
        ".md", ".json", ".html", ".css", ".scss",
        "Dockerfile",
        ".yml", ".yaml", ".sh",
        ".env.example",
        ".xml", ".java", ".go", ".php", ".dart", ".lua",
    }
)

# Plain substrings, matched anywhere in the path (so "src/distance/x.py" is
# excluded too).
EXCLUDED_PATH_MARKERS: tuple[str, ...] = ("node_modules", "dist", "build")


def _filename(path: str) -> str:
    return path.rsplit("/", maxsplit=1)[-1]


def extension_key(path: str) -> str:
    """Return the allow-list key for *path*.

    ``.`` plus whatever follows the last dot of the file name, or the bare
    file name when it has no dot::

        >>> extension_key("a/b.c.tar")
        '.tar'
        >>> extension_key("a/b/Dockerfile")
        'Dockerfile'
        >>> extension_key("a/.env.example")
        '.example'
    """
    name = _filename(path)
    if "." in name:
        return "." + name.rsplit(".", maxsplit=1)[-1]
    return name


def is_excluded_path(path: str) -> bool:
    return any(marker in path for marker in EXCLUDED_PATH_MARKERS)


def is_relevant_path(path: str) -> bool:
    """Return *True* if *path* is outside excluded dirs and allow-listed."""
    if is_excluded_path(path):
        return False
    return extension_key(path) in RELEVANT_EXTENSIONS


def select_relevant_files(
    entries: Iterable[TreeEntry],
    limit: int = MAX_SELECTED_FILES,
) -> list[TreeEntry]:
    """Keep relevant blobs in tree order, stopping after *limit* matches."""
    selected: list[TreeEntry] = []
    if limit <= 0:
        return selected
    for entry in entries:
        if not entry.is_blob or not is_relevant_path(entry.path):
            continue
        selected.append(entry)
        if len(selected) >= limit:
            break
    return selected
