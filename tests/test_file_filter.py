"""Tests for repo_content.services.file_filter."""

from __future__ import annotations

import pytest

from repo_content.domain.entities import TreeEntry, TreeEntryType
from repo_content.services.file_filter import (
    MAX_SELECTED_FILES,
    extension_key,
    is_relevant_path,
    select_relevant_files,
)


def _blob(path: str) -> TreeEntry:
    return TreeEntry(path=path, type=TreeEntryType.BLOB, identifier=f"sha-{path}")


def _paths(entries: list[TreeEntry]) -> list[str]:
    return [e.path for e in entries]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a/b/Dockerfile", "Dockerfile"),
        ("a/b.c.tar", ".tar"),
        ("a/.env.example", ".example"),
        ("src/main.py", ".py"),
        ("README.md", ".md"),
        ("LICENSE", "LICENSE"),
        ("weird.", "."),
    ],
)
def test_extension_key(path: str, expected: str) -> None:
    assert extension_key(path) == expected


def test_selection_matches_reference_tree() -> None:
    tree = [
        _blob(p)
        for p in ["src/a.py", "node_modules/x.js", "dist/y.js", "README.md", "LICENSE", "Dockerfile"]
    ]

    assert _paths(select_relevant_files(tree)) == ["src/a.py", "README.md", "Dockerfile"]


def test_only_blobs_are_selected() -> None:
    tree = [
        TreeEntry(path="src", type=TreeEntryType.TREE, identifier="t1"),
        TreeEntry(path="vendor/lib.py", type=TreeEntryType.OTHER, identifier="c1"),
        _blob("src/app.py"),
    ]

    assert _paths(select_relevant_files(tree)) == ["src/app.py"]


def test_selection_is_capped_in_tree_order() -> None:
    tree = [_blob(f"pkg/module_{i:03d}.py") for i in range(150)]

    selected = select_relevant_files(tree)

    assert len(selected) == MAX_SELECTED_FILES == 100
    assert selected == tree[:100]


def test_cap_counts_only_matching_entries() -> None:
    tree = [_blob("image.png")] * 5 + [_blob(f"f{i}.ts") for i in range(3)]

    assert _paths(select_relevant_files(tree, limit=2)) == ["f0.ts", "f1.ts"]


def test_exclusion_is_a_plain_substring_match() -> None:
    # "distance" contains "dist" and "rebuild.sh" contains "build".
    assert not is_relevant_path("src/distance/util.py")
    assert not is_relevant_path("scripts/rebuild.sh")
    assert not is_relevant_path("web/node_modules/react/index.js")
    assert is_relevant_path("src/Dist/util.py")


def test_env_example_is_never_selected() -> None:
    assert not is_relevant_path(".env.example")
    assert select_relevant_files([_blob("config/.env.example")]) == []


def test_extension_match_is_case_sensitive() -> None:
    assert is_relevant_path("docs/guide.md")
    assert not is_relevant_path("docs/GUIDE.MD")
    assert not is_relevant_path("dockerfile")


def test_empty_tree_yields_empty_selection() -> None:
    assert select_relevant_files([]) == []
