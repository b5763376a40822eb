"""Shared pytest fixtures for ghignore tests."""

import base64
from unittest.mock import Mock

import pytest

from ghignore.ghremote import Blob, GitHubClient, Tree, TreeEntry


def make_tree(*entries: tuple[str, str, str], truncated: bool = False) -> Tree:
    """Build a Tree from (path, type, sha) tuples."""
    return Tree(
        sha="root",
        tree=[TreeEntry(path=path, type=kind, sha=sha) for path, kind, sha in entries],
        truncated=truncated,
    )


def make_blob(content: bytes, sha: str = "sha") -> Blob:
    """Build a base64 encoded Blob wrapping content."""
    return Blob(sha=sha, encoding="base64", content=base64.b64encode(content).decode())


@pytest.fixture
def templates_tree() -> Tree:
    """Return a tree resembling the root of github/gitignore."""
    return make_tree(
        (".github", "tree", "sha-github"),
        ("Global", "tree", "sha-global"),
        ("Go.gitignore", "blob", "sha-go"),
        ("Python.gitignore", "blob", "sha-python"),
        ("README.md", "blob", "sha-readme"),
        ("LICENSE", "blob", "sha-license"),
    )


@pytest.fixture
def fake_client(templates_tree: Tree) -> Mock:
    """Return a GitHubClient double serving templates_tree and a Go template."""
    client = Mock(spec=GitHubClient)
    client.get_tree.return_value = templates_tree
    client.get_blob.return_value = make_blob(b"*.log\n", sha="sha-go")
    return client


@pytest.fixture
def tree_of():
    """Return the make_tree factory."""
    return make_tree


@pytest.fixture
def blob_of():
    """Return the make_blob factory."""
    return make_blob
