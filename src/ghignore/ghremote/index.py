"""Build the language index from the remote tree listing."""

from __future__ import annotations

import logging

import requests
from dacite import DaciteError

from ..config import TEMPLATE_MARKER
from ..errors import RemoteIndexError
from .client import GitHubClient, TreeEntry

log = logging.getLogger("ghremote/index")

LanguageIndex = dict[str, str]
"""Map from lowercase language name to the blob SHA of its template."""


def language_for_entry(entry: TreeEntry) -> str | None:
    """
    Return the language key for a tree entry, or None when the entry
    is not a template file (i.e., not a blob or not containing the
    template marker in its path).
    """
    if entry.type != "blob":
        return None
    if TEMPLATE_MARKER not in entry.path:
        return None
    return entry.path.removesuffix(TEMPLATE_MARKER).lower()


def build_language_index(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch: str,
) -> LanguageIndex:
    """
    List the root tree of owner/repo@branch and return the LanguageIndex.

    When two entries map to the same language, the one listed last wins.

    Raises:
        RemoteIndexError: if the listing cannot be fetched or decoded.
    """
    log.debug("listing %s/%s@%s... start", owner, repo, branch)
    try:
        tree = client.get_tree(owner, repo, branch, recursive=False)
    except (requests.RequestException, DaciteError, ValueError) as exc:
        raise RemoteIndexError(f"cannot list {owner}/{repo}@{branch}: {exc}") from exc
    if tree.truncated:
        log.warning("listing %s/%s@%s is truncated", owner, repo, branch)

    index: LanguageIndex = {}
    for entry in tree.tree:
        language = language_for_entry(entry)
        if language is None:
            continue
        index[language] = entry.sha
    log.debug("listing %s/%s@%s... ok (%d languages)", owner, repo, branch, len(index))
    return index
