"""Module containing the GitHub REST API client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests
from dacite import from_dict

from ..config import GITHUB_API_URL

log = logging.getLogger("ghremote/client")

API_VERSION = "2022-11-28"


@dataclass(frozen=True, kw_only=True)
class TreeEntry:
    """Entry in a git tree listing."""

    path: str
    type: str
    sha: str
    mode: str = ""
    size: int | None = None
    url: str | None = None


@dataclass(frozen=True, kw_only=True)
class Tree:
    """Git tree as returned by the git/trees endpoint."""

    sha: str
    tree: list[TreeEntry] = field(default_factory=list)
    truncated: bool = False


@dataclass(frozen=True, kw_only=True)
class Blob:
    """Git blob as returned by the git/blobs endpoint."""

    sha: str
    encoding: str
    content: str
    size: int | None = None


class GitHubClient:
    """
    Minimal client for the git database endpoints of the GitHub API.

    When token is not empty, we send it as a bearer credential with
    every request, which raises the rate limit. Otherwise requests
    are anonymous. We do not retry and we do not override the
    transport timeouts.

    Use as a context manager to close the underlying session:

        with GitHubClient(token=token) as client:
            tree = client.get_tree("github", "gitignore", "main")
    """

    def __init__(
        self,
        *,
        token: str = "",
        api_url: str = GITHUB_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = requests.Session() if session is None else session
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self.session.headers

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get_tree(self, owner: str, repo: str, sha: str, *, recursive: bool = False) -> Tree:
        """Return the tree for the given branch, tag, or tree SHA."""
        params = {"recursive": "1"} if recursive else None
        data = self._get(f"/repos/{owner}/{repo}/git/trees/{sha}", params=params)
        return from_dict(Tree, data)

    def get_blob(self, owner: str, repo: str, sha: str) -> Blob:
        """Return the blob with the given SHA."""
        data = self._get(f"/repos/{owner}/{repo}/git/blobs/{sha}")
        return from_dict(Blob, data)

    def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        url = f"{self.api_url}{path}"
        log.debug("GET %s... start", url)
        resp = self.session.get(url, params=params)
        resp.raise_for_status()
        log.debug("GET %s... ok", url)
        return resp.json()
