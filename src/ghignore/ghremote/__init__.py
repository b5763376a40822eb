"""
Access to the template repository through the GitHub REST API.

We only use two endpoints of the git database API:

    GET /repos/{owner}/{repo}/git/trees/{branch}

        Lists the root tree of the branch. Each template lives at the
        root as `{Language}.gitignore`, so a non-recursive listing is
        enough to build the language index.

    GET /repos/{owner}/{repo}/git/blobs/{sha}

        Returns a single template as a base64 encoded payload.
"""

from .blob import decode_blob, fetch_content
from .client import Blob, GitHubClient, Tree, TreeEntry
from .index import LanguageIndex, build_language_index, language_for_entry

__all__ = [
    "Blob",
    "GitHubClient",
    "LanguageIndex",
    "Tree",
    "TreeEntry",
    "build_language_index",
    "decode_blob",
    "fetch_content",
    "language_for_entry",
]
