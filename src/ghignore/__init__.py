"""ghignore library.

This library downloads `.gitignore` templates from the github/gitignore
repository and writes them to the local filesystem.
"""

from importlib.metadata import PackageNotFoundError, version

from .config import Config
from .driver import list_languages, resolve_language, run
from .errors import (
    FileWriteError,
    GHIgnoreError,
    LanguageNotFoundError,
    RemoteFetchError,
    RemoteIndexError,
    UnsupportedEncodingError,
    UsageError,
)
from .ghremote import GitHubClient, build_language_index, fetch_content
from .writer import write_content

try:
    __version__ = version("ghignore")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"

__all__ = [
    "Config",
    "FileWriteError",
    "GHIgnoreError",
    "GitHubClient",
    "LanguageNotFoundError",
    "RemoteFetchError",
    "RemoteIndexError",
    "UnsupportedEncodingError",
    "UsageError",
    "build_language_index",
    "fetch_content",
    "list_languages",
    "resolve_language",
    "run",
    "write_content",
    "__version__",
]
