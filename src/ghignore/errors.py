"""Errors raised by ghignore components."""

from __future__ import annotations


class GHIgnoreError(Exception):
    """Base class for all the errors we report to the user."""

    exit_code = 1


class UsageError(GHIgnoreError):
    """Missing or invalid command line input."""


class RemoteIndexError(GHIgnoreError):
    """Listing the remote repository tree failed."""


class LanguageNotFoundError(GHIgnoreError):
    """The requested language has no template in the remote repository."""

    def __init__(self, language: str) -> None:
        super().__init__(f"language {language!r} not found")
        self.language = language


class RemoteFetchError(GHIgnoreError):
    """Retrieving a remote blob failed."""


class UnsupportedEncodingError(GHIgnoreError):
    """A remote blob declares an encoding we cannot decode."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"encoding {encoding!r} is not supported")
        self.encoding = encoding


class FileWriteError(GHIgnoreError):
    """Writing the output file failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot write {path}: {reason}")
        self.path = path
