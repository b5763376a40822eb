"""Download and decode template blobs."""

from __future__ import annotations

import base64
import binascii
import logging

import requests
from dacite import DaciteError

from ..errors import RemoteFetchError, UnsupportedEncodingError
from .client import Blob, GitHubClient

log = logging.getLogger("ghremote/blob")


def decode_blob(blob: Blob) -> bytes:
    """
    Return the raw bytes of the given blob.

    Raises:
        UnsupportedEncodingError: if the encoding is not base64.
        RemoteFetchError: if the base64 payload is malformed.
    """
    if blob.encoding != "base64":
        raise UnsupportedEncodingError(blob.encoding)
    # GitHub wraps the payload at 60 columns, b64decode discards the newlines
    try:
        return base64.b64decode(blob.content)
    except binascii.Error as exc:
        raise RemoteFetchError(f"cannot decode blob {blob.sha}: {exc}") from exc


def fetch_content(client: GitHubClient, owner: str, repo: str, sha: str) -> bytes:
    """
    Fetch the blob with the given SHA and return its decoded content.

    Raises:
        RemoteFetchError: on transport or deserialization failures.
        UnsupportedEncodingError: if the blob is not base64 encoded.
    """
    log.debug("fetching blob %s... start", sha)
    try:
        blob = client.get_blob(owner, repo, sha)
    except (requests.RequestException, DaciteError, ValueError) as exc:
        raise RemoteFetchError(f"cannot fetch blob {sha}: {exc}") from exc
    content = decode_blob(blob)
    log.debug("fetching blob %s... ok (%d bytes)", sha, len(content))
    return content
