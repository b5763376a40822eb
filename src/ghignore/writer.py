"""Write templates to the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileWriteError

log = logging.getLogger("writer")


def write_content(directory: str | Path, filename: str, content: bytes) -> Path:
    """
    Write content to directory/filename and return the absolute path.

    An existing file is truncated and overwritten. We do not replace the
    file atomically, so a failed write may leave a truncated file behind.

    Raises:
        FileWriteError: if creating, writing, or closing the file fails.
    """
    path = Path(directory) / filename
    log.debug("writing %s... start", path)
    try:
        with open(path, "wb") as filep:
            filep.write(content)
    except OSError as exc:
        raise FileWriteError(str(path), exc.strerror or str(exc)) from exc
    log.debug("writing %s... ok", path)
    return path.absolute()
