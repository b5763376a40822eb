"""Logging helpers for the ghignore CLI."""

from __future__ import annotations

import logging
import os
import sys

import colorlog

LOG_COLORS = {
    "DEBUG": "bold_cyan",
    "INFO": "bold_green",
    "WARNING": "bold_yellow",
    "ERROR": "bold_red",
    "CRITICAL": "bold_red,bg_white",
}


def _use_color() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    if not sys.stderr.isatty():
        return False
    return True


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(level if verbose else logging.WARNING)
    if _use_color():
        handler = logging.StreamHandler()
        handler.setFormatter(
            colorlog.ColoredFormatter(
                fmt="%(log_color)s%(levelname)s:%(reset)s %(message)s",
                log_colors=LOG_COLORS,
            )
        )
        logging.basicConfig(level=level, handlers=[handler])
        return
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
