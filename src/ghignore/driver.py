"""Top-level orchestration of a ghignore run."""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import TextIO

import click

from .config import Config
from .errors import LanguageNotFoundError
from .ghremote import GitHubClient, LanguageIndex, build_language_index, fetch_content
from .pager import Pager, PassthroughPager, pager_from_env
from .writer import write_content

log = logging.getLogger("driver")


def list_languages(index: LanguageIndex) -> list[str]:
    """Return each language in the index exactly once, sorted."""
    return sorted(index)


def format_languages(index: LanguageIndex) -> str:
    """Render the index as shown by `ghignore --list`."""
    lines = ["Available languages:", ""]
    lines.extend(list_languages(index))
    return "\n".join(lines) + "\n"


def resolve_language(index: LanguageIndex, language: str) -> str:
    """
    Return the blob SHA for language, ignoring case.

    Raises:
        LanguageNotFoundError: if language is not in the index.
    """
    key = language.lower()
    try:
        return index[key]
    except KeyError:
        raise LanguageNotFoundError(key) from None


def show_languages(index: LanguageIndex, pager: Pager, out: TextIO | None = None) -> None:
    """Display the languages through pager, falling back to plain output."""
    text = format_languages(index)
    if not pager.page(text):
        PassthroughPager(out).page(text)


def run(
    config: Config,
    *,
    client: GitHubClient | None = None,
    pager: Pager | None = None,
    out: TextIO | None = None,
) -> Path | None:
    """
    Execute a single run according to config.

    In list mode, display the available languages and return None.
    Otherwise download the template for config.language, write it
    to config.directory/config.filename and return its absolute path.

    The first error aborts the run and propagates to the caller. When
    client is None, we create one and close it before returning.
    """
    owned = client is None
    if client is None:
        client = GitHubClient(token=config.token, api_url=config.api_url)
    with contextlib.closing(client) if owned else contextlib.nullcontext(client):
        index = build_language_index(client, config.owner, config.repo, config.branch)

        if config.list_languages:
            show_languages(index, pager or pager_from_env(config.pager, out), out)
            return None

        sha = resolve_language(index, config.language)
        log.debug("resolved %s to blob %s", config.language, sha)
        content = fetch_content(client, config.owner, config.repo, sha)

    path = write_content(config.directory, config.filename, content)
    click.echo(f"file successfully written to {path}", file=out)
    return path
