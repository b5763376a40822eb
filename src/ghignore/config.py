"""Module containing the ghignore runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

REPO_OWNER = "github"
"""Owner of the repository containing the templates."""

REPO_NAME = "gitignore"
"""Name of the repository containing the templates."""

REPO_BRANCH = "main"
"""Branch whose root tree we list."""

TEMPLATE_MARKER = ".gitignore"
"""Filename suffix identifying template files in the tree listing."""

GITHUB_API_URL = "https://api.github.com"

TOKEN_ENV_VAR = "GH_TOKEN"

PAGER_ENV_VAR = "PAGER"

DEFAULT_FILENAME = ".gitignore"

DEFAULT_DIRECTORY = "."


@dataclass(frozen=True, kw_only=True)
class Config:
    """
    Configuration for a single ghignore run.

    Built once at startup (usually by the CLI) and passed explicitly
    to the driver. The repository coordinates are fixed and not
    exposed as command line flags.
    """

    language: str = ""
    filename: str = DEFAULT_FILENAME
    directory: str = DEFAULT_DIRECTORY
    token: str = ""
    list_languages: bool = False
    pager: str = ""
    owner: str = REPO_OWNER
    repo: str = REPO_NAME
    branch: str = REPO_BRANCH
    api_url: str = GITHUB_API_URL

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides) -> Config:
        """
        Return a Config whose token and pager default to the values of
        the $GH_TOKEN and $PAGER environment variables.

        Keyword overrides whose value is None are ignored, so callers
        can forward optional flags unchanged.
        """
        env = os.environ if environ is None else environ
        config = cls(
            token=env.get(TOKEN_ENV_VAR, ""),
            pager=env.get(PAGER_ENV_VAR, ""),
        )
        return replace(config, **{k: v for k, v in overrides.items() if v is not None})
