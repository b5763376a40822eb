"""ghignore command-line interface."""

from __future__ import annotations

import click

from .. import __version__
from ..config import (
    DEFAULT_DIRECTORY,
    DEFAULT_FILENAME,
    REPO_BRANCH,
    REPO_NAME,
    REPO_OWNER,
    TOKEN_ENV_VAR,
    Config,
)
from ..driver import run
from ..errors import UsageError
from .interceptor import Interceptor
from .logger import configure_logging


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("language", required=False, default="")
@click.option(
    "-filename", "--filename", default=DEFAULT_FILENAME, show_default=True, help="Output file name."
)
@click.option(
    "-directory",
    "--directory",
    default=DEFAULT_DIRECTORY,
    show_default=True,
    help="Output directory.",
)
@click.option(
    "-token",
    "--token",
    default=None,
    help=f"GitHub token to use in case of rate limiting (default: ${TOKEN_ENV_VAR}).",
)
@click.option(
    "-list",
    "--list",
    "list_languages",
    is_flag=True,
    help=f"List available languages on {REPO_OWNER}/{REPO_NAME}@{REPO_BRANCH}.",
)
@click.option("-v", "--verbose", is_flag=True, help="Run in verbose mode.")
@click.version_option(
    __version__, "-version", "--version", message="%(prog)s version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    language: str,
    filename: str,
    directory: str,
    token: str | None,
    list_languages: bool,
    verbose: bool,
) -> None:
    """Download the LANGUAGE template from github/gitignore.

    \b
    The listing is shown through $PAGER when it names an
    existing program, otherwise it is printed directly.
    """
    configure_logging(verbose)
    interceptor = Interceptor()
    with interceptor:
        if not language and not list_languages:
            click.echo(ctx.get_usage(), err=True)
            raise UsageError("please specify a language")
        config = Config.from_env(
            language=language,
            filename=filename,
            directory=directory,
            token=token,
            list_languages=list_languages,
        )
        run(config)
    if interceptor.failed:
        raise SystemExit(interceptor.exitcode())


def main() -> None:
    cli(prog_name="ghignore")


__all__ = ["cli", "main"]
