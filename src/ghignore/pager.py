"""Display long output, optionally through an external pager."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
from typing import Protocol, TextIO

log = logging.getLogger("pager")


class Pager(Protocol):
    """Displays text to the user and returns whether it succeeded."""

    def page(self, text: str) -> bool: ...


class PassthroughPager:
    """Pager that writes the text directly to the output stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out

    def page(self, text: str) -> bool:
        out = sys.stdout if self.out is None else self.out
        out.write(text)
        if not text.endswith("\n"):
            out.write("\n")
        out.flush()
        return True


class ExternalPager:
    """
    Pager that feeds the text to an external program on stdin.

    The command is split using shell rules so that values such
    as `less -R` work as they would in the shell.
    """

    def __init__(self, command: str) -> None:
        self.argv = shlex.split(command)

    def page(self, text: str) -> bool:
        if not self.argv:
            return False
        program = shutil.which(self.argv[0])
        if program is None:
            log.debug("pager %s not found", self.argv[0])
            return False
        try:
            result = subprocess.run([program, *self.argv[1:]], input=text, text=True)
        except OSError as exc:
            log.debug("cannot run pager %s: %s", program, exc)
            return False
        return result.returncode == 0


def pager_from_env(value: str, out: TextIO | None = None) -> Pager:
    """
    Return an ExternalPager when value names an existing program,
    otherwise return a PassthroughPager writing to out.
    """
    try:
        argv = shlex.split(value)
    except ValueError:
        argv = []
    if argv and shutil.which(argv[0]) is not None:
        return ExternalPager(value)
    return PassthroughPager(out)
