"""Log exceptions and convert them to exit codes."""

from __future__ import annotations

import logging

from ..errors import GHIgnoreError

log = logging.getLogger("cli")


class Interceptor:
    """
    Context manager to intercept exceptions.

    Use as a context manager:

        interceptor = Interceptor()
        with interceptor:
            func()
        sys.exit(interceptor.exitcode())

    Exceptions are logged and suppressed. The failed field tells
    you whether there were any exceptions. KeyboardInterrupt and
    SystemExit are never intercepted.
    """

    def __init__(self):
        self.failed = False
        self.error: BaseException | None = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            return False
        if not issubclass(exc_type, Exception):
            return False
        if isinstance(exc_value, GHIgnoreError):
            log.error("%s", exc_value)
        else:
            log.error("operation failed: %s", exc_value)
            log.debug("traceback", exc_info=(exc_type, exc_value, traceback))
        self.failed = True
        self.error = exc_value
        return True  # suppress the exception

    def exitcode(self) -> int:
        """
        Return the exitcode to pass to sys.exit.

        Zero on success, otherwise the exit code of the error.
        """
        if not self.failed:
            return 0
        return getattr(self.error, "exit_code", 1)
