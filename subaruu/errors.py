import logging
from typing import Optional, Type

from rich.console import Console

from subaruu.tokens import Token

logger = logging.getLogger(__name__)


class SubaruuError(Exception):
    def __init__(self, message: str, token: Token = None, line: str = None):
        self.message = message
        self.token = token
        self.line = line
        super().__init__(message)

    def __str__(self):
        if self.token and self.line is not None:
            pointer = " " * (self.token.column - 1) + "^" * max(self.token.end - self.token.start, 1)
            return f"Line {self.token.line}: {self.message}\n{self.line}\n{pointer}"
        return self.message


class ScanError(SubaruuError):
    pass


class BasicSyntaxError(SubaruuError):
    pass


class BasicRuntimeError(SubaruuError):
    pass


class InternalError(SubaruuError):
    pass


class Diagnostics:
    """Severity-prefixed diagnostic stream.

    Warnings are printed and counted; errors are printed and then raised,
    which aborts the run.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.warnings = 0
        self.errors = 0

    def warning(self, message: str):
        self.warnings += 1
        logger.debug(f"warning #{self.warnings}: {message}")
        self.console.print(f"WARNING: {message}", style="yellow", markup=False, highlight=False, emoji=False, soft_wrap=True)

    def report(self, error: SubaruuError):
        self.errors += 1
        self.console.print(f"ERROR: {error}", style="red", markup=False, highlight=False, emoji=False, soft_wrap=True)

    def error(self, message: str, kind: Type[SubaruuError] = SubaruuError, token: Token = None):
        error = kind(message, token)
        self.report(error)
        raise error
