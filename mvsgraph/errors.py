"""Exception hierarchy for mvsgraph."""

from __future__ import annotations

from typing import Optional


class MVSGraphError(Exception):
    """Base class for errors raised by mvsgraph."""

    pass


class FormatError(MVSGraphError, ValueError):
    """A non-blank edge-list line does not hold exactly two tokens.

    Raised by the graph builder. Parsing is all-or-nothing, so this error
    aborts the whole conversion.
    """

    def __init__(self, line_number: int, token_count: int, line: str) -> None:
        self.line_number = line_number
        self.token_count = token_count
        self.line = line
        super().__init__(
            f"line {line_number}: expected 2 words in line, "
            f"but got {token_count}: {line!r}"
        )


class GoModError(MVSGraphError):
    """The go.mod file is missing, unreadable or has no module directive."""

    pass


class GoCommandError(MVSGraphError):
    """Running the go tool failed."""

    def __init__(self, message: str, stderr: Optional[str] = None) -> None:
        self.stderr = stderr
        super().__init__(message)


class ExportError(MVSGraphError):
    """The requested export could not be produced."""

    pass


__all__ = [
    "ExportError",
    "FormatError",
    "GoCommandError",
    "GoModError",
    "MVSGraphError",
]
