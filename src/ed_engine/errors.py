"""Recoverable editor errors reported back to the session loop."""

from __future__ import annotations


class EdError(RuntimeError):
    """Base class for every error a command can report.

    Command mode catches these, prints ``?`` (or ``? message`` in help mode)
    and keeps the session running.
    """

    default_message = "error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCommand(EdError):
    default_message = "unknown command"


class PatternError(InvalidCommand):
    """Raised when a user supplied regular expression does not compile."""

    default_message = "invalid pattern"

    def __init__(self, message: str | None = None, *, pattern: str = "") -> None:
        super().__init__(message)
        self.pattern = pattern


class InvalidAddress(EdError):
    default_message = "invalid address"


class NoMatch(InvalidAddress):
    default_message = "no match"


class NoFilename(EdError):
    default_message = "no current filename"


class CannotOpen(EdError):
    default_message = "cannot open input file"

    def __init__(self, message: str | None = None, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class Dirty(EdError):
    default_message = "warning: buffer modified"


class NoUndo(EdError):
    default_message = "nothing to undo"


__all__ = [
    "EdError",
    "InvalidCommand",
    "PatternError",
    "InvalidAddress",
    "NoMatch",
    "NoFilename",
    "CannotOpen",
    "Dirty",
    "NoUndo",
]
