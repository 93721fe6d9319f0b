"""Plain terminal adapter with readline history."""

from .session import ConsoleSession, LineReader, ReadlineReader, main

__all__ = ["ConsoleSession", "LineReader", "ReadlineReader", "main"]
