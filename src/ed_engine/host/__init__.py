"""Collaborators the editor core reaches through narrow interfaces."""

from .files import FileStore, LoadedText, LocalFileStore
from .output import MemoryPrinter, Printer, RichPrinter
from .shell import ShellRunner, SubprocessShell

__all__ = [
    "FileStore",
    "LocalFileStore",
    "LoadedText",
    "Printer",
    "RichPrinter",
    "MemoryPrinter",
    "ShellRunner",
    "SubprocessShell",
]
