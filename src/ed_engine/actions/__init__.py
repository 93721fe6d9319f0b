"""Command handlers reused by command mode."""

from .core import (
    append_lines,
    change_lines,
    delete_lines,
    goto_line,
    insert_lines,
    join_lines,
    number_lines,
    print_lines,
)
from .files import edit_file, filename, read_file, write_and_quit, write_file
from .search import compile_replacement, global_command, substitute
from .command import run_command

__all__ = [
    "goto_line",
    "append_lines",
    "insert_lines",
    "change_lines",
    "delete_lines",
    "join_lines",
    "print_lines",
    "number_lines",
    "edit_file",
    "read_file",
    "filename",
    "write_file",
    "write_and_quit",
    "compile_replacement",
    "global_command",
    "substitute",
    "run_command",
]
