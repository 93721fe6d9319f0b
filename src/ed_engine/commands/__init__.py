"""Command-line grammar: parsing, address resolution, and range checks."""

from .addresses import AddressResolver, compile_pattern, remember_pattern
from .models import (
    COMMAND_TABLE,
    AddressKind,
    AddressToken,
    CommandName,
    CommandSpec,
    GlobalAction,
    ParsedCommand,
    Range,
    Substitution,
)
from .parser import CommandLineParser, parse_global, parse_substitution
from .validation import ensure_range, is_range_ok

__all__ = [
    "COMMAND_TABLE",
    "AddressKind",
    "AddressToken",
    "CommandName",
    "CommandSpec",
    "GlobalAction",
    "ParsedCommand",
    "Range",
    "Substitution",
    "AddressResolver",
    "CommandLineParser",
    "compile_pattern",
    "remember_pattern",
    "parse_global",
    "parse_substitution",
    "ensure_range",
    "is_range_ok",
]
