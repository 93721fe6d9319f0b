"""Regex driven commands: global (``g``/``v``) and substitute (``s``)."""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Union

from ed_engine.commands import (
    ParsedCommand,
    Range,
    Substitution,
    parse_global,
    parse_substitution,
    remember_pattern,
)
from ed_engine.commands.parser import split_delimited
from ed_engine.errors import InvalidCommand, NoMatch, PatternError
from ed_engine.modes.base_mode import ModeContext, ModeResult

from .core import number_width

Replacer = Callable[["re.Match[str]"], str]
PRINT_SUBCOMMANDS = {"p": False, "n": True, "pn": True}


def compile_replacement(replacement: str, regex: "re.Pattern[str]") -> Replacer:
    """Build a ``re.sub`` callback from ed replacement syntax.

    ``&`` is the whole match, ``\\1``..``\\9`` are groups and a backslash
    makes any other character literal.
    """

    parts: List[Union[str, int]] = []
    literal: List[str] = []
    index = 0
    while index < len(replacement):
        char = replacement[index]
        if char == "\\" and index + 1 < len(replacement):
            following = replacement[index + 1]
            index += 2
            if following.isascii() and following.isdigit():
                group = int(following)
                if group > regex.groups:
                    raise PatternError("invalid group reference")
                parts.append("".join(literal))
                literal = []
                parts.append(group)
            else:
                literal.append(following)
            continue
        if char == "&":
            parts.append("".join(literal))
            literal = []
            parts.append(0)
        else:
            literal.append(char)
        index += 1
    parts.append("".join(literal))

    def expand(match: "re.Match[str]") -> str:
        return "".join(
            part if isinstance(part, str) else (match.group(part) or "")
            for part in parts
        )

    return expand


def substitute_line(
    context: ModeContext,
    address: int,
    regex: "re.Pattern[str]",
    replacer: Replacer,
    limit: Optional[int],
) -> bool:
    buffer = context.buffer
    updated, count = regex.subn(replacer, buffer.line(address), count=limit or 0)
    if not count:
        return False
    buffer.set_line(address, updated)
    buffer.state.set_address(address)
    return True


def substitute(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    substitution = parse_substitution(parsed.params)
    regex = remember_pattern(context.buffer, substitution.pattern)
    replacer = compile_replacement(substitution.replacement, regex)
    changed = 0
    for address in range(span.addr_1, span.addr_2 + 1):
        if substitute_line(context, address, regex, replacer, substitution.limit):
            changed += 1
    if not changed:
        raise NoMatch()
    return ModeResult(status="substitute", message=str(changed))


def _parse_subcommand(subcommand: str) -> Optional[Substitution]:
    if subcommand in PRINT_SUBCOMMANDS or subcommand == "d":
        return None
    if subcommand.startswith("s") and len(subcommand) > 1:
        delimiter = subcommand[1]
        if not delimiter.isspace() and not delimiter.isalnum():
            fields, _ = split_delimited(subcommand, 1, maxsplit=2, keep_rest=True)
            return parse_substitution(tuple(fields))
    raise InvalidCommand("unsupported global command")


def global_command(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    action = parse_global(parsed.command, parsed.params)
    substitution = _parse_subcommand(action.subcommand)
    buffer = context.buffer
    regex = remember_pattern(buffer, action.pattern)

    sub_regex: Optional["re.Pattern[str]"] = None
    replacer: Optional[Replacer] = None
    if substitution is not None:
        sub_regex = remember_pattern(buffer, substitution.pattern)
        replacer = compile_replacement(substitution.replacement, sub_regex)
        # The global pattern stays the remembered one for later searches.
        buffer.state.last_pattern = regex.pattern

    index, end = span
    affected = 0
    while index <= end:
        if bool(regex.search(buffer.line(index))) != action.invert:
            if action.subcommand == "d":
                buffer.delete_range(index, index)
                # Everything after the deleted line shifted up by one.
                index -= 1
                end -= 1
                buffer.state.set_address(index)
                affected += 1
            elif sub_regex is not None and replacer is not None:
                if substitute_line(
                    context, index, sub_regex, replacer, substitution.limit
                ):
                    affected += 1
            else:
                if PRINT_SUBCOMMANDS[action.subcommand]:
                    context.output.numbered(
                        index, number_width(context), buffer.line(index)
                    )
                else:
                    context.output.line(buffer.line(index))
                buffer.state.set_address(index)
                affected += 1
        index += 1

    return ModeResult(status="global", message=str(affected))


__all__ = [
    "compile_replacement",
    "substitute",
    "substitute_line",
    "global_command",
]
