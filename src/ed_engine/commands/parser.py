"""Command-line parser: ``[ADDR1][SEP][ADDR2]CMD[!][PARAMS]``."""

from __future__ import annotations

import re
from typing import List, Tuple

from ed_engine.errors import InvalidAddress, InvalidCommand

from .models import (
    COMMAND_NAMES,
    EMPTY_ADDRESS,
    AddressKind,
    AddressToken,
    CommandName,
    GlobalAction,
    ParsedCommand,
    Substitution,
)

SEPARATORS = ",;%"
SEARCH_DELIMITERS = {"/": AddressKind.SEARCH_FORWARD, "?": AddressKind.SEARCH_BACKWARD}
# Commands whose remainder is a filename or shell command.
FILE_COMMANDS = frozenset(
    {
        CommandName.EDIT,
        CommandName.FILENAME,
        CommandName.READ,
        CommandName.WRITE,
        CommandName.WRITE_QUIT,
        CommandName.EXIT,
    }
)
SHELL_COMMANDS = frozenset(
    {CommandName.EDIT, CommandName.READ, CommandName.WRITE}
)


class CommandLineParser:
    """Turns one trimmed input line into a :class:`ParsedCommand`."""

    _re_digits = re.compile(r"[0-9]+")
    _re_offset = re.compile(r"([+-])([0-9]*)")
    _re_letters = re.compile(r"[A-Za-z]*")

    def parse(self, raw: str) -> ParsedCommand:
        text = (raw or "").strip()
        addr_1, pos = self._scan_address(text, 0)
        pos = self._skip_blanks(text, pos)

        separator = ""
        addr_2 = EMPTY_ADDRESS
        if pos < len(text) and text[pos] in SEPARATORS:
            separator = text[pos]
            addr_2, pos = self._scan_address(text, self._skip_blanks(text, pos + 1))
            pos = self._skip_blanks(text, pos)

        letters = self._re_letters.match(text, pos).group()
        command = COMMAND_NAMES.get(letters)
        if command is None:
            raise InvalidCommand()
        pos += len(letters)

        flag = pos < len(text) and text[pos] == "!"
        if flag:
            pos += 1

        parsed = ParsedCommand(
            command=command,
            addr_1=addr_1,
            separator=separator,
            addr_2=addr_2,
            flag=flag,
        )
        if parsed.has_address and parsed.spec.addresses == 0:
            raise InvalidAddress("unexpected address")

        flag, shell, params = self._scan_params(parsed, text[pos:])
        return ParsedCommand(
            command=command,
            addr_1=addr_1,
            separator=separator,
            addr_2=addr_2,
            flag=flag,
            shell=shell,
            params=params,
        )

    @staticmethod
    def _skip_blanks(text: str, pos: int) -> int:
        while pos < len(text) and text[pos] in " \t":
            pos += 1
        return pos

    def _scan_address(self, text: str, pos: int) -> Tuple[AddressToken, int]:
        if pos >= len(text):
            return EMPTY_ADDRESS, pos

        char = text[pos]
        number = self._re_digits.match(text, pos)
        kind = AddressKind.NONE
        value = 0
        pattern = ""
        if char == ".":
            kind, pos = AddressKind.CURRENT, pos + 1
        elif char == "$":
            kind, pos = AddressKind.LAST, pos + 1
        elif number is not None:
            value = _to_int(number.group())
            kind, pos = AddressKind.NUMBER, number.end()
        elif char in SEARCH_DELIMITERS:
            fields, pos = split_delimited(text, pos, maxsplit=1)
            kind, pattern = SEARCH_DELIMITERS[char], fields[0]

        offset = 0
        while pos < len(text) and text[pos] in "+-":
            match = self._re_offset.match(text, pos)
            sign, digits = match.groups()
            step = _to_int(digits) if digits else 1
            offset += step if sign == "+" else -step
            pos = match.end()
            if kind is AddressKind.NONE:
                kind = AddressKind.CURRENT

        if kind is AddressKind.NONE:
            return EMPTY_ADDRESS, pos
        return AddressToken(kind=kind, value=value, offset=offset, pattern=pattern), pos

    def _scan_params(
        self, parsed: ParsedCommand, rest: str
    ) -> Tuple[bool, bool, Tuple[str, ...]]:
        """Return ``(flag, shell, params)`` for whatever follows the command."""

        flag = parsed.flag
        if parsed.spec.delimited:
            if not rest or rest[0].isspace() or rest[0].isalnum():
                raise InvalidCommand("missing pattern delimiter")
            maxsplit = 2 if parsed.command is CommandName.SUBSTITUTE else 1
            fields, _ = split_delimited(rest, 0, maxsplit=maxsplit, keep_rest=True)
            return flag, False, tuple(fields)

        if parsed.command not in FILE_COMMANDS:
            if rest.strip():
                raise InvalidCommand("invalid command suffix")
            return flag, False, ()

        if rest and not flag and not rest[0].isspace():
            raise InvalidCommand("invalid command suffix")
        argument = rest.strip()
        if parsed.command in SHELL_COMMANDS:
            shell = argument.startswith("!")
            if shell:
                argument = argument[1:].strip()
            elif parsed.command is CommandName.READ and flag:
                # ``r!cmd`` is the attached spelling of ``r !cmd``.
                shell = True
            if shell:
                return flag, True, (argument,) if argument else ()
        return flag, False, tuple(argument.split())


def split_delimited(
    text: str, pos: int, *, maxsplit: int, keep_rest: bool = False
) -> Tuple[List[str], int]:
    """Split ``text`` at unescaped copies of the delimiter found at ``pos``.

    Up to ``maxsplit`` delimited fields are cut; with ``keep_rest`` whatever
    follows the last delimiter is returned as one more field. A missing
    closing delimiter ends the field at end of line, as ed allows. Returns
    the fields and the position after the last consumed delimiter.
    """

    delimiter = text[pos]
    fields: List[str] = []
    current: List[str] = []
    index = pos + 1
    while index < len(text) and len(fields) < maxsplit:
        char = text[index]
        if char == "\\" and index + 1 < len(text):
            following = text[index + 1]
            current.append(following if following == delimiter else char + following)
            index += 2
            continue
        if char == delimiter:
            fields.append("".join(current))
            current = []
            index += 1
            continue
        current.append(char)
        index += 1

    if len(fields) < maxsplit:
        fields.append("".join(current))
        return fields, index
    if keep_rest:
        fields.append(text[index:])
    return fields, index


def _to_int(digits: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:
        raise InvalidAddress() from exc


def parse_substitution(params: Tuple[str, ...]) -> Substitution:
    """Interpret ``s`` parameters: pattern, replacement, then ``g`` or a count."""

    pattern = params[0] if params else ""
    replacement = params[1] if len(params) > 1 else ""
    suffix = params[2].strip() if len(params) > 2 else ""
    if not suffix:
        return Substitution(pattern, replacement, limit=1)
    if suffix == "g":
        return Substitution(pattern, replacement, limit=None)
    if suffix.isascii() and suffix.isdigit() and int(suffix) > 0:
        return Substitution(pattern, replacement, limit=int(suffix))
    raise InvalidCommand("invalid command suffix")


def parse_global(command: CommandName, params: Tuple[str, ...]) -> GlobalAction:
    pattern = params[0] if params else ""
    subcommand = params[1].strip() if len(params) > 1 else ""
    return GlobalAction(
        pattern=pattern,
        subcommand=subcommand or "p",
        invert=command is CommandName.INVERSE_GLOBAL,
    )


__all__ = [
    "CommandLineParser",
    "split_delimited",
    "parse_substitution",
    "parse_global",
]
