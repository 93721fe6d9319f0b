"""Dataclasses describing parsed command lines and the command table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class CommandName(str, Enum):
    """Every command the editor knows; anything else is rejected at parse time."""

    GOTO = ""
    APPEND = "a"
    INSERT = "i"
    CHANGE = "c"
    DELETE = "d"
    JOIN = "j"
    EDIT = "e"
    FILENAME = "f"
    READ = "r"
    WRITE = "w"
    WRITE_QUIT = "wq"
    EXIT = "x"
    PRINT = "p"
    NUMBER = "n"
    PRINT_NUMBER = "pn"
    GLOBAL = "g"
    INVERSE_GLOBAL = "v"
    SUBSTITUTE = "s"
    QUIT = "q"
    FORCE_QUIT = "Q"
    UNDO = "u"
    HELP = "h"
    TOGGLE_HELP = "H"


class AddressKind(str, Enum):
    NONE = "none"
    CURRENT = "current"
    LAST = "last"
    NUMBER = "number"
    SEARCH_FORWARD = "search_forward"
    SEARCH_BACKWARD = "search_backward"


@dataclass(frozen=True, slots=True)
class AddressToken:
    """One unresolved address as typed by the user.

    ``+N`` / ``-N`` on their own are ``CURRENT`` with an offset; they may also
    follow any other base (``$-1``, ``/re/+2``).
    """

    kind: AddressKind = AddressKind.NONE
    value: int = 0
    offset: int = 0
    pattern: str = ""

    @property
    def is_empty(self) -> bool:
        return self.kind is AddressKind.NONE


EMPTY_ADDRESS = AddressToken()


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Static facts about a command: how many addresses it takes, and so on."""

    name: CommandName
    addresses: int
    undoable: bool = False
    delimited: bool = False

    def __post_init__(self) -> None:
        if self.addresses not in (0, 1, 2):
            raise ValueError("addresses must be 0, 1 or 2")


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """Ephemeral result of parsing one command line."""

    command: CommandName
    addr_1: AddressToken = EMPTY_ADDRESS
    separator: str = ""
    addr_2: AddressToken = EMPTY_ADDRESS
    flag: bool = False
    shell: bool = False
    params: tuple[str, ...] = ()

    @property
    def spec(self) -> CommandSpec:
        return COMMAND_TABLE[self.command]

    @property
    def has_address(self) -> bool:
        if self.separator:
            return True
        return not (self.addr_1.is_empty and self.addr_2.is_empty)

    def param(self, index: int, default: str = "") -> str:
        return self.params[index] if index < len(self.params) else default


@dataclass(frozen=True, slots=True)
class Range:
    """Resolved ``(addr_1, addr_2)`` pair."""

    addr_1: int
    addr_2: int

    def __iter__(self):
        yield self.addr_1
        yield self.addr_2


@dataclass(frozen=True, slots=True)
class Substitution:
    pattern: str
    replacement: str
    limit: Optional[int] = 1  # None replaces every occurrence


@dataclass(frozen=True, slots=True)
class GlobalAction:
    pattern: str
    subcommand: str = "p"
    invert: bool = False


def _table(*specs: CommandSpec) -> Mapping[CommandName, CommandSpec]:
    return MappingProxyType({spec.name: spec for spec in specs})


COMMAND_TABLE: Mapping[CommandName, CommandSpec] = _table(
    CommandSpec(CommandName.GOTO, addresses=1),
    CommandSpec(CommandName.APPEND, addresses=1, undoable=True),
    CommandSpec(CommandName.INSERT, addresses=1, undoable=True),
    CommandSpec(CommandName.CHANGE, addresses=2, undoable=True),
    CommandSpec(CommandName.DELETE, addresses=2, undoable=True),
    CommandSpec(CommandName.JOIN, addresses=2, undoable=True),
    CommandSpec(CommandName.EDIT, addresses=0),
    CommandSpec(CommandName.FILENAME, addresses=0, undoable=True),
    CommandSpec(CommandName.READ, addresses=0, undoable=True),
    CommandSpec(CommandName.WRITE, addresses=0),
    CommandSpec(CommandName.WRITE_QUIT, addresses=0),
    CommandSpec(CommandName.EXIT, addresses=0),
    CommandSpec(CommandName.PRINT, addresses=2),
    CommandSpec(CommandName.NUMBER, addresses=2),
    CommandSpec(CommandName.PRINT_NUMBER, addresses=2),
    CommandSpec(CommandName.GLOBAL, addresses=2, undoable=True, delimited=True),
    CommandSpec(
        CommandName.INVERSE_GLOBAL, addresses=2, undoable=True, delimited=True
    ),
    CommandSpec(CommandName.SUBSTITUTE, addresses=2, undoable=True, delimited=True),
    CommandSpec(CommandName.QUIT, addresses=0),
    CommandSpec(CommandName.FORCE_QUIT, addresses=0),
    CommandSpec(CommandName.UNDO, addresses=0),
    CommandSpec(CommandName.HELP, addresses=0),
    CommandSpec(CommandName.TOGGLE_HELP, addresses=0),
)

COMMAND_NAMES: Mapping[str, CommandName] = MappingProxyType(
    {name.value: name for name in CommandName}
)
