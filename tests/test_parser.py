from __future__ import annotations

import pytest

from ed_engine.commands import (
    AddressKind,
    CommandLineParser,
    CommandName,
    parse_global,
    parse_substitution,
)
from ed_engine.errors import InvalidAddress, InvalidCommand


def parse(line: str):
    return CommandLineParser().parse(line)


def test_parses_single_address_and_command() -> None:
    parsed = parse("2a")

    assert parsed.command is CommandName.APPEND
    assert parsed.addr_1.kind is AddressKind.NUMBER
    assert parsed.addr_1.value == 2
    assert parsed.separator == ""
    assert parsed.addr_2.is_empty
    assert parsed.params == ()


def test_parses_range_with_separator() -> None:
    parsed = parse("1,2d")

    assert parsed.command is CommandName.DELETE
    assert (parsed.addr_1.value, parsed.separator, parsed.addr_2.value) == (1, ",", 2)


@pytest.mark.parametrize("line", ["%p", ",p", ";p"])
def test_separator_without_addresses(line: str) -> None:
    parsed = parse(line)

    assert parsed.command is CommandName.PRINT
    assert parsed.separator == line[0]
    assert parsed.addr_1.is_empty and parsed.addr_2.is_empty
    assert parsed.has_address


def test_relative_and_symbolic_addresses() -> None:
    parsed = parse("-2,+3n")

    assert parsed.command is CommandName.NUMBER
    assert parsed.addr_1.kind is AddressKind.CURRENT
    assert parsed.addr_1.offset == -2
    assert parsed.addr_2.kind is AddressKind.CURRENT
    assert parsed.addr_2.offset == 3

    last = parse("$-1p")
    assert last.addr_1.kind is AddressKind.LAST
    assert last.addr_1.offset == -1

    bare = parse("+")
    assert bare.command is CommandName.GOTO
    assert bare.addr_1.offset == 1


def test_search_address_with_offset() -> None:
    parsed = parse("/foo/+1p")

    assert parsed.addr_1.kind is AddressKind.SEARCH_FORWARD
    assert parsed.addr_1.pattern == "foo"
    assert parsed.addr_1.offset == 1
    assert parsed.command is CommandName.PRINT

    backward = parse("?b\\?r?")
    assert backward.addr_1.kind is AddressKind.SEARCH_BACKWARD
    assert backward.addr_1.pattern == "b?r"
    assert backward.command is CommandName.GOTO


def test_substitute_params_split_on_delimiter() -> None:
    parsed = parse("s/foo/bar/g")

    assert parsed.command is CommandName.SUBSTITUTE
    assert parsed.params == ("foo", "bar", "g")


def test_substitute_escaped_delimiter_and_groups() -> None:
    parsed = parse(r"s/a\/b/(\1)/")

    assert parsed.params == ("a/b", r"(\1)", "")


def test_global_keeps_nested_command_raw() -> None:
    assert parse("g/foo/d").params == ("foo", "d")
    assert parse("g/foo/s/o/0/g").params == ("foo", "s/o/0/g")
    assert parse("v/x/").params == ("x", "")


def test_two_letter_commands_and_flags() -> None:
    assert parse("wq").command is CommandName.WRITE_QUIT
    assert parse("pn").command is CommandName.PRINT_NUMBER

    forced = parse("q!")
    assert forced.command is CommandName.QUIT
    assert forced.flag is True
    assert parse("Q").command is CommandName.FORCE_QUIT


def test_file_parameters_split_on_whitespace() -> None:
    assert parse("w out.txt").params == ("out.txt",)
    assert parse("e").params == ()
    assert parse("f  notes.md ").params == ("notes.md",)


def test_read_from_shell_command() -> None:
    spaced = parse("r !echo hi")
    assert spaced.shell is True
    assert spaced.params == ("echo hi",)

    attached = parse("r!ls -l")
    assert attached.shell is True
    assert attached.params == ("ls -l",)


def test_edit_and_write_take_shell_commands() -> None:
    edit = parse("e !ls -1")
    assert edit.shell is True
    assert edit.params == ("ls -1",)

    write = parse("w !wc -l")
    assert write.shell is True
    assert write.params == ("wc -l",)

    forced = parse("e! notes.txt")
    assert forced.flag is True
    assert forced.shell is False
    assert forced.params == ("notes.txt",)

    assert parse("wq !x").shell is False


def test_blank_line_is_goto_without_address() -> None:
    parsed = parse("")

    assert parsed.command is CommandName.GOTO
    assert not parsed.has_address


@pytest.mark.parametrize(
    "line", ["k", "zz", "pfoo", "p x", "s", "s foo", "wout", "\u00b2p", "1\u00b3p"]
)
def test_unknown_or_malformed_commands(line: str) -> None:
    with pytest.raises(InvalidCommand):
        parse(line)


@pytest.mark.parametrize("line", ["1q", "2,3w", "1u", "%e foo"])
def test_zero_address_commands_reject_addresses(line: str) -> None:
    with pytest.raises(InvalidAddress):
        parse(line)


def test_substitution_limits() -> None:
    assert parse_substitution(("a", "b", "")).limit == 1
    assert parse_substitution(("a", "b", "g")).limit is None
    assert parse_substitution(("a", "b", "3")).limit == 3
    assert parse_substitution(("a",)).replacement == ""
    with pytest.raises(InvalidCommand):
        parse_substitution(("a", "b", "x"))
    with pytest.raises(InvalidCommand):
        parse_substitution(("a", "b", "\u00b2"))


def test_global_defaults_to_print() -> None:
    action = parse_global(CommandName.GLOBAL, ("foo", ""))

    assert action.subcommand == "p"
    assert action.invert is False
    assert parse_global(CommandName.INVERSE_GLOBAL, ("foo", "d")).invert is True
