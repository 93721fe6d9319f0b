from __future__ import annotations

from typing import List, Sequence

import pytest

from ed_engine.buffer import Buffer
from ed_engine.errors import InvalidCommand, NoMatch, NoUndo, PatternError
from ed_engine.host import MemoryPrinter
from ed_engine.modes import ModeResult, create_default_manager
from ed_engine.modes.mode_manager import ModeManager


def make_manager(lines: Sequence[str]) -> ModeManager:
    return create_default_manager(Buffer.from_lines(lines), output=MemoryPrinter())


def run(manager: ModeManager, *lines: str) -> List[ModeResult]:
    return [manager.handle_line(line) for line in lines]


def lines_of(manager: ModeManager) -> List[str]:
    return list(manager.context.buffer.lines)


def test_global_delete_removes_matching_lines() -> None:
    manager = make_manager(["foo", "bar"])

    run(manager, "g/foo/d")

    assert lines_of(manager) == ["bar"]


def test_global_delete_skips_lines_between_matches() -> None:
    manager = make_manager(["foo", "bar", "foo"])

    run(manager, "g/foo/d")

    assert lines_of(manager) == ["bar"]


def test_global_delete_handles_consecutive_matches() -> None:
    manager = make_manager(["x"] * 5)

    run(manager, "g/x/d")

    assert lines_of(manager) == []
    assert manager.context.buffer.state.address == 0


def test_global_delete_alternating_lines() -> None:
    manager = make_manager(["a", "b", "a", "b", "a"])

    run(manager, "g/a/d")

    assert lines_of(manager) == ["b", "b"]


def test_global_delete_respects_range() -> None:
    manager = make_manager(["a", "a", "a", "a"])

    run(manager, "2,3g/a/d")

    assert lines_of(manager) == ["a", "a"]


def test_inverse_global() -> None:
    manager = make_manager(["a", "b", "a", "c"])

    run(manager, "v/a/d")

    assert lines_of(manager) == ["a", "a"]


def test_global_print_defaults() -> None:
    manager = make_manager(["a", "b", "a"])
    output = manager.context.output

    run(manager, "1", "g/a/")
    assert output.drain() == ["a", "a", "a"]
    assert manager.context.buffer.state.address == 3

    run(manager, "g/a/n")
    assert output.drain() == ["1 a", "3 a"]


def test_global_substitute_keeps_global_pattern() -> None:
    manager = make_manager(["foo", "xoo", "boo"])

    run(manager, "g/x/s/o/0/g")

    assert lines_of(manager) == ["foo", "x00", "boo"]
    assert manager.context.buffer.state.last_pattern == "x"


def test_global_rejects_other_commands() -> None:
    manager = make_manager(["a"])

    result = manager.handle_line("g/a/w")

    assert isinstance(result.error, InvalidCommand)
    assert lines_of(manager) == ["a"]


@pytest.mark.parametrize(
    ("command", "expected"),
    [
        ("s/o/0/", "f0oo"),
        ("s/o/0/g", "f000"),
        ("s/o/0/2", "f00o"),
        ("s/o//g", "f"),
        ("s/o", "foo"),
    ],
)
def test_substitute_limits(command: str, expected: str) -> None:
    manager = make_manager(["fooo"])

    run(manager, command)

    assert lines_of(manager) == [expected]


def test_substitute_replacement_syntax() -> None:
    manager = make_manager(["ab", "abc", "abc"])

    run(manager, r"1s/(a)(b)/\2\1/", "2s/b/[&]/", r"3s/b/\&/")

    assert lines_of(manager) == ["ba", "a[b]c", "a&c"]


def test_substitute_over_range_moves_to_last_change() -> None:
    manager = make_manager(["a", "x", "a", "y"])

    run(manager, "%s/a/b/")

    assert lines_of(manager) == ["b", "x", "b", "y"]
    assert manager.context.buffer.state.address == 3


def test_substitute_reuses_last_pattern() -> None:
    manager = make_manager(["foo", "bar"])

    run(manager, "1", "/bar/", "s//baz/")

    assert lines_of(manager) == ["foo", "baz"]


def test_substitute_without_match_changes_nothing() -> None:
    manager = make_manager(["abc"])
    manager.context.buffer.state.dirty = False

    result = manager.handle_line("s/z/y/")

    assert isinstance(result.error, NoMatch)
    assert lines_of(manager) == ["abc"]
    assert not manager.context.buffer.state.dirty
    assert isinstance(manager.handle_line("u").error, NoUndo)


@pytest.mark.parametrize("command", ["s/(/x/", r"s/a/\1/", "g/[/d"])
def test_bad_patterns_are_reported(command: str) -> None:
    manager = make_manager(["abc"])

    result = manager.handle_line(command)

    assert isinstance(result.error, PatternError)
    assert lines_of(manager) == ["abc"]
