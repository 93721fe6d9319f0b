from __future__ import annotations

import pytest

from ed_engine.buffer import Buffer, LineDocument, UndoStack


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_lines(lines)


def test_document_addresses_from_one() -> None:
    document = LineDocument.from_lines(["a", "b", "c"])

    assert len(document) == 3
    assert document.get_line(1) == "a"
    assert document.lines_between(2, 3) == ("b", "c")


def test_document_insert_after_zero_prepends() -> None:
    document = LineDocument.from_lines(["b"])

    assert document.insert_after(0, ["a"]) == 1
    assert document.insert_after(2, ["c", "d"]) == 2
    assert document.snapshot() == ("a", "b", "c", "d")


def test_document_set_and_delete() -> None:
    document = LineDocument.from_lines(["a", "b"])

    document.set_line(1, "z")
    document.delete(2, 2)

    assert document.snapshot() == ("z",)


def test_buffer_from_lines_sets_address_to_last_line() -> None:
    buffer = make_buffer("a", "b")

    assert buffer.state.address == 2
    assert not buffer.state.dirty
    assert Buffer().state.address == 0


def test_buffer_mutations_mark_dirty() -> None:
    buffer = make_buffer("a")

    buffer.insert_after(1, [])
    assert not buffer.state.dirty

    buffer.insert_after(1, ["b"])
    assert buffer.state.dirty


def test_load_resets_state_and_undo() -> None:
    buffer = make_buffer("a")
    with buffer.transaction("delete"):
        buffer.delete_range(1, 1)
    assert len(buffer.undo) == 1

    buffer.load(["x", "y"])

    assert list(buffer.lines) == ["x", "y"]
    assert buffer.state.address == 2
    assert not buffer.state.dirty
    assert len(buffer.undo) == 0


def test_transaction_skips_unchanged_state() -> None:
    buffer = make_buffer("a")

    with buffer.transaction("print"):
        buffer.state.set_address(1)

    assert len(buffer.undo) == 0


def test_transaction_keep_records_without_change() -> None:
    buffer = make_buffer("a")

    with buffer.transaction("append") as tx:
        tx.keep()

    assert buffer.undo.pop().label == "append"


def test_transaction_discards_snapshot_on_error() -> None:
    buffer = make_buffer("a")

    with pytest.raises(ValueError):
        with buffer.transaction("delete"):
            buffer.delete_range(1, 1)
            raise ValueError("boom")

    assert len(buffer.undo) == 0


def test_restore_brings_back_snapshot() -> None:
    buffer = make_buffer("a", "b")
    entry = buffer.capture("before")

    buffer.delete_range(1, 2)
    buffer.state.filename = "x.txt"
    buffer.restore(entry)

    assert list(buffer.lines) == ["a", "b"]
    assert buffer.state.address == 2
    assert buffer.state.filename is None
    assert buffer.state.dirty


def test_undo_stack_depth() -> None:
    buffer = Buffer(undo_depth=2)
    first = buffer.capture("one")
    second = buffer.capture("two")
    third = buffer.capture("three")

    for entry in (first, second, third):
        buffer.undo.push(entry)

    assert len(buffer.undo) == 2
    assert buffer.undo.pop() is third
    assert buffer.undo.pop() is second
    assert buffer.undo.pop() is None
    with pytest.raises(ValueError):
        UndoStack(depth=0)
