# tests/test_day_detail.py

from __future__ import annotations

import pytest

from day_planner.core.errors import ValidationError
from day_planner.core.state import AppState
from day_planner.projection.day_detail import open_day

DAY = "2025-06-01"


def _open(state: AppState):
    return open_day(state.projector, state.task_store, state.palette, DAY)


def test_render_numbers_in_listing_order(state: AppState) -> None:
    assert _open(state).render() == f"Tasks for {DAY}:\n(none)"

    state.task_store.add_task(DAY, "first", "😀")
    second = state.task_store.add_task(DAY, "second")
    state.task_store.toggle_task(DAY, second.id)

    assert _open(state).render().splitlines() == [
        f"Tasks for {DAY}:",
        "1. 😀 first",
        "2. second (✔)",
    ]


def test_positional_commands(state: AppState) -> None:
    a = state.task_store.add_task(DAY, "a")
    b = state.task_store.add_task(DAY, "b")
    c = state.task_store.add_task(DAY, "c")

    _open(state).execute("m2")
    assert [t.done for t in state.task_store.list_tasks(DAY)] == [False, True, False]

    _open(state).execute("E3", "2")
    assert state.task_store.list_tasks(DAY)[2].emotion == "🌸"

    _open(state).execute("D1")
    assert [t.id for t in state.task_store.list_tasks(DAY)] == [b.id, c.id]
    assert a.id not in {t.id for t in state.task_store.list_tasks(DAY)}


def test_add_command_with_and_without_emoji(state: AppState) -> None:
    session = _open(state)
    session.execute("A", "buy milk |3")
    session.execute("a", "no emoji")
    session.execute("A", "bad choice|9")

    tasks = state.task_store.list_tasks(DAY)
    assert [(t.text, t.emotion) for t in tasks] == [
        ("buy milk", "⭐"),
        ("no emoji", None),
        ("bad choice", None),
    ]


def test_cancel_changes_nothing(state: AppState) -> None:
    state.task_store.add_task(DAY, "a")
    assert _open(state).execute("C") is None
    assert len(state.task_store.list_tasks(DAY)) == 1


def test_bad_positions_and_commands(state: AppState) -> None:
    state.task_store.add_task(DAY, "a")
    session = _open(state)

    with pytest.raises(IndexError):
        session.execute("M2")
    with pytest.raises(IndexError):
        session.execute("D0")
    with pytest.raises(IndexError):
        session.execute("E1", "7")
    with pytest.raises(ValidationError):
        session.execute("E1")
    with pytest.raises(ValidationError):
        session.execute("X1")
    with pytest.raises(ValidationError):
        session.execute("A", "")

    assert [t.text for t in state.task_store.list_tasks(DAY)] == ["a"]
    assert state.task_store.list_tasks(DAY)[0].done is False


def test_positions_refer_to_the_snapshot(state: AppState) -> None:
    a = state.task_store.add_task(DAY, "a")
    b = state.task_store.add_task(DAY, "b")
    session = _open(state)

    session.delete_at(1)
    # #2 is still "b" in the opened listing, even though "b" is now first in the store
    session.toggle_at(2)
    assert [(t.id, t.done) for t in state.task_store.list_tasks(DAY)] == [(b.id, True)]

    # "a" is gone: addressing it again is a logged no-op, not a hit on a neighbour
    assert session.toggle_at(1) is None
    assert session.delete_at(1) is False
    assert a.id not in {t.id for t in state.task_store.list_tasks(DAY)}


def test_palette_removal_does_not_touch_stored_symbols(state: AppState) -> None:
    _open(state).execute("A", "tagged|1")
    state.palette.remove_at(0)
    assert state.task_store.list_tasks(DAY)[0].emotion == "❤️"
