# tests/test_daily_list.py

from __future__ import annotations

import logging
from datetime import date

import pytest

from day_planner.core.errors import PersistenceError, ValidationError
from day_planner.tasks.daily_list import DAILY_KEY, DailyTaskList

from .fakes import FailingGateway, FakeGateway


def _daily(gw: FakeGateway) -> DailyTaskList:
    return DailyTaskList(gw, clock=lambda: date(2025, 3, 9))


def test_add_prepends_and_stamps_creation_day() -> None:
    gw = FakeGateway()
    daily = _daily(gw)
    first = daily.add("first")
    second = daily.add(" second ")

    assert [i.id for i in daily.list()] == [second.id, first.id]
    assert second.text == "second"
    assert first.date == "2025-03-09"
    assert first.done is False
    assert gw.get(DAILY_KEY)[0]["id"] == second.id


def test_add_rejects_blank() -> None:
    with pytest.raises(ValidationError):
        _daily(FakeGateway()).add("")


def test_toggle_remove_and_emotion() -> None:
    gw = FakeGateway()
    daily = _daily(gw)
    item = daily.add("walk")

    daily.toggle(item.id)
    daily.set_emotion(item.id, "🌸")
    reloaded = _daily(gw).list()[0]
    assert reloaded.done is True
    assert reloaded.emotion == "🌸"

    assert daily.remove(item.id) is True
    assert daily.list() == []
    assert gw.get(DAILY_KEY) == []


def test_misses_are_logged_noops(caplog: pytest.LogCaptureFixture) -> None:
    gw = FakeGateway()
    daily = _daily(gw)
    daily.add("a")
    writes = len(gw.writes)

    with caplog.at_level(logging.WARNING, logger="day_planner"):
        assert daily.toggle("d_gone") is None
        assert daily.remove("d_gone") is False
        assert daily.set_emotion("d_gone", "⭐") is None

    assert len(gw.writes) == writes
    assert caplog.text.count("stale reference") == 3


def test_failed_persist_rolls_back() -> None:
    gw = FailingGateway()
    daily = _daily(gw)
    item = daily.add("keep")
    gw.failing = True

    with pytest.raises(PersistenceError):
        daily.add("lost")
    with pytest.raises(PersistenceError):
        daily.remove(item.id)
    with pytest.raises(PersistenceError):
        daily.toggle(item.id)

    assert [(i.id, i.done) for i in daily.list()] == [(item.id, False)]
