# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from day_planner.logging_setup import LOG_FILE_NAME, _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_filter_quietens_storage_chatter() -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record("day_planner.storage.json_gateway", logging.DEBUG))
    assert not f.filter(_record("day_planner.storage.sqlite_gateway", logging.INFO))
    assert f.filter(_record("day_planner.storage.sqlite_gateway", logging.WARNING))


def test_console_filter_passes_other_planner_logs() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("day_planner.projection.projector", logging.INFO))
    assert f.filter(_record("day_planner.cli.main", logging.DEBUG))


def test_console_filter_prefix_needs_dot_boundary() -> None:
    f = _ConsoleNoiseFilter({"day_planner.tasks": logging.ERROR})
    assert not f.filter(_record("day_planner.tasks.task_store", logging.WARNING))
    assert f.filter(_record("day_planner.tasksmith", logging.INFO))


def test_console_filter_third_party_only_errors() -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_setup_logging_writes_debug_to_file(tmp_path: Path, restore_root_logging: None) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    assert log_file == tmp_path / "logs" / LOG_FILE_NAME

    logging.getLogger("day_planner.storage.json_gateway").debug("stored key=%s", "planner_tasks")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "stored key=planner_tasks" in log_file.read_text(encoding="utf-8")


def test_setup_logging_replaces_previous_handlers(tmp_path: Path, restore_root_logging: None) -> None:
    setup_logging(log_dir=tmp_path)
    first = list(logging.getLogger().handlers)
    setup_logging(log_dir=tmp_path)
    for h in first:
        h.close()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert not set(handlers) & set(first)
