# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from day_planner.cli.bootstrap import create_initial_state
from day_planner.core.state import AppState

from .fakes import FakeGateway

TODAY = date(2025, 6, 1)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the projector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="planner-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="json",
        json_dir=tmp_path / "store",
        sqlite_path=tmp_path / "planner.sqlite3",
        locale="pt-BR",
        preview_limit=3,
        preview_width=24,
    )


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def state(settings: SimpleNamespace, gateway: FakeGateway) -> AppState:
    """AppState wired to an in-memory gateway and a fixed "today"."""
    return create_initial_state(settings=settings, gateway=gateway, clock=lambda: TODAY)
