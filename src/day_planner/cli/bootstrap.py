# src/day_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the persistence backend,
- wires the stores and the projector into AppState.
"""

from __future__ import annotations

import logging
from datetime import date

from ..config import get_settings
from ..core.ports import Clock, PersistenceGateway
from ..core.state import AppState
from ..palette.birthdays import BirthdayRegistry
from ..palette.emotions import EmotionPalette
from ..projection.projector import CalendarProjector
from ..storage import JsonFileGateway, SqliteGateway
from ..tasks.daily_list import DailyTaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage_backend == "sqlite":
        settings.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        settings.json_dir.mkdir(parents=True, exist_ok=True)


def create_gateway(settings) -> PersistenceGateway:
    if settings.storage_backend == "sqlite":
        return SqliteGateway(settings.sqlite_path)
    return JsonFileGateway(settings.json_dir)


def create_initial_state(
    *,
    settings=None,
    gateway: PersistenceGateway | None = None,
    clock: Clock = date.today,
) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and gateway are injectable so tests can run against in-memory fakes.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if gateway is None:
        _ensure_local_dirs(settings)
        gateway = create_gateway(settings)

    task_store = TaskStore(gateway)
    birthdays = BirthdayRegistry(gateway)
    projector = CalendarProjector(
        task_store,
        birthdays,
        preview_limit=getattr(settings, "preview_limit", 3),
        preview_width=getattr(settings, "preview_width", 24),
        locale=getattr(settings, "locale", "pt-BR"),
    )

    state = AppState(
        settings=settings,
        gateway=gateway,
        task_store=task_store,
        daily=DailyTaskList(gateway, clock=clock),
        palette=EmotionPalette(gateway),
        birthdays=birthdays,
        projector=projector,
        clock=clock,
    )
    logger.debug("AppState created backend=%s", getattr(settings, "storage_backend", "custom"))
    return state
