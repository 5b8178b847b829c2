# src/day_planner/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..palette.birthdays import BirthdayRegistry
from ..palette.emotions import EmotionPalette
from ..projection.projector import CalendarProjector
from ..tasks.daily_list import DailyTaskList
from ..tasks.task_store import TaskStore
from .ports import Clock, PersistenceGateway


@dataclass
class AppState:
    """
    Everything a command handler needs, built once by cli.bootstrap.

    Stores are passed around through this object; no module keeps its own global copy.
    """

    settings: Any
    gateway: PersistenceGateway

    task_store: TaskStore
    daily: DailyTaskList
    palette: EmotionPalette
    birthdays: BirthdayRegistry
    projector: CalendarProjector

    clock: Clock = field(default=date.today)
