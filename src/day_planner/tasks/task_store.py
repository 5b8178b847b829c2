# src/day_planner/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.datekeys import iso_day_key, parse_iso_day_key
from ..core.errors import PersistenceError, ValidationError
from ..core.ports import PersistenceGateway
from .task_models import TASK_ID_PREFIX, TaskEntry, new_id

logger = logging.getLogger(__name__)

TASKS_KEY = "planner_tasks"


class TaskStore:
    """
    Day-keyed task store: ISO day key -> ordered list of TaskEntry.

    Persistence model:
    - the whole mapping is loaded once at construction
    - every mutation writes the whole mapping back (no batching, no dirty tracking)
    - if the write fails, the in-memory change is undone and PersistenceError propagates

    Misses (unknown day or id) are no-ops: they come from a stale view, so they are
    logged as warnings instead of raised.
    """

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway
        self._days: dict[str, list[TaskEntry]] = self._load()
        logger.info(
            "TaskStore ready days=%d tasks=%d",
            len(self._days),
            sum(len(v) for v in self._days.values()),
        )

    # ---- low-level helpers ----

    def _load(self) -> dict[str, list[TaskEntry]]:
        raw = self._gateway.get(TASKS_KEY)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning("Stored %s is not a mapping (%s); starting empty", TASKS_KEY, type(raw).__name__)
            return {}

        out: dict[str, list[TaskEntry]] = {}
        for day_key, items in raw.items():
            if not isinstance(day_key, str) or not isinstance(items, list):
                continue
            entries: list[TaskEntry] = []
            seen: set[str] = set()
            for item in items:
                if not isinstance(item, dict):
                    continue
                entry = TaskEntry.from_dict(item)
                if entry is None or entry.id in seen:
                    continue
                seen.add(entry.id)
                entries.append(entry)
            if entries:
                out[day_key] = entries
        return out

    def _serialize(self) -> dict[str, list[dict[str, Any]]]:
        return {day: [t.to_dict() for t in tasks] for day, tasks in self._days.items()}

    def _persist(self, undo: Callable[[], None]) -> None:
        try:
            self._gateway.set(TASKS_KEY, self._serialize())
        except PersistenceError:
            undo()
            logger.error("Persisting %s failed; in-memory change rolled back", TASKS_KEY)
            raise

    def _find(self, day_key: str, task_id: str) -> tuple[int, TaskEntry] | None:
        for i, task in enumerate(self._days.get(day_key, ())):
            if task.id == task_id:
                return i, task
        return None

    @staticmethod
    def _stale(op: str, day_key: str, task_id: str) -> None:
        logger.warning("%s: no task id=%s on day=%s (stale reference?)", op, task_id, day_key)

    # ---- public API ----

    def add_task(self, day_key: str, text: str, emotion: str | None = None) -> TaskEntry:
        text = (text or "").strip()
        if not text:
            raise ValidationError("Task text is required")
        # stored under the canonical YYYY-MM-DD key
        day_key = iso_day_key(parse_iso_day_key(day_key))

        entry = TaskEntry(id=new_id(TASK_ID_PREFIX), text=text, emotion=(emotion or None))
        created_day = day_key not in self._days
        self._days.setdefault(day_key, []).append(entry)

        def undo() -> None:
            self._days[day_key].remove(entry)
            if created_day:
                del self._days[day_key]

        self._persist(undo)
        logger.debug("Task added day=%s id=%s emotion=%s", day_key, entry.id, entry.emotion)
        return entry

    def toggle_task(self, day_key: str, task_id: str) -> TaskEntry | None:
        found = self._find(day_key, task_id)
        if found is None:
            self._stale("toggle_task", day_key, task_id)
            return None
        _, task = found
        task.done = not task.done

        def undo() -> None:
            task.done = not task.done

        self._persist(undo)
        logger.debug("Task toggled day=%s id=%s done=%s", day_key, task_id, task.done)
        return task

    def delete_task(self, day_key: str, task_id: str) -> bool:
        found = self._find(day_key, task_id)
        if found is None:
            self._stale("delete_task", day_key, task_id)
            return False
        idx, task = found
        tasks = self._days[day_key]
        del tasks[idx]
        if not tasks:
            del self._days[day_key]

        def undo() -> None:
            self._days.setdefault(day_key, tasks).insert(idx, task)

        self._persist(undo)
        logger.debug("Task deleted day=%s id=%s", day_key, task_id)
        return True

    def set_emotion(self, day_key: str, task_id: str, symbol: str | None) -> TaskEntry | None:
        found = self._find(day_key, task_id)
        if found is None:
            self._stale("set_emotion", day_key, task_id)
            return None
        _, task = found
        previous = task.emotion
        task.emotion = symbol or None

        def undo() -> None:
            task.emotion = previous

        self._persist(undo)
        logger.debug("Task emotion set day=%s id=%s emotion=%s", day_key, task_id, task.emotion)
        return task

    def list_tasks(self, day_key: str) -> list[TaskEntry]:
        return list(self._days.get(day_key, ()))

    def days(self) -> list[str]:
        """ISO day keys that currently hold at least one task, oldest first."""
        return sorted(self._days)
