# src/day_planner/tasks/daily_list.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.datekeys import today_key
from ..core.errors import PersistenceError, ValidationError
from ..core.ports import Clock, PersistenceGateway
from .task_models import DAILY_ID_PREFIX, DailyItem, new_id

logger = logging.getLogger(__name__)

DAILY_KEY = "planner_daily"


class DailyTaskList:
    """
    The "today" to-do list (most recent first).

    Independent of TaskStore: items are never bucketed by calendar day.
    Same persistence and stale-reference rules as TaskStore.
    """

    def __init__(self, gateway: PersistenceGateway, *, clock: Clock = date.today) -> None:
        self._gateway = gateway
        self._clock = clock
        self._items: list[DailyItem] = self._load()
        logger.info("DailyTaskList ready items=%d", len(self._items))

    def _load(self) -> list[DailyItem]:
        raw = self._gateway.get(DAILY_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Stored %s is not a list; starting empty", DAILY_KEY)
            return []
        items = [DailyItem.from_dict(r) for r in raw if isinstance(r, dict)]
        return [i for i in items if i is not None]

    def _persist(self, undo: Callable[[], None]) -> None:
        try:
            self._gateway.set(DAILY_KEY, [i.to_dict() for i in self._items])
        except PersistenceError:
            undo()
            logger.error("Persisting %s failed; in-memory change rolled back", DAILY_KEY)
            raise

    def _find(self, item_id: str, op: str) -> DailyItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        logger.warning("%s: no daily item id=%s (stale reference?)", op, item_id)
        return None

    def add(self, text: str) -> DailyItem:
        text = (text or "").strip()
        if not text:
            raise ValidationError("Daily item text is required")
        item = DailyItem(id=new_id(DAILY_ID_PREFIX), text=text, date=today_key(self._clock))
        self._items.insert(0, item)
        self._persist(lambda: self._items.remove(item))
        logger.debug("Daily item added id=%s", item.id)
        return item

    def toggle(self, item_id: str) -> DailyItem | None:
        item = self._find(item_id, "toggle")
        if item is None:
            return None
        item.done = not item.done

        def undo() -> None:
            item.done = not item.done

        self._persist(undo)
        return item

    def remove(self, item_id: str) -> bool:
        item = self._find(item_id, "remove")
        if item is None:
            return False
        idx = self._items.index(item)
        del self._items[idx]
        self._persist(lambda: self._items.insert(idx, item))
        logger.debug("Daily item removed id=%s", item_id)
        return True

    def set_emotion(self, item_id: str, symbol: str | None) -> DailyItem | None:
        item = self._find(item_id, "set_emotion")
        if item is None:
            return None
        previous = item.emotion
        item.emotion = symbol or None

        def undo() -> None:
            item.emotion = previous

        self._persist(undo)
        return item

    def list(self) -> list[DailyItem]:
        return list(self._items)
