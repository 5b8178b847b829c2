# src/day_planner/palette/birthdays.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..core.datekeys import MONTH_DAY_RE, is_plausible_month_day
from ..core.errors import PersistenceError, ValidationError
from ..core.ports import PersistenceGateway

logger = logging.getLogger(__name__)

BIRTHDAYS_KEY = "planner_birthdays"


@dataclass(frozen=True, slots=True)
class Birthday:
    name: str
    date: str  # "MM-DD", recurs every year
    emotion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "date": self.date, "emotion": self.emotion}


class BirthdayRegistry:
    """
    Append-only list of recurring birthdays.

    The MM-DD key is compared as an opaque string against generated calendar keys.
    A well-formed key naming a day that no month has (e.g. "04-31") is accepted
    and simply never matches.
    """

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway
        self._items: list[Birthday] = self._load()
        logger.info("BirthdayRegistry ready size=%d", len(self._items))

    def _load(self) -> list[Birthday]:
        raw = self._gateway.get(BIRTHDAYS_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Stored %s is not a list; starting empty", BIRTHDAYS_KEY)
            return []
        out: list[Birthday] = []
        for r in raw:
            if not isinstance(r, dict):
                continue
            name = str(r.get("name") or "").strip()
            md = str(r.get("date") or "").strip()
            if name and md:
                out.append(Birthday(name=name, date=md, emotion=(r.get("emotion") or None)))
        return out

    def add(self, name: str, month_day_key: str, emotion: str | None = None) -> Birthday:
        name = (name or "").strip()
        month_day_key = (month_day_key or "").strip()
        if not name:
            raise ValidationError("Birthday name is required")
        if not month_day_key:
            raise ValidationError("Birthday date is required")
        if not MONTH_DAY_RE.match(month_day_key):
            raise ValidationError(f"Birthday date must be MM-DD, got {month_day_key!r}")
        if not is_plausible_month_day(month_day_key):
            logger.warning(
                "Birthday %s has out-of-range date %s; it will never show on the calendar",
                name,
                month_day_key,
            )

        item = Birthday(name=name, date=month_day_key, emotion=(emotion or None))
        self._items.append(item)
        try:
            self._gateway.set(BIRTHDAYS_KEY, [b.to_dict() for b in self._items])
        except PersistenceError:
            self._items.pop()
            logger.error("Persisting %s failed; in-memory change rolled back", BIRTHDAYS_KEY)
            raise
        logger.debug("Birthday added name=%s date=%s emotion=%s", name, month_day_key, item.emotion)
        return item

    def list(self) -> list[Birthday]:
        return list(self._items)
