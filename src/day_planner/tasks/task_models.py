# src/day_planner/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

TASK_ID_PREFIX = "t_"
DAILY_ID_PREFIX = "d_"


def new_id(prefix: str = "") -> str:
    return prefix + uuid.uuid4().hex[:12]


def _clean_emotion(raw: Any) -> str | None:
    if raw is None:
        return None
    s = str(raw).strip()
    return s or None


@dataclass(slots=True)
class TaskEntry:
    """A task bucketed under one ISO day key."""

    id: str
    text: str
    done: bool = False
    emotion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "done": self.done, "emotion": self.emotion}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> TaskEntry | None:
        text = str(raw.get("text") or "").strip()
        if not text:
            return None
        tid = raw.get("id")
        return cls(
            id=str(tid) if tid else new_id(TASK_ID_PREFIX),
            text=text,
            done=bool(raw.get("done", False)),
            emotion=_clean_emotion(raw.get("emotion")),
        )


@dataclass(slots=True)
class DailyItem:
    """
    A "today" to-do.

    `date` is the ISO day on which the item was created; informational only,
    items are never bucketed by it.
    """

    id: str
    text: str
    date: str
    done: bool = False
    emotion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "done": self.done,
            "date": self.date,
        }
        if self.emotion is not None:
            data["emotion"] = self.emotion
        return data

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> DailyItem | None:
        text = str(raw.get("text") or "").strip()
        if not text:
            return None
        iid = raw.get("id")
        return cls(
            id=str(iid) if iid else new_id(DAILY_ID_PREFIX),
            text=text,
            date=str(raw.get("date") or ""),
            done=bool(raw.get("done", False)),
            emotion=_clean_emotion(raw.get("emotion")),
        )
