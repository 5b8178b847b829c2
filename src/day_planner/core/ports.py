# src/day_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Stores depend on a Protocol instead of a concrete backend.
This keeps the JSON-file / SQLite backends swappable and makes testing easier.
"""

from datetime import date
from typing import Any, Callable, Protocol

JsonValue = Any
# Anything json.dumps accepts: dict / list / str / int / float / bool / None.

Clock = Callable[[], date]
# Returns "today" in the local calendar.


class PersistenceGateway(Protocol):
    """
    Named JSON value storage.

    get() returns None when the key was never written.
    set() raises PersistenceError when the value could not be stored.
    """

    def get(self, key: str) -> JsonValue | None: ...
    def set(self, key: str, value: JsonValue) -> None: ...


class BirthdaySource(Protocol):
    def list(self) -> list[Any]: ...


class TaskSource(Protocol):
    def list_tasks(self, day_key: str) -> list[Any]: ...
