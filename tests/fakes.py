# tests/fakes.py

from __future__ import annotations

import json
from typing import Any

from day_planner.core.errors import PersistenceError


class FakeGateway:
    """
    In-memory PersistenceGateway for unit tests.

    - Values go through a JSON round trip, like the real backends
    - Every set() is recorded for assertions
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.data: dict[str, str] = {k: json.dumps(v) for k, v in (initial or {}).items()}
        self.writes: list[str] = []

    def get(self, key: str) -> Any | None:
        raw = self.data.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = json.dumps(value, ensure_ascii=False)
        self.writes.append(key)


class FailingGateway(FakeGateway):
    """Gateway whose writes fail once `failing` is switched on (disk full, quota, ...)."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        super().__init__(initial)
        self.failing = False

    def set(self, key: str, value: Any) -> None:
        if self.failing:
            raise PersistenceError(f"simulated write failure for {key}")
        super().set(key, value)
