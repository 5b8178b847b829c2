# src/day_planner/storage/sqlite_gateway.py

from __future__ import annotations

import contextlib
import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


class SqliteGateway:
    """
    SQLite key-value store.

    One table, one row per logical key, the value kept as JSON text.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "planner.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteGateway ready db=%s keys=%s", self._db_path, self.count_keys())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at REAL NOT NULL
                    )
                    """
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to prepare schema in {self._db_path}: {e}") from e

    # ---- public API ----

    def count_keys(self) -> int:
        try:
            conn = self._get_conn()
            try:
                (n,) = conn.execute("SELECT COUNT(*) FROM kv").fetchone()
                return int(n)
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to count keys in {self._db_path}: {e}") from e

    def get(self, key: str) -> Any | None:
        try:
            conn = self._get_conn()
            try:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to read key {key!r} from {self._db_path}: {e}") from e
        if row is None:
            return None
        try:
            return json.loads(row["value"])
        except ValueError:
            logger.exception("Stored value for key %s is not valid JSON; treating as absent", key)
            return None

    def set(self, key: str, value: Any) -> None:
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Value for key {key!r} is not JSON-serializable: {e}") from e

        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO kv(key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, payload, time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to store key {key!r} in {self._db_path}: {e}") from e
        logger.debug("Stored key=%s bytes=%d", key, len(payload))
