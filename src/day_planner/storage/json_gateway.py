# src/day_planner/storage/json_gateway.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileGateway:
    """
    File-per-key JSON storage (one <key>.json per logical key).

    Writes are atomic: the value is written to <key>.tmp and moved over the
    previous file with os.replace, so a crash never leaves half a file behind.
    Files holding invalid JSON are logged and read back as "absent"; I/O
    failures raise PersistenceError.
    """

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileGateway ready dir=%s", self._dir)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Failed to read key {key!r} from {path}: {e}") from e
        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError:
            logger.exception("Stored %s is not valid JSON; treating key %s as absent", path, key)
            return None

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        try:
            payload = json.dumps(value, ensure_ascii=False, indent=2)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistenceError(f"Failed to write key {key!r} to {path}: {e}") from e
        with contextlib.suppress(OSError):
            # Best-effort: personal planner data, keep it private on disk.
            os.chmod(path, 0o600)
        logger.debug("Stored key=%s bytes=%d", key, len(payload))
