# src/day_planner/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

LOG_FILE_NAME = "planner.log"

# Minimum console level per planner area; the log file still gets everything.
CONSOLE_FLOORS: Mapping[str, int] = {
    "day_planner.storage": logging.WARNING,
    "day_planner.tasks": logging.WARNING,
    "day_planner.palette": logging.WARNING,
}


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console filter:
    - planner areas listed in `floors` need at least that level
    - other day_planner logs pass
    - anything else (third-party, 'py.warnings') only from ERROR up
    """

    def __init__(self, floors: Mapping[str, int] = CONSOLE_FLOORS) -> None:
        super().__init__()
        # longest prefix first, so "a.b.c" wins over "a.b"
        self._floors = sorted(floors.items(), key=lambda kv: len(kv[0]), reverse=True)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name != "day_planner" and not name.startswith("day_planner."):
            return record.levelno >= logging.ERROR

        for prefix, floor in self._floors:
            if name == prefix or name.startswith(prefix + "."):
                return record.levelno >= floor
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/planner",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console_floors: Mapping[str, int] = CONSOLE_FLOORS,
) -> Path:
    """
    Configure the root logger once, early in main():
    - stderr handler, filtered by `console_floors`
    - <log_dir>/planner.log with everything from `file_level` up

    Returns the log file path so the console can point the user at it.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    console.addFilter(_ConsoleNoiseFilter(console_floors))
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
