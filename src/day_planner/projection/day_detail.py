# src/day_planner/projection/day_detail.py

"""
Day detail: numbered listing of one day's tasks plus the commands that address
tasks by their number in that listing.

Numbers are positions in the snapshot taken when the session was opened, not
stable ids. Each positional command resolves its number to a task id first and
then goes through TaskStore, so a task removed in the meantime becomes a logged
no-op instead of hitting a neighbour.
"""

from __future__ import annotations

import logging
import re

from ..core.errors import ValidationError
from ..palette.emotions import EmotionPalette
from ..tasks.task_models import TaskEntry
from ..tasks.task_store import TaskStore
from .projector import CalendarProjector

logger = logging.getLogger(__name__)

_POSITIONAL_RE = re.compile(r"^([MDE])(\d+)$", re.IGNORECASE)

CHECK_MARK = "✔"

COMMANDS_HELP = (
    "A <text>[|<emoji #>] - add a task\n"
    "M<n> - mark/unmark task n\n"
    "D<n> - delete task n\n"
    "E<n> <emoji #> - set emoji of task n\n"
    "C - cancel"
)


class DayDetailSession:
    def __init__(
        self,
        iso_key: str,
        snapshot: list[TaskEntry],
        task_store: TaskStore,
        palette: EmotionPalette,
    ) -> None:
        self.iso_key = iso_key
        self._snapshot = snapshot
        self._tasks = task_store
        self._palette = palette

    def render(self) -> str:
        lines = [f"Tasks for {self.iso_key}:"]
        if not self._snapshot:
            lines.append("(none)")
        for i, t in enumerate(self._snapshot, start=1):
            emo = f"{t.emotion} " if t.emotion else ""
            done = f" ({CHECK_MARK})" if t.done else ""
            lines.append(f"{i}. {emo}{t.text}{done}")
        return "\n".join(lines)

    # ---- positional helpers ----

    def _task_at(self, position: int) -> TaskEntry:
        if not 1 <= position <= len(self._snapshot):
            raise IndexError(f"No task #{position} on {self.iso_key} ({len(self._snapshot)} listed)")
        return self._snapshot[position - 1]

    def _emotion_or_none(self, choice: int | None) -> str | None:
        """Optional palette choice: anything invalid means "no emotion"."""
        if choice is None:
            return None
        try:
            return self._palette.pick(choice).symbol
        except IndexError:
            logger.info("Ignoring invalid emoji choice %s for new task on %s", choice, self.iso_key)
            return None

    # ---- commands ----

    def add(self, text: str, emotion_choice: int | None = None) -> TaskEntry:
        return self._tasks.add_task(self.iso_key, text, self._emotion_or_none(emotion_choice))

    def toggle_at(self, position: int) -> TaskEntry | None:
        return self._tasks.toggle_task(self.iso_key, self._task_at(position).id)

    def delete_at(self, position: int) -> bool:
        return self._tasks.delete_task(self.iso_key, self._task_at(position).id)

    def set_emotion_at(self, position: int, emotion_choice: int) -> TaskEntry | None:
        task = self._task_at(position)
        symbol = self._palette.pick(emotion_choice).symbol
        return self._tasks.set_emotion(self.iso_key, task.id, symbol)

    def execute(self, command: str, argument: str | None = None) -> TaskEntry | bool | None:
        """
        Run one textual command: A, M<n>, D<n>, E<n>, C (case-insensitive).

        A takes "text" or "text|<emoji #>" as argument; E<n> takes "<emoji #>".
        Raises ValidationError for unknown or incomplete commands, IndexError
        for bad positions.
        """
        cmd = (command or "").strip()
        upper = cmd.upper()

        if upper == "C":
            return None

        if upper == "A":
            text, _, choice = (argument or "").partition("|")
            return self.add(text, _parse_number(choice) if choice.strip() else None)

        m = _POSITIONAL_RE.match(cmd)
        if not m:
            raise ValidationError(f"Unknown day command: {command!r}")
        op, position = m.group(1).upper(), int(m.group(2))

        if op == "M":
            return self.toggle_at(position)
        if op == "D":
            return self.delete_at(position)

        if not (argument or "").strip():
            raise ValidationError(f"E{position} needs an emoji number")
        return self.set_emotion_at(position, _parse_number(argument or ""))


def _parse_number(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValidationError(f"Expected a number, got {raw!r}") from e


def open_day(
    projector: CalendarProjector,
    task_store: TaskStore,
    palette: EmotionPalette,
    iso_key: str,
) -> DayDetailSession:
    return DayDetailSession(iso_key, projector.resolve_day_detail(iso_key), task_store, palette)
