# src/day_planner/projection/projector.py

"""
Calendar projections.

Pure derivations over the current store contents: nothing here mutates a store
or touches persistence. Two views come out of the same TaskStore:

- month view: one cell per day with a short text preview of the first tasks
- year view: one cell per day with icons only (glyph string)

Year-cell glyphs are built by concatenation, always in this order:
  1. seeded marker for the MM-DD key
  2. every birthday on that MM-DD, in registry order (its emotion, or the
     celebration fallback when it has none)
  3. distinct task emotions of that ISO day, first-seen order
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

from ..core.datekeys import check_month, check_year, days_in_month, iso_day_key, month_day_key
from ..core.ports import BirthdaySource, TaskSource
from ..tasks.task_models import TaskEntry

logger = logging.getLogger(__name__)

HEART = "❤️"
STAR = "⭐"
CELEBRATION = "🎉"

SEEDED_MARKERS: Mapping[str, str] = {
    "05-30": HEART,
    "08-16": HEART,
    "09-03": HEART,
    "03-11": STAR,
}

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "pt-BR": (
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}
DEFAULT_LOCALE = "pt-BR"
ELLIPSIS = "…"


@dataclass(frozen=True, slots=True)
class TaskSummary:
    emotion: str  # "" when the task has none
    text: str


@dataclass(frozen=True, slots=True)
class DayCell:
    day_number: int
    iso_key: str
    summaries: tuple[TaskSummary, ...]


@dataclass(frozen=True, slots=True)
class YearDayCell:
    day_number: int
    iso_key: str
    month_day_key: str
    glyph: str  # "" when nothing contributes


@dataclass(frozen=True, slots=True)
class MonthBlock:
    month: int  # 0-based
    month_label: str
    days: tuple[YearDayCell, ...]


def month_label(year: int, month: int, locale: str = DEFAULT_LOCALE) -> str:
    check_month(month)
    names = MONTH_NAMES.get(locale) or MONTH_NAMES[DEFAULT_LOCALE]
    return f"{names[month]} {year}"


def truncate(text: str, width: int) -> str:
    if width <= 0 or len(text) <= width:
        return text
    if width == 1:
        return ELLIPSIS
    return text[: width - 1].rstrip() + ELLIPSIS


class CalendarProjector:
    def __init__(
        self,
        tasks: TaskSource,
        birthdays: BirthdaySource,
        *,
        seeded: Mapping[str, str] = SEEDED_MARKERS,
        preview_limit: int = 3,
        preview_width: int = 24,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._tasks = tasks
        self._birthdays = birthdays
        self._seeded = dict(seeded)
        self._preview_limit = max(0, int(preview_limit))
        self._preview_width = int(preview_width)
        if locale not in MONTH_NAMES:
            logger.warning("Unknown locale %s; month labels fall back to %s", locale, DEFAULT_LOCALE)
            locale = DEFAULT_LOCALE
        self._locale = locale

    def project_month(self, year: int, month: int) -> list[DayCell]:
        check_year(year)
        cells: list[DayCell] = []
        for day in range(1, days_in_month(year, month) + 1):
            iso = iso_day_key(date(year, month + 1, day))
            preview = self._tasks.list_tasks(iso)[: self._preview_limit]
            summaries = tuple(
                TaskSummary(emotion=t.emotion or "", text=truncate(t.text, self._preview_width))
                for t in preview
            )
            cells.append(DayCell(day_number=day, iso_key=iso, summaries=summaries))
        return cells

    def project_year(self, year: int) -> list[MonthBlock]:
        check_year(year)
        by_month_day: dict[str, list[str]] = {}
        for b in self._birthdays.list():
            by_month_day.setdefault(b.date, []).append(b.emotion or CELEBRATION)

        blocks: list[MonthBlock] = []
        for month in range(12):
            days: list[YearDayCell] = []
            for day in range(1, days_in_month(year, month) + 1):
                d = date(year, month + 1, day)
                iso = iso_day_key(d)
                md = month_day_key(d)
                days.append(
                    YearDayCell(
                        day_number=day,
                        iso_key=iso,
                        month_day_key=md,
                        glyph=self._glyph(iso, md, by_month_day),
                    )
                )
            blocks.append(
                MonthBlock(
                    month=month,
                    month_label=month_label(year, month, self._locale),
                    days=tuple(days),
                )
            )
        return blocks

    def resolve_day_detail(self, iso_key: str) -> list[TaskEntry]:
        return self._tasks.list_tasks(iso_key)

    def _glyph(self, iso: str, md: str, birthday_glyphs: Mapping[str, list[str]]) -> str:
        parts: list[str] = []
        seeded = self._seeded.get(md)
        if seeded:
            parts.append(seeded)
        parts.extend(birthday_glyphs.get(md, ()))
        # dict keeps insertion order: first-seen dedup
        emotions = dict.fromkeys(t.emotion for t in self._tasks.list_tasks(iso) if t.emotion)
        parts.extend(emotions)
        return "".join(parts)
