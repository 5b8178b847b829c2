# src/day_planner/core/datekeys.py

"""
Calendar key helpers.

Two key formats are used across the planner and must match bit-exactly:
- ISO day key  "YYYY-MM-DD" (local calendar date, primary key for tasks)
- month-day key "MM-DD"     (year-independent, birthdays and seeded markers)

Months passed to days_in_month() are 0-based (0 = January), matching the
calendar projections.
"""

from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date

from .errors import ValidationError
from .ports import Clock

ISO_DAY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
MONTH_DAY_RE = re.compile(r"^(0[1-9]|1[0-2])-(\d{2})$")

# Generic (non-leap) month lengths, used only for advisory checks on MM-DD keys.
GENERIC_MONTH_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def iso_day_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def month_day_key(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def today_key(clock: Clock = date.today) -> str:
    return iso_day_key(clock())


def parse_iso_day_key(raw: str) -> date:
    """Parse "YYYY-MM-DD" into a date; raises ValidationError on anything else."""
    m = ISO_DAY_RE.match((raw or "").strip())
    if not m:
        raise ValidationError(f"Invalid day key {raw!r} (expected YYYY-MM-DD)")
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as e:
        raise ValidationError(f"Invalid day key {raw!r}: {e}") from e


def check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(f"Year must be {MINYEAR}..{MAXYEAR}, got {year}")


def check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValidationError(f"Month must be 0..11, got {month}")


def days_in_month(year: int, month: int) -> int:
    check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def is_plausible_month_day(key: str) -> bool:
    """True if an already well-formed MM-DD key names a day that exists in some year."""
    m = MONTH_DAY_RE.match(key)
    if not m:
        return False
    day = int(m.group(2))
    return 1 <= day <= GENERIC_MONTH_DAYS[int(m.group(1)) - 1]
