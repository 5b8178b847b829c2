# tests/test_datekeys.py

from __future__ import annotations

from datetime import date

import pytest

from day_planner.core.datekeys import (
    days_in_month,
    is_plausible_month_day,
    iso_day_key,
    month_day_key,
    parse_iso_day_key,
    today_key,
)
from day_planner.core.errors import ValidationError


def test_keys_are_zero_padded() -> None:
    d = date(2025, 3, 7)
    assert iso_day_key(d) == "2025-03-07"
    assert month_day_key(d) == "03-07"
    assert today_key(lambda: d) == "2025-03-07"


def test_days_in_month_uses_zero_based_months() -> None:
    assert days_in_month(2025, 1) == 28
    assert days_in_month(2024, 1) == 29
    assert days_in_month(2025, 11) == 31
    with pytest.raises(ValidationError):
        days_in_month(2025, 12)


@pytest.mark.parametrize("raw", ["", "2025-6-1", "2025-02-30", "01/06/2025", "2025-13-01"])
def test_parse_iso_day_key_rejects(raw: str) -> None:
    with pytest.raises(ValidationError):
        parse_iso_day_key(raw)


def test_parse_iso_day_key_roundtrip() -> None:
    assert parse_iso_day_key(" 2025-06-01 ") == date(2025, 6, 1)


def test_plausible_month_day() -> None:
    assert is_plausible_month_day("02-29")
    assert is_plausible_month_day("12-31")
    assert not is_plausible_month_day("04-31")
    assert not is_plausible_month_day("02-30")
    assert not is_plausible_month_day("06-00")
