from __future__ import annotations

from calendar import isleap
from datetime import date, datetime
from typing import List, Tuple


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so repositories can take it as an injectable clock.
    """
    return date.today()


def birthday_month_days(today: date) -> List[Tuple[int, int]]:
    """(month, day) pairs whose anniversary falls on `today`.

    Feb 29 anniversaries are celebrated on Feb 28 in non-leap years.
    """
    pairs = [(today.month, today.day)]
    if (today.month, today.day) == (2, 28) and not isleap(today.year):
        pairs.append((2, 29))
    return pairs


def is_birthday(created_at: date, today: date) -> bool:
    return (created_at.month, created_at.day) in birthday_month_days(today)
