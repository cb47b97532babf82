#!/usr/bin/env python3
"""Enumerate the (year, month) fetch units covering a horizon."""

from datetime import datetime, timedelta
from typing import Iterator

from prayer_ics.schemas.prayers import MonthToken


def _next_month(d: datetime) -> datetime:
    if d.month == 12:
        return d.replace(year=d.year + 1, month=1)
    return d.replace(month=d.month + 1)


def iter_months(now: datetime, horizon_days: int) -> Iterator[MonthToken]:
    """
    Yield every month intersecting [now, now + horizon_days], ascending.

    The cursor starts at midnight on the first of now's month; a cursor equal
    to the end instant is still included.
    """
    until = now + timedelta(days=horizon_days)
    cursor = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    while cursor <= until:
        yield MonthToken(cursor.year, cursor.month)
        cursor = _next_month(cursor)
