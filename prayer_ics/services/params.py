#!/usr/bin/env python3
"""Query parameter resolution — every malformed value degrades to a default."""

import math
import re
from typing import Mapping

from prayer_ics.config import settings
from prayer_ics.schemas.prayers import FeedParams, Location

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_float(value: str | None) -> float | None:
    """Return value as a finite float, or None."""
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: str | None) -> int | None:
    """
    Parse the leading integer of value ("30", "30days", " -5").
    Returns None when there is no leading digit run.
    """
    if value is None:
        return None
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else None


def _first_float(*candidates: str | None, default: float) -> float:
    for candidate in candidates:
        number = parse_float(candidate)
        if number is not None:
            return number
    return default


def resolve_horizon(value: str | None) -> int:
    """Days ahead: positive integer or the default, capped at the maximum."""
    days = parse_int(value)
    if days is None or days <= 0:
        days = settings.default_horizon_days
    return min(days, settings.max_horizon_days)


def resolve_alarm(value: str | None) -> int | None:
    """
    Minutes of reminder lead time, or None for no reminder.

    An empty string means "no alarm" while "0" is a zero-minute alarm.
    """
    if not value:
        return None
    minutes = parse_int(value)
    if minutes is None:
        return None
    return max(minutes, 0)


def resolve_params(
    query: Mapping[str, str],
    lat_header: str | None = None,
    lon_header: str | None = None,
) -> FeedParams:
    """Build the feed configuration from raw query values and geo headers."""
    location = Location(
        lat=_first_float(query.get("lat"), lat_header, default=settings.default_latitude),
        lon=_first_float(query.get("lon"), lon_header, default=settings.default_longitude),
        city=query.get("city") or "",
        country=query.get("country") or "",
    )

    def _passthrough(key: str, default: str) -> str:
        value = query.get(key)
        return default if value is None else value

    return FeedParams(
        location=location,
        method=_passthrough("method", "12"),
        school=_passthrough("school", "0"),
        latitude_adjustment_method=_passthrough("latitudeAdjustmentMethod", "3"),
        tune=query.get("tune") or "",
        horizon=resolve_horizon(query.get("horizon")),
        alarm=resolve_alarm(query.get("alarm")),
    )
