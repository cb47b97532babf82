#!/usr/bin/env python3
"""Turn AlAdhan day records into PrayerEvent objects."""

import logging
from datetime import date, datetime, timezone
from typing import Any, Iterable, Iterator
from zoneinfo import ZoneInfo

from prayer_ics.schemas.prayers import PRAYER_NAMES, FeedContext, FeedParams, PrayerEvent
from prayer_ics.services.aladhan.client import day_date
from prayer_ics.services.calendar.texts import texts

logger = logging.getLogger(__name__)

UID_DOMAIN = "prayer-ics"


def parse_day(value: str) -> date | None:
    """Accept ISO "YYYY-MM-DD" as well as AlAdhan's native "DD-MM-YYYY"."""
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        pass
    try:
        return datetime.strptime(value, "%d-%m-%Y").date()
    except ValueError:
        return None


def parse_timing(value: str | None) -> tuple[int, int] | None:
    """
    "05:17 (CET)" -> (5, 17). Anything after the first space is dropped.
    ISO timings ("2025-03-10T05:17:00+01:00", sent when iso8601=true) give
    their local wall-clock hour and minute.
    Returns None when hour or minute is not a number.
    """
    if not isinstance(value, str):
        return None
    hhmm = value.split(" ")[0]
    if "T" in hhmm:
        try:
            stamp = datetime.fromisoformat(hhmm.replace("Z", "+00:00"))
        except ValueError:
            return None
        return stamp.hour, stamp.minute
    parts = hhmm.split(":")
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def make_uid(name: str, start: datetime, lat: float, lon: float) -> str:
    millis = int(start.timestamp()) * 1000
    return f"{name}-{millis}-{lat:.2f}-{lon:.2f}@{UID_DOMAIN}"


def describe(params: FeedParams) -> str:
    return texts()["description"].format(method=params.method, school=params.school)


def synthesize_events(
    days: Iterable[dict[str, Any]],
    params: FeedParams,
    context: FeedContext,
) -> Iterator[PrayerEvent]:
    """
    Yield one event per parseable prayer time, days in input order and
    prayers in PRAYER_NAMES order. Each day is bound to context.timezone as
    it is when that day is reached.
    """
    location = params.location
    for day in days:
        raw_date = day_date(day)
        day_value = parse_day(raw_date) if isinstance(raw_date, str) else None
        if day_value is None:
            logger.debug("Skipping day without a usable date: %r", raw_date)
            continue

        tzid = context.timezone
        tz = ZoneInfo(tzid)
        timings = day.get("timings") or {}
        for name in PRAYER_NAMES:
            hm = parse_timing(timings.get(name))
            if hm is None:
                logger.debug("Skipping %s on %s: bad timing %r", name, day_value, timings.get(name))
                continue
            try:
                start = datetime(day_value.year, day_value.month, day_value.day, hm[0], hm[1], 0, tzinfo=tz)
            except ValueError:
                logger.debug("Skipping %s on %s: out of range %r", name, day_value, hm)
                continue
            # Wall-clock times skipped by a DST jump resolve to the instant after it.
            start = start.astimezone(timezone.utc).astimezone(tz)

            yield PrayerEvent(
                uid=make_uid(name, start, location.lat, location.lon),
                start=start,
                tzid=tzid,
                title=name,
                location=location.label or None,
                description=describe(params),
                alarm=params.alarm,
            )
