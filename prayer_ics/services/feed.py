#!/usr/bin/env python3
"""Feed pipeline — months -> AlAdhan -> events -> VCALENDAR text."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from prayer_ics.config import settings
from prayer_ics.schemas.prayers import FeedContext, FeedParams, PrayerEvent
from prayer_ics.services.aladhan.client import day_timezone, fetch_month
from prayer_ics.services.calendar.document import build_calendar
from prayer_ics.services.calendar.events import synthesize_events
from prayer_ics.services.months import iter_months

logger = logging.getLogger(__name__)


def _known_zone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError):
        return False
    return True


async def collect_events(
    client: httpx.AsyncClient,
    params: FeedParams,
    context: FeedContext,
    now: datetime,
) -> list[PrayerEvent]:
    """
    Fetch months one after the other and synthesize their events.
    context.timezone is updated in month order before that month's events
    are built.
    """
    events: list[PrayerEvent] = []
    months = 0
    for token in iter_months(now, params.horizon):
        months += 1
        days = await fetch_month(client, params, token)
        if not days:
            continue

        tz = day_timezone(days[0])
        if tz and tz != context.timezone:
            if _known_zone(tz):
                context.timezone = tz
            else:
                logger.warning("Ignoring unknown timezone %r from AlAdhan", tz)

        events.extend(synthesize_events(days, params, context))

    logger.info(
        "Built %d events over %d months for %.4f,%.4f (tz=%s)",
        len(events), months, params.location.lat, params.location.lon, context.timezone,
    )
    return events


async def build_feed(
    client: httpx.AsyncClient,
    params: FeedParams,
    now: datetime | None = None,
) -> str:
    """Return the complete .ics body for params."""
    context = FeedContext(timezone=settings.default_timezone)
    events = await collect_events(client, params, context, now or datetime.now())
    return build_calendar(params.location, context.timezone, events)
