#!/usr/bin/env python3
"""AlAdhan API client — monthly calendar calls and payload extraction."""

import logging
from typing import Any

import httpx

from prayer_ics.config import settings
from prayer_ics.schemas.prayers import FeedParams, MonthToken

logger = logging.getLogger(__name__)


def _headers() -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }


def build_month_params(params: FeedParams, token: MonthToken) -> dict[str, Any]:
    """Query string for one /calendar call."""
    query: dict[str, Any] = {
        "latitude": f"{params.location.lat:.6f}",
        "longitude": f"{params.location.lon:.6f}",
        "method": params.method,
        "school": params.school,
        "latitudeAdjustmentMethod": params.latitude_adjustment_method,
        "month": token.month,
        "year": token.year,
        "iso8601": "true",
    }
    if params.tune:
        query["tune"] = params.tune
    return query


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------

def day_timezone(day: dict[str, Any]) -> str | None:
    """Timezone name reported in a day's meta block, if any."""
    return (day.get("meta") or {}).get("timezone") or None


def day_date(day: dict[str, Any]) -> str | None:
    """Gregorian date string of a day record, if any."""
    return ((day.get("date") or {}).get("gregorian") or {}).get("date") or None


# ---------------------------------------------------------------------------
# API calls
# ---------------------------------------------------------------------------

async def fetch_month(
    client: httpx.AsyncClient,
    params: FeedParams,
    token: MonthToken,
) -> list[dict[str, Any]]:
    """
    Fetch one month of timings. Any failure yields an empty list so the
    caller can move on to the next month.
    """
    try:
        r = await client.get(
            f"{settings.aladhan_base_url}/calendar",
            params=build_month_params(params, token),
            headers=_headers(),
        )
    except httpx.HTTPError as e:
        logger.warning("AlAdhan %04d-%02d request failed: %s", token.year, token.month, e)
        return []

    if not r.is_success:
        logger.warning(
            "AlAdhan %04d-%02d returned HTTP %s, skipping month",
            token.year, token.month, r.status_code,
        )
        return []

    try:
        payload = r.json()
    except ValueError as e:
        logger.warning("AlAdhan %04d-%02d sent a non-JSON body: %s", token.year, token.month, e)
        return []

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, list) or not data:
        logger.warning("AlAdhan %04d-%02d returned no days", token.year, token.month)
        return []
    return [d for d in data if isinstance(d, dict)]
