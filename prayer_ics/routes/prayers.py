#!/usr/bin/env python3
"""FastAPI router — prayer times .ics feed."""

import logging
from typing import Optional

from fastapi import APIRouter, Query, Request, Response

from prayer_ics.config import settings
from prayer_ics.deps import HttpClient
from prayer_ics.services.feed import build_feed
from prayer_ics.services.params import resolve_params

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["prayers"])

ICS_MEDIA_TYPE = "text/calendar; charset=utf-8"


# Every parameter is taken as a raw string: bad values fall back to defaults
# instead of producing a 422.
@router.get("/prayers", response_class=Response)
@router.get("/prayers.ics", response_class=Response, include_in_schema=False)
async def prayers_feed(
    request: Request,
    client: HttpClient,
    lat: Optional[str] = Query(None, description="Latitude; falls back to geo header, then Paris"),
    lon: Optional[str] = Query(None, description="Longitude; falls back to geo header, then Paris"),
    city: Optional[str] = Query(None, description="City label for display"),
    country: Optional[str] = Query(None, description="Country label for display"),
    method: Optional[str] = Query(None, description="AlAdhan calculation method (default 12)"),
    school: Optional[str] = Query(None, description="Juristic school: 0 Shafi, 1 Hanafi (default 0)"),
    latitudeAdjustmentMethod: Optional[str] = Query(None, description="High latitude rule (default 3)"),
    tune: Optional[str] = Query(None, description="Comma-separated minute offsets passed to AlAdhan"),
    alarm: Optional[str] = Query(None, description="Reminder minutes before each prayer"),
    horizon: Optional[str] = Query(None, description="Days ahead (default 365, max 400)"),
) -> Response:
    """Return an iCalendar feed of the five daily prayers."""
    raw = {
        "lat": lat,
        "lon": lon,
        "city": city,
        "country": country,
        "method": method,
        "school": school,
        "latitudeAdjustmentMethod": latitudeAdjustmentMethod,
        "tune": tune,
        "alarm": alarm,
        "horizon": horizon,
    }
    params = resolve_params(
        {k: v for k, v in raw.items() if v is not None},
        lat_header=request.headers.get(settings.geo_latitude_header),
        lon_header=request.headers.get(settings.geo_longitude_header),
    )
    logger.info(
        "Feed request lat=%s lon=%s horizon=%d alarm=%s",
        params.location.lat, params.location.lon, params.horizon, params.alarm,
    )

    body = await build_feed(client, params)
    return Response(
        content=body,
        media_type=ICS_MEDIA_TYPE,
        headers={"Cache-Control": settings.cache_control},
    )
