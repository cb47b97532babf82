#!/usr/bin/env python3
"""Shared fixtures: a fake AlAdhan calendar endpoint."""

import calendar
from datetime import datetime
from zoneinfo import ZoneInfo

import httpx
import pytest

TIMINGS = {
    "Fajr": "05:17 (GMT)",
    "Sunrise": "06:50 (GMT)",
    "Dhuhr": "12:05 (GMT)",
    "Asr": "14:40 (GMT)",
    "Sunset": "17:20 (GMT)",
    "Maghrib": "17:20 (GMT)",
    "Isha": "18:55 (GMT)",
}


def iso_timings(year: int, month: int, day: int, tz: str) -> dict:
    """TIMINGS as AlAdhan sends them with iso8601=true."""
    zone = ZoneInfo(tz)
    out = {}
    for name, value in TIMINGS.items():
        hour, minute = (int(p) for p in value.split(" ")[0].split(":"))
        out[name] = datetime(year, month, day, hour, minute, tzinfo=zone).isoformat()
    return out


def month_payload(year: int, month: int, tz: str = "Europe/London", iso: bool = False) -> dict:
    """AlAdhan-shaped /calendar body for a whole month."""
    _, ndays = calendar.monthrange(year, month)
    return {
        "code": 200,
        "status": "OK",
        "data": [
            {
                "timings": iso_timings(year, month, day, tz) if iso else dict(TIMINGS),
                "date": {"gregorian": {"date": f"{year:04d}-{month:02d}-{day:02d}"}},
                "meta": {"timezone": tz},
            }
            for day in range(1, ndays + 1)
        ],
    }


class FakeAladhan:
    """Records requests; answers with month_payload unless a month is set to fail."""

    def __init__(self, tz: str = "Europe/London", iso: bool = False):
        self.tz = tz
        self.iso = iso
        self.requests: list[httpx.Request] = []
        self.failing: set[tuple[int, int]] = set()
        self.timezones: dict[tuple[int, int], str] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        year = int(request.url.params["year"])
        month = int(request.url.params["month"])
        if (year, month) in self.failing:
            return httpx.Response(503, text="upstream down")
        tz = self.timezones.get((year, month), self.tz)
        return httpx.Response(200, json=month_payload(year, month, tz, self.iso))


@pytest.fixture
def fake_aladhan() -> FakeAladhan:
    return FakeAladhan()


@pytest.fixture
def fake_aladhan_iso() -> FakeAladhan:
    return FakeAladhan(iso=True)
