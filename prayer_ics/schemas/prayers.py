from datetime import datetime
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

# Order matters: events within a day are emitted in this order.
PRAYER_NAMES = ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha")


class Location(BaseModel):
    lat: float
    lon: float
    city: str = ""
    country: str = ""

    @property
    def label(self) -> str:
        """Comma-joined city/country, empty when neither is set."""
        return ", ".join(part for part in (self.city, self.country) if part)


class FeedParams(BaseModel):
    """Resolved query configuration for one feed request."""
    location: Location
    method: str = "12"
    school: str = "0"
    latitude_adjustment_method: str = "3"
    tune: str = ""
    horizon: int = 365
    alarm: int | None = None     # minutes before start; None = no VALARM


class MonthToken(NamedTuple):
    year: int
    month: int


class PrayerEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    uid: str
    start: datetime
    tzid: str                    # IANA zone active when the event was built
    title: str
    location: str | None = None
    description: str | None = None
    alarm: int | None = None


class FeedContext(BaseModel):
    """
    Mutable state threaded through the sequential month loop.
    The timezone is last-writer-wins: each month reporting one replaces it
    for the events built afterwards and for the calendar header.
    """
    timezone: str
