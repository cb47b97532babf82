#!/usr/bin/env python3
"""iCalendar text rendering — header, VEVENT/VALARM blocks, line folding."""

from datetime import datetime, timezone
from typing import Iterable

from prayer_ics.schemas.prayers import Location, PrayerEvent
from prayer_ics.services.calendar.texts import texts

CRLF = "\r\n"
FOLD_WIDTH = 73


def fold(line: str) -> str:
    """Break line into FOLD_WIDTH chunks joined by CRLF + space."""
    if len(line) <= FOLD_WIDTH:
        return line
    chunks = [line[i:i + FOLD_WIDTH] for i in range(0, len(line), FOLD_WIDTH)]
    return (CRLF + " ").join(chunks)


def unfold(text: str) -> str:
    return text.replace(CRLF + " ", "")


def _local_stamp(dt: datetime) -> str:
    return dt.strftime("%Y%m%dT%H%M%S")


def _utc_stamp(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def display_name(location: Location) -> str:
    label = location.label or f"{location.lat:.3f},{location.lon:.3f}"
    return texts()["calendar_name"].format(label=label)


def render_event(event: PrayerEvent, stamp: datetime) -> str:
    """One VEVENT block (with optional VALARM), lines folded, no trailing CRLF."""
    lines = [
        "BEGIN:VEVENT",
        f"UID:{event.uid}",
        f"DTSTAMP:{_utc_stamp(stamp)}",
        f"DTSTART;TZID={event.tzid}:{_local_stamp(event.start)}",
        f"DTEND;TZID={event.tzid}:{_local_stamp(event.start)}",
        f"SUMMARY:{event.title}",
    ]
    if event.location:
        lines.append(f"LOCATION:{event.location}")
    if event.description:
        lines.append(f"DESCRIPTION:{event.description}")
    if event.alarm is not None:
        lines += [
            "BEGIN:VALARM",
            f"TRIGGER:-PT{event.alarm}M",
            "ACTION:DISPLAY",
            "DESCRIPTION:" + texts()["reminder"].format(title=event.title, minutes=event.alarm),
            "END:VALARM",
        ]
    lines.append("END:VEVENT")
    return CRLF.join(fold(line) for line in lines)


def render_header(name: str, tzid: str) -> str:
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{texts()['prodid']}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"NAME:{name}",
        f"X-WR-CALNAME:{name}",
        f"X-WR-TIMEZONE:{tzid}",
    ]
    return CRLF.join(fold(line) for line in lines)


def build_calendar(
    location: Location,
    tzid: str,
    events: Iterable[PrayerEvent],
    stamp: datetime | None = None,
) -> str:
    """
    Assemble the full VCALENDAR document.

    Events keep the order they are given in; tzid is the timezone the feed
    ended up with and only goes into the header.
    """
    stamp = stamp or datetime.now(timezone.utc)
    blocks = [render_header(display_name(location), tzid)]
    blocks.extend(render_event(event, stamp) for event in events)
    blocks.append("END:VCALENDAR")
    return CRLF.join(blocks)
