#!/usr/bin/env python3
"""Display strings for the feed, selected by settings.feed_language."""

from prayer_ics.config import settings

TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "prodid": "-//Prayer ICS//aladhan.com//EN",
        "calendar_name": "Prayer times - {label}",
        "description": "Calculation: AlAdhan (method={method}, school={school}).",
        "reminder": "{title} in {minutes} min",
    },
    "fr": {
        "prodid": "-//Prayer ICS//aladhan.com//FR",
        "calendar_name": "Horaires de prière – {label}",
        "description": "Calcul: AlAdhan (method={method}, school={school}).",
        "reminder": "{title} dans {minutes} min",
    },
}


def texts() -> dict[str, str]:
    """Strings for the configured language; unknown languages fall back to English."""
    return TEXTS.get(settings.feed_language.lower(), TEXTS["en"])
