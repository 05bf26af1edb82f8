"""Gregorian Easter Sunday and the movable feasts derived from it."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from dateutil.easter import EASTER_WESTERN, easter

# First full year of the Gregorian calendar
GREGORIAN_FIRST_YEAR = 1583

# Offsets in days from Easter Sunday
EASTER_MONDAY_OFFSET = 1
GOOD_FRIDAY_OFFSET = -2
ASCENSION_OFFSET = 39
WHIT_SUNDAY_OFFSET = 49
WHIT_MONDAY_OFFSET = 50


def gregorian_easter_sunday(year: int) -> Optional[date]:
    """Return Gregorian Easter Sunday of ``year``, or None before 1583."""
    if year < GREGORIAN_FIRST_YEAR:
        return None
    return easter(year, EASTER_WESTERN)


def easter_offset(year: int, days: int) -> Optional[date]:
    """Return the date ``days`` after Easter Sunday of ``year`` (None before 1583)."""
    sunday = gregorian_easter_sunday(year)
    if sunday is None:
        return None
    return sunday + timedelta(days=days)


def easter_monday(year: int) -> Optional[date]:
    return easter_offset(year, EASTER_MONDAY_OFFSET)


def good_friday(year: int) -> Optional[date]:
    return easter_offset(year, GOOD_FRIDAY_OFFSET)


def ascension(year: int) -> Optional[date]:
    return easter_offset(year, ASCENSION_OFFSET)


def whit_sunday(year: int) -> Optional[date]:
    """Pentecost."""
    return easter_offset(year, WHIT_SUNDAY_OFFSET)


def whit_monday(year: int) -> Optional[date]:
    return easter_offset(year, WHIT_MONDAY_OFFSET)
