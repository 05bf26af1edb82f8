"""Calendar-date helpers shared by the holiday rules, calendars and day counts.

Every routine here works on the calendar-date projection of its arguments:
hours, minutes and seconds are ignored. Two operands are only comparable
when they share the same time-zone context.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime
from enum import IntEnum
from typing import NamedTuple, Optional, Union

from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime, Timestamp, str]


class PreconditionError(ValueError):
    """Raised when a caller breaks the contract of a routine (programming error)."""


class Weekday(IntEnum):
    """Days of the week, numbered like `date.weekday()`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


class MonthDay(NamedTuple):
    """A fixed annual date such as (12, 25).

    No validity check is performed: ``MonthDay(2, 30)`` can be built, so
    callers must not construct dates that never exist.
    """

    month: int
    day: int


def to_date(date_like: DateLike) -> date:
    """
    Project a date-like value onto a calendar date.
    Accepts date, datetime, pandas Timestamp and 'YYYY-MM-DD' / 'YYYYMMDD' strings.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def _zone(dt):
    if isinstance(dt, datetime):
        return dt.tzinfo
    return None


def require_same_zone(dt1, dt2) -> None:
    """Raise PreconditionError unless both operands share a time-zone context."""
    if _zone(dt1) != _zone(dt2):
        raise PreconditionError(
            f"Dates must share the same time zone: {_zone(dt1)!r} != {_zone(dt2)!r}"
        )


def cmp_date(dt1: DateLike, dt2: DateLike) -> int:
    """Compare two dates ignoring intraday information.

    Returns -1, 0 or 1. Both operands must share the same time zone.
    """
    require_same_zone(dt1, dt2)
    d1, d2 = to_date(dt1), to_date(dt2)
    if d1 == d2:
        return 0
    return -1 if d1 < d2 else 1


def cmp_date_strict(dt1: DateLike, dt2: DateLike) -> int:
    """Like :func:`cmp_date` but ties collapse to 1.

    Sorting checks with this comparator accept strictly increasing sequences only.
    """
    return -1 if cmp_date(dt1, dt2) == -1 else 1


def cmp_month_day(md1, md2) -> int:
    """Compare two (month, day) pairs ignoring the year, month first."""
    m1, d1 = _as_month_day(md1)
    m2, d2 = _as_month_day(md2)
    if (m1, d1) == (m2, d2):
        return 0
    return -1 if (m1, d1) < (m2, d2) else 1


def _as_month_day(value) -> MonthDay:
    if isinstance(value, (date, Timestamp)):
        dt = to_date(value)
        return MonthDay(dt.month, dt.day)
    return MonthDay(*value)


def is_strictly_ascending(dates) -> bool:
    """True if every date is strictly after the previous one."""
    return all(cmp_date_strict(a, b) == -1 for a, b in zip(dates, dates[1:]))


def weekday_of(dt: DateLike) -> Weekday:
    """Day of the week, Monday = 0 ... Sunday = 6."""
    return Weekday(to_date(dt).weekday())


def is_saturday_or_sunday(dt: DateLike) -> bool:
    return weekday_of(dt) >= 5


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def last_day_of_month(dt: DateLike) -> date:
    """Last calendar day of the month containing ``dt``."""
    dt = to_date(dt)
    return date(dt.year, dt.month, days_in_month(dt.year, dt.month))


def is_last_day_of_february(dt: DateLike) -> bool:
    """True on Feb 29 in leap years and Feb 28 otherwise."""
    dt = to_date(dt)
    if dt.month != 2:
        return False
    return dt.day == (29 if calendar.isleap(dt.year) else 28)


def nth_weekday_of_month(
    year: int, month: int, weekday: int, nth_occurrence: int
) -> Optional[int]:
    """
    Day of month of the n-th ``weekday`` in the given month.

    Counting starts at the beginning of the month when ``nth_occurrence > 0``
    and at its end when ``nth_occurrence < 0``. Returns None if the month
    has fewer occurrences than requested.

    Args:
        year: Calendar year
        month: Month number (1-12)
        weekday: Day of the week (Monday = 0)
        nth_occurrence: Rank of the occurrence, 0 < abs(n) < 6

    Returns:
        Day of month, or None when not found
    """
    if not 0 < abs(nth_occurrence) < 6:
        raise PreconditionError(
            f"nth_occurrence must satisfy 0 < abs(n) < 6; got {nth_occurrence}"
        )
    n_days = days_in_month(year, month)
    if nth_occurrence > 0:
        delta = weekday - date(year, month, 1).weekday()
        if delta >= 0:
            monthday = delta + 7 * (nth_occurrence - 1) + 1
        else:
            monthday = delta + 7 * nth_occurrence + 1
    else:
        delta = date(year, month, n_days).weekday() - weekday
        if delta >= 0:
            monthday = n_days - delta - 7 * (-nth_occurrence - 1)
        else:
            monthday = n_days - delta - 7 * -nth_occurrence
    if 1 <= monthday <= n_days:
        return monthday
    return None
