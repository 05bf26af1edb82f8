"""
Standalone business day functions using a configurable default calendar.
"""

import logging
from datetime import date
from typing import List, Optional, Union

from businessdays.conventions.calendars import Calendar, get_calendar
from businessdays.conventions.types import BoundedInterval, BusinessDayConvention
from businessdays.utils.date import DateLike

logger = logging.getLogger(__name__)

# Default market settings
_DEFAULT_CALENDAR: Optional[Calendar] = None  # Will be initialized on first use
_DEFAULT_CALENDAR_NAME = "USFEDERALGOVT"
_DEFAULT_BUSINESS_DAY_CONVENTION = BusinessDayConvention.MODIFIED_FOLLOWING


def _get_default_calendar() -> Calendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        _DEFAULT_CALENDAR = get_calendar(_DEFAULT_CALENDAR_NAME)
    return _DEFAULT_CALENDAR


def get_default_calendar() -> Calendar:
    return _get_default_calendar()


def set_default_calendar(calendar: Union[str, Calendar]) -> None:
    """Set the default calendar, by registry name or instance."""
    global _DEFAULT_CALENDAR
    if isinstance(calendar, str):
        calendar = get_calendar(calendar)
    logger.debug("Default calendar set to %s", calendar)
    _DEFAULT_CALENDAR = calendar


def adjust_business_date(
    dt: DateLike,
    convention: BusinessDayConvention = _DEFAULT_BUSINESS_DAY_CONVENTION,
    calendar: Calendar = None,
) -> Optional[date]:
    """Apply a business day convention using the default calendar unless one is given."""
    if calendar is None:
        calendar = _get_default_calendar()
    return calendar.apply_business_day_convention(convention, dt)


def add_business_days(
    dt: DateLike,
    n: int,
    calendar: Calendar = None,
    start_count_on_date: bool = False,
) -> Optional[date]:
    """Shift by ``n`` business days."""
    if calendar is None:
        calendar = _get_default_calendar()
    return calendar.add_business_days(dt, n, start_count_on_date)


def business_days_between(
    from_date: DateLike,
    to_date: DateLike,
    interval: BoundedInterval = BoundedInterval.CLOSED,
    calendar: Calendar = None,
) -> List[date]:
    """Business days between two dates."""
    if calendar is None:
        calendar = _get_default_calendar()
    return calendar.business_days_in_range(from_date, to_date, interval)
