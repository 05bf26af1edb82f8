"""
Basic types and enums used across the calendar and day-count modules.
"""

from enum import Enum

from businessdays.utils.date import Weekday

__all__ = ["BoundedInterval", "BusinessDayConvention", "CalendarType", "Weekday"]


class BusinessDayConvention(Enum):
    """Business day adjustment rules."""

    FOLLOWING = "FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    MODIFIED_FOLLOWING_FORTNIGHTLY = "MODIFIED_FOLLOWING_FORTNIGHTLY"
    END_OF_MONTH = "END_OF_MONTH"


class BoundedInterval(Enum):
    """Which endpoints of a date range are included."""

    CLOSED = "CLOSED"
    OPEN = "OPEN"
    LEFT_OPEN = "LEFT_OPEN"
    RIGHT_OPEN = "RIGHT_OPEN"
    # aliases
    RIGHT_CLOSED = "LEFT_OPEN"
    LEFT_CLOSED = "RIGHT_OPEN"

    @property
    def includes_start(self) -> bool:
        return self in (BoundedInterval.CLOSED, BoundedInterval.RIGHT_OPEN)

    @property
    def includes_end(self) -> bool:
        return self in (BoundedInterval.CLOSED, BoundedInterval.LEFT_OPEN)


class CalendarType(Enum):
    """Predefined calendars."""

    NO_HOLIDAY_OR_WEEKEND = "calendar without holidays or weekends"
    WEEKENDS_ONLY = "calendars having weekends but no holidays"
    STATIC_HOLIDAYS = "calendar with static holidays"
    TARGET = "TARGET calendar"
    US_FEDERAL_GOVT = "U.S. Federal Government calendar"
    US_BOND_MARKET = "U.S. Bond Market calendar"
    US_NYSE = "New York Stock Exchange (NYSE) calendar"
