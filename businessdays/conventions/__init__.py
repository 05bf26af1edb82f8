"""Business day calendars, conventions and day counts."""

from .calendars import (
    CALENDARS,
    DEFAULT_SEARCH_WINDOW,
    Calendar,
    NoHolidayOrWeekendCalendar,
    StaticHolidaysCalendar,
    TargetCalendar,
    USBondMarketCalendar,
    USFederalGovtCalendar,
    USNYSECalendar,
    WeekendsOnlyCalendar,
    get_calendar,
    observed_holidays,
)
from .daycount import (
    DayCountConvention,
    get_day_count_convention,
    register_day_count_alias,
    year_fraction,
)
from .types import BoundedInterval, BusinessDayConvention, CalendarType, Weekday

__all__ = [
    "CALENDARS",
    "DEFAULT_SEARCH_WINDOW",
    "BoundedInterval",
    "BusinessDayConvention",
    "Calendar",
    "CalendarType",
    "DayCountConvention",
    "NoHolidayOrWeekendCalendar",
    "StaticHolidaysCalendar",
    "TargetCalendar",
    "USBondMarketCalendar",
    "USFederalGovtCalendar",
    "USNYSECalendar",
    "Weekday",
    "WeekendsOnlyCalendar",
    "get_calendar",
    "get_day_count_convention",
    "observed_holidays",
    "register_day_count_alias",
    "year_fraction",
]
