"""
Calendar-aware date arithmetic for financial applications: holidays,
business days, business day conventions and day count fractions.
"""

from businessdays.conventions import (
    BoundedInterval,
    BusinessDayConvention,
    Calendar,
    CalendarType,
    DayCountConvention,
    NoHolidayOrWeekendCalendar,
    StaticHolidaysCalendar,
    TargetCalendar,
    USBondMarketCalendar,
    USFederalGovtCalendar,
    USNYSECalendar,
    WeekendsOnlyCalendar,
    get_calendar,
    get_day_count_convention,
    observed_holidays,
    year_fraction,
)
from businessdays.holidays import Holiday, gregorian_easter_sunday, resolve_holiday
from businessdays.utils.date import MonthDay, PreconditionError, Weekday, to_date

__version__ = "0.1.0"

__all__ = [
    "BoundedInterval",
    "BusinessDayConvention",
    "Calendar",
    "CalendarType",
    "DayCountConvention",
    "Holiday",
    "MonthDay",
    "NoHolidayOrWeekendCalendar",
    "PreconditionError",
    "StaticHolidaysCalendar",
    "TargetCalendar",
    "USBondMarketCalendar",
    "USFederalGovtCalendar",
    "USNYSECalendar",
    "Weekday",
    "WeekendsOnlyCalendar",
    "get_calendar",
    "get_day_count_convention",
    "gregorian_easter_sunday",
    "observed_holidays",
    "resolve_holiday",
    "to_date",
    "year_fraction",
]
