"""Calendar-date utilities."""

from .date import (
    MonthDay,
    PreconditionError,
    Weekday,
    cmp_date,
    cmp_date_strict,
    cmp_month_day,
    days_in_month,
    is_last_day_of_february,
    is_saturday_or_sunday,
    last_day_of_month,
    nth_weekday_of_month,
    to_date,
    weekday_of,
)

__all__ = [
    "MonthDay",
    "PreconditionError",
    "Weekday",
    "cmp_date",
    "cmp_date_strict",
    "cmp_month_day",
    "days_in_month",
    "is_last_day_of_february",
    "is_saturday_or_sunday",
    "last_day_of_month",
    "nth_weekday_of_month",
    "to_date",
    "weekday_of",
]
