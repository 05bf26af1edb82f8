"""Default-calendar helpers and cached business day queries."""

from .cache import (
    BusinessDays,
    add_business_days as add_cached_business_days,
    business_days_index,
    filter_range,
    next_business_day as next_cached_business_day,
)
from .date_calculator import (
    add_business_days,
    adjust_business_date,
    business_days_between,
    get_default_calendar,
    set_default_calendar,
)

__all__ = [
    "BusinessDays",
    "add_business_days",
    "add_cached_business_days",
    "adjust_business_date",
    "business_days_between",
    "business_days_index",
    "filter_range",
    "get_default_calendar",
    "next_cached_business_day",
    "set_default_calendar",
]
