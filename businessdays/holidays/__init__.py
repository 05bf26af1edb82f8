"""Holiday rule library and market holiday predicates."""

from .easter import gregorian_easter_sunday
from .markets import (
    NYSE_SPECIAL_CLOSINGS,
    SpecialClosing,
    is_holiday_target,
    is_holiday_us_bond_market,
    is_holiday_us_federal_govt,
    is_holiday_us_nyse,
    is_weekend_target,
)
from .rules import (
    Holiday,
    adjust_us_rule,
    adjust_us_sunday_rule,
    gregorian_easter_sunday_and_co,
    is_holiday,
    resolve_holiday,
)

__all__ = [
    "Holiday",
    "NYSE_SPECIAL_CLOSINGS",
    "SpecialClosing",
    "adjust_us_rule",
    "adjust_us_sunday_rule",
    "gregorian_easter_sunday",
    "gregorian_easter_sunday_and_co",
    "is_holiday",
    "is_holiday_target",
    "is_holiday_us_bond_market",
    "is_holiday_us_federal_govt",
    "is_holiday_us_nyse",
    "is_weekend_target",
    "resolve_holiday",
]
