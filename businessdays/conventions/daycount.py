"""
Day count convention implementations.

A day count convention turns the period between two dates into a fraction
of a year. When the end date precedes the start date the fraction is the
negated fraction of the swapped period.

References:
    - ISDA 2006 Definitions, Section 4.16
    - https://en.wikipedia.org/wiki/Day_count_convention
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Union

from dateutil.relativedelta import relativedelta

from businessdays.utils.date import (
    DateLike,
    PreconditionError,
    is_last_day_of_february,
    require_same_zone,
    to_date,
)

from .types import BoundedInterval

if TYPE_CHECKING:
    from .calendars import Calendar

logger = logging.getLogger(__name__)

BUSINESS_DAYS_PER_YEAR = 252


class DayCountConvention(Enum):
    """Supported day count conventions, valued by their display names."""

    THIRTY_A_360 = "30A/360"
    THIRTY_U_360 = "30U/360"
    THIRTY_E_360 = "30E/360"
    THIRTY_E_PLUS_360 = "30E+/360"
    THIRTY_G_360 = "30/360 German"
    ACTUAL_360 = "Actual/360"
    ACTUAL_365_FIXED = "Actual/365 Fixed"
    ACTUAL_366 = "Actual/366"
    ACTUAL_364 = "Actual/364"
    ACTUAL_365_25 = "Actual/365.25"
    ACTUAL_365L = "Actual/365L"
    ACTUAL_365A = "Actual/365A"
    NL_365 = "NL/365"
    ACTUAL_ACTUAL_ISDA = "Actual/Actual"
    ACTUAL_ACTUAL_AFB = "Actual/Actual AFB"
    BUSINESS_DAYS_252 = "BusinessDays/252"
    ONE_ONE = "1/1"

    def __str__(self) -> str:
        return self.value

    def year_fraction(
        self,
        start: DateLike,
        end: DateLike,
        calendar: Optional["Calendar"] = None,
        interval: BoundedInterval = BoundedInterval.RIGHT_OPEN,
    ) -> float:
        """Year fraction between ``start`` and ``end`` under this convention."""
        return year_fraction(start, end, self, calendar, interval)


# ── 30/360 family ─────────────────────────────────────────────────────────


def _thirty_360(y1: int, m1: int, d1: int, y2: int, m2: int, d2: int) -> float:
    return (360 * (y2 - y1) + 30 * (m2 - m1) + (d2 - d1)) / 360.0


def _thirty_a_360(start: date, end: date) -> float:
    """30/360 ISDA (bond basis)."""
    d1 = 30 if start.day == 31 else start.day
    d2 = 30 if (d1 == 30 and end.day == 31) else end.day
    return _thirty_360(start.year, start.month, d1, end.year, end.month, d2)


def _thirty_u_360(start: date, end: date) -> float:
    """30/360 US: end of February is treated as the 30th."""
    start_eof = is_last_day_of_february(start)
    d2 = 30 if (start_eof and is_last_day_of_february(end)) else end.day
    d1 = 30 if start_eof else start.day
    if d2 == 31 and d1 in (30, 31):
        d2 = 30
    if d1 == 31:
        d1 = 30
    return _thirty_360(start.year, start.month, d1, end.year, end.month, d2)


def _thirty_e_360(start: date, end: date) -> float:
    """30/360 ICMA (Eurobond basis)."""
    d1 = 30 if start.day == 31 else start.day
    d2 = 30 if end.day == 31 else end.day
    return _thirty_360(start.year, start.month, d1, end.year, end.month, d2)


def _thirty_e_plus_360(start: date, end: date) -> float:
    d1 = 30 if start.day == 31 else start.day
    if end.day == 31:
        end = end + timedelta(days=1)
    return _thirty_360(start.year, start.month, d1, end.year, end.month, end.day)


def _thirty_g_360(start: date, end: date) -> float:
    """30E/360 ISDA (German)."""
    d1 = 30 if (start.day == 31 or is_last_day_of_february(start)) else start.day
    d2 = 30 if (end.day == 31 or is_last_day_of_february(end)) else end.day
    return _thirty_360(start.year, start.month, d1, end.year, end.month, d2)


# ── Actual family ─────────────────────────────────────────────────────────


def _actual_over(denominator: float) -> Callable[[date, date], float]:
    def year_fraction_(start: date, end: date) -> float:
        return (end - start).days / denominator

    return year_fraction_


def _days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def _actual_365l(start: date, end: date) -> float:
    """Actual days over 366 if the end date falls in a leap year, else 365."""
    return (end - start).days / _days_in_year(end.year)


def _feb29_in_period(start: date, end: date) -> bool:
    if start.year not in (end.year, end.year - 1):
        raise PreconditionError(
            f"Period {start} - {end} must not span more than one year boundary"
        )
    if calendar.isleap(start.year):
        feb29 = date(start.year, 2, 29)
    elif calendar.isleap(end.year):
        feb29 = date(end.year, 2, 29)
    else:
        return False
    return start < feb29 <= end


def _actual_365a(start: date, end: date) -> float:
    days = (end - start).days
    return days / (366.0 if _feb29_in_period(start, end) else 365.0)


def _nl_365(start: date, end: date) -> float:
    """Actual/365 No Leap: February 29th is not counted."""
    days = (end - start).days
    if _feb29_in_period(start, end):
        days -= 1
    return days / 365.0


def _actual_actual_isda(start: date, end: date) -> float:
    if start.year == end.year:
        return (end - start).days / _days_in_year(start.year)
    first_stub = (date(start.year + 1, 1, 1) - start).days / _days_in_year(start.year)
    last_stub = (end - date(end.year, 1, 1)).days / _days_in_year(end.year)
    return first_stub + (end.year - start.year - 1) + last_stub


def _shift_years(dt: date, years: int) -> date:
    """Move ``dt`` by whole years; February 29th rolls to March 1st in a common year."""
    shifted = dt + relativedelta(years=years)
    if dt.month == 2 and dt.day == 29 and shifted.day == 28:
        return date(shifted.year, 3, 1)
    return shifted


def _actual_actual_afb(start: date, end: date) -> float:
    """
    Actual/Actual AFB (French).

    Whole years are counted backwards from the end date; the remaining
    period uses Actual/365L.
    """
    if end < _shift_years(start, 1):
        return _actual_365l(start, end)
    years = end.year - start.year
    return years + year_fraction(
        start, _shift_years(end, -years), DayCountConvention.ACTUAL_365L
    )


_FORMULAS: Dict[DayCountConvention, Callable[[date, date], float]] = {
    DayCountConvention.THIRTY_A_360: _thirty_a_360,
    DayCountConvention.THIRTY_U_360: _thirty_u_360,
    DayCountConvention.THIRTY_E_360: _thirty_e_360,
    DayCountConvention.THIRTY_E_PLUS_360: _thirty_e_plus_360,
    DayCountConvention.THIRTY_G_360: _thirty_g_360,
    DayCountConvention.ACTUAL_360: _actual_over(360.0),
    DayCountConvention.ACTUAL_365_FIXED: _actual_over(365.0),
    DayCountConvention.ACTUAL_366: _actual_over(366.0),
    DayCountConvention.ACTUAL_364: _actual_over(364.0),
    DayCountConvention.ACTUAL_365_25: _actual_over(365.25),
    DayCountConvention.ACTUAL_365L: _actual_365l,
    DayCountConvention.ACTUAL_365A: _actual_365a,
    DayCountConvention.NL_365: _nl_365,
    DayCountConvention.ACTUAL_ACTUAL_ISDA: _actual_actual_isda,
    DayCountConvention.ACTUAL_ACTUAL_AFB: _actual_actual_afb,
    DayCountConvention.ONE_ONE: lambda start, end: 1.0,
}


def _business_days_252(
    start: date,
    end: date,
    calendar_: Optional["Calendar"],
    interval: BoundedInterval,
) -> float:
    if calendar_ is None:
        raise PreconditionError("BusinessDays/252 requires a calendar")
    count = len(calendar_.business_days_in_range(start, end, interval))
    # a single business day spans no time
    if count <= 1:
        return 0.0
    return (count - 1) / float(BUSINESS_DAYS_PER_YEAR)


def year_fraction(
    start: DateLike,
    end: DateLike,
    convention: Union[DayCountConvention, str],
    calendar: Optional["Calendar"] = None,
    interval: BoundedInterval = BoundedInterval.RIGHT_OPEN,
) -> float:
    """
    Year fraction between two dates.

    Args:
        start: Start of the period
        end: End of the period
        convention: Day count convention, or one of its names/aliases
        calendar: Business day calendar, required for BusinessDays/252 only
        interval: Endpoints counted by BusinessDays/252

    Returns:
        Year fraction, negative when ``end`` precedes ``start``
    """
    require_same_zone(start, end)
    if isinstance(convention, str):
        convention = get_day_count_convention(convention)
    start_date, end_date = to_date(start), to_date(end)
    if end_date < start_date:
        logger.debug("Swapping start/end for %s: %s, %s", convention, start_date, end_date)
        return -year_fraction(end_date, start_date, convention, calendar, interval)
    if convention is DayCountConvention.BUSINESS_DAYS_252:
        return _business_days_252(start_date, end_date, calendar, interval)
    return _FORMULAS[convention](start_date, end_date)


# Convention registry, keyed by upper-case name
DAY_COUNT_CONVENTIONS: Dict[str, DayCountConvention] = {
    convention.value.upper(): convention for convention in DayCountConvention
}
DAY_COUNT_CONVENTIONS.update(
    {
        "30/360": DayCountConvention.THIRTY_A_360,
        "30/360 ISDA": DayCountConvention.THIRTY_A_360,
        "BOND BASIS": DayCountConvention.THIRTY_A_360,
        "30/360 US": DayCountConvention.THIRTY_U_360,
        "30E/360 ICMA": DayCountConvention.THIRTY_E_360,
        "EUROBOND BASIS": DayCountConvention.THIRTY_E_360,
        "30E/360 ISDA": DayCountConvention.THIRTY_G_360,
        "30G/360": DayCountConvention.THIRTY_G_360,
        "ACT/360": DayCountConvention.ACTUAL_360,
        "A/360": DayCountConvention.ACTUAL_360,
        "FRENCH": DayCountConvention.ACTUAL_360,
        "ACT/365F": DayCountConvention.ACTUAL_365_FIXED,
        "ACT/365 FIXED": DayCountConvention.ACTUAL_365_FIXED,
        "A/365F": DayCountConvention.ACTUAL_365_FIXED,
        "ENGLISH": DayCountConvention.ACTUAL_365_FIXED,
        "ACT/366": DayCountConvention.ACTUAL_366,
        "ACT/364": DayCountConvention.ACTUAL_364,
        "ACT/365.25": DayCountConvention.ACTUAL_365_25,
        "ACT/365L": DayCountConvention.ACTUAL_365L,
        "ISMA-YEAR": DayCountConvention.ACTUAL_365L,
        "ACT/365A": DayCountConvention.ACTUAL_365A,
        "NL365": DayCountConvention.NL_365,
        "ACT/365 NO LEAP": DayCountConvention.NL_365,
        "ACT/ACT": DayCountConvention.ACTUAL_ACTUAL_ISDA,
        "ACT/ACT ISDA": DayCountConvention.ACTUAL_ACTUAL_ISDA,
        "ACTUAL/ACTUAL ISDA": DayCountConvention.ACTUAL_ACTUAL_ISDA,
        "ACT/ACT AFB": DayCountConvention.ACTUAL_ACTUAL_AFB,
        "ACTUAL/ACTUAL FRENCH": DayCountConvention.ACTUAL_ACTUAL_AFB,
        "BUS/252": DayCountConvention.BUSINESS_DAYS_252,
        "BD/252": DayCountConvention.BUSINESS_DAYS_252,
        "ONE/ONE": DayCountConvention.ONE_ONE,
    }
)


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get day count convention by name or alias (case-insensitive)."""
    name_upper = name.strip().upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]


def register_day_count_alias(alias: str, convention: DayCountConvention) -> None:
    """Register an additional name for an existing convention."""
    key = alias.strip().upper()
    if key in DAY_COUNT_CONVENTIONS:
        raise ValueError(f"Day count '{alias}' already registered")
    DAY_COUNT_CONVENTIONS[key] = convention
