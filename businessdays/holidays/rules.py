"""
Holiday rules: fixed-date holidays, U.S. weekend observance, n-th weekday
holidays and the movable feasts.

Every holiday kind has a resolver mapping a year to the date of that
holiday. Resolvers return None only where the underlying rule itself is
partial (Easter before 1583, Inauguration Day outside inauguration years).
"""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Union

from businessdays.utils.date import (
    DateLike,
    MonthDay,
    Weekday,
    nth_weekday_of_month,
    to_date,
    weekday_of,
)

from . import easter

HolidayResolver = Callable[[int], Optional[date]]


class Holiday(Enum):
    """Holiday kinds natively supported by the rule library."""

    # Easter and related feasts
    ASCENSION = "Ascension"
    EASTER_MONDAY = "Easter Monday"
    GOOD_FRIDAY = "Good Friday"
    EASTER_SUNDAY = "Easter Sunday"
    WHIT_MONDAY = "Whit Monday"
    WHIT_SUNDAY = "Whit Sunday"

    BOXING_DAY = "Boxing Day"
    CHRISTMAS_DAY = "Christmas Day"
    DECEMBER_31 = "December 31st"
    LABOUR_DAY = "Labour Day"
    NEW_YEARS_DAY = "New Year's Day"
    US_CHRISTMAS_DAY_OBS = "U.S. Christmas Day (observed)"
    US_COLUMBUS_DAY = "U.S. Columbus Day"
    US_INAUGURATION_DAY = "U.S. Inauguration Day"
    US_INAUGURATION_DAY_OBS = "U.S. Inauguration Day (observed)"
    US_INDEPENDENCE_DAY = "U.S. Independence Day"
    US_INDEPENDENCE_DAY_OBS = "U.S. Independence Day (observed)"
    US_JUNETEENTH = "U.S. Juneteenth National Independence Day"
    US_JUNETEENTH_OBS = "U.S. Juneteenth National Independence Day (observed)"
    US_LABOR_DAY = "U.S. Labor Day"
    US_MARTIN_LUTHER_KING_BIRTHDAY = "U.S. Birthday of Martin Luther King"
    US_MEMORIAL_DAY = "U.S. Memorial Day"
    US_NEW_YEARS_DAY_OBS = "U.S. New Year's Day (observed)"
    US_NYSE_ELECTION_DAY = "U.S. NYSE Election Day"
    US_NYSE_NEW_YEARS_DAY_OBS = "U.S. NYSE New Year's Day (observed)"
    US_THANKSGIVING_DAY = "U.S. Thanksgiving Day"
    US_VETERANS_DAY = "U.S. Veterans' Day"
    US_VETERANS_DAY_OBS = "U.S. Veterans' Day (observed)"
    US_WASHINGTON_BIRTHDAY = "U.S. Washington's Birthday"

    @property
    def is_easter_related(self) -> bool:
        return self in EASTER_OFFSETS


# Offsets in days from Easter Sunday
EASTER_OFFSETS: Dict[Holiday, int] = {
    Holiday.EASTER_SUNDAY: 0,
    Holiday.EASTER_MONDAY: easter.EASTER_MONDAY_OFFSET,
    Holiday.GOOD_FRIDAY: easter.GOOD_FRIDAY_OFFSET,
    Holiday.ASCENSION: easter.ASCENSION_OFFSET,
    Holiday.WHIT_SUNDAY: easter.WHIT_SUNDAY_OFFSET,
    Holiday.WHIT_MONDAY: easter.WHIT_MONDAY_OFFSET,
}

# Fixed annual dates
NEW_YEARS_DAY = MonthDay(1, 1)
CHRISTMAS_DAY = MonthDay(12, 25)
US_JUNETEENTH = MonthDay(6, 19)
US_INDEPENDENCE_DAY = MonthDay(7, 4)
US_VETERANS_DAY = MonthDay(11, 11)
LABOUR_DAY = MonthDay(5, 1)
BOXING_DAY = MonthDay(12, 26)
DECEMBER_31 = MonthDay(12, 31)


# ── U.S. observance rules ─────────────────────────────────────────────────


def adjust_us_sunday_rule(dt: DateLike) -> date:
    """Move a Sunday to the following Monday; other days are unchanged."""
    dt = to_date(dt)
    if weekday_of(dt) == Weekday.SUNDAY:
        return dt + timedelta(days=1)
    return dt


def adjust_us_rule(dt: DateLike) -> date:
    """Move a Sunday to the following Monday and a Saturday to the previous Friday."""
    dt = to_date(dt)
    weekday = weekday_of(dt)
    if weekday == Weekday.SUNDAY:
        return dt + timedelta(days=1)
    if weekday == Weekday.SATURDAY:
        return dt - timedelta(days=1)
    return dt


def _fixed(month_day: MonthDay) -> Callable[[int], date]:
    def resolver(year: int) -> date:
        return date(year, month_day.month, month_day.day)

    return resolver


def _nth_weekday(month: int, weekday: Weekday, nth_occurrence: int) -> Callable[[int], date]:
    def resolver(year: int) -> date:
        monthday = nth_weekday_of_month(year, month, weekday, nth_occurrence)
        # every month has at least four of each weekday
        assert monthday is not None
        return date(year, month, monthday)

    return resolver


# ── Public holidays ───────────────────────────────────────────────────────

holiday_new_years_day = _fixed(NEW_YEARS_DAY)
holiday_christmas_day = _fixed(CHRISTMAS_DAY)
holiday_us_juneteenth = _fixed(US_JUNETEENTH)
holiday_us_independence_day = _fixed(US_INDEPENDENCE_DAY)
holiday_us_veterans_day = _fixed(US_VETERANS_DAY)
holiday_labour_day = _fixed(LABOUR_DAY)
holiday_boxing_day = _fixed(BOXING_DAY)
holiday_december_31 = _fixed(DECEMBER_31)

holiday_us_martin_luther_king_birthday = _nth_weekday(1, Weekday.MONDAY, 3)
holiday_us_washington_birthday = _nth_weekday(2, Weekday.MONDAY, 3)
holiday_us_memorial_day = _nth_weekday(5, Weekday.MONDAY, -1)
holiday_us_labor_day = _nth_weekday(9, Weekday.MONDAY, 1)
holiday_us_columbus_day = _nth_weekday(10, Weekday.MONDAY, 2)
holiday_us_thanksgiving_day = _nth_weekday(11, Weekday.THURSDAY, 4)
_first_monday_of_november = _nth_weekday(11, Weekday.MONDAY, 1)


def holiday_us_new_years_day_obs(year: int) -> date:
    """January 1st under the U.S. rule: may fall on Friday, December 31 of the previous year."""
    return adjust_us_rule(holiday_new_years_day(year))


def holiday_us_nyse_new_years_day_obs(year: int) -> date:
    """January 1st, moved to Monday January 2nd when it is a Sunday."""
    return adjust_us_sunday_rule(holiday_new_years_day(year))


def holiday_us_christmas_day_obs(year: int) -> date:
    return adjust_us_rule(holiday_christmas_day(year))


def holiday_us_juneteenth_obs(year: int) -> date:
    return adjust_us_rule(holiday_us_juneteenth(year))


def holiday_us_independence_day_obs(year: int) -> date:
    return adjust_us_rule(holiday_us_independence_day(year))


def holiday_us_veterans_day_obs(year: int) -> date:
    return adjust_us_rule(holiday_us_veterans_day(year))


def holiday_us_nyse_election_day(year: int) -> date:
    """The Tuesday next after the first Monday in November (every year)."""
    return _first_monday_of_november(year) + timedelta(days=1)


def holiday_us_inauguration_day(year: int) -> Optional[date]:
    """
    U.S. Inauguration Day:
    - April 30 in 1789
    - March 4 every inauguration year from 1793 to 1933
    - January 20 every inauguration year since 1937
    - None for all other years
    """
    if year < 1789:
        return None
    if year == 1789:
        return date(1789, 4, 30)
    if year <= 1933:
        if (year - 1789) % 4 != 0:
            return None
        return date(year, 3, 4)
    if (year - 1933) % 4 != 0:
        return None
    return date(year, 1, 20)


def holiday_us_inauguration_day_obs(year: int) -> Optional[date]:
    """Inauguration Day, moved to Monday when it is a Sunday."""
    inauguration = holiday_us_inauguration_day(year)
    if inauguration is None:
        return None
    return adjust_us_sunday_rule(inauguration)


def gregorian_easter_sunday_and_co(year: int) -> Dict[Holiday, date]:
    """Easter Sunday and its related feasts; empty before 1583."""
    sunday = easter.gregorian_easter_sunday(year)
    if sunday is None:
        return {}
    return {kind: sunday + timedelta(days=offset) for kind, offset in EASTER_OFFSETS.items()}


holiday_easter_sunday = easter.gregorian_easter_sunday
holiday_easter_monday = easter.easter_monday
holiday_good_friday = easter.good_friday
holiday_ascension = easter.ascension
holiday_whit_sunday = easter.whit_sunday
holiday_whit_monday = easter.whit_monday


_RESOLVERS: Dict[Holiday, HolidayResolver] = {
    Holiday.NEW_YEARS_DAY: holiday_new_years_day,
    Holiday.US_NEW_YEARS_DAY_OBS: holiday_us_new_years_day_obs,
    Holiday.US_NYSE_NEW_YEARS_DAY_OBS: holiday_us_nyse_new_years_day_obs,
    Holiday.CHRISTMAS_DAY: holiday_christmas_day,
    Holiday.US_CHRISTMAS_DAY_OBS: holiday_us_christmas_day_obs,
    Holiday.US_JUNETEENTH: holiday_us_juneteenth,
    Holiday.US_JUNETEENTH_OBS: holiday_us_juneteenth_obs,
    Holiday.US_INDEPENDENCE_DAY: holiday_us_independence_day,
    Holiday.US_INDEPENDENCE_DAY_OBS: holiday_us_independence_day_obs,
    Holiday.US_VETERANS_DAY: holiday_us_veterans_day,
    Holiday.US_VETERANS_DAY_OBS: holiday_us_veterans_day_obs,
    Holiday.US_INAUGURATION_DAY: holiday_us_inauguration_day,
    Holiday.US_INAUGURATION_DAY_OBS: holiday_us_inauguration_day_obs,
    Holiday.LABOUR_DAY: holiday_labour_day,
    Holiday.BOXING_DAY: holiday_boxing_day,
    Holiday.DECEMBER_31: holiday_december_31,
    Holiday.US_MARTIN_LUTHER_KING_BIRTHDAY: holiday_us_martin_luther_king_birthday,
    Holiday.US_WASHINGTON_BIRTHDAY: holiday_us_washington_birthday,
    Holiday.US_MEMORIAL_DAY: holiday_us_memorial_day,
    Holiday.US_LABOR_DAY: holiday_us_labor_day,
    Holiday.US_COLUMBUS_DAY: holiday_us_columbus_day,
    Holiday.US_THANKSGIVING_DAY: holiday_us_thanksgiving_day,
    Holiday.US_NYSE_ELECTION_DAY: holiday_us_nyse_election_day,
    Holiday.EASTER_SUNDAY: holiday_easter_sunday,
    Holiday.EASTER_MONDAY: holiday_easter_monday,
    Holiday.GOOD_FRIDAY: holiday_good_friday,
    Holiday.ASCENSION: holiday_ascension,
    Holiday.WHIT_SUNDAY: holiday_whit_sunday,
    Holiday.WHIT_MONDAY: holiday_whit_monday,
}


def resolve_holiday(year: int, holiday: Holiday) -> Optional[date]:
    """Return the date of ``holiday`` in ``year`` (None where the rule is partial)."""
    try:
        resolver = _RESOLVERS[holiday]
    except KeyError as exc:
        raise ValueError(f"Unsupported holiday: {holiday}") from exc
    return resolver(year)


def is_holiday(dt: DateLike, holidays: Union[Holiday, Iterable[Holiday]]) -> bool:
    """
    Test whether ``dt`` is one of the given holidays.

    The U.S. observed New Year's Day of the following year is also checked,
    since it falls on December 31st when January 1st is a Saturday.
    """
    dt = to_date(dt)
    if isinstance(holidays, Holiday):
        holidays = (holidays,)
    for holiday in holidays:
        if resolve_holiday(dt.year, holiday) == dt:
            return True
        if (
            holiday is Holiday.US_NEW_YEARS_DAY_OBS
            and resolve_holiday(dt.year + 1, holiday) == dt
        ):
            return True
    return False
