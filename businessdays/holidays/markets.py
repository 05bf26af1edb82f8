"""
Holiday predicates of the market calendars: TARGET, U.S. NYSE,
U.S. Federal Government and U.S. Bond Market.

Each predicate returns True/False, or None when the date lies outside the
period the calendar can answer for.

References:
    - https://www.ecb.europa.eu/press/pr/date/2000/html/pr001214_4.en.html
    - https://www.nyse.com/markets/hours-calendars
    - https://s3.amazonaws.com/armstrongeconomics-wp/2013/07/NYSE-Closings.pdf
    - https://www.opm.gov/policy-data-oversight/pay-leave/federal-holidays/
    - https://www.sifma.org/resources/general/holiday-schedule/
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple

from businessdays.utils.date import (
    DateLike,
    Weekday,
    is_saturday_or_sunday,
    to_date,
    weekday_of,
)

from .rules import Holiday, is_holiday

TARGET_FIRST_YEAR = 1999
NYSE_FIRST_YEAR = 1960


# ── TARGET ────────────────────────────────────────────────────────────────


def is_weekend_target(dt: DateLike) -> Optional[bool]:
    """Saturdays and Sundays, from 1999; None before."""
    dt = to_date(dt)
    if dt.year < TARGET_FIRST_YEAR:
        return None
    return is_saturday_or_sunday(dt)


def is_holiday_target(dt: DateLike) -> Optional[bool]:
    """
    TARGET closing days (None before 1999):
    - New Year's Day and Christmas Day, since 1999
    - December 31st, in 1999 and 2001 only
    - Labour Day and Boxing Day, since 2000
    - Good Friday and Easter Monday, since 2000
    """
    dt = to_date(dt)
    if dt.year < TARGET_FIRST_YEAR:
        return None
    if is_holiday(dt, Holiday.NEW_YEARS_DAY):
        return True
    if is_holiday(dt, Holiday.CHRISTMAS_DAY):
        return True
    if is_holiday(dt, Holiday.DECEMBER_31):
        return dt.year in (1999, 2001)
    if is_holiday(dt, Holiday.LABOUR_DAY):
        return dt.year >= 2000
    if is_holiday(dt, Holiday.BOXING_DAY):
        return dt.year >= 2000
    if is_holiday(dt, (Holiday.EASTER_MONDAY, Holiday.GOOD_FRIDAY)):
        return dt.year >= 2000
    return False


# ── U.S. NYSE ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SpecialClosing:
    """One entry of the NYSE special closing table.

    ``result`` is what the predicate answers when ``applies`` matches:
    True for a closure, None when the exchange's status is not known.
    """

    description: str
    applies: Callable[[date], bool]
    result: Optional[bool] = True


def _on(year: int, month: int, *days: int) -> Callable[[date], bool]:
    return lambda dt: dt.year == year and dt.month == month and dt.day in days


def _between(year: int, month: int, first: int, last: int) -> Callable[[date], bool]:
    return lambda dt: dt.year == year and dt.month == month and first <= dt.day <= last


def _yearly(month: int, day: int, years: Callable[[int], bool]) -> Callable[[date], bool]:
    return lambda dt: dt.month == month and dt.day == day and years(dt.year)


def _election_day_closing(dt: date) -> bool:
    return is_holiday(dt, Holiday.US_NYSE_ELECTION_DAY) and (
        dt.year <= 1968 or dt.year in (1972, 1976, 1980)
    )


def _paperwork_crisis(dt: date) -> bool:
    # Wednesdays from June 12, 1968 to the end of that year
    return (
        dt.year == 1968
        and weekday_of(dt) == Weekday.WEDNESDAY
        and (dt.month, dt.day) >= (6, 12)
    )


# Evaluated in order; the first matching entry decides.
NYSE_SPECIAL_CLOSINGS: Tuple[SpecialClosing, ...] = (
    SpecialClosing("President George H.W. Bush's funeral", _on(2018, 12, 5)),
    SpecialClosing("Hurricane Sandy", _on(2012, 10, 29, 30)),
    SpecialClosing("President Ford's funeral", _on(2007, 1, 2)),
    SpecialClosing("President Reagan's funeral", _on(2004, 6, 11)),
    SpecialClosing("September 11, 2001", _between(2001, 9, 11, 14)),
    SpecialClosing("President Nixon's funeral", _on(1994, 4, 27)),
    SpecialClosing("Hurricane Gloria", _on(1985, 9, 27)),
    SpecialClosing("Election Day", _election_day_closing),
    SpecialClosing("1977 Blackout", _on(1977, 7, 14)),
    SpecialClosing("Funeral of former President Lyndon B. Johnson", _on(1973, 1, 25)),
    SpecialClosing("Funeral of former President Harry S. Truman", _on(1972, 12, 28)),
    SpecialClosing("National Day of Participation for the lunar exploration", _on(1969, 7, 21)),
    SpecialClosing("Eisenhower's funeral", _on(1969, 3, 31)),
    SpecialClosing("Heavy snow", _on(1969, 2, 10)),
    SpecialClosing("Day after Independence Day", _on(1968, 7, 5)),
    SpecialClosing("Paperwork Crisis", _paperwork_crisis),
    SpecialClosing("Mourning for Martin Luther King Jr.", _on(1968, 4, 9)),
    SpecialClosing(
        "Christmas Eve", _yearly(12, 24, lambda y: y in (1965, 1956, 1954, 1945, 1900))
    ),
    SpecialClosing("President Kennedy's funeral", _on(1963, 11, 25)),
    SpecialClosing("Day before Decoration Day", _on(1961, 5, 29)),
    SpecialClosing("Day after Christmas", _on(1958, 12, 26)),
    SpecialClosing("Lincoln's Birthday", _yearly(2, 12, lambda y: 1896 <= y <= 1953)),
    SpecialClosing("Columbus Day", _yearly(10, 12, lambda y: 1909 <= y <= 1953)),
    SpecialClosing(
        "Veterans' Day",
        _yearly(11, 11, lambda y: y in (1918, 1921) or 1934 <= y <= 1953),
    ),
    SpecialClosing("V-J Day, end of World War II", _on(1945, 8, 15, 16)),
    SpecialClosing("National banking holiday", _between(1933, 3, 6, 14)),
    SpecialClosing("Parade for Colonel Charles A. Lindbergh", _on(1927, 6, 13)),
    SpecialClosing("Death and funeral of President Warren G. Harding", _on(1923, 8, 3, 10)),
    SpecialClosing("Return of General John J. Pershing", _on(1919, 9, 10)),
    SpecialClosing("Parade of 77th Division", _on(1919, 5, 6)),
    SpecialClosing("Homecoming of 27th Division", _on(1919, 3, 25)),
    SpecialClosing("Armistice signed", _on(1918, 11, 11)),
    SpecialClosing("Draft registration day", _on(1918, 9, 12)),
    SpecialClosing("Draft registration day", _on(1917, 6, 5)),
    SpecialClosing("Heatless day", _on(1918, 1, 28)),
    SpecialClosing("Heatless day", _on(1918, 2, 4, 11)),
    # exact days of total or partial closure are not reliably known
    SpecialClosing("World War I", lambda dt: dt.year in (1914, 1915), result=None),
    SpecialClosing("Opening of new NYSE building", _on(1903, 4, 22)),
    SpecialClosing("Funeral of President William McKinley", _on(1901, 9, 19)),
    SpecialClosing("Day after Independence Day", _on(1901, 7, 5)),
    SpecialClosing("Admiral Dewey Celebration", _on(1899, 9, 29)),
    SpecialClosing("Monday before Independence Day", _on(1899, 7, 3)),
    SpecialClosing("Monday before Decoration Day", _on(1899, 5, 29)),
    SpecialClosing("Charter Day", _on(1898, 5, 4)),
    SpecialClosing("Grant's birthday", _on(1897, 4, 27)),
    SpecialClosing("Columbian Celebration", _on(1892, 10, 12, 21)),
    SpecialClosing("Columbian Celebration", _on(1893, 4, 27)),
    SpecialClosing("Centennial of Washington's inauguration", _on(1889, 4, 30)),
    SpecialClosing("Centennial of Washington's inauguration", _on(1889, 5, 1)),
    SpecialClosing("Friday after Thanksgiving Day", _on(1888, 11, 30)),
    SpecialClosing("Blizzard of 1888", _on(1888, 3, 12, 13)),
)


def _is_official_nyse_closing(dt: date) -> bool:
    year = dt.year
    if is_holiday(dt, Holiday.US_NYSE_NEW_YEARS_DAY_OBS):
        return True
    if is_holiday(dt, Holiday.US_MARTIN_LUTHER_KING_BIRTHDAY) and year > 1997:
        return True
    if is_holiday(dt, Holiday.US_WASHINGTON_BIRTHDAY) and year > 1970:
        return True
    if is_holiday(dt, Holiday.GOOD_FRIDAY) and year not in (1898, 1906, 1907):
        return True
    if is_holiday(dt, Holiday.US_MEMORIAL_DAY) and year > 1970:
        return True
    if is_holiday(dt, Holiday.US_INDEPENDENCE_DAY_OBS):
        return True
    if is_holiday(dt, Holiday.US_LABOR_DAY) and year > 1887:
        return True
    if is_holiday(dt, Holiday.US_THANKSGIVING_DAY):
        return True
    if is_holiday(dt, Holiday.US_CHRISTMAS_DAY_OBS):
        return True
    if is_holiday(dt, Holiday.US_JUNETEENTH_OBS) and year > 2022:
        return True
    return False


def is_holiday_us_nyse(dt: DateLike) -> Optional[bool]:
    """
    Holidays on the New York Stock Exchange (None before 1960).

    Official closings:
    - New Year's Day, moved to Monday if it is a Sunday
    - Independence Day, Christmas Day, and Juneteenth (since 2023),
      moved to Monday if Sunday or to Friday if Saturday
    - Martin Luther King's birthday (since 1998), Washington's Birthday
      (since 1971), Good Friday, Memorial Day (since 1971), Labor Day
      (since 1888), Thanksgiving Day

    Special closings are listed in ``NYSE_SPECIAL_CLOSINGS``.
    """
    dt = to_date(dt)
    if dt.year < NYSE_FIRST_YEAR:
        return None
    if _is_official_nyse_closing(dt):
        return True
    for closing in NYSE_SPECIAL_CLOSINGS:
        if closing.applies(dt):
            return closing.result
    return False


# ── U.S. Federal Government and U.S. Bond Market ──────────────────────────


def _is_holiday_us_fed_govt_or_bond_market(dt: date, federal_govt: bool) -> bool:
    # 9 shared holidays, each with its own effective year
    year = dt.year
    if is_holiday(dt, Holiday.US_MARTIN_LUTHER_KING_BIRTHDAY) and year > 1983:
        return True
    if is_holiday(dt, Holiday.US_WASHINGTON_BIRTHDAY) and year > 1879:
        return True
    if is_holiday(dt, Holiday.US_MEMORIAL_DAY) and year > 1968:
        return True
    if is_holiday(dt, Holiday.US_INDEPENDENCE_DAY_OBS) and year > 1870:
        return True
    if is_holiday(dt, Holiday.US_LABOR_DAY) and year > 1894:
        return True
    if is_holiday(dt, Holiday.US_COLUMBUS_DAY) and year > 1968:
        return True
    if is_holiday(dt, Holiday.US_VETERANS_DAY_OBS) and year > 1938:
        return True
    if is_holiday(dt, Holiday.US_THANKSGIVING_DAY) and year > 1941:
        return True
    if is_holiday(dt, Holiday.US_CHRISTMAS_DAY_OBS) and year > 1870:
        return True
    if federal_govt:
        if is_holiday(dt, Holiday.US_NEW_YEARS_DAY_OBS) and year > 1870:
            return True
        if is_holiday(dt, Holiday.US_INAUGURATION_DAY_OBS):
            return True
        if is_holiday(dt, Holiday.US_JUNETEENTH_OBS) and year > 2020:
            return True
    else:
        if is_holiday(dt, Holiday.US_NYSE_NEW_YEARS_DAY_OBS) and year > 1870:
            return True
        if is_holiday(dt, Holiday.GOOD_FRIDAY) and year > 1886:
            return True
        if is_holiday(dt, Holiday.US_JUNETEENTH_OBS) and year > 2021:
            return True
    return False


def is_holiday_us_federal_govt(dt: DateLike) -> Optional[bool]:
    """
    Holidays of the U.S. Federal Government.

    Moved to Monday if Sunday, or to Friday if Saturday: New Year's Day
    (since 1871), Christmas Day (since 1871), Independence Day (since 1871),
    Veterans' Day (since 1939), Juneteenth (since 2021).
    Moved to Monday if Sunday: Inauguration Day.
    Other holidays: Washington's Birthday (since 1880), Labor Day (since
    1895), Thanksgiving Day (since 1942), Memorial Day and Columbus Day
    (since 1969), Martin Luther King's birthday (since 1984).
    """
    return _is_holiday_us_fed_govt_or_bond_market(to_date(dt), federal_govt=True)


# Special closings of the U.S. Bond Market
BOND_MARKET_SPECIAL_CLOSINGS: Tuple[SpecialClosing, ...] = (
    SpecialClosing("President George H.W. Bush's funeral", _on(2018, 12, 5)),
)


def is_holiday_us_bond_market(dt: DateLike) -> Optional[bool]:
    """
    Holidays of the U.S. Bond Market.

    Those of the U.S. Federal Government except that Inauguration Day is not
    observed, Good Friday is (since 1887), New Year's Day is not moved to
    the previous Friday, Juneteenth is observed since 2022, and the special
    closings differ.
    """
    dt = to_date(dt)
    if _is_holiday_us_fed_govt_or_bond_market(dt, federal_govt=False):
        return True
    for closing in BOND_MARKET_SPECIAL_CLOSINGS:
        if closing.applies(dt):
            return closing.result
    return False
