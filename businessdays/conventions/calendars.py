"""
Calendar implementations.

A calendar answers whether a date is a weekend day, a holiday or a business
day, and builds on those predicates to search, shift and enumerate business
days. Predicates return None when the calendar cannot answer for a date
(e.g. TARGET before 1999).
"""

import logging
from abc import ABC, abstractmethod
from bisect import bisect_left
from calendar import day_name, month_name
from datetime import date, timedelta
from typing import FrozenSet, Iterable, List, Optional, Union

from businessdays.holidays.markets import (
    is_holiday_target,
    is_holiday_us_bond_market,
    is_holiday_us_federal_govt,
    is_holiday_us_nyse,
    is_weekend_target,
)
from businessdays.utils.date import (
    DateLike,
    MonthDay,
    PreconditionError,
    Weekday,
    days_in_month,
    last_day_of_month,
    require_same_zone,
    to_date,
    weekday_of,
)

from .types import BoundedInterval, BusinessDayConvention, CalendarType

logger = logging.getLogger(__name__)

# Calendar days scanned by a business day search before giving up
DEFAULT_SEARCH_WINDOW = 60

SATURDAY_SUNDAY: FrozenSet[Weekday] = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})

_ONE_DAY = timedelta(days=1)


def _status(value: Optional[bool], label: str) -> str:
    if value is None:
        return f"{label}?"
    return label if value else f"not a {label}"


def _date_range(from_date: date, to_date_: date) -> Iterable[date]:
    current = from_date
    while current <= to_date_:
        yield current
        current += _ONE_DAY


def adjust_range(from_date: date, to_date_: date, interval: BoundedInterval):
    """Drop the endpoints ``interval`` excludes; the result may be empty (start > end)."""
    if not interval.includes_start:
        from_date += _ONE_DAY
    if not interval.includes_end:
        to_date_ -= _ONE_DAY
    return from_date, to_date_


class Calendar(ABC):
    """Base calendar class for business day calculations."""

    calendar_type: CalendarType

    def __init__(
        self,
        description: Optional[str] = None,
        weekend_days: Iterable[Weekday] = SATURDAY_SUNDAY,
    ):
        self.description = description or self.calendar_type.value
        self.weekend_days: FrozenSet[Weekday] = frozenset(
            Weekday(day) for day in weekend_days
        )

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"

    @abstractmethod
    def is_weekend(self, dt: DateLike) -> Optional[bool]:
        """True on weekend days, None if unknown."""

    @abstractmethod
    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        """True on holidays, None if unknown."""

    def is_business_day(self, dt: DateLike) -> Optional[bool]:
        """Neither a holiday nor a weekend day; None unless both are known."""
        holiday = self.is_holiday(dt)
        weekend = self.is_weekend(dt)
        if holiday is None or weekend is None:
            return None
        return not (holiday or weekend)

    def info(self, dt: DateLike) -> str:
        """All known information about ``dt``.

        >>> USNYSECalendar().info(date(2015, 1, 4))
        'Sunday, January 4, 2015: not a business day, not a holiday, weekend'
        """
        dt = to_date(dt)
        header = f"{day_name[dt.weekday()]}, {month_name[dt.month]} {dt.day}, {dt.year}"
        return (
            f"{header}: {_status(self.is_business_day(dt), 'business day')}, "
            f"{_status(self.is_holiday(dt), 'holiday')}, "
            f"{_status(self.is_weekend(dt), 'weekend')}"
        )

    def next_business_day(
        self,
        dt: DateLike,
        forward: bool = True,
        search_window: int = DEFAULT_SEARCH_WINDOW,
        start_on_date: bool = False,
    ) -> Optional[date]:
        """
        Nearest business day after (or before, when ``forward`` is False) ``dt``.

        Args:
            dt: Starting date
            forward: Search direction
            search_window: Number of calendar days to scan, must be positive
            start_on_date: Return ``dt`` itself when it is a business day

        Returns:
            The business day found, or None if the window holds none
        """
        if search_window <= 0:
            raise PreconditionError(f"search_window must be positive; got {search_window}")
        dt = to_date(dt)
        if start_on_date and self.is_business_day(dt):
            return dt
        step = _ONE_DAY if forward else -_ONE_DAY
        candidate = dt
        for _ in range(search_window):
            candidate += step
            if self.is_business_day(candidate):
                return candidate
        logger.debug(
            "No business day within %s days %s %s in %s",
            search_window,
            "after" if forward else "before",
            dt,
            self,
        )
        return None

    def add_business_days(
        self, dt: DateLike, n: int, start_count_on_date: bool = False
    ) -> Optional[date]:
        """Shift ``dt`` by ``n`` business days (backward when ``n`` < 0).

        ``start_count_on_date`` lets ``dt`` count as the first business day
        when it is one.
        """
        if n == 0:
            raise PreconditionError("Number of business days to add must be non-zero")
        forward = n > 0
        result = self.next_business_day(
            dt, forward=forward, start_on_date=start_count_on_date
        )
        for _ in range(abs(n) - 1):
            if result is None:
                return None
            result = self.next_business_day(result, forward=forward)
        return result

    def business_days_in_range(
        self,
        from_date: DateLike,
        to_date_: DateLike,
        interval: BoundedInterval = BoundedInterval.CLOSED,
    ) -> List[date]:
        """Business days between two dates, ascending, endpoints per ``interval``."""
        require_same_zone(from_date, to_date_)
        start, end = to_date(from_date), to_date(to_date_)
        if start > end:
            raise PreconditionError(f"from_date {start} is after to_date {end}")
        if start == end:
            if interval is BoundedInterval.CLOSED and self.is_business_day(start):
                return [start]
            return []
        start, end = adjust_range(start, end, interval)
        return [day for day in _date_range(start, end) if self.is_business_day(day)]

    def apply_business_day_convention(
        self,
        convention: BusinessDayConvention,
        dt: DateLike,
        start_on_date: bool = True,
        search_window: int = DEFAULT_SEARCH_WINDOW,
    ) -> Optional[date]:
        """Adjust ``dt`` to a business day according to ``convention``."""
        dt = to_date(dt)
        if convention is BusinessDayConvention.FOLLOWING:
            return self.next_business_day(dt, True, search_window, start_on_date)
        if convention is BusinessDayConvention.PRECEDING:
            return self.next_business_day(dt, False, search_window, start_on_date)
        if convention is BusinessDayConvention.MODIFIED_FOLLOWING:
            return self._modified_following(dt, start_on_date, search_window)
        if convention is BusinessDayConvention.MODIFIED_FOLLOWING_FORTNIGHTLY:
            adjusted = self._modified_following(dt, start_on_date, search_window)
            if adjusted is None or dt.day > 15 or adjusted.day <= 15:
                return adjusted
            return self.next_business_day(adjusted, False, search_window)
        if convention is BusinessDayConvention.END_OF_MONTH:
            month_end = last_day_of_month(dt)
            if self.is_business_day(month_end):
                return month_end
            return self.next_business_day(month_end, False, search_window)
        raise ValueError(f"Unsupported business day convention: {convention}")

    def _modified_following(
        self, dt: date, start_on_date: bool, search_window: int
    ) -> Optional[date]:
        following = self.next_business_day(dt, True, search_window, start_on_date)
        if following is None or following.month == dt.month:
            return following
        return self.next_business_day(following, False, search_window)

    def observed_holidays_in_range(
        self, from_date: DateLike, to_date_: DateLike
    ) -> List[date]:
        """Non-weekend days that are not business days, both endpoints included."""
        business_days = set(
            self.business_days_in_range(from_date, to_date_, BoundedInterval.CLOSED)
        )
        if not business_days:
            return []
        return [
            day
            for day in _date_range(to_date(from_date), to_date(to_date_))
            if self.is_weekend(day) is False and day not in business_days
        ]

    def observed_holidays_in_month(self, year: int, month: int) -> List[date]:
        return self.observed_holidays_in_range(
            date(year, month, 1), date(year, month, days_in_month(year, month))
        )

    def observed_holidays_in_year(self, year: int) -> List[date]:
        return self.observed_holidays_in_range(date(year, 1, 1), date(year, 12, 31))


class NoHolidayOrWeekendCalendar(Calendar):
    """Every day is a business day."""

    calendar_type = CalendarType.NO_HOLIDAY_OR_WEEKEND

    def __init__(self, description: Optional[str] = None):
        super().__init__(description, weekend_days=())

    def is_weekend(self, dt: DateLike) -> Optional[bool]:
        return False

    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        return False


class WeekendsOnlyCalendar(Calendar):
    """Calendar that only considers weekends as non-business days."""

    calendar_type = CalendarType.WEEKENDS_ONLY

    def __init__(
        self,
        weekend_days: Iterable[Weekday] = SATURDAY_SUNDAY,
        description: Optional[str] = None,
    ):
        super().__init__(description, weekend_days)

    def __str__(self) -> str:
        names = ", ".join(day.label for day in sorted(self.weekend_days))
        return f"{self.description} ({names})"

    def is_weekend(self, dt: DateLike) -> Optional[bool]:
        return weekday_of(dt) in self.weekend_days

    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        return False


class StaticHolidaysCalendar(WeekendsOnlyCalendar):
    """Weekends plus the same (month, day) holidays every year."""

    calendar_type = CalendarType.STATIC_HOLIDAYS

    def __init__(
        self,
        static_holidays: Iterable[Union[MonthDay, tuple]],
        weekend_days: Iterable[Weekday] = SATURDAY_SUNDAY,
        description: Optional[str] = None,
    ):
        super().__init__(weekend_days, description)
        self.static_holidays: List[MonthDay] = sorted(
            {MonthDay(*month_day) for month_day in static_holidays}
        )

    def __str__(self) -> str:
        return self.description

    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        dt = to_date(dt)
        key = MonthDay(dt.month, dt.day)
        idx = bisect_left(self.static_holidays, key)
        return idx < len(self.static_holidays) and self.static_holidays[idx] == key


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar.

    Defined from 1999 onwards; earlier dates are unknown.
    """

    calendar_type = CalendarType.TARGET

    def __init__(self, description: Optional[str] = None):
        super().__init__(description)

    def is_weekend(self, dt: DateLike) -> Optional[bool]:
        return is_weekend_target(dt)

    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        return is_holiday_target(dt)


class _USCalendar(Calendar):
    def __init__(self, description: Optional[str] = None):
        super().__init__(description)

    def is_weekend(self, dt: DateLike) -> Optional[bool]:
        return weekday_of(dt) in self.weekend_days


class USFederalGovtCalendar(_USCalendar):
    calendar_type = CalendarType.US_FEDERAL_GOVT

    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        return is_holiday_us_federal_govt(dt)


class USBondMarketCalendar(_USCalendar):
    """SIFMA recommended closings of the U.S. bond market."""

    calendar_type = CalendarType.US_BOND_MARKET

    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        return is_holiday_us_bond_market(dt)


class USNYSECalendar(_USCalendar):
    """New York Stock Exchange; unknown before 1960 and during 1914-1915."""

    calendar_type = CalendarType.US_NYSE

    def is_holiday(self, dt: DateLike) -> Optional[bool]:
        return is_holiday_us_nyse(dt)


# Pre-defined calendar instances
NO_HOLIDAY_OR_WEEKEND = NoHolidayOrWeekendCalendar()
WEEKENDS_ONLY = WeekendsOnlyCalendar()
TARGET = TargetCalendar()
US_FEDERAL_GOVT = USFederalGovtCalendar()
US_BOND_MARKET = USBondMarketCalendar()
US_NYSE = USNYSECalendar()

# Calendar registry
CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "USFEDERALGOVT": US_FEDERAL_GOVT,
    "USGOVT": US_FEDERAL_GOVT,  # Alias
    "USBONDMARKET": US_BOND_MARKET,
    "SIFMA": US_BOND_MARKET,  # Alias
    "USNYSE": US_NYSE,
    "NYSE": US_NYSE,  # Alias
    "WEEKEND": WEEKENDS_ONLY,
    "NONE": NO_HOLIDAY_OR_WEEKEND,
}


def get_calendar(name: str) -> Calendar:
    """
    Get a calendar by name.

    Args:
        name: Calendar name, case-insensitive ("TARGET", "NYSE", "USGOVT", ...)
    """
    key = name.upper().replace(" ", "").replace("_", "")
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]


def observed_holidays(calendar: Calendar, from_year: int, to_year: int) -> List[date]:
    """Observed holidays of ``calendar`` over whole years ``from_year``..``to_year``."""
    return calendar.observed_holidays_in_range(
        date(from_year, 1, 1), date(to_year, 12, 31)
    )
