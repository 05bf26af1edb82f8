"""
Queries over a precomputed sequence of business days.

Build the business days of a calendar once with ``BusinessDays`` and answer
repeated queries by binary search, which is much faster than walking the
calendar day by day. The sequence is converted and validated when the
``BusinessDays`` is built; queries never touch more than a few elements.
"""

from datetime import date
from typing import Iterator, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from businessdays.conventions.calendars import Calendar, adjust_range
from businessdays.conventions.types import BoundedInterval
from businessdays.utils.date import (
    DateLike,
    PreconditionError,
    require_same_zone,
    to_date,
)

_DAY = np.dtype("datetime64[D]")


def _day(dt: DateLike) -> np.datetime64:
    return np.datetime64(to_date(dt), "D")


class BusinessDays:
    """Read-only, strictly ascending sequence of business days."""

    def __init__(self, days: Union[Sequence[DateLike], np.ndarray]):
        """
        Validate and store business days.

        Args:
            days: Dates, or a ``datetime64[D]`` array, in strictly ascending order

        Raises:
            PreconditionError: if ``days`` is empty or not strictly ascending
        """
        if isinstance(days, np.ndarray) and days.dtype == _DAY:
            array = days.copy()
        else:
            days = list(days)
            array = np.array([_day(dt) for dt in days], dtype=_DAY)
        if array.size == 0:
            raise PreconditionError("Business day sequence must not be empty")
        if not np.all(array[1:] > array[:-1]):
            raise PreconditionError("Business day sequence must be strictly ascending")
        array.setflags(write=False)
        self._days = array
        # Queries must share the time zone of the input dates
        self._zone_reference = days[0]

    @classmethod
    def from_calendar(
        cls,
        calendar: Calendar,
        from_date: DateLike,
        to_date_: DateLike,
        interval: BoundedInterval = BoundedInterval.CLOSED,
    ) -> "BusinessDays":
        return cls(calendar.business_days_in_range(from_date, to_date_, interval))

    @property
    def days(self) -> np.ndarray:
        """The ``datetime64[D]`` array, not writeable."""
        return self._days

    @property
    def first(self) -> date:
        return self._days[0].item()

    @property
    def last(self) -> date:
        return self._days[-1].item()

    def __len__(self) -> int:
        return int(self._days.size)

    def __iter__(self) -> Iterator[date]:
        return (day.item() for day in self._days)

    def __contains__(self, dt: DateLike) -> bool:
        day = _day(dt)
        lo = self.lower_bound(day)
        return lo < self._days.size and self._days[lo] == day

    def __repr__(self) -> str:
        return f"BusinessDays({self.first} - {self.last}, {len(self)} days)"

    def lower_bound(self, day: np.datetime64) -> int:
        """Index of the first business day on or after ``day``."""
        return int(np.searchsorted(self._days, day, side="left"))

    def check_zone(self, dt: DateLike) -> None:
        require_same_zone(self._zone_reference, dt)


def _require_business_days(bizdays: BusinessDays) -> None:
    if not isinstance(bizdays, BusinessDays):
        raise TypeError(
            f"Expected BusinessDays, got {type(bizdays).__name__}; "
            "build one with BusinessDays(days) and reuse it across queries"
        )


def filter_range(
    bizdays: BusinessDays,
    from_date: DateLike,
    to_date_: DateLike,
    interval: BoundedInterval = BoundedInterval.CLOSED,
) -> List[date]:
    """Business days of ``bizdays`` lying between two dates, endpoints per ``interval``."""
    _require_business_days(bizdays)
    require_same_zone(from_date, to_date_)
    start, end = to_date(from_date), to_date(to_date_)
    if start > end:
        raise PreconditionError(f"from_date {start} is after to_date {end}")
    if start == end:
        if interval is BoundedInterval.CLOSED and start in bizdays:
            return [start]
        return []
    start, end = adjust_range(start, end, interval)
    if start > end:
        return []
    lo = bizdays.lower_bound(_day(start))
    hi = int(np.searchsorted(bizdays.days, _day(end), side="right"))
    return [day.item() for day in bizdays.days[lo:hi]]


def next_business_day(
    bizdays: BusinessDays,
    dt: DateLike,
    forward: bool = True,
    start_on_date: bool = False,
) -> Optional[date]:
    """
    Nearest business day after (or before) ``dt`` within ``bizdays``.

    Returns None when ``dt`` lies outside the sequence or the sequence ends
    before a business day is found.
    """
    _require_business_days(bizdays)
    bizdays.check_zone(dt)
    days = bizdays.days
    day = _day(dt)
    if day < days[0] or day > days[-1]:
        return None
    lo = bizdays.lower_bound(day)
    on_business_day = days[lo] == day
    if forward:
        if not on_business_day:
            return days[lo].item()
        if start_on_date:
            return to_date(dt)
        if lo < days.size - 1:
            return days[lo + 1].item()
        return None
    if on_business_day:
        if start_on_date:
            return to_date(dt)
        if lo == 0:
            return None
    return days[lo - 1].item()


def add_business_days(
    bizdays: BusinessDays,
    dt: DateLike,
    n: int,
    start_count_on_date: bool = False,
) -> Optional[date]:
    """
    Shift ``dt`` by ``n`` business days of ``bizdays``.

    Gives the same result as ``Calendar.add_business_days`` for the calendar
    the sequence was built from, as long as the result stays in the sequence.

    Raises:
        PreconditionError: if ``n`` is zero, or ``dt`` lies outside the
            sequence (``dt`` may equal its first day when ``n`` > 0 and its
            last day when ``n`` < 0)
    """
    _require_business_days(bizdays)
    if n == 0:
        raise PreconditionError("Number of business days to add must be non-zero")
    bizdays.check_zone(dt)
    days = bizdays.days
    day = _day(dt)
    first, last = days[0], days[-1]
    inside = first < day < last or (day == first and n > 0) or (day == last and n < 0)
    if not inside:
        raise PreconditionError(
            f"{to_date(dt)} must lie within the business days "
            f"{first.item()} - {last.item()} in the direction of the shift"
        )
    lo = bizdays.lower_bound(day)
    on_business_day = days[lo] == day
    if n > 0:
        adjustment = -1 if (not on_business_day or start_count_on_date) else 0
    else:
        adjustment = 1 if (on_business_day and start_count_on_date) else 0
    idx = lo + adjustment + n
    if 0 <= idx < days.size:
        return days[idx].item()
    return None


def business_days_index(
    calendar: Calendar,
    from_date: DateLike,
    to_date_: DateLike,
    interval: BoundedInterval = BoundedInterval.CLOSED,
) -> pd.DatetimeIndex:
    """Business days of ``calendar`` as a pandas index, for time-series alignment."""
    days = calendar.business_days_in_range(from_date, to_date_, interval)
    return pd.DatetimeIndex(pd.to_datetime(days), name=str(calendar))
