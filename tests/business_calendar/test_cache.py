from datetime import date, timedelta

import numpy as np
import pandas as pd
import pytest

from businessdays.business_calendar import cache
from businessdays.business_calendar.cache import (
    BusinessDays,
    add_business_days,
    business_days_index,
    filter_range,
    next_business_day,
)
from businessdays.conventions.calendars import US_FEDERAL_GOVT, US_NYSE
from businessdays.conventions.types import BoundedInterval
from businessdays.utils.date import PreconditionError, to_date

DEC31 = date(2014, 12, 31)
JAN1 = date(2015, 1, 1)
JAN2 = date(2015, 1, 2)
JAN3 = date(2015, 1, 3)
JAN5 = date(2015, 1, 5)
JAN6 = date(2015, 1, 6)


@pytest.fixture
def bizdays():
    days = BusinessDays.from_calendar(US_FEDERAL_GOVT, DEC31, JAN6)
    assert list(days) == [DEC31, JAN2, JAN5, JAN6]
    return days


@pytest.fixture(scope="module")
def nyse_2025():
    return BusinessDays.from_calendar(US_NYSE, date(2025, 1, 1), date(2025, 12, 31))


class TestBusinessDays:
    def test_empty(self):
        with pytest.raises(PreconditionError):
            BusinessDays([])

    def test_unsorted_or_duplicated(self):
        with pytest.raises(PreconditionError):
            BusinessDays([JAN2, DEC31])
        with pytest.raises(PreconditionError):
            BusinessDays([DEC31, JAN2, JAN2])

    def test_array_input(self, bizdays):
        days = BusinessDays(bizdays.days)
        assert days.days.dtype == np.dtype("datetime64[D]")
        assert next_business_day(days, JAN1) == JAN2

    def test_read_only(self, bizdays):
        with pytest.raises(ValueError):
            bizdays.days[0] = np.datetime64(JAN1, "D")

    def test_copies_input_array(self):
        source = np.array([DEC31, JAN2], dtype="datetime64[D]")
        days = BusinessDays(source)
        source[1] = np.datetime64(JAN5, "D")
        assert list(days) == [DEC31, JAN2]

    def test_sequence_protocol(self, bizdays):
        assert len(bizdays) == 4
        assert (bizdays.first, bizdays.last) == (DEC31, JAN6)
        assert JAN5 in bizdays
        assert JAN1 not in bizdays
        assert date(2016, 1, 1) not in bizdays

    def test_plain_list_rejected(self):
        with pytest.raises(TypeError, match="BusinessDays"):
            next_business_day([DEC31, JAN2], JAN1)


def test_query_cost_independent_of_length(monkeypatch):
    short = BusinessDays(np.arange("2015-01-01", "2015-01-11", dtype="datetime64[D]"))
    long = BusinessDays(np.arange("1950-01-01", "2150-01-01", dtype="datetime64[D]"))
    calls = []

    def counting_to_date(dt):
        calls.append(dt)
        return to_date(dt)

    monkeypatch.setattr(cache, "to_date", counting_to_date)

    def conversions(days):
        calls.clear()
        next_business_day(days, JAN5)
        next_business_day(days, JAN5, forward=False, start_on_date=True)
        add_business_days(days, JAN5, 3)
        filter_range(days, JAN2, JAN6)
        return len(calls)

    assert conversions(long) == conversions(short)
    assert conversions(long) < 10


class TestNextBusinessDay:
    def test_forward(self, bizdays):
        assert next_business_day(bizdays, JAN1) == JAN2
        assert next_business_day(bizdays, JAN2) == JAN5
        assert next_business_day(bizdays, JAN2, start_on_date=True) == JAN2
        assert next_business_day(bizdays, JAN6) is None

    def test_backward(self, bizdays):
        assert next_business_day(bizdays, JAN3, forward=False) == JAN2
        assert next_business_day(bizdays, JAN5, forward=False) == JAN2
        assert next_business_day(bizdays, JAN5, forward=False, start_on_date=True) == JAN5
        assert next_business_day(bizdays, DEC31, forward=False) is None

    def test_outside_sequence(self, bizdays):
        assert next_business_day(bizdays, date(2014, 12, 30)) is None
        assert next_business_day(bizdays, date(2015, 1, 7), forward=False) is None


class TestAddBusinessDays:
    def test_shifts(self, bizdays):
        assert add_business_days(bizdays, JAN2, 2) == JAN6
        assert add_business_days(bizdays, JAN1, 1) == JAN2
        assert add_business_days(bizdays, JAN3, -1) == JAN2
        assert add_business_days(bizdays, JAN6, -3) == DEC31
        assert add_business_days(bizdays, DEC31, 3) == JAN6

    def test_start_count_on_date(self, bizdays):
        assert add_business_days(bizdays, JAN2, 1, start_count_on_date=True) == JAN2
        assert add_business_days(bizdays, JAN2, -1, start_count_on_date=True) == JAN2
        assert add_business_days(bizdays, JAN1, 1, start_count_on_date=True) == JAN2

    def test_beyond_sequence(self, bizdays):
        assert add_business_days(bizdays, JAN2, 3) is None
        assert add_business_days(bizdays, JAN2, -2) is None

    def test_preconditions(self, bizdays):
        with pytest.raises(PreconditionError):
            add_business_days(bizdays, JAN2, 0)
        with pytest.raises(PreconditionError):
            add_business_days(bizdays, DEC31, -1)
        with pytest.raises(PreconditionError):
            add_business_days(bizdays, JAN6, 1)
        with pytest.raises(PreconditionError):
            add_business_days(bizdays, date(2015, 2, 1), -1)

    def test_nyse_2025(self, nyse_2025):
        friday, tuesday, wednesday = date(2025, 1, 17), date(2025, 1, 21), date(2025, 1, 22)
        assert next_business_day(nyse_2025, friday) == tuesday
        assert add_business_days(nyse_2025, tuesday, -1) == friday
        assert add_business_days(nyse_2025, friday, 2) == wednesday


class TestMatchesCalendar:
    @pytest.mark.parametrize("forward", [True, False])
    @pytest.mark.parametrize("start_on_date", [True, False])
    def test_next_business_day(self, nyse_2025, forward, start_on_date):
        day = date(2025, 1, 10)
        while day <= date(2025, 12, 20):
            assert next_business_day(
                nyse_2025, day, forward, start_on_date
            ) == US_NYSE.next_business_day(day, forward, start_on_date=start_on_date), day
            day += timedelta(days=1)

    @pytest.mark.parametrize("n", [1, 3, 10, -1, -4, -10])
    @pytest.mark.parametrize("start_count_on_date", [True, False])
    def test_add_business_days(self, nyse_2025, n, start_count_on_date):
        day = date(2025, 2, 1)
        while day <= date(2025, 11, 30):
            assert add_business_days(
                nyse_2025, day, n, start_count_on_date
            ) == US_NYSE.add_business_days(day, n, start_count_on_date), (day, n)
            day += timedelta(days=1)

    @pytest.mark.parametrize("interval", list(BoundedInterval))
    def test_filter_range(self, nyse_2025, interval):
        from_date, to_date = date(2025, 3, 29), date(2025, 7, 4)
        assert filter_range(nyse_2025, from_date, to_date, interval) == (
            US_NYSE.business_days_in_range(from_date, to_date, interval)
        )


class TestFilterRange:
    def test_single_day(self, bizdays):
        assert filter_range(bizdays, JAN2, JAN2) == [JAN2]
        assert filter_range(bizdays, JAN2, JAN2, BoundedInterval.OPEN) == []
        assert filter_range(bizdays, JAN1, JAN1) == []

    def test_open(self, bizdays):
        assert filter_range(bizdays, DEC31, JAN6, BoundedInterval.OPEN) == [JAN2, JAN5]
        assert filter_range(bizdays, JAN5, JAN6, BoundedInterval.OPEN) == []

    def test_reversed(self, bizdays):
        with pytest.raises(PreconditionError):
            filter_range(bizdays, JAN6, DEC31)


def test_business_days_index():
    index = business_days_index(US_NYSE, date(2014, 12, 31), date(2015, 1, 6))
    assert isinstance(index, pd.DatetimeIndex)
    assert list(index.date) == [DEC31, JAN2, JAN5, JAN6]
    assert index.name == str(US_NYSE)
