from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from businessdays.conventions.calendars import (
    DEFAULT_SEARCH_WINDOW,
    TARGET,
    US_BOND_MARKET,
    US_FEDERAL_GOVT,
    US_NYSE,
    NoHolidayOrWeekendCalendar,
    StaticHolidaysCalendar,
    TargetCalendar,
    USNYSECalendar,
    WeekendsOnlyCalendar,
    get_calendar,
    observed_holidays,
)
from businessdays.conventions.types import BoundedInterval, BusinessDayConvention
from businessdays.utils.date import MonthDay, PreconditionError, Weekday

DEC31 = date(2014, 12, 31)  # Wednesday
JAN1 = date(2015, 1, 1)  # Thursday, holiday
JAN2 = date(2015, 1, 2)  # Friday
JAN5 = date(2015, 1, 5)  # Monday
JAN6 = date(2015, 1, 6)  # Tuesday


@pytest.fixture
def nyse():
    return USNYSECalendar()


@pytest.fixture
def weekends_only():
    return WeekendsOnlyCalendar()


class TestDescriptions:
    def test_default_descriptions(self):
        assert str(NoHolidayOrWeekendCalendar()) == "calendar without holidays or weekends"
        assert str(TargetCalendar()) == "TARGET calendar"
        assert str(US_NYSE) == "New York Stock Exchange (NYSE) calendar"
        assert str(US_FEDERAL_GOVT) == "U.S. Federal Government calendar"
        assert str(US_BOND_MARKET) == "U.S. Bond Market calendar"

    def test_weekends_only_lists_weekend_days(self, weekends_only):
        assert str(weekends_only) == (
            "calendars having weekends but no holidays (Saturday, Sunday)"
        )
        gulf = WeekendsOnlyCalendar({Weekday.SATURDAY, Weekday.FRIDAY})
        assert str(gulf) == "calendars having weekends but no holidays (Friday, Saturday)"

    def test_custom_description(self):
        assert str(StaticHolidaysCalendar([], description="Office")) == "Office"
        assert str(StaticHolidaysCalendar([])) == "calendar with static holidays"


class TestInfo:
    def test_weekend(self, nyse):
        assert nyse.info(date(2015, 1, 4)) == (
            "Sunday, January 4, 2015: not a business day, not a holiday, weekend"
        )

    def test_observed_christmas(self, nyse):
        assert nyse.info(date(2021, 12, 25)) == (
            "Saturday, December 25, 2021: not a business day, not a holiday, weekend"
        )
        assert nyse.info(datetime(2021, 12, 24, 10, 30)) == (
            "Friday, December 24, 2021: not a business day, holiday, not a weekend"
        )

    def test_unknown(self):
        assert TARGET.info(date(1998, 12, 25)) == (
            "Friday, December 25, 1998: business day?, holiday?, weekend?"
        )


class TestPredicates:
    def test_nyse(self, nyse):
        assert nyse.is_holiday(JAN1) is True
        assert nyse.is_business_day(JAN2) is True
        assert nyse.is_weekend(date(2015, 1, 3)) is True
        assert nyse.is_business_day(date(2021, 12, 25)) is False
        assert nyse.is_business_day(pd.Timestamp("2021-12-31")) is True

    def test_unknown_propagates(self):
        assert TARGET.is_business_day(date(1998, 6, 1)) is None
        assert US_NYSE.is_business_day(date(1915, 6, 1)) is None

    @pytest.mark.parametrize(
        "calendar", [TARGET, US_FEDERAL_GOVT, US_BOND_MARKET, US_NYSE], ids=str
    )
    def test_business_day_excludes_weekends_and_holidays(self, calendar):
        day = date(2020, 1, 1)
        while day <= date(2021, 12, 31):
            if calendar.is_business_day(day):
                assert calendar.is_weekend(day) is False
                assert calendar.is_holiday(day) is False
            day += timedelta(days=1)

    def test_no_holiday_or_weekend(self):
        calendar = NoHolidayOrWeekendCalendar()
        assert calendar.weekend_days == frozenset()
        assert calendar.is_business_day(date(2015, 1, 4)) is True
        assert calendar.is_business_day(date(2015, 12, 25)) is True

    def test_static_holidays_are_sorted_and_deduplicated(self):
        calendar = StaticHolidaysCalendar([(12, 25), MonthDay(1, 1), (12, 25)])
        assert calendar.static_holidays == [MonthDay(1, 1), MonthDay(12, 25)]
        assert calendar.is_holiday(date(2023, 12, 25)) is True
        assert calendar.is_holiday(date(2023, 12, 26)) is False
        assert calendar.is_business_day(date(2023, 12, 25)) is False
        assert calendar.is_business_day(date(2023, 12, 23)) is False  # Saturday


class TestNextBusinessDay:
    def test_forward_and_backward(self, nyse):
        assert nyse.next_business_day(JAN1) == JAN2
        assert nyse.next_business_day(JAN1, forward=False) == DEC31

    def test_start_on_date(self, nyse):
        assert nyse.next_business_day(JAN2) == JAN5
        assert nyse.next_business_day(JAN2, start_on_date=True) == JAN2
        assert nyse.next_business_day(JAN1, start_on_date=True) == JAN2

    def test_window_exhausted(self):
        no_business_days = WeekendsOnlyCalendar(list(Weekday))
        assert no_business_days.next_business_day(JAN1) is None
        assert TARGET.next_business_day(date(1998, 6, 1)) is None

    def test_window_must_be_positive(self, nyse):
        assert DEFAULT_SEARCH_WINDOW == 60
        with pytest.raises(PreconditionError):
            nyse.next_business_day(JAN1, search_window=0)


class TestAddBusinessDays:
    def test_shifts(self, nyse):
        assert nyse.add_business_days(DEC31, 1) == JAN2
        assert nyse.add_business_days(DEC31, 2) == JAN5
        assert nyse.add_business_days(JAN6, -3) == DEC31

    def test_start_count_on_date(self, nyse):
        assert nyse.add_business_days(JAN2, 1, start_count_on_date=True) == JAN2
        assert nyse.add_business_days(JAN2, 2, start_count_on_date=True) == JAN5

    def test_zero_is_rejected(self, nyse):
        with pytest.raises(PreconditionError):
            nyse.add_business_days(JAN2, 0)

    def test_not_found(self):
        assert WeekendsOnlyCalendar(list(Weekday)).add_business_days(JAN2, 3) is None

    def test_round_trip(self):
        day = date(2024, 1, 1)
        while day <= date(2024, 12, 31):
            if US_FEDERAL_GOVT.is_business_day(day):
                following = US_FEDERAL_GOVT.next_business_day(day)
                assert US_FEDERAL_GOVT.add_business_days(following, -1) == day
            day += timedelta(days=1)


class TestBusinessDaysInRange:
    @pytest.mark.parametrize(
        "interval, expected",
        [
            (BoundedInterval.CLOSED, [DEC31, JAN2, JAN5, JAN6]),
            (BoundedInterval.OPEN, [JAN2, JAN5]),
            (BoundedInterval.LEFT_OPEN, [JAN2, JAN5, JAN6]),
            (BoundedInterval.RIGHT_CLOSED, [JAN2, JAN5, JAN6]),
            (BoundedInterval.RIGHT_OPEN, [DEC31, JAN2, JAN5]),
            (BoundedInterval.LEFT_CLOSED, [DEC31, JAN2, JAN5]),
        ],
    )
    def test_intervals(self, nyse, interval, expected):
        assert nyse.business_days_in_range(DEC31, JAN6, interval) == expected

    def test_single_day(self, nyse):
        assert nyse.business_days_in_range(JAN2, JAN2) == [JAN2]
        assert nyse.business_days_in_range(JAN2, JAN2, BoundedInterval.LEFT_OPEN) == []
        assert nyse.business_days_in_range(JAN1, JAN1) == []

    def test_adjacent_days_open(self, nyse):
        assert nyse.business_days_in_range(JAN5, JAN6, BoundedInterval.OPEN) == []

    def test_preconditions(self, nyse):
        with pytest.raises(PreconditionError):
            nyse.business_days_in_range(JAN6, DEC31)
        with pytest.raises(PreconditionError):
            nyse.business_days_in_range(
                datetime(2014, 12, 31, tzinfo=timezone.utc), datetime(2015, 1, 6)
            )

    def test_strictly_ascending(self):
        days = US_FEDERAL_GOVT.business_days_in_range(date(2020, 1, 1), date(2020, 12, 31))
        assert all(a < b for a, b in zip(days, days[1:]))

    def test_nyse_2025(self, nyse):
        days = nyse.business_days_in_range(date(2025, 1, 1), date(2025, 12, 31))
        assert len(days) == 251


class TestBusinessDayConventions:
    def test_following_and_preceding(self, weekends_only):
        sunday = date(2011, 9, 18)
        assert weekends_only.apply_business_day_convention(
            BusinessDayConvention.FOLLOWING, sunday
        ) == date(2011, 9, 19)
        assert weekends_only.apply_business_day_convention(
            BusinessDayConvention.PRECEDING, sunday
        ) == date(2011, 9, 16)

    def test_modified_following_stays_in_month(self, weekends_only):
        saturday = date(2011, 7, 30)
        apply = weekends_only.apply_business_day_convention
        assert apply(BusinessDayConvention.FOLLOWING, saturday) == date(2011, 8, 1)
        assert apply(BusinessDayConvention.MODIFIED_FOLLOWING, saturday) == date(2011, 7, 29)
        assert apply(
            BusinessDayConvention.MODIFIED_FOLLOWING_FORTNIGHTLY, saturday
        ) == date(2011, 7, 29)

    def test_modified_following_fortnightly_stays_in_half_month(self, weekends_only):
        saturday = date(2011, 10, 15)
        apply = weekends_only.apply_business_day_convention
        assert apply(BusinessDayConvention.FOLLOWING, saturday) == date(2011, 10, 17)
        assert apply(BusinessDayConvention.MODIFIED_FOLLOWING, saturday) == date(2011, 10, 17)
        assert apply(
            BusinessDayConvention.MODIFIED_FOLLOWING_FORTNIGHTLY, saturday
        ) == date(2011, 10, 14)
        assert apply(
            BusinessDayConvention.MODIFIED_FOLLOWING_FORTNIGHTLY, date(2011, 10, 1)
        ) == date(2011, 10, 3)

    @pytest.mark.parametrize(
        "dt, expected",
        [
            (date(2011, 3, 28), date(2011, 3, 31)),
            (date(2011, 4, 29), date(2011, 4, 29)),
            (date(2012, 3, 28), date(2012, 3, 30)),
        ],
    )
    def test_end_of_month(self, weekends_only, nyse, dt, expected):
        for calendar in (weekends_only, nyse):
            assert calendar.apply_business_day_convention(
                BusinessDayConvention.END_OF_MONTH, dt
            ) == expected

    def test_start_on_date_false(self, weekends_only):
        friday = date(2011, 9, 16)
        assert weekends_only.apply_business_day_convention(
            BusinessDayConvention.FOLLOWING, friday, start_on_date=False
        ) == date(2011, 9, 19)


class TestObservedHolidays:
    def test_nyse_january_2024(self, nyse):
        assert nyse.observed_holidays_in_month(2024, 1) == [date(2024, 1, 1), date(2024, 1, 15)]

    def test_nyse(self, nyse, holiday_file):
        assert observed_holidays(nyse, 2024, 2025) == holiday_file("us_nyse_2024_2025.txt")
        assert len(nyse.observed_holidays_in_year(2025)) == 10

    def test_us_federal_govt(self, holiday_file):
        assert observed_holidays(US_FEDERAL_GOVT, 2020, 2022) == holiday_file(
            "us_federal_govt_2020_2022.txt"
        )

    def test_us_bond_market(self, holiday_file):
        expected = holiday_file("us_bond_market_2018_2027.txt")
        assert observed_holidays(US_BOND_MARKET, 2018, 2027) == expected
        assert date(2018, 12, 5) in expected
        # New Year's Day on a Saturday is not moved to the previous Friday
        assert date(2021, 12, 31) not in expected

    def test_no_business_days(self):
        assert WeekendsOnlyCalendar(list(Weekday)).observed_holidays_in_year(2020) == []

    def test_range_preconditions(self, nyse):
        with pytest.raises(PreconditionError):
            nyse.observed_holidays_in_range(date(2024, 2, 1), date(2024, 1, 1))


class TestRegistry:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("TARGET", TARGET),
            ("eur", TARGET),
            ("NYSE", US_NYSE),
            ("us_nyse", US_NYSE),
            ("USGovt", US_FEDERAL_GOVT),
            ("SIFMA", US_BOND_MARKET),
        ],
    )
    def test_lookup(self, name, expected):
        assert get_calendar(name) is expected

    def test_weekend_and_none(self):
        assert isinstance(get_calendar("WEEKEND"), WeekendsOnlyCalendar)
        assert isinstance(get_calendar("NONE"), NoHolidayOrWeekendCalendar)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown calendar"):
            get_calendar("LONDON")
