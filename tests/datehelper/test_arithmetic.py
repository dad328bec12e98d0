"""Tests for datehelper/arithmetic.py - calendar unit shifting."""

from datetime import datetime

import pytest

from datehelper.arithmetic import (
    ArithmeticEngine,
    add_months,
    add_years,
    clamp_day,
    days_in_month,
)
from datehelper.exceptions import InvalidAmountError
from datehelper.types import CalendarUnit, CivilInstant

NYC = "America/New_York"
TOKYO = "Asia/Tokyo"


@pytest.fixture
def engine(resolver) -> ArithmeticEngine:
    return ArithmeticEngine(resolver)


def _day(instant: CivilInstant) -> str:
    return instant.format("YYYY-MM-DD")


class TestCalendarHelpers:
    def test_days_in_month(self):
        assert days_in_month(2025, 2) == 28
        assert days_in_month(2024, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29
        assert days_in_month(2025, 4) == 30

    def test_clamp_day(self):
        assert clamp_day(2025, 2, 31) == 28
        assert clamp_day(2025, 3, 31) == 31

    def test_add_months_carries_year(self):
        assert add_months(datetime(2025, 11, 15), 3) == datetime(2026, 2, 15)
        assert add_months(datetime(2025, 1, 15), -1) == datetime(2024, 12, 15)
        assert add_months(datetime(2025, 1, 15), -25) == datetime(2022, 12, 15)

    def test_add_months_keeps_time(self):
        assert add_months(datetime(2025, 1, 31, 8, 30), 1) == datetime(2025, 2, 28, 8, 30)

    def test_add_years_clamps_leap_day(self):
        assert add_years(datetime(2024, 2, 29), 1) == datetime(2025, 2, 28)
        assert add_years(datetime(2024, 2, 29), 4) == datetime(2028, 2, 29)


class TestDayShift:
    def test_forward_and_back(self, engine, resolver):
        start = resolver.resolve("2025-02-15", NYC)
        assert _day(engine.shift(start, CalendarUnit.DAY, 5)) == "2025-02-20"
        assert _day(engine.shift(start, CalendarUnit.DAY, -5)) == "2025-02-10"

    def test_crosses_year(self, engine, resolver):
        start = resolver.resolve("2024-12-31", NYC)
        assert _day(engine.shift(start, "day", 1)) == "2025-01-01"

    def test_keeps_wall_clock_across_dst(self, engine, resolver):
        """A calendar day across spring-forward is 23 hours long."""
        start = resolver.resolve("2022-03-12T12:00:00", NYC)
        result = engine.shift(start, CalendarUnit.DAY, 1)
        assert result.format("YYYY-MM-DD HH:mm") == "2022-03-13 12:00"
        assert result.absolute_instant - start.absolute_instant == 23 * 3600 * 1000

    def test_lands_in_gap_moves_forward(self, engine, resolver):
        start = resolver.resolve("2022-03-12T02:30:00", NYC)
        result = engine.shift(start, CalendarUnit.DAY, 1)
        assert result.format("YYYY-MM-DD HH:mm") == "2022-03-13 03:30"


class TestMonthShift:
    def test_adds_months(self, engine, resolver):
        start = resolver.resolve("2025-02-15", NYC)
        assert _day(engine.shift(start, CalendarUnit.MONTH, 2)) == "2025-04-15"
        assert _day(engine.shift(start, CalendarUnit.MONTH, -2)) == "2024-12-15"

    def test_clamps_month_end(self, engine, resolver):
        assert _day(engine.shift(resolver.resolve("2025-01-31", NYC), "month", 1)) == "2025-02-28"
        assert _day(engine.shift(resolver.resolve("2024-01-31", NYC), "month", 1)) == "2024-02-29"
        assert _day(engine.shift(resolver.resolve("2025-03-31", NYC), "month", -1)) == "2025-02-28"

    def test_uses_civil_month_in_zone(self, engine, resolver):
        """Late Jan 31 in New York is already Feb 1 in Tokyo."""
        source = "2025-01-31T23:30:00-05:00"
        nyc = engine.shift(resolver.resolve(source, NYC), CalendarUnit.MONTH, 1)
        tokyo = engine.shift(resolver.resolve(source, TOKYO), CalendarUnit.MONTH, 1)
        assert _day(nyc) == "2025-02-28"
        assert _day(tokyo) == "2025-03-01"


class TestYearShift:
    def test_leap_day_to_common_year(self, engine, resolver):
        start = resolver.resolve("2024-02-29", NYC)
        assert _day(engine.shift(start, CalendarUnit.YEAR, 1)) == "2025-02-28"
        assert _day(engine.shift(start, CalendarUnit.YEAR, -1)) == "2023-02-28"

    def test_leap_day_to_leap_year(self, engine, resolver):
        start = resolver.resolve("2024-02-29", NYC)
        assert _day(engine.shift(start, CalendarUnit.YEAR, 4)) == "2028-02-29"
        assert _day(engine.shift(start, CalendarUnit.YEAR, -4)) == "2020-02-29"

    def test_out_of_range_is_invalid(self, engine, resolver):
        start = resolver.resolve("9999-06-01", "UTC")
        assert not engine.shift(start, CalendarUnit.YEAR, 1).is_valid


class TestRoundTrip:
    """shift(shift(c, unit, n), unit, -n) == c when no clamping happens."""

    @pytest.mark.parametrize("unit", [CalendarUnit.DAY, CalendarUnit.MONTH, CalendarUnit.YEAR])
    @pytest.mark.parametrize("amount", [1, 7, -13, 40])
    def test_returns_to_start(self, engine, resolver, unit, amount):
        start = resolver.resolve("2025-02-15T10:20:30.400", NYC)
        there = engine.shift(start, unit, amount)
        assert engine.shift(there, unit, -amount) == start

    def test_clamped_value_does_not_return(self, engine, resolver):
        start = resolver.resolve("2025-01-31", NYC)
        back = engine.shift(engine.shift(start, "month", 1), "month", -1)
        assert _day(back) == "2025-01-28"


class TestSubDayShift:
    def test_hours_cross_day(self, engine, resolver):
        start = resolver.resolve("2025-02-15T22:00:00", "UTC")
        result = engine.shift(start, CalendarUnit.HOUR, 5)
        assert result.format("YYYY-MM-DD HH:mm:ss") == "2025-02-16 03:00:00"

    def test_negative_hours(self, engine, resolver):
        start = resolver.resolve("2025-02-15T10:00:00", "UTC")
        result = engine.shift(start, CalendarUnit.HOUR, -12)
        assert result.format("YYYY-MM-DD HH:mm:ss") == "2025-02-14 22:00:00"

    def test_spring_forward_minutes(self, engine, resolver):
        """02:00-03:00 does not exist on 2022-03-13 in New York."""
        start = resolver.resolve("2022-03-13T01:45:00", NYC)
        result = engine.shift(start, CalendarUnit.MINUTE, 30)
        assert result.format("HH:mm") == "03:15"

    def test_fall_back_hour_repeats_wall_clock(self, engine, resolver):
        first = resolver.resolve("2022-11-06T01:30:00", NYC)
        second = engine.shift(first, CalendarUnit.HOUR, 1)
        assert second.format("YYYY-MM-DD HH:mm") == "2022-11-06 01:30"
        assert second.absolute_instant - first.absolute_instant == 3600 * 1000
        assert (first.utc_offset_minutes, second.utc_offset_minutes) == (-240, -300)

    def test_24_hours_across_dst_is_not_a_calendar_day(self, engine, resolver):
        start = resolver.resolve("2022-03-12T12:00:00", NYC)
        result = engine.shift(start, CalendarUnit.HOUR, 24)
        assert result.format("YYYY-MM-DD HH:mm") == "2022-03-13 13:00"

    def test_milliseconds(self, engine, resolver):
        start = resolver.resolve("2025-02-15T23:59:59.999", "UTC")
        result = engine.shift(start, CalendarUnit.MILLISECOND, 1)
        assert result.format("YYYY-MM-DD HH:mm:ss.SSS") == "2025-02-16 00:00:00.000"

    def test_seconds(self, engine, resolver):
        start = resolver.resolve("2025-02-15T10:00:00", "UTC")
        assert engine.shift(start, CalendarUnit.SECOND, 90).format("HH:mm:ss") == "10:01:30"

    def test_fractional_hours_round_to_ms(self, engine, resolver):
        start = resolver.resolve("2025-02-15T10:00:00", "UTC")
        assert engine.shift(start, CalendarUnit.HOUR, 1.5).format("HH:mm") == "11:30"


class TestInvalidInput:
    def test_invalid_instant_passes_through(self, engine):
        invalid = CivilInstant.invalid(NYC)
        for unit in CalendarUnit:
            assert not engine.shift(invalid, unit, 1).is_valid

    @pytest.mark.parametrize("amount", [1.5, float("nan"), "2", None, True])
    def test_bad_calendar_amount_raises(self, engine, resolver, amount):
        start = resolver.resolve("2025-02-15", NYC)
        with pytest.raises(InvalidAmountError):
            engine.shift(start, CalendarUnit.DAY, amount)

    @pytest.mark.parametrize("amount", [float("inf"), "2", None])
    def test_bad_sub_day_amount_raises(self, engine, resolver, amount):
        start = resolver.resolve("2025-02-15", NYC)
        with pytest.raises(InvalidAmountError):
            engine.shift(start, CalendarUnit.HOUR, amount)

    def test_unknown_unit_raises(self, engine, resolver):
        with pytest.raises(ValueError):
            engine.shift(resolver.resolve("2025-02-15", NYC), "fortnight", 1)

    def test_whole_float_amount_is_accepted(self, engine, resolver):
        start = resolver.resolve("2025-02-15", NYC)
        assert _day(engine.shift(start, CalendarUnit.DAY, 2.0)) == "2025-02-17"
