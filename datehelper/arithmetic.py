"""
Calendar arithmetic on CivilInstants.

Sub-day units move the absolute instant, so DST shows up naturally
(24 hours is not always one calendar day). Day, month and year units move
the civil date at the same wall-clock time and re-resolve in the zone.
Month and year shifts clamp the day to the end of the target month.
"""

import calendar
import logging
import math
from datetime import datetime, timedelta

from datehelper.exceptions import InvalidAmountError
from datehelper.resolver import Resolver
from datehelper.types import CalendarUnit, CivilInstant

logger = logging.getLogger(__name__)

UNIT_MILLISECONDS = {
    CalendarUnit.MILLISECOND: 1,
    CalendarUnit.SECOND: 1000,
    CalendarUnit.MINUTE: 60 * 1000,
    CalendarUnit.HOUR: 60 * 60 * 1000,
}


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> int:
    """Day of month, clamped to the last valid day (Feb 30 -> Feb 28/29)."""
    return min(day, days_in_month(year, month))


def add_months(wall: datetime, months: int) -> datetime:
    """Shift naive civil fields by whole months, clamping the day."""
    year, month_index = divmod(wall.year * 12 + wall.month - 1 + months, 12)
    month = month_index + 1
    return wall.replace(year=year, month=month, day=clamp_day(year, month, wall.day))


def add_years(wall: datetime, years: int) -> datetime:
    year = wall.year + years
    return wall.replace(year=year, day=clamp_day(year, wall.month, wall.day))


def _whole_amount(amount: int | float, unit: CalendarUnit) -> int:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidAmountError(amount, unit.value)
    if not math.isfinite(amount) or amount != int(amount):
        raise InvalidAmountError(amount, unit.value)
    return int(amount)


class ArithmeticEngine:
    """Shift CivilInstants by a signed count of one calendar unit."""

    def __init__(self, resolver: Resolver):
        self.resolver = resolver

    def shift(
        self,
        instant: CivilInstant,
        unit: CalendarUnit | str,
        amount: int | float,
    ) -> CivilInstant:
        """
        Shift by `amount` units (negative to go back).

        Invalid instants come back unchanged. Results outside the supported
        calendar range (years 1-9999) are invalid.

        Raises:
            InvalidAmountError: Non-numeric amount, or a fractional amount
                for day/month/year
        """
        unit = CalendarUnit(unit)

        if unit in UNIT_MILLISECONDS:
            if isinstance(amount, bool) or not isinstance(amount, (int, float)):
                raise InvalidAmountError(amount, unit.value)
            if not math.isfinite(amount):
                raise InvalidAmountError(amount, unit.value)
            if not instant.is_valid:
                return instant
            delta_ms = round(amount * UNIT_MILLISECONDS[unit])
            return self.resolver.from_instant(
                instant.absolute_instant + delta_ms, instant.timezone_id
            )

        count = _whole_amount(amount, unit)
        if not instant.is_valid:
            return instant

        wall = instant.wall_clock()
        try:
            if unit is CalendarUnit.DAY:
                target = wall + timedelta(days=count)
            elif unit is CalendarUnit.MONTH:
                target = add_months(wall, count)
            else:
                target = add_years(wall, count)
        except (OverflowError, ValueError):
            logger.debug(f"Shifting {wall} by {count} {unit.value}(s) leaves the calendar range")
            return CivilInstant.invalid(instant.timezone_id)

        return self.resolver.from_wall(target, instant.timezone_id)
