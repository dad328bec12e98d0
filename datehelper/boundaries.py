"""Start/end of day, week, month and quarter in the instant's own zone."""

from datetime import datetime

from datehelper.arithmetic import ArithmeticEngine, days_in_month
from datehelper.resolver import Resolver
from datehelper.types import CalendarUnit, CivilInstant, Granularity

START_OF_DAY = dict(hour=0, minute=0, second=0, microsecond=0)
END_OF_DAY = dict(hour=23, minute=59, second=59, microsecond=999000)


def week_offset(weekday: int, week_start_day: int) -> int:
    """Days back from `weekday` to the most recent `week_start_day` (0 = Sunday)."""
    return (7 if weekday < week_start_day else 0) + weekday - week_start_day


def quarter_of(month: int) -> int:
    """Quarter index 0-3 for a 1-indexed month."""
    return (month - 1) // 3


class BoundaryCalculator:
    """
    Period boundaries for CivilInstants.

    Boundaries are civil (00:00:00.000 and 23:59:59.999 wall clock); a DST
    change inside the period only moves the underlying absolute instant.
    """

    def __init__(self, resolver: Resolver, arithmetic: ArithmeticEngine):
        self.resolver = resolver
        self.arithmetic = arithmetic

    def _at(self, instant: CivilInstant, wall: datetime) -> CivilInstant:
        return self.resolver.from_wall(wall, instant.timezone_id)

    def start_of(
        self,
        instant: CivilInstant,
        granularity: Granularity | str,
        week_start_day: int = 0,
    ) -> CivilInstant:
        granularity = Granularity(granularity)
        if not instant.is_valid:
            return instant

        wall = instant.wall_clock()
        if granularity is Granularity.DAY:
            return self._at(instant, wall.replace(**START_OF_DAY))
        if granularity is Granularity.WEEK:
            back = week_offset(instant.weekday, week_start_day)
            first_day = self.arithmetic.shift(instant, CalendarUnit.DAY, -back)
            return self.start_of(first_day, Granularity.DAY)
        if granularity is Granularity.MONTH:
            return self._at(instant, wall.replace(day=1, **START_OF_DAY))

        first_month = quarter_of(wall.month) * 3 + 1
        return self._at(instant, wall.replace(month=first_month, day=1, **START_OF_DAY))

    def end_of(
        self,
        instant: CivilInstant,
        granularity: Granularity | str,
        week_start_day: int = 0,
    ) -> CivilInstant:
        granularity = Granularity(granularity)
        if not instant.is_valid:
            return instant

        wall = instant.wall_clock()
        if granularity is Granularity.DAY:
            return self._at(instant, wall.replace(**END_OF_DAY))
        if granularity is Granularity.WEEK:
            week_start = self.start_of(instant, Granularity.WEEK, week_start_day)
            last_day = self.arithmetic.shift(week_start, CalendarUnit.DAY, 6)
            return self.end_of(last_day, Granularity.DAY)
        if granularity is Granularity.MONTH:
            last_day = days_in_month(wall.year, wall.month)
            return self._at(instant, wall.replace(day=last_day, **END_OF_DAY))

        last_month = quarter_of(wall.month) * 3 + 3
        last_day = days_in_month(wall.year, last_month)
        return self._at(instant, wall.replace(month=last_month, day=last_day, **END_OF_DAY))
