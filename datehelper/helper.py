"""
DateHelper: the public operation surface.

Every operation resolves its input(s) with the Resolver, hands the result
to the arithmetic, boundary, ISO or Unix/UTC component, and projects the
answer (string, number, bool, or CivilInstant).

Malformed dates degrade: booleans come back False, formatting returns the
configured invalid marker, numbers come back NaN. Unknown zones raise
UnknownTimezoneError.
"""

import logging
import math

from datehelper import iso
from datehelper.arithmetic import ArithmeticEngine
from datehelper.boundaries import BoundaryCalculator
from datehelper.config import DateHelperConfig
from datehelper.formatting import day_name, month_name
from datehelper.resolver import Resolver
from datehelper.types import CalendarUnit, CivilInstant, DateLike, Granularity
from datehelper.unix_utc import UnixUtcConverter
from datehelper.zones import ZoneOracle

logger = logging.getLogger(__name__)


class DateHelper:
    """
    Timezone-aware date operations.

    Usage:
        helper = DateHelper(DateHelperConfig(default_timezone="America/New_York"))
        helper.format_date("2025-02-15T01:00:00Z")           # "2025-02-14"
        helper.add_months("2025-01-31", 1).format("YYYY-MM-DD")  # "2025-02-28"

    The oracle is injected so alternative zone sources can be swapped in
    without touching module state.
    """

    def __init__(
        self,
        config: DateHelperConfig | None = None,
        oracle: ZoneOracle | None = None,
    ):
        self.config = config or DateHelperConfig()
        self.oracle = oracle or ZoneOracle()
        self.resolver = Resolver(self.oracle, self.config)
        self.arithmetic = ArithmeticEngine(self.resolver)
        self.boundaries = BoundaryCalculator(self.resolver, self.arithmetic)
        self.converter = UnixUtcConverter(self.resolver)
        logger.debug(
            f"DateHelper initialized with timezone={self.config.default_timezone} "
            f"locale={self.config.default_locale}"
        )

    # =========================================================================
    # PARSING & FORMATTING
    # =========================================================================

    def parse_date(self, date_string: DateLike, tz: str | None = None) -> CivilInstant:
        return self.resolver.resolve(date_string, tz)

    def now(self, tz: str | None = None) -> CivilInstant:
        return self.resolver.now(tz)

    def format_date(
        self,
        date: DateLike,
        fmt: str = "YYYY-MM-DD",
        tz: str | None = None,
    ) -> str:
        """Format with display tokens (default YYYY-MM-DD) in tz."""
        return self.resolver.resolve(date, tz).format(
            fmt,
            locale=self.config.default_locale,
            invalid_marker=self.config.invalid_date_marker,
        )

    def format_date_time(self, date: DateLike, tz: str | None = None) -> str:
        return self.format_date(date, "YYYY-MM-DD HH:mm:ss", tz)

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _resolve_pair(
        self, date1: DateLike, date2: DateLike, tz: str | None
    ) -> tuple[CivilInstant, CivilInstant]:
        """
        Resolve both dates in one zone so their civil dates are comparable.

        Without tz, the second date is read in the first one's zone (the
        default zone, unless date1 is a CivilInstant carrying its own).
        """
        d1 = self.resolver.resolve(date1, tz)
        return d1, self.resolver.resolve(date2, tz or d1.timezone_id)

    def is_same_day(self, date1: DateLike, date2: DateLike, tz: str | None = None) -> bool:
        """Same civil date, both sides read in tz (or date1's zone)."""
        d1, d2 = self._resolve_pair(date1, date2, tz)
        if not (d1.is_valid and d2.is_valid):
            return False
        return d1.moment.date() == d2.moment.date()

    def is_before(self, date1: DateLike, date2: DateLike, tz: str | None = None) -> bool:
        return self.resolver.resolve(date1, tz) < self.resolver.resolve(date2, tz)

    def is_after(self, date1: DateLike, date2: DateLike, tz: str | None = None) -> bool:
        return self.resolver.resolve(date1, tz) > self.resolver.resolve(date2, tz)

    def is_weekend(self, date: DateLike, tz: str | None = None) -> bool:
        """Saturday or Sunday in tz."""
        instant = self.resolver.resolve(date, tz)
        return instant.is_valid and instant.weekday in (0, 6)

    def is_weekday(self, date: DateLike, tz: str | None = None) -> bool:
        """Monday to Friday in tz. False for invalid input."""
        instant = self.resolver.resolve(date, tz)
        return instant.is_valid and instant.weekday not in (0, 6)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def shift(
        self,
        date: DateLike,
        unit: CalendarUnit | str,
        amount: int | float,
        tz: str | None = None,
    ) -> CivilInstant:
        return self.arithmetic.shift(self.resolver.resolve(date, tz), unit, amount)

    def add_days(self, date: DateLike, days: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.DAY, days, tz)

    def subtract_days(self, date: DateLike, days: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.DAY, -days, tz)

    def add_months(self, date: DateLike, months: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.MONTH, months, tz)

    def subtract_months(self, date: DateLike, months: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.MONTH, -months, tz)

    def add_years(self, date: DateLike, years: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.YEAR, years, tz)

    def subtract_years(self, date: DateLike, years: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.YEAR, -years, tz)

    def add_hours(self, date: DateLike, hours: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.HOUR, hours, tz)

    def subtract_hours(self, date: DateLike, hours: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.HOUR, -hours, tz)

    def add_minutes(self, date: DateLike, minutes: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.MINUTE, minutes, tz)

    def subtract_minutes(self, date: DateLike, minutes: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.MINUTE, -minutes, tz)

    def add_seconds(self, date: DateLike, seconds: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.SECOND, seconds, tz)

    def subtract_seconds(self, date: DateLike, seconds: int, tz: str | None = None) -> CivilInstant:
        return self.shift(date, CalendarUnit.SECOND, -seconds, tz)

    def add_milliseconds(
        self, date: DateLike, milliseconds: int, tz: str | None = None
    ) -> CivilInstant:
        return self.shift(date, CalendarUnit.MILLISECOND, milliseconds, tz)

    def subtract_milliseconds(
        self, date: DateLike, milliseconds: int, tz: str | None = None
    ) -> CivilInstant:
        return self.shift(date, CalendarUnit.MILLISECOND, -milliseconds, tz)

    # =========================================================================
    # PARTS
    # =========================================================================

    def get_year(self, date: DateLike, tz: str | None = None) -> int | float:
        return self.resolver.resolve(date, tz).year

    def get_month(self, date: DateLike, tz: str | None = None) -> int | float:
        """Month 1-12."""
        return self.resolver.resolve(date, tz).month

    def get_day(self, date: DateLike, tz: str | None = None) -> int | float:
        """Day of week 0-6, Sunday = 0."""
        return self.resolver.resolve(date, tz).weekday

    def get_month_name(
        self,
        date: DateLike,
        tz: str | None = None,
        locale: str | None = None,
    ) -> str:
        instant = self.resolver.resolve(date, tz)
        if not instant.is_valid:
            return self.config.invalid_date_marker
        default = self.config.default_locale
        return month_name(instant.moment, locale or default, fallback=default)

    def get_day_name(
        self,
        date: DateLike,
        tz: str | None = None,
        locale: str | None = None,
    ) -> str:
        instant = self.resolver.resolve(date, tz)
        if not instant.is_valid:
            return self.config.invalid_date_marker
        default = self.config.default_locale
        return day_name(instant.moment, locale or default, fallback=default)

    # =========================================================================
    # RANGES
    # =========================================================================

    def is_between(
        self,
        date: DateLike,
        start: DateLike,
        end: DateLike,
        tz: str | None = None,
    ) -> bool:
        """Inclusive at both ends. start and end may come in either order."""
        d = self.resolver.resolve(date, tz)
        s = self.resolver.resolve(start, tz)
        e = self.resolver.resolve(end, tz)
        if not (d.is_valid and s.is_valid and e.is_valid):
            return False
        low, high = sorted((s, e), key=lambda instant: instant.absolute_instant)
        return low <= d <= high

    def days_between(self, date1: DateLike, date2: DateLike, tz: str | None = None) -> int | float:
        """Whole calendar days between the two civil dates (time of day ignored)."""
        d1, d2 = self._resolve_pair(date1, date2, tz)
        if not (d1.is_valid and d2.is_valid):
            return math.nan
        return abs(d1.moment.date().toordinal() - d2.moment.date().toordinal())

    def start_of(
        self,
        date: DateLike,
        granularity: Granularity | str,
        tz: str | None = None,
        week_start_day: int | None = None,
    ) -> CivilInstant:
        return self.boundaries.start_of(
            self.resolver.resolve(date, tz),
            granularity,
            self._week_start(week_start_day),
        )

    def end_of(
        self,
        date: DateLike,
        granularity: Granularity | str,
        tz: str | None = None,
        week_start_day: int | None = None,
    ) -> CivilInstant:
        return self.boundaries.end_of(
            self.resolver.resolve(date, tz),
            granularity,
            self._week_start(week_start_day),
        )

    def _week_start(self, week_start_day: int | None) -> int:
        if week_start_day is None:
            return self.config.week_start_day
        if not 0 <= week_start_day <= 6:
            raise ValueError(f"week_start_day must be 0-6, got {week_start_day}")
        return week_start_day

    def start_of_day(self, date: DateLike, tz: str | None = None) -> CivilInstant:
        return self.start_of(date, Granularity.DAY, tz)

    def end_of_day(self, date: DateLike, tz: str | None = None) -> CivilInstant:
        return self.end_of(date, Granularity.DAY, tz)

    def start_of_week(
        self, date: DateLike, tz: str | None = None, week_start_day: int | None = None
    ) -> CivilInstant:
        return self.start_of(date, Granularity.WEEK, tz, week_start_day)

    def end_of_week(
        self, date: DateLike, tz: str | None = None, week_start_day: int | None = None
    ) -> CivilInstant:
        return self.end_of(date, Granularity.WEEK, tz, week_start_day)

    def start_of_month(self, date: DateLike, tz: str | None = None) -> CivilInstant:
        return self.start_of(date, Granularity.MONTH, tz)

    def end_of_month(self, date: DateLike, tz: str | None = None) -> CivilInstant:
        return self.end_of(date, Granularity.MONTH, tz)

    # =========================================================================
    # ISO / FISCAL
    # =========================================================================

    def get_iso_week(self, date: DateLike, tz: str | None = None) -> int | float:
        return iso.iso_week(self.resolver.resolve(date, tz))

    def get_iso_year(self, date: DateLike, tz: str | None = None) -> int | float:
        return iso.iso_year(self.resolver.resolve(date, tz))

    def get_quarter(self, date: DateLike, tz: str | None = None) -> int | float:
        return iso.quarter(self.resolver.resolve(date, tz))

    def start_of_quarter(self, date: DateLike, tz: str | None = None) -> CivilInstant:
        return self.start_of(date, Granularity.QUARTER, tz)

    def end_of_quarter(self, date: DateLike, tz: str | None = None) -> CivilInstant:
        return self.end_of(date, Granularity.QUARTER, tz)

    # =========================================================================
    # UNIX / UTC
    # =========================================================================

    def to_unix_timestamp(self, date: DateLike, tz: str | None = None) -> int | float:
        return self.converter.to_unix_seconds(date, tz)

    def from_unix_timestamp(self, timestamp: int | float, tz: str | None = None) -> CivilInstant:
        return self.converter.from_unix_seconds(timestamp, tz)

    def to_utc(self, date: DateLike) -> CivilInstant:
        return self.converter.to_utc(date)

    def from_utc(self, date: DateLike, tz: str) -> CivilInstant:
        return self.converter.from_utc(date, tz)
