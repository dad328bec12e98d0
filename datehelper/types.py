"""Value types for the date helper domain."""

import math
import operator
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Union

from datehelper.formatting import format_instant
from datehelper.zones import UTC_TIMEZONE, to_epoch_ms


class CalendarUnit(str, Enum):
    """Unit for shifting a CivilInstant."""

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class Granularity(str, Enum):
    """Period for start/end boundary calculations."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"


DEFAULT_FORMAT = "YYYY-MM-DDTHH:mm:ssZ"
UTC_FORMAT = "YYYY-MM-DDTHH:mm:ss[Z]"


@dataclass(frozen=True, eq=False)
class CivilInstant:
    """
    An absolute instant anchored to a timezone.

    moment is the aware datetime in timezone_id (millisecond precision), or
    None when the source input could not be parsed. Civil fields are read
    from moment; on an invalid instant every numeric field is NaN.

    Equality and ordering compare absolute instants. Invalid instants are
    never equal to, before, or after anything.
    """

    moment: datetime | None
    timezone_id: str

    @classmethod
    def invalid(cls, timezone_id: str) -> "CivilInstant":
        return cls(moment=None, timezone_id=timezone_id)

    @property
    def is_valid(self) -> bool:
        return self.moment is not None

    def _field(self, name: str) -> int | float:
        if self.moment is None:
            return math.nan
        return getattr(self.moment, name)

    @property
    def absolute_instant(self) -> int | float:
        """Milliseconds since the Unix epoch."""
        if self.moment is None:
            return math.nan
        return to_epoch_ms(self.moment)

    @property
    def year(self) -> int | float:
        return self._field("year")

    @property
    def month(self) -> int | float:
        return self._field("month")

    @property
    def day(self) -> int | float:
        return self._field("day")

    @property
    def hour(self) -> int | float:
        return self._field("hour")

    @property
    def minute(self) -> int | float:
        return self._field("minute")

    @property
    def second(self) -> int | float:
        return self._field("second")

    @property
    def millisecond(self) -> int | float:
        if self.moment is None:
            return math.nan
        return self.moment.microsecond // 1000

    @property
    def weekday(self) -> int | float:
        """Day of week, 0 = Sunday ... 6 = Saturday."""
        if self.moment is None:
            return math.nan
        return self.moment.isoweekday() % 7

    @property
    def utc_offset_minutes(self) -> int | float:
        if self.moment is None:
            return math.nan
        return int(self.moment.utcoffset().total_seconds()) // 60

    def to_datetime(self) -> datetime | None:
        return self.moment

    def wall_clock(self) -> datetime | None:
        """Civil fields as a naive datetime."""
        if self.moment is None:
            return None
        return self.moment.replace(tzinfo=None)

    def unix(self) -> int | float:
        """Whole seconds since the Unix epoch, floored."""
        if self.moment is None:
            return math.nan
        return self.absolute_instant // 1000

    def format(
        self,
        pattern: str | None = None,
        locale: str = "en",
        invalid_marker: str = "Invalid Date",
    ) -> str:
        """
        Render with display tokens (YYYY, MM, DD, HH, mm, ss, SSS, ...).

        With no pattern, renders ISO-8601 with the UTC offset; instants
        anchored to UTC get a literal "Z" suffix.
        """
        if self.moment is None:
            return invalid_marker
        if pattern is None:
            pattern = UTC_FORMAT if self.timezone_id == UTC_TIMEZONE else DEFAULT_FORMAT
        return format_instant(self.moment, pattern, locale)

    def isoformat(self) -> str:
        return self.format()

    def __str__(self) -> str:
        return self.format()

    def _compare(self, other: object, op) -> bool:
        if not isinstance(other, CivilInstant):
            return NotImplemented
        if not (self.is_valid and other.is_valid):
            return False
        return op(self.absolute_instant, other.absolute_instant)

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __lt__(self, other: object) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: object) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: object) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        return hash(self.absolute_instant if self.is_valid else None)


DateLike = Union[str, datetime, date, CivilInstant]
