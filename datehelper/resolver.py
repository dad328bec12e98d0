"""
Resolve raw date input plus an optional zone into a CivilInstant.

Input with an explicit offset ("Z", "+05:30") pins the absolute instant;
the zone only changes which civil fields are reported. Naive input
(including date-only strings and naive datetimes) is wall-clock time in
the zone. Unparseable input resolves to an invalid CivilInstant and never
raises. Unknown zones always raise.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from datehelper.config import DateHelperConfig
from datehelper.types import CivilInstant
from datehelper.zones import ZoneOracle, now_utc, to_epoch_ms

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(
    r"""
    ^(?P<year>\d{4})
    (?:[-/](?P<month>\d{1,2})
        (?:[-/](?P<day>\d{1,2})
            (?:[Tt\s]+(?P<hour>\d{1,2}):(?P<minute>\d{2})
                (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?
                \s*(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)?
            )?
        )?
    )?$
    """,
    re.VERBOSE,
)
_TIME_SEPARATOR_RE = re.compile(r"[Tt\s]")


@dataclass(frozen=True)
class ParsedDate:
    """Fields lifted from a date string."""

    wall: datetime
    offset: timedelta | None
    date_only: bool


def _parse_offset(text: str) -> timedelta:
    if text in ("Z", "z"):
        return timedelta(0)
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:] or 0)
    if hours > 23 or minutes > 59:
        raise ValueError(f"Offset out of range: {text}")
    return sign * timedelta(hours=hours, minutes=minutes)


def _parse_loose(text: str) -> ParsedDate | None:
    """Shapes fromisoformat rejects: YYYY, YYYY-MM, single-digit fields, "z"."""
    match = _DATE_RE.match(text)
    if match is None:
        return None

    parts = match.groupdict()
    fraction = parts["fraction"] or ""
    try:
        wall = datetime(
            int(parts["year"]),
            int(parts["month"] or 1),
            int(parts["day"] or 1),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            int(fraction[:3].ljust(3, "0")) * 1000,
        )
        offset = _parse_offset(parts["offset"]) if parts["offset"] else None
    except ValueError:
        return None

    return ParsedDate(
        wall=wall,
        offset=offset,
        date_only=parts["hour"] is None,
    )


def parse_date_string(text: str) -> ParsedDate | None:
    """
    Parse an ISO-ish date string. Returns None if it isn't one.

    Accepts YYYY, YYYY-MM, YYYY-MM-DD, YYYY/MM/DD, and any of those followed
    by a T or space separated time (HH:mm[:ss[.fff]]) with an optional
    Z or +-HH[:MM] offset. Fields out of range (Feb 30, 25:00) are rejected
    rather than rolled over.
    """
    normalized = text.strip().replace("/", "-")
    try:
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return _parse_loose(normalized)

    return ParsedDate(
        wall=_truncate_to_ms(dt.replace(tzinfo=None)),
        offset=dt.utcoffset(),
        date_only=_TIME_SEPARATOR_RE.search(normalized) is None,
    )


def _truncate_to_ms(dt: datetime) -> datetime:
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)


class Resolver:
    """
    Turns DateLike input into CivilInstants.

    All civil-fields -> instant conversions in the package funnel through
    from_wall, so gap/fold handling lives in one place (the oracle).
    """

    def __init__(self, oracle: ZoneOracle, config: DateHelperConfig):
        self.oracle = oracle
        self.config = config

    def zone_for(self, tz: str | None) -> str:
        """
        The zone a call should use: tz if given, else the configured default.

        Raises:
            UnknownTimezoneError: If the zone is not in the IANA database
        """
        return self.oracle.validate(tz or self.config.default_timezone)

    def from_instant(self, epoch_ms: int, tz_name: str) -> CivilInstant:
        try:
            moment = self.oracle.civil_from_instant(epoch_ms, tz_name)
        except OverflowError:
            logger.debug(f"Instant {epoch_ms}ms is outside the supported calendar range")
            return CivilInstant.invalid(tz_name)
        return CivilInstant(moment=moment, timezone_id=tz_name)

    def from_wall(self, wall: datetime, tz_name: str) -> CivilInstant:
        """Resolve naive wall-clock fields in tz_name."""
        try:
            epoch_ms = self.oracle.instant_from_civil(wall, tz_name)
        except OverflowError:
            logger.debug(f"Wall time {wall} is outside the supported calendar range")
            return CivilInstant.invalid(tz_name)
        return self.from_instant(epoch_ms, tz_name)

    def reanchor(self, instant: CivilInstant, tz_name: str) -> CivilInstant:
        """Same absolute instant, civil fields reported in tz_name."""
        if not instant.is_valid:
            return CivilInstant.invalid(tz_name)
        return self.from_instant(instant.absolute_instant, tz_name)

    def now(self, tz: str | None = None) -> CivilInstant:
        return self.from_instant(to_epoch_ms(now_utc()), self.zone_for(tz))

    def resolve(self, value: object, tz: str | None = None) -> CivilInstant:
        """
        Resolve a date input in a zone.

        A CivilInstant passed without tz keeps its own zone.

        Raises:
            UnknownTimezoneError: If tz (or the configured default) is unknown
        """
        if isinstance(value, CivilInstant) and not tz:
            return value

        tz_name = self.zone_for(tz)

        if isinstance(value, CivilInstant):
            return self.reanchor(value, tz_name)

        if isinstance(value, datetime):
            if value.tzinfo is not None and value.utcoffset() is not None:
                return self.from_instant(to_epoch_ms(value), tz_name)
            return self.from_wall(_truncate_to_ms(value), tz_name)

        if isinstance(value, date):
            return self.from_wall(datetime(value.year, value.month, value.day), tz_name)

        if isinstance(value, str):
            parsed = parse_date_string(value)
            if parsed is not None:
                return self.resolve_parsed(parsed, tz_name)

        logger.debug(f"Unparseable date input {value!r}, resolving as invalid")
        return CivilInstant.invalid(tz_name)

    def resolve_parsed(self, parsed: ParsedDate, tz_name: str) -> CivilInstant:
        if parsed.offset is None:
            return self.from_wall(parsed.wall, tz_name)
        aware = parsed.wall.replace(tzinfo=timezone(parsed.offset))
        return self.from_instant(to_epoch_ms(aware), tz_name)
