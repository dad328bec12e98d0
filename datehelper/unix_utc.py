"""
Unix timestamp and UTC conversion.

Timestamps are timezone-independent; a zone only affects how naive input
is read (to_unix_seconds) or which civil fields are reported
(from_unix_seconds).

to_utc reads a bare date string ("2025-02-15") as midnight UTC, unlike
every other entry point, which reads it as midnight in the zone. That
special case stays confined to to_utc.
"""

import math
from numbers import Real

from datehelper.exceptions import InvalidTimestampError, MissingArgumentError
from datehelper.resolver import Resolver, parse_date_string
from datehelper.types import CivilInstant
from datehelper.zones import UTC_TIMEZONE


class UnixUtcConverter:
    """Conversions between CivilInstants, Unix seconds and UTC."""

    def __init__(self, resolver: Resolver):
        self.resolver = resolver

    def to_unix_seconds(self, value: object, tz: str | None = None) -> int | float:
        """
        Whole seconds since the epoch (floored). NaN for unparseable input.

        Raises:
            MissingArgumentError: If value is None
            UnknownTimezoneError: If tz is not a known zone
        """
        if value is None:
            raise MissingArgumentError("date")
        instant = self.resolver.resolve(value, tz)
        return instant.unix()

    def from_unix_seconds(self, seconds: object, tz: str | None = None) -> CivilInstant:
        """
        Instant for a Unix timestamp; fractions kept to the millisecond.

        Raises:
            MissingArgumentError: If seconds is None
            InvalidTimestampError: If seconds is not a finite real number
            UnknownTimezoneError: If tz is not a known zone
        """
        if seconds is None:
            raise MissingArgumentError("timestamp")
        if isinstance(seconds, bool) or not isinstance(seconds, Real):
            raise InvalidTimestampError(seconds)
        if not math.isfinite(seconds):
            raise InvalidTimestampError(seconds)

        tz_name = self.resolver.zone_for(tz)
        return self.resolver.from_instant(round(seconds * 1000), tz_name)

    def to_utc(self, value: object) -> CivilInstant:
        """Same instant reported in UTC. Bare date strings are UTC midnight."""
        if isinstance(value, str):
            parsed = parse_date_string(value)
            if parsed is not None and parsed.date_only:
                return self.resolver.from_wall(parsed.wall, UTC_TIMEZONE)

        instant = self.resolver.resolve(value)
        return self.resolver.reanchor(instant, UTC_TIMEZONE)

    def from_utc(self, value: object, tz: str) -> CivilInstant:
        """
        Report a UTC instant in tz. Naive input is read as UTC.

        Raises:
            MissingArgumentError: If tz is missing
            UnknownTimezoneError: If tz is not a known zone
        """
        if not tz:
            raise MissingArgumentError("tz")
        tz_name = self.resolver.zone_for(tz)
        instant = self.resolver.resolve(value, UTC_TIMEZONE)
        return self.resolver.reanchor(instant, tz_name)
