"""
Timezone oracle over the IANA database.

Two capabilities, both keyed by a zone identifier:
- civil fields from an absolute instant (epoch milliseconds)
- absolute instant from naive wall-clock fields

The identifier "system" means the host's local zone. Every DST decision in
the package goes through these two methods.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datehelper.exceptions import UnknownTimezoneError

SYSTEM_TIMEZONE = "system"
UTC_TIMEZONE = "UTC"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)


def now_utc() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def to_epoch_ms(dt: datetime) -> int:
    """
    Milliseconds since the Unix epoch for an aware datetime.

    Sub-millisecond precision is floored.
    """
    if dt.tzinfo is None:
        raise ValueError(
            "Cannot convert naive datetime. Datetime must be timezone-aware."
        )
    return (dt - EPOCH) // ONE_MILLISECOND


def is_known_timezone(tz_name: str) -> bool:
    """Whether tz_name is in the IANA database."""
    if not isinstance(tz_name, str) or not tz_name:
        return False
    try:
        ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


class ZoneOracle:
    """
    Civil time <-> absolute instant conversion for IANA zones.

    Non-existent wall times (spring-forward gap) resolve forward past the
    gap. Repeated wall times (fall-back fold) resolve to the first
    occurrence.
    """

    def get_zone(self, tz_name: str) -> tzinfo | None:
        """
        Look up a zone. Returns None for the system zone.

        Raises:
            UnknownTimezoneError: If tz_name is not in the IANA database
        """
        if tz_name == SYSTEM_TIMEZONE:
            return None
        if not is_known_timezone(tz_name):
            raise UnknownTimezoneError(tz_name)
        return ZoneInfo(tz_name)

    def validate(self, tz_name: str) -> str:
        """Return tz_name unchanged, or raise UnknownTimezoneError."""
        self.get_zone(tz_name)
        return tz_name

    def civil_from_instant(self, epoch_ms: int, tz_name: str) -> datetime:
        """Aware datetime in tz_name for an absolute instant."""
        zone = self.get_zone(tz_name)
        moment = EPOCH + timedelta(milliseconds=epoch_ms)
        if zone is None:
            return moment.astimezone()
        return moment.astimezone(zone)

    def instant_from_civil(self, wall: datetime, tz_name: str) -> int:
        """
        Absolute instant (epoch ms) for naive wall-clock fields in tz_name.

        fold=0 gives the first occurrence inside a fold and the
        pre-transition offset inside a gap, which lands past the gap.
        """
        zone = self.get_zone(tz_name)
        wall = wall.replace(tzinfo=None, fold=0)
        if zone is None:
            return to_epoch_ms(wall.astimezone())
        return to_epoch_ms(wall.replace(tzinfo=zone))
