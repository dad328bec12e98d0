"""Timezone-aware date formatting, comparison and calendar arithmetic."""

from datehelper.config import DateHelperConfig
from datehelper.exceptions import (
    DateHelperError,
    UnknownTimezoneError,
    MissingArgumentError,
    InvalidTimestampError,
    InvalidAmountError,
)
from datehelper.helper import DateHelper
from datehelper.types import CalendarUnit, CivilInstant, DateLike, Granularity
from datehelper.zones import SYSTEM_TIMEZONE, UTC_TIMEZONE, ZoneOracle

_default_helper = DateHelper()

# Module-level API, bound to a DateHelper with default configuration
now = _default_helper.now
parse_date = _default_helper.parse_date
format_date = _default_helper.format_date
format_date_time = _default_helper.format_date_time
is_same_day = _default_helper.is_same_day
is_before = _default_helper.is_before
is_after = _default_helper.is_after
is_weekend = _default_helper.is_weekend
is_weekday = _default_helper.is_weekday
shift = _default_helper.shift
add_days = _default_helper.add_days
subtract_days = _default_helper.subtract_days
add_months = _default_helper.add_months
subtract_months = _default_helper.subtract_months
add_years = _default_helper.add_years
subtract_years = _default_helper.subtract_years
add_hours = _default_helper.add_hours
subtract_hours = _default_helper.subtract_hours
add_minutes = _default_helper.add_minutes
subtract_minutes = _default_helper.subtract_minutes
add_seconds = _default_helper.add_seconds
subtract_seconds = _default_helper.subtract_seconds
add_milliseconds = _default_helper.add_milliseconds
subtract_milliseconds = _default_helper.subtract_milliseconds
get_year = _default_helper.get_year
get_month = _default_helper.get_month
get_day = _default_helper.get_day
get_month_name = _default_helper.get_month_name
get_day_name = _default_helper.get_day_name
is_between = _default_helper.is_between
days_between = _default_helper.days_between
start_of = _default_helper.start_of
end_of = _default_helper.end_of
start_of_day = _default_helper.start_of_day
end_of_day = _default_helper.end_of_day
start_of_week = _default_helper.start_of_week
end_of_week = _default_helper.end_of_week
start_of_month = _default_helper.start_of_month
end_of_month = _default_helper.end_of_month
get_iso_week = _default_helper.get_iso_week
get_iso_year = _default_helper.get_iso_year
get_quarter = _default_helper.get_quarter
start_of_quarter = _default_helper.start_of_quarter
end_of_quarter = _default_helper.end_of_quarter
to_unix_timestamp = _default_helper.to_unix_timestamp
from_unix_timestamp = _default_helper.from_unix_timestamp
to_utc = _default_helper.to_utc
from_utc = _default_helper.from_utc

__all__ = [
    # Composition
    "DateHelper", "DateHelperConfig", "ZoneOracle",
    "SYSTEM_TIMEZONE", "UTC_TIMEZONE",
    # Types
    "CalendarUnit", "CivilInstant", "DateLike", "Granularity",
    # Errors
    "DateHelperError", "UnknownTimezoneError", "MissingArgumentError",
    "InvalidTimestampError", "InvalidAmountError",
    # Parsing & formatting
    "now", "parse_date", "format_date", "format_date_time",
    # Comparison
    "is_same_day", "is_before", "is_after", "is_weekend", "is_weekday",
    # Arithmetic
    "shift", "add_days", "subtract_days", "add_months", "subtract_months",
    "add_years", "subtract_years", "add_hours", "subtract_hours",
    "add_minutes", "subtract_minutes", "add_seconds", "subtract_seconds",
    "add_milliseconds", "subtract_milliseconds",
    # Parts
    "get_year", "get_month", "get_day", "get_month_name", "get_day_name",
    # Ranges
    "is_between", "days_between", "start_of", "end_of",
    "start_of_day", "end_of_day", "start_of_week", "end_of_week",
    "start_of_month", "end_of_month",
    # ISO / fiscal
    "get_iso_week", "get_iso_year", "get_quarter",
    "start_of_quarter", "end_of_quarter",
    # Unix / UTC
    "to_unix_timestamp", "from_unix_timestamp", "to_utc", "from_utc",
]
