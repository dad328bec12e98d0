"""Typed exceptions for misconfigured date helper calls.

Malformed date *data* never raises; it produces an invalid CivilInstant.
These exceptions are for bad call sites: unknown zones, missing or
non-numeric arguments.
"""


class DateHelperError(Exception):
    """Base class for date helper call errors."""


class UnknownTimezoneError(DateHelperError, ValueError):
    """Timezone identifier is not in the IANA database."""

    def __init__(self, tz_name: object):
        self.tz_name = tz_name
        super().__init__(f"Unknown timezone: {tz_name}")


class MissingArgumentError(DateHelperError, ValueError):
    """A required argument (date, timestamp or target zone) was None."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Missing required argument: {argument}")


class InvalidTimestampError(DateHelperError, TypeError):
    """Timestamp argument is not a finite number."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Timestamp must be a finite number, got {value!r}")


class InvalidAmountError(DateHelperError, ValueError):
    """
    Shift amount is not usable for the unit.

    Day, month and year shifts need a whole number. Sub-day shifts accept
    any finite number and round to the millisecond.
    """

    def __init__(self, amount: object, unit: str):
        self.amount = amount
        self.unit = unit
        super().__init__(f"Cannot shift by {amount!r} {unit}(s)")
