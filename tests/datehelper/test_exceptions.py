"""Tests for datehelper/exceptions.py - typed call errors."""

import pytest

from datehelper.exceptions import (
    DateHelperError,
    UnknownTimezoneError,
    MissingArgumentError,
    InvalidTimestampError,
    InvalidAmountError,
)


class TestExceptionInheritance:
    """All call errors should inherit from DateHelperError."""

    def test_unknown_timezone_inherits(self):
        assert issubclass(UnknownTimezoneError, DateHelperError)
        assert issubclass(UnknownTimezoneError, ValueError)

    def test_missing_argument_inherits(self):
        assert issubclass(MissingArgumentError, DateHelperError)

    def test_invalid_timestamp_is_type_error(self):
        assert issubclass(InvalidTimestampError, DateHelperError)
        assert issubclass(InvalidTimestampError, TypeError)

    def test_invalid_amount_inherits(self):
        assert issubclass(InvalidAmountError, DateHelperError)


class TestUnknownTimezoneError:
    def test_stores_name(self):
        assert UnknownTimezoneError("Mars/Base").tz_name == "Mars/Base"

    def test_message_includes_name(self):
        assert "Mars/Base" in str(UnknownTimezoneError("Mars/Base"))

    def test_can_be_caught_as_base(self):
        with pytest.raises(DateHelperError):
            raise UnknownTimezoneError("Mars/Base")


class TestMissingArgumentError:
    def test_names_argument(self):
        err = MissingArgumentError("timestamp")
        assert err.argument == "timestamp"
        assert "timestamp" in str(err)


class TestInvalidTimestampError:
    def test_stores_value(self):
        err = InvalidTimestampError("soon")
        assert err.value == "soon"
        assert "'soon'" in str(err)
