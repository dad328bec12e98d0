"""Date helper configuration."""

import os

from pydantic import BaseModel, Field, field_validator

from datehelper.zones import SYSTEM_TIMEZONE, is_known_timezone


class DateHelperConfig(BaseModel):
    """
    Date helper configuration.

    The default timezone is explicit: "system" means the host's local zone,
    anything else must be an IANA identifier.
    """

    default_timezone: str = Field(
        default=SYSTEM_TIMEZONE,
        description="Zone used when a call passes no tz ('system' or IANA id)",
    )
    default_locale: str = Field(
        default="en",
        description="Locale for month and day names",
        min_length=2,
    )
    week_start_day: int = Field(
        default=0,
        description="First day of the week (0 = Sunday ... 6 = Saturday)",
        ge=0,
        le=6,
    )
    invalid_date_marker: str = Field(
        default="Invalid Date",
        description="Text returned when formatting an invalid date",
    )

    model_config = {"frozen": True}

    @field_validator("default_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        if value != SYSTEM_TIMEZONE and not is_known_timezone(value):
            raise ValueError(f"Unknown timezone: {value}")
        return value

    @classmethod
    def from_env(cls) -> "DateHelperConfig":
        """
        Build config from DATEHELPER_* environment variables.

        Unset variables keep their defaults.
        """
        values = {}
        if tz := os.environ.get("DATEHELPER_DEFAULT_TIMEZONE"):
            values["default_timezone"] = tz
        if locale := os.environ.get("DATEHELPER_DEFAULT_LOCALE"):
            values["default_locale"] = locale
        if week_start := os.environ.get("DATEHELPER_WEEK_START_DAY"):
            values["week_start_day"] = week_start
        return cls(**values)
