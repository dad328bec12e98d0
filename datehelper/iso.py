"""
ISO-8601 week numbering and quarters.

Weeks run Monday-Sunday; week 1 is the week holding the year's first
Thursday, so the ISO week-year differs from the civil year for a few days
around New Year.
"""

import math
from datetime import date, timedelta

from datehelper.types import CivilInstant


def iso_week_date(civil: date) -> tuple[int, int]:
    """(ISO week-year, ISO week) for a civil date."""
    # The Thursday of this Monday-based week decides which year it belongs to
    thursday = civil + timedelta(days=3 - civil.weekday())
    week = (thursday.timetuple().tm_yday - 1) // 7 + 1
    return thursday.year, week


def iso_weeks_in_year(iso_year: int) -> int:
    """52 or 53. Dec 28 always falls in the year's last ISO week."""
    return iso_week_date(date(iso_year, 12, 28))[1]


def iso_week(instant: CivilInstant) -> int | float:
    if not instant.is_valid:
        return math.nan
    return iso_week_date(instant.moment.date())[1]


def iso_year(instant: CivilInstant) -> int | float:
    if not instant.is_valid:
        return math.nan
    return iso_week_date(instant.moment.date())[0]


def quarter(instant: CivilInstant) -> int | float:
    """Quarter 1-4 of the civil month."""
    if not instant.is_valid:
        return math.nan
    return (instant.month - 1) // 3 + 1
