"""
Display-token formatting for civil date/times.

Tokens follow the familiar YYYY-MM-DD HH:mm:ss vocabulary. Text inside
square brackets is emitted literally. Month and day names come from the
CLDR tables shipped with Babel.
"""

import logging
import re
from datetime import datetime

from babel import Locale, UnknownLocaleError
from babel.dates import get_day_names, get_month_names

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"

_TOKEN_RE = re.compile(
    r"\[([^\]]*)]|YYYY|YY|M{1,4}|D{1,2}|d{1,4}|H{1,2}|h{1,2}|m{1,2}|s{1,2}|SSS|A|a|Z{1,2}"
)


def parse_locale(locale: str | None, fallback: str = FALLBACK_LOCALE) -> Locale:
    """
    Parse a locale identifier ("fr", "pt_BR", "en-US").

    Unknown identifiers fall back to `fallback`, and an unknown fallback to
    English.
    """
    for candidate in (locale, fallback):
        if not candidate:
            continue
        try:
            return Locale.parse(candidate.replace("-", "_"))
        except (UnknownLocaleError, ValueError):
            logger.debug(f"Unknown locale {candidate!r}, trying the next fallback")
    return Locale.parse(FALLBACK_LOCALE)


def month_name(
    moment: datetime,
    locale: str | None = None,
    width: str = "wide",
    fallback: str = FALLBACK_LOCALE,
) -> str:
    return get_month_names(width, locale=parse_locale(locale, fallback))[moment.month]


def day_name(
    moment: datetime,
    locale: str | None = None,
    width: str = "wide",
    fallback: str = FALLBACK_LOCALE,
) -> str:
    # Babel keys days 0 = Monday, same as datetime.weekday()
    return get_day_names(width, locale=parse_locale(locale, fallback))[moment.weekday()]


def format_offset(moment: datetime, separator: str = ":") -> str:
    """UTC offset as +HH:MM (or +HHMM with separator='')."""
    total_minutes = int(moment.utcoffset().total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def format_instant(
    moment: datetime,
    pattern: str,
    locale: str | None = None,
    fallback: str = FALLBACK_LOCALE,
) -> str:
    """Render an aware datetime with display tokens."""
    hour12 = moment.hour % 12 or 12

    tokens = {
        "YYYY": lambda: f"{moment.year:04d}",
        "YY": lambda: f"{moment.year % 100:02d}",
        "M": lambda: str(moment.month),
        "MM": lambda: f"{moment.month:02d}",
        "MMM": lambda: month_name(moment, locale, "abbreviated", fallback),
        "MMMM": lambda: month_name(moment, locale, fallback=fallback),
        "D": lambda: str(moment.day),
        "DD": lambda: f"{moment.day:02d}",
        "d": lambda: str(moment.isoweekday() % 7),
        "dd": lambda: day_name(moment, locale, "short", fallback),
        "ddd": lambda: day_name(moment, locale, "abbreviated", fallback),
        "dddd": lambda: day_name(moment, locale, fallback=fallback),
        "H": lambda: str(moment.hour),
        "HH": lambda: f"{moment.hour:02d}",
        "h": lambda: str(hour12),
        "hh": lambda: f"{hour12:02d}",
        "m": lambda: str(moment.minute),
        "mm": lambda: f"{moment.minute:02d}",
        "s": lambda: str(moment.second),
        "ss": lambda: f"{moment.second:02d}",
        "SSS": lambda: f"{moment.microsecond // 1000:03d}",
        "A": lambda: "AM" if moment.hour < 12 else "PM",
        "a": lambda: "am" if moment.hour < 12 else "pm",
        "Z": lambda: format_offset(moment),
        "ZZ": lambda: format_offset(moment, separator=""),
    }

    def replace(match: re.Match) -> str:
        literal = match.group(1)
        if literal is not None:
            return literal
        return tokens[match.group(0)]()

    return _TOKEN_RE.sub(replace, pattern)
