"""
Day/Night period classification from local trip timestamps.

Day is the half-open interval [06:00, 18:00) of local wall-clock time;
everything else is Night. Timestamps are read as-is: an offset, if present,
is parsed but never converted.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

DAY_START_HOUR = 6
NIGHT_START_HOUR = 18

# Tried in order after datetime.fromisoformat()
FALLBACK_FORMATS = (
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
)


class Period(str, Enum):
    """Coarse time-of-day bucket."""

    DAY = "Day"
    NIGHT = "Night"


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse a local trip timestamp.

    Accepts ISO-8601 (``T`` or space separator, optional 3- or 6-digit
    fractional seconds, optional offset or trailing ``Z``) and a few
    day-first/year-first slash formats seen in fleet exports.

    Args:
        value: Timestamp string (anything else is rejected)

    Returns:
        Parsed datetime, or None if the value cannot be parsed
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def classify_period(timestamp) -> Period:
    """
    Map a local timestamp to Day or Night.

    Never raises. Unparseable input falls back to ``Period.DAY``; callers
    that care can detect this with ``parse_timestamp()``.

    Example:
        >>> classify_period("2024-03-01 06:00:00")
        <Period.DAY: 'Day'>
        >>> classify_period("2024-03-01T18:00:00")
        <Period.NIGHT: 'Night'>
    """
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return Period.DAY
    if DAY_START_HOUR <= parsed.hour < NIGHT_START_HOUR:
        return Period.DAY
    return Period.NIGHT
