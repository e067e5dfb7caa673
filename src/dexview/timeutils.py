"""Timezone resolution and display formatting for Unix-second timestamps."""

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def resolve_timezone(name: str) -> tzinfo:
    """Return the tzinfo for an IANA zone name. "UTC" needs no tz database."""
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def from_unix(timestamp: int, tz: tzinfo = timezone.utc) -> datetime:
    """Return a timezone-aware datetime for Unix seconds."""
    return datetime.fromtimestamp(timestamp, tz)


def format_timestamp(timestamp: int, tz: tzinfo = timezone.utc) -> str:
    """Format as ``h:mm:ssa d MMM D``, e.g. ``3:04:05pm 2 Jan 4``.

    ``d`` is the weekday number with Sunday as 0. Month names are fixed
    English abbreviations, independent of the process locale.
    """
    moment = from_unix(timestamp, tz)
    hour = moment.hour % 12 or 12
    meridiem = "am" if moment.hour < 12 else "pm"
    weekday = moment.isoweekday() % 7
    return (
        f"{hour}:{moment.minute:02d}:{moment.second:02d}{meridiem} "
        f"{weekday} {_MONTHS[moment.month - 1]} {moment.day}"
    )
