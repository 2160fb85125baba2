"""
Timezone utilities for datetime coordinates.

Naive and timezone-aware datetimes cannot be compared with each other, so
intervals over datetimes are normalized to UTC before they are stored or
used as a query. Naive values are interpreted in the configured local
timezone.
"""

from datetime import datetime, date, time as dt_time
import time as _time
import pytz


# Default timezone - can be overridden by config
_local_timezone_name: str = "UTC"


def set_timezone(timezone_name: str):
    """Set the timezone used to interpret naive datetimes."""
    global _local_timezone_name
    _local_timezone_name = timezone_name


def get_timezone_name() -> str:
    return _local_timezone_name


def get_local_timezone():
    """
    Get the local timezone as a pytz timezone object.

    Falls back to the system timezone, then to a fixed offset, when the
    configured name is unknown to pytz.
    """
    try:
        return pytz.timezone(_local_timezone_name)
    except pytz.UnknownTimeZoneError:
        pass
    try:
        return pytz.timezone(_time.tzname[0])
    except pytz.UnknownTimeZoneError:
        if _time.localtime().tm_isdst:
            offset_seconds = -_time.altzone
        else:
            offset_seconds = -_time.timezone
        return pytz.FixedOffset(offset_seconds // 60)


def to_utc_datetime(dt: datetime) -> datetime:
    """
    Convert a datetime to UTC.

    Args:
        dt: A datetime object. Naive values are taken as local time.

    Returns:
        A timezone-aware datetime in UTC.
    """
    if dt.tzinfo is None:
        local_tz = get_local_timezone()
        local_dt = local_tz.localize(dt)
        return local_dt.astimezone(pytz.UTC)
    return dt.astimezone(pytz.UTC)


def to_utc_coordinate(value):
    """
    Normalize a date or datetime coordinate to an aware UTC datetime.

    A plain date becomes local midnight of that day. Other values are
    returned unchanged.
    """
    if isinstance(value, datetime):
        return to_utc_datetime(value)
    if isinstance(value, date):
        return to_utc_datetime(datetime.combine(value, dt_time.min))
    return value
