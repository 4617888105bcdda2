"""
PURPOSE: Time utilities for UTC clock access and ISO-8601 timestamp rendering.
"""

from datetime import datetime, timezone
from typing import Optional


def get_utc_now() -> datetime:
    """
    PURPOSE: Return the current UTC time as a timezone-aware datetime object.

    Returns:
        datetime: Current UTC time with timezone info.
    """
    return datetime.now(timezone.utc)


def to_iso_timestamp(dt: Optional[datetime] = None) -> str:
    """
    PURPOSE: Render a datetime as an ISO-8601 UTC timestamp with millisecond precision.

    Naive datetimes are assumed to already be in UTC. The UTC offset is written
    as a trailing "Z", e.g. "2024-02-19T10:00:00.000Z".

    Args:
        dt: Optional datetime to render. If None, uses current UTC time.

    Returns:
        str: ISO-8601 timestamp string.
    """
    if dt is None:
        dt = get_utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    return dt.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
