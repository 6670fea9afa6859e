"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in car_rental.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- ensure_aware(): Attach UTC to naive values read back from the store
- to_utc(): Normalize a datetime to UTC before persisting
- to_millis() / from_millis(): Epoch milliseconds used on the GraphQL wire
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional

from car_rental.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    settings = get_settings()
    tz_str = settings.timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Make a datetime timezone-aware.

    Stores without timezone support (e.g. SQLite) hand back naive values;
    those were written as UTC, so UTC is attached.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to UTC, treating naive values as UTC."""
    if dt is None:
        return None
    return ensure_aware(dt).astimezone(dt_timezone.utc)


def to_millis(dt: datetime) -> int:
    """
    Convert a datetime to integer milliseconds since the Unix epoch.

    Args:
        dt: datetime object (timezone-aware or naive UTC)

    Returns:
        Milliseconds since epoch
    """
    delta = to_utc(dt) - datetime(1970, 1, 1, tzinfo=dt_timezone.utc)
    return (delta.days * 86_400_000) + (delta.seconds * 1000) + (delta.microseconds // 1000)


def from_millis(value: int) -> datetime:
    """
    Convert milliseconds since epoch to a UTC datetime.

    Args:
        value: Milliseconds since epoch

    Returns:
        timezone-aware UTC datetime
    """
    seconds, millis = divmod(int(value), 1000)
    return datetime.fromtimestamp(seconds, tz=dt_timezone.utc).replace(microsecond=millis * 1000)
