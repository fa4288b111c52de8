"""
Timezone Utilities - Centralized timezone handling
"""
from datetime import date, datetime
from typing import Optional
import pytz

from habitflow.core.config import settings


def get_app_tz(tz_name: Optional[str] = None):
    """
    Get the timezone object used for calendar-day computations

    Args:
        tz_name: Optional IANA timezone name, defaults to APP_TIMEZONE

    Returns:
        pytz timezone
    """
    return pytz.timezone(tz_name or settings.APP_TIMEZONE)


def is_valid_timezone(tz_name: str) -> bool:
    """Check a name against the pytz timezone database"""
    return tz_name in pytz.all_timezones_set


def get_local_now(tz_name: Optional[str] = None) -> datetime:
    """
    Get current datetime in the application timezone

    Returns:
        Timezone-aware datetime object
    """
    return datetime.now(get_app_tz(tz_name))


def get_local_today(tz_name: Optional[str] = None) -> date:
    """
    Get today's date in the application timezone

    Returns:
        date object for today
    """
    return get_local_now(tz_name).date()


def get_utc_now() -> datetime:
    """Current timezone-aware UTC datetime, used for stored timestamps"""
    return datetime.now(pytz.utc)
