# timezone_utils.py
"""
Timezone utilities for the tanker loading log.
Record dates and report timestamps use the configured local zone.
"""

from datetime import datetime, timezone
import pytz

from config import AppConfig

LOCAL_TIMEZONE = pytz.timezone(AppConfig.TIMEZONE)


def get_local_time() -> datetime:
    """Get current time in local timezone"""
    utc_now = datetime.now(timezone.utc)
    return utc_now.astimezone(LOCAL_TIMEZONE)


def utc_to_local(utc_dt: datetime) -> datetime:
    """Convert UTC datetime to local timezone"""
    if utc_dt is None:
        return None

    # Naive values are assumed to be UTC
    if utc_dt.tzinfo is None:
        utc_dt = pytz.utc.localize(utc_dt)

    return utc_dt.astimezone(LOCAL_TIMEZONE)


def today_iso(now: datetime = None) -> str:
    """Calendar date (YYYY-MM-DD) of ``now`` in the local timezone"""
    now = now or get_local_time()
    return utc_to_local(now).date().isoformat()


def now_iso(now: datetime = None) -> str:
    """ISO-8601 timestamp with offset, used for created_at"""
    now = now or get_local_time()
    return utc_to_local(now).isoformat(timespec="milliseconds")


def format_local_datetime(dt: datetime, format_str: str = "%Y-%m-%d %H:%M:%S") -> str:
    """Format ``dt`` in the local timezone; naive values are taken as UTC"""
    if dt is None:
        return ""
    return utc_to_local(dt).strftime(format_str)
