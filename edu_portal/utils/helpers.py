"""
Helper Functions
Time utilities used across the application
"""
from datetime import datetime, timezone
import time
import pytz


def now_utc():
    """Get current UTC timestamp"""
    return datetime.now(timezone.utc)


def now_millis():
    """Current epoch time in milliseconds"""
    return int(time.time() * 1000)


def from_epoch_millis(millis):
    """Convert client epoch milliseconds to an aware UTC datetime"""
    return datetime.fromtimestamp(int(millis) / 1000, tz=timezone.utc)


def to_local_time(dt, tz_name):
    """
    Convert a timestamp to the given zone for display and calendar arithmetic.
    Naive values are stored UTC (SQLite drops tzinfo) and are read as such.
    """
    if not dt:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=pytz.utc)
    return dt.astimezone(pytz.timezone(tz_name))


def isoformat_or_none(dt):
    return dt.isoformat() if dt else None
