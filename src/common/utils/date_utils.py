"""Utility functions for timestamps written to the document store."""

from datetime import datetime

import pytz

from src.common.config.settings import settings


def utc_now_iso() -> str:
    """Returns the current UTC time as an ISO-8601 string."""
    return datetime.now(pytz.utc).isoformat()


def trace_timestamp(now: datetime | None = None) -> str:
    """Formats a time of day for observation trace entries, in the configured timezone."""
    try:
        tz = pytz.timezone(settings.APP_TIMEZONE)
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc
    if now is None:
        now = datetime.now(pytz.utc)
    elif now.tzinfo is None:
        now = pytz.utc.localize(now)
    return now.astimezone(tz).strftime("%H:%M:%S")
