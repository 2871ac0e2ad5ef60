# storefront/utils/time_utils.py

from datetime import datetime, timezone
from typing import Optional, Union

SQLITE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse a sqlite CURRENT_TIMESTAMP value (UTC, no timezone)"""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.strptime(value[:19], SQLITE_TIMESTAMP_FORMAT)


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, comparable with sqlite timestamps"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _as_naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def utcnow_timestamp() -> str:
    """Current UTC time in the format sqlite stores"""
    return utc_now().strftime(SQLITE_TIMESTAMP_FORMAT)


def diff_for_humans(value: Union[str, datetime, None], now: datetime = None) -> Optional[str]:
    """
    Describe how long ago a timestamp was, e.g. "3 minutes ago".
    Future timestamps read "from now".
    """
    moment = parse_timestamp(value)
    if moment is None:
        return None

    now = _as_naive_utc(now) if now else utc_now()
    seconds = int((now - _as_naive_utc(moment)).total_seconds())
    suffix = "ago" if seconds >= 0 else "from now"
    seconds = abs(seconds)

    if seconds < 1:
        return "just now"

    for unit, size in _UNITS:
        if seconds >= size:
            count = seconds // size
            plural = "" if count == 1 else "s"
            return f"{count} {unit}{plural} {suffix}"
    return "just now"
