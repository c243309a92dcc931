"""Display helpers for timestamps and long hex ids."""

from __future__ import annotations

import datetime
from typing import NamedTuple


_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY


class TimestampDisplay(NamedTuple):
    """A Unix timestamp rendered for people.

    Attributes:
        absolute: UTC date and time, e.g. ``2024-01-31 12:00:00 UTC``.
        relative: ``Just now``, ``5 minutes ago``, ``3 hours ago``,
            ``2 days ago``, or the bare date once older than a week.
    """

    absolute: str
    relative: str


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_timestamp(timestamp: int, now: datetime.datetime | None = None) -> TimestampDisplay:
    """Render *timestamp* (Unix seconds) as absolute and relative text.

    Timestamps in the future count as ``Just now``. Timestamps outside the
    range ``datetime`` can represent are shown verbatim.

    Args:
        timestamp: Seconds since the Unix epoch.
        now: Reference time; defaults to the current UTC time.
    """
    now = now or datetime.datetime.now(datetime.UTC)
    try:
        moment = datetime.datetime.fromtimestamp(timestamp, datetime.UTC)
    except (OverflowError, OSError, ValueError):
        return TimestampDisplay(absolute=str(timestamp), relative=str(timestamp))

    absolute = moment.strftime("%Y-%m-%d %H:%M:%S UTC")
    diff = int((now - moment).total_seconds())

    if diff < _MINUTE:
        relative = "Just now"
    elif diff < _HOUR:
        relative = _plural(diff // _MINUTE, "minute")
    elif diff < _DAY:
        relative = _plural(diff // _HOUR, "hour")
    elif diff < _WEEK:
        relative = _plural(diff // _DAY, "day")
    else:
        relative = moment.strftime("%Y-%m-%d")

    return TimestampDisplay(absolute=absolute, relative=relative)


def truncate_id(value: str, length: int = 8) -> str:
    """Shorten *value* to ``head...tail`` keeping *length* chars at each end.

    Values no longer than ``2 * length`` are returned unchanged.
    """
    if len(value) <= length * 2:
        return value
    return f"{value[:length]}...{value[-length:]}"
