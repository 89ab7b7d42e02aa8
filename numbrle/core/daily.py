"""Date-derived puzzle identity: the daily target and the day index."""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

DEFAULT_EPOCH = date(2026, 2, 15)
TARGET_MIN = 1
TARGET_MAX = 99

DateLike = Union[date, datetime]


def _calendar_date(value: DateLike) -> date:
    # datetime is a subclass of date; drop the time of day.
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def date_key(value: DateLike) -> str:
    """Local calendar date as ``YYYY-MM-DD``."""
    d = _calendar_date(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def java_string_hash(text: str) -> int:
    """Multiply-by-31 rolling hash wrapped to a signed 32-bit integer."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def daily_target(value: DateLike) -> int:
    """Target number in [1, 99] for the calendar date of *value*."""
    h = java_string_hash(date_key(value))
    return (h & 0x7FFFFFFF) % TARGET_MAX + TARGET_MIN


def day_number(now: DateLike, epoch: DateLike = DEFAULT_EPOCH) -> int:
    """Day index counted from *epoch*, which is day 1."""
    delta = _calendar_date(now) - _calendar_date(epoch)
    return delta.days + 1
