"""Wall-clock readings in local time."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class DateTime:
    """Local date and time.

    ``year`` counts from 1900 and ``month`` from 0, as in ``struct tm``.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


@dataclass(frozen=True)
class Time:
    """Local time of day."""

    hour: int
    minute: int
    second: int
    millisecond: int


def get_date_time() -> DateTime:
    """Read the current local date and time."""
    lt = time.localtime()
    return DateTime(
        year=lt.tm_year - 1900,
        month=lt.tm_mon - 1,
        day=lt.tm_mday,
        hour=lt.tm_hour,
        minute=lt.tm_min,
        second=lt.tm_sec,
        millisecond=lt.tm_sec * 1000,
    )


def get_time() -> Time:
    """Read the current local time of day."""
    lt = time.localtime()
    return Time(
        hour=lt.tm_hour,
        minute=lt.tm_min,
        second=lt.tm_sec,
        millisecond=lt.tm_sec * 1000,
    )


def get_time_millis() -> float:
    """Seconds of the current minute, in milliseconds."""
    return float(time.localtime().tm_sec * 1000)