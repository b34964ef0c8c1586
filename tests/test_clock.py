import time
from unittest.mock import patch

from connectlib.clock import DateTime, Time, get_date_time, get_time, get_time_millis

FIXED = time.struct_time((2024, 11, 29, 13, 45, 7, 4, 334, 0))


def test_get_date_time_uses_tm_conventions():
    with patch("time.localtime", return_value=FIXED):
        dt = get_date_time()
    assert dt == DateTime(
        year=FIXED.tm_year - 1900,
        month=FIXED.tm_mon - 1,
        day=FIXED.tm_mday,
        hour=FIXED.tm_hour,
        minute=FIXED.tm_min,
        second=FIXED.tm_sec,
        millisecond=FIXED.tm_sec * 1000,
    )


def test_get_time_fields():
    with patch("time.localtime", return_value=FIXED):
        t = get_time()
    assert t == Time(
        hour=FIXED.tm_hour,
        minute=FIXED.tm_min,
        second=FIXED.tm_sec,
        millisecond=FIXED.tm_sec * 1000,
    )


def test_get_time_millis_is_seconds_times_thousand():
    with patch("time.localtime", return_value=FIXED):
        millis = get_time_millis()
    assert millis == float(FIXED.tm_sec * 1000)


def test_live_reading_is_in_range():
    dt = get_date_time()
    assert 0 <= dt.month <= 11
    assert 1 <= dt.day <= 31
    assert 0 <= dt.hour <= 23
    assert 0 <= dt.second <= 61
    assert dt.millisecond == dt.second * 1000
    assert 0.0 <= get_time_millis() <= 61000.0