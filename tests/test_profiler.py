import io
import logging

import pytest

from connectlib.clock import DateTime
from connectlib.logger import Logger
from connectlib.profiler import Profiler

FIXED = DateTime(year=124, month=10, day=28, hour=9, minute=5, second=7, millisecond=7000)


def make_clock(*readings):
    return iter(readings).__next__


def test_profile_records_begin_and_end():
    with Profiler("job.py", "work", 12, clock=make_clock(100.0, 250.0)) as profiler:
        assert profiler.profile.begin_time == 100.0
    assert profiler.profile.end_time == 250.0
    assert profiler.profile.elapsed == 150.0


def test_duration_goes_to_logger():
    stream = io.StringIO()
    with Logger("Connect", stream=stream, clock=lambda: FIXED) as logger:
        with Profiler("job.py", "work", 12, logger=logger, clock=make_clock(100.0, 250.0)):
            pass
    assert "[INFO] work(job.py:12) -> tooks 150.000000 ms" in stream.getvalue()


def test_duration_goes_to_module_log_without_logger(caplog):
    with caplog.at_level(logging.INFO, logger="connectlib.profiler"):
        with Profiler("job.py", "work", 12, clock=make_clock(5.0, 5.0)):
            pass
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("work(job.py:12) -> tooks 0.0") for message in messages)


def test_exception_still_records_end_and_propagates():
    profiler = Profiler("job.py", "work", 3, clock=make_clock(1.0, 4.0))
    with pytest.raises(RuntimeError):
        with profiler:
            raise RuntimeError("fail")
    assert profiler.profile.end_time == 4.0
    assert profiler.profile.elapsed == 3.0