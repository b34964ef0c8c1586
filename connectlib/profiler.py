"""Timing of a block of code, reported through a logger."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .clock import get_time_millis
from .logger import Logger

_log = logging.getLogger(__name__)

_MESSAGE = "%s(%s:%s) -> tooks %f ms"


@dataclass
class Profile:
    """Where a timed block lives and when it started and ended, in milliseconds."""

    file_name: str
    function_name: str
    line: int
    begin_time: float = 0.0
    end_time: float = 0.0

    @property
    def elapsed(self) -> float:
        return self.end_time - self.begin_time


class Profiler:
    """Context manager that times its block and logs the duration on exit."""

    def __init__(
        self,
        file_name: str,
        function_name: str,
        line: int,
        logger: Optional[Logger] = None,
        clock: Callable[[], float] = get_time_millis,
    ) -> None:
        self.profile = Profile(file_name, function_name, line)
        self._logger = logger
        self._clock = clock

    def __enter__(self) -> Profiler:
        self.profile.begin_time = self._clock()
        return self

    def __exit__(self, *args) -> None:
        profile = self.profile
        profile.end_time = self._clock()
        report = (
            _MESSAGE,
            profile.function_name,
            profile.file_name,
            profile.line,
            profile.elapsed,
        )
        if self._logger is not None:
            self._logger.info(*report)
        else:
            _log.info(*report)