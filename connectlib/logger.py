"""Timestamped log records written to a stream and a file from a worker thread."""

from __future__ import annotations

import enum
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO, Tuple

from .clock import DateTime, get_date_time
from .thread_pool import ThreadPool, ThreadPriority

Location = Tuple[str, str, int]


class LogColor(enum.IntEnum):
    BLACK = 0
    BLUE = 1
    GREEN = 2
    AQUA = 3
    RED = 4
    PURPLE = 5
    YELLOW = 6
    WHITE = 7
    GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_AQUA = 11
    LIGHT_RED = 12
    LIGHT_PURPLE = 13
    LIGHT_YELLOW = 14
    LIGHT_WHITE = 15


class LogLevel(enum.Enum):
    """Severity: its tag, its console colour and, if it names a place, its heading."""

    VERBOSE = ("VERBOSE", LogColor.LIGHT_GREEN, None)
    INFO = ("INFO", LogColor.GREEN, None)
    DEBUG = ("DEBUG", LogColor.WHITE, None)
    WARNING = ("WARNING", LogColor.YELLOW, None)
    ERROR = ("ERROR", LogColor.RED, "log_error in")
    ASSERT = ("ASSERT", LogColor.RED, "Assertion Failed in")
    ABORT = ("ABORT", LogColor.RED, "Abortion in")

    def __init__(self, tag: str, color: LogColor, heading: Optional[str]) -> None:
        self.tag = tag
        self.color = color
        self.heading = heading


def format_record(
    level: LogLevel,
    date_time: DateTime,
    msg: str,
    *args,
    location: Optional[Location] = None,
) -> str:
    """Build one log record; ``msg`` is a printf-style format for ``args``.

    ERROR, ASSERT and ABORT records need ``location`` as
    ``(filename, function, line)``.
    """
    text = msg % args if args else msg
    dt = date_time
    prefix = (
        f"\n[{dt.day}.{dt.month}.{dt.year}]"
        f"[{dt.hour}:{dt.minute}:{dt.second}.{dt.millisecond}][{level.tag}] "
    )
    if level.heading is None:
        return prefix + text
    if location is None:
        raise ValueError(f"{level.tag} records need a location")
    filename, function, line = location
    return f"{prefix}{level.heading} {filename} -> {function}({line} line):\n{text}"


class Logger:
    """Formats records on the caller's thread and writes them on a worker thread.

    Records go to ``stream`` (standard error by default) and, if ``filepath``
    is given, to that file, which is opened anew on the worker.
    """

    def __init__(
        self,
        tag: str,
        filepath: Optional[str | Path] = None,
        stream: Optional[TextIO] = None,
        clock: Callable[[], DateTime] = get_date_time,
    ) -> None:
        if not tag:
            raise ValueError("Logger tag is empty")
        self.tag = tag
        self._stream = stream
        self._clock = clock
        self._file: Optional[TextIO] = None
        self._closed = False
        self._pool = ThreadPool(1, 10, "Logger", ThreadPriority.HIGHEST)
        if filepath is not None:
            self._pool.push(lambda: self._open_file(filepath))

    def _open_file(self, filepath: str | Path) -> None:
        try:
            self._file = open(filepath, "w", encoding="utf-8", newline="")
        except OSError:
            self._emit(
                format_record(
                    LogLevel.ERROR,
                    self._clock(),
                    "Failed to open log file %s",
                    str(filepath),
                    location=(Path(__file__).name, "_open_file", 0),
                )
            )
        else:
            self._emit(
                format_record(LogLevel.INFO, self._clock(), "Log file %s is open.", str(filepath))
            )

    def _emit(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(text)
        stream.flush()
        if self._file is not None:
            self._file.write(text)
            self._file.flush()

    def _log(self, level: LogLevel, msg: str, args: tuple, location: Optional[Location] = None) -> None:
        text = format_record(level, self._clock(), msg, *args, location=location)
        self._pool.push(lambda: self._emit(text))

    def verbose(self, msg: str, *args) -> None:
        self._log(LogLevel.VERBOSE, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, args)

    def error(self, filename: str, function: str, line: int, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, args, (filename, function, line))

    def assertion(self, filename: str, function: str, line: int, msg: str, *args) -> None:
        self._log(LogLevel.ASSERT, msg, args, (filename, function, line))

    def abort(self, filename: str, function: str, line: int, msg: str, *args) -> None:
        self._log(LogLevel.ABORT, msg, args, (filename, function, line))

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def close(self) -> None:
        """Write pending records, close the file and stop the worker."""
        if self._closed:
            return
        self._closed = True
        self.info("Logger file is closing...")
        self._pool.push(self._close_file)
        self._pool.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args) -> None:
        self.close()