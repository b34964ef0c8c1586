"""A fixed set of worker threads fed from a bounded task ring."""

from __future__ import annotations

import enum
import logging
import threading
from typing import Callable, List, Optional

from .circle_buffer import CircleBuffer

_log = logging.getLogger(__name__)

Task = Callable[[], object]


class ThreadPriority(enum.IntEnum):
    """Requested scheduling priority; kept as a label for the pool's threads."""

    LOWEST = 0
    NORMAL = 1
    HIGHEST = 2


class ThreadPool:
    """Runs pushed tasks on ``thread_count`` daemon threads.

    Tasks wait in a ring of ``task_count`` slots, which holds at most
    ``task_count - 1`` of them; ``push`` blocks while the ring is full.
    Closing the pool lets the workers finish the queued tasks, then stops them.
    """

    def __init__(
        self,
        thread_count: int = 1,
        task_count: int = 10,
        name: str = "ThreadPool",
        priority: ThreadPriority = ThreadPriority.NORMAL,
    ) -> None:
        if thread_count < 1:
            raise ValueError("a thread pool needs at least one thread")
        if task_count < 2:
            raise ValueError("a thread pool needs at least two task slots")
        self.name = name
        self.priority = priority
        self._tasks: CircleBuffer[Task] = CircleBuffer(task_count)
        self._wake = threading.Condition()
        self._running = True
        self._threads: List[threading.Thread] = [
            threading.Thread(target=self._work, name=f"{name}-{index}", daemon=True)
            for index in range(thread_count)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def running(self) -> bool:
        return self._running

    def push(self, task: Task) -> None:
        """Queue ``task``, waiting for a free slot if the ring is full."""
        with self._wake:
            while True:
                if not self._running:
                    raise RuntimeError(f"thread pool {self.name!r} is closed")
                if self._tasks.push(task):
                    self._wake.notify_all()
                    return
                self._wake.notify_all()
                self._wake.wait()

    def _next_task(self) -> Optional[Task]:
        with self._wake:
            while True:
                try:
                    task = self._tasks.pop()
                except IndexError:
                    if not self._running:
                        return None
                    self._wake.wait()
                    continue
                self._wake.notify_all()
                return task

    def _work(self) -> None:
        while True:
            task = self._next_task()
            if task is None:
                return
            try:
                task()
            except Exception:
                _log.exception("task failed in thread pool %r", self.name)

    def close(self) -> None:
        """Stop accepting tasks, run the queued ones and join the workers."""
        with self._wake:
            if not self._running:
                return
            self._running = False
            self._wake.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args) -> None:
        self.close()