"""Fixed-size ring buffer used as a FIFO queue."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class CircleBuffer(Generic[T]):
    """Ring of slots; one slot is kept empty, so it holds ``len(self) - 1`` items."""

    def __init__(self, size: int = 0) -> None:
        self._items: list[T | None] = [None] * size
        self._head = 0
        self._tail = 0

    def resize(self, size: int) -> None:
        """Grow with empty slots or truncate to ``size`` slots."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size <= len(self._items):
            del self._items[size:]
        else:
            self._items.extend([None] * (size - len(self._items)))

    def push(self, item: T) -> bool:
        """Append ``item``; return False if the buffer is full."""
        if not self._items:
            raise ValueError("buffer has no slots")
        following = (self._head + 1) % len(self._items)
        if following == self._tail:
            return False
        self._items[self._head] = item
        self._head = following
        return True

    def pop(self) -> T:
        """Remove and return the oldest item."""
        if self._tail == self._head:
            raise IndexError("pop from empty CircleBuffer")
        item = self._items[self._tail]
        self._tail = (self._tail + 1) % len(self._items)
        return item  # type: ignore[return-value]

    def __len__(self) -> int:
        """Number of slots."""
        return len(self._items)

    def __getitem__(self, index: int) -> T | None:
        """Raw content of slot ``index``."""
        return self._items[index]