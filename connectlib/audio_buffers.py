"""Audio sample buffers and the bounded FIFO queue that passes them around."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")

AUDIO_SAMPLE_CHANNELS = 1

RECORD_DEVICE_KICKSTART_BUF_COUNT = 2
PLAY_KICKSTART_BUFFER_COUNT = 3
DEVICE_SHADOW_BUFFER_QUEUE_LEN = 4
BUF_COUNT = 16


@dataclass
class SampleFormat:
    """Layout of PCM samples exchanged with an audio device."""

    sample_rate: int
    frames_per_buf: int
    channels: int
    pcm_format: int
    representation: int = 0


@dataclass
class AudioConfig:
    """Settings for the audio pipeline."""

    support_recording: bool
    sample_rate: int
    sample_buffer_size: int
    delay_in_millis: int
    decay: float


@dataclass
class SampleBuffer:
    """A block of audio bytes: ``capacity`` usable bytes, ``size`` of them filled."""

    buffer: bytearray = field(default_factory=bytearray)
    capacity: int = 0
    size: int = 0


@dataclass
class WriteSlot(Generic[T]):
    """The slot at a queue's write head; fill ``value`` and hand it to ``commit``."""

    position: int
    value: Optional[T]


class BufferQueue(Generic[T]):
    """Bounded FIFO queue of ``size`` slots for one writer and one reader."""

    def __init__(self, size: int, items: Optional[Iterable[T]] = None) -> None:
        if size < 1:
            raise ValueError("BufferQueue size must be positive")
        slots: List[Optional[T]] = list(items) if items is not None else [None] * size
        if len(slots) != size:
            raise ValueError(f"expected {size} initial slots, got {len(slots)}")
        self._size = size
        self._slots = slots
        self._read = 0
        self._write = 0

    @property
    def capacity(self) -> int:
        return self._size

    def _is_full(self) -> bool:
        return self._write - self._read >= self._size

    def push(self, item: T) -> bool:
        """Append ``item``; return False if the queue is full."""
        if self._is_full():
            return False
        self._slots[self._write % self._size] = item
        self._write += 1
        return True

    def writeable_slot(self) -> Optional[WriteSlot[T]]:
        """The slot at the write head, or None when full.

        Repeated calls return the same position until ``commit`` is called.
        """
        if self._is_full():
            return None
        return WriteSlot(self._write, self._slots[self._write % self._size])

    def commit(self, slot: WriteSlot[T]) -> bool:
        """Store ``slot.value`` at the write head and advance it.

        Returns False if the queue is full; raises ValueError if ``slot`` is
        not the current write head.
        """
        if self._is_full():
            return False
        if slot.position != self._write:
            raise ValueError("slot is not at the write head of the queue")
        self._slots[self._write % self._size] = slot.value
        self._write += 1
        return True

    def front(self) -> T:
        """The oldest item, left in the queue."""
        if self._write == self._read:
            raise IndexError("front of empty BufferQueue")
        return self._slots[self._read % self._size]  # type: ignore[return-value]

    def pop(self) -> T:
        """Remove and return the oldest item."""
        item = self.front()
        self._read += 1
        return item

    def __len__(self) -> int:
        return self._write - self._read


AudioBufferQueue = BufferQueue[SampleBuffer]


def allocate_sample_buffers(count: int, size_in_bytes: int) -> List[SampleBuffer]:
    """Allocate ``count`` empty buffers of ``size_in_bytes`` capacity.

    Storage is padded up to a multiple of four bytes. At least two buffers
    are required.
    """
    if count < 2:
        raise ValueError("at least two sample buffers are required")
    if size_in_bytes <= 0:
        raise ValueError("buffer size must be positive")
    alloc_size = (size_in_bytes + 3) & ~3
    return [
        SampleBuffer(buffer=bytearray(alloc_size), capacity=size_in_bytes, size=0)
        for _ in range(count)
    ]