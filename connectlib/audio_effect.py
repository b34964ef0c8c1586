"""Echo effect applied to 16-bit PCM audio."""

from __future__ import annotations

import threading
from typing import MutableSequence

# Mixing happens in the integer domain:
#   (past * feedback + live * (FACTOR - feedback)) / FACTOR
FLOAT_TO_INT_MAP_FACTOR = 128
MS_PER_SEC = 1000

_SHRT_MAX = 32767
_SHRT_MIN = -32768


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


class AudioDelay:
    """Delay line that mixes live audio with its own decayed past ("echo").

    ``fmt`` is the sample width in bits; the delay time is in milliseconds.
    """

    def __init__(
        self,
        sample_rate: int,
        channel_count: int,
        fmt: int,
        delay_time_ms: int,
        decay_weight: float,
    ) -> None:
        self._sample_rate = sample_rate
        self._channel_count = channel_count
        self._format = fmt
        self._delay_time = delay_time_ms
        self._decay_weight = decay_weight
        self._feedback_factor = int(decay_weight * FLOAT_TO_INT_MAP_FACTOR)
        self._live_audio_factor = FLOAT_TO_INT_MAP_FACTOR - self._feedback_factor
        self._lock = threading.Lock()
        self._allocate_buffer()

    def _allocate_buffer(self) -> None:
        bytes_per_sample = self._format // 8
        if not 1 <= bytes_per_sample <= 4:
            raise ValueError(f"unsupported sample format of {self._format} bits")
        delay_seconds = self._delay_time / MS_PER_SEC
        frame_count = delay_seconds * self._sample_rate / MS_PER_SEC
        sample_count = int(frame_count + 0.5) * self._channel_count
        bytes_per_frame = self._channel_count * bytes_per_sample
        capacity = sample_count * bytes_per_sample
        capacity = -(-capacity // bytes_per_frame) * bytes_per_frame
        self._frames = capacity // bytes_per_frame
        self._samples = [0] * (self._frames * self._channel_count)
        self._position = 0

    @property
    def frames(self) -> int:
        """Length of the delay line in frames."""
        return self._frames

    @property
    def delay_time(self) -> int:
        return self._delay_time

    @delay_time.setter
    def delay_time(self, delay_time_ms: int) -> None:
        """Change the delay; the line is reallocated and filled with silence."""
        if delay_time_ms == self._delay_time:
            return
        with self._lock:
            self._delay_time = delay_time_ms
            self._allocate_buffer()

    @property
    def decay_weight(self) -> float:
        return self._decay_weight

    @decay_weight.setter
    def decay_weight(self, weight: float) -> None:
        """Set the echo weight; values outside the open range (0, 1) are ignored."""
        if 0.0 < weight < 1.0:
            self._decay_weight = weight
            self._feedback_factor = int(weight * FLOAT_TO_INT_MAP_FACTOR + 0.5)
            self._live_audio_factor = FLOAT_TO_INT_MAP_FACTOR - self._feedback_factor

    @property
    def feedback_factor(self) -> int:
        return self._feedback_factor

    @property
    def live_audio_factor(self) -> int:
        return self._live_audio_factor

    def process(self, live_audio: MutableSequence[int], num_frames: int) -> None:
        """Filter ``num_frames`` frames of interleaved 16-bit samples in place.

        Each live sample is replaced by the delayed one, and the delay line
        receives the mix of the two. Nothing happens when the feedback weight
        is zero or the block is longer than the delay line.
        """
        if self._feedback_factor == 0 or self._frames < num_frames:
            return
        sample_count = self._channel_count * num_frames
        if len(live_audio) < sample_count:
            raise ValueError(
                f"expected at least {sample_count} samples, got {len(live_audio)}"
            )
        with self._lock:
            if num_frames + self._position > self._frames:
                self._position = 0
            start = self._position * self._channel_count
            samples = self._samples
            for offset in range(sample_count):
                index = start + offset
                delayed = samples[index]
                mixed = _truncating_div(
                    delayed * self._feedback_factor
                    + live_audio[offset] * self._live_audio_factor,
                    FLOAT_TO_INT_MAP_FACTOR,
                )
                live_audio[offset] = delayed
                samples[index] = max(_SHRT_MIN, min(_SHRT_MAX, mixed))
            self._position += num_frames