"""Vector and matrix math, ring buffers, audio delay, shader loading, threading, logging and profiling."""

__version__ = "0.1.0"

__all__ = [
    "audio_buffers",
    "audio_effect",
    "circle_buffer",
    "clock",
    "files",
    "logger",
    "matrices",
    "profiler",
    "shader",
    "thread_pool",
    "vectors",
]