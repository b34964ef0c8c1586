# connectlib

Small, dependency-free building blocks for interactive applications:
vector and matrix math, ring buffers, an audio echo effect, shader source
loading, a thread pool, a background logger and a block profiler.

## Modules

- `connectlib.vectors` – `Vec2`, `Vec3`, `Vec4` dataclasses with
  component-wise `+ - * /` (with vectors or scalars), `^` for a power,
  unary `-`, indexing and iteration; `length()`, `normalized()`, `dot()`,
  `cross()` (not on `Vec4`) and swizzles `xy()` / `xyz()`. `Quat` with
  `from_axis_angle()`, `*` (Hamilton product), unary `-` (conjugate),
  `length()` and `normalized()` (both over the vector part only),
  `rotate()`, `xy()`, `xyz()`; `slerp(q1, q2, t)`. Scalar helpers
  `radians`, `clamp(a, b, x)` (bounds `b` ≤ x ≤ `a`), `lerp`, `step`,
  `smoothstep`.
- `connectlib.matrices` – row-major `Mat2`, `Mat3`, `Mat4` built from no
  arguments (zeros), from scalars in row order, or from rows. They support
  `*`, unary `-`, division by a scalar, `transpose()`, `det()` and
  `inverse()` (cofactors divided by the determinant); `Mat4.from_quat()`.
  `Mat4.det()` uses a six-term diagonal expansion, which is exact for
  triangular matrices but not for general ones. In-place `translate`,
  `scale` and `rotate`, and the builders `model_matrix`,
  `rigid_body_matrix`, `ortho_matrix`, `perspective` (field of view in
  degrees) and `normal_matrix`.
- `connectlib.clock` – `get_date_time()`, `get_time()` and
  `get_time_millis()` read local time. `DateTime.year` counts from 1900 and
  `month` from 0; the millisecond fields are the current second times 1000.
- `connectlib.circle_buffer` – `CircleBuffer(size)`, a FIFO ring that keeps
  one slot free, so it holds `size - 1` items. `push()` returns `False`
  when full; `pop()` raises `IndexError` when empty; `len()` is the number
  of slots.
- `connectlib.files` – `read_file`, `write_file` (text or bytes),
  `create_dir`, `copy_file`, `copy_dirs`, `exists`, `get_full_file_name`,
  `get_file_name`, `get_absolute_path`, `get_directory`, `get_filepath`.
- `connectlib.audio_buffers` – `SampleFormat`, `AudioConfig`,
  `SampleBuffer`, a bounded single-writer/single-reader `BufferQueue`
  (`push`, `writeable_slot` / `commit`, `front`, `pop`, `len()`), and
  `allocate_sample_buffers(count, size_in_bytes)`, which needs at least
  two buffers and pads storage to a multiple of four bytes.
- `connectlib.audio_effect` – `AudioDelay(sample_rate, channel_count, fmt,
  delay_time_ms, decay_weight)`, an echo on interleaved 16-bit samples.
  `process(live_audio, num_frames)` works in place; `delay_time` and
  `decay_weight` are settable properties.
- `connectlib.shader` – rendering descriptors (`AttributeType`,
  `Attribute`, `AttributeLayout`, `Viewport`, `GeometryDrawType`,
  `GeometryDrawData`, `ShaderStage`, `ShaderSource`),
  `read_with_includes()` which expands `#include <path>` lines relative to
  the including file, and `read_sources()` which splits a file at its
  `#type vertex|pixel|geometry|tesselation|compute` markers.
- `connectlib.thread_pool` – `ThreadPool(thread_count, task_count, name,
  priority)`: daemon workers fed from a `CircleBuffer`. `push()` blocks
  while the ring is full and raises `RuntimeError` after `close()`;
  closing runs the queued tasks and joins the workers. Usable as a
  context manager. `ThreadPriority` is kept only as a label.
- `connectlib.logger` – `format_record()` builds a timestamped record;
  `Logger(tag, filepath=None, stream=None)` writes records from a worker
  thread to `stream` (standard error by default) and to `filepath` if
  given. Methods `verbose`, `info`, `debug`, `warning`, and `error`,
  `assertion`, `abort` (which take a file name, function and line). Usable
  as a context manager.
- `connectlib.profiler` – `Profiler(file_name, function_name, line,
  logger=None)`, a context manager that records begin and end times in a
  `Profile` and logs the elapsed milliseconds to the given `Logger` or to
  the standard `logging` module. The default clock is
  `get_time_millis()`, which only has one-second resolution within a
  minute; pass `clock=` for finer timing.

## What it does not do

There is no application loop, window, input handling, GPU rendering
(shaders are read and split, not compiled), audio device playback or
recording, or networking. There is no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from connectlib.vectors import Vec3, clamp
from connectlib.matrices import perspective

up = Vec3(0.0, 1.0, 0.0)
right = Vec3(1.0, 0.0, 0.0)
print(right.cross(up))           # Vec3(x=0.0, y=0.0, z=1.0)
print(clamp(1.0, 0.0, 1.5))      # 1.0

proj = perspective(16 / 9, 60.0, 0.1, 100.0)
```

```python
from connectlib.circle_buffer import CircleBuffer

buf = CircleBuffer(4)
buf.push("a")
buf.push("b")
print(buf.pop())                 # a
```

```python
from connectlib.thread_pool import ThreadPool

with ThreadPool(2, 10, "workers") as pool:
    pool.push(lambda: print("hello from a worker"))
```

```python
from connectlib.logger import Logger
from connectlib.profiler import Profiler

with Logger("app", "app.log") as logger:
    with Profiler("main.py", "load", 12, logger=logger):
        pass
```

```python
from connectlib.shader import read_sources

for source in read_sources("shaders/sprite.glsl"):
    print(source.stage.name, len(source.source))
```