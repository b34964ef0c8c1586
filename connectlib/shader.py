"""Rendering descriptors and shader source loading."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from typing import ClassVar, List, Sequence

from .files import get_filepath, read_file

_log = logging.getLogger(__name__)

ID_NULL = 0xFFFFFFFF

_INCLUDE = "#include "
_TYPE = "#type"


class AttributeType(enum.IntEnum):
    FLOAT = 0
    BOOL = enum.auto()
    INT = enum.auto()
    UINT = enum.auto()
    VEC2_FLOAT = enum.auto()
    VEC2_UINT = enum.auto()
    VEC2_INT = enum.auto()
    VEC2_TYPELESS = enum.auto()
    VEC3_FLOAT = enum.auto()
    VEC3_UINT = enum.auto()
    VEC3_INT = enum.auto()
    VEC3_TYPELESS = enum.auto()
    VEC4_FLOAT = enum.auto()
    VEC4_UINT = enum.auto()
    VEC4_INT = enum.auto()
    VEC4_TYPELESS = enum.auto()
    MAT2X2 = enum.auto()
    MAT3X3 = enum.auto()
    MAT4X4 = enum.auto()


@dataclass(frozen=True)
class Attribute:
    """A vertex attribute bound at ``location``."""

    id: int = ID_NULL
    location: int = 0
    type: AttributeType = AttributeType.FLOAT
    byte_size: int = 0

    POS: ClassVar["Attribute"]
    UV: ClassVar["Attribute"]


Attribute.POS = Attribute(0, 0, AttributeType.VEC2_FLOAT, 8)
Attribute.UV = Attribute(0, 1, AttributeType.VEC2_FLOAT, 8)


@dataclass
class AttributeLayout:
    """Attributes of one vertex; ``stride`` is the sum of their sizes."""

    attributes: Sequence[Attribute]
    stride: int = field(init=False)

    def __post_init__(self) -> None:
        self.attributes = list(self.attributes)
        self.stride = sum(attribute.byte_size for attribute in self.attributes)


VERTEX_LAYOUT = AttributeLayout([Attribute.POS, Attribute.UV])


@dataclass
class Viewport:
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    min_depth: float = 0.0
    max_depth: float = 1.0


class GeometryDrawType(enum.IntEnum):
    TRIANGLE = 0
    TRIANGLE_STRIP = 1
    QUAD = 2
    POINT = 3
    LINE = 4
    DEFAULT = TRIANGLE


@dataclass
class GeometryDrawData:
    draw_type: GeometryDrawType = GeometryDrawType.DEFAULT
    vertex_offset: int = 0
    index_offset: int = 0
    vertex_count: int = 0
    index_count: int = 0


class ShaderStage(enum.IntEnum):
    VERTEX = 0
    GEOMETRY = 1
    TESSELATION = 2
    PIXEL = 3
    COMPUTE = 4


@dataclass
class ShaderSource:
    stage: ShaderStage
    source: str


_STAGE_MARKERS = {
    "#type vertex": ShaderStage.VERTEX,
    "#type pixel": ShaderStage.PIXEL,
    "#type geometry": ShaderStage.GEOMETRY,
    "#type tesselation": ShaderStage.TESSELATION,
    "#type compute": ShaderStage.COMPUTE,
}


def read_with_includes(filepath: str | os.PathLike[str]) -> str:
    """Read a shader file, replacing ``#include <path>`` lines by that file's text.

    Include paths are relative to the including file. A file that cannot be
    opened is logged and yields an empty string.
    """
    path = os.fspath(filepath)
    try:
        text = read_file(path)
    except OSError as error:
        _log.error("%s shader failed to open: %s", path, error)
        return ""

    parts: List[str] = []
    for line in text.split("\n")[:-1]:
        if _INCLUDE in line:
            include_path = get_filepath(path) + line[len(_INCLUDE):]
            parts.append(read_with_includes(include_path) + "\n")
        else:
            parts.append(line + "\n")
    return "".join(parts)


def read_sources(filepath: str | os.PathLike[str]) -> List[ShaderSource]:
    """Split a shader file into per-stage sources, in file order.

    A stage starts after its ``#type <stage>`` marker and ends at the next
    ``#type``; only the first marker of each stage is used.
    """
    source = read_with_includes(filepath)
    if not source:
        return []

    found = []
    for marker, stage in _STAGE_MARKERS.items():
        position = source.find(marker)
        if position != -1:
            found.append((position, marker, stage))
    found.sort(key=lambda entry: entry[0])

    sources = []
    for position, marker, stage in found:
        start = position + len(marker)
        end = source.find(_TYPE, start)
        body = source[start:] if end == -1 else source[start:end]
        sources.append(ShaderSource(stage, body))
    return sources