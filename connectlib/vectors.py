"""Small vector, quaternion and scalar helpers for 2D/3D graphics."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterable, Iterator

PI = 3.14159265359
E = 2.71828

_Number = (int, float)


def radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def clamp(a: float, b: float, x: float) -> float:
    """Clamp ``x`` to at least ``b`` and at most ``a``."""
    return min(max(x, b), a)


def lerp(a: float, b: float, x: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``x``."""
    return x * (b - a) + a


def step(a: float, x: float) -> float:
    """Step function built on :func:`clamp` with bounds ``(0, 1)``."""
    return clamp(0, 1, x - a)


def smoothstep(a: float, b: float, x: float) -> float:
    """Hermite smoothstep built on :func:`clamp` with bounds ``(0, 1)``."""
    t = clamp(0, 1, (x - a) / (b - a))
    return -2 * t * t * t + 3 * t * t


def _dot(first: Iterable[float], second: Iterable[float]) -> float:
    return sum(a * b for a, b in zip(first, second))


class _Vector:
    """Component-wise behaviour shared by the vector types."""

    _FIELDS: ClassVar[tuple[str, ...]] = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self._FIELDS)

    def __len__(self) -> int:
        return len(self._FIELDS)

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._FIELDS[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._FIELDS[index], value)

    def _combine(self, other, op: Callable[[float, float], float]):
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, _Number):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def _rcombine(self, other, op: Callable[[float, float], float]):
        if isinstance(other, _Number):
            return type(self)(*(op(other, a) for a in self))
        return NotImplemented

    def _scaled_to_unit(self):
        size = math.sqrt(_dot(self, self))
        return type(self)(*(c / size for c in self))

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __radd__(self, other):
        return self._rcombine(other, operator.add)

    def __rsub__(self, other):
        return self._rcombine(other, operator.sub)

    def __rmul__(self, other):
        return self._rcombine(other, operator.mul)

    def __rtruediv__(self, other):
        return self._rcombine(other, operator.truediv)

    def __xor__(self, power):
        if isinstance(power, _Number):
            return type(self)(*(c**power for c in self))
        return NotImplemented

    def __neg__(self):
        return type(self)(*(-c for c in self))


@dataclass
class Vec2(_Vector):
    x: float = 0.0
    y: float = 0.0

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y")

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(_dot(self, self))

    def normalized(self) -> Vec2:
        """A copy scaled to unit length."""
        return self._scaled_to_unit()

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return _dot(self, other)

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x


@dataclass
class Vec3(_Vector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(_dot(self, self))

    def normalized(self) -> Vec3:
        """A copy scaled to unit length."""
        return self._scaled_to_unit()

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return _dot(self, other)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)


@dataclass
class Vec4(_Vector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(_dot(self, self))

    def normalized(self) -> Vec4:
        """A copy scaled to unit length."""
        return self._scaled_to_unit()

    def dot(self, other: Vec4) -> float:
        """Dot product."""
        return _dot(self, other)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


@dataclass
class Quat:
    """Quaternion with vector part ``(x, y, z)`` and scalar part ``w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, nx: float, ny: float, nz: float, angle: float = 0.0) -> Quat:
        """Rotation of ``angle`` radians about the axis ``(nx, ny, nz)``."""
        half_sin = math.sin(angle * 0.5)
        return cls(nx * half_sin, ny * half_sin, nz * half_sin, math.cos(angle * 0.5))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        q1, q2 = self, other
        return Quat(
            q1.w * q2.x + q1.x * q2.w + q1.y * q2.z - q1.z * q2.y,
            q1.w * q2.y - q1.x * q2.z + q1.y * q2.w + q1.z * q2.x,
            q1.w * q2.z + q1.x * q2.y - q1.y * q2.x + q1.z * q2.w,
            q1.w * q2.w - q1.x * q2.x - q1.y * q2.y - q1.z * q2.z,
        )

    def __neg__(self) -> Quat:
        """The conjugate: vector part negated, scalar part kept."""
        return Quat(-self.x, -self.y, -self.z, self.w)

    def length(self) -> float:
        """Length of the vector part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Quat:
        """A copy whose vector part has unit length; ``w`` is kept."""
        size = self.length()
        return Quat(self.x / size, self.y / size, self.z / size, self.w)

    def rotate(self, n: Vec3) -> Quat:
        """Return ``q * Quat(n) * conj(q)``, where ``Quat(n)`` has a zero angle."""
        return self * Quat.from_axis_angle(n.x, n.y, n.z) * -self

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


def slerp(q1: Quat, q2: Quat, t: float) -> Quat:
    """Spherical interpolation between two quaternions."""
    dot = q1.x * q2.x + q1.y * q2.y + q1.z * q2.z + q1.w * q2.w
    t /= 2.0
    theta = abs(math.acos(dot))
    st = math.sin(theta)
    coeff1 = math.sin((1 - t) * theta) / st
    coeff2 = math.sin(t * theta) / st
    blended = Quat(
        coeff1 * q1.x + coeff2 * q2.x,
        coeff1 * q1.y + coeff2 * q2.y,
        coeff1 * q1.z + coeff2 * q2.z,
        coeff1 * q1.w + coeff2 * q2.w,
    )
    return blended.normalized()