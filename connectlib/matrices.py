"""Square matrices and the transform builders used by the renderer."""

from __future__ import annotations

import math
from typing import ClassVar, Iterable, Iterator

from .vectors import Quat, Vec2, Vec3, Vec4, radians

_Number = (int, float)


def _det2(a: float, b: float, c: float, d: float) -> float:
    """Determinant of the matrix with rows ``(a, b)`` and ``(c, d)``."""
    return a * d - c * b


class _Matrix:
    """Row-major square matrix whose rows are vectors of the matching size.

    A matrix is built from nothing (all zeros), from ``size * size`` scalars
    in row order, or from ``size`` rows; shorter rows are padded with zeros.
    """

    _SIZE: ClassVar[int] = 0
    _ROW: ClassVar[type] = Vec4

    def __init__(self, *values) -> None:
        size = self._SIZE
        if not values:
            self._rows = [self._ROW() for _ in range(size)]
        elif len(values) == size * size and all(isinstance(v, _Number) for v in values):
            self._rows = [
                self._ROW(*values[start:start + size])
                for start in range(0, size * size, size)
            ]
        elif len(values) == size:
            self._rows = [self._make_row(row) for row in values]
        else:
            raise TypeError(
                f"{type(self).__name__} takes no arguments, {size * size} scalars "
                f"or {size} rows, got {len(values)} arguments"
            )

    def _make_row(self, values: Iterable[float]):
        components = list(values)
        if len(components) > self._SIZE:
            raise ValueError(
                f"row of {len(components)} components does not fit a "
                f"{self._SIZE}x{self._SIZE} matrix"
            )
        components.extend([0.0] * (self._SIZE - len(components)))
        return self._ROW(*components)

    def __getitem__(self, index: int):
        return self._rows[index]

    def __setitem__(self, index: int, row: Iterable[float]) -> None:
        self._rows[index] = self._make_row(row)

    def __iter__(self) -> Iterator:
        return iter(self._rows)

    def __len__(self) -> int:
        return self._SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        rows = ", ".join(repr(tuple(row)) for row in self._rows)
        return f"{type(self).__name__}({rows})"

    def __mul__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        columns = list(zip(*other))
        return type(self)(
            *(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._rows
            )
        )

    def __neg__(self):
        return type(self)(*(-row for row in self._rows))

    def __truediv__(self, value):
        if not isinstance(value, _Number):
            return NotImplemented
        return type(self)(*(row / value for row in self._rows))

    def _transposed(self):
        return type(self)(*zip(*self._rows))


class Mat2(_Matrix):
    _SIZE: ClassVar[int] = 2
    _ROW: ClassVar[type] = Vec2

    def transpose(self) -> Mat2:
        """The matrix with rows and columns swapped."""
        return self._transposed()

    def det(self) -> float:
        m = self._rows
        return m[0][0] * m[1][1] - m[1][0] * m[0][1]

    def inverse(self) -> Mat2:
        """The cofactor matrix divided by the determinant."""
        m = self._rows
        cofactors = Mat2(m[1][1], -m[1][0], -m[0][1], m[0][0])
        return cofactors / self.det()


class Mat3(_Matrix):
    _SIZE: ClassVar[int] = 3
    _ROW: ClassVar[type] = Vec3

    def transpose(self) -> Mat3:
        """The matrix with rows and columns swapped."""
        return self._transposed()

    def det(self) -> float:
        m = self._rows
        return (
            m[0][0] * m[1][1] * m[2][2]
            + m[0][1] * m[1][2] * m[2][0]
            + m[0][2] * m[1][0] * m[2][1]
            - m[2][0] * m[1][1] * m[0][2]
            - m[2][1] * m[1][2] * m[0][0]
            - m[2][2] * m[1][0] * m[0][1]
        )

    def inverse(self) -> Mat3:
        """The cofactor matrix divided by the determinant."""
        m = self._rows
        d = self.det()
        cofactors = Mat3(
            _det2(m[1][1], m[1][2], m[2][1], m[2][2]),
            -_det2(m[1][0], m[1][2], m[2][0], m[2][2]),
            _det2(m[1][0], m[1][1], m[2][0], m[2][1]),
            -_det2(m[0][0], m[0][1], m[2][0], m[2][1]),
            _det2(m[0][0], m[0][2], m[2][0], m[2][2]),
            -_det2(m[0][0], m[0][1], m[2][0], m[2][1]),
            _det2(m[0][1], m[0][2], m[1][1], m[1][2]),
            -_det2(m[0][0], m[0][2], m[1][0], m[1][2]),
            _det2(m[0][0], m[0][1], m[1][0], m[1][1]),
        )
        return cofactors / d


class Mat4(_Matrix):
    _SIZE: ClassVar[int] = 4
    _ROW: ClassVar[type] = Vec4

    @classmethod
    def from_quat(cls, q: Quat) -> Mat4:
        """Rotation matrix of a unit quaternion."""
        xx, xy, xz = q.x * q.x, q.x * q.y, q.x * q.z
        yy, zz, yz = q.y * q.y, q.z * q.z, q.y * q.z
        wx, wy, wz = q.w * q.x, q.w * q.y, q.w * q.z
        return cls(
            1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0,
            2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx), 0.0,
            2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy), 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def transpose(self) -> Mat4:
        """The matrix with rows and columns swapped."""
        return self._transposed()

    def det(self) -> float:
        """Six-term diagonal expansion; exact for triangular matrices."""
        m = self._rows
        return (
            m[0][0] * m[1][1] * m[2][2] * m[3][3]
            + m[0][1] * m[1][2] * m[2][3] * m[3][0]
            + m[0][2] * m[1][3] * m[2][0] * m[3][1]
            - m[3][0] * m[2][1] * m[1][2] * m[0][3]
            - m[3][1] * m[2][2] * m[1][3] * m[0][0]
            - m[3][2] * m[2][3] * m[1][0] * m[0][1]
        )

    def _cofactor(self, row: int, column: int) -> float:
        minor = Mat3(
            *(
                value
                for r, values in enumerate(self._rows)
                if r != row
                for c, value in enumerate(values)
                if c != column
            )
        )
        sign = -1.0 if (row + column) % 2 else 1.0
        return sign * minor.det()

    def inverse(self) -> Mat4:
        """The cofactor matrix divided by the determinant."""
        d = self.det()
        cofactors = Mat4(
            *([self._cofactor(r, c) for c in range(4)] for r in range(4))
        )
        return cofactors / d


def translate(m: Mat4, translation: Vec3) -> None:
    """Add ``translation`` to the last column of ``m`` in place."""
    m[0][3] += translation.x
    m[1][3] += translation.y
    m[2][3] += translation.z


def scale(m: Mat4, scalar: Vec3) -> None:
    """Multiply the first three diagonal entries of ``m`` in place."""
    m[0][0] *= scalar.x
    m[1][1] *= scalar.y
    m[2][2] *= scalar.z


def rotate(m: Mat4, angles: Vec3, axis: Vec3) -> None:
    """Replace ``m`` by ``m * rz * ry * rx`` for Euler ``angles`` in radians."""
    rx = Mat4()
    sin_x, cos_x = math.sin(angles.x), math.cos(angles.x)
    rx[1][1], rx[1][2] = cos_x, -sin_x
    rx[2][1], rx[2][2] = sin_x, cos_x
    rx[0][0] = axis.x

    ry = Mat4()
    sin_y, cos_y = math.sin(angles.y), math.cos(angles.y)
    ry[0][0], ry[0][2] = cos_y, sin_y
    ry[2][0], ry[2][2] = -sin_y, cos_y
    ry[1][1] = axis.y

    rz = Mat4()
    sin_z, cos_z = math.sin(angles.z), math.cos(angles.z)
    rz[0][0], rz[0][1] = cos_z, -sin_z
    rz[1][0], rz[1][1] = sin_z, cos_z
    rz[2][2] = axis.z

    result = m * rz * ry * rx
    for index, row in enumerate(result):
        m[index] = row


def model_matrix(translation: Vec3, rotation: Quat, scalar: Vec3) -> Mat4:
    """Translate a zero matrix, rotate it by ``rotation`` and scale it."""
    m = Mat4()
    translate(m, translation)
    m = m * Mat4.from_quat(rotation)
    scale(m, scalar)
    return m


def rigid_body_matrix(translation: Vec3, rotation: Quat) -> Mat4:
    """Translate a zero matrix and rotate it by ``rotation``."""
    m = Mat4()
    translate(m, translation)
    return m * Mat4.from_quat(rotation)


def ortho_matrix(
    left: float, right: float, bottom: float, top: float, z_near: float, z_far: float
) -> Mat4:
    """Orthographic projection for row vectors multiplied on the left."""
    return Mat4(
        (2.0 / (right - left), 0.0, 0.0, 0.0),
        (0.0, 2.0 / (bottom - top), 0.0, 0.0),
        (0.0, 0.0, 1.0 / (z_near - z_far), 0.0),
        (
            -(right + left) / (right - left),
            -(bottom + top) / (bottom - top),
            z_near / (z_near - z_far),
            1.0,
        ),
    )


def perspective(aspect: float, fov: float, z_near: float, z_far: float) -> Mat4:
    """Perspective projection; ``fov`` is the vertical field of view in degrees."""
    f = 1.0 / math.tan(radians(0.5 * fov))
    return Mat4(
        (f / aspect, 0.0, 0.0, 0.0),
        (0.0, -f, 0.0, 0.0),
        (0.0, 0.0, z_far / (z_near - z_far), -1.0),
        (0.0, 0.0, z_near * z_far / (z_near - z_far), 0.0),
    )


def normal_matrix(model: Mat4) -> Mat4:
    """Transpose of the inverse of ``model``."""
    return model.inverse().transpose()