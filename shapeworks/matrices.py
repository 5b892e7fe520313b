"""Immutable 4x4 matrices used for transformations and the camera."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .vectors import Vec3

Row = Tuple[float, float, float, float]
Rows = Tuple[Row, Row, Row, Row]

_SIZE = 4


def _zero_rows() -> Rows:
    return ((0.0,) * _SIZE,) * _SIZE  # type: ignore[return-value]


@dataclass(frozen=True)
class Mat4:
    """A row-major 4x4 matrix."""

    rows: Rows = _zero_rows()

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.rows[row][column]

    def __matmul__(self, other: Mat4) -> Mat4:
        return self.multiply(other)

    @classmethod
    def zero(cls) -> Mat4:
        """The all-zero matrix."""
        return cls(_zero_rows())

    @classmethod
    def identity(cls) -> Mat4:
        """The identity matrix."""
        return cls(
            tuple(
                tuple(1.0 if i == j else 0.0 for j in range(_SIZE))
                for i in range(_SIZE)
            )
        )

    def transposed(self) -> Mat4:
        """Return the transpose."""
        return Mat4(tuple(zip(*self.rows)))

    def multiply(self, other: Mat4) -> Mat4:
        """Return ``self * other``."""
        columns = list(zip(*other.rows))
        return Mat4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    @classmethod
    def basis_from_positive_z(cls, z: Vec3) -> Mat4:
        """An orthonormal basis whose third row is ``z`` normalised."""
        unit = z.copy().normalize()
        if unit.length() <= 0:
            return cls.identity()
        cx, cy, cz = unit
        pitch = math.asin(max(-1.0, min(1.0, -cy)))
        yaw = math.atan2(cx, cz)
        return cls(
            (
                (math.cos(yaw), 0.0, -math.sin(yaw), 0.0),
                (-math.sin(yaw) * cy, math.cos(pitch), -math.cos(yaw) * cy, 0.0),
                (cx, cy, cz, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def translation(cls, vector: Vec3) -> Mat4:
        """A translation by ``vector``."""
        x, y, z = vector
        return cls(
            (
                (1.0, 0.0, 0.0, x),
                (0.0, 1.0, 0.0, y),
                (0.0, 0.0, 1.0, z),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def rotation(cls, angle: float, axis: Vec3) -> Mat4:
        """A rotation of ``angle`` degrees about ``axis``; identity for a zero axis."""
        if axis.length() <= 0:
            return cls.identity()
        radians = math.radians(angle)
        cos_angle = math.cos(radians)
        sin_angle = math.sin(radians)
        basis = cls.basis_from_positive_z(axis)
        about_z = cls(
            (
                (cos_angle, -sin_angle, 0.0, 0.0),
                (sin_angle, cos_angle, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )
        return basis.transposed() @ about_z @ basis

    @classmethod
    def scaling(cls, vector: Vec3) -> Mat4:
        """A scaling by the components of ``vector``."""
        x, y, z = vector
        return cls(
            (
                (x, 0.0, 0.0, 0.0),
                (0.0, y, 0.0, 0.0),
                (0.0, 0.0, z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def camera(cls, position: Vec3, look_at: Vec3, up: Vec3) -> Mat4:
        """A view matrix for a camera at ``position`` looking along ``look_at``."""
        look_length = look_at.length()
        if look_length <= 0:
            raise ValueError("look-at vector must not be zero")
        right = look_at.copy().cross(up).normalize()
        true_up = right.copy().cross(look_at).normalize()
        px, py, pz = position
        lx, ly, lz = look_at
        rx, ry, rz = right
        ux, uy, uz = true_up
        return cls(
            (
                (rx, ry, rz, -(px * rx) - (py * ry) - (pz * rz)),
                (ux, uy, uz, -(px * ux) - (py * uy) - (pz * uz)),
                (
                    -lx / look_length,
                    -ly / look_length,
                    -lz / look_length,
                    (px * lx + py * ly + pz * lz) / look_length,
                ),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def perspective(cls, angle: float, ratio: float, z_near: float, z_far: float) -> Mat4:
        """A perspective projection with a vertical field of view of ``angle`` degrees."""
        plane_distance = 1.0 / math.tan(math.radians(angle / 2.0))
        near_far_sum = z_near + z_far
        near_far_difference = z_near - z_far
        near_far_product = z_near * z_far
        return cls(
            (
                (plane_distance / ratio, 0.0, 0.0, 0.0),
                (0.0, plane_distance, 0.0, 0.0),
                (
                    0.0,
                    0.0,
                    near_far_sum / near_far_difference,
                    2.0 * near_far_product / near_far_difference,
                ),
                (0.0, 0.0, -1.0, 0.0),
            )
        )