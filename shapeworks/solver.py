"""Measurement and geometry calculations offered by the editor's solver menu."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Optional, Tuple

from .vectors import Vec3


def _vec(value: Iterable[float]) -> Vec3:
    x, y, z = value
    return Vec3(x, y, z)


def _dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def _angle_degrees(u: Vec3, v: Vec3) -> float:
    cosine = max(-1.0, min(1.0, _dot(u, v)))
    return math.degrees(math.acos(cosine))


class ImageCalibration:
    """Relates pixel measurements on a reference image to millimetres."""

    def __init__(self) -> None:
        self.mm_per_px = 0.0
        self.origin: Tuple[float, float] = (0.0, 0.0)

    def set_distance_ratio(
        self, x1: float, y1: float, x2: float, y2: float, length_mm: float
    ) -> Optional[float]:
        """Calibrate from a reference line of known length.

        Returns the millimetres per pixel, or None when the line has no length.
        """
        px_distance = math.hypot(x1 - x2, y1 - y2)
        if px_distance > 0.0:
            self.mm_per_px = abs(length_mm) / px_distance
            return self.mm_per_px
        self.mm_per_px = 0.0
        return None

    def set_origin(self, x: float, y: float) -> Tuple[float, float]:
        """Place the image origin at absolute pixel coordinates."""
        self.origin = (x, y)
        return self.origin

    def set_origin_to_midpoint(
        self, x1: float, y1: float, x2: float, y2: float
    ) -> Tuple[float, float]:
        """Place the image origin at the midpoint of a line."""
        self.origin = ((x1 + x2) / 2.0, (y1 + y2) / 2.0)
        return self.origin

    def distance_in_mm(self, x1: float, y1: float, x2: float, y2: float) -> float:
        """Length in millimetres of the line between two pixel positions."""
        if self.mm_per_px <= 0.0:
            raise ValueError("the mm/px ratio has not been set")
        return math.hypot(x1 - x2, y1 - y2) * self.mm_per_px

    def relative_coordinates(self, x: float, y: float) -> Tuple[float, float, str]:
        """Coordinates relative to the origin, in mm when calibrated, else in px."""
        dx = x - self.origin[0]
        dy = y - self.origin[1]
        if self.mm_per_px > 0.0:
            return dx * self.mm_per_px, dy * self.mm_per_px, "mm"
        return dx, dy, "px"


def trigonometric_ratios(angle: float) -> Dict[str, float]:
    """The six trigonometric ratios of ``angle`` degrees, omitting undefined ones."""
    radians = math.radians(angle)
    sin_angle = math.sin(radians)
    cos_angle = math.cos(radians)
    ratios = {"sin": sin_angle, "cos": cos_angle}
    if cos_angle != 0.0:
        ratios["tan"] = sin_angle / cos_angle
    if sin_angle != 0.0:
        ratios["csc"] = 1.0 / sin_angle
    if cos_angle != 0.0:
        ratios["sec"] = 1.0 / cos_angle
    if sin_angle != 0.0:
        ratios["cot"] = cos_angle / sin_angle
    return ratios


def four_quadrant_inverse_tangent(vertical: float, horizontal: float) -> float:
    """The angle in degrees of the vector (horizontal, vertical)."""
    return math.degrees(math.atan2(vertical, horizontal))


def distance_between_points(first: Iterable[float], second: Iterable[float]) -> float:
    """Euclidean distance between two 3D points."""
    return vector_between_points(first, second).length()


def vector_between_points(first: Iterable[float], second: Iterable[float]) -> Vec3:
    """The vector from ``first`` pointing towards ``second``."""
    return _vec(second).add(_vec(first).multiply(-1.0))


def angle_between_vectors(u: Iterable[float], v: Iterable[float]) -> float:
    """The angle in degrees between two vectors."""
    return _angle_degrees(_vec(u).normalize(), _vec(v).normalize())


def cross_product(u: Iterable[float], v: Iterable[float]) -> Vec3:
    """The cross product ``u x v``."""
    return _vec(u).cross(_vec(v))


def rotation_parameters(u: Iterable[float], v: Iterable[float]) -> Tuple[float, Vec3]:
    """Angle in degrees and axis of the rotation that turns ``u`` towards ``v``."""
    start = _vec(u).normalize()
    end = _vec(v).normalize()
    angle = _angle_degrees(start, end)
    return angle, start.cross(end)


def rotation_parameters_from_points(
    start: Iterable[float], origin: Iterable[float], end: Iterable[float]
) -> Tuple[float, Vec3]:
    """Rotation parameters for the vectors from ``origin`` to ``start`` and ``end``."""
    return rotation_parameters(
        vector_between_points(origin, start), vector_between_points(origin, end)
    )