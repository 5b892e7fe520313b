"""Writes workspace objects in the text format the parser reads."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from .points import PlanePoints, Point
from .shapes import Shape, Sphere
from .transformations import Rotate, Transformation
from .vectors import Vec3

_INDENT = "\t"


def _number(value: float) -> str:
    return f"{value:g}"


class WorkspacePrinter:
    """Prints points, shapes and transformations as workspace file entries."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def _write(self, text: str) -> None:
        (self.stream if self.stream is not None else sys.stdout).write(text)

    def _class(self, obj: object, identifier: str) -> None:
        self._write(f"{type(obj).__name__}: {identifier}\n")

    def _vec3(self, vector: Vec3, x: str = "x: ", y: str = "y: ", z: str = "z: ") -> None:
        for label, value in zip((x, y, z), vector):
            self._float(value, label)

    def _float(self, value: float, label: str) -> None:
        self._write(f"{_INDENT}{label}{_number(value)}\n")

    def _identifiers(self, objects: Iterable[object], label: str) -> None:
        names = [obj.identifier for obj in objects]  # type: ignore[attr-defined]
        if names:
            self._write(f"{_INDENT}{label}{','.join(names)}\n")

    def _end(self) -> None:
        self._write("\n")

    def print_point(self, point: Point) -> None:
        """Print a plain point."""
        self._class(point, point.identifier)
        self._vec3(point.position)
        self._end()

    def print_plane_points(self, plane_points: PlanePoints) -> None:
        """Print a plane-point group with its type and children."""
        self._class(plane_points, plane_points.identifier)
        self._vec3(plane_points.position)
        self._float(plane_points.type, "type: ")
        self._identifiers(plane_points.children, "points: ")
        self._end()

    def print_shape(self, shape: Shape) -> None:
        """Print a shape with its dimensions, visibility and transformations."""
        self._class(shape, shape.identifier)
        self._vec3(shape.position)
        if isinstance(shape, Sphere):
            self._float(shape.radius, "radius: ")
        self._float(1.0 if shape.is_visible else 0.0, "visible: ")
        self._identifiers(shape.transformations, "transformations: ")
        self._end()

    def print_transformation(self, transformation: Transformation) -> None:
        """Print a transformation; rotations lead with their angle."""
        self._class(transformation, transformation.identifier)
        if isinstance(transformation, Rotate):
            self._float(transformation.angle, "angle: ")
        self._vec3(transformation.components)
        self._end()

    def print_object(self, obj: object) -> None:
        """Print any workspace object using the matching method."""
        if isinstance(obj, PlanePoints):
            self.print_plane_points(obj)
        elif isinstance(obj, Point):
            self.print_point(obj)
        elif isinstance(obj, Shape):
            self.print_shape(obj)
        elif isinstance(obj, Transformation):
            self.print_transformation(obj)
        else:
            raise TypeError(f"cannot print {type(obj).__name__}")