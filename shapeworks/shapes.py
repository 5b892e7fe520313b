"""Shapes placed in a workspace and the meshes that describe them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, List, Optional, Tuple

from .functions import Function
from .matrices import Mat4
from .transformations import Transformation
from .vectors import Vec3

Triple = Tuple[float, float, float]
Color = Tuple[float, float, float, float]

DEFAULT_COLOR: Color = (0.4, 0.4, 0.4, 1.0)
DEFAULT_SELECTED_COLOR: Color = (0.1, 0.8, 0.1, 1.0)

_AXES = {Function.X: "x", Function.Y: "y", Function.Z: "z"}


@dataclass
class Mesh:
    """Triangle mesh data; each vertex has a normal colour and a selected colour."""

    vertices: List[Triple] = field(default_factory=list)
    normals: List[Triple] = field(default_factory=list)
    colors: List[Color] = field(default_factory=list)
    indices: List[Tuple[int, int, int]] = field(default_factory=list)


class Shape(ABC):
    """A named, positioned, optionally transformed solid."""

    identifier_prefix = "shape"
    MAX_POINTS_CIRCLE = 36
    MAX_LAYERS_CIRCLE = 10

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.position = Vec3(x, y, z)
        self.is_visible = True
        self.transformations: List[Transformation] = []
        self.workspace: Optional[Any] = None
        self.workspace_index = 0
        self.reference_count = 0
        self.identifier = "shape"
        self.mesh = Mesh()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r}, {tuple(self.position)})"

    def set_identifier_from_sequence(self, number: int) -> None:
        """Name this shape from its prefix and a sequence number."""
        self.identifier = f"{self.identifier_prefix}{number}"

    def add_position(self, other: Vec3) -> None:
        """Move the shape by ``other``."""
        self.position.add(other)

    @abstractmethod
    def add_size(self, other: Vec3) -> None:
        """Grow the shape by the components of ``other``."""

    def show(self) -> None:
        self.is_visible = True

    def hide(self) -> None:
        self.is_visible = False

    def model_matrix(self) -> Mat4:
        """Translation to the position followed by every transformation in order."""
        return reduce(
            lambda matrix, transformation: matrix @ transformation.matrix,
            self.transformations,
            Mat4.translation(self.position),
        )

    def add_transformation(self, transformation: Transformation) -> None:
        transformation.reference_count += 1
        self.transformations.append(transformation)

    def add_transformation_from_workspace(self, identifier: str) -> bool:
        """Add the workspace transformation named ``identifier``."""
        if self.workspace is None:
            return False
        transformation = self.workspace.find_transformation(identifier)
        if transformation is None:
            return False
        self.add_transformation(transformation)
        return True

    def apply(self, function: Function, argument: float) -> bool:
        """Apply a numeric function; return whether it applies to this object."""
        axis = _AXES.get(function)
        if axis is not None:
            setattr(self.position, axis, argument)
            return True
        if function is Function.VISIBLE:
            if argument <= 0:
                self.hide()
            else:
                self.show()
            return True
        return False

    def apply_list(self, function: Function, element: str) -> bool:
        """Apply a list function; the base shape takes none."""
        return False


class Sphere(Shape):
    """A sphere built from horizontal rings."""

    identifier_prefix = "sphere"

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, radius: float = 1.0
    ) -> None:
        super().__init__(x, y, z)
        self._radius = radius
        self.build_mesh()

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = value
        self.build_mesh()

    def add_size(self, other: Vec3) -> None:
        self.radius = self._radius + other.x

    def apply(self, function: Function, argument: float) -> bool:
        if function is Function.RADIUS:
            self.radius = argument
            return True
        return super().apply(function, argument)

    def apply_list(self, function: Function, element: str) -> bool:
        if function is Function.TRANSFORMATIONS:
            return self.add_transformation_from_workspace(element)
        return False

    def build_mesh(self) -> Mesh:
        """Rebuild the mesh for the current radius and return it."""
        points = self.MAX_POINTS_CIRCLE
        layers = self.MAX_LAYERS_CIRCLE
        radius = self._radius
        step = math.radians(360.0 / points)
        mesh = Mesh()

        def ring(ring_radius: float) -> List[Tuple[float, float]]:
            return [
                (ring_radius * math.cos(n * step), ring_radius * math.sin(n * step))
                for n in range(1, points + 1)
            ]

        for rcos, rsin in ring(radius):
            mesh.vertices.append((rcos, 0.0, rsin))
            mesh.normals.append((rcos, 0.0, rsin))
            mesh.colors.extend((DEFAULT_COLOR, DEFAULT_SELECTED_COLOR))

        radius_squared = radius * radius
        for layer in range(1, layers + 1):
            height = layer * radius / layers
            layer_radius = math.sqrt(max(0.0, radius_squared - height * height))
            for rcos, rsin in ring(layer_radius):
                for vertex in ((rcos, height, rsin), (rcos, -height, rsin)):
                    mesh.vertices.append(vertex)
                    mesh.normals.append(vertex)
                    mesh.colors.extend((DEFAULT_COLOR, DEFAULT_SELECTED_COLOR))

        mesh.indices = _sphere_indices(points, layers)
        self.mesh = mesh
        return mesh


def _sphere_indices(points: int, layers: int) -> List[Tuple[int, int, int]]:
    n = points
    indices: List[Tuple[int, int, int]] = []
    for i in range(n - 1):
        indices += [
            (i, i + 1, 2 * (i + 1) + n),
            (i, 2 * i + n, 2 * (i + 1) + n),
            (i, i + 1, 2 * (i + 1) + n + 1),
            (i, 2 * i + n + 1, 2 * (i + 1) + n + 1),
        ]
    indices += [
        (n - 1, 0, n),
        (n - 1, 3 * n - 2, n),
        (n - 1, 0, n + 1),
        (n - 1, 3 * n - 1, n + 1),
    ]
    for i in range(layers - 1):
        lower = (2 * i + 1) * n
        upper = (2 * i + 3) * n
        for j in range(n - 1):
            indices += [
                (lower + 2 * j, lower + 2 * (j + 1), upper + 2 * (j + 1)),
                (lower + 2 * j, upper + 2 * j, upper + 2 * (j + 1)),
                (lower + 2 * j + 1, lower + 2 * (j + 1) + 1, upper + 2 * (j + 1) + 1),
                (lower + 2 * j + 1, upper + 2 * j + 1, upper + 2 * (j + 1) + 1),
            ]
        beyond = (2 * i + 5) * n
        indices += [
            (upper - 2, lower, upper),
            (upper - 2, beyond - 2, upper),
            (upper - 1, lower + 1, upper + 1),
            (upper - 1, beyond - 1, upper + 1),
        ]
    return indices