"""Points and plane-point groups held by a workspace."""

from __future__ import annotations

from typing import Any, List, Optional

from .functions import Function
from .vectors import Vec3

_AXES = {Function.X: "x", Function.Y: "y", Function.Z: "z"}


class Point:
    """A named position in space."""

    identifier_prefix = "point"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.position = Vec3(x, y, z)
        self.workspace: Optional[Any] = None
        self.workspace_index = 0
        self.reference_count = 0
        self.identifier = "point"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r}, {tuple(self.position)})"

    def set_identifier_from_sequence(self, number: int) -> None:
        """Name this point from its prefix and a sequence number."""
        self.identifier = f"{self.identifier_prefix}{number}"

    def add_position(self, other: Vec3) -> None:
        """Move the point by ``other``."""
        self.position.add(other)

    def apply(self, function: Function, argument: float) -> bool:
        """Apply a numeric function; return whether it applies to this object."""
        axis = _AXES.get(function)
        if axis is None:
            return False
        setattr(self.position, axis, argument)
        return True

    def apply_list(self, function: Function, element: str) -> bool:
        """Apply a list function; a plain point takes none."""
        return False

    def size(self) -> int:
        """Number of child points."""
        return 0


class PlanePoints(Point):
    """A point that groups earlier points lying on one of the axis planes."""

    identifier_prefix = "planePoints"

    XY = 0
    XZ = 1
    YZ = 2
    MINIMUM_TYPE = XY
    MAXIMUM_TYPE = YZ

    def __init__(
        self, type: int = XY, x: float = 0.0, y: float = 0.0, z: float = 0.0
    ) -> None:
        super().__init__(x, y, z)
        self._type = self.XY
        self.type = type
        self.children: List[Point] = []

    @property
    def type(self) -> int:
        return self._type

    @type.setter
    def type(self, value: int) -> None:
        self._type = min(max(value, self.MINIMUM_TYPE), self.MAXIMUM_TYPE)

    def add_child(self, point: Optional[Point]) -> bool:
        """Add ``point`` if it was created before this group."""
        if point is not None and point.workspace_index < self.workspace_index:
            point.reference_count += 1
            self.children.append(point)
            return True
        return False

    def add_child_from_workspace(self, identifier: str) -> bool:
        """Add the workspace point named ``identifier``."""
        if self.workspace is None:
            return False
        return self.add_child(self.workspace.find_point(identifier))

    def size(self) -> int:
        return len(self.children)

    def apply(self, function: Function, argument: float) -> bool:
        if function is Function.TYPE:
            self.type = int(argument)
            return True
        return super().apply(function, argument)

    def apply_list(self, function: Function, element: str) -> bool:
        if function is Function.POINTS:
            return self.add_child_from_workspace(element)
        return False