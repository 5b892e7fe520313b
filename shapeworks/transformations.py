"""Translations, rotations and scalings that shapes refer to by identifier."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .functions import Function
from .matrices import Mat4
from .vectors import Vec3

_AXES = {Function.X: "x", Function.Y: "y", Function.Z: "z"}


class Transformation(ABC):
    """A named transformation whose matrix follows its components."""

    identifier_prefix = "transformation"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.components = Vec3(x, y, z)
        self.reference_count = 0
        self.identifier = "transformation"
        self.matrix = Mat4.identity()
        self.update_matrix()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r}, {tuple(self.components)})"

    def set_identifier_from_sequence(self, number: int) -> None:
        """Name this transformation from its prefix and a sequence number."""
        self.identifier = f"{self.identifier_prefix}{number}"

    def add_position(self, other: Vec3) -> None:
        """Add ``other`` to the components."""
        self.components.add(other)
        self.update_matrix()

    def apply(self, function: Function, argument: float) -> bool:
        """Apply a numeric function; return whether it applies to this object."""
        axis = _AXES.get(function)
        if axis is None:
            return False
        setattr(self.components, axis, argument)
        self.update_matrix()
        return True

    def update_matrix(self) -> None:
        """Recompute the matrix from the current parameters."""
        self.matrix = self._compute_matrix()

    @abstractmethod
    def _compute_matrix(self) -> Mat4:
        """Build the matrix for the current parameters."""


class Translate(Transformation):
    """A translation by the components."""

    identifier_prefix = "translate"

    def _compute_matrix(self) -> Mat4:
        return Mat4.translation(self.components)


class Scale(Transformation):
    """A scaling by the components."""

    identifier_prefix = "scale"

    def _compute_matrix(self) -> Mat4:
        return Mat4.scaling(self.components)


class Rotate(Transformation):
    """A rotation of ``angle`` degrees about the axis given by the components."""

    identifier_prefix = "rotate"

    def __init__(
        self, angle: float = 0.0, x: float = 0.0, y: float = 0.0, z: float = 0.0
    ) -> None:
        self._angle = angle
        super().__init__(x, y, z)

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._angle = value
        self.update_matrix()

    def add_angle(self, angle: float) -> None:
        """Increase the rotation angle by ``angle`` degrees."""
        self.angle = self._angle + angle

    def apply(self, function: Function, argument: float) -> bool:
        if function is Function.ANGLE:
            self.angle = argument
            return True
        return super().apply(function, argument)

    def _compute_matrix(self) -> Mat4:
        return Mat4.rotation(self._angle, self.components)