"""Three-component vectors with in-place arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec3:
    """A mutable 3D vector; arithmetic methods modify it and return it."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def copy(self) -> Vec3:
        """Return an independent vector with the same components."""
        return Vec3(self.x, self.y, self.z)

    def set(self, x: float, y: float, z: float) -> Vec3:
        """Replace all three components."""
        self.x, self.y, self.z = x, y, z
        return self

    def add(self, other: Vec3) -> Vec3:
        """Add ``other`` component-wise."""
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def multiply(self, scalar: float) -> Vec3:
        """Scale every component by ``scalar``."""
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def cross(self, other: Vec3) -> Vec3:
        """Replace this vector with ``self x other``."""
        return self.set(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Scale to unit length; a zero vector is left unchanged."""
        length = self.length()
        if length > 0:
            self.multiply(1.0 / length)
        return self