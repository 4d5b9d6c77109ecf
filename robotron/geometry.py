"""Vectors, rectangle shapes and axis-aligned collision checks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has none."""
        norm = self.length()
        if norm == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / norm, self.y / norm)


@dataclass
class RectShape:
    """A drawable rectangle: size, position, origin and texture details."""

    size: Vec2 = Vec2()
    position: Vec2 = Vec2()
    origin: Vec2 = Vec2()
    fill_color: str = "white"
    outline_color: str = "white"
    texture_path: str | None = None
    texture_rect: Any = None

    @property
    def geometric_center(self) -> Vec2:
        """Centre of the rectangle in its own local coordinates."""
        return self.size / 2

    def move(self, offset: Vec2) -> None:
        """Shift the shape by ``offset``."""
        self.position = self.position + offset


class Collision:
    """Collision helper bound to a shape."""

    def __init__(self, body: RectShape) -> None:
        self.body = body

    @property
    def position(self) -> Vec2:
        return self.body.position

    @property
    def half_size(self) -> Vec2:
        return self.body.size / 2.0

    def move(self, dx: float, dy: float) -> None:
        """Move the bound shape by ``(dx, dy)``."""
        self.body.move(Vec2(dx, dy))

    def check_collision(self, this_shape: RectShape, other: RectShape) -> bool:
        """Axis-aligned test: true when the shapes lie more than one unit apart on an axis."""
        other_half = other.size / 2
        this_half = this_shape.size / 2
        delta_x = other.position.x - this_shape.position.x
        delta_y = other.position.y - this_shape.position.y
        intersect_x = abs(delta_x) - (other_half.x + this_half.x)
        intersect_y = abs(delta_y) - (other_half.y + this_half.y)
        return intersect_x > 1.0 or intersect_y > 1.0