"""The player's bullet."""

from __future__ import annotations

from robotron.geometry import Collision, RectShape, Vec2


class Bullet:
    """A red player bullet travelling at a fixed velocity."""

    def __init__(self) -> None:
        self.shape = RectShape(size=Vec2(4.0, 50.0), fill_color="red")
        self.velocity = Vec2()
        self.max_speed = 30.0
        self.movement_multiplier = 60.0

    def move(self, dt: float) -> None:
        """Advance the bullet by its velocity over ``dt``."""
        self.shape.move(self.velocity * dt * self.movement_multiplier)

    def is_out_of_bounds(self, bounds: Vec2, offset: int) -> bool:
        """True when the bullet has left the play area."""
        pos = self.shape.position
        return (
            pos.x < offset
            or pos.x > bounds.x + offset
            or pos.y < offset
            or pos.y > bounds.y + offset
        )

    def collider(self) -> Collision:
        return Collision(self.shape)


def erase_bullet(bullets: list[Bullet], index: int) -> list[Bullet]:
    """Return a copy of ``bullets`` without the one at ``index``."""
    if not -len(bullets) <= index < len(bullets):
        raise IndexError("bullet index out of range")
    remaining = list(bullets)
    del remaining[index]
    return remaining