"""Bullets fired by enemies."""

from __future__ import annotations

from enum import Enum

from robotron.animation import Animation, IntRect
from robotron.geometry import Collision, RectShape, Vec2


class OOBSide(Enum):
    """Which edge of the play area a bullet crossed."""

    NONE = "None"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"


class EnemyBullet:
    """Base enemy bullet: bounds checks and bouncing."""

    def __init__(self) -> None:
        self.shape = RectShape()
        self.name = ""
        self.offset = 0
        self.max_bounce = 0
        self.current_bounce = 0
        self.bounds = Vec2()
        self.position = Vec2()
        self.oob_location = OOBSide.NONE
        self.velocity = Vec2()
        self.animation: Animation | None = None

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Move toward ``target``; the base bullet does not move."""

    def is_out_of_bounds(self, bounds: Vec2, offset: int) -> bool:
        """True when outside the play area; records which side was crossed."""
        pos = self.shape.position
        if pos.x < offset:
            self.oob_location = OOBSide.LEFT
        elif pos.x > bounds.x + offset:
            self.oob_location = OOBSide.RIGHT
        elif pos.y < offset:
            self.oob_location = OOBSide.UP
        elif pos.y > bounds.y + offset:
            self.oob_location = OOBSide.DOWN
        else:
            self.oob_location = OOBSide.NONE
        return self.oob_location is not OOBSide.NONE

    def update_bounce(self) -> bool:
        """Count a bounce; True when the bullet has no bounces left."""
        self.current_bounce += 1
        if self.current_bounce >= self.max_bounce:
            return True
        self.invert_momentum()
        return False

    def invert_momentum(self) -> None:
        """Turn the velocity away from the edge last crossed."""
        vx, vy = self.velocity.x, self.velocity.y
        if self.oob_location is OOBSide.LEFT:
            self.velocity = Vec2(vx - 1, vy)
        elif self.oob_location is OOBSide.RIGHT:
            self.velocity = Vec2(-vx, vy)
        elif self.oob_location in (OOBSide.UP, OOBSide.DOWN):
            self.velocity = Vec2(vx, -vy)

    def collider(self) -> Collision:
        return Collision(self.shape)


class EnforcerBullet(EnemyBullet):
    """A spark that locks onto its first target and flies straight."""

    def __init__(
        self,
        position: Vec2,
        offset: int,
        bounds: Vec2,
        dt: float,
        texture_size: tuple[int, int] = (0, 0),
    ) -> None:
        super().__init__()
        self.bounds = bounds
        self.offset = offset
        self.shape.size = Vec2(20.0, 20.0)
        self.shape.fill_color = "white"
        self.position = position
        self.shape.position = position
        self.target_location = Vec2(0.0, 0.0)
        self.direction = Vec2()
        self.velocity = Vec2(0.0, 0.0)
        self.name = "Enforcer"
        self.shape.texture_path = "assets/sprites/enforcerBulletSprite.png"
        self.shape.texture_rect = IntRect()
        self.animation = Animation(texture_size, (4, 1), dt * 4)

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Fly toward the first target given; later targets are ignored."""
        self.shape.texture_rect = self.animation.uv_rect
        self.animation.update(0, dt, True)
        if self.target_location == Vec2(0.0, 0.0):
            self.target_location = target
            self.direction = self.target_location - self.position
            if self.direction.length() != 0.0:
                self.velocity = self.direction.normalized() * 3.0
        self.position = self.position + self.velocity * dt * 100.0
        self.shape.position = self.position