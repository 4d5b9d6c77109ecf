"""Family members who wander the arena waiting to be rescued."""

from __future__ import annotations

import random

from robotron.animation import Animation, IntRect
from robotron.enemy import Enemy, SoundPlayer
from robotron.geometry import Vec2


class Family(Enemy):
    """A wandering human that picks random destinations."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.shape.outline_color = "black"
        self.max_speed = 2.0
        self.is_family = True
        self.seek_target = Vec2()
        self.is_target_reached = False
        self.family_movement_offset = 8.0
        self.family_movement_timer = 0.0
        self.family_animation: Animation | None = None

    def _random_target(self, area: Vec2) -> Vec2:
        return Vec2(
            self.bounds_offset + self.rng.randrange(int(area.x)),
            self.bounds_offset + self.rng.randrange(int(area.y)),
        )

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Wander toward a random destination, choosing a new one on arrival."""
        self.family_movement_timer += dt
        pos, seek = self.position, self.seek_target
        if (seek.x - 10 <= pos.x <= seek.x + 10) or (seek.y - 10 <= pos.y <= seek.y + 10):
            self.is_target_reached = True
        if self.is_target_reached:
            self.seek_target = self._random_target(self.window_size)
            self.is_target_reached = False
        if self.family_movement_timer >= self.family_movement_offset:
            direction = self.seek_target - self.position
            if direction.length() != 0.0:
                self.velocity = direction.normalized() * self.max_speed
                self.family_movement_timer = 0.0
            self.position = self.position + self.velocity * dt * self.movement_multiplier
            self.shape.position = self.position
            if self.family_animation is not None:
                if self.velocity.y > 0:
                    row = 2
                elif self.velocity.x > 0:
                    row = 1
                else:
                    row = 0
                self.family_animation.update(row, dt, True)
        if self.family_animation is not None:
            self.shape.texture_rect = self.family_animation.uv_rect

    def spawn(
        self, position: Vec2, bounds: Vec2, sound_manager: SoundPlayer | None
    ) -> None:
        """Place the family member and pick its first destination."""
        self.sound_manager = sound_manager
        self.position = position
        self.shape.position = position
        self.window_size = bounds
        self.seek_target = self._random_target(bounds)


class Daddy(Family):
    """The father of the last human family."""

    def __init__(
        self,
        dt: float,
        texture_size: tuple[int, int] = (0, 0),
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.max_speed = 15.0
        self.family_movement_offset = dt * 8
        self.name = "Daddy"
        self.shape.texture_path = "assets/sprites/daddySprites.png"
        self.family_animation = Animation(texture_size, (3, 4), dt * 3)
        self.shape.texture_rect = self.family_animation.uv_rect


__all__ = ["Daddy", "Family", "IntRect"]