"""Enforcers keep their distance from the player and shoot sparks."""

from __future__ import annotations

import random

from robotron.animation import Animation, IntRect
from robotron.bullet_manager import EnemyBulletManager
from robotron.enemy import Enemy
from robotron.geometry import Vec2


class Enforcer(Enemy):
    """Circles the player at a distance and fires at regular intervals."""

    def __init__(
        self,
        dt: float,
        bounds_offset: int,
        bounds_size: Vec2,
        player_position: Vec2,
        bullet_manager: EnemyBulletManager,
        texture_size: tuple[int, int] = (0, 0),
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.bullet_manager = bullet_manager
        self.bounds_size = bounds_size
        self.bounds_offset = bounds_offset
        self.player_position = player_position
        self.player_velocity = Vec2()
        self.max_speed = 500.0 * dt
        self.movement_offset = 3.0 * dt
        self.name = "Enforcer"
        self.fire_time = 50 * dt
        self.fire_timer = 0.0
        self.initial_wait_timer = 0.0
        self.initial_wait_time = 1.5
        self.score = 100
        self.shape.texture_path = "assets/sprites/enforcerSprites.png"
        self.shape.texture_rect = IntRect()
        self.animation = Animation(texture_size, (6, 1), dt * 25)

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Approach ``target`` but back off inside its radius, firing periodically."""
        self.shape.texture_rect = self.animation.uv_rect
        self.animation.update(0, dt, False)
        if self.initial_wait_timer < self.initial_wait_time:
            self.animation.update(0, dt, False)
            self.shape.texture_rect = self.animation.uv_rect
            self.initial_wait_timer += dt
            return

        self.movement_timer += dt
        if self.movement_timer <= self.movement_offset:
            return

        self.animation.update(0, dt, False)
        direction = target - self.position
        if direction.length() != 0.0:
            self.velocity = direction.normalized() * self.max_speed
        self.movement_timer = 0.0

        reach = self.bounds_offset * 2.5
        pos = self.position
        outside = (
            pos.x <= target.x - reach
            or pos.x >= target.x + reach
            or pos.y <= target.y - reach
            or pos.y >= target.y + reach
        )
        if not outside:
            self.velocity = self.velocity - self.velocity * 2

        self._clamp_to_arena()
        self.position = self.position + self.velocity * dt * self.movement_multiplier
        self.shape.position = self.position

        self.fire_timer += dt
        if self.fire_timer >= self.fire_time:
            self._play(3)
            self.bullet_manager.spawn("Enforcer", self.position, dt)
            self.fire_timer = 0.0

    def _clamp_to_arena(self) -> None:
        low = self.bounds_offset + 18
        if self.position.x < low:
            self.position = Vec2(low, self.position.y)
            self.shape.position = self.position
        right = self.bounds_size.x + self.bounds_offset - 18
        if self.position.x > right:
            self.position = Vec2(right, self.position.y)
            self.shape.position = self.bounds_size
        if self.position.y < low:
            self.position = Vec2(self.position.x, low)
            self.shape.position = self.position
        bottom = self.bounds_offset + self.bounds_size.y - 40
        if self.position.y > bottom:
            self.position = Vec2(self.position.x, bottom)
            self.shape.position = self.position