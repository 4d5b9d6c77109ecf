"""Grunts, Hulks and Electrodes."""

from __future__ import annotations

import random

from robotron.animation import Animation, IntRect
from robotron.enemy import Enemy, SoundPlayer
from robotron.geometry import Vec2


class Grunt(Enemy):
    """Marches straight at the player in short steps."""

    def __init__(
        self,
        dt: float,
        texture_size: tuple[int, int] = (0, 0),
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.max_speed = 30.0
        self.movement_offset = dt * 15
        self.name = "Grunt"
        self.score = 200
        self.shape.texture_path = "assets/sprites/gruntSprites.png"
        self.shape.texture_rect = IntRect()
        self.animation = Animation(texture_size, (3, 1), dt * 25)

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Step toward ``target`` once the movement timer has run out."""
        self.shape.texture_rect = self.animation.uv_rect
        self.animation.update(0, dt, True)
        self.movement_timer += dt
        if self.movement_timer >= self.movement_offset:
            direction = target - self.position
            if direction.length() != 0.0:
                self.velocity = direction.normalized() * self.max_speed
            self._play(6)
            self.position = self.position + self.velocity * dt * self.movement_multiplier
            self.shape.position = self.position
            self.movement_timer = 0.0


class Hulk(Enemy):
    """An immortal brute that wanders between random points."""

    def __init__(
        self,
        dt: float,
        texture_size: tuple[int, int] = (0, 0),
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.max_speed = 1.5 * 6
        self.name = "Hulk"
        self.is_immortal = True
        self.movement_offset = dt * 6
        self.seek_target = Vec2()
        self.is_target_reached = False
        self.bounds_new = Vec2()
        self.shape.texture_path = "assets/sprites/hulkSprites.png"
        self.shape.texture_rect = IntRect()
        self.position = self.shape.geometric_center
        self.animation = Animation(texture_size, (3, 3), dt * 1)

    def _random_target(self) -> Vec2:
        return Vec2(
            self.bounds_offset + self.rng.randrange(int(self.bounds_new.x)),
            self.bounds_offset + self.rng.randrange(int(self.bounds_new.y)),
        )

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Wander toward a random point, ignoring ``target``."""
        self.movement_timer += dt
        self.shape.texture_rect = self.animation.uv_rect
        pos, seek = self.position, self.seek_target
        if (seek.x - 10 <= pos.x <= seek.x + 10) or (seek.y - 10 <= pos.y <= seek.y + 10):
            self.is_target_reached = True
        if self.is_target_reached:
            self.seek_target = self._random_target()
            self.is_target_reached = False
        if self.movement_timer >= self.movement_offset:
            direction = self.seek_target - self.position
            if direction.length() != 0.0:
                self.velocity = direction.normalized() * self.max_speed
            if self.velocity.y > 0:
                row = 2
            elif self.velocity.x > 0:
                row = 1
            else:
                row = 0
            self.animation.update(row, dt, True)
            self.position = self.position + self.velocity * dt * self.movement_multiplier
            self.shape.position = self.position
            self.movement_timer = 0.0

    def spawn(
        self, position: Vec2, bounds: Vec2, sound_manager: SoundPlayer | None
    ) -> None:
        """Place the Hulk and pick its first wander destination."""
        self.sound_manager = sound_manager
        self.position = position
        self.shape.position = position
        self.bounds_new = bounds
        self.seek_target = self._random_target()


class Electrode(Enemy):
    """A stationary hazard showing one fixed sprite frame."""

    def __init__(
        self,
        sprite_width: int,
        sound_manager: SoundPlayer | None = None,
        texture_size: tuple[int, int] = (0, 0),
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.sprite_width = sprite_width
        self.shape.size = Vec2(20.0, 20.0)
        self.score = 20
        self.name = "Electrode"
        self.shape.texture_path = "assets/sprites/electrodeSprites.png"
        self.shape.texture_rect = IntRect(5 * 10, 0, 10, texture_size[1])