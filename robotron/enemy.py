"""Base class shared by every enemy and family member."""

from __future__ import annotations

import random
from typing import Protocol

from robotron.animation import Animation
from robotron.geometry import Collision, RectShape, Vec2


class SoundPlayer(Protocol):
    """Anything that can play a numbered sound effect."""

    def play_sound(self, index: int) -> None: ...


class Enemy:
    """A 40x40 actor with a position, velocity and score value."""

    def __init__(self, rng: random.Random | None = None) -> None:
        size = Vec2(40.0, 40.0)
        self.shape = RectShape(size=size, origin=size / 2.0)
        self.position = Vec2()
        self.velocity = Vec2()
        self.window_size = Vec2()
        self.max_speed = 0.0
        self.movement_multiplier = 60.0
        self.knockback_frame_length = 6.0
        self.is_immortal = False
        self.is_family = False
        self.should_take_knockback = False
        self.score = 50
        self.bounds_offset = 0
        self.movement_offset = 0.0
        self.movement_timer = 0.0
        self.name = ""
        self.animation: Animation | None = None
        self.sound_manager: SoundPlayer | None = None
        self.rng = rng if rng is not None else random.Random()

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Move toward ``target``; the base enemy stands still."""

    def take_knockback(self, dt: float, bullet_velocity: Vec2) -> None:
        """React to a hit; only immortal enemies are pushed back."""
        self.should_take_knockback = True
        if self.is_immortal:
            self.position = self.position + bullet_velocity

    def spawn(
        self, position: Vec2, bounds: Vec2, sound_manager: SoundPlayer | None
    ) -> None:
        """Place the enemy and remember the play area and sound player."""
        self.sound_manager = sound_manager
        self.shape.position = position
        self.position = position
        self.window_size = bounds

    def target_new_family(self) -> None:
        """Pick a new family member to chase; most enemies chase none."""

    def collider(self) -> Collision:
        return Collision(self.shape)

    def _play(self, index: int) -> None:
        if self.sound_manager is not None:
            self.sound_manager.play_sound(index)