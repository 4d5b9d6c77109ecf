"""Brains chase family members and fall back to the player."""

from __future__ import annotations

import random
from collections.abc import Iterable

from robotron.animation import Animation, IntRect
from robotron.enemy import Enemy, SoundPlayer
from robotron.family import Family
from robotron.geometry import Vec2

_FALLBACK_SEEK = Vec2(50.0, 500.0)


class Brain(Enemy):
    """Seeks a random family member while any remain, else the given target."""

    def __init__(
        self,
        dt: float,
        texture_size: tuple[int, int] = (0, 0),
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.max_speed = 10.0
        self.movement_offset = dt * 15
        self.shape.position = self.shape.geometric_center
        self.name = "Brain"
        self.score = 500
        self.families: list[Family] = []
        self.family_to_target: Family | None = None
        self.target_location = Vec2()
        self.seek_target = Vec2()
        self.should_seek_player = True
        self.bounds_new = Vec2()
        self.shape.texture_path = "assets/sprites/brainSprites.png"
        self.shape.texture_rect = IntRect()
        self.position = self.shape.geometric_center
        self.animation = Animation(texture_size, (3, 4), dt * 6)

    def spawn(
        self,
        position: Vec2,
        bounds: Vec2,
        sound_manager: SoundPlayer | None,
        families: Iterable[Family] = (),
    ) -> None:
        """Place the brain and pick a first family member to chase."""
        self.sound_manager = sound_manager
        self.position = position
        self.shape.position = position
        self.families = list(families)
        self.bounds_new = bounds
        if self.families:
            self.family_to_target = self.rng.choice(self.families)

    def move_toward(self, target: Vec2, dt: float) -> None:
        """Step toward the chosen family member, or ``target`` if there is none."""
        self.movement_timer += dt
        if self.families and self.family_to_target is not None:
            self.seek_target = self.family_to_target.shape.position
        else:
            self.seek_target = target
        if self.movement_timer <= self.movement_offset:
            return
        self.shape.texture_rect = self.animation.uv_rect
        direction = self.seek_target - self.position
        if direction.length() != 0.0:
            self.velocity = direction.normalized() * self.max_speed
        self.position = self.position + self.velocity * dt * self.movement_multiplier
        self.animation.update(0, dt, True)
        self.shape.texture_rect = self.animation.uv_rect
        self.shape.position = self.position
        self.movement_timer = 0.0

    def update_families(self, families: Iterable[Family]) -> None:
        """Replace the list of family members the brain knows about."""
        self.families = list(families)

    def target_new_family(self) -> None:
        """Choose a random family member, or seek a fixed point if none remain."""
        if self.families:
            self.family_to_target = self.rng.choice(self.families)
            self.target_location = self.family_to_target.shape.position
        else:
            self.seek_target = _FALLBACK_SEEK

    def check_if_target_died(self, family: Family) -> None:
        """Retarget when ``family`` was the one being chased."""
        if self.family_to_target is family:
            self.target_new_family()
        elif not self.families:
            self.should_seek_player = True