"""Keeps track of bullets fired by enemies."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from robotron.enemy_bullet import EnemyBullet, EnforcerBullet
from robotron.geometry import Vec2

BulletFactory = Callable[[Vec2, int, Vec2, float], EnemyBullet]


class EnemyBulletManager:
    """Creates enemy bullets by shooter name and holds the live ones."""

    def __init__(self, factories: Mapping[str, BulletFactory] | None = None) -> None:
        self.bounds_offset = 0
        self.bounds = Vec2()
        self._bullets: list[EnemyBullet] = []
        self._factories: dict[str, BulletFactory] = {"Enforcer": EnforcerBullet}
        if factories:
            self._factories.update(factories)

    @property
    def bullets(self) -> list[EnemyBullet]:
        """A copy of the live bullets."""
        return list(self._bullets)

    def configure(self, bounds_offset: int, bounds: Vec2) -> None:
        """Set the play-area offset and size given to new bullets."""
        self.bounds_offset = bounds_offset
        self.bounds = bounds

    def spawn(self, enemy_name: str, target_location: Vec2, dt: float) -> EnemyBullet | None:
        """Fire a bullet for ``enemy_name``; unknown shooters fire nothing."""
        factory = self._factories.get(enemy_name)
        if factory is None:
            return None
        bullet = factory(target_location, self.bounds_offset, self.bounds, dt)
        self._bullets.append(bullet)
        return bullet

    def delete(self, index: int) -> None:
        """Remove the bullet at ``index``."""
        if not -len(self._bullets) <= index < len(self._bullets):
            raise IndexError("bullet index out of range")
        del self._bullets[index]

    def clear(self) -> list[EnemyBullet]:
        """Remove every bullet and return the (now empty) list."""
        self._bullets.clear()
        return self.bullets