"""Sprite-sheet animation stepping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntRect:
    """An integer rectangle selecting part of a texture."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


class Animation:
    """Steps through the frames of one row of a sprite sheet."""

    def __init__(
        self,
        texture_size: tuple[int, int],
        image_count: tuple[int, int],
        switch_time: float,
    ) -> None:
        columns, rows = image_count
        if columns <= 0 or rows <= 0:
            raise ValueError("image count must be positive in both directions")
        self.image_count = (columns, rows)
        self.switch_time = switch_time
        self.uv_width = texture_size[0] // columns
        self.uv_height = texture_size[1] // rows
        self.total_time = 0.0
        self.current_column = 0
        self.current_row = 0
        self.uv_rect = IntRect(0, 0, self.uv_width, self.uv_height)

    def update(self, row: int, dt: float, is_looping: bool) -> None:
        """Advance time by ``dt`` on ``row``, moving to the next frame when due."""
        self.current_row = row
        self.total_time += dt
        if self.total_time < self.switch_time:
            return
        self.total_time -= self.switch_time
        self.current_column += 1
        if self.current_column >= self.image_count[0]:
            self.current_column = 0 if is_looping else self.current_column - 1
        self.uv_rect = IntRect(
            self.current_column * self.uv_width,
            self.current_row * self.uv_height,
            self.uv_width,
            self.uv_height,
        )