"""The high-score screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from robotron.geometry import Vec2

MAX_NUMBER_OF_ITEMS = 3
FONT_PATH = "assets/font/robotron-2084.otf"


@dataclass
class TextItem:
    """A line of text to draw."""

    string: str
    fill_color: str
    position: Vec2


class Window(Protocol):
    """Anything that can draw a text item."""

    def draw(self, item: TextItem) -> None: ...


class HighscoreMenu:
    """Shows the last score and the high score."""

    def __init__(self, width: float, height: float) -> None:
        self.font_path = FONT_PATH
        self.score = 0
        self.high_score = 0
        self._close_hint = TextItem(
            "Press ESC to close",
            "red",
            Vec2(width / 20, height / (MAX_NUMBER_OF_ITEMS + 30) * 2),
        )
        self._last_score = TextItem(
            f"Last score: {self.score}",
            "white",
            Vec2(width / 20, height / (MAX_NUMBER_OF_ITEMS + 1)),
        )
        self._best_score = TextItem(
            f"Highscore: {self.high_score}",
            "white",
            Vec2(width / 20, height / (MAX_NUMBER_OF_ITEMS + 2)),
        )
        self.texts = [self._close_hint, self._last_score, self._best_score]

    def draw(self, window: Window) -> None:
        """Draw every line of the menu onto ``window``."""
        for item in self.texts:
            window.draw(item)

    def pass_score(self, current_score: int, high_score: int) -> None:
        """Update the scores shown."""
        self.score = current_score
        self.high_score = high_score
        self._last_score.string = f"Last score: {self.score}"
        self._best_score.string = f"Highscore: {self.high_score}"