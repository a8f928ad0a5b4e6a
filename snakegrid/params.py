"""Window, game, panel and colour settings, and the 2D vector type."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Vec2:
    """An immutable pair of int or float coordinates."""

    x: int | float = 0
    y: int | float = 0

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    f"Vec2 coordinates must be int or float, got {type(value).__name__}"
                )


WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Snake Game"
TARGET_FPS = 60

GRID_SIZE = 14
SNAKE_SPEED = 0.12  # seconds between snake moves

PANEL_PADDING = Vec2(40.0, 40.0)
PANEL_SPACING = 50.0
FONT_SIZE = 20

EMPTY_TILE_COLORS: tuple[Color, Color] = (
    (18, 18, 18, 255),
    (20, 20, 20, 255),
)
SNAKE_COLOR: Color = (200, 200, 200, 255)
FRUIT_COLOR: Color = (200, 0, 0, 255)
PANEL_COLOR: Color = (0, 0, 0, 150)
FONT_COLOR: Color = (255, 255, 255, 255)