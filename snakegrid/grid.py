"""The playing field: tile contents and drawing."""

from __future__ import annotations

from enum import IntEnum

import pygame

from .params import (
    EMPTY_TILE_COLORS,
    FRUIT_COLOR,
    GRID_SIZE,
    SNAKE_COLOR,
    WINDOW_WIDTH,
    Color,
    Vec2,
)


class TileType(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FRUIT = 2


class Grid:
    """A square grid of tiles drawn as a checkerboard with snake and fruit."""

    def __init__(self, size: int = GRID_SIZE, width: int = WINDOW_WIDTH) -> None:
        self.size = size
        self.tile_size = width / size
        self._layout: list[list[TileType]] = []
        self.clear()

    def clear(self) -> None:
        self._layout = [[TileType.EMPTY] * self.size for _ in range(self.size)]

    def _coords(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.size}x{self.size} grid")
        return int(x), int(y)

    def set_cell(self, pos: Vec2, tile: TileType | int) -> None:
        x, y = self._coords(pos.x, pos.y)
        self._layout[y][x] = TileType(tile)

    def cell(self, pos: Vec2) -> TileType:
        x, y = self._coords(pos.x, pos.y)
        return self._layout[y][x]

    def color_at(self, x: int, y: int) -> Color:
        x, y = self._coords(x, y)
        tile = self._layout[y][x]
        if tile is TileType.EMPTY:
            return EMPTY_TILE_COLORS[(x + y + 1) % 2]
        if tile is TileType.SNAKE:
            return SNAKE_COLOR
        return FRUIT_COLOR

    def render(self, surface: pygame.Surface) -> None:
        """Fill one rectangle per tile onto the surface."""
        edges = [round(i * self.tile_size) for i in range(self.size + 1)]
        for y, (top, bottom) in enumerate(zip(edges, edges[1:])):
            for x, (left, right) in enumerate(zip(edges, edges[1:])):
                rect = pygame.Rect(left, top, right - left, bottom - top)
                surface.fill(self.color_at(x, y), rect)