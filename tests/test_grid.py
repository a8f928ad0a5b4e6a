import pygame
import pytest

from snakegrid.grid import Grid, TileType
from snakegrid.params import (
    EMPTY_TILE_COLORS,
    FRUIT_COLOR,
    GRID_SIZE,
    SNAKE_COLOR,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Vec2,
)


def test_new_grid_is_empty():
    grid = Grid()
    assert all(
        grid.cell(Vec2(x, y)) is TileType.EMPTY
        for x in range(GRID_SIZE)
        for y in range(GRID_SIZE)
    )


def test_tile_size_follows_window_width():
    assert Grid().tile_size == WINDOW_WIDTH / GRID_SIZE


def test_set_and_read_cell():
    grid = Grid()
    grid.set_cell(Vec2(3, 5), TileType.SNAKE)
    assert grid.cell(Vec2(3, 5)) is TileType.SNAKE
    assert grid.cell(Vec2(5, 3)) is TileType.EMPTY


def test_set_cell_accepts_plain_int():
    grid = Grid()
    grid.set_cell(Vec2(0, 0), 2)
    assert grid.cell(Vec2(0, 0)) is TileType.FRUIT


def test_clear_resets_all_cells():
    grid = Grid()
    grid.set_cell(Vec2(1, 1), TileType.FRUIT)
    grid.clear()
    assert grid.cell(Vec2(1, 1)) is TileType.EMPTY


@pytest.mark.parametrize("pos", [Vec2(-1, 0), Vec2(0, -1), Vec2(GRID_SIZE, 0), Vec2(0, GRID_SIZE)])
def test_out_of_range_cell_rejected(pos):
    grid = Grid()
    with pytest.raises(IndexError):
        grid.set_cell(pos, TileType.SNAKE)
    with pytest.raises(IndexError):
        grid.cell(pos)


def test_empty_tiles_form_checkerboard():
    grid = Grid()
    assert grid.color_at(0, 0) == EMPTY_TILE_COLORS[1]
    assert grid.color_at(1, 0) == EMPTY_TILE_COLORS[0]
    assert grid.color_at(1, 1) == grid.color_at(0, 0)


def test_occupied_tile_colors():
    grid = Grid()
    grid.set_cell(Vec2(2, 2), TileType.SNAKE)
    grid.set_cell(Vec2(4, 4), TileType.FRUIT)
    assert grid.color_at(2, 2) == SNAKE_COLOR
    assert grid.color_at(4, 4) == FRUIT_COLOR


def test_render_paints_tiles():
    grid = Grid()
    grid.set_cell(Vec2(2, 3), TileType.FRUIT)
    grid.set_cell(Vec2(0, 0), TileType.SNAKE)
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    grid.render(surface)
    ts = grid.tile_size
    assert surface.get_at((int(2.5 * ts), int(3.5 * ts))) == pygame.Color(*FRUIT_COLOR)
    assert surface.get_at((1, 1)) == pygame.Color(*SNAKE_COLOR)
    assert surface.get_at((int(1.5 * ts), int(0.5 * ts))) == pygame.Color(*EMPTY_TILE_COLORS[0])


def test_render_covers_whole_surface():
    grid = Grid()
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((255, 0, 255))
    grid.render(surface)
    corner = surface.get_at((WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1))
    assert tuple(corner) == grid.color_at(GRID_SIZE - 1, GRID_SIZE - 1)