"""Snake movement, fruit placement, collisions and scoring."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Protocol

import pygame

from .grid import Grid, TileType
from .params import GRID_SIZE, SNAKE_SPEED, WINDOW_WIDTH, Vec2
from .score_store import DEFAULT_SCORE_PATH, read_high_score, write_high_score

POINTS_PER_PART = 10


class KeySource(Protocol):
    def is_key_pressed(self, key: int) -> bool: ...


class MoveDirection(Enum):
    TOP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> MoveDirection:
        return MoveDirection((-self.dx, -self.dy))


# Checked in this order each frame.
_KEY_DIRECTIONS = (
    (pygame.KSCAN_W, MoveDirection.TOP),
    (pygame.KSCAN_S, MoveDirection.DOWN),
    (pygame.KSCAN_D, MoveDirection.RIGHT),
    (pygame.KSCAN_A, MoveDirection.LEFT),
)

_MAX_PENDING = 2


class SnakeGame:
    """The game state: snake, fruit, queued turns and scores."""

    def __init__(
        self,
        score_path: str | Path | None = DEFAULT_SCORE_PATH,
        rng: random.Random | None = None,
        on_score: Callable[[int, int], None] | None = None,
        size: int = GRID_SIZE,
    ) -> None:
        self.size = size
        self.grid = Grid(size, WINDOW_WIDTH)
        self._score_path = None if score_path is None else Path(score_path)
        self._rng = rng if rng is not None else random.Random()
        self._on_score = on_score
        self._snake: deque[Vec2] = deque()
        self._pending: deque[MoveDirection] = deque()
        self._move_time = 0.0
        self.direction = MoveDirection.DOWN
        self.game_over = True
        self.hi_score = 0 if self._score_path is None else read_high_score(self._score_path)
        self.fruit_pos = Vec2(-1, -1)
        self.reset()

    @property
    def snake(self) -> tuple[Vec2, ...]:
        """Snake parts, head first."""
        return tuple(self._snake)

    @property
    def pending_directions(self) -> tuple[MoveDirection, ...]:
        return tuple(self._pending)

    def _in_bounds(self, pos: Vec2) -> bool:
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def _place_fruit(self) -> None:
        self.fruit_pos = self.free_fruit_pos()
        if self._in_bounds(self.fruit_pos):
            self.grid.set_cell(self.fruit_pos, TileType.FRUIT)

    def reset(self) -> None:
        """Put a one-part snake in the centre and place a new fruit."""
        self._snake.clear()
        self.grid.clear()

        self._place_fruit()

        head = Vec2(self.size // 2, self.size // 2)
        self._snake.appendleft(head)
        self.grid.set_cell(head, TileType.SNAKE)

        self._pending.clear()
        self._pending.append(MoveDirection.DOWN)

    def listen_keys(self, events: KeySource) -> None:
        """Queue turns for newly pressed WASD keys."""
        if len(self._pending) > _MAX_PENDING:
            return
        for key, direction in _KEY_DIRECTIONS:
            if not events.is_key_pressed(key) or self.direction is direction.opposite:
                continue
            if not self._pending or self._pending[-1] is not direction:
                self._pending.append(direction)

    def update(self, delta_time: float, events: KeySource) -> None:
        if not self.game_over:
            self.update_snake(delta_time)
            self.listen_keys(events)
        elif any(events.is_key_pressed(key) for key, _ in _KEY_DIRECTIONS):
            self.game_over = False
            self.reset()

    def update_snake(self, delta_time: float) -> None:
        """Advance the snake one tile once enough time has passed."""
        self._move_time += delta_time
        if self._move_time < SNAKE_SPEED:
            return
        self._move_time = 0.0

        if self._pending:
            self.direction = self._pending.popleft()

        head = self._snake[0]
        new_head = Vec2(head.x + self.direction.dx, head.y + self.direction.dy)

        self.game_over = self.is_game_over(new_head)
        if self.game_over:
            return

        self._snake.appendleft(new_head)
        self.grid.set_cell(new_head, TileType.SNAKE)

        tail = self._snake.pop()
        self.grid.set_cell(tail, TileType.EMPTY)

        if new_head == self.fruit_pos:
            self._snake.append(tail)
            self._place_fruit()

    def is_game_over(self, head: Vec2) -> bool:
        """True if the head leaves the grid or hits the snake; records the score then."""
        over = not self._in_bounds(head) or head in self._snake
        if over:
            self._record_score()
        return over

    def free_fruit_pos(self) -> Vec2:
        """A random cell not taken by the snake, or (-1, -1) if there is none."""
        occupied = set(self._snake)
        free = [
            pos
            for pos in (Vec2(x, y) for y in range(self.size) for x in range(self.size))
            if pos not in occupied
        ]
        if not free:
            return Vec2(-1, -1)
        return free[self._rng.randrange(len(free))]

    def score(self) -> int:
        return (len(self._snake) - 1) * POINTS_PER_PART

    def _record_score(self) -> None:
        score = self.score()
        if score > self.hi_score:
            self.hi_score = score
            if self._score_path is not None:
                write_high_score(score, self._score_path)
        if self._on_score is not None:
            self._on_score(score, self.hi_score)