"""The window, main loop and command-line entry point."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from pathlib import Path

import pygame

from .events import EventManager
from .game import SnakeGame
from .panel import Panel
from .params import FONT_SIZE, TARGET_FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from .score_store import DEFAULT_SCORE_PATH
from .text import TextRenderer

DEFAULT_FONT_PATH = "font.ttf"


class App:
    """Owns the drawing surface and ties events, game and panel together."""

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        font_path: str | Path | None = DEFAULT_FONT_PATH,
        score_path: str | Path | None = DEFAULT_SCORE_PATH,
        rng: random.Random | None = None,
    ) -> None:
        pygame.init()
        self._owns_display = surface is None
        if surface is None:
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
        self.surface = surface

        self.text = TextRenderer()
        try:
            self.text.load_font(font_path, FONT_SIZE)
        except (FileNotFoundError, pygame.error) as exc:
            print(f"Failed to open font: {exc}", file=sys.stderr)
            self.text.load_font(None, FONT_SIZE)

        self.panel = Panel(self.text)
        self.events = EventManager()
        self.game = SnakeGame(
            score_path=score_path, rng=rng, on_score=self.panel.update_score
        )
        self.panel.update_score(0, self.game.hi_score)

    def render(self) -> None:
        self.surface.fill((0, 0, 0))
        self.game.grid.render(self.surface)
        if self.game.game_over:
            self.panel.render(self.surface)
        if self._owns_display:
            pygame.display.flip()

    def step(self, delta_time: float, events: Iterable[pygame.event.Event]) -> bool:
        """Run one frame; return False once quitting was requested."""
        self.events.poll_events(events)
        self.game.update(delta_time, self.events)
        self.render()
        return not self.events.should_quit()

    def run(self) -> None:
        """Loop at the target frame rate until the window is closed."""
        clock = pygame.time.Clock()
        try:
            running = True
            while running:
                delta_time = clock.tick(TARGET_FPS) / 1000.0
                running = self.step(delta_time, pygame.event.get())
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snakegrid", description="Play snake.")
    parser.add_argument("--font", default=DEFAULT_FONT_PATH, help="TrueType font file")
    parser.add_argument(
        "--score-file", default=str(DEFAULT_SCORE_PATH), help="high score file"
    )
    args = parser.parse_args(argv)

    try:
        app = App(font_path=args.font, score_path=args.score_file)
    except pygame.error as exc:
        print(f"Failed to init display: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())