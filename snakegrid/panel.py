"""The score panel shown while the game is over."""

from __future__ import annotations

import pygame

from .params import (
    FONT_COLOR,
    PANEL_COLOR,
    PANEL_PADDING,
    PANEL_SPACING,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Vec2,
)
from .text import TextRenderer

Box = tuple[float, float, float, float]

HINT_TEXT = "Press WASD to start"


class Panel:
    """Centred translucent box listing high score, last score and a hint."""

    def __init__(
        self,
        text_renderer: TextRenderer,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        padding: Vec2 = PANEL_PADDING,
        spacing: float = PANEL_SPACING,
    ) -> None:
        self._text = text_renderer
        self._width = width
        self._height = height
        self._padding = padding
        self._spacing = spacing
        self._hi: pygame.Surface | None = None
        self._last: pygame.Surface | None = None
        self._hint: pygame.Surface | None = None

    def update_score(self, score: int, hiscore: int) -> None:
        self._hi = self._text.render(f"HI: {hiscore}", FONT_COLOR)
        self._last = self._text.render(f"LAST: {score}", FONT_COLOR)
        self._hint = self._text.render(HINT_TEXT, FONT_COLOR)

    @staticmethod
    def _size(surface: pygame.Surface | None) -> tuple[float, float]:
        if surface is None:
            return 0.0, 0.0
        width, height = surface.get_size()
        return float(width), float(height)

    def layout(self) -> tuple[Box, Box, Box, Box]:
        """Return (x, y, w, h) boxes for the panel, high score, last score and hint."""
        hi_w, hi_h = self._size(self._hi)
        last_w, last_h = self._size(self._last)
        hint_w, hint_h = self._size(self._hint)
        pad = self._padding

        max_width = max(hi_w, last_w, hint_w) + pad.x * 2
        total_height = hi_h + last_h + hint_h + pad.y * 2 + self._spacing * 2
        panel = (
            (self._width - max_width) / 2.0,
            (self._height - total_height) / 2.0,
            max_width,
            total_height,
        )
        hi = (panel[0] + pad.x, panel[1] + pad.y, hi_w, hi_h)
        last = (hi[0], hi[1] + self._spacing + hi[3], last_w, last_h)
        hint = (hi[0], last[1] + self._spacing + last[3], hint_w, hint_h)
        return panel, hi, last, hint

    def render(self, surface: pygame.Surface) -> None:
        panel, *boxes = self.layout()
        px, py, pw, ph = panel
        overlay = pygame.Surface((max(1, round(pw)), max(1, round(ph))), pygame.SRCALPHA)
        overlay.fill(PANEL_COLOR)
        surface.blit(overlay, (round(px), round(py)))
        for text, box in zip((self._hi, self._last, self._hint), boxes):
            if text is not None:
                surface.blit(text, (round(box[0]), round(box[1])))