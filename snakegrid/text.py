"""Rendering strings to surfaces with a loaded font."""

from __future__ import annotations

from pathlib import Path

import pygame

from .params import Color


class TextRenderer:
    """Holds one font and renders antialiased text with it."""

    def __init__(self) -> None:
        self._font: pygame.font.Font | None = None

    def load_font(self, path: str | Path | None, size: int) -> None:
        """Load a font file, or pygame's default font when path is None."""
        if path is not None and not Path(path).is_file():
            raise FileNotFoundError(f"font file not found: {path}")
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(None if path is None else str(path), size)

    def render(self, text: str, color: Color) -> pygame.Surface:
        if self._font is None:
            raise RuntimeError("font not loaded")
        return self._font.render(text, True, color)