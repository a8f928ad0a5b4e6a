import pygame
import pytest

from snakegrid.panel import HINT_TEXT, Panel
from snakegrid.params import (
    FONT_COLOR,
    FONT_SIZE,
    PANEL_PADDING,
    PANEL_SPACING,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from snakegrid.text import TextRenderer


@pytest.fixture
def renderer():
    text_renderer = TextRenderer()
    text_renderer.load_font(None, FONT_SIZE)
    return text_renderer


def test_text_boxes_match_rendered_strings(renderer):
    panel = Panel(renderer)
    panel.update_score(30, 120)
    _, hi, last, hint = panel.layout()
    assert (hi[2], hi[3]) == renderer.render("HI: 120", FONT_COLOR).get_size()
    assert (last[2], last[3]) == renderer.render("LAST: 30", FONT_COLOR).get_size()
    assert (hint[2], hint[3]) == renderer.render(HINT_TEXT, FONT_COLOR).get_size()


def test_panel_is_centred(renderer):
    panel = Panel(renderer)
    panel.update_score(0, 0)
    (x, y, w, h), *_ = panel.layout()
    assert x * 2 + w == pytest.approx(WINDOW_WIDTH)
    assert y * 2 + h == pytest.approx(WINDOW_HEIGHT)


def test_panel_wraps_widest_text(renderer):
    panel = Panel(renderer)
    panel.update_score(10, 20)
    (_, _, w, h), hi, last, hint = panel.layout()
    assert w == max(hi[2], last[2], hint[2]) + PANEL_PADDING.x * 2
    assert h == hi[3] + last[3] + hint[3] + PANEL_PADDING.y * 2 + PANEL_SPACING * 2


def test_texts_stacked_with_spacing(renderer):
    panel = Panel(renderer)
    panel.update_score(10, 20)
    (px, py, _, _), hi, last, hint = panel.layout()
    assert (hi[0], hi[1]) == (px + PANEL_PADDING.x, py + PANEL_PADDING.y)
    assert last[0] == hi[0] and hint[0] == hi[0]
    assert last[1] == hi[1] + hi[3] + PANEL_SPACING
    assert hint[1] == last[1] + last[3] + PANEL_SPACING


def test_render_darkens_panel_area_only(renderer):
    panel = Panel(renderer)
    panel.update_score(0, 0)
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((200, 200, 200))
    panel.render(surface)
    (px, py, _, _), *_ = panel.layout()
    inside = surface.get_at((round(px) + 2, round(py) + 2))
    assert inside.r < 200
    assert tuple(surface.get_at((0, 0))) == (200, 200, 200, 255)


def test_render_before_update_draws_empty_box(renderer):
    panel = Panel(renderer)
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((200, 200, 200))
    panel.render(surface)
    centre = surface.get_at((WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2))
    assert centre.r < 200
    assert centre.r == centre.g == centre.b