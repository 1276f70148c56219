from __future__ import annotations
from typing import Optional

import pygame

from martians import const
from martians.game.arena import Arena
from martians.render.shapes import draw_text_centered, map_color
from martians.render.sprites import SpriteCache

GAME_OVER_LINES = (
    "You lost!",
    "The martians have overrun you.",
)


class FrameRenderer:
    """
    Paints the arena onto the canvas surface. Read-only with respect to the
    arena; called on the redraw cadence, independent of spawning and hits.
    """

    def __init__(self, arena: Arena, capacity: int, sprites: Optional[SpriteCache] = None):
        self.arena = arena
        self.capacity = capacity
        self.sprites = sprites or SpriteCache()

    def border_color(self):
        return map_color(len(self.arena), self.capacity)

    def draw(self, canvas: pygame.Surface) -> None:
        canvas.fill(const.BG_COLOR)
        for t in self.arena.list_targets():
            r = t.rect
            size = (max(1, int(r.w)), max(1, int(r.h)))
            canvas.blit(self.sprites.get(t.asset, size), (int(r.x), int(r.y)))

        if self.arena.is_running:
            self._draw_score(canvas)
        else:
            self._draw_game_over(canvas)

    def draw_border(self, window: pygame.Surface, canvas_rect: pygame.Rect, width: int) -> None:
        if width <= 0:
            return
        frame = canvas_rect.inflate(width * 2, width * 2)
        pygame.draw.rect(window, self.border_color(), frame, width)

    def _draw_score(self, canvas: pygame.Surface) -> None:
        w, h = canvas.get_size()
        draw_text_centered(canvas, str(self.arena.score), (w / 2, h / 2),
                           self.border_color(), size=const.SCORE_FONT_SIZE)

    def _draw_game_over(self, canvas: pygame.Surface) -> None:
        w, h = canvas.get_size()
        pygame.draw.rect(canvas, const.GAME_OVER_COLOR, (w / 6, h / 6, w * 4 / 6, h * 4 / 6))
        lines = GAME_OVER_LINES + (f"Score: {self.arena.score}",)
        offset = -const.LINE_HEIGHT
        for line in lines:
            draw_text_centered(canvas, line, (w / 2, h / 2 + offset),
                               const.GAME_OVER_TEXT_COLOR, size=const.GAME_OVER_FONT_SIZE)
            offset += const.LINE_HEIGHT
