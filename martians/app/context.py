from __future__ import annotations
from dataclasses import dataclass, field
import pygame
from typing import Tuple
from martians.api.config import GameConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: GameConfig
    # canvas is the play area; it sits inside the window, framed by the border
    canvas: pygame.Surface = field(init=False)
    canvas_rect: pygame.Rect = field(init=False)

    def __post_init__(self):
        self.resize(self.screen.get_size())

    def resize(self, window_size: Tuple[int, int]) -> None:
        b = self.cfg.border
        w = max(1, window_size[0] - 2 * b)
        h = max(1, window_size[1] - 2 * b)
        self.canvas_rect = pygame.Rect(b, b, w, h)
        self.canvas = pygame.Surface((w, h))

    def canvas_size(self) -> Tuple[int, int]:
        return self.canvas_rect.size
