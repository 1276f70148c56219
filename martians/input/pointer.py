from __future__ import annotations
from typing import Optional, Tuple

import pygame

from martians.api.geometry import Point

LEFT_BUTTON = 1


class PointerInput:
    """
    Turns left clicks in window coordinates into canvas-local points.
    The canvas sits at `offset` inside the window; with `mirror` the x axis
    is flipped to match a mirrored presentation.
    """

    def __init__(self, offset: Tuple[int, int] = (0, 0), mirror: bool = False):
        self.offset = offset
        self.mirror = mirror

    def to_canvas(self, pos: Tuple[int, int], canvas_size: Tuple[int, int]) -> Point:
        x = pos[0] - self.offset[0]
        y = pos[1] - self.offset[1]
        if self.mirror:
            x = (canvas_size[0] - 1) - x
        return Point(float(x), float(y))

    def click_point(self, event: pygame.event.Event, canvas_size: Tuple[int, int]) -> Optional[Point]:
        if event.type != pygame.MOUSEBUTTONDOWN or getattr(event, "button", None) != LEFT_BUTTON:
            return None
        return self.to_canvas(event.pos, canvas_size)
