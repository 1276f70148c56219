from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from martians.api.geometry import Rect


class TargetPlacer:
    """
    Picks target rectangles uniformly over the positions where the whole
    rectangle fits on the canvas. An axis narrower than the target pins
    the origin to 0 on that axis.
    """

    def __init__(self, size: Tuple[int, int], seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def place(self, canvas_size: Tuple[int, int]) -> Rect:
        w, h = self.size
        cw, ch = canvas_size
        x = self.rng.uniform(0, max(0, cw - w))
        y = self.rng.uniform(0, max(0, ch - h))
        return Rect(float(x), float(y), w, h)
