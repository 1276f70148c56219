from __future__ import annotations
import itertools
from dataclasses import dataclass, field

from martians.api.geometry import Rect

_ids = itertools.count(1)


@dataclass(frozen=True)
class Target:
    rect: Rect
    asset: str  # opaque to the game logic; only the renderer resolves it
    id: int = field(default_factory=lambda: next(_ids))
