from __future__ import annotations
import math
from dataclasses import dataclass


class InvalidRectError(ValueError):
    """Raised when a rectangle is built from negative or non-finite values."""


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle: origin (x, y) is the top-left corner.
    Immutable; rejects negative or non-finite values instead of clamping.
    """
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        for name in ("x", "y", "w", "h"):
            v = getattr(self, name)
            if not isinstance(v, (int, float)) or isinstance(v, bool):
                raise InvalidRectError(f"{name} must be a number, got {v!r}")
            if not math.isfinite(v) or v < 0:
                raise InvalidRectError(f"{name} must be finite and >= 0, got {v!r}")

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, x: float, y: float) -> bool:
        # both edges inclusive
        return self.x <= x <= self.right and self.y <= y <= self.bottom
