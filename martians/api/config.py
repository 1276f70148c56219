from __future__ import annotations
import math
from dataclasses import dataclass, fields
from typing import Optional, Tuple

from martians import const


@dataclass
class GameConfig:
    canvas_size: Tuple[int, int] = const.CANVAS_SIZE
    border: int = const.BORDER
    initial_difficulty: float = const.INITIAL_DIFFICULTY
    base_delay_ms: float = const.BASE_DELAY_MS
    decay_rate: float = const.DECAY_RATE
    min_delay_ms: float = const.MIN_DELAY_MS
    capacity: int = const.CAPACITY
    target_size: Tuple[int, int] = const.TARGET_SIZE
    enemy_asset: str = const.ENEMY_ASSET
    assets_dir: Optional[str] = None
    redraw_interval_ms: int = const.REDRAW_INTERVAL_MS
    fps: int = const.FPS
    seed: Optional[int] = None
    mirror: bool = False

    def __post_init__(self):
        self.canvas_size = _pair("canvas_size", self.canvas_size)
        self.target_size = _pair("target_size", self.target_size)
        if self.border < 0:
            raise ValueError(f"border must be >= 0, got {self.border}")
        for name in ("initial_difficulty", "base_delay_ms", "min_delay_ms"):
            v = float(getattr(self, name))
            if not math.isfinite(v) or v <= 0:
                raise ValueError(f"{name} must be > 0, got {v}")
            setattr(self, name, v)
        if not 0 < self.decay_rate <= 1:
            raise ValueError(f"decay_rate must be in (0, 1], got {self.decay_rate}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.redraw_interval_ms <= 0 or self.fps <= 0:
            raise ValueError("redraw_interval_ms and fps must be > 0")

    @property
    def initial_delay_ms(self) -> float:
        return self.base_delay_ms * self.initial_difficulty

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}


def _pair(name: str, value) -> Tuple[int, int]:
    try:
        w, h = value
        w, h = int(w), int(h)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a [width, height] pair, got {value!r}") from None
    if w <= 0 or h <= 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return w, h
