from .geometry import Rect, Point, InvalidRectError
from .config import GameConfig

__all__ = ["Rect", "Point", "InvalidRectError", "GameConfig"]
