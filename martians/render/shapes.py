import pygame
from typing import Tuple


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[float, float],
                       color=(0, 0, 0), size=24):
    font = pygame.font.SysFont(None, size)
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=(int(center[0]), int(center[1]))))


def map_color(count: int, capacity: int) -> Tuple[int, int, int]:
    """Green when the canvas is empty, red when it holds `capacity` martians."""
    t = max(0.0, min(1.0, count / capacity)) if capacity > 0 else 1.0
    return int(round(255 * t)), int(round(255 * (1.0 - t))), 0
