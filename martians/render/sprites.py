from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"

BODY_COLOR = (60, 190, 70)
EYE_COLOR = (255, 255, 255)
PUPIL_COLOR = (10, 10, 10)


def draw_martian(size: Tuple[int, int]) -> pygame.Surface:
    """Procedural stand-in used when the image file is missing."""
    w, h = size
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    # antennae
    pygame.draw.line(surf, BODY_COLOR, (w * 0.3, h * 0.3), (w * 0.2, 0), 2)
    pygame.draw.line(surf, BODY_COLOR, (w * 0.7, h * 0.3), (w * 0.8, 0), 2)
    pygame.draw.ellipse(surf, BODY_COLOR, (0, h * 0.2, w, h * 0.8))
    for ex in (0.33, 0.67):
        c = (int(w * ex), int(h * 0.5))
        r = max(2, int(min(w, h) * 0.12))
        pygame.draw.circle(surf, EYE_COLOR, c, r)
        pygame.draw.circle(surf, PUPIL_COLOR, c, max(1, r // 2))
    return surf


class SpriteCache:
    """Resolves asset keys to scaled surfaces, loading each file once."""

    def __init__(self, assets_dir: Optional[Path] = None):
        self.assets_dir = Path(assets_dir) if assets_dir else ASSETS_DIR
        self._cache: Dict[Tuple[str, Tuple[int, int]], pygame.Surface] = {}

    def get(self, asset: str, size: Tuple[int, int]) -> pygame.Surface:
        key = (asset, size)
        surf = self._cache.get(key)
        if surf is None:
            surf = self._load(asset, size)
            self._cache[key] = surf
        return surf

    def _load(self, asset: str, size: Tuple[int, int]) -> pygame.Surface:
        path = self.assets_dir / asset
        if path.exists():
            try:
                return pygame.transform.smoothscale(pygame.image.load(str(path)), size)
            except pygame.error as e:
                logger.warning("Could not load %s (%s); drawing martian instead", path, e)
        else:
            logger.info("No image at %s; drawing martian instead", path)
        return draw_martian(size)
