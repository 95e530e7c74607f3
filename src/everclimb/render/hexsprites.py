# src/everclimb/render/hexsprites.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..hexgrid import hex_corners
from ..tiles import Item, Terrain, item_glyph, terrain_color

def _sprite_size(hex_size: int) -> Tuple[int, int]:
    # flat-top hex bounding box
    return 2 * hex_size, int(round(1.7320508 * hex_size))

class HexSprites:
    """
    Cached hex sprites for the debug viewer:
      - one filled flat-top hex per (terrain, item) pair
      - item glyph (F/B/$) centered on top
    """
    def __init__(self, hex_size: int, font=None):
        self.hex_size = hex_size
        self.font = font or pygame.font.SysFont(None, max(10, hex_size))

    @lru_cache(maxsize=64)
    def get(self, terrain: Terrain, item: Item) -> pygame.Surface:
        w, h = _sprite_size(self.hex_size)
        img = pygame.Surface((w, h), pygame.SRCALPHA)
        pts = hex_corners(w / 2, h / 2, self.hex_size - 1)
        pygame.draw.polygon(img, terrain_color(terrain), pts)
        glyph = item_glyph(item)
        if glyph:
            txt = self.font.render(glyph, True, (0, 0, 0))
            img.blit(txt, txt.get_rect(center=(w // 2, h // 2)))
        return img

    def anchor(self, x: float, y: float) -> Tuple[int, int]:
        """Top-left blit position for a sprite centered on (x, y)."""
        w, h = _sprite_size(self.hex_size)
        return int(x - w / 2), int(y - h / 2)
