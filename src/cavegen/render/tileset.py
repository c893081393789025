# src/cavegen/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..grid import Grid
from ..tiles import glyph_for

def _glyph_color(glyph: str) -> Tuple[int, int, int, int]:
    if glyph == ">": return (  0, 200,  80, 255)   # start
    if glyph == "<": return (255, 220,   0, 255)   # finish
    if glyph == "W": return ( 80,  80,  80, 255)   # wall
    if glyph == "C": return (200,  40,  40, 255)   # collapsing spot
    if glyph.isdigit():
        # warmer the more collapses nearby
        k = int(glyph)
        return (220, 220 - 15 * k, 200 - 20 * k, 255)
    return (220, 220, 220, 255)

class Tileset:
    """
    Cached glyph tiles:
      - one square pygame.Surface per glyph, colored by kind
      - glyph text drawn centered in black
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        if font is None:
            pygame.font.init()
            font = pygame.font.SysFont(None, max(10, tile_size * 3 // 4))
        self.font = font

    @lru_cache(maxsize=64)
    def get(self, glyph: str) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(_glyph_color(glyph))
        if glyph != ".":
            txt = self.font.render(glyph, True, (0, 0, 0))
            r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
            img.blit(txt, r)
        return img

def draw_cave(screen: pygame.Surface, grid: Grid, tileset: Tileset,
              origin_xy: Tuple[int, int] = (0, 0)) -> None:
    ox, oy = origin_xy
    t = tileset.tile_size
    for r in range(grid.height):
        for c in range(grid.width):
            g = glyph_for(grid.get(r, c), grid.intensity(r, c))
            screen.blit(tileset.get(g), (ox + c * t, oy + r * t))

def render_surface(grid: Grid, tileset: Tileset) -> pygame.Surface:
    t = tileset.tile_size
    surf = pygame.Surface((grid.width * t, grid.height * t), pygame.SRCALPHA)
    draw_cave(surf, grid, tileset)
    return surf
