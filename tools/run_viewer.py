#!/usr/bin/env python3
# Minimal viewer for generated caves (display only).
# - R: regenerate with a fresh random seed
# - Right/Left: step the seed by +1/-1
# - B: toggle the summary bar
# - Esc: quit

import argparse
import logging
import pygame

from cavegen.config import CaveConfig
from cavegen.errors import GenerationError
from cavegen.mapgen.generator import generate_cave, resolve_seed
from cavegen.render.tileset import Tileset, draw_cave

log = logging.getLogger("cavegen.viewer")

# ---------- summary bar ----------
def draw_summary_bar(screen, y0, width_px, tile, text):
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(0, y0, width_px, tile))
    font = pygame.font.SysFont(None, max(10, tile // 2))
    img = font.render(text, True, (220, 220, 220))
    screen.blit(img, (tile // 4, y0 + (tile - img.get_height()) // 2))

# ---------- viewer ----------
def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("width", type=int)
    ap.add_argument("height", type=int)
    ap.add_argument("num_walls", type=int)
    ap.add_argument("num_collapsing", type=int)
    ap.add_argument("--seed", type=int, default=0, help="0 = random")
    ap.add_argument("--tile", type=int, default=24, help="Tile size in pixels")
    ap.add_argument("--bar", action="store_true", help="Show the summary bar")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    pygame.init()
    clock = pygame.time.Clock()

    W, H = args.width * args.tile, args.height * args.tile
    bar_h = args.tile if args.bar else 0
    screen = pygame.display.set_mode((W, H + bar_h))
    tiles = Tileset(args.tile)

    seed = resolve_seed(args.seed)

    def load(seed):
        cfg = CaveConfig(args.width, args.height, args.num_walls, args.num_collapsing, seed=seed)
        try:
            return generate_cave(cfg)
        except GenerationError as e:
            log.error("seed %d: %s", seed, e)
            return None

    result = load(seed)
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    seed = resolve_seed(0)
                    result = load(seed)
                elif ev.key == pygame.K_RIGHT:
                    seed += 1
                    result = load(seed)
                elif ev.key == pygame.K_LEFT:
                    seed = seed - 1 or -1  # skip 0, it means "random"
                    result = load(seed)
                elif ev.key == pygame.K_b:
                    args.bar = not args.bar
                    new_bar_h = args.tile if args.bar else 0
                    if new_bar_h != bar_h:
                        bar_h = new_bar_h
                        screen = pygame.display.set_mode((W, H + bar_h))

        screen.fill((0, 0, 0))
        if result is not None:
            draw_cave(screen, result.grid, tiles)
            if args.bar:
                draw_summary_bar(screen, H, W, args.tile, result.summary())

        state = "ok" if result is not None else "FAILED"
        pygame.display.set_caption(f"Cave Viewer — seed {seed} [{state}]")
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()

if __name__ == "__main__":
    main()
