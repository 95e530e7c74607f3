#!/usr/bin/env python3
# Minimal interactive chunk viewer (no gameplay).
# - N: next stitched chunk      - P: back to the previous one
# - UP/DOWN: level +/- (regenerates from the current seed)
# - S: new seed                  - E: toggle entrance marker
# - 60 Hz fixed loop

import argparse, logging
import pygame
from everclimb.hexgrid import grid_size, hex_to_pixel, steps
from everclimb.log import setup_logging
from everclimb.mapgen.generator import generate_chunk
from everclimb.mapgen.stitch import generate_next_chunk
from everclimb.render.hexsprites import HexSprites
from everclimb.rng import combine_seed
from everclimb.tiles import Item

log = logging.getLogger("viewer")
PAD = 16

def window_size(hex_size, width, height):
    cols, rows = grid_size(hex_size, width, height)
    h_step, v_step = steps(hex_size)
    # axial layout leans: the last column sits half a row per column lower
    x = cols * h_step + hex_size + 2 * PAD
    y = rows * 2 * v_step + cols * v_step + 2 * PAD
    return int(x), int(y)

def draw_chunk(screen, chunk, sprites, show_entrance):
    s = chunk.hex_size
    for r in range(chunk.rows):
        for q in range(chunk.cols):
            x, y = hex_to_pixel(q, r, s)
            img = sprites.get(chunk.terrain_at(q, r), chunk.item_at(q, r))
            screen.blit(img, sprites.anchor(x + s + PAD, y + s + PAD))
    if show_entrance:
        x, y = hex_to_pixel(chunk.entrance_q, chunk.rows - 1, s)
        pygame.draw.circle(screen, (255, 220, 0), (int(x + s + PAD), int(y + s + PAD)), max(3, s // 3), 2)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=lambda v: int(v, 0), default=0xDEADBEEF)
    ap.add_argument("--level", type=int, default=1)
    ap.add_argument("--hex", type=int, default=16, help="Hex size in pixels")
    ap.add_argument("--width", type=int, default=640, help="Viewport width fed to grid sizing")
    ap.add_argument("--height", type=int, default=480, help="Viewport height fed to grid sizing")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(args.verbose)

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode(window_size(args.hex, args.width, args.height))
    sprites = HexSprites(args.hex)

    def fresh(seed, level):
        return generate_chunk(args.hex, seed, level, args.width, args.height)

    history = [fresh(args.seed, args.level)]
    show_entrance = True
    running = True
    while running:
        chunk = history[-1]
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_n:
                    history.append(generate_next_chunk(chunk))
                elif ev.key == pygame.K_p and len(history) > 1:
                    history.pop()
                elif ev.key == pygame.K_UP:
                    history = [fresh(chunk.seed, chunk.level + 1)]
                elif ev.key == pygame.K_DOWN:
                    history = [fresh(chunk.seed, max(1, chunk.level - 1))]
                elif ev.key == pygame.K_s:
                    history = [fresh(combine_seed(chunk.seed, 0x5EED), chunk.level)]
                elif ev.key == pygame.K_e:
                    show_entrance = not show_entrance
                log.debug("showing seed=%#010x level=%d", history[-1].seed, history[-1].level)

        chunk = history[-1]
        screen.fill((0, 0, 0))
        draw_chunk(screen, chunk, sprites, show_entrance)
        pygame.display.set_caption(
            f"Everclimb Viewer — L{chunk.level} seed {chunk.seed:08x}  "
            f"coins {chunk.count(Item.COIN)} food {chunk.count(Item.FOOD)} boots {chunk.count(Item.BOOTS)}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
