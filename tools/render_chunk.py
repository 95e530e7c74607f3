#!/usr/bin/env python3
# Render generated chunks to PNGs using Pillow.
# Consecutive chunks are stitched, so --count 5 renders a five-chunk climb.

import argparse, os
from PIL import Image, ImageDraw, ImageFont
from everclimb.hexgrid import hex_corners, hex_to_pixel
from everclimb.log import setup_logging
from everclimb.mapgen.generator import generate_chunk
from everclimb.mapgen.stitch import chunk_chain
from everclimb.tiles import item_glyph, terrain_color

PAD = 16

def chunk_bounds(chunk):
    xs, ys = [], []
    for r in (0, chunk.rows - 1):
        for q in (0, chunk.cols - 1):
            x, y = hex_to_pixel(q, r, chunk.hex_size)
            xs.append(x); ys.append(y)
    return min(xs), min(ys), max(xs), max(ys)

def render_chunk(chunk, out_png, entrance=True):
    x0, y0, x1, y1 = chunk_bounds(chunk)
    s = chunk.hex_size
    w, h = int(x1 - x0 + 2 * (s + PAD)), int(y1 - y0 + 2 * (s + PAD))
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 255))
    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()
    for r in range(chunk.rows):
        for q in range(chunk.cols):
            x, y = hex_to_pixel(q, r, s)
            cx, cy = x - x0 + s + PAD, y - y0 + s + PAD
            draw.polygon(hex_corners(cx, cy, s - 1), fill=terrain_color(chunk.terrain_at(q, r)))
            glyph = item_glyph(chunk.item_at(q, r))
            if glyph:
                tw = draw.textlength(glyph, font=font)
                draw.text((cx - tw / 2, cy - 5), glyph, fill=(0, 0, 0, 255), font=font)
            if entrance and r == chunk.rows - 1 and q == chunk.entrance_q:
                draw.polygon(hex_corners(cx, cy, s - 1), outline=(255, 220, 0, 255))
    os.makedirs(os.path.dirname(out_png) or ".", exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=lambda v: int(v, 0), default=0xDEADBEEF)
    ap.add_argument("--level", type=int, default=1)
    ap.add_argument("--hex", type=int, default=24, help="Hex size in pixels")
    ap.add_argument("--count", type=int, default=1, help="How many stitched chunks")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(args.verbose)

    first = generate_chunk(args.hex, args.seed, args.level)
    for c in chunk_chain(first, args.count):
        render_chunk(c, os.path.join(args.outdir, f"L{c.level:03d}_{c.seed:08x}.png"))
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
