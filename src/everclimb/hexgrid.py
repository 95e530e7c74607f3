# src/everclimb/hexgrid.py
"""
Flat-top hex geometry: how many cells fill a viewport, and where a cell's
center and corners land in pixels. The generator only ever calls grid_size.
"""

import math
from typing import List, Tuple

SQRT3 = math.sqrt(3)

def steps(hex_size: float) -> Tuple[float, float]:
    """(horizontal, vertical) distance between neighboring cell centers."""
    width = 2 * hex_size
    height = SQRT3 * hex_size
    return width * 0.75, height * 0.5

def grid_size(hex_size: float, width: float, height: float) -> Tuple[int, int]:
    h_step, v_step = steps(hex_size)
    cols = math.ceil(width / h_step) + 1
    rows = math.ceil(height / v_step) + 1
    return cols, rows

def hex_to_pixel(col: int, row: int, hex_size: float) -> Tuple[float, float]:
    # axial (q=col, r=row), flat-top
    x = hex_size * 1.5 * col
    y = hex_size * (SQRT3 / 2 * col + SQRT3 * row)
    return x, y

def hex_corners(x: float, y: float, size: float) -> List[Tuple[float, float]]:
    out = []
    for i in range(6):
        a = math.radians(60 * i)
        out.append((x + size * math.cos(a), y + size * math.sin(a)))
    return out
