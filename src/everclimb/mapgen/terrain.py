# src/everclimb/mapgen/terrain.py
# Row-banded terrain painting. Rows are bucketed by depth from the top;
# each band has its own DIRT/STONE/MUD/ICE weights, nudged by the level.

from typing import Callable, List

from ..difficulty import Diff
from ..grid import ChunkGrid
from ..tiles import Terrain

# DIRT, STONE, MUD, ICE per band; band 0 is the deepest quarter.
BAND_WEIGHTS = (
    (45, 35, 15, 5),
    (30, 40, 15, 15),
    (20, 35, 10, 35),
    (10, 25, 5, 60),
)

def band_for_row(r: int, rows: int) -> int:
    if rows < 2:
        return 3
    depth = r / (rows - 1)
    if depth > 0.75:
        return 0
    if depth > 0.5:
        return 1
    if depth > 0.25:
        return 2
    return 3

def band_weights(band: int, diff: Diff) -> List[float]:
    w = list(BAND_WEIGHTS[band])
    w[Terrain.MUD] += diff.mud_boost
    w[Terrain.ICE] += diff.ice_boost
    return w

def pick_terrain(band: int, rnd: Callable[[], float], diff: Diff) -> Terrain:
    w = band_weights(band, diff)
    roll = rnd() * sum(w)
    for t in Terrain:
        roll -= w[t]
        if roll <= 0:
            return t
    # float residue
    return Terrain.STONE

def paint_terrain(grid: ChunkGrid, rnd: Callable[[], float], diff: Diff) -> None:
    """Fill every cell, top row first, left to right."""
    for r in range(grid.rows):
        band = band_for_row(r, grid.rows)
        for q in range(grid.cols):
            grid.set_terrain(q, r, pick_terrain(band, rnd, diff))
