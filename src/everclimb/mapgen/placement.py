# src/everclimb/mapgen/placement.py
from typing import Callable

from ..config import DEFAULTS, GenConfig
from ..difficulty import Diff
from ..grid import ChunkGrid
from ..tiles import Item, Terrain

def coin_target(rnd: Callable[[], float], diff: Diff) -> int:
    span = diff.coins_max - diff.coins_min + 1
    return diff.coins_min + int(rnd() * span)

def scatter_coins(
    grid: ChunkGrid,
    rnd: Callable[[], float],
    diff: Diff,
    config: GenConfig = DEFAULTS,
) -> int:
    """
    Scan from the bottom row up, left to right, dropping a coin on an empty
    cell with config.coin_chance until the drawn target is met or the grid
    runs out. Returns the number placed.
    """
    target = coin_target(rnd, diff)
    placed = 0
    for r in range(grid.rows - 1, -1, -1):
        if placed >= target:
            break
        for q in range(grid.cols):
            if placed >= target:
                break
            if rnd() < config.coin_chance and grid.item_at(q, r) is Item.NONE:
                grid.set_item(q, r, Item.COIN)
                placed += 1
    return placed

def soften_top_rows(
    grid: ChunkGrid,
    rnd: Callable[[], float],
    diff: Diff,
    config: GenConfig = DEFAULTS,
) -> int:
    """Turn about half the MUD in the top gentle_top_rows rows into STONE."""
    softened = 0
    for r in range(min(diff.gentle_top_rows, grid.rows)):
        for q in range(grid.cols):
            if grid.terrain_at(q, r) is Terrain.MUD and rnd() < config.gentle_mud_chance:
                grid.set_terrain(q, r, Terrain.STONE)
                softened += 1
    return softened
