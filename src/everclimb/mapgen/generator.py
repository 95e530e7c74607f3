# src/everclimb/mapgen/generator.py
# Chunk generator: paint terrain, scatter coins, soften the top, then repair
# until every row is reachable. All randomness comes from one seeded stream.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..config import DEFAULTS, GenConfig
from ..difficulty import difficulty_for
from ..grid import ChunkGrid
from ..hexgrid import grid_size as hex_grid_size
from ..rng import M32, rng
from ..tiles import Item, Terrain
from .placement import scatter_coins, soften_top_rows
from .reachability import ensure_reachable
from .terrain import paint_terrain

logger = logging.getLogger(__name__)

GridSizer = Callable[[float, float, float], Tuple[int, int]]


@dataclass(frozen=True)
class Chunk:
    cols: int
    rows: int
    hex_size: float
    terrain: Tuple[Terrain, ...]
    item: Tuple[Item, ...]
    seed: int
    level: int
    entrance_q: int
    width: int = DEFAULTS.viewport_width
    height: int = DEFAULTS.viewport_height

    def terrain_at(self, q: int, r: int) -> Terrain:
        return self.terrain[self._idx(q, r)]

    def item_at(self, q: int, r: int) -> Item:
        return self.item[self._idx(q, r)]

    def count(self, it: Item) -> int:
        return sum(1 for x in self.item if x is it)

    def view(self) -> ChunkGrid:
        """A mutable copy for analysis and tools."""
        return ChunkGrid(cols=self.cols, rows=self.rows,
                         terrain=list(self.terrain), item=list(self.item))

    def _idx(self, q: int, r: int) -> int:
        if not (0 <= q < self.cols and 0 <= r < self.rows):
            raise IndexError(f"cell ({q},{r}) outside {self.cols}x{self.rows} chunk")
        return r * self.cols + q


def default_entrance(cols: int, rnd: Callable[[], float], config: GenConfig = DEFAULTS) -> int:
    q = int(cols * 0.5 + (rnd() - 0.5) * config.entrance_jitter)
    return max(0, min(cols - 1, q))


def generate_chunk(
    hex_size: float,
    seed: int,
    level: int,
    width: Optional[int] = None,
    height: Optional[int] = None,
    entrance_column: Optional[int] = None,
    *,
    grid_size: Optional[GridSizer] = None,
    config: GenConfig = DEFAULTS,
) -> Chunk:
    """
    Build one solvable chunk. Same arguments, same chunk.

    width/height are the viewport in pixels (config defaults when omitted)
    and go to grid_size, which turns them into (cols, rows).
    entrance_column pins the entrance (clamped into the grid); otherwise it
    is drawn near the middle.
    """
    seed &= M32
    width = config.viewport_width if width is None else width
    height = config.viewport_height if height is None else height
    sizer = grid_size or hex_grid_size
    cols, rows = sizer(hex_size, width, height)
    if cols < 1 or rows < 1:
        raise ValueError(f"grid sizing gave {cols}x{rows} for {width}x{height}")

    rnd = rng(seed)
    diff = difficulty_for(level)
    grid = ChunkGrid.empty(cols, rows)

    paint_terrain(grid, rnd, diff)
    coins = scatter_coins(grid, rnd, diff, config)
    soften_top_rows(grid, rnd, diff, config)
    result = ensure_reachable(grid, rnd, diff)

    if entrance_column is None:
        entrance_q = default_entrance(cols, rnd, config)
    else:
        entrance_q = max(0, min(cols - 1, int(entrance_column)))

    logger.debug(
        "chunk seed=%#010x level=%d %dx%d coins=%d repairs=%d entrance=%d",
        seed, level, cols, rows, coins, result.repairs, entrance_q,
    )
    return Chunk(
        cols=cols,
        rows=rows,
        hex_size=hex_size,
        terrain=tuple(grid.terrain),
        item=tuple(grid.item),
        seed=seed,
        level=level,
        entrance_q=entrance_q,
        width=width,
        height=height,
    )
