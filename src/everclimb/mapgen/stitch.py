# src/everclimb/mapgen/stitch.py
# Chain chunks vertically: the next chunk's seed and entrance come from the
# previous chunk, so a run is reproducible from its first seed.

from typing import Iterator, Optional

from ..config import DEFAULTS, GenConfig
from ..rng import combine_seed, rng
from .generator import Chunk, GridSizer, generate_chunk


def next_seed(prev: Chunk) -> int:
    return combine_seed(prev.seed, prev.level + 1)


def next_entrance(prev: Chunk, config: GenConfig = DEFAULTS) -> int:
    """
    prev.entrance_q kept (stitch_stay_chance), else nudged one column left
    or right with equal odds; always inside [0, prev.cols - 1].
    """
    rnd = rng(combine_seed(next_seed(prev), prev.entrance_q))
    shift = 0
    if rnd() >= config.stitch_stay_chance:
        shift = -1 if rnd() < 0.5 else 1
    return max(0, min(prev.cols - 1, prev.entrance_q + shift))


def generate_next_chunk(
    prev: Chunk,
    config: GenConfig = DEFAULTS,
    grid_size: Optional[GridSizer] = None,
) -> Chunk:
    # grid_size must be the sizer prev was built with, or the widths drift
    return generate_chunk(
        prev.hex_size,
        next_seed(prev),
        prev.level + 1,
        prev.width,
        prev.height,
        entrance_column=next_entrance(prev, config),
        grid_size=grid_size,
        config=config,
    )


def chunk_chain(
    first: Chunk,
    count: int,
    config: GenConfig = DEFAULTS,
    grid_size: Optional[GridSizer] = None,
) -> Iterator[Chunk]:
    """Yield `first` followed by count-1 stitched successors."""
    cur = first
    for i in range(count):
        if i:
            cur = generate_next_chunk(cur, config, grid_size)
        yield cur
