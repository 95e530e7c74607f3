# src/everclimb/mapgen/reachability.py
"""
Row-by-row reachability sweep under the stamina/boots model, and the repair
loop that edits a chunk until every row can be reached from the bottom.

Movement: from (q, r) the climber steps to (q, r-1) or (q+1, r-1). A step
costs mud_cost onto MUD, base_cost otherwise, and ticks the boots timer down
by one. Landing on ICE with no boots left slides one more cell the same way
(paying that cell plus slip_cost_extra); a slide off the grid is not a move.
FOOD on the landing cell adds food_value, BOOTS resets the timer to
boots_steps. A move only counts if stamina stays above zero.

Best states live in two flat arenas indexed like the grid: one for the
boots-off regime, one for boots-on (which also remembers the timer that came
with its best stamina). A value of DEAD means "no state recorded".
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from ..difficulty import Diff
from ..grid import ChunkGrid
from ..tiles import Item, Terrain, is_hazard, step_cost

logger = logging.getLogger(__name__)

DEAD = 0.0
UP_MOVES = ((0, -1), (1, -1))  # straight, diagonal

# (q, r, stamina, boots_timer)
State = Tuple[int, int, float, int]


@dataclass
class BestStates:
    size: int
    idle: List[float] = field(default_factory=list)
    shod: List[float] = field(default_factory=list)
    shod_timer: List[int] = field(default_factory=list)

    def __post_init__(self):
        self.idle = [DEAD] * self.size
        self.shod = [DEAD] * self.size
        self.shod_timer = [0] * self.size

    def offer(self, i: int, stamina: float, timer: int) -> None:
        if timer > 0:
            best = self.shod[i]
            if stamina > best or (stamina == best and timer > self.shod_timer[i]):
                self.shod[i] = stamina
                self.shod_timer[i] = timer
        elif stamina > self.idle[i]:
            self.idle[i] = stamina

    def alive(self, i: int) -> bool:
        return self.idle[i] > DEAD or self.shod[i] > DEAD

    def clear_prefix(self, end: int) -> None:
        """Forget every record with index < end (all rows above a cut)."""
        self.idle[:end] = [DEAD] * end
        self.shod[:end] = [DEAD] * end
        self.shod_timer[:end] = [0] * end


@dataclass
class SweepResult:
    grid: ChunkGrid
    best: BestStates
    repairs: int = 0

    def row_reachable(self, r: int) -> bool:
        base = self.grid.idx(0, r)
        return any(self.best.alive(base + q) for q in range(self.grid.cols))

    def reachable_rows(self) -> List[bool]:
        return [self.row_reachable(r) for r in range(self.grid.rows)]

    def dead_rows(self) -> List[int]:
        return [r for r in range(self.grid.rows) if not self.row_reachable(r)]


def _land(grid: ChunkGrid, q: int, r: int, stamina: float, timer: int, diff: Diff) -> Tuple[float, int]:
    it = grid.item_at(q, r)
    if it is Item.FOOD:
        stamina += diff.food_value
    elif it is Item.BOOTS:
        timer = diff.boots_steps
    return stamina, timer


def next_states(grid: ChunkGrid, q: int, r: int, stamina: float, timer: int, diff: Diff) -> Iterator[State]:
    """Every valid state one move up from (q, r)."""
    if stamina <= 0:
        return
    for dq, dr in UP_MOVES:
        qq, rr = q + dq, r + dr
        if not grid.in_bounds(qq, rr):
            continue
        terr = grid.terrain_at(qq, rr)
        st = stamina - step_cost(terr, diff.base_cost, diff.mud_cost)
        bt = max(0, timer - 1)
        if terr is Terrain.ICE and bt == 0:
            qq, rr = qq + dq, rr + dr
            if not grid.in_bounds(qq, rr):
                continue
            st -= step_cost(grid.terrain_at(qq, rr), diff.base_cost, diff.mud_cost) + diff.slip_cost_extra
        st, bt = _land(grid, qq, rr, st, bt, diff)
        if st > 0:
            yield qq, rr, st, bt


def seed_bottom_row(grid: ChunkGrid, best: BestStates, diff: Diff) -> None:
    r = grid.rows - 1
    for q in range(grid.cols):
        st = diff.stamina_budget - step_cost(grid.terrain_at(q, r), diff.base_cost, diff.mud_cost)
        st, bt = _land(grid, q, r, st, 0, diff)
        if st > 0:
            best.offer(grid.idx(q, r), st, bt)


def expand_row(grid: ChunkGrid, best: BestStates, r: int, diff: Diff) -> None:
    """Push every recorded state in row r one move up."""
    for q in range(grid.cols):
        i = grid.idx(q, r)
        starts = []
        if best.idle[i] > DEAD:
            starts.append((best.idle[i], 0))
        if best.shod[i] > DEAD:
            starts.append((best.shod[i], best.shod_timer[i]))
        for stamina, timer in starts:
            for qq, rr, st, bt in next_states(grid, q, r, stamina, timer, diff):
                best.offer(grid.idx(qq, rr), st, bt)


def analyze(grid: ChunkGrid, diff: Diff) -> SweepResult:
    """Full sweep without touching the grid."""
    best = BestStates(grid.cols * grid.rows)
    seed_bottom_row(grid, best, diff)
    for r in range(grid.rows - 1, 0, -1):
        expand_row(grid, best, r, diff)
    return SweepResult(grid=grid, best=best)


def is_saturated(grid: ChunkGrid, q: int, r: int) -> bool:
    # Safe footing plus food: reachable from any live neighbor below.
    return not is_hazard(grid.terrain_at(q, r)) and grid.item_at(q, r) is Item.FOOD


def repair_candidates(grid: ChunkGrid, best: BestStates, r: int) -> List[int]:
    """Columns of row r-1 that some reached cell of row r steps into."""
    cols = set()
    for q in range(grid.cols):
        if best.alive(grid.idx(q, r)):
            for dq, _ in UP_MOVES:
                if q + dq < grid.cols:
                    cols.add(q + dq)
    return sorted(c for c in cols if not is_saturated(grid, c, r - 1))


def middle_weight(q: int, cols: int) -> int:
    return 1 + min(q, cols - 1 - q)


def pick_column(cands: List[int], cols: int, rnd: Callable[[], float]) -> int:
    weights = [middle_weight(q, cols) for q in cands]
    roll = rnd() * sum(weights)
    for q, w in zip(cands, weights):
        roll -= w
        if roll < 0:
            return q
    return cands[-1]


def repair_cell(grid: ChunkGrid, q: int, r: int, rnd: Callable[[], float], diff: Diff) -> str:
    """
    Make one cell easier. With chance food_rate an empty cell gets FOOD or
    BOOTS; otherwise hazards become STONE. A safe cell that still lacks food
    gets FOOD (replacing a coin or boots). Returns what was done.
    """
    terr, it = grid.terrain_at(q, r), grid.item_at(q, r)
    if rnd() < diff.food_rate and it is Item.NONE:
        placed = Item.BOOTS if rnd() < diff.boots_rate else Item.FOOD
        grid.set_item(q, r, placed)
        return placed.name.lower()
    if is_hazard(terr):
        grid.set_terrain(q, r, Terrain.STONE)
        return f"{terr.name.lower()}->stone"
    assert it is not Item.FOOD, f"saturated cell ({q},{r}) picked for repair"
    grid.set_item(q, r, Item.FOOD)
    return "food" if it is Item.NONE else f"{it.name.lower()}->food"


def ensure_reachable(
    grid: ChunkGrid,
    rnd: Callable[[], float],
    diff: Diff,
    max_repairs: Optional[int] = None,
) -> SweepResult:
    """
    Sweep from the bottom row up. When row r-1 ends up with no recorded
    state, repair one cell in it, forget every record above row r, and
    replay from row r+1 (slides from there land in r-1). Each repair moves a
    cell one step along hazard->STONE, empty/coin/boots->FOOD, so the loop
    stops after at most three repairs per cell.
    """
    if max_repairs is None:
        max_repairs = 3 * grid.cols * grid.rows
    best = BestStates(grid.cols * grid.rows)
    seed_bottom_row(grid, best, diff)
    repairs = 0
    r = grid.rows - 1
    while r > 0:
        expand_row(grid, best, r, diff)
        if any(best.alive(grid.idx(q, r - 1)) for q in range(grid.cols)):
            r -= 1
            continue

        cands = repair_candidates(grid, best, r)
        if not cands:
            raise RuntimeError(f"row {r - 1} is dead with no repairable cell")
        repairs += 1
        if repairs > max_repairs:
            raise RuntimeError(f"repair loop exceeded {max_repairs} repairs")
        q = pick_column(cands, grid.cols, rnd)
        what = repair_cell(grid, q, r - 1, rnd, diff)
        logger.debug("repair #%d at (%d,%d): %s", repairs, q, r - 1, what)

        best.clear_prefix(grid.idx(0, r))
        r = min(grid.rows - 1, r + 1)
    return SweepResult(grid=grid, best=best, repairs=repairs)
