# src/everclimb/difficulty.py
"""
Difficulty curve: level -> tuning knobs for one chunk.

Every field grows (or shrinks) linearly with the level and is then clamped to
the range in DIFF_RANGES, so arbitrarily large levels stay playable.
"""

from dataclasses import dataclass, fields
from typing import Dict, Tuple, Union

Number = Union[int, float]

DIFF_RANGES: Dict[str, Tuple[Number, Number]] = {
    "ice_boost":       (0, 25),
    "mud_boost":       (0, 12),
    "base_cost":       (1, 2.5),
    "mud_cost":        (3, 5.5),
    "slip_cost_extra": (0, 0.8),
    "stamina_budget":  (65, 110),
    "food_value":      (12, 25),
    "food_rate":       (0.3, 0.65),
    "boots_steps":     (3, 7),
    "boots_rate":      (0.05, 0.2),
    "coins_min":       (10, 30),
    "coins_max":       (16, 50),
    "gentle_top_rows": (0, 3),
}

@dataclass(frozen=True)
class Diff:
    ice_boost: float
    mud_boost: float
    base_cost: float
    mud_cost: float
    slip_cost_extra: float
    stamina_budget: float
    food_value: float
    food_rate: float
    boots_steps: int
    boots_rate: float
    coins_min: int
    coins_max: int
    gentle_top_rows: int

    def as_dict(self) -> Dict[str, Number]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

def _clamp(name: str, v):
    lo, hi = DIFF_RANGES[name]
    return lo if v < lo else hi if v > hi else v

def difficulty_for(level: int) -> Diff:
    L = max(1, int(level))
    return Diff(
        # ice and mud get more common
        ice_boost=_clamp("ice_boost", 2 + 0.8 * L),
        mud_boost=_clamp("mud_boost", 0.4 * L),
        # movement gets pricier, budget and food shrink
        base_cost=_clamp("base_cost", 1 + 0.015 * L),
        mud_cost=_clamp("mud_cost", 3 + 0.05 * L),
        slip_cost_extra=_clamp("slip_cost_extra", 0.015 * L),
        stamina_budget=_clamp("stamina_budget", 110 - 0.8 * L),
        food_value=_clamp("food_value", 25 - 0.2 * L),
        food_rate=_clamp("food_rate", 0.65 - 0.008 * L),
        # boots wear out sooner
        boots_steps=_clamp("boots_steps", 7 - L // 8),
        boots_rate=_clamp("boots_rate", 0.2 - 0.003 * L),
        # more coins as a reward
        coins_min=_clamp("coins_min", 10 + L // 6),
        coins_max=_clamp("coins_max", 16 + L // 4),
        gentle_top_rows=_clamp("gentle_top_rows", 3 - L // 10),
    )
