# Terrain and item tags stored per cell (small ints, closed sets).

from enum import IntEnum
from typing import Dict, Tuple

class Terrain(IntEnum):
    DIRT = 0
    STONE = 1
    MUD = 2
    ICE = 3

class Item(IntEnum):
    NONE = 0
    BOOTS = 1
    FOOD = 2
    COIN = 3

HAZARDS = (Terrain.MUD, Terrain.ICE)

def is_hazard(t: Terrain) -> bool:
    return t in HAZARDS

def step_cost(t: Terrain, base_cost: float, mud_cost: float) -> float:
    # Stamina paid to step onto a cell of terrain t.
    return mud_cost if t is Terrain.MUD else base_cost

# Display palette for the debug renderers (original hex colors).
TERRAIN_COLORS: Dict[Terrain, Tuple[int, int, int]] = {
    Terrain.DIRT:  (0x8B, 0x5A, 0x2B),
    Terrain.STONE: (0x80, 0x80, 0x80),
    Terrain.MUD:   (0x5A, 0x3C, 0x2B),
    Terrain.ICE:   (0x77, 0xC7, 0xFF),
}

ITEM_GLYPHS: Dict[Item, str] = {
    Item.NONE: "",
    Item.BOOTS: "B",
    Item.FOOD: "F",
    Item.COIN: "$",
}

def terrain_color(t: Terrain) -> Tuple[int, int, int]:
    return TERRAIN_COLORS[Terrain(t)]

def item_glyph(it: Item) -> str:
    return ITEM_GLYPHS[Item(it)]
