from dataclasses import dataclass
from typing import List

from .tiles import Item, Terrain

@dataclass
class ChunkGrid:
    """
    Mutable working view of one chunk: two flat row-major buffers
    (index = row * cols + col) plus the extents. Row 0 is the top.
    """
    cols: int
    rows: int
    terrain: List[Terrain]
    item: List[Item]

    @classmethod
    def empty(cls, cols: int, rows: int, fill: Terrain = Terrain.STONE) -> "ChunkGrid":
        n = cols * rows
        return cls(cols=cols, rows=rows, terrain=[fill] * n, item=[Item.NONE] * n)

    def __post_init__(self):
        n = self.cols * self.rows
        if len(self.terrain) != n or len(self.item) != n:
            raise ValueError(
                f"buffers must hold {n} cells, got {len(self.terrain)}/{len(self.item)}"
            )

    def in_bounds(self, q: int, r: int) -> bool:
        return 0 <= q < self.cols and 0 <= r < self.rows

    def idx(self, q: int, r: int) -> int:
        if not self.in_bounds(q, r):
            raise IndexError(f"cell ({q},{r}) outside {self.cols}x{self.rows} grid")
        return r * self.cols + q

    def terrain_at(self, q: int, r: int) -> Terrain:
        return self.terrain[self.idx(q, r)]

    def item_at(self, q: int, r: int) -> Item:
        return self.item[self.idx(q, r)]

    def set_terrain(self, q: int, r: int, t: Terrain) -> None:
        self.terrain[self.idx(q, r)] = t

    def set_item(self, q: int, r: int, it: Item) -> None:
        self.item[self.idx(q, r)] = it

    def count(self, it: Item) -> int:
        return sum(1 for x in self.item if x is it)

    def as_matrix(self, layer: str = "terrain") -> List[List[int]]:
        buf = {"terrain": self.terrain, "item": self.item}[layer]
        return [[int(v) for v in buf[r * self.cols:(r + 1) * self.cols]] for r in range(self.rows)]
