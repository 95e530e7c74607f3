from dataclasses import dataclass
from typing import Callable

M32 = 0xFFFFFFFF
GOLDEN = 0x6D2B79F5   # mulberry32 increment
PHI32 = 0x9E3779B9    # seed-combine offset

@dataclass
class Mulberry32:
    state: int

    def __post_init__(self):
        self.state &= M32

    def next32(self) -> int:
        self.state = (self.state + GOLDEN) & M32
        t = self.state
        x = ((t ^ (t >> 15)) * (t | 1)) & M32
        x ^= (x + (((x ^ (x >> 7)) * (x | 61)) & M32)) & M32
        return (x ^ (x >> 14)) & M32

    def random(self) -> float:
        """Next value in [0, 1)."""
        return self.next32() / 4294967296

    def bounded(self, n: int) -> int:
        # 0..n-1
        assert n > 0
        return int(self.random() * n)

def rng(seed: int) -> Callable[[], float]:
    """
    Return a fresh stream for `seed`: each call yields the next value in [0, 1).
    Two streams built from the same seed produce identical sequences.
    """
    return Mulberry32(seed).random

def combine_seed(a: int, b: int) -> int:
    """
    Mix two 32-bit integers into a new 32-bit seed (add/shift, then xorshift
    avalanche). Pure: same inputs, same output.
    """
    a &= M32
    b &= M32
    x = (a ^ (((b + PHI32) + (a << 6) + (a >> 2)) & M32)) & M32
    x ^= (x << 13) & M32
    x ^= x >> 17
    x ^= (x << 5) & M32
    return x & M32
