"""
Deterministic random source for mine placement.

A xorshift64 generator and the Fisher-Yates shuffle built on top of it.
The layout of a game depends only on the seed, so a fixed seed replays the
same board on any platform.
"""
import time
from typing import List, MutableSequence, TypeVar

T = TypeVar("T")

MASK_64 = (1 << 64) - 1


# ============================================================================
# XorShift64
# ============================================================================

class XorShift64:
    """
    Marsaglia xorshift generator with the (13, 7, 17) triple.

    The all-zero state is a fixed point, so seeds are coerced to at least 1.
    """

    def __init__(self, seed: int) -> None:
        self.state = max(seed & MASK_64, 1)

    def next_u64(self) -> int:
        """Advance the generator and return the next 64-bit output."""
        x = self.state
        x ^= (x << 13) & MASK_64
        x ^= x >> 7
        x ^= (x << 17) & MASK_64
        self.state = x
        return x

    def next_index(self) -> int:
        """Next output with the top bit dropped, for modulo index selection."""
        return self.next_u64() >> 1


def fisher_yates_shuffle(items: MutableSequence[T], prng: XorShift64) -> None:
    """
    Shuffle ``items`` in place.

    For i from n-1 down to 1, swap position i with a uniform j in [0, i].
    """
    for i in range(len(items) - 1, 0, -1):
        j = prng.next_index() % (i + 1)
        items[i], items[j] = items[j], items[i]


def shuffled_indices(count: int, exclude: int, seed: int) -> List[int]:
    """Return ``range(count)`` minus ``exclude``, shuffled by ``seed``."""
    positions = [i for i in range(count) if i != exclude]
    fisher_yates_shuffle(positions, XorShift64(seed))
    return positions


def _rotl64(value: int, shift: int) -> int:
    value &= MASK_64
    return ((value << shift) | (value >> (64 - shift))) & MASK_64


def seed_from_time() -> int:
    """Non-deterministic, non-zero 64-bit seed taken from the wall clock."""
    nanos = time.time_ns()
    seed = (nanos ^ _rotl64(nanos // 1_000_000_000, 32)) & MASK_64
    return seed or 1
