"""
Random number generation utilities.

Ship generation draws every random value from a RandomSource, which owns its
own Alea PRNG. Python's random and NumPy's random are never used, so a seed
reproduces a ship exactly and independent generations never share state.
"""

from typing import Any, List, Sequence, Union

from ..errors import RangeError

Seed = Union[str, int, float, Sequence[Union[str, int, float]]]

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


class _Mash:
    """Alea's string hash, folding characters into a running 32-bit state."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data: Any) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = int(h) & 0xFFFFFFFF
            h = (h - self.n) * self.n
            self.n = int(h) & 0xFFFFFFFF
            h -= self.n
            self.n += h * _TWO_POW_32
        return (int(self.n) & 0xFFFFFFFF) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Johannes Baagøe's Alea generator.

    Produces floats in [0, 1) from three fractional state words and a carry.
    Seeds may be strings, numbers or a sequence of either; every part is
    mashed into the state in order.
    """

    def __init__(self, seed: Seed):
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash = _Mash()
        state = [mash(" "), mash(" "), mash(" ")]
        for part in parts:
            for i in range(3):
                state[i] -= mash(part)
                if state[i] < 0:
                    state[i] += 1
        self.s0, self.s1, self.s2 = state
        self.c = 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.c = int(t)
        self.s0, self.s1, self.s2 = self.s1, self.s2, t - self.c
        return self.s2


class RandomSource:
    """
    Seeded source of inclusive-range random numbers.

    This is the only entropy channel of the generator: the same seed and
    the same sequence of calls always yields the same values.
    """

    def __init__(self, seed: Seed = 0):
        self.seed = seed
        self._prng = AleaPRNG(seed)

    @property
    def call_count(self) -> int:
        """Number of raw draws consumed so far."""
        return self._prng.call_count

    def next_float_range(self, lo: float, hi: float) -> float:
        """Return a float in [lo, hi); ``lo == hi`` returns ``lo`` without a draw."""
        if hi < lo:
            raise RangeError(f"Max {hi} must be greater than min {lo}")
        if hi == lo:
            return lo
        return lo + self._prng.random() * (hi - lo)

    def next_int_range(self, lo: int, hi: int) -> int:
        """Return an integer in [lo, hi], both ends inclusive."""
        if int(lo) != lo or int(hi) != hi:
            raise RangeError(f"Integer range bounds must be whole numbers, got {lo} and {hi}")
        lo, hi = int(lo), int(hi)
        if hi < lo:
            raise RangeError(f"Max {hi} must be greater than min {lo}")
        if hi == lo:
            return lo
        return lo + int(self._prng.random() * (hi - lo + 1))

    def choice(self, seq: Sequence[Any]) -> Any:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_int_range(0, len(seq) - 1)]

    def pop_random(self, pool: List[Any]) -> Any:
        """
        Remove and return a random element of ``pool``.

        The chosen element is swapped with the last one and popped, so the
        pool shrinks by one and the order of the survivors changes.
        """
        if not pool:
            raise IndexError("Cannot pop from an empty pool")
        index = self.next_int_range(0, len(pool) - 1)
        pool[index], pool[-1] = pool[-1], pool[index]
        return pool.pop()
