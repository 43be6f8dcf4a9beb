"""
Random sources for palette generation. Generation never touches a global RNG:
every draw goes through an injected source so runs are reproducible under a seed
and exact under a fixed sequence (tests).
"""
import math
import random
import secrets
from typing import Iterable, Protocol


class RandomSource(Protocol):
    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...


class SecureRandomSource:
    """Cryptographically secure floats. Default when no seed is given."""

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def random(self) -> float:
        return self._rng.random()


class SeededRandomSource:
    """Reproducible floats from a seed. One instance per thread."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()


class FixedSequenceSource:
    """
    Replays the given values in order, cycling when exhausted.
    Values must lie in [0, 1).
    """

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        if not self._values:
            raise ValueError("FixedSequenceSource needs at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Fixed random value {v} outside [0, 1)")
        self._pos = 0

    @property
    def draws(self) -> int:
        """Number of values consumed so far."""
        return self._pos

    def random(self) -> float:
        v = self._values[self._pos % len(self._values)]
        self._pos += 1
        return v


def source_for_seed(seed: int | None) -> RandomSource:
    """Seeded source if seed is set, secure source otherwise."""
    if seed is None:
        return SecureRandomSource()
    return SeededRandomSource(seed)


def floored_uniform(rng: RandomSource, lo: int, hi: int) -> int:
    """Integer in half-open [lo, hi) via floor(u * (hi - lo)) + lo."""
    return int(math.floor(rng.random() * (hi - lo))) + lo


def coin_flip(rng: RandomSource) -> bool:
    return rng.random() < 0.5
