"""
Deterministic Park-Miller (minimal standard) generator.

Every consumer builds its own stream from an explicit seed; there is no module
level generator. Streams keyed by an entity id are derived with
``stream_for(key, multiplier)`` so that two call sites asking for the same
(key, multiplier) pair draw identical numbers.
"""
from typing import Iterator, List

MODULUS = 2147483647  # 2**31 - 1
MULTIPLIER = 16807


class SeededStream:
    """
    Infinite stream of uniform draws in [0, 1).
    """

    def __init__(self, seed: int):
        if seed % MODULUS == 0:
            raise ValueError(f"seed must not be a multiple of {MODULUS}, got {seed}")
        self.seed = seed
        self._state = seed % MODULUS

    def next(self) -> float:
        self._state = (self._state * MULTIPLIER) % MODULUS
        return (self._state - 1) / (MODULUS - 1)

    def take(self, n: int) -> List[float]:
        return [self.next() for _ in range(n)]

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.next()

    def __call__(self) -> float:
        return self.next()

    def __repr__(self):
        return f"SeededStream(seed={self.seed})"


def create(seed: int) -> SeededStream:
    """Raises ValueError for seeds congruent to 0, e.g. 0 or an empty key."""
    return SeededStream(seed)


def key_seed(text: str) -> int:
    """Sum of the code points of ``text``."""
    return sum(ord(char) for char in text)


def stream_for(key: str, multiplier: int) -> SeededStream:
    return SeededStream(key_seed(key) * multiplier)
