"""Injectable randomness for template and percentage selection.

The prompt builder never calls the ``random`` module directly; it asks a
``RandomSource`` so tests can pin every choice with a seed or a stub.
"""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Random source interface."""

    def pick(self, options: Sequence[T]) -> T: ...
    def rand_range(self, low: int, high: int) -> int: ...


class SeededRandom:
    """``random.Random`` backed source. Same seed, same sequence of choices."""

    def __init__(self, seed: int | str | None = None) -> None:
        self._rng = random.Random(seed)

    def pick(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("cannot pick from an empty sequence")
        return self._rng.choice(options)

    def rand_range(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], bounds inclusive."""
        if low > high:
            low, high = high, low
        return self._rng.randint(low, high)
