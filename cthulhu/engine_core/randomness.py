"""
Random source used to pick hidden cards.

Anything with randint(a, b) works, so tests can pass a scripted source.
"""

from __future__ import annotations
import random
from typing import Protocol


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer in [a, b], both ends included."""
        ...


_shared_rng = random.Random()


def default_rng() -> RandomSource:
    """The process-wide source used when a caller does not supply one."""
    return _shared_rng


def seed_default_rng(seed: int | None) -> None:
    """Reseed the shared source (None reseeds from system entropy)."""
    _shared_rng.seed(seed)


def draw_card_number(rng: RandomSource, hand_size: int) -> int:
    """Pick a 1-based card number uniformly over a hand."""
    return rng.randint(1, hand_size)
