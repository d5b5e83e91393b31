"""
Random source utilities for the simulation
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything with random.Random's random() and randrange(n)."""

    def random(self) -> float:
        ...

    def randrange(self, stop: int) -> int:
        ...


def roll_percent(rng: RandomSource, chance: int) -> bool:
    """Bernoulli trial: True with probability chance/100."""
    return rng.randrange(100) < chance


def make_random(seed: Optional[int] = None) -> random.Random:
    """Create an independent generator; pass a seed to replay a show."""
    return random.Random(seed)
