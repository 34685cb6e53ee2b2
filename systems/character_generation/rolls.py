# systems/character_generation/rolls.py

"""Random draw helpers shared by the generation steps.

Every draw goes through ``RandomSource.random()`` so a test can script the
exact sequence of values a generation consumes.
"""

import math
from typing import Any, Callable, Optional, Protocol


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float:
        ...


# Optional per-step trace hook: trace(event_name, **fields)
StepTrace = Optional[Callable[..., Any]]


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (towards +inf)."""
    return int(math.floor(value + 0.5))


def random_index(rng: RandomSource, length: int) -> int:
    """Uniform index in [0, length)."""
    return min(int(math.floor(rng.random() * length)), length - 1)


def random_count(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high]."""
    return min(int(math.floor(rng.random() * (high - low + 1) + low)), high)
