# systems/character_generation/personalities.py

"""Personality selection with mutual-exclusivity constraints.

Selection draws a target count in [min, max], clamps it to the registry size,
then repeatedly pulls a random candidate out of the remaining pool. A candidate
that is exclusive with an already chosen personality is dropped, not retried,
so the loop always terminates and the result may come up short of the target.
"""

import logging
from typing import List, Mapping, Optional, Sequence

from engine.error_handler import logger

from .rolls import RandomSource, StepTrace, random_count, random_index
from .template import Personality


def is_exclusive(candidate: Personality, chosen: Sequence[Personality]) -> bool:
    """True if ``candidate`` conflicts with any chosen personality, either direction."""
    return any(p.excludes(candidate) or candidate.excludes(p) for p in chosen)


def validate_bounds(min_count: int, max_count: int) -> None:
    if min_count < 0:
        raise ValueError(f"Personality min count must be >= 0, got {min_count}")
    if min_count > max_count:
        raise ValueError(
            f"Personality min count {min_count} exceeds max count {max_count}"
        )


def select_personalities(
    personalities: Optional[Mapping[str, Personality]],
    min_count: int,
    max_count: int,
    rng: RandomSource,
    log: logging.Logger = logger,
    trace: StepTrace = None,
) -> List[Personality]:
    """
    Sample a mutually compatible set of personalities.

    Args:
        personalities: Registry keyed by personality key (None if absent)
        min_count: Inclusive lower bound on the requested count
        max_count: Inclusive upper bound on the requested count
        rng: Random source
        log: Diagnostics logger
        trace: Optional per-step trace hook

    Returns:
        Chosen personalities in draw order

    Raises:
        ValueError: bounds are negative or inverted
    """
    validate_bounds(min_count, max_count)

    if not personalities:
        log.warning("Personalities object is empty or undefined.")
        return []

    available = list(personalities.values())
    target = min(random_count(rng, min_count, max_count), len(available))
    chosen: List[Personality] = []

    while len(chosen) < target and available:
        candidate = available.pop(random_index(rng, len(available)))
        if is_exclusive(candidate, chosen):
            log.debug("Rejected personality '%s' (exclusive)", candidate.name)
            if trace is not None:
                trace("personality_rejected", personality=candidate.id)
            continue
        chosen.append(candidate)
        log.debug("Selected personality '%s'", candidate.name)
        if trace is not None:
            trace("personality_selected", personality=candidate.id)

    return chosen
