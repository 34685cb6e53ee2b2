# systems/character_generation/traits.py

"""Trait initialization.

Each trait gets a raw roll over its configured range, then the trait weight is
applied. The raw roll is ``round(U * (max - min + 1)) + min`` which can land on
``max + 1`` when U is close to 1; weighted values are rounded half-up.
"""

import logging
from typing import Dict, Mapping

from engine.error_handler import logger

from .rolls import RandomSource, StepTrace, round_half_up
from .template import TraitDef


def roll_raw_value(trait: TraitDef, rng: RandomSource) -> int:
    """Raw (pre-weight) roll for a trait, in [min, max + 1]."""
    span = trait.max - trait.min + 1
    return round_half_up(rng.random() * span) + trait.min


def weighted_value(raw: int, weight: float) -> int:
    return round_half_up(raw * weight)


def init_traits(
    traits: Mapping[str, TraitDef],
    rng: RandomSource,
    log: logging.Logger = logger,
    trace: StepTrace = None,
) -> Dict[str, int]:
    """
    Roll a fresh value for every trait definition.

    Args:
        traits: Trait definitions keyed by trait key
        rng: Random source
        log: Diagnostics logger
        trace: Optional per-step trace hook

    Returns:
        New dict with exactly the keys of ``traits``
    """
    values: Dict[str, int] = {}
    for key, trait in traits.items():
        raw = roll_raw_value(trait, rng)
        values[key] = weighted_value(raw, trait.weight)
        log.debug(
            "Initialized trait '%s' with weighted value: %d", trait.name, values[key]
        )
        if trace is not None:
            trace("trait_initialized", trait=key, raw=raw, value=values[key])
    return values
