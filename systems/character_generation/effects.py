# systems/character_generation/effects.py

"""Helpers for merging background and personality effects into trait values."""

import logging
from typing import Dict, Iterable, Mapping

from engine.error_handler import logger

from .rolls import StepTrace
from .template import BackgroundItem, Personality


def merge_effects(
    traits: Dict[str, int],
    effects: Mapping[str, int],
    source: str = "",
    log: logging.Logger = logger,
    trace: StepTrace = None,
) -> None:
    """
    Add each effect delta onto ``traits`` (modified in-place).

    Effects naming a trait key that isn't in ``traits`` are skipped.
    """
    for trait_key, delta in effects.items():
        if trait_key not in traits:
            continue
        traits[trait_key] += delta
        log.debug("Applied %+d to '%s' from %s", delta, trait_key, source)
        if trace is not None:
            trace("effect_applied", source=source, trait=trait_key, delta=delta)


def apply_effects(
    traits: Mapping[str, int],
    background: Mapping[str, BackgroundItem],
    personalities: Iterable[Personality],
    log: logging.Logger = logger,
    trace: StepTrace = None,
) -> Dict[str, int]:
    """
    Apply background then personality effects on a copy of ``traits``.

    Args:
        traits: Base trait values (left untouched)
        background: Category -> chosen background item
        personalities: Chosen personalities

    Returns:
        New trait value dict with all matching deltas added
    """
    result = dict(traits)

    for category, item in background.items():
        merge_effects(result, item.effects, f"background '{category}'", log, trace)

    for personality in personalities:
        merge_effects(
            result, personality.effects, f"personality '{personality.id}'", log, trace
        )

    return result
