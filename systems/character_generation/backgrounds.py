# systems/character_generation/backgrounds.py

"""Background selection: one uniformly random item per category."""

import logging
from typing import Dict, Mapping, Optional

from engine.error_handler import logger

from .rolls import RandomSource, StepTrace, random_index
from .template import BackgroundCategory, BackgroundItem


def select_backgrounds(
    backgrounds: Mapping[str, Optional[BackgroundCategory]],
    rng: RandomSource,
    log: logging.Logger = logger,
    trace: StepTrace = None,
) -> Dict[str, BackgroundItem]:
    """
    Pick one item from each background category.

    Empty categories are reported and left out of the result entirely.

    Returns:
        Category name -> chosen item
    """
    chosen: Dict[str, BackgroundItem] = {}
    for category, items in backgrounds.items():
        if not items:
            log.warning("No items found for background category '%s'", category)
            if trace is not None:
                trace("background_skipped", category=category)
            continue

        item_keys = list(items.keys())
        item_key = item_keys[random_index(rng, len(item_keys))]
        chosen[category] = items[item_key]
        log.debug(
            "Selected background for '%s': '%s'", category, chosen[category].name
        )
        if trace is not None:
            trace("background_selected", category=category, item=item_key)
    return chosen
