# systems/character_generation/__init__.py

"""
Procedural character generation.

This module contains the data structures and steps for rolling a character:
- Template: traits, background categories and personalities (immutable)
- Traits: weighted random initialization
- Backgrounds: one item per category
- Personalities: constrained sampling with exclusivity
- Effects: merging background/personality modifiers into traits
"""

from .template import (
    TraitDef,
    BackgroundItem,
    Personality,
    CharacterTemplate,
    load_character_template,
)

from .rolls import RandomSource, round_half_up

from .traits import init_traits, roll_raw_value

from .backgrounds import select_backgrounds

from .personalities import is_exclusive, select_personalities

from .effects import apply_effects, merge_effects

from .config import GeneratorConfig, load_generator_config

from .generator import CharacterGenerator, GeneratedCharacter, generate_character

__all__ = [
    # Template
    "TraitDef",
    "BackgroundItem",
    "Personality",
    "CharacterTemplate",
    "load_character_template",
    # Rolls
    "RandomSource",
    "round_half_up",
    # Steps
    "init_traits",
    "roll_raw_value",
    "select_backgrounds",
    "is_exclusive",
    "select_personalities",
    "apply_effects",
    "merge_effects",
    # Config
    "GeneratorConfig",
    "load_generator_config",
    # Generator
    "CharacterGenerator",
    "GeneratedCharacter",
    "generate_character",
]
