# systems/character_generation/generator.py

"""
Character generator.

Rolls a complete character from a CharacterTemplate:
1. initialize trait values from range and weight
2. pick one item per background category
3. pick a mutually compatible set of personalities
4. merge background and personality effects into the trait values

The template is only read; every call builds fresh containers, so one template
can back any number of generators and calls.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from engine.error_handler import logger as package_logger
from settings import DEFAULT_PERSONALITY_MAX, DEFAULT_PERSONALITY_MIN
from telemetry.logger import TelemetryLogger

from .backgrounds import select_backgrounds
from .config import GeneratorConfig
from .effects import apply_effects
from .personalities import select_personalities, validate_bounds
from .rolls import RandomSource, StepTrace
from .template import BackgroundItem, CharacterTemplate, Personality
from .traits import init_traits


@dataclass
class GeneratedCharacter:
    """Result of one generation call."""
    traits: Dict[str, int] = field(default_factory=dict)
    background: Dict[str, BackgroundItem] = field(default_factory=dict)
    personalities: List[Personality] = field(default_factory=list)

    @property
    def personality_ids(self) -> List[str]:
        return [p.id for p in self.personalities]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "traits": dict(self.traits),
            "background": {
                category: item.to_dict() for category, item in self.background.items()
            },
            "personalities": [p.to_dict() for p in self.personalities],
        }


class CharacterGenerator:
    """
    Generates characters from a template and an injectable random source.

    Args:
        template: Template to roll from (None is reported and yields empty results)
        rng: Random source with ``random()``; defaults to a private ``random.Random``
        seed: Seed for the default random source (ignored if ``rng`` is given)
        config: Generation settings (personality bounds, tracing)
        logger: Diagnostics logger
        telemetry: Optional JSONL event sink for per-step traces
    """

    def __init__(
        self,
        template: Optional[CharacterTemplate],
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        config: Optional[GeneratorConfig] = None,
        logger: Optional[logging.Logger] = None,
        telemetry: Optional[TelemetryLogger] = None,
    ):
        self.template = template
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.config = config or GeneratorConfig()
        self.logger = logger or package_logger.getChild("generator")
        self.telemetry = telemetry

        validate_bounds(self.config.personality_min, self.config.personality_max)
        if self.telemetry is not None:
            self.telemetry.sample_every_n_generations = self.config.telemetry_sample_every

    def _step_trace(self) -> StepTrace:
        if not self.config.trace_steps or self.telemetry is None or not self.telemetry.active:
            return None
        if not self.telemetry.should_trace_generation():
            return None
        return self.telemetry.log

    def generate(
        self,
        min_personalities: Optional[int] = None,
        max_personalities: Optional[int] = None,
    ) -> GeneratedCharacter:
        """
        Generate one character.

        Args:
            min_personalities: Override for the configured lower bound
            max_personalities: Override for the configured upper bound

        Returns:
            A fresh GeneratedCharacter
        """
        low = self.config.personality_min if min_personalities is None else min_personalities
        high = self.config.personality_max if max_personalities is None else max_personalities
        validate_bounds(low, high)

        if self.telemetry is not None:
            generation = self.telemetry.tick_generation()
        else:
            generation = 0
        trace = self._step_trace()
        log = self.logger if self.config.trace_steps else _quiet(self.logger)

        template = self.template
        if template is None:
            self.logger.error("Character template is not loaded; generating an empty character.")
            template = CharacterTemplate(personalities=None)

        base_traits = init_traits(template.traits, self.rng, log, trace)
        background = select_backgrounds(template.backgrounds, self.rng, log, trace)
        personalities = select_personalities(
            template.personalities, low, high, self.rng, log, trace
        )
        traits = apply_effects(base_traits, background, personalities, log, trace)

        character = GeneratedCharacter(
            traits=traits,
            background=background,
            personalities=personalities,
        )

        if self.telemetry is not None:
            self.telemetry.log(
                "character_generated",
                generation=generation,
                traits=character.traits,
                background={c: item.name for c, item in character.background.items()},
                personalities=character.personality_ids,
            )
        return character

    def generate_batch(self, count: int, **kwargs: Any) -> List[GeneratedCharacter]:
        """Generate ``count`` independent characters from the same template."""
        if count < 0:
            raise ValueError(f"Batch count must be >= 0, got {count}")
        return [self.generate(**kwargs) for _ in range(count)]


class _QuietLogger(logging.LoggerAdapter):
    """Drops DEBUG step traces, passes everything else through."""

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        return None


def _quiet(log: logging.Logger) -> logging.LoggerAdapter:
    return _QuietLogger(log, {})


def generate_character(
    template: Optional[CharacterTemplate],
    rng: Optional[RandomSource] = None,
    min_personalities: int = DEFAULT_PERSONALITY_MIN,
    max_personalities: int = DEFAULT_PERSONALITY_MAX,
) -> GeneratedCharacter:
    """One-shot convenience wrapper around CharacterGenerator.generate()."""
    config = GeneratorConfig(
        personality_min=min_personalities,
        personality_max=max_personalities,
    )
    return CharacterGenerator(template, rng=rng, config=config).generate()
