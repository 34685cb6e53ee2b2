# systems/character_generation/template.py

"""Character template definitions.

A template is the immutable, data-driven description a character is rolled from:
- traits: numeric attributes with an inclusive range and a weight
- backgrounds: named categories (education, family, ...) of items with effects
- personalities: tags with effects and optional exclusivity constraints

Templates usually come from a JSON asset whose root holds a ``characterTemplate``
object; ``load_character_template`` reads that layout.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from engine.error_handler import TemplateError, logger


def _freeze_effects(data: Optional[Mapping[str, Any]]) -> Mapping[str, int]:
    return MappingProxyType({str(k): int(v) for k, v in (data or {}).items()})


@dataclass(frozen=True)
class TraitDef:
    """
    Trait definition.

    - name: display label
    - range: inclusive (min, max) integer bounds of the raw roll
    - weight: multiplier applied to the raw roll
    """
    name: str
    range: Tuple[int, int]
    weight: float = 1.0

    @property
    def min(self) -> int:
        return self.range[0]

    @property
    def max(self) -> int:
        return self.range[1]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TraitDef":
        lo, hi = data.get("range", (0, 0))
        return cls(
            name=data.get("name", ""),
            range=(int(lo), int(hi)),
            weight=float(data.get("weight", 1.0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "range": list(self.range), "weight": self.weight}


@dataclass(frozen=True)
class BackgroundItem:
    """One choice inside a background category (e.g. "Scholar" in education)."""
    name: str
    effects: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BackgroundItem":
        return cls(
            name=data.get("name", ""),
            effects=_freeze_effects(data.get("effects")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "effects": dict(self.effects)}


@dataclass(frozen=True)
class Personality:
    """
    Personality tag.

    - id: unique identifier
    - name: display name
    - effects: trait key -> additive delta
    - exclusive_with: ids that cannot be picked together with this one.
      Declared one way in data, enforced both ways at selection time.
    """
    id: str
    name: str
    effects: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    exclusive_with: Tuple[str, ...] = ()

    def excludes(self, other: "Personality") -> bool:
        return other.id in self.exclusive_with

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_id: str = "") -> "Personality":
        return cls(
            id=data.get("id", default_id),
            name=data.get("name", ""),
            effects=_freeze_effects(data.get("effects")),
            exclusive_with=tuple(data.get("exclusiveWith") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "effects": dict(self.effects),
        }
        if self.exclusive_with:
            data["exclusiveWith"] = list(self.exclusive_with)
        return data


BackgroundCategory = Mapping[str, BackgroundItem]


@dataclass(frozen=True)
class CharacterTemplate:
    """
    Immutable container for everything a character is generated from.

    ``personalities`` is None when the template has no personality section at all,
    which the generator reports and treats as an empty registry.
    """
    traits: Mapping[str, TraitDef] = field(default_factory=lambda: MappingProxyType({}))
    backgrounds: Mapping[str, BackgroundCategory] = field(
        default_factory=lambda: MappingProxyType({})
    )
    personalities: Optional[Mapping[str, Personality]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharacterTemplate":
        traits = {
            key: TraitDef.from_dict(value)
            for key, value in (data.get("traits") or {}).items()
        }

        backgrounds = {}
        for category, items in (data.get("backgrounds") or {}).items():
            backgrounds[category] = MappingProxyType({
                key: BackgroundItem.from_dict(value)
                for key, value in (items or {}).items()
            })

        raw_personalities = data.get("personalities")
        personalities = None
        if raw_personalities is not None:
            personalities = MappingProxyType({
                key: Personality.from_dict(value, default_id=key)
                for key, value in raw_personalities.items()
            })

        return cls(
            traits=MappingProxyType(traits),
            backgrounds=MappingProxyType(backgrounds),
            personalities=personalities,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "traits": {key: trait.to_dict() for key, trait in self.traits.items()},
            "backgrounds": {
                category: {key: item.to_dict() for key, item in items.items()}
                for category, items in self.backgrounds.items()
            },
        }
        if self.personalities is not None:
            data["personalities"] = {
                key: personality.to_dict()
                for key, personality in self.personalities.items()
            }
        return data


def load_character_template(path: Path) -> CharacterTemplate:
    """
    Load a character template from a JSON asset.

    The asset root may wrap the template in a ``characterTemplate`` key or hold
    the ``traits``/``backgrounds``/``personalities`` sections directly.

    Raises:
        TemplateError: the file is missing, unreadable or not a JSON object
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise TemplateError(
            f"Template file not found: {path}",
            user_message="Character template JSON is not loaded.",
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise TemplateError(
            f"Could not read template {path}: {e}",
            user_message="Character template JSON is not in the expected format.",
        ) from e

    if not isinstance(data, dict):
        raise TemplateError(f"Template root must be an object: {path}")

    body = data.get("characterTemplate", data)
    if not isinstance(body, dict):
        raise TemplateError(f"'characterTemplate' must be an object: {path}")

    try:
        template = CharacterTemplate.from_dict(body)
    except (AttributeError, TypeError, ValueError) as e:
        raise TemplateError(f"Malformed template {path}: {e}") from e

    if template.personalities is None:
        logger.error("Personalities object is empty or undefined in %s", path)
    logger.debug(
        "Character template loaded from %s: %d traits, %d background categories",
        path, len(template.traits), len(template.backgrounds),
    )
    return template
