"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import logging
from typing import Generator, List

import pytest

from engine.error_handler import logger as package_logger
from systems.character_generation import CharacterTemplate


class ScriptedRandom:
    """Random source that replays a fixed list of values."""

    def __init__(self, values: List[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        if not self.values:
            raise AssertionError(f"ScriptedRandom exhausted after {self.calls} draws")
        self.calls += 1
        return self.values.pop(0)

    @property
    def remaining(self) -> int:
        return len(self.values)


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    """
    Undo any handlers/level installed by setup_logging() during a test.
    """
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in package_logger.handlers[:]:
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)


@pytest.fixture
def scripted_rng():
    """
    Factory for random sources returning a scripted sequence.
    """
    return ScriptedRandom


@pytest.fixture
def template_data():
    """
    Raw asset data: one trait, one single-item background category and
    two personalities where B excludes A.
    """
    return {
        "traits": {
            "strength": {"name": "Strength", "range": [1, 10], "weight": 1.0},
        },
        "backgrounds": {
            "education": {
                "scholar": {"name": "Scholar", "effects": {"strength": -1}},
            },
        },
        "personalities": {
            "A": {"id": "A", "name": "Alpha", "effects": {"strength": 2}, "exclusiveWith": []},
            "B": {"id": "B", "name": "Beta", "effects": {"strength": -2}, "exclusiveWith": ["A"]},
        },
    }


@pytest.fixture
def sample_template(template_data) -> CharacterTemplate:
    """
    Create the sample CharacterTemplate for testing.
    """
    return CharacterTemplate.from_dict(template_data)


@pytest.fixture
def rich_template() -> CharacterTemplate:
    """
    A larger template with several traits, categories and exclusivity pairs.
    """
    return CharacterTemplate.from_dict({
        "traits": {
            "strength": {"name": "Strength", "range": [1, 10], "weight": 1.0},
            "intelligence": {"name": "Intelligence", "range": [1, 10], "weight": 1.0},
            "charisma": {"name": "Charisma", "range": [1, 10], "weight": 1.2},
            "luck": {"name": "Luck", "range": [0, 5], "weight": 0.5},
        },
        "backgrounds": {
            "education": {
                "scholar": {"name": "Scholar", "effects": {"intelligence": 2, "strength": -1}},
                "apprentice": {"name": "Apprentice", "effects": {"strength": 1}},
            },
            "family": {
                "noble": {"name": "Noble", "effects": {"charisma": 2, "wealth": 5}},
                "orphan": {"name": "Orphan", "effects": {"luck": 2}},
            },
        },
        "personalities": {
            "brave": {"id": "brave", "name": "Brave", "effects": {"strength": 2},
                      "exclusiveWith": ["cautious"]},
            "cautious": {"id": "cautious", "name": "Cautious", "effects": {"intelligence": 1}},
            "charming": {"id": "charming", "name": "Charming", "effects": {"charisma": 2},
                         "exclusiveWith": ["rude"]},
            "rude": {"id": "rude", "name": "Rude", "effects": {"charisma": -2}},
            "lucky": {"id": "lucky", "name": "Lucky", "effects": {"luck": 3}},
            "grim": {"id": "grim", "name": "Grim", "effects": {"charisma": -1},
                     "exclusiveWith": ["lucky", "charming"]},
        },
    })


@pytest.fixture
def debug_logs(caplog):
    """
    caplog with DEBUG capture enabled on the package logger.
    """
    caplog.set_level(logging.DEBUG, logger="chargen")
    return caplog
