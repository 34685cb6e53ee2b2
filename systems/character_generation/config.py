"""
Generator configuration loader.

Loads and saves character generation settings from a JSON config file.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from engine.error_handler import logger
from settings import (
    DEFAULT_PERSONALITY_MAX,
    DEFAULT_PERSONALITY_MIN,
    GENERATOR_CONFIG_FILE,
)


@dataclass
class GeneratorConfig:
    """Character generation configuration."""
    personality_min: int = DEFAULT_PERSONALITY_MIN
    personality_max: int = DEFAULT_PERSONALITY_MAX
    trace_steps: bool = True  # per-step DEBUG logging / telemetry events
    telemetry_sample_every: int = 1

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "GeneratorConfig":
        """
        Load configuration from file, using defaults if file doesn't exist.

        Args:
            config_file: Optional path to config file (defaults to standard location)

        Returns:
            GeneratorConfig instance
        """
        if config_file is None:
            config_file = GENERATOR_CONFIG_FILE

        config = cls()

        if not config_file.exists():
            logger.info(f"Generator config file not found at {config_file}, using defaults.")
            config.save(config_file)
            return config

        try:
            with config_file.open("r", encoding="utf-8") as f:
                data = json.load(f)

            personalities = data.get("personalities", {})
            config.personality_min = int(personalities.get("min", config.personality_min))
            config.personality_max = int(personalities.get("max", config.personality_max))

            trace = data.get("trace", {})
            config.trace_steps = bool(trace.get("steps", config.trace_steps))
            config.telemetry_sample_every = int(
                trace.get("telemetry_sample_every", config.telemetry_sample_every)
            )
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading generator config: {e}. Using default configuration.")
            config = cls()

        return config

    def save(self, config_file: Optional[Path] = None) -> bool:
        """
        Save configuration to file.

        Args:
            config_file: Optional path to config file (defaults to standard location)

        Returns:
            True if saved successfully, False otherwise
        """
        if config_file is None:
            config_file = GENERATOR_CONFIG_FILE

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)

            data = {
                "personalities": {
                    "min": self.personality_min,
                    "max": self.personality_max,
                },
                "trace": {
                    "steps": self.trace_steps,
                    "telemetry_sample_every": self.telemetry_sample_every,
                },
            }

            with config_file.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)

            return True
        except OSError as e:
            logger.warning(f"Error saving generator config: {e}")
            return False


def load_generator_config(config_file: Optional[Path] = None) -> GeneratorConfig:
    """Convenience function to load generator config."""
    return GeneratorConfig.load(config_file)
