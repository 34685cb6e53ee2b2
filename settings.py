# settings.py

from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent

# Data / config
CONFIG_DIR = ROOT_DIR / "config"
DEFAULT_TEMPLATE_FILE = CONFIG_DIR / "character_template.json"
GENERATOR_CONFIG_FILE = CONFIG_DIR / "generator_settings.json"

# Output
LOG_DIR = ROOT_DIR / "logs"
EXPORT_DIR = ROOT_DIR / "characters"
TELEMETRY_FILE = LOG_DIR / "generation_telemetry.jsonl"

# Generation
DEFAULT_PERSONALITY_MIN = 1
DEFAULT_PERSONALITY_MAX = 3
