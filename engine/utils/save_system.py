"""
Export system for generated characters.

Writes generated characters to JSON files.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from engine.error_handler import ExportError, logger
from settings import EXPORT_DIR
from systems.character_generation import GeneratedCharacter


def get_export_path(slot: int = 1, export_dir: Optional[Path] = None) -> Path:
    """Get the file path for a numbered export slot."""
    return (export_dir or EXPORT_DIR) / f"character_{slot}.json"


def _write_json(data: Any, path: Path) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to a temporary file first, then rename (atomic write)
        temp_path = path.with_suffix(".tmp")
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        temp_path.replace(path)
    except OSError as e:
        raise ExportError(
            f"Error writing {path}: {e}",
            user_message="Could not save the generated character.",
        ) from e

    logger.info(f"Saved character data to {path}")
    return path


def save_character(character: GeneratedCharacter, path: Path) -> Path:
    """
    Save one generated character to a JSON file.

    Args:
        character: Character to save
        path: Destination file

    Returns:
        The written path

    Raises:
        ExportError: the file could not be written
    """
    return _write_json(character.to_dict(), Path(path))


def save_characters(characters: Iterable[GeneratedCharacter], path: Path) -> Path:
    """Save a batch of characters as a JSON list."""
    data = [c.to_dict() for c in characters]
    return _write_json(data, Path(path))


def load_character_data(path: Path) -> Optional[Dict[str, Any]]:
    """
    Read back an exported character as plain data.

    Returns:
        The decoded JSON, or None if the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ExportError(f"Error reading {path}: {e}") from e
