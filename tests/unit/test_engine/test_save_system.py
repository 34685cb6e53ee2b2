"""
Unit tests for exporting generated characters.
"""

import pytest
from engine.error_handler import ExportError
from engine.utils.save_system import (
    get_export_path,
    load_character_data,
    save_character,
    save_characters,
)
from systems.character_generation import CharacterGenerator


class TestSaveSystem:
    """Tests for save_character / save_characters."""

    def test_save_and_read_back(self, sample_template, tmp_path):
        character = CharacterGenerator(sample_template, seed=1).generate()
        path = save_character(character, tmp_path / "out" / "hero.json")

        data = load_character_data(path)
        assert data == character.to_dict()
        assert not path.with_suffix(".tmp").exists()

    def test_save_batch(self, sample_template, tmp_path):
        characters = CharacterGenerator(sample_template, seed=1).generate_batch(3)
        path = save_characters(characters, tmp_path / "batch.json")
        data = load_character_data(path)
        assert len(data) == 3

    def test_unwritable_destination_raises(self, sample_template, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        character = CharacterGenerator(sample_template, seed=1).generate()
        with pytest.raises(ExportError):
            save_character(character, blocker / "hero.json")

    def test_load_missing_returns_none(self, tmp_path):
        assert load_character_data(tmp_path / "missing.json") is None

    def test_export_path(self, tmp_path):
        assert get_export_path(3, tmp_path) == tmp_path / "character_3.json"
