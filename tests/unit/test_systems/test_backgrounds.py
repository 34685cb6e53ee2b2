"""
Unit tests for background selection.
"""

import random

from systems.character_generation import BackgroundItem, CharacterTemplate, select_backgrounds


def _category(*names):
    return {name.lower(): BackgroundItem(name=name) for name in names}


class TestSelectBackgrounds:
    """Tests for select_backgrounds."""

    def test_single_item_category_always_chosen(self, sample_template, scripted_rng):
        chosen = select_backgrounds(sample_template.backgrounds, scripted_rng([0.99]))
        assert list(chosen) == ["education"]
        assert chosen["education"].name == "Scholar"
        assert dict(chosen["education"].effects) == {"strength": -1}

    def test_draw_maps_to_item_index(self, scripted_rng):
        backgrounds = {"family": _category("Noble", "Farmer", "Orphan")}
        assert select_backgrounds(backgrounds, scripted_rng([0.0]))["family"].name == "Noble"
        assert select_backgrounds(backgrounds, scripted_rng([0.5]))["family"].name == "Farmer"
        assert select_backgrounds(backgrounds, scripted_rng([0.99]))["family"].name == "Orphan"

    def test_empty_category_is_omitted_and_reported(self, scripted_rng, caplog):
        backgrounds = {
            "education": {},
            "family": _category("Noble"),
        }
        rng = scripted_rng([0.0])
        chosen = select_backgrounds(backgrounds, rng)

        assert "education" not in chosen
        assert chosen["family"].name == "Noble"
        assert rng.remaining == 0
        assert "No items found for background category 'education'" in caplog.text

    def test_none_category_is_treated_as_empty(self, scripted_rng, caplog):
        chosen = select_backgrounds({"education": None}, scripted_rng([]))
        assert chosen == {}
        assert "education" in caplog.text

    def test_selected_items_belong_to_their_category(self, rich_template):
        rng = random.Random(99)
        for _ in range(200):
            chosen = select_backgrounds(rich_template.backgrounds, rng)
            assert set(chosen) == {"education", "family"}
            for category, item in chosen.items():
                assert item in rich_template.backgrounds[category].values()

    def test_every_item_is_reachable(self, rich_template):
        rng = random.Random(3)
        seen = set()
        for _ in range(300):
            seen.add(select_backgrounds(rich_template.backgrounds, rng)["family"].name)
        assert seen == {"Noble", "Orphan"}

    def test_template_with_no_backgrounds(self, scripted_rng):
        template = CharacterTemplate.from_dict({"traits": {}, "personalities": {}})
        assert select_backgrounds(template.backgrounds, scripted_rng([])) == {}

    def test_trace_hook_reports_selected_and_skipped(self, scripted_rng):
        events = []
        backgrounds = {"education": {}, "family": _category("Noble")}
        select_backgrounds(
            backgrounds, scripted_rng([0.0]), trace=lambda e, **kw: events.append((e, kw))
        )
        assert events == [
            ("background_skipped", {"category": "education"}),
            ("background_selected", {"category": "family", "item": "noble"}),
        ]
