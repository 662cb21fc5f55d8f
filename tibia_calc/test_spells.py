"""
Unit tests for tibia_core.spells - preset catalog and preset calculator.
"""
import logging
import math
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

import pytest
from tibia_core import (
    DEFAULT_CATALOG,
    DEFAULT_SPELLS,
    ScalingConstants,
    ScalingStat,
    SpellCatalog,
    SpellCategory,
    SpellDefinition,
    SpellType,
    compute_preset_result,
    compute_spell_result,
)


def make_spell(name="Test Bolt", min_mult=1.0, min_offset=5, max_mult=2.0, max_offset=10,
               scaling=ScalingStat.MAGIC, category=SpellCategory.RUNES):
    return SpellDefinition(
        name=name,
        category=category,
        type=SpellType.DAMAGE,
        scaling=scaling,
        constants=ScalingConstants(min_mult, min_offset, max_mult, max_offset),
    )


class TestDefaultCatalog:
    """Tests for the built-in presets."""

    def test_names_unique(self):
        names = [spell.name for spell in DEFAULT_SPELLS]
        assert len(names) == len(set(names))

    def test_min_not_above_max(self):
        """Every entry keeps a non-negative min/max spread."""
        for spell in DEFAULT_CATALOG:
            c = spell.constants
            assert c.min_mult <= c.max_mult, spell.name
            assert c.min_offset <= c.max_offset, spell.name

    def test_all_categories_present(self):
        assert DEFAULT_CATALOG.categories() == [
            SpellCategory.RUNES,
            SpellCategory.MAGE_SPELLS,
            SpellCategory.PALADIN_SPELLS,
            SpellCategory.KNIGHT_SPELLS,
        ]

    def test_first_entry_is_default(self):
        assert DEFAULT_CATALOG.default.name == "Sudden Death Rune"
        assert DEFAULT_CATALOG.names()[0] == "Sudden Death Rune"

    def test_by_category(self):
        knights = DEFAULT_CATALOG.by_category(SpellCategory.KNIGHT_SPELLS)
        assert knights
        assert all(s.category is SpellCategory.KNIGHT_SPELLS for s in knights)
        # Catalog order kept
        all_names = DEFAULT_CATALOG.names()
        indices = [all_names.index(s.name) for s in knights]
        assert indices == sorted(indices)

    def test_knight_weapon_spells_scale_with_skill(self):
        assert DEFAULT_CATALOG.get("Berserk").scaling is ScalingStat.SKILL
        assert DEFAULT_CATALOG.get("Wound Cleansing").scaling is ScalingStat.MAGIC

    def test_len_and_contains(self):
        assert len(DEFAULT_CATALOG) == len(DEFAULT_SPELLS)
        assert "Ultimate Healing Rune" in DEFAULT_CATALOG
        assert "Exori Frigo Nonsense" not in DEFAULT_CATALOG


class TestCatalogLookup:
    """Tests for name lookup and fallback."""

    def test_find_hit_and_miss(self):
        assert DEFAULT_CATALOG.find("Avalanche Rune").name == "Avalanche Rune"
        assert DEFAULT_CATALOG.find("Nope") is None

    def test_get_falls_back_to_first(self):
        assert DEFAULT_CATALOG.get("Nope") is DEFAULT_CATALOG.default

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tibia_core.spells"):
            DEFAULT_CATALOG.get("Nope")
        assert "Nope" in caplog.text


class TestCatalogValidation:
    """SpellCatalog rejects bad data at construction."""

    def test_empty(self):
        with pytest.raises(ValueError):
            SpellCatalog([])

    def test_duplicate_names(self):
        with pytest.raises(ValueError, match="Duplicate"):
            SpellCatalog([make_spell("Twin"), make_spell("Twin")])

    def test_inverted_multipliers(self):
        with pytest.raises(ValueError):
            SpellCatalog([make_spell(min_mult=3.0, max_mult=2.0)])

    def test_inverted_offsets(self):
        with pytest.raises(ValueError):
            SpellCatalog([make_spell(min_offset=20, max_offset=10)])

    def test_accepts_generator(self):
        catalog = SpellCatalog(make_spell(f"Bolt {i}") for i in range(3))
        assert catalog.names() == ["Bolt 0", "Bolt 1", "Bolt 2"]


class TestComputePresetResult:
    """Tests for the preset calculator."""

    def test_sudden_death_reference(self):
        """Level 250 / ML 95: 50 + floor(95*4.605+28), 50 + floor(95*7.395+46)."""
        result = compute_preset_result(250, 95, 10, "Sudden Death Rune")
        assert result.level_base == 50
        assert result.min_stat_component == 465
        assert result.max_stat_component == 748
        assert (result.min, result.max, result.avg) == (515, 798, 656)
        assert result.stat_label == "ML"
        assert result.scaling_stat == 95

    def test_flat_level_bonus(self):
        """Presets use level / 5 even above level 500."""
        result = compute_preset_result(600, 0, 0, "Sudden Death Rune")
        assert result.level_base == 120

    def test_skill_spell_uses_melee_skill(self):
        result = compute_preset_result(250, 10, 100, "Berserk")
        assert result.scaling_stat == 100
        assert result.stat_label == "Skill"
        assert result.min_stat_component == 110
        assert result.max_stat_component == 300
        assert (result.min, result.max) == (160, 350)

    def test_magic_spell_ignores_melee_skill(self):
        low_skill = compute_preset_result(250, 95, 10, "Ultimate Healing")
        high_skill = compute_preset_result(250, 95, 130, "Ultimate Healing")
        assert low_skill == high_skill

    def test_equipment_bonus(self):
        base = compute_preset_result(250, 95, 10, "Sudden Death Rune")
        boosted = compute_preset_result(250, 95, 10, "Sudden Death Rune", equip_bonus_percent=10)
        assert boosted.min == math.floor(base.min * (1 + 10 / 100))
        assert boosted.max == math.floor(base.max * (1 + 10 / 100))

    def test_negative_equipment_bonus_not_clamped(self):
        result = compute_preset_result(250, 95, 10, "Sudden Death Rune", equip_bonus_percent=-150)
        assert result.min < 0
        assert result.max < 0

    def test_unknown_name_uses_first_entry(self):
        fallback = compute_preset_result(250, 95, 10, "Made Up Spell")
        first = compute_preset_result(250, 95, 10, DEFAULT_CATALOG.default.name)
        assert fallback == first

    def test_deterministic(self):
        first = compute_preset_result(321, 77, 88, "Rage of the Skies", 12)
        second = compute_preset_result(321, 77, 88, "Rage of the Skies", 12)
        assert first == second

    def test_injected_catalog(self):
        """The engine works against any catalog passed in."""
        catalog = SpellCatalog([make_spell("Test Bolt", 1.0, 5, 2.0, 10)])
        result = compute_preset_result(100, 10, 0, "Test Bolt", catalog=catalog)
        assert result.level_base == 20
        assert (result.min_stat_component, result.max_stat_component) == (15, 30)
        assert (result.min, result.max, result.avg) == (35, 50, 42)

    def test_compute_spell_result_matches_lookup(self):
        spell = DEFAULT_CATALOG.get("Divine Caldera")
        assert compute_spell_result(spell, 400, 30, 90) == compute_preset_result(400, 30, 90, "Divine Caldera")

    def test_healing_flag(self):
        assert DEFAULT_CATALOG.get("Salvation").is_healing
        assert not DEFAULT_CATALOG.get("Annihilation").is_healing
