"""
Tibia Calculator - Spell & Rune Presets
=======================================
Static catalog of spells/runes and their scaling constants, plus the preset
calculator that reads from it.

Preset formula (older community formulas, flat level bonus):
    min = floor(level / 5) + floor(stat * min_mult + min_offset)
    max = floor(level / 5) + floor(stat * max_mult + max_offset)

where stat is Magic Level for magic-scaling entries and melee skill for
skill-scaling entries.

The catalog is a plain immutable object: pass a different SpellCatalog to
compute_preset_result() to calculate against other data.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .constants import SpellCategory, SpellType, ScalingStat
from .damage import (
    ComputationResult,
    ScalingConstants,
    assemble_result,
    calculate_flat_level_bonus,
    calculate_stat_components,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SPELL DEFINITION
# =============================================================================

@dataclass(frozen=True)
class SpellDefinition:
    """A named spell or rune with its scaling constants."""
    name: str
    category: SpellCategory
    type: SpellType
    scaling: ScalingStat
    constants: ScalingConstants

    @property
    def is_healing(self) -> bool:
        return self.type is SpellType.HEALING

    def stat_for(self, magic_level: int, melee_skill: int) -> int:
        """Pick the governing stat for this spell."""
        return magic_level if self.scaling is ScalingStat.MAGIC else melee_skill


def _spell(
    name: str,
    category: SpellCategory,
    spell_type: SpellType,
    scaling: ScalingStat,
    min_mult: float,
    min_offset: int,
    max_mult: float,
    max_offset: int,
) -> SpellDefinition:
    return SpellDefinition(
        name=name,
        category=category,
        type=spell_type,
        scaling=scaling,
        constants=ScalingConstants(min_mult, min_offset, max_mult, max_offset),
    )


# =============================================================================
# CATALOG
# =============================================================================

class SpellCatalog:
    """
    Ordered, read-only collection of SpellDefinitions keyed by name.

    Validated on construction:
        - at least one entry
        - names are unique
        - min_mult <= max_mult and min_offset <= max_offset

    Lookup misses fall back to the first entry rather than raising.
    """

    def __init__(self, spells: Iterable[SpellDefinition]):
        self._spells: Tuple[SpellDefinition, ...] = tuple(spells)
        if not self._spells:
            raise ValueError("SpellCatalog needs at least one spell")

        self._by_name: Dict[str, SpellDefinition] = {}
        for spell in self._spells:
            if spell.name in self._by_name:
                raise ValueError(f"Duplicate spell name: {spell.name!r}")
            c = spell.constants
            if c.min_mult > c.max_mult or c.min_offset > c.max_offset:
                raise ValueError(
                    f"{spell.name!r}: min constants exceed max "
                    f"({c.min_mult}+{c.min_offset} vs {c.max_mult}+{c.max_offset})"
                )
            self._by_name[spell.name] = spell

        logger.debug("Built spell catalog with %d entries", len(self._spells))

    def __iter__(self) -> Iterator[SpellDefinition]:
        return iter(self._spells)

    def __len__(self) -> int:
        return len(self._spells)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def default(self) -> SpellDefinition:
        """First entry - used whenever a lookup misses."""
        return self._spells[0]

    def names(self) -> List[str]:
        return [spell.name for spell in self._spells]

    def find(self, name: str) -> Optional[SpellDefinition]:
        """Exact lookup, None on miss."""
        return self._by_name.get(name)

    def get(self, name: str) -> SpellDefinition:
        """Lookup by name, falling back to the first entry."""
        spell = self._by_name.get(name)
        if spell is None:
            logger.debug("Unknown spell %r, falling back to %r", name, self.default.name)
            return self.default
        return spell

    def by_category(self, category: SpellCategory) -> List[SpellDefinition]:
        """Entries in one category, catalog order preserved."""
        return [spell for spell in self._spells if spell.category is category]

    def categories(self) -> List[SpellCategory]:
        """Categories present in the catalog, in first-seen order."""
        seen: List[SpellCategory] = []
        for spell in self._spells:
            if spell.category not in seen:
                seen.append(spell.category)
        return seen


# =============================================================================
# DEFAULT PRESETS
# =============================================================================
# (min_mult, min_offset, max_mult, max_offset) per spell.
# Knight weapon spells and paladin spears scale with skill, everything else with ML.

_R = SpellCategory.RUNES
_M = SpellCategory.MAGE_SPELLS
_P = SpellCategory.PALADIN_SPELLS
_K = SpellCategory.KNIGHT_SPELLS
_DMG = SpellType.DAMAGE
_HEAL = SpellType.HEALING
_ML = ScalingStat.MAGIC
_SKILL = ScalingStat.SKILL

DEFAULT_SPELLS: Tuple[SpellDefinition, ...] = (
    # Runes
    _spell("Sudden Death Rune", _R, _DMG, _ML, 4.605, 28, 7.395, 46),
    _spell("Great Fireball Rune", _R, _DMG, _ML, 1.81, 10, 3.0, 18),
    _spell("Avalanche Rune", _R, _DMG, _ML, 1.2, 7, 2.85, 16),
    _spell("Thunderstorm Rune", _R, _DMG, _ML, 1.0, 6, 2.6, 16),
    _spell("Stone Shower Rune", _R, _DMG, _ML, 1.0, 6, 2.6, 16),
    _spell("Heavy Magic Missile Rune", _R, _DMG, _ML, 0.81, 4, 1.59, 10),
    _spell("Ultimate Healing Rune", _R, _HEAL, _ML, 7.22, 44, 12.79, 79),
    _spell("Intense Healing Rune", _R, _HEAL, _ML, 3.184, 20, 5.59, 35),

    # Mage spells
    _spell("Hell's Core", _M, _DMG, _ML, 7.0, 45, 14.0, 90),
    _spell("Rage of the Skies", _M, _DMG, _ML, 5.0, 30, 12.0, 70),
    _spell("Eternal Winter", _M, _DMG, _ML, 5.0, 30, 12.0, 70),
    _spell("Energy Wave", _M, _DMG, _ML, 4.5, 20, 9.0, 40),
    _spell("Ultimate Flame Strike", _M, _DMG, _ML, 4.5, 35, 7.3, 55),
    _spell("Strong Flame Strike", _M, _DMG, _ML, 2.8, 16, 4.4, 28),
    _spell("Ultimate Healing", _M, _HEAL, _ML, 7.22, 44, 12.79, 79),
    _spell("Intense Healing", _M, _HEAL, _ML, 3.184, 20, 5.59, 35),
    _spell("Light Healing", _M, _HEAL, _ML, 1.4, 8, 1.795, 11),

    # Paladin spells
    _spell("Divine Caldera", _P, _DMG, _ML, 4.0, 26, 6.0, 40),
    _spell("Divine Missile", _P, _DMG, _ML, 1.79, 11, 3.0, 18),
    _spell("Strong Ethereal Spear", _P, _DMG, _SKILL, 2.0, 0, 3.2, 0),
    _spell("Ethereal Spear", _P, _DMG, _SKILL, 0.7, 0, 1.6, 0),
    _spell("Salvation", _P, _HEAL, _ML, 12.0, 75, 20.0, 125),

    # Knight spells
    _spell("Annihilation", _K, _DMG, _SKILL, 6.4, 0, 12.8, 0),
    _spell("Fierce Berserk", _K, _DMG, _SKILL, 2.2, 0, 3.4, 0),
    _spell("Berserk", _K, _DMG, _SKILL, 1.1, 0, 3.0, 0),
    _spell("Brutal Strike", _K, _DMG, _SKILL, 1.1, 0, 3.0, 0),
    _spell("Front Sweep", _K, _DMG, _SKILL, 1.1, 0, 3.0, 0),
    _spell("Wound Cleansing", _K, _HEAL, _ML, 4.0, 25, 7.95, 51),
)

DEFAULT_CATALOG = SpellCatalog(DEFAULT_SPELLS)


# =============================================================================
# PRESET CALCULATION
# =============================================================================

def compute_spell_result(
    spell: SpellDefinition,
    level: int,
    magic_level: int,
    melee_skill: int,
    equip_bonus_percent: int = 0,
) -> ComputationResult:
    """
    Calculate min/max/avg for an already resolved spell.

    Args:
        spell: Catalog entry to use
        level: Character level
        magic_level: Magic Level (used by magic-scaling spells)
        melee_skill: Melee skill (used by skill-scaling spells)
        equip_bonus_percent: Equipment bonus % (signed)

    Returns:
        ComputationResult; target resistance never applies to presets
    """
    stat = spell.stat_for(magic_level, melee_skill)
    min_component, max_component = calculate_stat_components(stat, spell.constants)

    return assemble_result(
        calculate_flat_level_bonus(level),
        min_component,
        max_component,
        scaling=spell.constants,
        scaling_stat=stat,
        stat_label=spell.scaling.label,
        equip_bonus_percent=equip_bonus_percent,
    )


def compute_preset_result(
    level: int,
    magic_level: int,
    melee_skill: int,
    spell_name: str,
    equip_bonus_percent: int = 0,
    catalog: SpellCatalog = DEFAULT_CATALOG,
) -> ComputationResult:
    """
    Calculate min/max/avg for a catalog spell selected by name.

    Unknown names use the catalog's first entry.
    """
    spell = catalog.get(spell_name)
    return compute_spell_result(spell, level, magic_level, melee_skill, equip_bonus_percent)
