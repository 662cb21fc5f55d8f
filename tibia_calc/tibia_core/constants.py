"""
Tibia Calculator - Core Constants
=================================
Single source of truth for formula constants, enums, and UI defaults.

Level bonus and Base Power coefficients follow the in-game Spell Archive
("Cyclopedia") values.
"""

from enum import Enum
from typing import Union


# =============================================================================
# ENUMS
# =============================================================================

class CalcMode(Enum):
    """Base Power calculator modes."""
    MAGIC = "magic"        # Attack spells & runes, resistance applies
    HEALING = "healing"    # Healing spells, resistance never applies

    @classmethod
    def from_value(cls, value: Union["CalcMode", str]) -> "CalcMode":
        """Resolve a mode from a member or its string id (unknown -> MAGIC)."""
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        return cls.MAGIC


class SpellCategory(Enum):
    """Preset catalog groupings."""
    RUNES = "Runes"
    MAGE_SPELLS = "Mage Spells"
    PALADIN_SPELLS = "Paladin Spells"
    KNIGHT_SPELLS = "Knight Spells"


class SpellType(Enum):
    DAMAGE = "damage"
    HEALING = "healing"


class ScalingStat(Enum):
    """Which character stat a preset spell scales with."""
    MAGIC = "magic"    # Magic Level
    SKILL = "skill"    # Melee/distance skill

    @property
    def label(self) -> str:
        return "ML" if self is ScalingStat.MAGIC else "Skill"


# =============================================================================
# LEVEL BONUS (DIMINISHING RETURNS)
# =============================================================================
# 1-500:     +1 per 5 levels (max +100)
# 501-1100:  +1 per 6 levels (max +100)
# 1101-1800: +1 per 7 levels (max +100)
# ... each segment is 100 levels longer and divides by one more

LEVEL_BONUS_FIRST_RANGE = 500
LEVEL_BONUS_FIRST_DIVISOR = 5
LEVEL_BONUS_RANGE_STEP = 100
LEVEL_BONUS_DIVISOR_STEP = 1

# Preset calculator uses the old flat bonus: level / 5
FLAT_LEVEL_DIVISOR = 5


# =============================================================================
# BASE POWER DERIVATION
# =============================================================================
# max_mult   = sqrt(base_power) * 0.59
# min_mult   = max_mult * 0.55
# max_offset = floor(base_power * 0.25)
# min_offset = floor(max_offset * 0.6)

BASE_POWER_MAX_MULT_FACTOR = 0.59
BASE_POWER_MIN_MULT_RATIO = 0.55
BASE_POWER_MAX_OFFSET_FACTOR = 0.25
BASE_POWER_MIN_OFFSET_RATIO = 0.6


# =============================================================================
# MODIFIERS
# =============================================================================

# 100% is neutral. Above 100% = weakness, below 100% = resistance
NEUTRAL_RESISTANCE = 100


# =============================================================================
# UI DEFAULTS
# =============================================================================

DEFAULT_LEVEL = 250
DEFAULT_MAGIC_LEVEL = 95
DEFAULT_MELEE_SKILL = 100
DEFAULT_BASE_POWER = 140  # From in-game Spell Archive
DEFAULT_EQUIP_BONUS = 0
DEFAULT_TARGET_RESISTANCE = NEUTRAL_RESISTANCE
