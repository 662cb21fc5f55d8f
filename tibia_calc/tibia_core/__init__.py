"""
Tibia Calculator - Core Math Module
===================================
Single source of truth for spell/rune damage and healing formulas.

All other modules should import from here rather than implementing their own formulas.
"""

from .constants import (
    # Enums
    CalcMode,
    SpellCategory,
    SpellType,
    ScalingStat,
    # Level bonus
    LEVEL_BONUS_FIRST_RANGE,
    LEVEL_BONUS_FIRST_DIVISOR,
    LEVEL_BONUS_RANGE_STEP,
    LEVEL_BONUS_DIVISOR_STEP,
    FLAT_LEVEL_DIVISOR,
    # Modifiers
    NEUTRAL_RESISTANCE,
    # UI defaults
    DEFAULT_LEVEL,
    DEFAULT_MAGIC_LEVEL,
    DEFAULT_MELEE_SKILL,
    DEFAULT_BASE_POWER,
    DEFAULT_EQUIP_BONUS,
    DEFAULT_TARGET_RESISTANCE,
)

from .damage import (
    # Core calculation
    compute_base_power_result,
    ComputationResult,
    ScalingConstants,
    LevelBonusSegment,
    # Helper functions
    calculate_level_bonus,
    calculate_flat_level_bonus,
    level_bonus_segments,
    derive_base_power_scaling,
    calculate_stat_components,
    assemble_result,
)

from .spells import (
    SpellDefinition,
    SpellCatalog,
    DEFAULT_SPELLS,
    DEFAULT_CATALOG,
    compute_preset_result,
    compute_spell_result,
)

from .modes import (
    CalcModeInfo,
    CALC_MODES,
    get_calc_mode,
)

__all__ = [
    # Constants
    'CalcMode',
    'SpellCategory',
    'SpellType',
    'ScalingStat',
    'LEVEL_BONUS_FIRST_RANGE',
    'LEVEL_BONUS_FIRST_DIVISOR',
    'LEVEL_BONUS_RANGE_STEP',
    'LEVEL_BONUS_DIVISOR_STEP',
    'FLAT_LEVEL_DIVISOR',
    'NEUTRAL_RESISTANCE',
    'DEFAULT_LEVEL',
    'DEFAULT_MAGIC_LEVEL',
    'DEFAULT_MELEE_SKILL',
    'DEFAULT_BASE_POWER',
    'DEFAULT_EQUIP_BONUS',
    'DEFAULT_TARGET_RESISTANCE',
    # Damage calculation
    'compute_base_power_result',
    'ComputationResult',
    'ScalingConstants',
    'LevelBonusSegment',
    'calculate_level_bonus',
    'calculate_flat_level_bonus',
    'level_bonus_segments',
    'derive_base_power_scaling',
    'calculate_stat_components',
    'assemble_result',
    # Presets
    'SpellDefinition',
    'SpellCatalog',
    'DEFAULT_SPELLS',
    'DEFAULT_CATALOG',
    'compute_preset_result',
    'compute_spell_result',
    # Modes
    'CalcModeInfo',
    'CALC_MODES',
    'get_calc_mode',
]
