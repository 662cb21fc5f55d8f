"""
Tibia Calculator - Core Damage Calculation
==========================================
Single source of truth for spell/rune damage and healing formulas.

Two calculators share the same result assembly:
    - Base Power: multipliers/offsets derived from the spell's Base Power,
      level bonus with high-level diminishing returns.
    - Presets: multipliers/offsets read from the spell catalog, flat
      level / 5 bonus.

Every function here is pure. Inputs are expected to be clamped already
(see streamlit_app/utils/inputs.py).
"""

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

from .constants import (
    CalcMode,
    ScalingStat,
    LEVEL_BONUS_FIRST_RANGE,
    LEVEL_BONUS_FIRST_DIVISOR,
    LEVEL_BONUS_RANGE_STEP,
    LEVEL_BONUS_DIVISOR_STEP,
    FLAT_LEVEL_DIVISOR,
    BASE_POWER_MAX_MULT_FACTOR,
    BASE_POWER_MIN_MULT_RATIO,
    BASE_POWER_MAX_OFFSET_FACTOR,
    BASE_POWER_MIN_OFFSET_RATIO,
    NEUTRAL_RESISTANCE,
)


# =============================================================================
# DATACLASSES
# =============================================================================

@dataclass(frozen=True)
class ScalingConstants:
    """Linear response of a spell to its governing stat."""
    min_mult: float
    min_offset: int
    max_mult: float
    max_offset: int


@dataclass(frozen=True)
class LevelBonusSegment:
    """One step of the diminishing-returns level bonus."""
    first_level: int
    last_level: int
    divisor: int
    levels_counted: int
    bonus: int


@dataclass(frozen=True)
class ComputationResult:
    """Complete min/max/avg result with breakdown."""
    level_base: int
    min_stat_component: int
    max_stat_component: int
    min: int
    max: int
    avg: int
    scaling: ScalingConstants
    scaling_stat: int
    stat_label: str = ScalingStat.MAGIC.label

    @property
    def spread(self) -> int:
        """Distance between the max and min hit."""
        return self.max - self.min

    def breakdown(self) -> str:
        """Return formatted breakdown of the calculation."""
        return f"""
Damage/Healing Breakdown
========================
Level Bonus:        +{self.level_base}
Min ({self.stat_label}):          {self.scaling_stat} x {self.scaling.min_mult:.3f} + {self.scaling.min_offset} = {self.min_stat_component}
Max ({self.stat_label}):          {self.scaling_stat} x {self.scaling.max_mult:.3f} + {self.scaling.max_offset} = {self.max_stat_component}
------------------------
= Min:              {self.min}
= Max:              {self.max}
= Avg:              {self.avg}
"""


# =============================================================================
# LEVEL BONUS
# =============================================================================

def level_bonus_segments(level: int) -> List[LevelBonusSegment]:
    """
    Split a level into its diminishing-returns segments.

    Segment N covers (500 + 100*N) levels and grants +1 per (5 + N) levels:
        1-500:     +1 per 5 levels
        501-1100:  +1 per 6 levels
        1101-1800: +1 per 7 levels
        ...

    Only segments that consume at least one level are returned. Because the
    segment range keeps growing the loop runs O(sqrt(level)) times.

    Args:
        level: Character level

    Returns:
        List of LevelBonusSegment, lowest levels first
    """
    segments = []
    remaining = level
    first_level = 1
    current_range = LEVEL_BONUS_FIRST_RANGE
    current_divisor = LEVEL_BONUS_FIRST_DIVISOR

    while remaining > 0:
        levels_in_segment = min(remaining, current_range)
        segments.append(LevelBonusSegment(
            first_level=first_level,
            last_level=first_level + current_range - 1,
            divisor=current_divisor,
            levels_counted=levels_in_segment,
            bonus=levels_in_segment // current_divisor,
        ))

        remaining -= levels_in_segment
        first_level += current_range
        current_divisor += LEVEL_BONUS_DIVISOR_STEP
        current_range += LEVEL_BONUS_RANGE_STEP

    return segments


def calculate_level_bonus(level: int) -> int:
    """
    Calculate the level damage/healing bonus with diminishing returns.

    Formula:
        bonus = sum(floor(levels_in_segment / divisor)) over all segments

    Example: level 600 -> floor(500/5) + floor(100/6) = 100 + 16 = 116

    Args:
        level: Character level (<= 0 gives 0)

    Returns:
        Flat bonus added to both min and max
    """
    return sum(segment.bonus for segment in level_bonus_segments(level))


def calculate_flat_level_bonus(level: int) -> int:
    """Preset calculator level bonus: floor(level / 5), no diminishing returns."""
    return math.floor(level / FLAT_LEVEL_DIVISOR)


# =============================================================================
# STAT SCALING
# =============================================================================

def derive_base_power_scaling(base_power: int) -> ScalingConstants:
    """
    Derive multipliers and offsets from a spell's Base Power.

    Formula (order matters, floor only on the offsets):
        max_mult   = sqrt(BP) * 0.59
        min_mult   = max_mult * 0.55
        max_offset = floor(BP * 0.25)
        min_offset = floor(max_offset * 0.6)

    Example: BP 140 -> max_mult 6.981, min_mult 3.840, offsets 35 / 21

    Args:
        base_power: Base Power from the Spell Archive (>= 1)

    Returns:
        ScalingConstants for the spell
    """
    sqrt_bp = math.sqrt(base_power)
    max_mult = sqrt_bp * BASE_POWER_MAX_MULT_FACTOR
    min_mult = max_mult * BASE_POWER_MIN_MULT_RATIO
    max_offset = math.floor(base_power * BASE_POWER_MAX_OFFSET_FACTOR)
    min_offset = math.floor(max_offset * BASE_POWER_MIN_OFFSET_RATIO)

    return ScalingConstants(
        min_mult=min_mult,
        min_offset=min_offset,
        max_mult=max_mult,
        max_offset=max_offset,
    )


def calculate_stat_components(stat: int, scaling: ScalingConstants) -> Tuple[int, int]:
    """
    Apply scaling constants to the governing stat.

    Formula:
        min = floor(stat * min_mult + min_offset)
        max = floor(stat * max_mult + max_offset)

    Returns:
        (min_stat_component, max_stat_component)
    """
    min_component = math.floor(stat * scaling.min_mult + scaling.min_offset)
    max_component = math.floor(stat * scaling.max_mult + scaling.max_offset)
    return min_component, max_component


# =============================================================================
# RESULT ASSEMBLY
# =============================================================================

def apply_percent_modifier(value: int, percent_mult: float) -> int:
    """floor(value * percent_mult) - used for both equipment and resistance."""
    return math.floor(value * percent_mult)


def assemble_result(
    level_base: int,
    min_stat_component: int,
    max_stat_component: int,
    scaling: ScalingConstants,
    scaling_stat: int,
    stat_label: str = ScalingStat.MAGIC.label,
    equip_bonus_percent: int = 0,
    target_resistance_percent: int = NEUTRAL_RESISTANCE,
) -> ComputationResult:
    """
    Combine level bonus and stat components, then apply modifiers.

    Order:
        1. total = level_base + stat_component
        2. equipment bonus on the total: floor(total * (1 + equip/100))
        3. resistance on the equipped total: floor(total * (res/100))
        4. avg = floor((min + max) / 2)

    Resistance is applied whenever it differs from 100; callers pass the
    neutral value when resistance does not apply (healing, presets).
    Nothing is clamped: a large negative equipment bonus gives negative
    values.
    """
    low = level_base + min_stat_component
    high = level_base + max_stat_component

    if equip_bonus_percent != 0:
        equip_mult = 1 + equip_bonus_percent / 100
        low = apply_percent_modifier(low, equip_mult)
        high = apply_percent_modifier(high, equip_mult)

    if target_resistance_percent != NEUTRAL_RESISTANCE:
        resistance_mult = target_resistance_percent / 100
        low = apply_percent_modifier(low, resistance_mult)
        high = apply_percent_modifier(high, resistance_mult)

    return ComputationResult(
        level_base=level_base,
        min_stat_component=min_stat_component,
        max_stat_component=max_stat_component,
        min=low,
        max=high,
        avg=(low + high) // 2,
        scaling=scaling,
        scaling_stat=scaling_stat,
        stat_label=stat_label,
    )


# =============================================================================
# MASTER CALCULATIONS
# =============================================================================

def compute_base_power_result(
    level: int,
    magic_level: int,
    base_power: int,
    calc_mode: Union[CalcMode, str] = CalcMode.MAGIC,
    equip_bonus_percent: int = 0,
    target_resistance_percent: int = NEUTRAL_RESISTANCE,
) -> ComputationResult:
    """
    Calculate a spell's range from its Base Power.

    Args:
        level: Character level
        magic_level: Magic Level
        base_power: Base Power from the Spell Archive
        calc_mode: CalcMode.MAGIC (attack) or CalcMode.HEALING, or its id
        equip_bonus_percent: Equipment bonus % (signed, e.g. 10 for +10%)
        target_resistance_percent: Target resistance % (100 = neutral),
            ignored in healing mode

    Returns:
        ComputationResult with min/max/avg and breakdown
    """
    mode = CalcMode.from_value(calc_mode)

    level_base = calculate_level_bonus(level)
    scaling = derive_base_power_scaling(base_power)
    min_component, max_component = calculate_stat_components(magic_level, scaling)

    # Creature resistance/weakness only affects attack spells
    resistance = target_resistance_percent if mode is CalcMode.MAGIC else NEUTRAL_RESISTANCE

    return assemble_result(
        level_base,
        min_component,
        max_component,
        scaling=scaling,
        scaling_stat=magic_level,
        stat_label=ScalingStat.MAGIC.label,
        equip_bonus_percent=equip_bonus_percent,
        target_resistance_percent=resistance,
    )
