"""
Calculator mode metadata shared by the Base Power page.
"""

from dataclasses import dataclass
from typing import List, Union

from .constants import CalcMode


@dataclass(frozen=True)
class CalcModeInfo:
    id: CalcMode
    label: str
    description: str


CALC_MODES: List[CalcModeInfo] = [
    CalcModeInfo(CalcMode.MAGIC, "Attack Spells", "Spells & Runes that scale with Magic Level"),
    CalcModeInfo(CalcMode.HEALING, "Healing Spells", "Healing spells that scale with Magic Level"),
]


def get_calc_mode(mode: Union[CalcMode, str]) -> CalcModeInfo:
    """Mode info for an id, first mode when nothing matches."""
    for info in CALC_MODES:
        if info.id is mode or info.id.value == mode:
            return info
    return CALC_MODES[0]
