"""
Input parsing and display helpers for the calculator pages.

The formula engine assumes clean integers; everything the user types goes
through here first. Non-numeric input is replaced by a default, never
rejected.
"""
import logging
import math
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Leading integer, like a browser's parseInt: "12abc" -> 12, "abc" -> None
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _to_int(raw: Any) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        return int(raw)
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


def parse_int(
    raw: Any,
    default: int,
    minimum: Optional[int] = None,
    zero_is_default: bool = False,
) -> int:
    """
    Convert user input to an int.

    Args:
        raw: Widget value or typed text
        default: Used when raw is not a number
        minimum: Lower clamp applied after defaulting
        zero_is_default: Treat 0 like non-numeric input

    Returns:
        Clean integer for the engine
    """
    value = _to_int(raw)
    if value is None or (zero_is_default and value == 0):
        if value is None:
            logger.warning("Non-numeric input %r, using %d", raw, default)
        value = default
    if minimum is not None:
        value = max(minimum, value)
    return value


def parse_level(raw: Any) -> int:
    return parse_int(raw, 0, minimum=1)


def parse_stat(raw: Any) -> int:
    """Magic level / melee skill."""
    return parse_int(raw, 0, minimum=0)


def parse_base_power(raw: Any) -> int:
    return parse_int(raw, 0, minimum=1)


def parse_equip_bonus(raw: Any) -> int:
    """Signed, no clamp."""
    return parse_int(raw, 0)


def parse_target_resistance(raw: Any) -> int:
    """0 and non-numeric both mean neutral (100%)."""
    return parse_int(raw, 100, zero_is_default=True)


def format_multiplier(value: float) -> str:
    """Fixed 3 decimals, e.g. 6.981."""
    return f"{value:.3f}"


def format_int(value: int) -> str:
    """Plain integer text, no locale grouping."""
    return str(int(value))
