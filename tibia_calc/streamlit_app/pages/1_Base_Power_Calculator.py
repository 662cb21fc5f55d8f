"""
Base Power Calculator Page
Damage/healing range from a spell's in-game Base Power value.
"""
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from tibia_core import (
    CalcMode,
    CALC_MODES,
    DEFAULT_LEVEL,
    DEFAULT_MAGIC_LEVEL,
    DEFAULT_BASE_POWER,
    DEFAULT_EQUIP_BONUS,
    DEFAULT_TARGET_RESISTANCE,
    NEUTRAL_RESISTANCE,
    compute_base_power_result,
    get_calc_mode,
    level_bonus_segments,
)
from utils.inputs import (
    format_int,
    format_multiplier,
    parse_base_power,
    parse_equip_bonus,
    parse_level,
    parse_stat,
    parse_target_resistance,
)
from utils.range_chart import create_range_chart

st.set_page_config(page_title="Base Power Calculator", page_icon="🔥", layout="wide")

st.title("🔥 Base Power Calculator")
st.caption("Uses the high-level scaling bonus formula")

inputs_col, results_col = st.columns([5, 7])

with inputs_col:
    # Mode selection
    st.subheader("⚔️ Calculation Type")
    calc_mode = st.radio(
        "Calculation Type",
        [m.id for m in CALC_MODES],
        format_func=lambda m: get_calc_mode(m).label,
        horizontal=True,
        label_visibility="collapsed",
    )
    mode_info = get_calc_mode(calc_mode)
    st.caption(mode_info.description)
    healing = mode_info.id is CalcMode.HEALING

    # Character stats
    st.subheader("👤 Character Stats")
    level = parse_level(st.number_input("Level", value=DEFAULT_LEVEL, step=1))
    col1, col2 = st.columns(2)
    with col1:
        magic_level = parse_stat(st.number_input("Magic Level", value=DEFAULT_MAGIC_LEVEL, step=1))
    with col2:
        equip_bonus = parse_equip_bonus(st.number_input("Equip Bonus (%)", value=DEFAULT_EQUIP_BONUS, step=1))

    # Spell stats
    st.subheader("⚡ Spell Stats")
    base_power = parse_base_power(
        st.number_input("Base Power (from Cyclopedia)", value=DEFAULT_BASE_POWER, step=1)
    )
    st.caption("Open Cyclopedia → Spell Archive → Select spell → Combat Stats → Base Power")

    # Target modifiers (attack spells only)
    target_resistance = DEFAULT_TARGET_RESISTANCE
    if not healing:
        st.subheader("🛡️ Target Modifiers")
        target_resistance = parse_target_resistance(
            st.number_input("Target Resistance/Weakness (%)", value=DEFAULT_TARGET_RESISTANCE, step=1)
        )
        st.caption(f"{NEUTRAL_RESISTANCE}% is neutral. Above = Weakness, Below = Resistance")

result = compute_base_power_result(
    level,
    magic_level,
    base_power,
    calc_mode=mode_info.id,
    equip_bonus_percent=equip_bonus,
    target_resistance_percent=target_resistance,
)

with results_col:
    noun = "Heal" if healing else "Hit"
    st.subheader(f"Base Power {base_power}")
    st.caption(f"Level {level} • {result.stat_label} {result.scaling_stat}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(f"Min {noun}", format_int(result.min))
    with col2:
        st.metric(f"Max {noun}", format_int(result.max))
    with col3:
        st.metric("Avg", format_int(result.avg))

    if result.min < 0:
        st.warning("Equipment/resistance modifiers push this range below zero.")

    st.plotly_chart(create_range_chart(result, healing=healing), use_container_width=True)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Min Mult", format_multiplier(result.scaling.min_mult))
    with col2:
        st.metric("Max Mult", format_multiplier(result.scaling.max_mult))
    with col3:
        st.metric("Min Offset", result.scaling.min_offset)
    with col4:
        st.metric("Max Offset", result.scaling.max_offset)

    st.markdown(f"**Level bonus:** +{result.level_base}")
    with st.expander("Level bonus breakdown"):
        segments = level_bonus_segments(level)
        st.dataframe(pd.DataFrame([
            {
                "Levels": f"{s.first_level}-{s.last_level}",
                "Per": f"+1 / {s.divisor} levels",
                "Counted": s.levels_counted,
                "Bonus": s.bonus,
            }
            for s in segments
        ]), hide_index=True, use_container_width=True)

    with st.expander("Calculation breakdown"):
        st.code(result.breakdown())
