"""
Spell Presets Page
Damage/healing range for built-in runes and spells (flat level / 5 bonus).
"""
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from tibia_core import (
    DEFAULT_CATALOG,
    DEFAULT_LEVEL,
    DEFAULT_MAGIC_LEVEL,
    DEFAULT_MELEE_SKILL,
    DEFAULT_EQUIP_BONUS,
    ScalingStat,
    compute_preset_result,
)
from utils.inputs import (
    format_int,
    format_multiplier,
    parse_equip_bonus,
    parse_level,
    parse_stat,
)
from utils.range_chart import create_range_chart

st.set_page_config(page_title="Spell Presets", page_icon="📜", layout="wide")

catalog = DEFAULT_CATALOG

st.title("📜 Spell Presets")
st.caption("Classic formulas: level / 5 + stat × multiplier + offset")

inputs_col, results_col = st.columns([5, 7])

with inputs_col:
    st.subheader("📖 Spell")
    category = st.selectbox(
        "Category",
        catalog.categories(),
        format_func=lambda c: c.value,
    )
    spell_name = st.selectbox(
        "Spell / Rune",
        [spell.name for spell in catalog.by_category(category)],
    )

    st.subheader("👤 Character Stats")
    level = parse_level(st.number_input("Level", value=DEFAULT_LEVEL, step=1))
    col1, col2 = st.columns(2)
    with col1:
        magic_level = parse_stat(st.number_input("Magic Level", value=DEFAULT_MAGIC_LEVEL, step=1))
    with col2:
        melee_skill = parse_stat(st.number_input("Melee Skill", value=DEFAULT_MELEE_SKILL, step=1))
    equip_bonus = parse_equip_bonus(st.number_input("Equip Bonus (%)", value=DEFAULT_EQUIP_BONUS, step=1))

spell = catalog.get(spell_name)
result = compute_preset_result(
    level,
    magic_level,
    melee_skill,
    spell.name,
    equip_bonus_percent=equip_bonus,
    catalog=catalog,
)

with results_col:
    noun = "Heal" if spell.is_healing else "Hit"
    st.subheader(spell.name)
    st.caption(f"{spell.category.value} • Level {level} • {result.stat_label} {result.scaling_stat}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(f"Min {noun}", format_int(result.min))
    with col2:
        st.metric(f"Max {noun}", format_int(result.max))
    with col3:
        st.metric("Avg", format_int(result.avg))

    if result.min < 0:
        st.warning("Equipment modifier pushes this range below zero.")

    st.plotly_chart(create_range_chart(result, healing=spell.is_healing), use_container_width=True)

    st.markdown(
        f"**Level bonus:** +{result.level_base} &nbsp;•&nbsp; "
        f"**{result.stat_label} part:** {result.min_stat_component}-{result.max_stat_component}"
    )

    with st.expander("All presets"):
        st.dataframe(pd.DataFrame([
            {
                "Name": s.name,
                "Category": s.category.value,
                "Type": s.type.value,
                "Scales With": "Magic Level" if s.scaling is ScalingStat.MAGIC else "Skill",
                "Min": f"{format_multiplier(s.constants.min_mult)} × stat + {s.constants.min_offset}",
                "Max": f"{format_multiplier(s.constants.max_mult)} × stat + {s.constants.max_offset}",
            }
            for s in catalog
        ]), hide_index=True, use_container_width=True)

    with st.expander("Calculation breakdown"):
        st.code(result.breakdown())
