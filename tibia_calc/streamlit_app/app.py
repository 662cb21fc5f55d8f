"""
Tibia Damage Calculator - Streamlit Web App
Main entry point. Run with: streamlit run tibia_calc/streamlit_app/app.py
"""
import logging
import os
import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent))

from tibia_core import (
    DEFAULT_LEVEL,
    DEFAULT_MAGIC_LEVEL,
    DEFAULT_BASE_POWER,
    DEFAULT_CATALOG,
    calculate_level_bonus,
    compute_base_power_result,
)

# =============================================================================
# CONFIG
# =============================================================================
# Set TIBIA_CALC_LOG_LEVEL=DEBUG to see preset fallbacks and input defaulting
LOG_LEVEL = os.environ.get("TIBIA_CALC_LOG_LEVEL", "WARNING").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.WARNING),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page config
st.set_page_config(
    page_title="TibiaCalc",
    page_icon="🔥",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for dark theme
st.markdown("""
<style>
    .stApp {
        background-color: #0f1115;
    }
    .main-title {
        color: #f59e0b;
        font-size: 2.5em;
        font-weight: bold;
        text-align: center;
        margin-bottom: 10px;
    }
    .sub-title {
        color: #64748b;
        text-align: center;
        text-transform: uppercase;
        letter-spacing: 0.2em;
        margin-bottom: 30px;
    }
</style>
""", unsafe_allow_html=True)


def main():
    """Landing page with a quick sample calculation."""
    st.markdown('<div class="main-title">🧮 TibiaCalc</div>', unsafe_allow_html=True)
    st.markdown('<div class="sub-title">Spell & Rune Damage / Healing Ranges</div>', unsafe_allow_html=True)

    sample = compute_base_power_result(DEFAULT_LEVEL, DEFAULT_MAGIC_LEVEL, DEFAULT_BASE_POWER)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Sample Level", DEFAULT_LEVEL)
    with col2:
        st.metric("Level Bonus", f"+{calculate_level_bonus(DEFAULT_LEVEL)}")
    with col3:
        st.metric(f"Base Power {DEFAULT_BASE_POWER} @ ML {DEFAULT_MAGIC_LEVEL}", f"{sample.min}-{sample.max}")
    with col4:
        st.metric("Preset Spells", len(DEFAULT_CATALOG))

    st.divider()

    st.markdown("### Welcome!")
    st.markdown("""
    Use the **sidebar navigation** to pick a calculator:

    - **Base Power Calculator** - Enter a spell's Base Power from the Cyclopedia
      (Spell Archive → Select spell → Combat Stats → Base Power). Uses the
      high-level diminishing returns level bonus.
    - **Spell Presets** - Pick a rune or spell from the built-in list. Uses the
      classic flat level / 5 bonus and scales knight weapon spells with skill.

    Results update on every change. Nothing is saved.
    """)


if __name__ == "__main__":
    main()
