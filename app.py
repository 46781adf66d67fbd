"""
app.py
------
Discount KPI Lab — single-page side-by-side layout.
Left: scenario inputs. Right: live KPI results.

Run with:
    streamlit run app.py
"""

import logging

import streamlit as st

from config.settings import get_log_level

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="Discount KPI Lab",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="collapsed",
    menu_items={
        "Get Help": None,
        "Report a bug": None,
        "About": "**Discount KPI Lab** — Pricing sensitivity for a single what-if discount",
    },
)

# ── Session state defaults ──────────────────────────────────────────────────
DEFAULTS: dict = {
    "result":      None,
    "inputs":      None,
    "history_df":  None,
}
for key, val in DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = val

# ── Header ───────────────────────────────────────────────────────────────────
st.markdown("## 📊 Discount KPI Lab")
st.caption("Pricing sensitivity · Does this discount pay for itself?")
st.divider()

# ── Single page ──────────────────────────────────────────────────────────────
from ui.screen_main import render_home
render_home()
