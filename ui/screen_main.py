"""
ui/screen_main.py
-----------------
Single-page side-by-side layout.
Left:  scenario inputs + optional scenario history upload.
Right: KPI results.

This file only owns the page layout and the calculate_all_kpis call.
All rendering logic lives in ui/components/.
No formula is computed here; the preview uses the same engine as every
other consumer.
"""

from __future__ import annotations
import os

import pandas as pd
import streamlit as st

from config.settings              import get_currency_symbol, get_trend_window
from kpi_engine.errors            import KPIError
from kpi_engine.orchestrator      import calculate_all_kpis
from ui.components.dashboard_panel import render_dashboard
from ui.components.result_panel   import render_result


_DEFAULT_INPUTS: dict = {
    "cost_price":          50.0,
    "selling_price":       100.0,
    "units_sold":          1000,
    "discount_percentage": 20.0,
    "units_sold_discount": 1500,
    "fixed_cost":          5000.0,
    "variable_cost":       5.0,
}

_HISTORY_COLUMNS = (
    "`discount_percentage`, `discount_profit`, `profit_difference`, "
    "`price_elasticity`, `is_profitable`, optional `created_at`"
)


def _render_inputs_form() -> dict | None:
    """Scenario form. Returns the submitted inputs, or None if not submitted."""
    current = st.session_state.get("inputs") or _DEFAULT_INPUTS

    with st.form("scenario_form"):
        st.markdown("### 🧾 Baseline")
        b1, b2, b3 = st.columns(3)
        cost_price    = b1.number_input("Cost price",    min_value=0.0, value=float(current["cost_price"]), step=1.0)
        selling_price = b2.number_input("Selling price", min_value=0.0, value=float(current["selling_price"]), step=1.0)
        units_sold    = b3.number_input("Units sold",    min_value=0,   value=int(current["units_sold"]), step=10)

        st.markdown("### 🏷️ Discount")
        d1, d2 = st.columns(2)
        discount_pct  = d1.slider("Discount %", min_value=0.0, max_value=100.0,
                                  value=float(current["discount_percentage"]), step=0.5)
        units_discount = d2.number_input("Units sold with discount", min_value=0,
                                         value=int(current["units_sold_discount"]), step=10)

        st.markdown("### 🏭 Costs")
        c1, c2 = st.columns(2)
        fixed_cost    = c1.number_input("Fixed cost",            min_value=0.0, value=float(current["fixed_cost"]), step=100.0)
        variable_cost = c2.number_input("Variable cost per unit", min_value=0.0, value=float(current["variable_cost"]), step=0.5)

        submitted = st.form_submit_button("🚀 Calculate KPIs", type="primary", use_container_width=True)

    if not submitted:
        return None
    return {
        "cost_price":          cost_price,
        "selling_price":       selling_price,
        "units_sold":          units_sold,
        "discount_percentage": discount_pct,
        "units_sold_discount": units_discount,
        "fixed_cost":          fixed_cost,
        "variable_cost":       variable_cost,
    }


def _load_history() -> pd.DataFrame | None:
    hist_df: pd.DataFrame | None = st.session_state.get("history_df")
    if hist_df is not None:
        return hist_df

    default = os.path.join(os.path.dirname(__file__), "..", "data", "sample_scenarios.csv")
    if os.path.exists(default):
        hist_df = pd.read_csv(default)
        st.session_state["history_df"] = hist_df
    return hist_df


def render_home() -> None:
    currency = get_currency_symbol()

    left, right = st.columns([1, 1], gap="large")

    # ── LEFT PANEL ────────────────────────────────────────────────────────────
    with left:
        submitted = _render_inputs_form()
        if submitted is not None:
            st.session_state["inputs"] = submitted
            try:
                st.session_state["result"] = calculate_all_kpis(submitted, currency=currency)
            except KPIError as exc:
                st.session_state["result"] = None
                st.error(f"**Calculation failed:** {exc}")

        # ── Scenario history ──────────────────────────────────────────────────
        st.divider()
        with st.expander("🗂️ Scenario history"):
            st.caption(f"CSV columns: {_HISTORY_COLUMNS}")
            uploaded = st.file_uploader(
                "Upload CSV", type=["csv"], key="history_uploader", label_visibility="collapsed"
            )
            if uploaded is not None:
                try:
                    st.session_state["history_df"] = pd.read_csv(uploaded)
                except (ValueError, pd.errors.ParserError) as exc:
                    st.error(f"Failed to parse: {exc}")

            hist_df = _load_history()
            if hist_df is not None:
                render_dashboard(hist_df, window=get_trend_window(), currency=currency)
            else:
                st.caption("No scenario history loaded.")

    # ── RIGHT PANEL ───────────────────────────────────────────────────────────
    with right:
        st.markdown("### 📊 KPI Results")
        result = st.session_state.get("result")

        if result is None:
            st.markdown(
                "<div style='height:300px; display:flex; align-items:center;"
                " justify-content:center; color:#888; border: 1px dashed #ccc;"
                " border-radius:8px; text-align:center; padding:2rem'>"
                "<div><div style='font-size:2.5rem'>📈</div>"
                "<div style='margin-top:0.75rem; font-size:0.95rem'>"
                "Results will appear here<br>after you calculate a scenario.</div></div>"
                "</div>",
                unsafe_allow_html=True,
            )
        else:
            render_result(result.to_dict(), currency=currency)
            if st.button("🔄 Clear", key="btn_clear"):
                st.session_state.pop("result", None)
                st.session_state.pop("inputs", None)
                st.rerun()
