"""
ui/components/result_panel.py
------------------------------
Top-level result renderer. Assembles the KPI blocks into the right panel.

Layout
------
  Recommendation banner
  ├── Core metrics (2×2 grid)
  ├── Sensitivity tiles (elasticity, revenue elasticity, PSI)
  ├── Break-even vs. chosen discount
  ├── Summary brief
  └── Baseline vs. discount expander
"""

from __future__ import annotations
import streamlit as st


_CLASS_EMOJI = {
    "Perfectly Inelastic": "🧊",
    "Inelastic":           "🟢",
    "Unit Elastic":        "🟡",
    "Elastic":             "🟠",
    "Highly Elastic":      "🔴",
}


def _money(value: float, currency: str) -> str:
    return f"{'-' if value < 0 else ''}{currency}{abs(value):,.0f}"


def render_result(r: dict, currency: str = "$") -> None:
    """Render the full KPI result (AnalysisResult.to_dict()) for one scenario."""
    base, disc = r["baseline"], r["discount"]
    sens, perf = r["sensitivity"], r["performance"]
    summary    = r["summary"]

    # ── Recommendation ────────────────────────────────────────────────────────
    banner = st.success if perf["is_profitable"] else st.error
    banner(f"{'✅' if perf['is_profitable'] else '🚫'} &nbsp; **{summary['recommendation']}**")

    st.divider()

    # ── Core metrics (2×2) ────────────────────────────────────────────────────
    mc1, mc2 = st.columns(2)
    mc1.metric("Unit Lift", f"{perf['discount_lift']:+.2f}%", "vs. baseline volume", delta_color="off")
    mc2.metric("Discounted Price", f"{currency}{disc['discounted_price']:,.2f}",
               f"from {currency}{base['asp']:,.2f}", delta_color="off")

    mc3, mc4 = st.columns(2)
    mc3.metric("Discount Profit", _money(disc["profit"], currency),
               f"{disc['profit_margin']:.2f}% margin", delta_color="off")
    delta = perf["profit_difference"]
    mc4.metric(
        "Profit Difference",
        _money(delta, currency),
        "vs. baseline profit",
        delta_color="normal" if delta >= 0 else "inverse",
    )

    # ── Sensitivity ───────────────────────────────────────────────────────────
    st.divider()
    st.markdown("**Price Sensitivity**")
    s1, s2, s3 = st.columns(3)
    label = sens["elasticity_classification"]
    s1.metric("Price Elasticity", f"{sens['price_elasticity']:.2f}")
    s1.caption(f"{_CLASS_EMOJI.get(label, '')} **{label}**")
    s2.metric("Revenue Elasticity", f"{sens['revenue_elasticity']:.2f}")
    s3.metric("Profit Sensitivity", f"{sens['profit_sensitivity_index']:.2f}")

    # ── Break-even ────────────────────────────────────────────────────────────
    break_even = perf["break_even_discount"]
    st.caption(
        f"Break-even discount at baseline volume: **{break_even:.2f}%** "
        "(holds baseline units constant)"
    )

    # ── Summary brief ─────────────────────────────────────────────────────────
    st.divider()
    st.markdown("**Summary**")
    with st.container(border=True):
        st.write(summary["insight"])
        st.write(summary["elasticity_insight"])
        st.write(f"_{summary['key_takeaway']}_")

    # ── Detailed financials ───────────────────────────────────────────────────
    with st.expander("📊 Baseline vs. Discount"):
        fa, fb = st.columns(2)
        fa.markdown("**Baseline**")
        fa.metric("Revenue",    _money(base["revenue"], currency))
        fa.metric("Total Cost", _money(base["total_cost"], currency))
        fa.metric("Profit",     _money(base["profit"], currency))
        fb.markdown("**With Discount**")
        fb.metric("Revenue",    _money(disc["revenue"], currency))
        fb.metric("Total Cost", _money(disc["total_cost"], currency))
        fb.metric("Profit",     _money(disc["profit"], currency))
