"""
ui/components/dashboard_panel.py
--------------------------------
Overview tiles and trend table for a set of stored analyses.
"""

from __future__ import annotations
import pandas as pd
import streamlit as st

from kpi_engine.dashboard import build_trend_report, compute_dashboard_kpis

_TREND_LABELS = {
    "strong_upward":     "⏫ Strong upward",
    "upward":            "🔼 Upward",
    "stable":            "⏺️ Stable",
    "downward":          "🔽 Downward",
    "strong_downward":   "⏬ Strong downward",
    "insufficient_data": "… Not enough data",
}


def render_dashboard(hist_df: pd.DataFrame, window: int = 3, currency: str = "$") -> None:
    """Headline KPIs, trend label and per-scenario profit table."""
    overview = compute_dashboard_kpis(hist_df)
    report   = build_trend_report(hist_df, window=window)

    o1, o2, o3 = st.columns(3)
    o1.metric("Scenarios",   overview["total_scenarios"])
    o2.metric("Win Rate",    f"{overview['discount_win_rate']:.1f}%")
    o3.metric("Best Discount", f"{overview['best_discount']:.1f}%")

    o4, o5 = st.columns(2)
    o4.metric("Avg. Discount Profit", f"{currency}{overview['average_profit']:,.0f}")
    o5.metric("Avg. |Elasticity|",    f"{overview['average_elasticity']:.2f}")

    analysis = report["analysis"]
    st.markdown(f"**Profit trend:** {_TREND_LABELS[analysis['overall_trend']]}")
    for tip in analysis["recommendations"]:
        st.caption(f"• {tip}")

    if not report["trends"]:
        return

    rows = []
    for t, ma in zip(report["trends"], report["moving_averages"]):
        rows.append({
            "#":          t["period"],
            "Discount":   f"{t['discount_percentage']:.1f}%",
            "Profit":     f"{currency}{t['profit']:,.0f}",
            "Δ Profit":   f"{'−' if t['profit_change'] < 0 else '+'}{currency}{abs(t['profit_change']):,.0f}",
            f"MA({window})": "—" if ma is None else f"{currency}{ma:,.0f}",
        })

    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
