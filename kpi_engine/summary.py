"""
kpi_engine/summary.py
---------------------
Step 5 of the KPI pipeline.

Turns the sensitivity and performance blocks into four pieces of plain
language. The only branch is on is_profitable:

    profitable     → recommend implementing, report extra profit
    not profitable → recommend alternatives, report profit lost

Numbers interpolated:
    insight            : discount_lift (1 dp, half away from zero), profit_difference (2 dp, absolute)
    elasticity_insight : classification label, |price_elasticity| (2 dp)

No Streamlit imports. Pure Python.
"""

from __future__ import annotations

from kpi_engine.models   import PerformanceMetrics, SensitivityMetrics, Summary
from kpi_engine.rounding import round1


# ─────────────────────────────────────────────────────────────────────────────
# Copy
# ─────────────────────────────────────────────────────────────────────────────

SUMMARY_CONFIG: dict[bool, dict[str, str]] = {
    True: {
        "recommendation": "Discount is profitable. Consider implementing this pricing strategy.",
        "insight": (
            "The discount increased units sold by {lift:.1f}% and generated "
            "additional profit of {currency}{delta:,.2f}."
        ),
        "key_takeaway": "Discount strategy is effective for this product.",
    },
    False: {
        "recommendation": "Discount is not profitable. Consider alternative pricing strategies.",
        "insight": (
            "The discount decreased profit by {currency}{delta:,.2f} despite "
            "increasing units sold by {lift:.1f}%."
        ),
        "key_takeaway": "Product is price sensitive; discount strategy needs adjustment.",
    },
}

_ELASTICITY_INSIGHT = "Price elasticity is {label} ({value:.2f})."


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def generate_summary(
    sensitivity: SensitivityMetrics,
    performance: PerformanceMetrics,
    currency:    str = "$",
) -> Summary:
    """Build the human-readable summary for one analysis."""
    copy = SUMMARY_CONFIG[performance.is_profitable]

    insight = copy["insight"].format(
        lift     = round1(performance.discount_lift, "discount_lift"),
        delta    = abs(performance.profit_difference),
        currency = currency,
    )

    return Summary(
        recommendation     = copy["recommendation"],
        insight            = insight,
        elasticity_insight = _ELASTICITY_INSIGHT.format(
            label = sensitivity.elasticity_classification,
            value = abs(sensitivity.price_elasticity),
        ),
        key_takeaway       = copy["key_takeaway"],
    )
