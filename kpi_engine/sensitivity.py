"""
kpi_engine/sensitivity.py
-------------------------
Step 3 of the KPI pipeline.

Derives how strongly volume, revenue and profit respond to the price change
between the baseline and the discounted scenario.

Formula:
    price_change %   = (new_price - original_price) / original_price × 100
    qty_change %     = (new_qty - original_qty) / original_qty × 100
    revenue_change % = (new_revenue - original_revenue) / original_revenue × 100
    profit_change %  = (new_profit - original_profit) / |original_profit| × 100

    price_elasticity         = qty_change % / price_change %
    revenue_elasticity       = revenue_change % / |price_change %|
    profit_sensitivity_index = profit_change % / |price_change %|

Each ratio is 0 when price_change % is 0.

Sign conventions:
    price_elasticity keeps the signed denominator, so a price cut that lifts
    volume yields a negative value (standard PED). It is stored signed.
    The revenue and profit indices divide by the magnitude of the price change,
    so their sign only says whether revenue / profit went up or down.

Classification (by |price_elasticity|):
    == 0     → Perfectly Inelastic
    <  1     → Inelastic
    == 1     → Unit Elastic          (exact equality, not a band)
    (1, 5)   → Elastic
    >= 5     → Highly Elastic

No Streamlit imports. Pure Python.
"""

from __future__ import annotations

from kpi_engine.inputs import coerce_number
from kpi_engine.models import SensitivityMetrics
from kpi_engine.rounding import round2


# ─────────────────────────────────────────────────────────────────────────────
# Classification labels
# ─────────────────────────────────────────────────────────────────────────────

PERFECTLY_INELASTIC = "Perfectly Inelastic"
INELASTIC           = "Inelastic"
UNIT_ELASTIC        = "Unit Elastic"
ELASTIC             = "Elastic"
HIGHLY_ELASTIC      = "Highly Elastic"

ELASTICITY_CLASSES: tuple[str, ...] = (
    PERFECTLY_INELASTIC, INELASTIC, UNIT_ELASTIC, ELASTIC, HIGHLY_ELASTIC,
)

HIGHLY_ELASTIC_THRESHOLD: float = 5.0


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def pct_change(old: float, new: float) -> float:
    """Percentage change from old to new; 0 when old is 0."""
    if old == 0:
        return 0.0
    return (new - old) / old * 100


def classify_elasticity(elasticity: float) -> str:
    """Map a (signed) price elasticity to its class label."""
    magnitude = abs(elasticity)
    if magnitude == 0:
        return PERFECTLY_INELASTIC
    if magnitude < 1:
        return INELASTIC
    if magnitude == 1:
        return UNIT_ELASTIC
    if magnitude < HIGHLY_ELASTIC_THRESHOLD:
        return ELASTIC
    return HIGHLY_ELASTIC


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def compute_sensitivity_metrics(
    original_price:   float,
    original_qty:     float,
    new_price:        float,
    new_qty:          float,
    original_revenue: float,
    new_revenue:      float,
    original_profit:  float,
    new_profit:       float,
) -> SensitivityMetrics:
    """
    Compute price / revenue / profit sensitivity between two scenarios.

    The orchestrator passes the already-rounded values from Steps 1 and 2,
    so the chained rounding matches stored results exactly.
    """
    original_price   = coerce_number("original_price", original_price)
    original_qty     = coerce_number("original_qty", original_qty)
    new_price        = coerce_number("new_price", new_price)
    new_qty          = coerce_number("new_qty", new_qty)
    original_revenue = coerce_number("original_revenue", original_revenue)
    new_revenue      = coerce_number("new_revenue", new_revenue)
    original_profit  = coerce_number("original_profit", original_profit)
    new_profit       = coerce_number("new_profit", new_profit)

    price_change   = pct_change(original_price, new_price)
    qty_change     = pct_change(original_qty, new_qty)
    revenue_change = pct_change(original_revenue, new_revenue)
    profit_change  = (
        (new_profit - original_profit) / abs(original_profit) * 100
        if original_profit != 0 else 0.0
    )

    price_elasticity   = 0.0
    revenue_elasticity = 0.0
    profit_sensitivity = 0.0
    if price_change != 0:
        price_elasticity   = qty_change / price_change
        revenue_elasticity = revenue_change / abs(price_change)
        profit_sensitivity = profit_change / abs(price_change)

    return SensitivityMetrics(
        price_elasticity          = round2(price_elasticity, "price_elasticity"),
        revenue_elasticity        = round2(revenue_elasticity, "revenue_elasticity"),
        profit_sensitivity_index  = round2(profit_sensitivity, "profit_sensitivity_index"),
        # classified on the unrounded ratio: 0.999 stays Inelastic
        elasticity_classification = classify_elasticity(price_elasticity),
    )
