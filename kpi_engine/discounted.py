"""
kpi_engine/discounted.py
------------------------
Step 2 of the KPI pipeline.

Same metric block as Step 1, for the discounted scenario. The discounted
volume is supplied by the user; nothing here estimates demand.

Formula:
    discounted_price = selling_price × (1 - discount_pct / 100)
    total_cost       = (cost_price + variable_cost) × discounted_units + fixed_cost
    revenue          = discounted_price × discounted_units
    profit           = revenue - total_cost
    profit_margin    = profit / revenue × 100   (0 when revenue is 0, e.g. 100% off)

Revenue is computed from the unrounded discounted price; only the reported
discounted_price / asp fields are rounded.

No Streamlit imports. Pure Python.
"""

from __future__ import annotations

from kpi_engine.baseline import margin_pct
from kpi_engine.inputs import coerce_number
from kpi_engine.models import DiscountedMetrics
from kpi_engine.rounding import round2


def discounted_price_for(selling_price: float, discount_pct: float) -> float:
    return selling_price * (1.0 - discount_pct / 100.0)


def compute_discounted_metrics(
    cost_price:       float,
    selling_price:    float,
    discount_pct:     float,
    discounted_units: float,
    fixed_cost:       float = 0.0,
    variable_cost:    float = 0.0,
) -> DiscountedMetrics:
    """Compute the metric block for the discounted scenario."""
    cost_price       = coerce_number("cost_price", cost_price)
    selling_price    = coerce_number("selling_price", selling_price)
    discount_pct     = coerce_number("discount_percentage", discount_pct)
    discounted_units = coerce_number("units_sold_discount", discounted_units)
    fixed_cost       = coerce_number("fixed_cost", fixed_cost)
    variable_cost    = coerce_number("variable_cost", variable_cost)

    discounted_price = discounted_price_for(selling_price, discount_pct)
    total_cost = (cost_price + variable_cost) * discounted_units + fixed_cost
    revenue    = discounted_price * discounted_units
    profit     = revenue - total_cost

    return DiscountedMetrics(
        discounted_price = round2(discounted_price, "discounted_price"),
        revenue          = round2(revenue, "revenue"),
        profit           = round2(profit, "profit"),
        profit_margin    = round2(margin_pct(profit, revenue), "profit_margin"),
        asp              = round2(discounted_price, "asp"),
        total_cost       = round2(total_cost, "total_cost"),
    )
