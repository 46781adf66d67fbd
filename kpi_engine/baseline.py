"""
kpi_engine/baseline.py
----------------------
Step 1 of the KPI pipeline.

Revenue, cost and profit for the no-discount case.

Formula:
    total_cost    = (cost_price + variable_cost) × units + fixed_cost
    revenue       = selling_price × units
    profit        = revenue - total_cost
    profit_margin = profit / revenue × 100      (0 when revenue is 0)

Every output is rounded to 2 decimals here, not at serialisation.

No Streamlit imports. Pure Python.
"""

from __future__ import annotations

from kpi_engine.inputs import coerce_number
from kpi_engine.models import BaselineMetrics
from kpi_engine.rounding import round2


def margin_pct(profit: float, revenue: float) -> float:
    """Profit as a percentage of revenue, guarded against zero revenue."""
    return (profit / revenue) * 100 if revenue > 0 else 0.0


def compute_baseline_metrics(
    cost_price:    float,
    selling_price: float,
    units_sold:    float,
    fixed_cost:    float = 0.0,
    variable_cost: float = 0.0,
) -> BaselineMetrics:
    """
    Compute the baseline (full price) metric block.

    Args:
        cost_price    : Purchase / production cost per unit.
        selling_price : Regular selling price per unit.
        units_sold    : Units sold at the regular price.
        fixed_cost    : Period fixed cost.
        variable_cost : Extra per-unit cost on top of cost_price.

    Raises:
        InvalidInput: if any argument is not a finite number.
    """
    cost_price    = coerce_number("cost_price", cost_price)
    selling_price = coerce_number("selling_price", selling_price)
    units_sold    = coerce_number("units_sold", units_sold)
    fixed_cost    = coerce_number("fixed_cost", fixed_cost)
    variable_cost = coerce_number("variable_cost", variable_cost)

    total_cost = (cost_price + variable_cost) * units_sold + fixed_cost
    revenue    = selling_price * units_sold
    profit     = revenue - total_cost

    return BaselineMetrics(
        revenue       = round2(revenue, "revenue"),
        profit        = round2(profit, "profit"),
        profit_margin = round2(margin_pct(profit, revenue), "profit_margin"),
        asp           = round2(selling_price, "asp"),
        total_cost    = round2(total_cost, "total_cost"),
    )
