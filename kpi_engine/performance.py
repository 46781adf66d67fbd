"""
kpi_engine/performance.py
-------------------------
Step 4 of the KPI pipeline.

Did the discount pay off, and how deep could it have gone?

Formula:
    discount_lift       = (discount_units - baseline_units) / baseline_units × 100
    incremental_profit  = discount_profit - baseline_profit
    profit_difference   = incremental_profit          (both kept for API compatibility)
    is_profitable       = discount_profit > baseline_profit   (ties are not profitable)

Break-even discount (constant-volume approximation):
    unit_cost        = cost_price + variable_cost
    contribution     = selling_price - unit_cost           → 0 if ≤ 0
    required_price   = unit_cost + baseline_profit / baseline_units
                                                            → 0 if ≥ selling_price
    break_even %     = (selling_price - required_price) / selling_price × 100
                       clamped to [0, 100]

The break-even figure holds baseline volume fixed. It does not account for the
volume lift the discount actually produced, and since baseline_profit already
has fixed costs netted out, with fixed_cost > 0 it reports fixed_cost /
(baseline_units × selling_price) rather than a true profit-neutral discount.
The UI compares the chosen discount against this threshold, so the figure is
reproduced as-is.

No Streamlit imports. Pure Python.
"""

from __future__ import annotations

import logging

from kpi_engine.inputs import coerce_number
from kpi_engine.models import PerformanceMetrics
from kpi_engine.rounding import round2

logger = logging.getLogger(__name__)


def compute_break_even_discount(
    baseline_units:  float,
    cost_price:      float,
    selling_price:   float,
    variable_cost:   float = 0.0,
    fixed_cost:      float = 0.0,
    baseline_profit: float | None = None,
) -> float:
    """
    Discount % at which profit stays flat with baseline volume unchanged.

    baseline_profit is derived from the other arguments when not supplied.
    Returns 0 when there is no contribution margin to discount from, or when
    no discount can sustain the current profit.
    """
    baseline_units = coerce_number("units_sold", baseline_units)
    cost_price     = coerce_number("cost_price", cost_price)
    selling_price  = coerce_number("selling_price", selling_price)
    variable_cost  = coerce_number("variable_cost", variable_cost)
    fixed_cost     = coerce_number("fixed_cost", fixed_cost)

    if baseline_profit is None:
        total_cost = (cost_price + variable_cost) * baseline_units + fixed_cost
        baseline_profit = selling_price * baseline_units - total_cost
    else:
        baseline_profit = coerce_number("baseline_profit", baseline_profit)

    unit_cost    = cost_price + variable_cost
    contribution = selling_price - unit_cost
    if contribution <= 0 or baseline_units <= 0:
        return 0.0

    required_price = unit_cost + (baseline_profit / baseline_units)
    if required_price >= selling_price:
        return 0.0

    break_even = (selling_price - required_price) / selling_price * 100
    result = max(0.0, min(100.0, round2(break_even, "break_even_discount")))

    logger.debug(
        "Break-even discount: selling_price=%s unit_cost=%s fixed_cost=%s "
        "baseline_units=%s baseline_profit=%s contribution=%s "
        "required_price=%s raw=%s result=%s",
        selling_price, unit_cost, fixed_cost, baseline_units, baseline_profit,
        contribution, required_price, break_even, result,
    )
    return result


def compute_discount_performance(
    baseline_units:  float,
    discount_units:  float,
    baseline_profit: float,
    discount_profit: float,
    discount_pct:    float,
    cost_price:      float,
    selling_price:   float,
    variable_cost:   float = 0.0,
    fixed_cost:      float = 0.0,
) -> PerformanceMetrics:
    """
    Compute the discount performance block.

    discount_pct is accepted for signature parity with the other stages; none
    of the reported figures depend on it directly (the discount's effect
    arrives through discount_profit).
    """
    baseline_units  = coerce_number("units_sold", baseline_units)
    discount_units  = coerce_number("units_sold_discount", discount_units)
    baseline_profit = coerce_number("baseline_profit", baseline_profit)
    discount_profit = coerce_number("discount_profit", discount_profit)
    coerce_number("discount_percentage", discount_pct)

    lift = (
        (discount_units - baseline_units) / baseline_units * 100
        if baseline_units != 0 else 0.0
    )
    delta = round2(discount_profit - baseline_profit, "profit_difference")

    break_even = compute_break_even_discount(
        baseline_units  = baseline_units,
        cost_price      = cost_price,
        selling_price   = selling_price,
        variable_cost   = variable_cost,
        fixed_cost      = fixed_cost,
        baseline_profit = baseline_profit,
    )

    return PerformanceMetrics(
        discount_lift       = round2(lift, "discount_lift"),
        incremental_profit  = delta,
        break_even_discount = break_even,
        profit_difference   = delta,
        is_profitable       = discount_profit > baseline_profit,
    )
