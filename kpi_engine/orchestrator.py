"""
kpi_engine/orchestrator.py
--------------------------
Single entry point for the pricing-sensitivity KPI pipeline.

Pipeline
--------
    Step 0 → inputs.ScenarioInputs.from_mapping()     (required-field check, fail fast)
    Step 1 → baseline.compute_baseline_metrics()
    Step 2 → discounted.compute_discounted_metrics()
    Step 3 → sensitivity.compute_sensitivity_metrics()
                 consumes the rounded prices / revenues / profits of Steps 1–2
    Step 4 → performance.compute_discount_performance()
    Step 5 → summary.generate_summary()

Every step is a pure function of raw inputs and earlier outputs. There is no
shared state and no I/O, so calculate_all_kpis() can be called concurrently
without locking. Either a fully populated AnalysisResult comes back or an
error is raised; there is no partial result.

No Streamlit imports. Pure Python.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from kpi_engine.baseline    import compute_baseline_metrics
from kpi_engine.discounted  import compute_discounted_metrics
from kpi_engine.errors      import KPIError
from kpi_engine.inputs      import ScenarioInputs
from kpi_engine.models      import AnalysisResult
from kpi_engine.performance import compute_discount_performance
from kpi_engine.sensitivity import compute_sensitivity_metrics
from kpi_engine.summary     import generate_summary

logger = logging.getLogger(__name__)


def _as_inputs(inputs: ScenarioInputs | Mapping[str, Any]) -> ScenarioInputs:
    if isinstance(inputs, ScenarioInputs):
        return inputs
    return ScenarioInputs.from_mapping(inputs)


# ─────────────────────────────────────────────────────────────────────────────
# Main entry point
# ─────────────────────────────────────────────────────────────────────────────

def calculate_all_kpis(
    inputs:   ScenarioInputs | Mapping[str, Any],
    currency: str = "$",
) -> AnalysisResult:
    """
    Run the full KPI pipeline for one baseline-vs-discount scenario.

    Args:
        inputs   : ScenarioInputs, or a mapping with cost_price, selling_price,
                   units_sold, discount_percentage, units_sold_discount and
                   optional fixed_cost / variable_cost (default 0).
        currency : Symbol used in the summary text only.

    Returns:
        AnalysisResult with baseline, discount, sensitivity, performance
        and summary blocks.

    Raises:
        MissingRequiredInput : a required field is absent or zero.
        InvalidInput         : a value is non-numeric or out of domain.
    """
    try:
        scenario = _as_inputs(inputs)
    except KPIError as exc:
        logger.warning("Rejected scenario inputs: %s", exc)
        raise

    # ── Step 1: Baseline ──────────────────────────────────────────────────────
    baseline = compute_baseline_metrics(
        cost_price    = scenario.cost_price,
        selling_price = scenario.selling_price,
        units_sold    = scenario.units_sold,
        fixed_cost    = scenario.fixed_cost,
        variable_cost = scenario.variable_cost,
    )

    # ── Step 2: Discounted ────────────────────────────────────────────────────
    discount = compute_discounted_metrics(
        cost_price       = scenario.cost_price,
        selling_price    = scenario.selling_price,
        discount_pct     = scenario.discount_percentage,
        discounted_units = scenario.units_sold_discount,
        fixed_cost       = scenario.fixed_cost,
        variable_cost    = scenario.variable_cost,
    )

    # ── Step 3: Sensitivity ───────────────────────────────────────────────────
    sensitivity = compute_sensitivity_metrics(
        original_price   = scenario.selling_price,
        original_qty     = scenario.units_sold,
        new_price        = discount.discounted_price,
        new_qty          = scenario.units_sold_discount,
        original_revenue = baseline.revenue,
        new_revenue      = discount.revenue,
        original_profit  = baseline.profit,
        new_profit       = discount.profit,
    )

    # ── Step 4: Performance ───────────────────────────────────────────────────
    performance = compute_discount_performance(
        baseline_units  = scenario.units_sold,
        discount_units  = scenario.units_sold_discount,
        baseline_profit = baseline.profit,
        discount_profit = discount.profit,
        discount_pct    = scenario.discount_percentage,
        cost_price      = scenario.cost_price,
        selling_price   = scenario.selling_price,
        variable_cost   = scenario.variable_cost,
        fixed_cost      = scenario.fixed_cost,
    )

    # ── Step 5: Summary ───────────────────────────────────────────────────────
    summary = generate_summary(sensitivity, performance, currency=currency)

    logger.debug(
        "Calculated KPIs: discount=%s%% profit_difference=%s elasticity=%s (%s)",
        scenario.discount_percentage, performance.profit_difference,
        sensitivity.price_elasticity, sensitivity.elasticity_classification,
    )

    return AnalysisResult(
        baseline    = baseline,
        discount    = discount,
        sensitivity = sensitivity,
        performance = performance,
        summary     = summary,
    )
