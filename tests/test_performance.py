import logging

import pytest

from kpi_engine.errors import InvalidInput
from kpi_engine.performance import compute_break_even_discount, compute_discount_performance


# ---------------------------------------------------------------------------
# compute_discount_performance
# ---------------------------------------------------------------------------


def test_unprofitable_discount():
    perf = compute_discount_performance(
        baseline_units=1000, discount_units=1500,
        baseline_profit=40000, discount_profit=32500,
        discount_pct=20, cost_price=50, selling_price=100,
        variable_cost=5, fixed_cost=5000,
    )

    assert perf.discount_lift == 50.0
    assert perf.incremental_profit == -7500.0
    assert perf.profit_difference == -7500.0
    assert perf.break_even_discount == 5.0
    assert perf.is_profitable is False


def test_profitable_discount():
    perf = compute_discount_performance(1000, 1400, 45000, 51000, 10, 50, 100, 0, 5000)

    assert perf.discount_lift == 40.0
    assert perf.incremental_profit == perf.profit_difference == 6000.0
    assert perf.break_even_discount == 5.0
    assert perf.is_profitable is True


def test_equal_profit_is_not_profitable():
    perf = compute_discount_performance(1000, 1000, 45000, 45000, 0, 50, 100)
    assert perf.profit_difference == 0.0
    assert perf.is_profitable is False


def test_volume_drop_gives_negative_lift():
    perf = compute_discount_performance(1000, 800, 45000, 30000, 10, 50, 100)
    assert perf.discount_lift == -20.0


def test_performance_rejects_non_numeric():
    with pytest.raises(InvalidInput):
        compute_discount_performance(1000, "1400", 45000, 51000, 10, 50, 100)


# ---------------------------------------------------------------------------
# compute_break_even_discount
# ---------------------------------------------------------------------------


def test_break_even_derives_baseline_profit_when_missing():
    # baseline profit = 100×1000 − (55×1000 + 5000) = 40000
    assert compute_break_even_discount(1000, 50, 100, 5, 5000) == 5.0
    assert compute_break_even_discount(1000, 50, 100, 5, 5000, baseline_profit=40000) == 5.0


def test_break_even_is_zero_without_contribution_margin():
    assert compute_break_even_discount(1000, 50, 100, variable_cost=50) == 0.0
    assert compute_break_even_discount(1000, 50, 100, variable_cost=60) == 0.0


def test_break_even_is_zero_when_required_price_exceeds_selling_price():
    assert compute_break_even_discount(1000, 50, 100, baseline_profit=60000) == 0.0


def test_break_even_is_zero_without_fixed_cost():
    # required price lands exactly on the selling price
    assert compute_break_even_discount(1000, 50, 100, 5) == 0.0


def test_break_even_is_clamped_to_100():
    assert compute_break_even_discount(1000, 50, 100, 5, baseline_profit=-200000) == 100.0


def test_break_even_is_rounded():
    # F / (units × price) = 1000 / (3 × 1000) → 33.333…%
    assert compute_break_even_discount(3, 400, 1000, fixed_cost=1000) == 33.33


def test_break_even_logs_intermediate_values(caplog):
    with caplog.at_level(logging.DEBUG, logger="kpi_engine.performance"):
        compute_break_even_discount(1000, 50, 100, 5, 5000)
    assert "Break-even discount" in caplog.text
