import pytest

from kpi_engine.sensitivity import (
    ELASTIC,
    HIGHLY_ELASTIC,
    INELASTIC,
    PERFECTLY_INELASTIC,
    UNIT_ELASTIC,
    classify_elasticity,
    compute_sensitivity_metrics,
    pct_change,
)


# ---------------------------------------------------------------------------
# classify_elasticity
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "elasticity, expected",
    [
        (0.0, PERFECTLY_INELASTIC),
        (-0.0, PERFECTLY_INELASTIC),
        (0.5, INELASTIC),
        (0.999, INELASTIC),
        (0.9999999, INELASTIC),
        (1.0, UNIT_ELASTIC),
        (-1.0, UNIT_ELASTIC),
        (1.0000001, ELASTIC),
        (-2.5, ELASTIC),
        (4.99, ELASTIC),
        (5.0, HIGHLY_ELASTIC),
        (-5.0, HIGHLY_ELASTIC),
        (12.0, HIGHLY_ELASTIC),
    ],
)
def test_classify_elasticity(elasticity, expected):
    assert classify_elasticity(elasticity) == expected


# ---------------------------------------------------------------------------
# compute_sensitivity_metrics
# ---------------------------------------------------------------------------


def test_price_cut_with_volume_gain():
    metrics = compute_sensitivity_metrics(
        original_price=100, original_qty=1000, new_price=80, new_qty=1500,
        original_revenue=100000, new_revenue=120000,
        original_profit=40000, new_profit=32500,
    )

    # signed PED: price down, volume up → negative
    assert metrics.price_elasticity == -2.5
    # |Δprice| in the denominator: revenue rose, so the index is positive
    assert metrics.revenue_elasticity == 1.0
    # profit fell: -18.75% / 20 = -0.9375
    assert metrics.profit_sensitivity_index == -0.94
    assert metrics.elasticity_classification == ELASTIC


def test_price_increase_keeps_signed_elasticity():
    metrics = compute_sensitivity_metrics(
        original_price=100, original_qty=1000, new_price=110, new_qty=900,
        original_revenue=100000, new_revenue=99000,
        original_profit=20000, new_profit=28000,
    )

    assert metrics.price_elasticity == -1.0
    assert metrics.elasticity_classification == UNIT_ELASTIC
    assert metrics.revenue_elasticity == -0.1
    assert metrics.profit_sensitivity_index == 4.0


def test_no_price_change_zeroes_every_ratio():
    metrics = compute_sensitivity_metrics(100, 1000, 100, 1200, 100000, 120000, 40000, 50000)

    assert metrics.price_elasticity == 0.0
    assert metrics.revenue_elasticity == 0.0
    assert metrics.profit_sensitivity_index == 0.0
    assert metrics.elasticity_classification == PERFECTLY_INELASTIC


def test_zero_original_profit_gives_zero_profit_index():
    metrics = compute_sensitivity_metrics(100, 1000, 90, 1200, 100000, 108000, 0, 5000)
    assert metrics.profit_sensitivity_index == 0.0


def test_loss_making_baseline_uses_absolute_profit():
    # loss shrinks from -1000 to -500: a 50% improvement over |−1000|
    metrics = compute_sensitivity_metrics(100, 1000, 90, 1100, 100000, 99000, -1000, -500)
    assert metrics.profit_sensitivity_index == 5.0


def test_zero_revenue_baseline_does_not_divide_by_zero():
    metrics = compute_sensitivity_metrics(100, 1000, 90, 1100, 0, 99000, 100, 200)
    assert metrics.revenue_elasticity == 0.0


def test_classification_uses_unrounded_elasticity():
    # Δqty = 9.995%, Δprice = -10% → -0.9995, reported as -1.0 but still Inelastic
    metrics = compute_sensitivity_metrics(100, 100000, 90, 109995, 1, 1, 1, 1)
    assert metrics.price_elasticity == -1.0
    assert metrics.elasticity_classification == INELASTIC


def test_pct_change():
    assert pct_change(200, 250) == 25.0
    assert pct_change(0, 250) == 0.0
