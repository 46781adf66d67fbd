"""
kpi_engine/models.py
--------------------
Result value objects produced by the pipeline.

All blocks are frozen dataclasses. They are created fresh on every call and
never mutated; identical inputs always produce equal results.

    BaselineMetrics     ← Step 1
    DiscountedMetrics   ← Step 2
    SensitivityMetrics  ← Step 3
    PerformanceMetrics  ← Step 4
    Summary             ← Step 5
    AnalysisResult      ← aggregate, serialised with to_dict() / to_kpi_record()
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


# ─────────────────────────────────────────────────────────────────────────────
# Metric blocks
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BaselineMetrics:
    revenue:       float
    profit:        float
    profit_margin: float   # percent of revenue
    asp:           float   # average selling price (= selling price)
    total_cost:    float


@dataclass(frozen=True)
class DiscountedMetrics:
    discounted_price: float
    revenue:          float
    profit:           float
    profit_margin:    float
    asp:              float   # = discounted price
    total_cost:       float


@dataclass(frozen=True)
class SensitivityMetrics:
    price_elasticity:          float   # signed; consumers apply abs() if they need to
    revenue_elasticity:        float
    profit_sensitivity_index:  float
    elasticity_classification: str


@dataclass(frozen=True)
class PerformanceMetrics:
    discount_lift:       float   # % change in units
    incremental_profit:  float
    break_even_discount: float   # %, constant-volume approximation
    profit_difference:   float   # same value as incremental_profit
    is_profitable:       bool


@dataclass(frozen=True)
class Summary:
    recommendation:     str
    insight:            str
    elasticity_insight: str
    key_takeaway:       str


# ─────────────────────────────────────────────────────────────────────────────
# Aggregate
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AnalysisResult:
    baseline:    BaselineMetrics
    discount:    DiscountedMetrics
    sensitivity: SensitivityMetrics
    performance: PerformanceMetrics
    summary:     Summary

    def to_dict(self) -> dict:
        """Nested wire shape consumed by persistence and UI collaborators."""
        return asdict(self)

    def to_kpi_record(self) -> dict:
        """Flat row, one column per KPI, as a record store keeps it."""
        b, d = self.baseline, self.discount
        return {
            "baseline_revenue":       b.revenue,
            "baseline_profit":        b.profit,
            "baseline_profit_margin": b.profit_margin,
            "baseline_asp":           b.asp,
            "discount_revenue":       d.revenue,
            "discount_profit":        d.profit,
            "discount_profit_margin": d.profit_margin,
            "discount_asp":           d.asp,
            **asdict(self.sensitivity),
            **asdict(self.performance),
        }
