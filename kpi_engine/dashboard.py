"""
kpi_engine/dashboard.py
-----------------------
Portfolio views over many stored analyses.

Works on flat KPI records (AnalysisResult.to_kpi_record() plus the scenario's
discount_percentage, and optionally scenario_name / created_at / time_period).
Missing numeric fields count as 0 and a missing is_profitable as False, the
same defaults a partially populated record store would give.

Public API
----------
    compute_dashboard_kpis(records)           -> dict
    compare_scenarios(records)                -> dict
    moving_averages(values, window=3)         -> list[float | None]
    analyze_trend(values)                     -> str
    trend_recommendations(trends)             -> list[str]
    build_trend_report(records, window=3, period=None) -> dict

The trend label is a descriptive heuristic (first half vs. second half of the
series). It does not forecast anything.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from kpi_engine.errors import InvalidInput
from kpi_engine.rounding import round2


# ─────────────────────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────────────────────

NUMERIC_COLUMNS: tuple[str, ...] = (
    "discount_percentage",
    "baseline_profit",
    "discount_profit",
    "profit_difference",
    "price_elasticity",
    "discount_lift",
)

STRONG_TREND_PCT: float = 10.0
TREND_PCT:        float = 2.0

WIN_SHARE_THRESHOLD:     float = 0.7
HIGH_AVG_DISCOUNT_PCT:   float = 30.0
MIN_TRENDS_FOR_ADVICE:   int   = 3

_EMPTY_DASHBOARD: dict = {
    "total_scenarios":    0,
    "average_profit":     0.0,
    "average_elasticity": 0.0,
    "best_discount":      0.0,
    "discount_win_rate":  0.0,
}


# ─────────────────────────────────────────────────────────────────────────────
# Internal helpers
# ─────────────────────────────────────────────────────────────────────────────

def _to_frame(records: Iterable[dict] | pd.DataFrame) -> pd.DataFrame:
    """Normalise records into a DataFrame with every KPI column present."""
    df = records.copy() if isinstance(records, pd.DataFrame) else pd.DataFrame(list(records))
    for col in NUMERIC_COLUMNS:
        if col not in df.columns:
            df[col] = 0.0
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0.0).astype(float)
    if "is_profitable" not in df.columns:
        df["is_profitable"] = False
    df["is_profitable"] = [bool(v) if pd.notna(v) else False for v in df["is_profitable"]]
    return df.reset_index(drop=True)


def _mean(values: Sequence[float]) -> float:
    return float(np.mean(values)) if len(values) else 0.0


# ─────────────────────────────────────────────────────────────────────────────
# Overview
# ─────────────────────────────────────────────────────────────────────────────

def compute_dashboard_kpis(records: Iterable[dict] | pd.DataFrame) -> dict:
    """
    Headline numbers across a user's analyses.

    best_discount is the discount_percentage of the analysis with the highest
    profit_difference (the earliest one on ties).
    """
    df = _to_frame(records)
    if df.empty:
        return dict(_EMPTY_DASHBOARD)

    best = df.loc[df["profit_difference"].idxmax()]

    return {
        "total_scenarios":    int(len(df)),
        "average_profit":     round2(float(df["discount_profit"].mean()), "average_profit"),
        "average_elasticity": round2(float(df["price_elasticity"].abs().mean()), "average_elasticity"),
        "best_discount":      float(best["discount_percentage"]),
        "discount_win_rate":  round2(float(df["is_profitable"].mean() * 100), "discount_win_rate"),
    }


def compare_scenarios(records: Iterable[dict] | pd.DataFrame) -> dict:
    """Side-by-side comparison of two or more analyses."""
    df = _to_frame(records)
    if len(df) < 2:
        raise InvalidInput("records", len(df), "at least 2 analyses are needed to compare")

    analyses = [
        {
            "id":                  row.get("id"),
            "name":                row.get("scenario_name", row.get("name")),
            "discount_percentage": float(row["discount_percentage"]),
            "baseline_profit":     float(row["baseline_profit"]),
            "discount_profit":     float(row["discount_profit"]),
            "profit_difference":   float(row["profit_difference"]),
            "price_elasticity":    float(row["price_elasticity"]),
            "discount_lift":       float(row["discount_lift"]),
            "is_profitable":       bool(row["is_profitable"]),
        }
        for row in df.to_dict(orient="records")
    ]
    best = analyses[int(df["profit_difference"].idxmax())]

    return {
        "analyses": analyses,
        "summary": {
            "best_performing_discount": best["discount_percentage"],
            "highest_profit_increase":  best["profit_difference"],
            "average_elasticity":       round2(float(df["price_elasticity"].abs().mean()), "average_elasticity"),
            "profitable_count":         int(df["is_profitable"].sum()),
            "total_count":              int(len(df)),
        },
    }


# ─────────────────────────────────────────────────────────────────────────────
# Trends
# ─────────────────────────────────────────────────────────────────────────────

def moving_averages(values: Sequence[float], window: int = 3) -> list[float | None]:
    """Trailing mean over `window` points; None until the window fills."""
    if window < 1:
        raise InvalidInput("window", window, "window must be at least 1")
    if len(values) == 0:
        return []
    rolled = pd.Series(values, dtype=float).rolling(window=window).mean()
    return [None if pd.isna(v) else round2(float(v), "moving_average") for v in rolled]


def analyze_trend(values: Sequence[float]) -> str:
    """Label the direction of a series by comparing its two halves."""
    if len(values) < 2:
        return "insufficient_data"

    half = len(values) // 2
    avg_first  = _mean(values[:half])
    avg_second = _mean(values[half:])

    if avg_first == 0:
        if avg_second > 0:  return "strong_upward"
        if avg_second < 0:  return "strong_downward"
        return "stable"

    change = (avg_second - avg_first) / abs(avg_first) * 100

    if change > STRONG_TREND_PCT:   return "strong_upward"
    if change > TREND_PCT:          return "upward"
    if change < -STRONG_TREND_PCT:  return "strong_downward"
    if change < -TREND_PCT:         return "downward"
    return "stable"


def trend_recommendations(trends: Sequence[dict]) -> list[str]:
    """Plain-language advice from a chronological list of trend points."""
    if len(trends) < MIN_TRENDS_FOR_ADVICE:
        return ["Collect more data to generate meaningful insights"]

    recommendations = []
    win_share = sum(1 for t in trends if t["profit_change"] > 0) / len(trends)
    if win_share > WIN_SHARE_THRESHOLD:
        recommendations.append(
            "Your discount strategies are generally effective. "
            "Consider scaling successful approaches."
        )
    else:
        recommendations.append(
            "Review discount strategies. Less than 70% of scenarios are profitable."
        )

    if _mean([t["discount_percentage"] for t in trends]) > HIGH_AVG_DISCOUNT_PCT:
        recommendations.append(
            "Average discount is high (>30%). "
            "Consider testing smaller discounts for better margins."
        )

    if analyze_trend([abs(t["elasticity"]) for t in trends]) in ("upward", "strong_upward"):
        recommendations.append(
            "Price sensitivity is increasing. "
            "Monitor customer response to price changes closely."
        )

    return recommendations


def build_trend_report(
    records: Iterable[dict] | pd.DataFrame,
    window:  int = 3,
    period:  str | None = None,
) -> dict:
    """
    Chronological trend view of stored analyses.

    Records are ordered by created_at when the column exists; rows whose
    timestamp cannot be parsed keep their relative order at the end. When `period`
    is given, only records whose time_period matches are kept.
    """
    df = _to_frame(records)
    if period is not None and "time_period" in df.columns:
        df = df[df["time_period"] == period]
    if "created_at" in df.columns:
        # Unparseable timestamps sort after every dated record
        stamps = pd.to_datetime(df["created_at"], format="mixed", errors="coerce")
        df = df.assign(_ts=stamps).sort_values("_ts", kind="stable", na_position="last")
    df = df.reset_index(drop=True)

    trends = [
        {
            "period":              i + 1,
            "date":                row.get("created_at"),
            "discount_percentage": float(row["discount_percentage"]),
            "profit":              float(row["discount_profit"]),
            "elasticity":          float(row["price_elasticity"]),
            "profit_change":       float(row["profit_difference"]),
        }
        for i, row in enumerate(df.to_dict(orient="records"))
    ]
    profits = [t["profit"] for t in trends]

    success_rate = (
        sum(1 for t in trends if t["profit_change"] > 0) / len(trends) * 100
        if trends else 0.0
    )

    return {
        "trends":          trends,
        "moving_averages": moving_averages(profits, window),
        "analysis": {
            "overall_trend":    analyze_trend(profits),
            "average_discount": round2(_mean([t["discount_percentage"] for t in trends]), "average_discount"),
            "success_rate":     round2(success_rate, "success_rate"),
            "recommendations":  trend_recommendations(trends),
        },
    }
