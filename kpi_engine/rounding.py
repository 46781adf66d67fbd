"""
kpi_engine/rounding.py
----------------------
Fixed-decimal rounding applied at every stage's point of computation.

Policy: round half away from zero on the exact binary value of the float.

    round2(0.125)  →  0.13
    round2(-0.125) → -0.13
    round2(1.005)  →  1.0    (1.005 is stored as 1.00499999…)
    round2(2.675)  →  2.67   (2.675 is stored as 2.67499999…)
    round1(0.25)   →  0.3

This is what JavaScript's Number.prototype.toFixed() produces, so values
stored by earlier versions of the calculator stay reproducible. Python's
built-in round() and format() would differ on exact ties
(round(0.125, 2) == 0.12, f"{0.25:.1f}" == "0.2").
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from kpi_engine.errors import InvalidInput

_CENT  = Decimal("0.01")
_TENTH = Decimal("0.1")

# Enough digits for the integer part of any finite float plus the decimals.
_PRECISION = 400


def _round_half_up(value: float, exponent: Decimal, field: str) -> float:
    if not math.isfinite(value):
        raise InvalidInput(field, value, "result is not a finite number")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        rounded = float(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))
    # Normalise -0.0 so serialised output never shows "-0.0"
    return rounded + 0.0


def round2(value: float, field: str = "value") -> float:
    """Round to 2 decimals, half away from zero. Non-finite input is rejected."""
    return _round_half_up(value, _CENT, field)


def round1(value: float, field: str = "value") -> float:
    """Round to 1 decimal, half away from zero. Used for display copy."""
    return _round_half_up(value, _TENTH, field)
