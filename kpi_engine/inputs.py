"""
kpi_engine/inputs.py
--------------------
ScenarioInputs: the seven numbers describing one what-if scenario.

    cost_price            : number > 0
    selling_price         : number > cost_price
    units_sold            : integer ≥ 1   (baseline volume)
    discount_percentage   : number in [0, 100]
    units_sold_discount   : integer ≥ 1   (volume after discount)
    fixed_cost            : number ≥ 0    (default 0)
    variable_cost         : number ≥ 0    (default 0, per unit on top of cost_price)

Schema validation belongs to the request boundary. The checks here are the
engine's last-resort guard: they make sure the pipeline is never fed values
that would turn into nonsense or NaN further down.

Public API
----------
    ScenarioInputs                     (frozen dataclass, validated on construction)
    ScenarioInputs.from_mapping(data)  -> ScenarioInputs
    coerce_number(field, value)        -> float
    REQUIRED_FIELDS, OPTIONAL_FIELDS
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping

from kpi_engine.errors import InvalidInput, MissingRequiredInput


# ─────────────────────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────────────────────

REQUIRED_FIELDS: tuple[str, ...] = (
    "cost_price",
    "selling_price",
    "units_sold",
    "discount_percentage",
    "units_sold_discount",
)

OPTIONAL_FIELDS: tuple[str, ...] = ("fixed_cost", "variable_cost")

# Required fields for which 0 means "not provided". A 0% discount is a real scenario.
_ZERO_MEANS_MISSING: frozenset[str] = frozenset(
    {"cost_price", "selling_price", "units_sold", "units_sold_discount"}
)


# ─────────────────────────────────────────────────────────────────────────────
# Numeric guards
# ─────────────────────────────────────────────────────────────────────────────

def coerce_number(field: str, value: Any) -> float:
    """
    Return value as a finite float or raise InvalidInput.

    Accepts any real number (int, float, numpy scalars) and Decimal.
    Strings, booleans and None are rejected: parsing text is the boundary's
    job, and True/False are not quantities.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidInput(field, value, "expected a number")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidInput(field, value, "expected a finite number")
    return number


def _coerce_units(field: str, value: Any) -> int:
    number = coerce_number(field, value)
    if not number.is_integer():
        raise InvalidInput(field, value, "unit counts must be whole numbers")
    if number < 1:
        raise InvalidInput(field, value, "unit counts must be at least 1")
    return int(number)


# ─────────────────────────────────────────────────────────────────────────────
# Dataclass
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScenarioInputs:
    cost_price:          float
    selling_price:       float
    units_sold:          int
    discount_percentage: float
    units_sold_discount: int
    fixed_cost:          float = 0.0
    variable_cost:       float = 0.0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Normalise numeric types in place and enforce the domain rules."""
        missing = [
            name for name in REQUIRED_FIELDS
            if getattr(self, name) is None
            or (name in _ZERO_MEANS_MISSING and _is_zero(getattr(self, name)))
        ]
        if missing:
            raise MissingRequiredInput(missing)

        cost_price    = coerce_number("cost_price", self.cost_price)
        selling_price = coerce_number("selling_price", self.selling_price)
        discount_pct  = coerce_number("discount_percentage", self.discount_percentage)
        fixed_cost    = coerce_number("fixed_cost", self.fixed_cost)
        variable_cost = coerce_number("variable_cost", self.variable_cost)
        units_sold          = _coerce_units("units_sold", self.units_sold)
        units_sold_discount = _coerce_units("units_sold_discount", self.units_sold_discount)

        if cost_price <= 0:
            raise InvalidInput("cost_price", self.cost_price, "cost price must be positive")
        if selling_price <= cost_price:
            raise InvalidInput(
                "selling_price", self.selling_price,
                "selling price must be greater than cost price",
            )
        if not 0 <= discount_pct <= 100:
            raise InvalidInput(
                "discount_percentage", self.discount_percentage,
                "discount percentage must be between 0 and 100",
            )
        if fixed_cost < 0:
            raise InvalidInput("fixed_cost", self.fixed_cost, "fixed cost cannot be negative")
        if variable_cost < 0:
            raise InvalidInput("variable_cost", self.variable_cost, "variable cost cannot be negative")

        # frozen dataclass: write the normalised values through object.__setattr__
        for name, value in (
            ("cost_price",          cost_price),
            ("selling_price",       selling_price),
            ("units_sold",          units_sold),
            ("discount_percentage", discount_pct),
            ("units_sold_discount", units_sold_discount),
            ("fixed_cost",          fixed_cost),
            ("variable_cost",       variable_cost),
        ):
            object.__setattr__(self, name, value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScenarioInputs:
        """
        Build inputs from a request body, CSV row or JSON object.

        Keys the engine does not use (scenario_name, description,
        competitor_price, time_period, ...) are ignored.
        """
        kwargs = {name: data.get(name) for name in REQUIRED_FIELDS}
        for name in OPTIONAL_FIELDS:
            value = data.get(name)
            kwargs[name] = 0.0 if value is None else value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _is_zero(value: Any) -> bool:
    # Non-numeric values are left for validate() to reject with a clearer reason.
    return (
        not isinstance(value, bool)
        and isinstance(value, (numbers.Real, Decimal))
        and value == 0
    )
