import math

import pytest

from kpi_engine.errors import InvalidInput
from kpi_engine.rounding import round1, round2


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.125, 0.13),     # exact binary tie rounds away from zero
        (-0.125, -0.13),
        (0.375, 0.38),
        (1.005, 1.0),      # stored as 1.00499999...
        (2.675, 2.67),     # stored as 2.67499999...
        (27.083333333, 27.08),
        (40476.19, 40476.19),
        (100000, 100000.0),
    ],
)
def test_round2_half_away_from_zero_on_binary_value(value, expected):
    assert round2(value) == expected


def test_round2_differs_from_builtin_round_on_ties():
    assert round(0.125, 2) == 0.12
    assert round2(0.125) == 0.13


def test_round2_never_returns_negative_zero():
    result = round2(-0.001)
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_round2_rejects_non_finite(value):
    with pytest.raises(InvalidInput) as exc_info:
        round2(value, "profit")
    assert exc_info.value.field == "profit"


@pytest.mark.parametrize("value", [1e26, -3.5e30, 1.7e308])
def test_round2_keeps_very_large_values(value):
    assert round2(value) == value


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.25, 0.3),
        (-0.25, -0.3),
        (40.0, 40.0),
        (12.34, 12.3),
    ],
)
def test_round1_half_away_from_zero(value, expected):
    assert round1(value) == expected
