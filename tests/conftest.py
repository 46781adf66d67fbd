import pytest


@pytest.fixture
def unprofitable_inputs():
    """20% off, volume 1000 → 1500, with fixed and variable costs."""
    return {
        "cost_price":          50,
        "selling_price":       100,
        "units_sold":          1000,
        "discount_percentage": 20,
        "units_sold_discount": 1500,
        "fixed_cost":          5000,
        "variable_cost":       5,
    }


@pytest.fixture
def profitable_inputs():
    """10% off, volume 1000 → 1400, no variable cost."""
    return {
        "cost_price":          50,
        "selling_price":       100,
        "units_sold":          1000,
        "discount_percentage": 10,
        "units_sold_discount": 1400,
        "fixed_cost":          5000,
        "variable_cost":       0,
    }


@pytest.fixture
def kpi_records():
    return [
        {"scenario_name": "Ten off", "discount_percentage": 10, "baseline_profit": 45000,
         "discount_profit": 51000, "profit_difference": 6000, "price_elasticity": -4.0,
         "discount_lift": 40.0, "is_profitable": True},
        {"scenario_name": "Twenty off", "discount_percentage": 20, "baseline_profit": 40000,
         "discount_profit": 32500, "profit_difference": -7500, "price_elasticity": -2.5,
         "discount_lift": 50.0, "is_profitable": False},
        {"scenario_name": "Fifteen off", "discount_percentage": 15, "baseline_profit": 42000,
         "discount_profit": 48000, "profit_difference": 6000, "price_elasticity": -3.1,
         "discount_lift": 45.0, "is_profitable": True},
    ]
