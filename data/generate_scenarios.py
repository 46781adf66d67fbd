import pandas as pd
import numpy as np

from kpi_engine.orchestrator import calculate_all_kpis

np.random.seed(42)

# ──────────────────────────────────────────────────────────────────────────────
# Config for sample products: unit economics the scenarios are drawn around
# ──────────────────────────────────────────────────────────────────────────────
PRODUCT_CONFIG = {
    "ALM16":    {"name": "Roasted Almonds 16oz",    "price": 9.00,  "cost": 5.20, "var": 0.30, "fixed": 400.0,  "base": 500},
    "PIS16":    {"name": "Salted Pistachios 16oz",  "price": 11.00, "cost": 6.50, "var": 0.40, "fixed": 350.0,  "base": 420},
    "WAT_SPK_12": {"name": "Sparkling Water 12-pack", "price": 7.49,  "cost": 3.50, "var": 0.20, "fixed": 600.0,  "base": 650},
    "YOG_GRK_8":  {"name": "Greek Yogurt 8oz",        "price": 1.79,  "cost": 0.85, "var": 0.05, "fixed": 150.0,  "base": 1200},
    "VIT_MULTI":  {"name": "Multivitamin 100ct",      "price": 19.99, "cost": 8.00, "var": 0.90, "fixed": 800.0,  "base": 220},
}

SCENARIOS_PER_PRODUCT = 6
DISCOUNT_CHOICES = [5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 40.0]
START_DATE = pd.Timestamp("2025-01-06")


def generate_scenarios() -> pd.DataFrame:
    all_rows = []
    for sku, cfg in PRODUCT_CONFIG.items():
        for _ in range(SCENARIOS_PER_PRODUCT):
            discount = float(np.random.choice(DISCOUNT_CHOICES))

            # Volume response: roughly elastic, with noise so some discounts lose money
            lift = 1.0 + discount / 100 * np.random.uniform(1.0, 4.5)
            noise = np.random.normal(0, cfg["base"] * 0.05)
            units_discount = max(1, int(cfg["base"] * lift + noise))

            inputs = {
                "cost_price":          cfg["cost"],
                "selling_price":       cfg["price"],
                "units_sold":          cfg["base"],
                "discount_percentage": discount,
                "units_sold_discount": units_discount,
                "fixed_cost":          cfg["fixed"],
                "variable_cost":       cfg["var"],
            }
            result = calculate_all_kpis(inputs)

            all_rows.append({
                "sku": sku,
                "scenario_name": f"{cfg['name']} - {discount:.0f}% off",
                "time_period": "monthly",
                **inputs,
                **result.to_kpi_record(),
            })

    df = pd.DataFrame(all_rows).sample(frac=1.0, random_state=42).reset_index(drop=True)
    df["created_at"] = [
        (START_DATE + pd.Timedelta(weeks=i)).isoformat() for i in range(len(df))
    ]
    return df


if __name__ == "__main__":
    df = generate_scenarios()
    df.to_csv("data/sample_scenarios.csv", index=False)
    print(f"Dataset generated with {len(df)} scenarios across {len(PRODUCT_CONFIG)} products.")
