"""
kpi_engine
----------
Pricing-sensitivity KPIs for one baseline-vs-discount scenario.

    from kpi_engine import calculate_all_kpis
    result = calculate_all_kpis({...}).to_dict()
"""

from kpi_engine.errors       import InvalidInput, KPIError, MissingRequiredInput
from kpi_engine.inputs       import ScenarioInputs
from kpi_engine.models       import AnalysisResult
from kpi_engine.orchestrator import calculate_all_kpis

__all__ = [
    "AnalysisResult",
    "InvalidInput",
    "KPIError",
    "MissingRequiredInput",
    "ScenarioInputs",
    "calculate_all_kpis",
]
