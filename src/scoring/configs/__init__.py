"""
Scoring configurations for fleet vehicles.

Available configs:
- reliability: 0-100 weighted reliability score per vehicle
- sustainability: Ranking key for top-vehicle suggestions
"""

from src.scoring.configs.reliability import (
    DEFAULT_RELIABILITY_SCORER,
    create_reliability_scorer,
    compute_derived_inputs as reliability_compute_derived_inputs,
)

from src.scoring.configs.sustainability import (
    DEFAULT_SUSTAINABILITY_SCORER,
    create_sustainability_scorer,
    compute_derived_inputs as sustainability_compute_derived_inputs,
)

__all__ = [
    "DEFAULT_RELIABILITY_SCORER",
    "create_reliability_scorer",
    "reliability_compute_derived_inputs",
    "DEFAULT_SUSTAINABILITY_SCORER",
    "create_sustainability_scorer",
    "sustainability_compute_derived_inputs",
]
