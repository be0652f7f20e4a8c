"""
Scoring module for fleet vehicle analysis.

Provides transformation functions and combination logic for computing
multi-factor vehicle scores (reliability and sustainability).

Transformation types:
- piecewise_linear: Ordered segment table evaluated top-down
- dealbreaker: Step function with optional falloff (e.g., low speed)
- scale: Constant multiplier

Shared fleet helpers:
- consistency_factor: Stability of fuel efficiency across trips
- experience_weight: Confidence from trip count

Combination:
- ScoreComponent: Defines a single scoring factor
- ScoreCombiner: Combines components into final score using:
  - Additive components (weighted sum)
  - Multiplicative components (penalties and factors)
"""

from src.scoring.transforms import (
    piecewise_linear,
    dealbreaker,
    scale,
    consistency_factor,
    experience_weight,
)
from src.scoring.combiner import ScoreComponent, ScoreCombiner

__all__ = [
    # Transforms
    "piecewise_linear",
    "dealbreaker",
    "scale",
    "consistency_factor",
    "experience_weight",
    # Combiner
    "ScoreComponent",
    "ScoreCombiner",
]
