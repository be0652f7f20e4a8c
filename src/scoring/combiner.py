"""
Score combination system for multi-factor vehicle scoring.

Provides:
- ScoreComponent: Defines a single scoring factor with transform and role
- ScoreCombiner: Combines multiple components into a final score

Components have two roles:
- additive: Weighted sum (e.g., fuel efficiency, trip duration)
- multiplicative: Factors that scale the sum (e.g., low-speed penalty)

Formula: final_score = clip((sum of weighted additive) * (product of multiplicative))
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

import numpy as np

from src.scoring.transforms import piecewise_linear, dealbreaker, scale

# Type alias
NumericType = Union[float, np.ndarray]

# Map transform names to functions
TRANSFORM_FUNCTIONS = {
    "piecewise_linear": piecewise_linear,
    "dealbreaker": dealbreaker,
    "scale": scale,
}


@dataclass
class ScoreComponent:
    """
    A single scoring component with transform and role.

    Attributes:
        name: Identifier for this component (used as key in input dict)
        transform: Name of transform function ("piecewise_linear", "dealbreaker", "scale")
        transform_params: Parameters to pass to the transform function
        role: "additive" (weighted sum) or "multiplicative" (factor)
        weight: Weight for additive components (must be provided if role="additive")
    """

    name: str
    transform: str
    transform_params: dict[str, Any]
    role: Literal["additive", "multiplicative"]
    weight: Optional[float] = None

    def __post_init__(self):
        if self.role == "additive" and self.weight is None:
            raise ValueError(
                f"Component '{self.name}' has role='additive' but no weight. "
                "Additive components must have a weight."
            )

        if self.transform not in TRANSFORM_FUNCTIONS:
            raise ValueError(
                f"Unknown transform '{self.transform}'. "
                f"Available: {list(TRANSFORM_FUNCTIONS.keys())}"
            )

    def apply(self, value: NumericType) -> NumericType:
        """Apply this component's transform to a raw value."""
        transform_fn = TRANSFORM_FUNCTIONS[self.transform]
        return transform_fn(value, **self.transform_params)


@dataclass
class ScoreCombiner:
    """
    Combines multiple ScoreComponents into a final score.

    Formula: final_score = (weighted sum of additive) * (product of multiplicative)

    Attributes:
        name: Identifier for this combiner
        components: List of ScoreComponent instances
        output_range: Optional (min, max) the final score is clipped to
    """

    name: str
    components: list[ScoreComponent] = field(default_factory=list)
    output_range: Optional[tuple[float, float]] = None

    def __post_init__(self):
        # Additive weights must form a convex combination
        additive_weights = [
            c.weight for c in self.components if c.role == "additive"
        ]

        if additive_weights:
            total = sum(additive_weights)
            if not np.isclose(total, 1.0, rtol=1e-5):
                raise ValueError(
                    f"Additive component weights must sum to 1.0, got {total:.4f}. "
                    f"Weights: {additive_weights}"
                )

    @property
    def additive_components(self) -> list[ScoreComponent]:
        return [c for c in self.components if c.role == "additive"]

    @property
    def multiplicative_components(self) -> list[ScoreComponent]:
        return [c for c in self.components if c.role == "multiplicative"]

    def compute(self, inputs: dict[str, NumericType]) -> NumericType:
        """
        Compute the combined score from input values.

        Args:
            inputs: Dictionary mapping component names to their raw values

        Returns:
            Final combined score, clipped to ``output_range`` when set
        """
        component_scores = self.get_component_scores(inputs)

        if self.additive_components:
            additive_sum = sum(
                c.weight * component_scores[c.name] for c in self.additive_components
            )
        else:
            additive_sum = 1.0  # No additive components = start at 1.0

        result = additive_sum
        for component in self.multiplicative_components:
            result = result * component_scores[component.name]

        if self.output_range is not None:
            low, high = self.output_range
            result = np.clip(result, low, high)
            if np.ndim(result) == 0:
                result = float(result)

        return result

    def get_component_scores(self, inputs: dict[str, NumericType]) -> dict[str, NumericType]:
        """
        Get individual transformed scores for each component.

        Useful for debugging why a vehicle ranks where it does.

        Args:
            inputs: Dictionary mapping component names to their raw values

        Returns:
            Dictionary mapping component names to their transformed scores

        Raises:
            KeyError: If an input for a component is missing
        """
        scores = {}
        for component in self.components:
            if component.name not in inputs:
                raise KeyError(
                    f"Missing input for component '{component.name}'. "
                    f"Available inputs: {list(inputs.keys())}"
                )
            scores[component.name] = component.apply(inputs[component.name])
        return scores
