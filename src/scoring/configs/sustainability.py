"""
Sustainability scoring configuration for vehicle suggestions.

Ranks vehicles that have driven a route before. Balances "experience vs
efficiency": a vehicle that did the route ten times slightly above average
should beat a vehicle with a single excellent trip.

Score formula (multiplicative only, no additive components):
    final = efficiency_per_time × consistency × experience

This is a ranking key, not a bounded score. It is not on the same scale as
the reliability score.
"""

from src.scoring.combiner import ScoreComponent, ScoreCombiner


def create_sustainability_scorer() -> ScoreCombiner:
    """
    Create the sustainability scorer used for top-vehicle suggestions.

    Returns:
        ScoreCombiner with three pass-through multiplicative factors.
    """
    return ScoreCombiner(
        name="vehicle_sustainability",
        components=[
            # km/L per hour of mean trip duration
            ScoreComponent(
                name="efficiency_per_time",
                transform="scale",
                transform_params={"factor": 1.0},
                role="multiplicative",
            ),
            ScoreComponent(
                name="consistency",
                transform="scale",
                transform_params={"factor": 1.0},
                role="multiplicative",
            ),
            ScoreComponent(
                name="experience",
                transform="scale",
                transform_params={"factor": 1.0},
                role="multiplicative",
            ),
        ],
    )


DEFAULT_SUSTAINABILITY_SCORER = create_sustainability_scorer()


def compute_derived_inputs(aggregate) -> dict:
    """Compute scorer inputs from a VehicleAggregate."""
    return {
        "efficiency_per_time": aggregate.efficiency_per_time,
        "consistency": aggregate.consistency_factor,
        "experience": aggregate.experience_weight,
    }
