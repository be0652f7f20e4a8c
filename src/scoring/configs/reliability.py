"""
Default vehicle reliability scoring configuration.

Defines how per-vehicle trip statistics are combined into a reliability
score. The curves are tuned for heavy and light trucks so that most vehicles
land in the 40-70 range and only exceptional, consistent performers score
above 80. Implausibly good data is treated as corruption rather than
rewarded.

Score formula:
    final = clip((weighted sum of additive) × (product of multiplicative), 0, 100)

Components:
- Additive (weighted sum to 1.0):
  - fuel_efficiency: Mean km/L (piecewise, 6 km/L = 100, >8 km/L forced to 5)
  - duration: Mean trip hours (piecewise, long trips heavily penalized)
  - consistency: Consistency factor × 100 (may exceed 100 before clipping)
  - experience: Experience weight × 100

- Multiplicative:
  - speed: Proportional penalty for mean speed below 15 km/h

The 0-10 reliability score reported per vehicle is final / 10, rounded to
one decimal (see src.fleet.reliability).
"""

from src.scoring.combiner import ScoreComponent, ScoreCombiner

NEG_INF = float("-inf")

# (lower_bound, base, slope, pivot), evaluated top-down
FUEL_EFFICIENCY_SEGMENTS = [
    (6.0, 100.0, 0.0, 6.0),     # Exceptional
    (5.0, 70.0, 30.0, 5.0),     # Good: 70-100
    (4.0, 50.0, 20.0, 4.0),     # Average: 50-70
    (3.0, 30.0, 20.0, 3.0),     # Below average: 30-50
    (2.0, 10.0, 20.0, 2.0),     # Poor: 10-30
    (NEG_INF, 0.0, 5.0, 0.0),   # 0-10
]

# Above this mean km/L the data is treated as corrupted
FUEL_EFFICIENCY_CORRUPT_ABOVE = 8.0
FUEL_EFFICIENCY_CORRUPT_SCORE = 5.0

DURATION_SEGMENTS = [
    (8.0, 40.0, -5.0, 8.0),     # Poor: 0-40
    (5.0, 40.0, -10.0, 8.0),    # Questionable: 40-70
    (3.0, 70.0, -10.0, 5.0),    # Acceptable: 70-90
    (NEG_INF, 90.0, -3.3, 3.0), # Good: 90+
]

LOW_SPEED_THRESHOLD_KMH = 15.0


def create_reliability_scorer() -> ScoreCombiner:
    """
    Create the default vehicle reliability scorer.

    Returns:
        ScoreCombiner producing a 0-100 weighted reliability score.

    Example:
        >>> scorer = create_reliability_scorer()
        >>> score = scorer.compute({
        ...     "fuel_efficiency": 5.0,     # mean km/L
        ...     "duration": 2.0,            # mean hours
        ...     "consistency": 1.0,         # consistency factor
        ...     "experience": 0.36,         # experience weight
        ...     "speed": 50.0,              # mean km/h
        ... })
    """
    return ScoreCombiner(
        name="vehicle_reliability",
        output_range=(0.0, 100.0),
        components=[
            # =================================================================
            # ADDITIVE COMPONENTS (weighted sum = 1.0)
            # =================================================================

            # WEIGHT: 40% - fuel efficiency is the headline metric
            ScoreComponent(
                name="fuel_efficiency",
                transform="piecewise_linear",
                transform_params={
                    "segments": FUEL_EFFICIENCY_SEGMENTS,
                    "floor": 0.0,
                    "overflow": (FUEL_EFFICIENCY_CORRUPT_ABOVE, FUEL_EFFICIENCY_CORRUPT_SCORE),
                },
                role="additive",
                weight=0.40,
            ),

            # WEIGHT: 30% - long trips usually hide stops or parking
            ScoreComponent(
                name="duration",
                transform="piecewise_linear",
                transform_params={
                    "segments": DURATION_SEGMENTS,
                    "floor": 0.0,
                },
                role="additive",
                weight=0.30,
            ),

            # WEIGHT: 20% - reliable performance across trips
            ScoreComponent(
                name="consistency",
                transform="scale",
                transform_params={"factor": 100.0},
                role="additive",
                weight=0.20,
            ),

            # WEIGHT: 10% - number of trips completed
            ScoreComponent(
                name="experience",
                transform="scale",
                transform_params={"factor": 100.0},
                role="additive",
                weight=0.10,
            ),

            # =================================================================
            # MULTIPLICATIVE COMPONENTS
            # =================================================================

            # Very low mean speeds indicate traffic, idling or bad data
            ScoreComponent(
                name="speed",
                transform="dealbreaker",
                transform_params={
                    "threshold": LOW_SPEED_THRESHOLD_KMH,
                    "falloff": LOW_SPEED_THRESHOLD_KMH,
                    "below_is_good": False,
                },
                role="multiplicative",
            ),
        ],
    )


# Default scorer instance
DEFAULT_RELIABILITY_SCORER = create_reliability_scorer()


def compute_derived_inputs(aggregate) -> dict:
    """
    Compute scorer inputs from a VehicleAggregate.

    Args:
        aggregate: VehicleAggregate from src.fleet.aggregate

    Returns:
        Dictionary ready to pass to scorer.compute()
    """
    return {
        "fuel_efficiency": aggregate.mean_efficiency,
        "duration": aggregate.mean_duration,
        "consistency": aggregate.consistency_factor,
        "experience": aggregate.experience_weight,
        "speed": aggregate.mean_speed,
    }
