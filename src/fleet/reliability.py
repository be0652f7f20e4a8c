"""
Per-vehicle reliability scoring.

The reliability score (0-10, one decimal) blends fuel efficiency, trip
duration, consistency across trips and experience, scaled down for
vehicles whose mean speed suggests idling or bad data. The weighting and
curves live in src.scoring.configs.reliability.

Only trips passing src.fleet.validation count. A vehicle with no valid
trips scores 0.0.
"""

import logging
import math
from typing import Iterable, Optional

from src.fleet.aggregate import VehicleAggregate, aggregate_trips, aggregate_vehicles, group_by_vehicle
from src.fleet.trip import Trip
from src.fleet.validation import filter_valid
from src.scoring.combiner import ScoreCombiner
from src.scoring.configs.reliability import DEFAULT_RELIABILITY_SCORER, compute_derived_inputs

logger = logging.getLogger(__name__)


def _round_half_up(value: float, decimals: int = 1) -> float:
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def score_aggregate(
    aggregate: VehicleAggregate,
    scorer: Optional[ScoreCombiner] = None,
) -> float:
    """
    Reliability score for a prebuilt aggregate.

    Args:
        aggregate: Statistics over the vehicle's valid trips
        scorer: Combiner to use (default: DEFAULT_RELIABILITY_SCORER)

    Returns:
        Score in [0, 10], rounded half-up to one decimal
    """
    scorer = scorer or DEFAULT_RELIABILITY_SCORER
    weighted = scorer.compute(compute_derived_inputs(aggregate))
    if math.isnan(weighted):
        return 0.0
    weighted = min(100.0, max(0.0, weighted))
    return _round_half_up(weighted / 10)


def score_components(
    aggregate: VehicleAggregate,
    scorer: Optional[ScoreCombiner] = None,
) -> dict[str, float]:
    """Transformed score of each component, for debugging rankings."""
    scorer = scorer or DEFAULT_RELIABILITY_SCORER
    return scorer.get_component_scores(compute_derived_inputs(aggregate))


def score_vehicle(vehicle_id: str, all_trips: Iterable[Trip]) -> float:
    """
    Reliability score for one vehicle.

    Args:
        vehicle_id: Vehicle to score
        all_trips: Any trip collection; other vehicles' trips are ignored

    Returns:
        Score in [0, 10]; 0.0 if the vehicle has no valid trips
    """
    vehicle_trips = filter_valid(t for t in all_trips if t.vehicle_id == vehicle_id)
    if not vehicle_trips:
        return 0.0
    return score_aggregate(aggregate_trips(vehicle_id, vehicle_trips))


def score_fleet(trips: Iterable[Trip]) -> dict[str, float]:
    """
    Reliability score for every vehicle appearing in ``trips``.

    Vehicles with no valid trips are included with a score of 0.0.
    """
    trips = list(trips)
    scores = {vehicle_id: 0.0 for vehicle_id in group_by_vehicle(trips)}
    aggregates = aggregate_vehicles(trips)
    for aggregate in aggregates:
        scores[aggregate.vehicle_id] = score_aggregate(aggregate)

    logger.info(f"Scored {len(scores)} vehicles ({len(aggregates)} with valid trips)")
    return scores


def attach_reliability_scores(trips: Iterable[Trip]) -> list[Trip]:
    """Copies of every trip carrying its vehicle's reliability score."""
    trips = list(trips)
    scores = score_fleet(trips)
    return [trip.with_score(scores.get(trip.vehicle_id, 0.0)) for trip in trips]
