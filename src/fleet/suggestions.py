"""
Top-vehicle suggestions per time-of-day period.

Vehicles are ranked by a sustainability score that rewards both efficiency
and experience:

    efficiency_per_time = mean km/L / max(mean hours, 0.1)
    sustainability      = efficiency_per_time × consistency × experience

A vehicle with one excellent trip gets partial credit; a vehicle that has
driven the route several times consistently can outrank it.

Ties keep first-seen vehicle order (Python's sort is stable).
"""

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from src.fleet.aggregate import VehicleAggregate, aggregate_vehicles
from src.fleet.period import Period
from src.fleet.query import filter_trips
from src.fleet.trip import Trip
from src.scoring.combiner import ScoreCombiner
from src.scoring.configs.sustainability import DEFAULT_SUSTAINABILITY_SCORER, compute_derived_inputs

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 3


@dataclass(frozen=True)
class VehicleRanking:
    """A vehicle's sustainability score and the statistics behind it."""

    vehicle_id: str
    sustainability_score: float
    aggregate: VehicleAggregate


def rank_vehicles(
    trips: Iterable[Trip],
    scorer: Optional[ScoreCombiner] = None,
) -> list[VehicleRanking]:
    """
    Rank every vehicle with at least one valid trip.

    Args:
        trips: Trips for one period (and optionally one route)
        scorer: Combiner to use (default: DEFAULT_SUSTAINABILITY_SCORER)

    Returns:
        Rankings sorted by sustainability score, best first
    """
    scorer = scorer or DEFAULT_SUSTAINABILITY_SCORER
    rankings = [
        VehicleRanking(
            vehicle_id=aggregate.vehicle_id,
            sustainability_score=float(scorer.compute(compute_derived_inputs(aggregate))),
            aggregate=aggregate,
        )
        for aggregate in aggregate_vehicles(trips)
    ]
    rankings.sort(key=lambda r: r.sustainability_score, reverse=True)
    return rankings


def top_vehicles(trips: Iterable[Trip], limit: int = DEFAULT_SUGGESTION_LIMIT) -> list[str]:
    """
    Best vehicle ids by sustainability score.

    Args:
        trips: Trips for one period
        limit: Maximum number of ids returned

    Returns:
        Up to ``limit`` vehicle ids; empty when no trip is valid
    """
    return [ranking.vehicle_id for ranking in rank_vehicles(trips)[:limit]]


def suggest_by_period(
    trips: Iterable[Trip],
    start_text: Optional[str],
    end_text: Optional[str],
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> dict[Period, list[str]]:
    """
    Day and Night suggestions for a route search.

    Suggestions only make sense for a concrete route, so both lists are
    empty until both location queries are non-blank.

    Args:
        trips: Full trip collection
        start_text: Start location substring
        end_text: End location substring
        limit: Maximum suggestions per period

    Returns:
        {Period.DAY: [...], Period.NIGHT: [...]}
    """
    if not (start_text and start_text.strip() and end_text and end_text.strip()):
        return {Period.DAY: [], Period.NIGHT: []}

    trips = list(trips)
    suggestions = {}
    for period in (Period.DAY, Period.NIGHT):
        period_trips = filter_trips(trips, period, start_text, end_text)
        suggestions[period] = top_vehicles(period_trips, limit=limit)
        logger.debug(f"{period.value}: {len(period_trips)} trips -> {suggestions[period]}")
    return suggestions
