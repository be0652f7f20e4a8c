"""
Per-vehicle trip statistics.

Grouping is an explicit map-reduce: trips are partitioned into a
dict-of-lists keyed by vehicle id, then each partition is reduced
independently into a VehicleAggregate.
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from src.fleet.trip import Trip
from src.fleet.validation import filter_valid
from src.scoring.transforms import consistency_factor, experience_weight

# Lower bound on mean duration when dividing by it
MIN_DURATION_DIVISOR_HR = 0.1


@dataclass(frozen=True)
class VehicleAggregate:
    """Statistics over one vehicle's trips."""

    vehicle_id: str
    trip_count: int
    mean_efficiency: float
    mean_duration: float
    mean_speed: float
    std_efficiency: float
    mean_distance: float
    total_distance: float
    total_fuel: float

    @property
    def consistency_factor(self) -> float:
        return consistency_factor(self.mean_efficiency, self.std_efficiency, self.trip_count)

    @property
    def experience_weight(self) -> float:
        return experience_weight(self.trip_count)

    @property
    def efficiency_per_time(self) -> float:
        """Mean km/L per hour of mean trip duration."""
        return self.mean_efficiency / max(self.mean_duration, MIN_DURATION_DIVISOR_HR)


def group_by_vehicle(trips: Iterable[Trip]) -> dict[str, list[Trip]]:
    """
    Partition trips by vehicle id.

    Keys appear in first-seen order and each list keeps input order.
    """
    groups: dict[str, list[Trip]] = {}
    for trip in trips:
        groups.setdefault(trip.vehicle_id, []).append(trip)
    return groups


def aggregate_trips(vehicle_id: str, trips: list[Trip]) -> VehicleAggregate:
    """
    Reduce one vehicle's trips into a VehicleAggregate.

    Args:
        vehicle_id: Vehicle the trips belong to
        trips: Non-empty list of (already validated) trips

    Returns:
        VehicleAggregate with means and population std of fuel efficiency
    """
    efficiency = np.array([t.fuel_efficiency_kmpl for t in trips], dtype=float)
    duration = np.array([t.duration_hr for t in trips], dtype=float)
    speed = np.array([t.avg_speed_kmh for t in trips], dtype=float)
    distance = np.array([t.distance_km for t in trips], dtype=float)
    fuel = np.array([t.fuel_used_litre for t in trips], dtype=float)

    return VehicleAggregate(
        vehicle_id=vehicle_id,
        trip_count=len(trips),
        mean_efficiency=float(efficiency.mean()),
        mean_duration=float(duration.mean()),
        mean_speed=float(speed.mean()),
        std_efficiency=float(efficiency.std()),  # ddof=0: population
        mean_distance=float(distance.mean()),
        total_distance=float(distance.sum()),
        total_fuel=float(fuel.sum()),
    )


def aggregate_vehicles(trips: Iterable[Trip]) -> list[VehicleAggregate]:
    """
    Aggregate valid trips per vehicle.

    Invalid trips are dropped before grouping, so vehicles with no valid
    trips are absent from the result. Order follows first appearance of
    each vehicle among the valid trips.
    """
    groups = group_by_vehicle(filter_valid(trips))
    return [aggregate_trips(vehicle_id, group) for vehicle_id, group in groups.items()]
