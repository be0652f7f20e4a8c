"""
Plausibility filter for truck trip records.

A trip is valid iff it passes every rule below. Rules are independent
acceptance predicates: each returns True when the trip is plausible with
respect to one check. Writing them as acceptance (rather than rejection)
conditions means NaN and other ambiguous values fail safe.

Rules (in evaluation order):
 1. nonzero_distance   - parked vehicles report zero distance
 2. min_distance       - < 1 km is not a meaningful trip
 3. nonzero_duration   - zero duration is impossible
 4. valid_coordinates  - (0,0) GPS errors, or outside the operating region
 5. nonnegative_fuel   - negative fuel consumption
 6. disguised_parking  - > 5 h at < 10 km/h is parking, not driving
 7. max_distance       - > 500 km in one trip usually has issues
 8. stationary_trip    - start ≈ end (~1 km) for more than 30 minutes
 9. min_speed          - < 5 km/h average is traffic or parking
10. efficiency_range   - outside 1-8 km/L for heavy and light trucks
11. max_duration       - > 12 h includes overnight parking
12. max_speed          - > 100 km/h is unrealistic for trucks
13. speed_consistency  - distance/duration disagrees with avg speed by > 30%

Rules 6 and 9 overlap on low-speed trips but exclude different sets, so
both are kept.
"""

from collections import Counter
from dataclasses import dataclass, field
import logging
from typing import Callable, Iterable, Optional

from src.fleet.trip import Trip

logger = logging.getLogger(__name__)

MIN_DISTANCE_KM = 1.0
MAX_DISTANCE_KM = 500.0
MAX_DURATION_HR = 12.0
MIN_SPEED_KMH = 5.0
MAX_SPEED_KMH = 100.0

# Operating region bounding box (Peninsular Malaysia, Sabah and Sarawak)
REGION_LAT_RANGE = (0.5, 7.5)
REGION_LON_RANGE = (99.0, 120.0)

PARKING_MIN_DURATION_HR = 5.0
PARKING_MAX_SPEED_KMH = 10.0

# ~1 km in degrees
STATIONARY_DEGREES = 0.01
STATIONARY_MIN_DURATION_HR = 0.5

MIN_EFFICIENCY_KMPL = 1.0
MAX_EFFICIENCY_KMPL = 8.0

SPEED_TOLERANCE = 0.3


@dataclass(frozen=True)
class ValidityRule:
    """A named plausibility check."""

    name: str
    description: str
    passes: Callable[[Trip], bool]


def _in_region(lat: float, lon: float) -> bool:
    lat_min, lat_max = REGION_LAT_RANGE
    lon_min, lon_max = REGION_LON_RANGE
    return lat_min <= lat <= lat_max and lon_min <= lon <= lon_max


def _valid_coordinates(trip: Trip) -> bool:
    if trip.start_lat == 0 and trip.start_lon == 0:
        return False
    if trip.end_lat == 0 and trip.end_lon == 0:
        return False
    return _in_region(trip.start_lat, trip.start_lon) and _in_region(trip.end_lat, trip.end_lon)


def _not_stationary(trip: Trip) -> bool:
    stationary = (
        abs(trip.start_lat - trip.end_lat) < STATIONARY_DEGREES
        and abs(trip.start_lon - trip.end_lon) < STATIONARY_DEGREES
        and trip.duration_hr > STATIONARY_MIN_DURATION_HR
    )
    return not stationary


def _speed_consistent(trip: Trip) -> bool:
    # Guarded here so the rule is safe regardless of evaluation order
    if not (trip.avg_speed_kmh > 0 and trip.duration_hr > 0):
        return False
    calculated = trip.distance_km / trip.duration_hr
    return abs(calculated - trip.avg_speed_kmh) / trip.avg_speed_kmh <= SPEED_TOLERANCE


RULES: tuple[ValidityRule, ...] = (
    ValidityRule(
        "nonzero_distance",
        "Zero distance (parked vehicle)",
        lambda t: t.distance_km != 0,
    ),
    ValidityRule(
        "min_distance",
        f"Distance < {MIN_DISTANCE_KM:g} km",
        lambda t: t.distance_km >= MIN_DISTANCE_KM,
    ),
    ValidityRule(
        "nonzero_duration",
        "Zero duration",
        lambda t: t.duration_hr != 0,
    ),
    ValidityRule(
        "valid_coordinates",
        "GPS (0,0) or outside operating region",
        _valid_coordinates,
    ),
    ValidityRule(
        "nonnegative_fuel",
        "Negative fuel consumption",
        lambda t: t.fuel_used_litre >= 0,
    ),
    ValidityRule(
        "disguised_parking",
        f"> {PARKING_MIN_DURATION_HR:g} h at < {PARKING_MAX_SPEED_KMH:g} km/h",
        lambda t: not (
            t.duration_hr > PARKING_MIN_DURATION_HR and t.avg_speed_kmh < PARKING_MAX_SPEED_KMH
        ),
    ),
    ValidityRule(
        "max_distance",
        f"Distance > {MAX_DISTANCE_KM:g} km",
        lambda t: t.distance_km <= MAX_DISTANCE_KM,
    ),
    ValidityRule(
        "stationary_trip",
        "Start and end within ~1 km for over 30 minutes",
        _not_stationary,
    ),
    ValidityRule(
        "min_speed",
        f"Average speed < {MIN_SPEED_KMH:g} km/h",
        lambda t: t.avg_speed_kmh >= MIN_SPEED_KMH,
    ),
    ValidityRule(
        "efficiency_range",
        f"Fuel efficiency outside {MIN_EFFICIENCY_KMPL:g}-{MAX_EFFICIENCY_KMPL:g} km/L",
        lambda t: MIN_EFFICIENCY_KMPL <= t.fuel_efficiency_kmpl <= MAX_EFFICIENCY_KMPL,
    ),
    ValidityRule(
        "max_duration",
        f"Duration > {MAX_DURATION_HR:g} h",
        lambda t: t.duration_hr <= MAX_DURATION_HR,
    ),
    ValidityRule(
        "max_speed",
        f"Average speed > {MAX_SPEED_KMH:g} km/h",
        lambda t: t.avg_speed_kmh <= MAX_SPEED_KMH,
    ),
    ValidityRule(
        "speed_consistency",
        f"distance/duration differs from avg speed by > {SPEED_TOLERANCE:.0%}",
        _speed_consistent,
    ),
)

RULE_NAMES = tuple(rule.name for rule in RULES)


def is_valid(trip: Trip) -> bool:
    """True iff the trip passes every plausibility rule."""
    return all(rule.passes(trip) for rule in RULES)


def failed_rules(trip: Trip) -> list[str]:
    """Names of every rule the trip fails, in evaluation order."""
    return [rule.name for rule in RULES if not rule.passes(trip)]


def first_failed_rule(trip: Trip) -> Optional[str]:
    """Name of the first failing rule, or None for a valid trip."""
    for rule in RULES:
        if not rule.passes(trip):
            return rule.name
    return None


def filter_valid(trips: Iterable[Trip]) -> list[Trip]:
    """Valid trips only, input order preserved."""
    return [trip for trip in trips if is_valid(trip)]


@dataclass
class ValidationReport:
    """Removal breakdown for a batch of trips."""

    total: int
    valid: int
    removed_by_rule: dict[str, int] = field(default_factory=dict)

    @property
    def removed(self) -> int:
        return self.total - self.valid

    @property
    def kept_ratio(self) -> float:
        """Fraction of trips kept (0.0 for an empty batch)."""
        if self.total == 0:
            return 0.0
        return self.valid / self.total


def validation_report(trips: Iterable[Trip]) -> ValidationReport:
    """
    Count removed trips by the first rule they fail.

    Args:
        trips: Trips to check

    Returns:
        ValidationReport with counts for every rule (zero counts included)
    """
    counts = Counter()
    total = 0
    for trip in trips:
        total += 1
        reason = first_failed_rule(trip)
        if reason is not None:
            counts[reason] += 1

    removed_by_rule = {name: counts.get(name, 0) for name in RULE_NAMES}
    report = ValidationReport(
        total=total,
        valid=total - sum(counts.values()),
        removed_by_rule=removed_by_rule,
    )

    logger.info(
        f"Validated {report.total} trips: kept {report.valid} "
        f"({report.kept_ratio:.2%}), removed {report.removed}"
    )
    for name, count in removed_by_rule.items():
        if count:
            logger.debug(f"  {name}: {count}")
    return report
