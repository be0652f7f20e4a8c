"""
Trip record model and loader-contract normalization.

Trip records arrive from an external loader as flat mappings with
imperfect data. ``Trip.from_record`` applies the defaulting rules:

- missing, blank or unparseable numeric fields become 0.0
- missing string fields become ""
- fuel efficiency is derived as distance / fuel when absent (or zero)
  and fuel > 0, else 0.0

Trips are immutable. Derived values (period tag, duration in minutes,
attached reliability score) never modify the source record.
"""

from dataclasses import dataclass, replace
import logging
import math
from typing import Any, Mapping, Optional

from src.fleet.period import Period, classify_period, parse_timestamp

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = (
    "start_lat",
    "start_lon",
    "end_lat",
    "end_lon",
    "distance_km",
    "fuel_used_litre",
    "duration_hr",
    "avg_speed_kmh",
)

STRING_FIELDS = (
    "vehicle_id",
    "start_time",
    "end_time",
    "start_key",
    "end_key",
)


def _to_float(value: Any, field_name: str = "") -> float:
    """Coerce a raw field to float, defaulting to 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Unparseable numeric {field_name}={value!r}, defaulting to 0")
        return 0.0
    if math.isnan(result):
        return 0.0
    return result


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class Trip:
    """One vehicle trip as reported by telemetry."""

    vehicle_id: str
    start_time: str
    end_time: str
    start_lat: float
    start_lon: float
    end_lat: float
    end_lon: float
    distance_km: float
    fuel_used_litre: float
    duration_hr: float
    avg_speed_kmh: float
    fuel_efficiency_kmpl: float
    start_key: str = ""
    end_key: str = ""
    time_of_day: Optional[str] = None
    route_id: Optional[str] = None
    period: Optional[Period] = None
    reliability_score: Optional[float] = None

    def __post_init__(self):
        # Derived from start_time unless given explicitly
        if self.period is None:
            object.__setattr__(self, "period", classify_period(self.start_time))

    @property
    def duration_minutes(self) -> float:
        """Trip duration in minutes."""
        return self.duration_hr * 60

    def with_score(self, score: float) -> "Trip":
        """Return a copy of this trip carrying ``score`` as its reliability score."""
        return replace(self, reliability_score=score)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Trip":
        """
        Build a Trip from a loader row, applying the defaulting rules.

        Args:
            record: Flat mapping with the trip_summary columns

        Returns:
            Normalized Trip with derived efficiency and period
        """
        numbers = {name: _to_float(record.get(name), name) for name in NUMERIC_FIELDS}
        strings = {name: _to_str(record.get(name)) for name in STRING_FIELDS}

        efficiency = _to_float(record.get("fuel_efficiency_kmpl"), "fuel_efficiency_kmpl")
        if not efficiency and numbers["fuel_used_litre"] > 0:
            efficiency = numbers["distance_km"] / numbers["fuel_used_litre"]

        start_time = strings["start_time"]
        if start_time and parse_timestamp(start_time) is None:
            logger.warning(
                f"Unparseable start_time {start_time!r} for vehicle "
                f"{strings['vehicle_id']!r}, classifying as Day"
            )

        return cls(
            **strings,
            **numbers,
            fuel_efficiency_kmpl=efficiency,
            time_of_day=_optional_str(record.get("time_of_day")),
            route_id=_optional_str(record.get("route_id")),
        )


def trips_from_records(records) -> list[Trip]:
    """Normalize an iterable of loader rows into Trips."""
    trips = [Trip.from_record(record) for record in records]
    logger.debug(f"Normalized {len(trips)} trip records")
    return trips
