"""Pytest configuration and fixtures for fleet scoring tests."""
import sys
from pathlib import Path

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from src.fleet.trip import Trip


# A plausible Port Klang -> Kuantan run: 100 km in 2 h at 50 km/h on 20 L
BASE_RECORD = {
    "vehicle_id": "TRK-001",
    "start_time": "2024-03-04 08:15:00",
    "end_time": "2024-03-04 10:15:00",
    "start_lat": 3.0,
    "start_lon": 101.4,
    "end_lat": 3.8,
    "end_lon": 103.3,
    "distance_km": 100.0,
    "fuel_used_litre": 20.0,
    "duration_hr": 2.0,
    "avg_speed_kmh": 50.0,
    "start_key": "Port Klang, Selangor",
    "end_key": "Kuantan, Pahang",
}


@pytest.fixture
def base_record():
    """A raw loader row for one valid trip."""
    return dict(BASE_RECORD)


@pytest.fixture
def make_trip():
    """Factory building a normalized Trip from BASE_RECORD plus overrides."""

    def _make_trip(**overrides) -> Trip:
        record = dict(BASE_RECORD)
        record.update(overrides)
        return Trip.from_record(record)

    return _make_trip


@pytest.fixture
def valid_trip(make_trip):
    """A single valid Day trip (5 km/L, 2 h, 50 km/h)."""
    return make_trip()
