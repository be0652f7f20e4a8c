"""
Tests for top-vehicle suggestions.

sustainability = (mean km/L / max(mean h, 0.1)) * consistency * experience
"""

import pytest

from src.fleet.period import Period
from src.fleet.suggestions import rank_vehicles, suggest_by_period, top_vehicles


@pytest.fixture
def route_trip(make_trip):
    """2 h trip for a vehicle at the given km/L."""

    def _trip(vehicle_id, kmpl, **overrides):
        distance = kmpl * 20.0
        params = {
            "vehicle_id": vehicle_id,
            "distance_km": distance,
            "fuel_used_litre": 20.0,
            "duration_hr": 2.0,
            "avg_speed_kmh": distance / 2.0,
        }
        params.update(overrides)
        return make_trip(**params)

    return _trip


class TestTopVehicles:
    def test_empty_input(self):
        assert top_vehicles([]) == []

    def test_only_invalid_trips(self, route_trip):
        assert top_vehicles([route_trip("A", 9.5), route_trip("B", 0.5)]) == []

    def test_at_most_three(self, route_trip):
        trips = [route_trip(v, k) for v, k in [("A", 3.0), ("B", 4.0), ("C", 5.0), ("D", 6.0), ("E", 2.0)]]

        result = top_vehicles(trips)

        assert len(result) == 3
        assert result == ["D", "C", "B"]

    def test_fewer_than_three(self, route_trip):
        assert top_vehicles([route_trip("A", 4.0)]) == ["A"]

    def test_custom_limit(self, route_trip):
        trips = [route_trip(v, k) for v, k in [("A", 3.0), ("B", 4.0), ("C", 5.0)]]
        assert top_vehicles(trips, limit=1) == ["C"]

    def test_experience_beats_single_good_trip(self, route_trip):
        """One 6 km/L trip (1.08) loses to five trips averaging 4.5 km/L (~3.9)."""
        trips = [route_trip("SOLO", 6.0)]
        trips += [route_trip("VETERAN", k) for k in (4.0, 4.5, 5.0, 4.5, 4.5)]

        assert top_vehicles(trips) == ["VETERAN", "SOLO"]

    def test_ties_keep_first_seen_order(self, route_trip):
        trips = [route_trip("B", 5.0), route_trip("A", 5.0), route_trip("C", 5.0)]
        assert top_vehicles(trips) == ["B", "A", "C"]

    def test_shorter_trips_rank_higher(self, route_trip):
        """Same km/L, half the duration doubles efficiency per time."""
        fast = route_trip("FAST", 5.0, duration_hr=1.0, avg_speed_kmh=100.0)
        slow = route_trip("SLOW", 5.0)

        assert top_vehicles([slow, fast]) == ["FAST", "SLOW"]


class TestRankVehicles:
    def test_scores_and_order(self, route_trip):
        trips = [route_trip("SOLO", 6.0)]
        trips += [route_trip("VETERAN", 4.5) for _ in range(5)]

        rankings = rank_vehicles(trips)

        assert [r.vehicle_id for r in rankings] == ["VETERAN", "SOLO"]
        # 4.5 / 2 * 2.0 * 1.0
        assert rankings[0].sustainability_score == pytest.approx(4.5)
        # 6 / 2 * 1.0 * 0.36
        assert rankings[1].sustainability_score == pytest.approx(1.08)
        assert rankings[0].aggregate.trip_count == 5


class TestSuggestByPeriod:
    @pytest.fixture
    def fleet(self, route_trip):
        return [
            route_trip("DAY-1", 5.0, start_time="2024-03-04 09:00:00"),
            route_trip("DAY-2", 4.0, start_time="2024-03-05 10:00:00"),
            route_trip("NIGHT-1", 5.5, start_time="2024-03-04 22:00:00"),
            route_trip("ELSEWHERE", 6.0, start_key="Ipoh, Perak", start_time="2024-03-04 11:00:00"),
        ]

    def test_split_by_period_and_route(self, fleet):
        suggestions = suggest_by_period(fleet, "port klang", "KUANTAN")

        assert suggestions[Period.DAY] == ["DAY-1", "DAY-2"]
        assert suggestions[Period.NIGHT] == ["NIGHT-1"]

    @pytest.mark.parametrize("start, end", [(None, "kuantan"), ("port klang", ""), ("  ", "kuantan")])
    def test_requires_both_locations(self, fleet, start, end):
        assert suggest_by_period(fleet, start, end) == {Period.DAY: [], Period.NIGHT: []}

    def test_no_matching_route(self, fleet):
        suggestions = suggest_by_period(fleet, "penang", "johor")
        assert suggestions == {Period.DAY: [], Period.NIGHT: []}
