"""
Trip query for display.

Composes validation, period classification and reliability scoring into
the ordered list of trip rows shown to users.
"""

from datetime import datetime
import logging
from typing import Iterable, Optional, Union

from src.fleet.period import Period, parse_timestamp
from src.fleet.reliability import score_fleet
from src.fleet.trip import Trip
from src.fleet.validation import is_valid

logger = logging.getLogger(__name__)


def _matches(key: str, text: Optional[str]) -> bool:
    """Case-insensitive containment of ``text`` in ``key``; blank text matches all."""
    if not text or not text.strip():
        return True
    return text.strip().lower() in key.lower()


def filter_trips(
    trips: Iterable[Trip],
    period: Union[Period, str],
    start_text: Optional[str] = None,
    end_text: Optional[str] = None,
) -> list[Trip]:
    """
    Valid trips in ``period`` whose location keys contain the queries.

    Args:
        trips: Trip collection
        period: Period (or its value, "Day"/"Night")
        start_text: Optional substring of the start location key
        end_text: Optional substring of the end location key

    Returns:
        Matching trips in input order
    """
    period = Period(period)
    return [
        trip
        for trip in trips
        if is_valid(trip)
        and trip.period == period
        and _matches(trip.start_key, start_text)
        and _matches(trip.end_key, end_text)
    ]


def _display_order(trip: Trip):
    # Unparseable start times sort after every real timestamp
    started = parse_timestamp(trip.start_time)
    if started is None:
        return (trip.reliability_score or 0.0, 0, datetime.min)
    return (trip.reliability_score or 0.0, 1, started.replace(tzinfo=None))


def query(
    trips: Iterable[Trip],
    period: Union[Period, str],
    start_text: Optional[str] = None,
    end_text: Optional[str] = None,
) -> list[Trip]:
    """
    Display rows for a period and optional route search.

    Trips without an attached reliability score are scored against the
    whole input collection before filtering, so a vehicle's score does not
    depend on the search. Scores already attached are kept as they are.

    Args:
        trips: Full trip collection
        period: Period (or its value, "Day"/"Night")
        start_text: Optional substring of the start location key
        end_text: Optional substring of the end location key

    Returns:
        Matching trips with reliability scores, best score first and most
        recent first within equal scores
    """
    trips = list(trips)
    if any(trip.reliability_score is None for trip in trips):
        scores = score_fleet(trips)
        trips = [
            trip if trip.reliability_score is not None else trip.with_score(scores[trip.vehicle_id])
            for trip in trips
        ]

    rows = filter_trips(trips, period, start_text, end_text)
    rows.sort(key=_display_order, reverse=True)

    logger.debug(f"Query {Period(period).value} {start_text!r}->{end_text!r}: {len(rows)} rows")
    return rows
