"""
Fleet trip validation, scoring and suggestions.

This module provides the core of the fleet dashboard:
- Period classification (Day/Night) of local timestamps
- Trip normalization and plausibility filtering
- Per-vehicle reliability scores (0-10)
- Top-vehicle suggestions per period
- The filtered, sorted trip query shown to users
"""

from .period import Period, classify_period, parse_timestamp
from .trip import Trip, trips_from_records
from .validation import (
    RULES,
    ValidationReport,
    is_valid,
    failed_rules,
    first_failed_rule,
    filter_valid,
    validation_report,
)
from .aggregate import VehicleAggregate, group_by_vehicle, aggregate_vehicles
from .reliability import (
    score_vehicle,
    score_aggregate,
    score_components,
    score_fleet,
    attach_reliability_scores,
)
from .query import filter_trips, query
from .suggestions import VehicleRanking, rank_vehicles, top_vehicles, suggest_by_period

__all__ = [
    "Period",
    "classify_period",
    "parse_timestamp",
    "Trip",
    "trips_from_records",
    "RULES",
    "ValidationReport",
    "is_valid",
    "failed_rules",
    "first_failed_rule",
    "filter_valid",
    "validation_report",
    "VehicleAggregate",
    "group_by_vehicle",
    "aggregate_vehicles",
    "score_vehicle",
    "score_aggregate",
    "score_components",
    "score_fleet",
    "attach_reliability_scores",
    "filter_trips",
    "query",
    "VehicleRanking",
    "rank_vehicles",
    "top_vehicles",
    "suggest_by_period",
]
