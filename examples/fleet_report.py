#!/usr/bin/env python3
"""
Fleet Trip Report.

Reads a trip_summary.csv export, reports how many trips each plausibility
rule removed, and prints the best-scoring trips and suggested vehicles for
a period.

Pipeline:
1. Read CSV rows with csv.DictReader
2. Normalize rows into Trips (defaults, derived efficiency, Day/Night tag)
3. Validate trips and log the removal breakdown
4. Score vehicles, query display rows, rank suggestions

Usage:
    python examples/fleet_report.py
    python examples/fleet_report.py data/trip_summary.csv --period Night
    python examples/fleet_report.py --start "port klang" --end "kuantan"
"""

import argparse
import csv
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.config import TRIP_SUMMARY_CSV
from src.fleet import (
    Period,
    query,
    suggest_by_period,
    top_vehicles,
    trips_from_records,
    validation_report,
)
from src.utils.helpers import setup_logging

logger = setup_logging("src")


def read_trip_rows(path: Path) -> list[dict]:
    """Read raw rows from a trip_summary CSV."""
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Fleet trip validation and vehicle suggestions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        type=Path,
        default=TRIP_SUMMARY_CSV,
        help=f"Trip summary CSV (default: {TRIP_SUMMARY_CSV})",
    )
    parser.add_argument(
        "--period",
        choices=[p.value for p in Period],
        default=Period.DAY.value,
        help="Time-of-day period to display (default: Day)",
    )
    parser.add_argument("--start", default=None, help="Start location substring")
    parser.add_argument("--end", default=None, help="End location substring")
    parser.add_argument("--rows", type=int, default=10, help="Number of trip rows to print")
    args = parser.parse_args()

    if not args.csv_path.exists():
        logger.error(f"CSV not found: {args.csv_path}")
        return 1

    trips = trips_from_records(read_trip_rows(args.csv_path))
    logger.info(f"Loaded {len(trips)} trips from {args.csv_path}")

    report = validation_report(trips)
    for rule, count in report.removed_by_rule.items():
        if count:
            logger.info(f"  removed by {rule}: {count}")

    rows = query(trips, args.period, args.start, args.end)
    print(f"\n{args.period} trips ({len(rows)} rows)")
    for trip in rows[: args.rows]:
        print(
            f"  {trip.vehicle_id:<20} {trip.start_time:<20} "
            f"{trip.start_key} -> {trip.end_key}  "
            f"{trip.fuel_efficiency_kmpl:.2f} km/L  score {trip.reliability_score:.1f}"
        )

    if args.start and args.end:
        suggestions = suggest_by_period(trips, args.start, args.end)
    else:
        suggestions = {
            period: top_vehicles(query(trips, period)) for period in Period
        }
    print()
    for period, vehicles in suggestions.items():
        print(f"Suggested ({period.value}): {', '.join(vehicles) or 'No suggestions available'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
