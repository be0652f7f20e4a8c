"""Configuration module for the fleet trip engine.

Centralizes data paths and runtime settings. Domain thresholds (speed,
fuel and region bounds) live with the rules in src.fleet, not here.
"""
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
TRIP_SUMMARY_CSV = DATA_DIR / "trip_summary.csv"

# Trip timestamps are local wall-clock time in this zone; no conversion is done
LOCAL_TIMEZONE = "Asia/Kuala_Lumpur"

# Default settings
DEFAULT_LOG_LEVEL = "INFO"
