"""
Scoring transformation functions.

Transformations convert raw per-vehicle statistics into component scores.
Unlike a plain 0-1 normalization, the reliability curves are expressed on a
0-100 scale so that the weighted combination reads directly as a percentage.

Transformation types:
1. piecewise_linear - ordered segment table evaluated top-down
   (e.g., fuel efficiency, trip duration)
2. dealbreaker - step function with optional soft falloff (e.g., low speed)
3. scale - multiply by a constant (e.g., consistency factor to percent)

Shared fleet helpers:
- consistency_factor - inverse-variance stability of fuel efficiency
- experience_weight - confidence multiplier from trip count

All functions accept scalars or numpy arrays and return the same kind.
"""

from typing import Optional, Sequence, Union
import numpy as np

# Type alias for values that can be scalar or array
NumericType = Union[float, np.ndarray]

# (lower_bound, base, slope, pivot): score = base + slope * (value - pivot)
Segment = tuple[float, float, float, float]


def piecewise_linear(
    value: NumericType,
    segments: Sequence[Segment],
    floor: Optional[float] = None,
    overflow: Optional[tuple[float, float]] = None,
) -> NumericType:
    """
    Piecewise-linear transformation from an ordered segment table.

    Segments are evaluated top-down and the first one whose lower bound is
    satisfied (``value >= lower_bound``) wins, so the table must be sorted by
    descending lower bound. Use ``-inf`` as the last lower bound for a
    catch-all segment.

    Shape (fuel efficiency curve):
                     ________ 100
                   /
              ___/  70
          ___/      50
      ___/          30
     /              10
    0    2   3   4   5   6   km/L

    Args:
        value: Input value(s) to transform
        segments: Sequence of (lower_bound, base, slope, pivot) tuples
        floor: Optional lower clamp applied to the result
        overflow: Optional (limit, score). Values strictly above ``limit`` are
            treated as corrupted and forced to ``score`` before the table.

    Returns:
        Score(s) from the matching segment. Values matching no segment
        (including NaN) score 0.0.

    Example:
        >>> segs = [(6, 100, 0, 6), (5, 70, 30, 5), (float("-inf"), 0, 14, 0)]
        >>> piecewise_linear(5.5, segs)
        85.0
        >>> piecewise_linear(9.0, segs, overflow=(8, 5))
        5.0
    """
    value = np.asarray(value, dtype=float)

    conditions = [value >= lower for lower, _, _, _ in segments]
    choices = [base + slope * (value - pivot) for _, base, slope, pivot in segments]

    result = np.select(conditions, choices, default=0.0).astype(float)

    if floor is not None:
        result = np.maximum(result, floor)

    if overflow is not None:
        limit, forced = overflow
        result = np.where(value > limit, forced, result)

    # Return scalar if input was scalar
    if result.ndim == 0:
        return float(result)
    return result


def dealbreaker(
    value: NumericType,
    threshold: float,
    falloff: float = 0,
    below_is_good: bool = True,
) -> NumericType:
    """
    Dealbreaker (step function) transformation.

    Returns 1.0 (no penalty) for safe values, 0.0 (full penalty) for dangerous values.
    Optional soft falloff for gradual transition.

    Shape (below_is_good=False, falloff == threshold):
                    _______
                  /
                /
        ______/
        0       threshold

    With ``falloff == threshold`` and ``below_is_good=False`` this is the
    proportional low-speed penalty: ``value / threshold`` below the threshold,
    1.0 at or above it.

    Args:
        value: Input value(s) to transform
        threshold: The cutoff point
        falloff: Width of soft transition around threshold (0 = hard cutoff)
        below_is_good: If True, values below threshold are good (1.0).
                       If False, values above threshold are good (1.0).

    Returns:
        Score in [0, 1] where 1.0 = safe, 0.0 = dealbreaker

    Example:
        >>> dealbreaker(20.0, threshold=15, falloff=15, below_is_good=False)
        1.0
        >>> dealbreaker(7.5, threshold=15, falloff=15, below_is_good=False)
        0.5
    """
    value = np.asarray(value, dtype=float)
    result = np.ones_like(value, dtype=float)

    if below_is_good:
        if falloff == 0:
            result[value >= threshold] = 0.0
        else:
            in_falloff = (value > threshold) & (value < threshold + falloff)
            past_falloff = value >= threshold + falloff

            result[in_falloff] = 1.0 - (value[in_falloff] - threshold) / falloff
            result[past_falloff] = 0.0
    else:
        if falloff == 0:
            result[value < threshold] = 0.0
        else:
            in_falloff = (value < threshold) & (value > threshold - falloff)
            past_falloff = value <= threshold - falloff

            result[in_falloff] = (value[in_falloff] - (threshold - falloff)) / falloff
            result[past_falloff] = 0.0

    # NaN is never safe
    result[np.isnan(value)] = 0.0

    if result.ndim == 0:
        return float(result)
    return result


def scale(value: NumericType, factor: float = 1.0) -> NumericType:
    """
    Multiply by a constant factor (no clamping).

    Args:
        value: Input value(s)
        factor: Multiplier (100.0 turns a ratio into percent)

    Returns:
        value * factor
    """
    result = np.asarray(value, dtype=float) * factor
    if result.ndim == 0:
        return float(result)
    return result


def consistency_factor(
    mean_efficiency: NumericType,
    std_efficiency: NumericType,
    trip_count: NumericType,
) -> NumericType:
    """
    Stability of a vehicle's fuel efficiency across its trips.

    ``1 / (cv + 0.5)`` where ``cv = std / max(mean, 0.1)``. A single trip
    has no spread to measure and scores exactly 1.0. Perfectly repeatable
    multi-trip vehicles reach 2.0.

    Args:
        mean_efficiency: Mean fuel efficiency (km/L)
        std_efficiency: Population standard deviation of fuel efficiency
        trip_count: Number of trips the statistics were computed from

    Returns:
        Consistency factor in (0, 2]

    Example:
        >>> consistency_factor(5.0, 0.0, 1)
        1.0
        >>> consistency_factor(5.0, 0.0, 4)
        2.0
    """
    mean_efficiency = np.asarray(mean_efficiency, dtype=float)
    std_efficiency = np.asarray(std_efficiency, dtype=float)
    trip_count = np.asarray(trip_count)

    cv = std_efficiency / np.maximum(mean_efficiency, 0.1)
    result = np.where(trip_count == 1, 1.0, 1.0 / (cv + 0.5))

    if result.ndim == 0:
        return float(result)
    return result


def experience_weight(trip_count: NumericType) -> NumericType:
    """
    Confidence multiplier that grows with trip count, capped at 1.0.

    1 trip = 0.36, 2 trips = 0.52, 3 trips = 0.68, 5+ trips = 1.0

    Args:
        trip_count: Number of valid trips

    Returns:
        min(1, 0.2 + 0.16 * trip_count)
    """
    result = np.minimum(1.0, 0.2 + 0.16 * np.asarray(trip_count, dtype=float))
    if result.ndim == 0:
        return float(result)
    return result
