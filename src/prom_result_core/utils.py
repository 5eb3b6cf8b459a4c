"""
Timestamp and label utility functions for Prometheus query results.
"""

import math
from typing import Any


TIMESTAMP_RESOLUTION = 10
LABEL_PREFIX = "label_"


def round_half_away_from_zero(x: float) -> float:
    """
    Round to the nearest integer, with halves rounded away from zero.

    Python's round() rounds halves to even, so 25 / 10 would become 2.0
    instead of 3.0.

    Args:
        x: Number to round.

    Returns:
        Rounded value as a float.
    """
    magnitude = abs(x)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return math.copysign(rounded, x)


def snap_timestamp(timestamp: float, resolution: int = TIMESTAMP_RESOLUTION) -> float:
    """
    Snap a timestamp to the nearest multiple of resolution.

    Absorbs scrape interval jitter so samples from different series line up.

    Args:
        timestamp: Unix timestamp in seconds (may be fractional).
        resolution: Grid size in the same unit as timestamp.

    Returns:
        Snapped timestamp.
    """
    return round_half_away_from_zero(timestamp / resolution) * resolution


def labels_for_metric(metric: dict[str, Any]) -> str:
    """
    Render a metric label set for log messages.

    Args:
        metric: Label name to value mapping from a result entry.

    Returns:
        String like "{namespace: kube-system, pod: coredns}".
    """
    pairs = [f"{key}: {value}" for key, value in metric.items()]
    return "{" + ", ".join(pairs) + "}"
