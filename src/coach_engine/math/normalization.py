"""Scaling helpers shared by the readiness heuristic."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into [low, high]."""
    return max(low, min(high, value))


def normalize(value: float, low: float, high: float) -> float:
    """Linearly map *value* from [low, high] onto [0, 1], clamping outside.

    A degenerate range (``high <= low``) always maps to 0.

    Examples:
        >>> normalize(10, 5, 15)
        0.5
        >>> normalize(20, 5, 15)
        1.0
    """
    if high <= low:
        return 0.0
    return (clamp(value, low, high) - low) / (high - low)


def median(values: Iterable[float]) -> float:
    """Median of *values*; 0.0 for an empty input.

    Even-length inputs average the two middle values.
    """
    arr = np.fromiter(values, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(np.median(arr))
