from __future__ import annotations

from typing import Iterable

import numpy as np

ABSOLUTE_ZERO_CELSIUS = -273.15

def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin."""
    return celsius - ABSOLUTE_ZERO_CELSIUS

def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius."""
    return kelvin + ABSOLUTE_ZERO_CELSIUS

def weighted_mean(data: Iterable[tuple[float, float]]) -> float:
    """
    Weighted arithmetic mean of (value, weight) pairs.

    :var data: Pairs of value and its (non-negative) weight.

    :return: sum(value * weight) / sum(weight). NaN if every weight is zero.

    **Example**:

        weighted_mean([(7.0, 9.0), (5.0, 3.0), (8.0, 2.0), (4.0, 1.0)])
        # Output: 6.5333...
    """
    pairs = np.asarray(list(data), dtype=np.float64)
    if pairs.size == 0:
        raise ValueError("Cannot take the weighted mean of no data.")

    values, weights = pairs[:, 0], pairs[:, 1]
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.sum(values * weights) / np.sum(weights))
