"""Aggregates over numeric sequences.

All aggregates are total: an empty input yields zero instead of raising, and
the standard deviation of fewer than two values is zero. Values are expected
to be integers; floats are accepted as well.

Note:
    ``standard_deviation`` is the sample standard deviation (Bessel's
    correction, ``ddof=1``), not the population one.
"""

import typing as tp

import numpy as np

from primkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "sum_of",
    "average",
    "median",
    "standard_deviation",
]

Number = tp.Union[int, float]


def _as_array(values: tp.Iterable[Number]) -> np.ndarray:
    return np.asarray(list(values), dtype=float)


def sum_of(values: tp.Iterable[Number]) -> Number:
    """Sum of all values, ``0`` for an empty input.

    Integers are added exactly with Python arithmetic so large values do not
    overflow a fixed-width dtype.
    """
    return sum(values, 0)


def average(values: tp.Iterable[Number]) -> float:
    """Arithmetic mean, ``0.0`` for an empty input."""
    values = list(values)
    if not values:
        logger.debug("average of empty sequence, returning 0.0")
        return 0.0
    return sum_of(values) / len(values)


def median(values: tp.Iterable[Number]) -> float:
    """Middle value of the sorted input, ``0.0`` for an empty input.

    For an even number of values the mean of the two central values is
    returned. The central values are averaged before conversion to ``float``,
    so integers beyond float precision are not rounded twice.
    """
    ordered = sorted(values)
    if not ordered:
        logger.debug("median of empty sequence, returning 0.0")
        return 0.0
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[middle])
    return (ordered[middle - 1] + ordered[middle]) / 2


def standard_deviation(values: tp.Iterable[Number]) -> float:
    """Sample standard deviation, ``0.0`` when fewer than two values are given.

    .. math::

        s = \\sqrt{\\frac{1}{n - 1} \\sum_{i=1}^{n} (x_i - \\bar{x})^2}
    """
    arr = _as_array(values)
    if arr.size <= 1:
        return 0.0
    return float(np.std(arr, ddof=1))
