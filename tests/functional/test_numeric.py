import statistics

import numpy as np
import pytest
from primkit.functional.numeric import average, median, standard_deviation, sum_of


def test_sum_of():
    assert sum_of([1, 2, 3, 4, 5]) == 15
    assert sum_of([]) == 0
    assert isinstance(sum_of([1, 2]), int)


def test_sum_of_order_independent():
    values = [7, -3, 12, 0, 5]
    assert sum_of(values) == sum_of(reversed(values)) == sum_of(sorted(values))


def test_sum_of_large_integers_are_exact():
    big = 2**70
    assert sum_of([big, big, 1]) == 2**71 + 1


def test_average():
    assert average([1, 2, 3, 4, 5]) == 3.0
    assert average([1, 2]) == 1.5


def test_average_empty_is_zero():
    assert average([]) == 0
    assert isinstance(average([]), float)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([3, 1, 2], 2.0),
        ([1, 2, 3, 4, 5], 3.0),
        ([4, 1, 3, 2], 2.5),
        ([7], 7.0),
        ([], 0.0),
    ],
)
def test_median(values, expected):
    result = median(values)
    assert result == expected
    assert isinstance(result, float)


def test_median_of_large_integers_rounds_once():
    # Exact mean is 2**53 + 3, converting each value first would give 2**53 + 2
    assert median([2**53 + 5, 2**53 + 1]) == float(2**53 + 3)
    assert median([2**70 + 1]) == float(2**70 + 1)


def test_median_does_not_sort_input():
    values = [3, 1, 2]
    median(values)
    assert values == [3, 1, 2]


def test_standard_deviation_is_sample():
    values = [1, 2, 3, 4, 5]
    result = standard_deviation(values)

    assert result == pytest.approx(1.5811388300841898)
    assert result == pytest.approx(statistics.stdev(values))
    assert result == pytest.approx(float(np.std(values, ddof=1)))


@pytest.mark.parametrize("values", [[], [42], [-3]])
def test_standard_deviation_short_input_is_zero(values):
    assert standard_deviation(values) == 0.0


def test_standard_deviation_constant_values():
    assert standard_deviation([5, 5, 5]) == 0.0
