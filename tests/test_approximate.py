import math

import pytest

from aspectfit.fitting.models import RationalApproximation
from aspectfit.ratio.approximate import approximate_fraction


@pytest.mark.parametrize(
    "value, max_denominator, expected",
    [
        (1.777, 100, RationalApproximation(16, 9)),
        (16 / 9, 100, RationalApproximation(16, 9)),
        (1.5, 100, RationalApproximation(3, 2)),
        (1.0, 100, RationalApproximation(1, 1)),
        (math.pi, 7, RationalApproximation(22, 7)),
        (math.pi, 200, RationalApproximation(355, 113)),
        (0.3, 10, RationalApproximation(3, 10)),
        (1216 / 896, 100, RationalApproximation(19, 14)),
    ],
)
def test_approximate_fraction(
    value: float, max_denominator: int, expected: RationalApproximation
) -> None:
    assert approximate_fraction(value, max_denominator) == expected


@pytest.mark.parametrize("value", [0.0, -1.5, math.nan, math.inf, -math.inf])
def test_invalid_value_is_undefined(value: float) -> None:
    assert approximate_fraction(value, 100) == RationalApproximation(0, 0)


def test_denominator_bound_below_one_is_undefined() -> None:
    assert approximate_fraction(1.5, 0) == RationalApproximation(0, 0)


def test_bound_of_one_labels_small_values_one_to_one() -> None:
    # 0/1 is closer to 0.3 than 1/1, but it is not a usable label
    assert approximate_fraction(0.3, 1) == RationalApproximation(1, 1)


@pytest.mark.parametrize(
    "value, max_denominator, expected",
    [
        (0.004, 100, RationalApproximation(1, 100)),
        (1 / 256, 100, RationalApproximation(1, 100)),
        (0.0001, 10, RationalApproximation(1, 10)),
        (0.007, 100, RationalApproximation(1, 100)),
    ],
)
def test_value_below_smallest_convergent(
    value: float, max_denominator: int, expected: RationalApproximation
) -> None:
    approx = approximate_fraction(value, max_denominator)
    assert approx == expected
    assert abs(value - approx.value) < abs(value - 1.0)


@pytest.mark.parametrize("max_denominator", [1, 2, 9, 50, 100, 1000])
@pytest.mark.parametrize("value", [0.25, 0.5625, 1.333, 1.7777, 2.35, 2.39, 21 / 9, 7.1])
def test_approximation_respects_bound(value: float, max_denominator: int) -> None:
    approx = approximate_fraction(value, max_denominator)
    assert approx.numerator > 0
    assert 0 < approx.denominator <= max_denominator
    assert abs(value - approx.value) <= abs(value - 1.0)


def test_larger_bound_never_worse() -> None:
    value = 2.3912
    errors = [abs(value - approximate_fraction(value, d).value) for d in (1, 10, 100, 1000)]
    assert errors == sorted(errors, reverse=True)
