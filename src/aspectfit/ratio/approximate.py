"""Rational approximation of decimal ratios by continued fractions.

Used to label ratios that did not come from two known integers, such as a
value picked on a continuous slider. The expansion is capped at
``MAX_ITERATIONS`` terms so every call does a bounded amount of work.
"""

from __future__ import annotations

import math
import sys
from typing import Final

from aspectfit.fitting.models import RationalApproximation
from aspectfit.ratio.simplify import gcd

MAX_ITERATIONS: Final = 25


def approximate_fraction(value: float, max_denominator: int) -> RationalApproximation:
    """Find the convergent of ``value`` closest to it with a bounded denominator.

    Args:
        value: Positive decimal ratio
        max_denominator: Largest denominator allowed in the result

    Returns:
        The best positive convergent found (``1/max_denominator`` for values
        too small to have one), or ``(0, 0)`` for non-finite/non-positive
        input or a bound below 1
    """
    if not math.isfinite(value) or value <= 0 or max_denominator < 1:
        return RationalApproximation(0, 0)

    best_numerator, best_denominator = 1, 1
    best_error = abs(value - 1.0)

    # h: numerators, k: denominators of the last two convergents
    h1, h0 = 1, 0
    k1, k0 = 0, 1
    x = value
    for _ in range(MAX_ITERATIONS):
        a = math.floor(x)
        h2 = a * h1 + h0
        k2 = a * k1 + k0
        if k2 > max_denominator:
            break

        # 0/1 is the first convergent of any value below 1; never a usable label
        if h2 > 0:
            error = abs(value - h2 / k2)
            if error < best_error:
                best_error = error
                best_numerator, best_denominator = h2, k2

        remainder = x - a
        if remainder < sys.float_info.epsilon:
            break
        x = 1 / remainder
        h0, h1 = h1, h2
        k0, k1 = k1, k2

    # Below 1 / max_denominator only 0/1 fits the bound, so nothing has
    # beaten the seed; use the nearest positive fraction over max_denominator
    if (best_numerator, best_denominator) == (1, 1) and value < 1:
        numerator = max(1, round(value * max_denominator))
        divisor = gcd(numerator, max_denominator)
        numerator, denominator = numerator // divisor, max_denominator // divisor
        if abs(value - numerator / denominator) < best_error:
            best_numerator, best_denominator = numerator, denominator

    return RationalApproximation(best_numerator, best_denominator)
