"""Bounds and granularity for a ratio-selection control."""

from __future__ import annotations

from typing import Final

from aspectfit.fitting.models import RatioRange

RANGE_MULTIPLIER: Final = 4
SLIDER_POSITIONS: Final = 250
MIN_SLIDER_STEP: Final = 0.001


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return min(high, max(low, value))


def derive_ratio_range(
    base_ratio: float,
    pixel_budget: int,
    multiplier: float = RANGE_MULTIPLIER,
    positions: int = SLIDER_POSITIONS,
    min_step: float = MIN_SLIDER_STEP,
) -> RatioRange:
    """Derive the selectable ratio range around a base ratio.

    The range spans a factor of ``multiplier`` either side of the base
    ratio, clamped so the extremes stay realizable with a one pixel
    minimum dimension (``1 / pixel_budget`` to ``pixel_budget``).

    Args:
        base_ratio: Width / height of the base resolution
        pixel_budget: Pixel count of the base resolution
        multiplier: How far the range may stray from the base ratio
        positions: Number of discrete positions across the range
        min_step: Lower bound on the step size

    Returns:
        The range, or ``RatioRange.disabled()`` when there is no valid base
    """
    if base_ratio <= 0 or pixel_budget <= 0:
        return RatioRange.disabled()

    minimum = max(1 / pixel_budget, base_ratio / multiplier)
    maximum = min(float(pixel_budget), base_ratio * multiplier)
    step = max(min_step, (maximum - minimum) / positions)
    return RatioRange(minimum, maximum, step)


def seed_ratio(ratio: float, ratio_range: RatioRange) -> float:
    """Clamp a ratio into an enabled range; 0.0 for a disabled one."""
    if not ratio_range.enabled:
        return 0.0
    return clamp(ratio, ratio_range.minimum, ratio_range.maximum)
