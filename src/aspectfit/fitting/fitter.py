"""Resolution fitting under a pixel budget.

Two fitters live here:

- ``fit_resolution``: the canonical quantized fitter. Both dimensions are
  multiples of ``step`` and the result is the better of the two lattice
  points nearest the ideal continuous solution.
- ``fit_resolution_legacy``: the older unquantized fitter that floors the
  ideal solution and shrinks the height once if the budget is exceeded.

They produce different outputs for the same input and are selected
explicitly by the caller (see ``UserSettings.legacy_fit``).
"""

from __future__ import annotations

import logging
import math
from typing import Final

from aspectfit.fitting.models import Resolution

logger: Final = logging.getLogger(__name__)

DEFAULT_STEP: Final = 16

# Grid units of float noise tolerated before rounding up to the next step
_CEIL_TOLERANCE: Final = 1e-9


def quantize_dimension(value: int, step: int = DEFAULT_STEP) -> int:
    """Floor a dimension onto the step grid.

    Returns 0 when the result would fall below one step (or when
    ``step`` is not positive).
    """
    if step < 1 or value < step:
        return 0
    return (value // step) * step


def _ceil_to_step(value: float, step: int) -> int:
    return max(1, math.ceil(value / step - _CEIL_TOLERANCE)) * step


def _is_usable(pixel_budget: int, target_ratio: float) -> bool:
    return pixel_budget > 0 and math.isfinite(target_ratio) and target_ratio > 0


def _height_up_candidate(pixel_budget: int, ideal_height: float, step: int) -> Resolution:
    if not math.isfinite(ideal_height):
        return Resolution.zero()
    height = _ceil_to_step(ideal_height, step)
    width = (pixel_budget // height) // step * step
    if width < step:
        return Resolution.zero()
    return Resolution(width, height)


def _width_up_candidate(pixel_budget: int, ideal_width: float, step: int) -> Resolution:
    if not math.isfinite(ideal_width):
        return Resolution.zero()
    width = _ceil_to_step(ideal_width, step)
    height = (pixel_budget // width) // step * step
    if height < step:
        return Resolution.zero()
    return Resolution(width, height)


def fit_resolution(
    pixel_budget: int, target_ratio: float, step: int = DEFAULT_STEP
) -> Resolution:
    """Fit a step-quantized resolution to a target ratio within a pixel budget.

    One candidate rounds the ideal height up to the grid and takes the
    widest grid width that stays within budget; the other does the same
    with the roles swapped. The candidate whose ratio is closer to
    ``target_ratio`` wins, and an exact tie goes to the larger pixel count.

    Args:
        pixel_budget: Maximum total pixel count
        target_ratio: Desired width / height
        step: Grid size both dimensions must be multiples of

    Returns:
        The fitted resolution, or ``Resolution(0, 0)`` when no grid point
        fits
    """
    if not _is_usable(pixel_budget, target_ratio) or step < 1:
        return Resolution.zero()

    ideal_height = math.sqrt(pixel_budget / target_ratio)
    ideal_width = math.sqrt(pixel_budget * target_ratio)

    candidates = [
        c
        for c in (
            _height_up_candidate(pixel_budget, ideal_height, step),
            _width_up_candidate(pixel_budget, ideal_width, step),
        )
        if c.is_valid
    ]
    if not candidates:
        logger.debug(
            "No %d-step fit for budget=%d ratio=%.6f", step, pixel_budget, target_ratio
        )
        return Resolution.zero()

    return min(candidates, key=lambda c: (abs(c.ratio - target_ratio), -c.pixels))


def fit_resolution_legacy(pixel_budget: int, target_ratio: float) -> Resolution:
    """Fit an unquantized resolution (legacy mode).

    Floors the ideal height and width (minimum 1 each) and, if the product
    overshoots the budget, recomputes the height from the width once.
    Lowering the height only lowers the product, so one pass suffices.
    """
    if not _is_usable(pixel_budget, target_ratio):
        return Resolution.zero()

    ideal_height = math.sqrt(pixel_budget / target_ratio)
    if not math.isfinite(ideal_height):
        return Resolution.zero()

    height = max(1, math.floor(ideal_height))
    width = max(1, math.floor(height * target_ratio))
    if width * height > pixel_budget:
        height = pixel_budget // width
    if height < 1:
        return Resolution.zero()
    return Resolution(width, height)
