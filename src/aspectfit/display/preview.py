"""Map a resolution onto a bounded preview box."""

from __future__ import annotations

import math
from typing import Final

from aspectfit.fitting.models import PreviewBox

PREVIEW_SIZE: Final = 220
PREVIEW_MIN: Final = 8


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def map_to_preview(
    width: int,
    height: int,
    box_size: int = PREVIEW_SIZE,
    min_size: int = PREVIEW_MIN,
) -> PreviewBox:
    """Scale a resolution into a square box, preserving aspect ratio.

    The longer side fills the box. The shorter side never drops below
    ``min_size`` so extreme ratios still produce a visible preview.

    Args:
        width: Resolution width
        height: Resolution height
        box_size: Side length of the bounding box
        min_size: Smallest allowed display dimension

    Returns:
        Display size, or ``PreviewBox(0, 0)`` for a non-positive input
    """
    if width <= 0 or height <= 0:
        return PreviewBox(0, 0)

    ratio = width / height
    if ratio >= 1:
        return PreviewBox(box_size, max(min_size, _round_half_up(box_size / ratio)))
    return PreviewBox(max(min_size, _round_half_up(box_size * ratio)), box_size)
