"""Alternate resolution calculator.

Fits a resolution to a target aspect ratio under a pixel budget, with
both dimensions on a fixed step grid, and labels ratios as simple
fractions. The core functions are pure and never raise for numeric
input; invalid results come back as zero-valued sentinels.
"""

from aspectfit.display.preview import map_to_preview
from aspectfit.fitting import (
    PreviewBox,
    RationalApproximation,
    RatioRange,
    Resolution,
    SimplifiedRatio,
    fit_resolution,
    fit_resolution_legacy,
    quantize_dimension,
)
from aspectfit.ratio import (
    approximate_fraction,
    derive_ratio_range,
    gcd,
    simplify_ratio,
)

__all__ = [
    # types
    "PreviewBox",
    "RationalApproximation",
    "RatioRange",
    "Resolution",
    "SimplifiedRatio",
    # core operations
    "approximate_fraction",
    "derive_ratio_range",
    "fit_resolution",
    "fit_resolution_legacy",
    "gcd",
    "map_to_preview",
    "quantize_dimension",
    "simplify_ratio",
]
