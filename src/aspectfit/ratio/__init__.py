"""Ratio simplification, approximation, control ranges and presets."""

from aspectfit.ratio.approximate import approximate_fraction
from aspectfit.ratio.presets import DEFAULT_PRESETS, RatioPreset, parse_ratio_label
from aspectfit.ratio.range import clamp, derive_ratio_range, seed_ratio
from aspectfit.ratio.simplify import gcd, simplify_ratio

__all__ = [
    "DEFAULT_PRESETS",
    "RatioPreset",
    "approximate_fraction",
    "clamp",
    "derive_ratio_range",
    "gcd",
    "parse_ratio_label",
    "seed_ratio",
    "simplify_ratio",
]
