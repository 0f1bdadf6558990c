"""Resolution fitting under a pixel budget and its value types."""

from aspectfit.fitting.fitter import (
    DEFAULT_STEP,
    fit_resolution,
    fit_resolution_legacy,
    quantize_dimension,
)
from aspectfit.fitting.models import (
    PreviewBox,
    RationalApproximation,
    RatioRange,
    Resolution,
    SimplifiedRatio,
)

__all__ = [
    "DEFAULT_STEP",
    "PreviewBox",
    "RationalApproximation",
    "RatioRange",
    "Resolution",
    "SimplifiedRatio",
    "fit_resolution",
    "fit_resolution_legacy",
    "quantize_dimension",
]
