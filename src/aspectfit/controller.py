"""Event-driven shell around the resolution-fitting core.

``ResolutionCalculator`` owns the only mutable state (the raw base inputs
and the selected ratio). Every update stores new input and every read
recomputes the full ``CalculatorView`` from that state through the pure
core functions: state -> compute -> render.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Final

from aspectfit.display.preview import map_to_preview
from aspectfit.fitting.fitter import fit_resolution, fit_resolution_legacy, quantize_dimension
from aspectfit.fitting.models import (
    PreviewBox,
    RationalApproximation,
    RatioRange,
    Resolution,
    SimplifiedRatio,
)
from aspectfit.ratio.approximate import approximate_fraction
from aspectfit.ratio.range import derive_ratio_range, seed_ratio
from aspectfit.ratio.simplify import simplify_ratio
from aspectfit.settings.user import UserSettings
from aspectfit.utils.formatting import (
    format_decimal,
    format_number,
    format_ratio_display,
    parse_dimension,
)

logger: Final = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """Raw calculator inputs as last entered."""

    width_input: str
    height_input: str
    ratio: float = 0.0


@dataclass(frozen=True)
class CalculatorView:
    """Everything derived from one ``CalculatorState``."""

    base: Resolution
    base_ratio: float
    base_label: SimplifiedRatio
    ratio_range: RatioRange
    ratio: float
    ratio_label: RationalApproximation
    resolution: Resolution
    preview: PreviewBox

    def to_dict(self) -> dict[str, Any]:
        """Plain data for JSON/YAML output."""
        return {
            "base": {**asdict(self.base), "pixels": self.base.pixels},
            "base_ratio": self.base_ratio,
            "base_label": asdict(self.base_label),
            "ratio_range": asdict(self.ratio_range),
            "ratio": self.ratio,
            "ratio_label": asdict(self.ratio_label),
            "resolution": {**asdict(self.resolution), "pixels": self.resolution.pixels},
            "preview": asdict(self.preview),
        }

    def display_fields(self) -> dict[str, str]:
        """Formatted text for each output field."""
        return {
            "base_width": format_number(self.base.width),
            "base_height": format_number(self.base.height),
            "base_pixels": format_number(self.base.pixels),
            "base_ratio": format_ratio_display(
                self.base_ratio, self.base_label.numerator, self.base_label.denominator
            ),
            "ratio": format_ratio_display(
                self.ratio, self.ratio_label.numerator, self.ratio_label.denominator
            ),
            "range_min": format_decimal(self.ratio_range.minimum),
            "range_max": format_decimal(self.ratio_range.maximum),
            "range_step": format_decimal(self.ratio_range.step),
            "new_width": format_number(self.resolution.width),
            "new_height": format_number(self.resolution.height),
            "new_pixels": format_number(self.resolution.pixels),
            "preview_width": f"{self.preview.width}px",
            "preview_height": f"{self.preview.height}px",
        }


class ResolutionCalculator:
    """Alternate-resolution calculator driven by input events.

    Typical use:

        calc = ResolutionCalculator()
        calc.update_base("1920", "1080")
        calc.apply_preset("4:3")
        view = calc.render()
    """

    def __init__(self, settings: UserSettings | None = None):
        """Initialize with settings and seed the state from the default base.

        Args:
            settings: Calculator settings (default: built-in defaults)
        """
        self.settings = settings or UserSettings()
        self.state = CalculatorState(
            width_input=str(self.settings.default_width),
            height_input=str(self.settings.default_height),
        )
        self.update_base(self.state.width_input, self.state.height_input)

    # ---- input events ----
    def update_base(self, width: str | float | int, height: str | float | int) -> CalculatorView:
        """Store new base inputs and reseed the ratio to the base ratio."""
        self.state.width_input = str(width)
        self.state.height_input = str(height)

        base = self._base_resolution()
        base_ratio = base.ratio
        ratio_range = self._ratio_range(base, base_ratio)
        self.state.ratio = seed_ratio(base_ratio, ratio_range)
        logger.debug(
            "Base %dx%d (%d px), ratio seeded to %.6f",
            base.width,
            base.height,
            base.pixels,
            self.state.ratio,
        )
        return self.render()

    def update_ratio(self, value: float) -> CalculatorView:
        """Select a ratio, clamped to the current range."""
        base = self._base_resolution()
        ratio_range = self._ratio_range(base, base.ratio)
        self.state.ratio = seed_ratio(value, ratio_range)
        logger.debug("Ratio %.6f selected (requested %.6f)", self.state.ratio, value)
        return self.render()

    def apply_preset(self, label: str) -> CalculatorView:
        """Select a configured preset ratio.

        Unknown labels leave the state unchanged.
        """
        preset = self.settings.find_preset(label)
        if preset is None or not preset.is_valid:
            logger.debug("Ignoring unknown preset %r", label)
            return self.render()
        return self.update_ratio(preset.ratio)

    # ---- derivation ----
    def _base_resolution(self) -> Resolution:
        width = parse_dimension(self.state.width_input)
        height = parse_dimension(self.state.height_input)
        if not self.settings.legacy_fit:
            width = quantize_dimension(width, self.settings.step)
            height = quantize_dimension(height, self.settings.step)
        if width <= 0 or height <= 0:
            return Resolution.zero()
        return Resolution(width, height)

    def _ratio_range(self, base: Resolution, base_ratio: float) -> RatioRange:
        return derive_ratio_range(
            base_ratio,
            base.pixels,
            multiplier=self.settings.range_multiplier,
            positions=self.settings.slider_positions,
            min_step=self.settings.min_slider_step,
        )

    def fit(self, pixel_budget: int, ratio: float) -> Resolution:
        """Fit with the configured fitter (quantized or legacy)."""
        if self.settings.legacy_fit:
            return fit_resolution_legacy(pixel_budget, ratio)
        return fit_resolution(pixel_budget, ratio, self.settings.step)

    def render(self) -> CalculatorView:
        """Recompute every derived value from the current state."""
        base = self._base_resolution()
        base_ratio = base.ratio
        ratio = self.state.ratio
        resolution = self.fit(base.pixels, ratio)
        return CalculatorView(
            base=base,
            base_ratio=base_ratio,
            base_label=simplify_ratio(base.width, base.height),
            ratio_range=self._ratio_range(base, base_ratio),
            ratio=ratio,
            ratio_label=approximate_fraction(ratio, self.settings.max_denominator),
            resolution=resolution,
            preview=map_to_preview(
                resolution.width,
                resolution.height,
                self.settings.preview_size,
                self.settings.preview_min,
            ),
        )
