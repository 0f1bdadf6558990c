"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from aspectfit.constants import DEFAULT_MAX_DENOMINATOR
from aspectfit.ratio.presets import DEFAULT_PRESETS, RatioPreset, parse_ratio_label

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Calculator settings. Every field has a default, so an empty
    config.yaml yields the standard 16-pixel grid around 1216x896.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/aspectfit/config.yaml").expanduser(),
        Path("/etc/aspectfit/config.yaml"),
    ]

    # Base resolution
    default_width: int = Field(1216, gt=0, description="Initial base width in pixels")
    default_height: int = Field(896, gt=0, description="Initial base height in pixels")

    # Fitting
    step: int = Field(16, ge=1, description="Grid size both dimensions must be multiples of")
    legacy_fit: bool = Field(
        False, description="Use the unquantized fitter and skip base quantization"
    )

    # Ratio control
    range_multiplier: float = Field(
        4.0, gt=1.0, description="How far the ratio control may stray from the base ratio"
    )
    slider_positions: int = Field(250, ge=1, description="Discrete positions on the ratio control")
    min_slider_step: float = Field(0.001, gt=0.0, description="Smallest ratio control step")
    max_denominator: int = Field(
        DEFAULT_MAX_DENOMINATOR, ge=1, description="Largest denominator in ratio labels"
    )

    # Preview
    preview_size: int = Field(220, gt=0, description="Preview box side length")
    preview_min: int = Field(8, ge=1, description="Smallest preview dimension")

    presets: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PRESETS),
        description="Named ratio shortcuts such as 16:9",
    )

    # ---- validators ----
    @field_validator("presets")
    @classmethod
    def validate_presets(cls, v: list[str]) -> list[str]:
        for label in v:
            if parse_ratio_label(label) <= 0:
                raise ValueError(f"preset {label!r} is not a W:H ratio")
        return [label.strip() for label in v]

    @model_validator(mode="after")
    def check_preview_min(self) -> UserSettings:
        if self.preview_min > self.preview_size:
            raise ValueError("preview_min cannot exceed preview_size")
        return self

    # ---- convenience methods ----
    def ratio_presets(self) -> list[RatioPreset]:
        """Configured presets as parsed ``RatioPreset`` values."""
        return [RatioPreset.from_label(label) for label in self.presets]

    def find_preset(self, label: str) -> RatioPreset | None:
        """Look up a configured preset by label (whitespace-insensitive).

        Returns:
            The preset, or None if the label is not configured
        """
        wanted = label.replace(" ", "")
        for preset in self.ratio_presets():
            if preset.label.replace(" ", "") == wanted:
                return preset
        return None

    @classmethod
    def find_config(cls) -> Path:
        """Resolve the config file from ASPECTFIT_CONFIG or the search paths.

        Raises:
            FileNotFoundError: If no config file is found
        """
        env_path = os.environ.get("ASPECTFIT_CONFIG")
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"ASPECTFIT_CONFIG points to a missing file: {path}")
            return path
        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        searched = ", ".join(str(p) for p in cls.DEFAULT_CONFIG_PATHS)
        raise FileNotFoundError(f"No aspectfit config found (searched {searched})")

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load calculator settings from a YAML file.

        Args:
            path: Config file; resolved with ``find_config`` when None

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the file cannot be parsed or fails validation
        """
        if path is None:
            path = cls.find_config()

        try:
            data = yaml.safe_load(_interpolate_env(path.read_text()))
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Cannot parse aspectfit config {path}: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"aspectfit config {path} failed validation:\n{err}") from err

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> UserSettings:
        """Load an explicit config file, or fall back to defaults when none is given."""
        if path is None:
            return cls()
        return cls.load(path)
