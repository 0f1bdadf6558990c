"""Named ratio shortcuts such as ``16:9``."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Final

DEFAULT_PRESETS: Final[tuple[str, ...]] = (
    "1:1",
    "5:4",
    "4:3",
    "3:2",
    "16:9",
    "21:9",
    "4:5",
    "3:4",
    "2:3",
    "9:16",
)

_LABEL_PATTERN: Final = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[:x/]\s*(\d+(?:\.\d+)?)\s*$")


def parse_ratio_label(label: str) -> float:
    """Convert a ``W:H`` label to a decimal ratio.

    ``:``, ``x`` and ``/`` are accepted as separators. Malformed labels and
    zero terms yield 0.0.
    """
    match = _LABEL_PATTERN.match(label)
    if not match:
        return 0.0
    width, height = float(match.group(1)), float(match.group(2))
    if width <= 0 or height <= 0:
        return 0.0
    ratio = width / height
    return ratio if math.isfinite(ratio) else 0.0


@dataclass(frozen=True)
class RatioPreset:
    """A labelled target ratio."""

    label: str
    ratio: float

    @classmethod
    def from_label(cls, label: str) -> RatioPreset:
        return cls(label.strip(), parse_ratio_label(label))

    @property
    def is_valid(self) -> bool:
        return self.ratio > 0
