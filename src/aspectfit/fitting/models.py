"""Value types shared by the ratio and fitting modules.

Every type here is a frozen dataclass. Instances are recomputed from
scratch on each call and never mutated; invalid results are represented
by zero-valued sentinels rather than exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resolution:
    """A width/height pair in pixels.

    ``Resolution(0, 0)`` is the "no valid fit" sentinel. If either
    component is non-positive the whole resolution is treated as invalid.
    """

    width: int
    height: int

    @classmethod
    def zero(cls) -> Resolution:
        """Return the invalid resolution sentinel."""
        return cls(0, 0)

    @property
    def is_valid(self) -> bool:
        """Whether both dimensions are positive."""
        return self.width > 0 and self.height > 0

    @property
    def pixels(self) -> int:
        """Total pixel count (0 for an invalid resolution)."""
        return self.width * self.height if self.is_valid else 0

    @property
    def ratio(self) -> float:
        """Aspect ratio width / height (0.0 for an invalid resolution)."""
        return self.width / self.height if self.is_valid else 0.0


@dataclass(frozen=True)
class SimplifiedRatio:
    """Reduced integer ratio; ``(0, 0)`` means undefined."""

    numerator: int
    denominator: int

    @property
    def is_defined(self) -> bool:
        return self.numerator > 0 and self.denominator > 0

    def __str__(self) -> str:
        return f"{self.numerator}:{self.denominator}"


@dataclass(frozen=True)
class RationalApproximation:
    """Closest simple fraction to a decimal ratio; ``(0, 0)`` means undefined."""

    numerator: int
    denominator: int

    @property
    def is_defined(self) -> bool:
        return self.numerator > 0 and self.denominator > 0

    @property
    def value(self) -> float:
        """Decimal value of the fraction (0.0 when undefined)."""
        return self.numerator / self.denominator if self.is_defined else 0.0

    def __str__(self) -> str:
        return f"{self.numerator}:{self.denominator}"


@dataclass(frozen=True)
class RatioRange:
    """Legal domain and granularity of a ratio-selection control.

    A range with ``enabled=False`` is the disabled marker: the caller must
    disable the control instead of using the bounds.
    """

    minimum: float
    maximum: float
    step: float
    enabled: bool = True

    @classmethod
    def disabled(cls) -> RatioRange:
        """Return the disabled marker with nominal bounds."""
        return cls(0.0, 1.0, 0.01, enabled=False)


@dataclass(frozen=True)
class PreviewBox:
    """On-screen preview size in display units."""

    width: int
    height: int
