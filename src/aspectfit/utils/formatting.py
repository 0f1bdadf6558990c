"""Parsing and formatting helpers for calculator inputs and outputs."""

from __future__ import annotations

import math


def parse_dimension(raw: str | float | int | None) -> int:
    """Parse a raw dimension entry.

    Args:
        raw: Text or number as entered by the user

    Returns:
        The value floored to an integer, or 0 when it is empty,
        non-numeric, non-finite or not positive
    """
    if raw is None:
        return 0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value) or value <= 0:
        return 0
    return math.floor(value)


def format_number(value: int | float) -> str:
    """Format a count with en-US thousands separators (e.g. ``1,089,536``)."""
    return f"{value:,}"


def format_ratio_display(ratio: float, numerator: int, denominator: int) -> str:
    """Format a ratio with its fraction label.

    Args:
        ratio: Decimal ratio
        numerator: Label numerator
        denominator: Label denominator

    Returns:
        ``"1.778 (16:9)"`` style text, or ``"0"`` if any part is not positive
    """
    if ratio <= 0 or numerator <= 0 or denominator <= 0:
        return "0"
    return f"{ratio:.3f} ({numerator}:{denominator})"


def format_decimal(value: float, places: int = 6) -> str:
    """Fixed-point text for control attributes (slider min/max/step)."""
    return f"{value:.{places}f}"
