"""Common utility functions and helpers for the aspectfit package."""

from aspectfit.utils.formatting import (
    format_decimal,
    format_number,
    format_ratio_display,
    parse_dimension,
)

__all__ = [
    "format_decimal",
    "format_number",
    "format_ratio_display",
    "parse_dimension",
]
