"""Integer ratio reduction via the Euclidean algorithm."""

from __future__ import annotations

from aspectfit.fitting.models import SimplifiedRatio


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|``.

    Iterative swap-and-mod; ``gcd(0, 0)`` is 0.
    """
    x, y = abs(a), abs(b)
    while y != 0:
        x, y = y, x % y
    return x


def simplify_ratio(width: int, height: int) -> SimplifiedRatio:
    """Reduce ``width:height`` to coprime integers.

    Args:
        width: Width in pixels
        height: Height in pixels

    Returns:
        The reduced ratio, or ``SimplifiedRatio(0, 0)`` when either input
        is non-positive
    """
    if width <= 0 or height <= 0:
        return SimplifiedRatio(0, 0)
    divisor = gcd(width, height)
    return SimplifiedRatio(width // divisor, height // divisor)
