"""Integer helpers shared by the search and scoring code."""
from __future__ import annotations

__all__ = ["gcd", "digit_count", "is_irreducible"]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative ints (Euclid).

    ``gcd(0, 0)`` is ``0``; callers never pass a zero denominator.
    """
    while b != 0:
        a, b = b, a % b
    return a


def digit_count(n: int) -> int:
    """Number of decimal digits in ``|n|`` (``0`` counts as one digit)."""
    return len(str(abs(n)))


def is_irreducible(numerator: int, denominator: int) -> bool:
    return gcd(abs(numerator), denominator) == 1
