"""Continued-fraction expansion and convergents."""
from __future__ import annotations

import math
from typing import Sequence

from . import constants as C

__all__ = ["to_continued_fraction", "convergents"]


def to_continued_fraction(
    x: float,
    max_terms: int = C.DEFAULT_TERM_CAP,
    tolerance: float = C.EXPANSION_TOLERANCE,
) -> list[int]:
    """Expand ``x`` into at most ``max_terms`` continued-fraction terms.

    The expansion works on ``|x|`` and stops early once the fractional
    remainder drops below ``tolerance``.  For negative ``x`` only the leading
    term is negated, so ``-0.5`` expands to ``[0, 2]`` rather than the
    canonical ``[-1, 2]``.  ``0`` expands to an empty list.
    """
    terms: list[int] = []
    current = abs(x)

    for _ in range(max_terms):
        if current == 0:
            break
        integer_part = math.floor(current)
        terms.append(integer_part)
        current = current - integer_part

        if abs(current) < tolerance:
            break
        current = 1 / current

    if x < 0 and terms:
        terms[0] = -terms[0]
    return terms


def convergents(terms: Sequence[int]) -> list[tuple[int, int]]:
    """Return ``(h_i, k_i)`` for every prefix of ``terms``.

    Uses the standard recurrence seeded with ``h_{-1}=1, h_{-2}=0`` and
    ``k_{-1}=0, k_{-2}=1``.  Every pair is in lowest terms.
    """
    result: list[tuple[int, int]] = []
    h_prev2, h_prev1 = 0, 1
    k_prev2, k_prev1 = 1, 0

    for a in terms:
        h = a * h_prev1 + h_prev2
        k = a * k_prev1 + k_prev2
        result.append((h, k))

        h_prev2, h_prev1 = h_prev1, h
        k_prev2, k_prev1 = k_prev1, k

    return result
