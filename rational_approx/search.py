"""Brute-force candidate search and candidate aggregation."""
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from . import constants as C
from .arithmetic import is_irreducible
from .candidate import Candidate

__all__ = ["brute_force_candidates", "aggregate_candidates"]

logger = logging.getLogger(__name__)


def brute_force_candidates(
    x: float, bound: int = C.DEFAULT_BRUTE_FORCE_BOUND
) -> list[Candidate]:
    """Nearest irreducible fraction for every denominator in ``1..bound``.

    Numerators are rounded half up: ``floor(x*d)`` plus one when the
    fractional part is at least 0.5.  ``x*d - floor(x*d)`` is exact in
    float64, unlike ``x*d + 0.5``.  Pairs that share a factor are skipped
    since their reduced form shows up at a smaller denominator.
    """
    dens = np.arange(1, bound + 1, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = x * dens
        nums = np.floor(scaled)
        nums += (scaled - nums) >= 0.5
    finite = np.isfinite(nums)
    if not finite.all():
        logger.debug("skipping %d denominators with overflowing numerators", int((~finite).sum()))

    out: list[Candidate] = []
    for num_f, den_f in zip(nums[finite], dens[finite]):
        n = int(num_f)
        d = int(den_f)
        if not is_irreducible(n, d):
            continue
        out.append(Candidate(n, d, abs(x - n / d)))
    return out


def aggregate_candidates(
    x: float,
    convergents: Iterable[tuple[int, int]],
    brute_force: Iterable[Candidate],
    max_denominator: int = C.DEFAULT_MAX_DENOMINATOR,
) -> list[Candidate]:
    """Merge convergents and brute-force hits, dropping exact duplicates.

    Convergents above ``max_denominator`` are discarded.  The first occurrence
    of a ``(numerator, denominator)`` pair wins, so convergents take
    precedence over brute-force hits.
    """
    pool: dict[tuple[int, int], Candidate] = {}

    for num, den in convergents:
        assert den != 0, f"zero denominator in convergent {num}/{den}"
        if den > max_denominator:
            continue
        pool.setdefault((num, den), Candidate(num, den, abs(x - num / den)))

    for cand in brute_force:
        assert cand.denominator != 0, f"zero denominator in candidate {cand.key}"
        pool.setdefault(cand.key, cand)

    return list(pool.values())
