"""Scoring functions for candidate fractions.

Every score is a pure function of ``(numerator, denominator, error)``.  All of
them are computed for each candidate regardless of the active sort policy so
that results are self-describing.

``precision_rank``
    Leading decimal digits of agreement, ``floor(-log10(error))``; ``10`` for
    an exact match.  Errors above 1 give negative ranks.
``comprehensive_score``
    ``precision_score * denominator_score / 10`` in ``[0, 10]``.  The
    denominator score is a logistic curve centred at 50.
``length_precision_score``
    ``precision_score / (1 + 2*exp(total_digit_length - 4))``; short
    numerator/denominator pairs win.
"""
from __future__ import annotations

import math

from . import constants as C
from .arithmetic import digit_count
from .candidate import Candidate, ScoredCandidate

__all__ = [
    "precision_rank",
    "precision_score",
    "denominator_score",
    "total_digit_length",
    "comprehensive_score",
    "length_precision_score",
    "score_candidate",
    "score_candidates",
]

# (minimum rank, score) pairs checked top-down; anything below 2 scores 1.
_PRECISION_STEPS = ((6, 10.0), (5, 9.0), (4, 8.0), (3, 5.0), (2, 3.0))


def precision_rank(error: float) -> int:
    if error == 0:
        return C.EXACT_PRECISION_RANK
    return math.floor(-math.log10(error))


def precision_score(rank: int) -> float:
    """Map a precision rank onto the 1–10 step scale."""
    for threshold, score in _PRECISION_STEPS:
        if rank >= threshold:
            return score
    return 1.0


def _inverse_one_plus(weight: float, z: float) -> float:
    """``1 / (1 + weight*exp(z))`` without overflowing for large ``z``."""
    if z > 0:
        e = math.exp(-z)
        return e / (e + weight)
    return 1.0 / (1.0 + weight * math.exp(z))


def denominator_score(denominator: int) -> float:
    return 10.0 * _inverse_one_plus(1.0, (denominator - 50) / 10)


def total_digit_length(numerator: int, denominator: int) -> int:
    return digit_count(numerator) + digit_count(denominator)


def comprehensive_score(error: float, denominator: int) -> float:
    return precision_score(precision_rank(error)) * denominator_score(denominator) / 10


def length_precision_score(numerator: int, denominator: int, error: float) -> float:
    total_len = total_digit_length(numerator, denominator)
    return precision_score(precision_rank(error)) * _inverse_one_plus(2.0, total_len - 4)


def score_candidate(candidate: Candidate) -> ScoredCandidate:
    n, d, err = candidate.numerator, candidate.denominator, candidate.error
    return ScoredCandidate(
        numerator=n,
        denominator=d,
        error=err,
        comprehensive_score=comprehensive_score(err, d),
        length_precision_score=length_precision_score(n, d, err),
        precision_rank=precision_rank(err),
        total_digit_length=total_digit_length(n, d),
    )


def score_candidates(candidates: list[Candidate]) -> list[ScoredCandidate]:
    return [score_candidate(c) for c in candidates]
