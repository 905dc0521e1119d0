"""Internal helpers for input parsing and result formatting."""
from __future__ import annotations

import math
import random

from .candidate import ScoredCandidate
from .ranking import SortPolicy, coerce_policy

__all__ = [
    "NO_RESULTS_MESSAGE",
    "parse_number",
    "random_number_text",
    "decimal_text",
    "error_text",
    "score_label",
]

NO_RESULTS_MESSAGE = "Please enter a number"


# ---------------------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------------------

def parse_number(text: str | None) -> float | None:
    """Return ``text`` as a finite float, or ``None`` when it is not one.

    Empty and non-numeric input means "no computation"; callers show
    :data:`NO_RESULTS_MESSAGE` instead of raising.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def random_number_text(rng: random.Random | None = None) -> str:
    """Random value in ``[0, 1)`` rendered with 10 decimals."""
    value = (rng or random).random()
    return f"{value:.10f}"


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

def decimal_text(candidate: ScoredCandidate) -> str:
    return f"{candidate.value:.6f}"


def error_text(candidate: ScoredCandidate) -> str:
    return f"{candidate.error:.3e}"


def score_label(candidate: ScoredCandidate, policy: SortPolicy | str) -> str | None:
    """Score line shown next to a result, or ``None`` when the policy has none."""
    policy = coerce_policy(policy)
    if policy is SortPolicy.COMPREHENSIVE:
        return f"comprehensive: {candidate.comprehensive_score:.2f}"
    if policy is SortPolicy.LENGTH_PRECISION:
        return f"length x precision: {candidate.length_precision_score:.2f}"
    if policy is SortPolicy.PRECISION_THEN_SHORTER:
        return (
            f"precision: {candidate.precision_rank} digits, "
            f"total length: {candidate.total_digit_length}"
        )
    return None
