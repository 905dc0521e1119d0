from __future__ import annotations

"""Candidate fraction models."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Candidate:
    """An irreducible fraction ``numerator/denominator`` and its distance to x."""

    numerator: int
    denominator: int
    error: float

    @property
    def key(self) -> tuple[int, int]:
        return (self.numerator, self.denominator)

    @property
    def value(self) -> float:
        return self.numerator / self.denominator


@dataclass(frozen=True)
class ScoredCandidate(Candidate):
    """Candidate plus every score the ranker can sort on.

    All fields are derived from ``(numerator, denominator, error)`` by
    :func:`rational_approx.scoring.score_candidate`.
    """

    comprehensive_score: float = 0.0
    length_precision_score: float = 0.0
    precision_rank: int = 0
    total_digit_length: int = 2

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["value"] = self.value
        return data
