from __future__ import annotations

from dataclasses import dataclass, field

from . import constants as C
from .candidate import Candidate, ScoredCandidate
from .ranking import SortPolicy


@dataclass
class ApproximationState:
    """Typed container for data flowing through the pipeline."""

    # Inputs
    x: float = 0.0
    max_denominator: int = C.DEFAULT_MAX_DENOMINATOR
    brute_force_bound: int = C.DEFAULT_BRUTE_FORCE_BOUND
    term_cap: int = C.DEFAULT_TERM_CAP
    policy: SortPolicy = SortPolicy(C.DEFAULT_SORT_POLICY)
    limit: int = C.RESULT_LIMIT

    # Intermediate results
    terms: list[int] = field(default_factory=list)
    convergents: list[tuple[int, int]] = field(default_factory=list)
    brute_force: list[Candidate] = field(default_factory=list)
    candidates: list[Candidate] = field(default_factory=list)
    scored: list[ScoredCandidate] = field(default_factory=list)

    # Final ranked output
    results: list[ScoredCandidate] = field(default_factory=list)

    @property
    def pool_size(self) -> int:
        """Number of distinct candidates before truncation."""
        return len(self.scored)
