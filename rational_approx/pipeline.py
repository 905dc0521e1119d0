"""Linear pipeline orchestration of the approximation steps."""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Callable

from . import constants as C
from .candidate import ScoredCandidate
from .continued_fraction import convergents, to_continued_fraction
from .pipeline_state import ApproximationState
from .ranking import SortPolicy, coerce_policy, get_sort_policy, rank_candidates
from .scoring import score_candidates
from .search import aggregate_candidates, brute_force_candidates

__all__ = ["approximate", "evaluate"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Simple sequential graph executor.
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Graph:
    steps: list[Callable[[ApproximationState], ApproximationState]]


class _Runner:
    """Execute each pipeline step in order, logging progress at DEBUG."""

    def __init__(self, graph: _Graph) -> None:
        self.graph = graph
        self.logger = logging.getLogger(__name__)

    def run(self, state: ApproximationState) -> ApproximationState:
        steps = list(self.graph.steps)
        for idx, step in enumerate(steps):
            name = step.__name__.replace("_step_", "").lstrip("_")
            self.logger.debug(
                "[rational-approx] step %d/%d: %s", idx + 1, len(steps), name
            )
            state = step(state)
        return state


# ---------------------------------------------------------------------------
# Pipeline steps – each mutates and returns ``state``.
# ---------------------------------------------------------------------------


def _step_expand(state: ApproximationState) -> ApproximationState:
    state.terms = to_continued_fraction(state.x, state.term_cap)
    logger.debug("[rational-approx] continued fraction: %s", state.terms)
    return state


def _step_convergents(state: ApproximationState) -> ApproximationState:
    state.convergents = convergents(state.terms)
    return state


def _step_search(state: ApproximationState) -> ApproximationState:
    state.brute_force = brute_force_candidates(state.x, state.brute_force_bound)
    return state


def _step_aggregate(state: ApproximationState) -> ApproximationState:
    state.candidates = aggregate_candidates(
        state.x, state.convergents, state.brute_force, state.max_denominator
    )
    return state


def _step_score(state: ApproximationState) -> ApproximationState:
    state.scored = score_candidates(state.candidates)
    return state


def _step_rank(state: ApproximationState) -> ApproximationState:
    state.results = rank_candidates(state.scored, state.policy, state.limit)
    return state


_PIPELINE = _Graph(
    steps=[
        _step_expand,
        _step_convergents,
        _step_search,
        _step_aggregate,
        _step_score,
        _step_rank,
    ]
)


def _check_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def evaluate(
    x: float,
    max_denominator_for_convergents: int = C.DEFAULT_MAX_DENOMINATOR,
    brute_force_denominator_bound: int = C.DEFAULT_BRUTE_FORCE_BOUND,
    continued_fraction_term_cap: int = C.DEFAULT_TERM_CAP,
    *,
    policy: SortPolicy | str | None = None,
    limit: int = C.RESULT_LIMIT,
) -> ApproximationState:
    """Run the full pipeline and return every intermediate result.

    ``policy`` overrides the process-wide sort policy for this call only.
    Raises ``ValueError`` for a non-finite ``x`` or non-positive bounds.
    """
    if isinstance(x, bool) or not isinstance(x, numbers.Real) or not math.isfinite(x):
        raise ValueError(f"x must be a finite real number, got {x!r}")
    _check_positive("max_denominator_for_convergents", max_denominator_for_convergents)
    _check_positive("brute_force_denominator_bound", brute_force_denominator_bound)
    _check_positive("continued_fraction_term_cap", continued_fraction_term_cap)
    _check_positive("limit", limit)

    state = ApproximationState(
        x=float(x),
        max_denominator=int(max_denominator_for_convergents),
        brute_force_bound=int(brute_force_denominator_bound),
        term_cap=int(continued_fraction_term_cap),
        policy=get_sort_policy() if policy is None else coerce_policy(policy),
        limit=int(limit),
    )
    state = _Runner(_PIPELINE).run(state)
    logger.info(
        "[rational-approx] x=%r policy=%s: %d candidates, returning %d",
        state.x,
        state.policy.value,
        state.pool_size,
        len(state.results),
    )
    return state


def approximate(
    x: float,
    max_denominator_for_convergents: int = C.DEFAULT_MAX_DENOMINATOR,
    brute_force_denominator_bound: int = C.DEFAULT_BRUTE_FORCE_BOUND,
    continued_fraction_term_cap: int = C.DEFAULT_TERM_CAP,
    *,
    policy: SortPolicy | str | None = None,
    limit: int = C.RESULT_LIMIT,
) -> list[ScoredCandidate]:
    """Return the best irreducible fractions for ``x``, ranked and truncated.

    >>> [(c.numerator, c.denominator) for c in approximate(0.5)][:1]
    [(1, 2)]
    """
    return evaluate(
        x,
        max_denominator_for_convergents,
        brute_force_denominator_bound,
        continued_fraction_term_cap,
        policy=policy,
        limit=limit,
    ).results
