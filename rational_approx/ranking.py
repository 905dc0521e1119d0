"""Sort policies and the process-wide ranking mode."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Iterable

from . import constants as C
from .candidate import ScoredCandidate

__all__ = [
    "SortPolicy",
    "coerce_policy",
    "set_sort_policy",
    "get_sort_policy",
    "rank_candidates",
]

logger = logging.getLogger(__name__)


class SortPolicy(str, Enum):
    ERROR = "error"
    DENOMINATOR = "denominator"
    COMPREHENSIVE = "comprehensive"
    LENGTH_PRECISION = "lengthPrecision"
    PRECISION_THEN_SHORTER = "precisionThenShorter"


_SORT_KEYS: dict[SortPolicy, Callable[[ScoredCandidate], Any]] = {
    SortPolicy.ERROR: lambda c: c.error,
    SortPolicy.DENOMINATOR: lambda c: c.denominator,
    SortPolicy.COMPREHENSIVE: lambda c: -c.comprehensive_score,
    SortPolicy.LENGTH_PRECISION: lambda c: -c.length_precision_score,
    SortPolicy.PRECISION_THEN_SHORTER: lambda c: (-c.precision_rank, c.total_digit_length),
}

_current_policy: SortPolicy = SortPolicy(C.DEFAULT_SORT_POLICY)


def coerce_policy(policy: SortPolicy | str) -> SortPolicy:
    """Return ``policy`` as a :class:`SortPolicy`, accepting its string value."""
    if isinstance(policy, SortPolicy):
        return policy
    try:
        return SortPolicy(policy)
    except ValueError:
        valid = ", ".join(p.value for p in SortPolicy)
        raise ValueError(f"Unknown sort policy {policy!r}; expected one of: {valid}") from None


def set_sort_policy(policy: SortPolicy | str) -> SortPolicy:
    """Change the ranking mode used by subsequent :func:`approximate` calls."""
    global _current_policy
    _current_policy = coerce_policy(policy)
    logger.debug("sort policy set to %s", _current_policy.value)
    return _current_policy


def get_sort_policy() -> SortPolicy:
    return _current_policy


def rank_candidates(
    candidates: Iterable[ScoredCandidate],
    policy: SortPolicy | str | None = None,
    limit: int = C.RESULT_LIMIT,
) -> list[ScoredCandidate]:
    """Sort ``candidates`` under ``policy`` (current policy if ``None``) and keep ``limit``."""
    resolved = _current_policy if policy is None else coerce_policy(policy)
    ordered = sorted(candidates, key=_SORT_KEYS[resolved])
    return ordered[:limit]
