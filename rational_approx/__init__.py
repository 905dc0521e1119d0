"""Public package interface for the rational approximation finder.

Importing this package gives you easy access to the top‑level helpers without
having to know the internal module layout.

Typical usage
-------------
>>> from rational_approx import approximate, set_sort_policy
>>> set_sort_policy("comprehensive")
>>> approximate(3.14159265)[0]
"""
from importlib.metadata import version as _version  # type: ignore

from .candidate import Candidate, ScoredCandidate
from .pipeline import approximate, evaluate  # re‑export for convenience
from .pipeline_state import ApproximationState
from .ranking import SortPolicy, get_sort_policy, set_sort_policy

__all__ = [
    "approximate",
    "evaluate",
    "set_sort_policy",
    "get_sort_policy",
    "SortPolicy",
    "Candidate",
    "ScoredCandidate",
    "ApproximationState",
    "__version__",
]

try:
    __version__ = _version("rational_approx")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
