"""Package‑wide constants and demo assets."""

# Convergents with a larger denominator are dropped before aggregation.
DEFAULT_MAX_DENOMINATOR = 1000

# Brute-force search tries every denominator in 1..DEFAULT_BRUTE_FORCE_BOUND.
DEFAULT_BRUTE_FORCE_BOUND = 100

DEFAULT_TERM_CAP = 10

# Remainder magnitude below which the continued-fraction expansion stops.
EXPANSION_TOLERANCE = 1e-10

RESULT_LIMIT = 15

DEFAULT_SORT_POLICY = "error"

# Precision rank reported for an exact match.
EXACT_PRECISION_RANK = 10

_DEMO_NUMBER = "3.14159265"

__all__ = [
    "DEFAULT_MAX_DENOMINATOR",
    "DEFAULT_BRUTE_FORCE_BOUND",
    "DEFAULT_TERM_CAP",
    "EXPANSION_TOLERANCE",
    "RESULT_LIMIT",
    "DEFAULT_SORT_POLICY",
    "EXACT_PRECISION_RANK",
    "_DEMO_NUMBER",
]
