import logging
import math

import pytest

from rational_approx import (
    SortPolicy,
    approximate,
    evaluate,
    get_sort_policy,
    set_sort_policy,
)
from rational_approx.arithmetic import gcd

_INPUTS = [0.5, 3.14159265, math.e, -1.41421356, 0.0, 7.0, 123.456, 1e-6, 0.9999]


def test_half_is_found_exactly() -> None:
    results = approximate(0.5)
    match = [c for c in results if c.key == (1, 2)]
    assert len(match) == 1
    assert match[0].error == 0.0
    assert match[0].precision_rank == 10
    assert gcd(1, 2) == 1
    assert results[0].key == (1, 2)


def test_pi_gets_twenty_two_sevenths_or_better() -> None:
    x = 3.14159265
    results = approximate(x)
    assert min(c.error for c in results) <= abs(x - 22 / 7)
    assert (355, 113) in {c.key for c in results}


@pytest.mark.parametrize("x", _INPUTS)
@pytest.mark.parametrize("policy", [p.value for p in SortPolicy])
def test_results_are_irreducible_unique_and_bounded(x: float, policy: str) -> None:
    state = evaluate(x, policy=policy)
    keys = [c.key for c in state.results]
    assert len(keys) == len(set(keys))
    assert len(state.results) <= 15
    assert len(state.results) <= state.pool_size
    for cand in state.results:
        assert cand.denominator > 0
        assert gcd(abs(cand.numerator), cand.denominator) == 1
        assert 0.0 <= cand.comprehensive_score <= 10.0
        assert 0.0 <= cand.length_precision_score <= 10.0


@pytest.mark.parametrize("x", _INPUTS)
def test_denominator_policy_is_non_decreasing(x: float) -> None:
    dens = [c.denominator for c in approximate(x, policy="denominator")]
    assert all(a <= b for a, b in zip(dens, dens[1:]))


@pytest.mark.parametrize("x", _INPUTS)
def test_error_policy_is_non_decreasing(x: float) -> None:
    errs = [c.error for c in approximate(x, policy="error")]
    assert all(a <= b for a, b in zip(errs, errs[1:]))


@pytest.mark.parametrize("x", [0.5, 3.14159265, -2.718281828])
def test_policy_change_only_reorders(x: float) -> None:
    baseline = {c.key for c in approximate(x, policy="error", limit=10_000)}
    for policy in SortPolicy:
        set_sort_policy(policy)
        assert {c.key for c in approximate(x, limit=10_000)} == baseline


def test_global_policy_persists_across_inputs() -> None:
    set_sort_policy("denominator")
    for x in (0.3, 2.71828):
        dens = [c.denominator for c in approximate(x)]
        assert dens == sorted(dens)
    assert get_sort_policy() is SortPolicy.DENOMINATOR


def test_explicit_policy_does_not_touch_global() -> None:
    state = evaluate(0.3, policy="comprehensive")
    assert state.policy is SortPolicy.COMPREHENSIVE
    assert get_sort_policy() is SortPolicy.ERROR


def test_zero_and_integers() -> None:
    assert [c.key for c in approximate(0.0)] == [(0, 1)]
    results = approximate(7.0)
    assert results[0].key == (7, 1)
    assert results[0].error == 0.0


def test_negative_half_finds_exact_fraction() -> None:
    state = evaluate(-0.5)
    assert state.terms == [0, 2]
    assert state.results[0].key == (-1, 2)
    assert state.results[0].error == 0.0


def test_bounds_are_configurable() -> None:
    state = evaluate(math.pi, 10, 5, 3)
    assert state.terms == [3, 7, 15]
    assert all(c.denominator <= 10 for c in state.candidates)
    assert (333, 106) not in {c.key for c in state.candidates}


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "3.5", None, True])
def test_non_finite_or_non_numeric_input_is_rejected(bad: object) -> None:
    with pytest.raises(ValueError, match="finite real number"):
        approximate(bad)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_denominator_for_convergents": 0},
        {"brute_force_denominator_bound": -1},
        {"continued_fraction_term_cap": 0},
        {"limit": 0},
    ],
)
def test_non_positive_bounds_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError, match="positive integer"):
        approximate(0.5, **kwargs)


def test_evaluation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="rational_approx"):
        approximate(0.25)
    messages = [r.getMessage() for r in caplog.records]
    assert any("step 1/6: expand" in m for m in messages)
    assert any("step 6/6: rank" in m for m in messages)
    assert any("policy=error" in m for m in messages)
