import math

import pytest

from rational_approx.candidate import Candidate
from rational_approx.scoring import (
    comprehensive_score,
    denominator_score,
    length_precision_score,
    precision_rank,
    precision_score,
    score_candidate,
    total_digit_length,
)


@pytest.mark.parametrize(
    "error, expected",
    [(0.0, 10), (0.0012, 2), (0.5, 0), (5.0, -1), (20.0, -2), (3e-7, 6)],
)
def test_precision_rank(error: float, expected: int) -> None:
    assert precision_rank(error) == expected


@pytest.mark.parametrize(
    "rank, expected",
    [(-3, 1), (0, 1), (1, 1), (2, 3), (3, 5), (4, 8), (5, 9), (6, 10), (10, 10), (17, 10)],
)
def test_precision_score_steps(rank: int, expected: float) -> None:
    assert precision_score(rank) == expected


def test_denominator_score_is_logistic_around_fifty() -> None:
    assert denominator_score(50) == pytest.approx(5.0)
    assert denominator_score(1) == pytest.approx(10 / (1 + math.exp(-4.9)))
    assert denominator_score(1) > denominator_score(49) > denominator_score(51)


def test_scores_do_not_overflow_for_huge_values() -> None:
    assert 0.0 <= denominator_score(10**6) < 1e-100
    assert 0.0 <= length_precision_score(10**400, 10**400 + 1, 0.0) < 1e-100


def test_total_digit_length() -> None:
    assert total_digit_length(1, 2) == 2
    assert total_digit_length(-355, 113) == 6


def test_length_precision_score_matches_formula() -> None:
    assert length_precision_score(1, 2, 0.0) == pytest.approx(10 / (1 + 2 * math.exp(-2)))
    assert length_precision_score(355, 113, 2.7e-7) == pytest.approx(10 / (1 + 2 * math.exp(2)))


def test_comprehensive_score_matches_formula() -> None:
    expected = 8 * (10 / (1 + math.exp((7 - 50) / 10))) / 10
    assert comprehensive_score(1.2e-5, 7) == pytest.approx(expected)


def test_score_candidate_fills_every_score() -> None:
    scored = score_candidate(Candidate(22, 7, abs(math.pi - 22 / 7)))
    assert scored.key == (22, 7)
    assert scored.precision_rank == 2
    assert scored.total_digit_length == 3
    assert scored.comprehensive_score == pytest.approx(comprehensive_score(scored.error, 7))
    assert scored.length_precision_score == pytest.approx(
        length_precision_score(22, 7, scored.error)
    )


@pytest.mark.parametrize("den", [1, 2, 10, 50, 99, 100, 500, 1000])
@pytest.mark.parametrize("error", [0.0, 1e-12, 1e-5, 0.003, 0.4, 7.0])
def test_scores_stay_in_range(den: int, error: float) -> None:
    scored = score_candidate(Candidate(1, den, error))
    assert 0.0 <= scored.comprehensive_score <= 10.0
    assert 0.0 <= scored.length_precision_score <= 10.0
