import pytest

from rational_approx.arithmetic import digit_count, gcd, is_irreducible


@pytest.mark.parametrize(
    "a, b, expected",
    [(12, 8, 4), (17, 5, 1), (0, 5, 5), (5, 0, 5), (0, 0, 0), (270, 192, 6)],
)
def test_gcd(a: int, b: int, expected: int) -> None:
    assert gcd(a, b) == expected


def test_digit_count_ignores_sign() -> None:
    assert digit_count(0) == 1
    assert digit_count(-355) == 3
    assert digit_count(33102) == 5


def test_is_irreducible_uses_absolute_numerator() -> None:
    assert is_irreducible(-1, 2)
    assert not is_irreducible(-2, 4)
    assert not is_irreducible(0, 3)
    assert is_irreducible(0, 1)


def test_brute_force_search_filters_with_is_irreducible(monkeypatch: pytest.MonkeyPatch) -> None:
    from rational_approx import search

    seen: list[tuple[int, int]] = []

    def spy(n: int, d: int) -> bool:
        seen.append((n, d))
        return is_irreducible(n, d)

    monkeypatch.setattr(search, "is_irreducible", spy)
    found = search.brute_force_candidates(0.5, 4)
    assert seen == [(1, 1), (1, 2), (2, 3), (2, 4)]
    assert [c.key for c in found] == [(1, 1), (1, 2), (2, 3)]
