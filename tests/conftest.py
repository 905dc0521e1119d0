from typing import Iterator

import pytest

from rational_approx import ranking


@pytest.fixture(autouse=True)
def _reset_sort_policy() -> Iterator[None]:
    previous = ranking.get_sort_policy()
    ranking.set_sort_policy("error")
    yield
    ranking.set_sort_policy(previous)
