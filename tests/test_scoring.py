from itertools import product

import pytest

from stat_core import MAX_SCORE, MIN_SCORE, drop_lowest, score_windows


def test_drop_lowest_example() -> None:
    assert drop_lowest([3, 1, 4, 1]) == 8


def test_drop_lowest_subtracts_one_tied_minimum() -> None:
    assert drop_lowest([2, 2, 2, 2]) == 6
    assert drop_lowest((6, 6, 6, 6)) == 18


def test_drop_lowest_bounds_over_every_window() -> None:
    for window in product(range(1, 7), repeat=4):
        score = drop_lowest(window)
        assert MIN_SCORE <= score <= MAX_SCORE
        assert score == sum(window) - min(window)


def test_drop_lowest_rejects_empty_window() -> None:
    with pytest.raises(ValueError):
        drop_lowest([])


def test_score_windows_is_lazy_and_ordered() -> None:
    scores = score_windows(iter([(3, 1, 4, 1), (1, 1, 1, 1), (6, 5, 4, 3)]))
    assert next(scores) == 8
    assert list(scores) == [3, 15]
