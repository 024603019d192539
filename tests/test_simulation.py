import random

import pytest

from stat_core import Outcome, Strategy, run_trial, run_trials


def test_run_trial_uses_named_strategy(dice_for_scores) -> None:
    dice = dice_for_scores([10, 8, 14, 3, 9, 12, 2])
    assert run_trial("drop-twice", dice) == Outcome((3, 8, 9, 10, 12, 14))
    assert run_trial(Strategy.TRADITIONAL, dice) == Outcome((3, 8, 9, 10, 12, 14))


def test_run_trials_draws_from_one_continuous_stream(dice_for_scores) -> None:
    dice = dice_for_scores([1, 2, 3, 4, 5, 6] + [3, 4, 5, 6, 7, 8])
    accumulator = run_trials(Strategy.TRADITIONAL, dice, 2)
    assert accumulator.count == 2
    assert accumulator.render() == (2.0, 3.0, 4.0, 5.0, 6.0, 7.0)


def test_run_trials_matches_manual_provider_loop() -> None:
    accumulator = run_trials("drop-twice", random.Random(3), 250)
    provider = Strategy.DROP_TWICE.provider(random.Random(3))
    outcomes = [provider() for _ in range(250)]
    for index, mean in enumerate(accumulator.render()):
        assert mean == pytest.approx(sum(o[index] for o in outcomes) / 250)


def test_run_trials_requires_positive_count(rng: random.Random) -> None:
    with pytest.raises(ValueError):
        run_trials("traditional", rng, 0)


def test_drop_twice_averages_beat_traditional() -> None:
    traditional = run_trials("traditional", random.Random(21), 4000).render()
    drop_twice = run_trials("drop-twice", random.Random(21), 4000).render()
    assert sum(drop_twice) > sum(traditional)
    assert all(a <= b for a, b in zip(traditional, traditional[1:]))
