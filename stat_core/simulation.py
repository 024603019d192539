"""Trial runners for single rolls and Monte Carlo averages."""

from __future__ import annotations

from typing import Union

from .dice import RandomSource
from .models import Accumulator, Outcome
from .strategy import Strategy

StrategyLike = Union[str, Strategy]


def run_trial(strategy: StrategyLike, source: RandomSource) -> Outcome:
    """Roll one set of six ability scores.

    Parameters
    ----------
    strategy:
        Strategy member or name selecting the rolling method.
    source:
        ``random.Random`` instance or iterable of die values.
    """

    provider = Strategy.from_name(strategy).provider(source)
    return provider()


def run_trials(strategy: StrategyLike, source: RandomSource, runs: int) -> Accumulator:
    """Run ``runs`` trials from one continuous die stream and accumulate them.

    Parameters
    ----------
    strategy:
        Strategy member or name selecting the rolling method.
    source:
        ``random.Random`` instance or iterable of die values. All trials share
        a single stream over this source.
    runs:
        Number of trials; must be positive so the result can be averaged.

    Raises
    ------
    ValueError
        If ``runs`` is smaller than one.
    """

    if runs < 1:
        raise ValueError(f"Number of trials must be at least 1, received {runs}")
    provider = Strategy.from_name(strategy).provider(source)
    accumulator = Accumulator()
    for _ in range(runs):
        accumulator.incorporate(provider())
    return accumulator
