"""High-level entry points used by the CLI and the Streamlit UI."""

from __future__ import annotations

import random
from dataclasses import dataclass
from time import perf_counter
from typing import Optional

from .models import Accumulator, Outcome
from .simulation import StrategyLike, run_trial, run_trials
from .strategy import Strategy


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return the random number generator backing a die stream.

    ``None`` seeds from operating-system entropy; an integer gives a
    reproducible sequence.
    """

    return random.Random(seed)


def strategy_names() -> list[str]:
    """Return the selectable strategy names in declaration order."""

    return [member.value for member in Strategy]


def roll_outcome(strategy: StrategyLike, seed: Optional[int] = None) -> Outcome:
    """Roll a single outcome with a freshly seeded generator."""

    return run_trial(strategy, make_rng(seed))


@dataclass
class AverageComputationResult:
    """Bundle containing the accumulated trials and reporting artefacts."""

    strategy: Strategy
    trials: int
    seed: Optional[int]
    accumulator: Accumulator
    means: tuple[float, ...]
    compute_seconds: float

    def format_means(self) -> str:
        return self.accumulator.format_means()


def compute_averages(
    strategy: StrategyLike,
    trials: int,
    seed: Optional[int] = None,
) -> AverageComputationResult:
    """Average the per-position scores of ``strategy`` over many trials.

    Parameters
    ----------
    strategy:
        Strategy member or name.
    trials:
        Number of Monte Carlo trials, at least one.
    seed:
        Seed forwarded to the RNG; ``None`` draws fresh entropy.

    Returns
    -------
    AverageComputationResult
        Accumulator, means, and timing for the run.

    Raises
    ------
    ValueError
        If the strategy is unknown or ``trials`` is not positive.
    """

    resolved = Strategy.from_name(strategy)
    compute_start = perf_counter()
    accumulator = run_trials(resolved, make_rng(seed), trials)
    means = accumulator.render()
    compute_seconds = perf_counter() - compute_start

    return AverageComputationResult(
        strategy=resolved,
        trials=trials,
        seed=seed,
        accumulator=accumulator,
        means=means,
        compute_seconds=compute_seconds,
    )
