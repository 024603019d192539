"""Outcome and accumulator types shared by strategies and front ends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice

import numpy as np

from .data import MEAN_DECIMALS, STAT_COUNT


class ExhaustedSourceError(RuntimeError):
    """Raised when the die source stops producing values mid-trial."""


class EmptyAverageError(ValueError):
    """Raised when means are requested before any outcome was incorporated."""


@dataclass(frozen=True)
class Outcome:
    """One simulated set of ability scores."""

    scores: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", tuple(int(score) for score in self.scores))
        if len(self.scores) != STAT_COUNT:
            raise ValueError(
                f"An outcome needs exactly {STAT_COUNT} scores, received {len(self.scores)}"
            )

    @classmethod
    def from_scores(cls, scores: Iterable[int]) -> Outcome:
        """Build an outcome from an iterable holding exactly six scores.

        At most one value beyond the sixth is consumed, so an infinite
        iterable is rejected instead of hanging.
        """

        taken = tuple(int(score) for score in islice(scores, STAT_COUNT + 1))
        return cls(taken)

    def __iter__(self) -> Iterator[int]:
        return iter(self.scores)

    def __len__(self) -> int:
        return len(self.scores)

    def __getitem__(self, index: int) -> int:
        return self.scores[index]

    def __str__(self) -> str:
        return ", ".join(str(score) for score in self.scores)


@dataclass(eq=False)
class Accumulator:
    """Running per-position sums over a sequence of outcomes."""

    count: int = 0
    sums: np.ndarray = field(default_factory=lambda: np.zeros(STAT_COUNT, dtype=np.int64))

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[Outcome]) -> Accumulator:
        """Return a fresh accumulator holding every outcome in ``outcomes``."""

        accumulator = cls()
        for outcome in outcomes:
            accumulator.incorporate(outcome)
        return accumulator

    def incorporate(self, outcome: Outcome) -> None:
        """Add one outcome to the running sums."""

        self.sums += np.asarray(outcome.scores, dtype=np.int64)
        self.count += 1

    def __iadd__(self, outcome: Outcome) -> Accumulator:
        self.incorporate(outcome)
        return self

    def render(self) -> tuple[float, ...]:
        """Return the mean score for each of the six positions.

        Raises
        ------
        EmptyAverageError
            If no outcome has been incorporated yet.
        """

        if self.count <= 0:
            raise EmptyAverageError("Cannot average an accumulator with no trials.")
        return tuple(float(value) for value in self.sums / self.count)

    def format_means(self, decimals: int = MEAN_DECIMALS) -> str:
        """Return the means as a comma-separated line with fixed precision."""

        return ", ".join(f"{mean:.{decimals}f}" for mean in self.render())

    def __str__(self) -> str:
        return self.format_means()
