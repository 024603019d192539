"""Rolling strategies that turn a die stream into a set of six scores."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum
from typing import Final, Union

from .data import STAT_COUNT, WINDOW_SIZE, ScoreList
from .dice import RandomSource, chunks, die_stream
from .models import Outcome
from .scoring import score_windows

StrategyFn = Callable[[Iterator[int]], Outcome]


class Strategy(Enum):
    """Named rolling methods selectable from the front ends."""

    TRADITIONAL = "traditional"
    DROP_TWICE = "drop-twice"

    @classmethod
    def from_name(cls, name: Union[str, Strategy]) -> Strategy:
        """Resolve a strategy from its value or member name.

        Raises
        ------
        ValueError
            If ``name`` does not match any strategy.
        """

        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError as exc:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown strategy '{name}' (expected one of: {known})") from exc

    @property
    def label(self) -> str:
        return STRATEGY_LABELS[self]

    @property
    def description(self) -> str:
        return STRATEGY_DESCRIPTIONS[self]

    def provider(self, source: RandomSource) -> Callable[[], Outcome]:
        """Return a callable producing one outcome per call from a single die stream.

        Every provider owns its own stream cursor; consecutive calls continue
        drawing where the previous trial stopped.
        """

        dice = die_stream(source)
        strategy_fn = STRATEGY_FUNCTIONS[self]

        def _next_outcome() -> Outcome:
            return strategy_fn(dice)

        return _next_outcome


def _take_scores(dice: Iterator[int], count: int) -> ScoreList:
    scores = score_windows(chunks(dice, WINDOW_SIZE))
    return [next(scores) for _ in range(count)]


def traditional(dice: Iterator[int]) -> Outcome:
    """4d6 drop lowest, six times, sorted ascending."""

    scores = _take_scores(dice, STAT_COUNT)
    scores.sort()
    return Outcome.from_scores(scores)


def drop_twice(dice: Iterator[int]) -> Outcome:
    """4d6 drop lowest, seven times, then drop the lowest score."""

    scores = _take_scores(dice, STAT_COUNT + 1)
    scores.sort()
    return Outcome.from_scores(scores[1:])


STRATEGY_FUNCTIONS: Final[dict[Strategy, StrategyFn]] = {
    Strategy.TRADITIONAL: traditional,
    Strategy.DROP_TWICE: drop_twice,
}

STRATEGY_WINDOWS: Final[dict[Strategy, int]] = {
    Strategy.TRADITIONAL: STAT_COUNT,
    Strategy.DROP_TWICE: STAT_COUNT + 1,
}

STRATEGY_LABELS: Final[dict[Strategy, str]] = {
    Strategy.TRADITIONAL: "Traditional",
    Strategy.DROP_TWICE: "Drop twice",
}

STRATEGY_DESCRIPTIONS: Final[dict[Strategy, str]] = {
    Strategy.TRADITIONAL: "4d6 drop lowest",
    Strategy.DROP_TWICE: "4d6 drop lowest, then drop lowest stat",
}


def windows_per_trial(strategy: Union[str, Strategy]) -> int:
    """Return how many windows of dice one trial of ``strategy`` consumes."""

    return STRATEGY_WINDOWS[Strategy.from_name(strategy)]


def dice_per_trial(strategy: Union[str, Strategy]) -> int:
    """Return how many die values one trial of ``strategy`` consumes."""

    return windows_per_trial(strategy) * WINDOW_SIZE

