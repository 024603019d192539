"""Dice constants, display defaults, and shared type aliases."""

from __future__ import annotations

from typing import Final

DIE_MIN: Final[int] = 1
DIE_SIDES: Final[int] = 6

# Dice rolled per ability score; the lowest of them is dropped.
WINDOW_SIZE: Final[int] = 4

STAT_COUNT: Final[int] = 6
STAT_LABELS: Final[list[str]] = ["1st", "2nd", "3rd", "4th", "5th", "6th"]

MIN_SCORE: Final[int] = 0
MAX_SCORE: Final[int] = DIE_SIDES * (WINDOW_SIZE - 1)

MEAN_DECIMALS: Final[int] = 2

DEFAULT_SIMULATION_SEED: Final[int] = 42
DEFAULT_AVERAGE_TRIALS: Final[int] = 10_000
MAX_AVERAGE_TRIALS: Final[int] = 5_000_000

Window = tuple[int, ...]
ScoreList = list[int]
