"""Ability score rolling core shared by the CLI and the Streamlit UI."""

from .api import (
    AverageComputationResult,
    compute_averages,
    make_rng,
    roll_outcome,
    strategy_names,
)
from .data import (
    DEFAULT_AVERAGE_TRIALS,
    DEFAULT_SIMULATION_SEED,
    MAX_AVERAGE_TRIALS,
    MAX_SCORE,
    MEAN_DECIMALS,
    MIN_SCORE,
    STAT_COUNT,
    STAT_LABELS,
    WINDOW_SIZE,
)
from .dice import chunks, die_stream, roll_d6
from .models import Accumulator, EmptyAverageError, ExhaustedSourceError, Outcome
from .scoring import drop_lowest, score_windows
from .simulation import run_trial, run_trials
from .strategy import (
    STRATEGY_DESCRIPTIONS,
    STRATEGY_LABELS,
    Strategy,
    dice_per_trial,
    drop_twice,
    traditional,
    windows_per_trial,
)

__all__ = [
    "Accumulator",
    "AverageComputationResult",
    "DEFAULT_AVERAGE_TRIALS",
    "DEFAULT_SIMULATION_SEED",
    "EmptyAverageError",
    "ExhaustedSourceError",
    "MAX_AVERAGE_TRIALS",
    "MAX_SCORE",
    "MEAN_DECIMALS",
    "MIN_SCORE",
    "Outcome",
    "STAT_COUNT",
    "STAT_LABELS",
    "STRATEGY_DESCRIPTIONS",
    "STRATEGY_LABELS",
    "Strategy",
    "WINDOW_SIZE",
    "chunks",
    "compute_averages",
    "dice_per_trial",
    "die_stream",
    "drop_lowest",
    "drop_twice",
    "make_rng",
    "roll_d6",
    "roll_outcome",
    "run_trial",
    "run_trials",
    "score_windows",
    "strategy_names",
    "traditional",
    "windows_per_trial",
]
