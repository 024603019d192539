import random
import sys
from pathlib import Path

import pytest

# Ensure the core package is importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(name="rng")
def rng_fixture():
    return random.Random(1234)


def _dice_for_scores(scores):
    # Window [low, a, b, c] with a + b + c == score and every die >= low, so the
    # dropped die is ``low``. Scores below 3 need a zero die.
    dice = []
    for score in scores:
        low = 1 if score >= 3 else 0
        a = min(6, score - 2 * low)
        b = min(6, score - a - low)
        c = score - a - b
        dice.extend([low, a, b, c])
    return dice


@pytest.fixture(name="dice_for_scores")
def dice_for_scores_fixture():
    """Build die sequences that score to a chosen list of values."""
    return _dice_for_scores
