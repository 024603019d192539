"""Die streams and fixed-size windowing."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar, Union

from .data import DIE_MIN, DIE_SIDES, WINDOW_SIZE
from .models import ExhaustedSourceError

T = TypeVar("T")

RandomSource = Union[random.Random, Iterable[int]]


def roll_d6(rng: random.Random) -> Iterator[int]:
    """Yield an endless sequence of independent d6 results drawn from ``rng``."""

    while True:
        yield rng.randint(DIE_MIN, DIE_SIDES)


def die_stream(source: RandomSource) -> Iterator[int]:
    """Return an iterator of die values for the supplied source.

    Parameters
    ----------
    source:
        Either a ``random.Random`` instance, which is rolled indefinitely, or an
        iterable of already drawn die values (replays and tests). Replayed values
        are trusted as given and are not checked against the d6 range, so scores
        built from them may fall outside ``MIN_SCORE..MAX_SCORE``.
    """

    if isinstance(source, random.Random):
        return roll_d6(source)
    return iter(source)


def chunks(source: Iterable[T], size: int = WINDOW_SIZE) -> Iterator[tuple[T, ...]]:
    """Group ``source`` into consecutive, non-overlapping windows of ``size`` values.

    Raises
    ------
    ValueError
        If ``size`` is smaller than one.
    ExhaustedSourceError
        When the source cannot fill the next window. Short or padded windows
        are never produced.
    """

    if size < 1:
        raise ValueError(f"Window size must be positive, received {size}")
    return _chunk_iter(iter(source), size)


def _chunk_iter(iterator: Iterator[T], size: int) -> Iterator[tuple[T, ...]]:
    while True:
        window = tuple(islice(iterator, size))
        if len(window) != size:
            raise ExhaustedSourceError(
                f"Die source exhausted: needed {size} values, received {len(window)}"
            )
        yield window
