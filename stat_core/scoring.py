"""Scoring rule applied to each window of dice."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .data import Window


def drop_lowest(window: Sequence[int]) -> int:
    """Sum the window after dropping a single occurrence of its lowest die."""

    if not window:
        raise ValueError("Cannot score an empty window.")
    return sum(window) - min(window)


def score_windows(windows: Iterable[Window]) -> Iterator[int]:
    """Lazily score each window with :func:`drop_lowest`."""

    return (drop_lowest(window) for window in windows)
