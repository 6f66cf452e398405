"""Cached interval lookup along one grid axis."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def find_interval(coords: np.ndarray, q: float, lo: int = 0, hi: int | None = None) -> int:
    """Binary search for ``i`` with ``coords[i] <= q < coords[i + 1]``.

    The search is restricted to nodes ``lo..hi`` (``hi`` defaults to the last
    node), so the returned index lies in ``[lo, hi - 1]``. A query equal to
    ``coords[hi]`` resolves to ``hi - 1``.
    """
    if hi is None:
        hi = len(coords) - 1
    i = lo + int(np.searchsorted(coords[lo : hi + 1], q, side="right")) - 1
    if i < lo:
        return lo
    if i > hi - 1:
        return hi - 1
    return i


@dataclass
class LookupAccelerator:
    """Remembers the last located interval to seed the next search.

    Successive queries that stay in the same cell are answered without
    searching; a miss falls back to a binary search over the part of the axis
    on the query's side of the cached cell. The answer is always the one
    :func:`find_interval` would give over the whole axis.
    """

    index: int | None = None
    hits: int = 0
    misses: int = 0

    def reset(self) -> None:
        self.index = None
        self.hits = 0
        self.misses = 0

    def locate(self, coords: np.ndarray, q: float) -> int:
        """Return the interval of ``coords`` containing ``q``.

        ``q`` is expected to lie within ``[coords[0], coords[-1]]``.
        """
        c = self.index
        if c is None:
            i = find_interval(coords, q)
        elif coords[c] <= q < coords[c + 1]:
            self.hits += 1
            return c
        elif q < coords[c]:
            i = find_interval(coords, q, 0, max(c, 1))
        else:
            i = find_interval(coords, q, c)
        self.misses += 1
        self.index = i
        return i
