from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .ranges import Range
from .rangeset import RangeSet, pack


def to_array(s: RangeSet, dtype: Any = None) -> np.ndarray:
    """(n, 2) array of (start, stop) rows in set order."""
    rows = [r.as_tuple() for r in s]
    if not rows:
        return np.empty((0, 2), dtype=dtype if dtype is not None else float)
    return np.asarray(rows, dtype=dtype)


def from_array(arr: Sequence[Sequence[Any]] | np.ndarray) -> RangeSet:
    a = np.asarray(arr)
    if a.size == 0:
        return RangeSet()
    if a.ndim != 2 or a.shape[1] != 2:
        raise ValueError(f"Expected an (n, 2) array of bounds, got shape {a.shape}")
    return RangeSet(Range(lo.item(), hi.item()) for lo, hi in a)


def covers_many(s: RangeSet, values: Sequence[Any] | np.ndarray) -> np.ndarray:
    """Vectorized point coverage against the packed form of ``s``.

    Returns a boolean array shaped like ``values``.
    """
    v = np.asarray(values)
    packed = to_array(pack(s))
    if packed.shape[0] == 0:
        return np.zeros(v.shape, dtype=bool)
    starts = packed[:, 0]
    stops = packed[:, 1]
    # index of the last member starting at or before each value
    idx = np.searchsorted(starts, v, side="right") - 1
    safe = np.clip(idx, 0, None)
    return (idx >= 0) & (v < stops[safe])
