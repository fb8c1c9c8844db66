from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Iterable

import numpy as np
import pandas as pd
import yaml

from .ranges import Range
from .rangeset import RangeSet


SUPPORTED_DTYPES = ("int64", "float64")


@dataclass(frozen=True)
class FrameSpec:
    """Column layout used to read and write range sets as tables."""

    start_col: str = "start"
    stop_col: str = "stop"
    dtype: str = "int64"
    drop_invalid: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> None:
        if not self.start_col or not self.stop_col:
            raise ValueError("start_col and stop_col must be non-empty")
        if self.start_col == self.stop_col:
            raise ValueError("start_col and stop_col must differ")
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(f"dtype must be one of {SUPPORTED_DTYPES}, got {self.dtype!r}")


DEFAULT_FRAME_SPEC = FrameSpec()


def load_frame_spec(yaml_path: str | Path | None = None) -> FrameSpec:
    """Read a FrameSpec from YAML, falling back to defaults for absent keys
    or an absent file."""
    if yaml_path is None:
        return DEFAULT_FRAME_SPEC
    p = Path(yaml_path)
    if not p.exists():
        return DEFAULT_FRAME_SPEC
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Frame config must be a mapping, got {type(raw).__name__}")
    frame = raw.get("frame") or raw
    if not isinstance(frame, dict):
        raise ValueError(f"'frame' section must be a mapping, got {type(frame).__name__}")
    spec = FrameSpec(
        start_col=str(frame.get("start_col", DEFAULT_FRAME_SPEC.start_col)),
        stop_col=str(frame.get("stop_col", DEFAULT_FRAME_SPEC.stop_col)),
        dtype=str(frame.get("dtype", DEFAULT_FRAME_SPEC.dtype)),
        drop_invalid=bool(frame.get("drop_invalid", DEFAULT_FRAME_SPEC.drop_invalid)),
    )
    spec.validate()
    return spec


def _require_columns(df: pd.DataFrame, cols: Iterable[str], context: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns for {context}: {missing}")


def to_frame(s: RangeSet, spec: FrameSpec = DEFAULT_FRAME_SPEC) -> pd.DataFrame:
    starts = [r.start for r in s]
    stops = [r.stop for r in s]
    return pd.DataFrame(
        {
            spec.start_col: pd.Series(starts, dtype=spec.dtype),
            spec.stop_col: pd.Series(stops, dtype=spec.dtype),
        }
    )


def from_frame(df: pd.DataFrame, spec: FrameSpec = DEFAULT_FRAME_SPEC) -> RangeSet:
    """Build a RangeSet from two bound columns.

    Rows with a missing bound are skipped. With ``spec.drop_invalid``, rows
    whose start exceeds their stop are skipped too; otherwise they are kept
    as invalid members. Bounds that change when cast to ``spec.dtype`` (0.5
    read as int64) raise ValueError naming the column and row.
    """
    spec.validate()
    _require_columns(df, [spec.start_col, spec.stop_col], "range frame")
    bounds = df.loc[:, [spec.start_col, spec.stop_col]].apply(pd.to_numeric, errors="coerce").dropna()
    arr = bounds.to_numpy(dtype=spec.dtype)
    lossy = bounds.to_numpy() != arr
    if lossy.any():
        row, col = np.argwhere(lossy)[0]
        name = bounds.columns[col]
        raise ValueError(
            f"Column {name!r} does not fit dtype {spec.dtype}: row {bounds.index[row]} "
            f"has {bounds.iloc[row, col]}"
        )
    if spec.drop_invalid and arr.size:
        arr = arr[arr[:, 0] <= arr[:, 1]]
    return RangeSet(Range(lo.item(), hi.item()) for lo, hi in arr)


def read_ranges_csv(path: str | Path, spec: FrameSpec = DEFAULT_FRAME_SPEC) -> RangeSet:
    df = pd.read_csv(Path(path))
    return from_frame(df, spec)


def write_ranges_csv(s: RangeSet, path: str | Path, spec: FrameSpec = DEFAULT_FRAME_SPEC) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    to_frame(s, spec).to_csv(p, index=False)


def to_interval_index(s: RangeSet) -> pd.IntervalIndex:
    """Left-closed IntervalIndex with one interval per member."""
    starts = np.asarray([r.start for r in s])
    stops = np.asarray([r.stop for r in s])
    return pd.IntervalIndex.from_arrays(starts, stops, closed="left")


def from_interval_index(idx: pd.IntervalIndex) -> RangeSet:
    if idx.closed != "left":
        raise ValueError(f"Only left-closed intervals map to ranges, got closed={idx.closed!r}")
    return RangeSet(Range(lo.item(), hi.item()) for lo, hi in zip(idx.left.to_numpy(), idx.right.to_numpy()))
