"""range_algebra

Algebra of half-open intervals [start, stop) and of sets of such intervals.

The package exposes:
- Range: single interval with validity checks and pairwise union, difference, intersection
- RangeSet: ordered, deduplicated collection of ranges
- pack, union, difference, intersection over range sets, plus packedness/validity predicates
- numpy and pandas conversions, and a JSONL operation log for the command line tool
"""

from .ranges import Range, intersect
from .rangeset import (
    PackReport,
    RangeSet,
    difference,
    intersection,
    is_packed,
    is_valid,
    pack,
    pack_report,
    union,
)
from .arrays import covers_many, from_array, to_array
from .frames import (
    FrameSpec,
    from_frame,
    from_interval_index,
    load_frame_spec,
    read_ranges_csv,
    to_frame,
    to_interval_index,
    write_ranges_csv,
)
from .logger import OperationLogger

__version__ = "0.1.0"

__all__ = [
    "Range",
    "intersect",
    "RangeSet",
    "PackReport",
    "is_packed",
    "is_valid",
    "pack",
    "pack_report",
    "union",
    "difference",
    "intersection",
    "to_array",
    "from_array",
    "covers_many",
    "FrameSpec",
    "load_frame_spec",
    "to_frame",
    "from_frame",
    "read_ranges_csv",
    "write_ranges_csv",
    "to_interval_index",
    "from_interval_index",
    "OperationLogger",
]
