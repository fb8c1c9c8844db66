from __future__ import annotations

import bisect
import heapq
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .ranges import Range


RangeLike = Union[Range, Tuple[Any, Any]]


def _to_range(item: RangeLike) -> Range:
    if isinstance(item, Range):
        return item
    start, stop = item
    return Range(start, stop)


class RangeSet:
    """Ordered collection of unique ranges.

    Members are kept sorted by the Range ordering and deduplicated. The
    container itself does not keep members packed; ``pack`` and the set
    operators return packed sets, while ``add`` may unpack them again.
    """

    def __init__(self, ranges: Iterable[RangeLike] = ()) -> None:
        self._ranges: List[Range] = sorted({_to_range(r) for r in ranges})

    @classmethod
    def _from_sorted(cls, ranges: List[Range]) -> "RangeSet":
        out = cls()
        out._ranges = ranges
        return out

    def add(self, item: RangeLike) -> None:
        r = _to_range(item)
        i = bisect.bisect_left(self._ranges, r)
        if i < len(self._ranges) and self._ranges[i] == r:
            return
        self._ranges.insert(i, r)

    def discard(self, item: RangeLike) -> None:
        r = _to_range(item)
        i = bisect.bisect_left(self._ranges, r)
        if i < len(self._ranges) and self._ranges[i] == r:
            del self._ranges[i]

    def copy(self) -> "RangeSet":
        return RangeSet._from_sorted(list(self._ranges))

    def covers(self, x: Any) -> bool:
        """True when some member contains the point ``x``."""
        i = bisect.bisect_right(self._ranges, x, key=lambda r: r.start)
        return any(r.contains(x) for r in self._ranges[:i])

    def bounds(self) -> Optional[Tuple[Any, Any]]:
        valid = [r for r in self._ranges if r.valid()]
        if not valid:
            return None
        return valid[0].start, max(r.stop for r in valid)

    def measure(self) -> Any:
        """Total length covered, overlaps counted once."""
        return sum((r.length() for r in pack(self)), 0)

    def is_contiguous(self) -> bool:
        return len(pack(self)) <= 1

    def __contains__(self, item: Any) -> bool:
        if not isinstance(item, Range):
            return False
        i = bisect.bisect_left(self._ranges, item)
        return i < len(self._ranges) and self._ranges[i] == item

    def __iter__(self) -> Iterator[Range]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def __getitem__(self, key: int) -> Range:
        return self._ranges[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSet):
            return NotImplemented
        return self._ranges == other._ranges

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "RangeSet([{}])".format(", ".join(repr(r) for r in self._ranges))

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, (Range, RangeSet)):
            return NotImplemented
        return union(self, other)

    def __radd__(self, other: Any) -> Any:
        if not isinstance(other, Range):
            return NotImplemented
        return union(other, self)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, (Range, RangeSet)):
            return NotImplemented
        return difference(self, other)

    def __rsub__(self, other: Any) -> Any:
        if not isinstance(other, Range):
            return NotImplemented
        return difference(other, self)

    def __and__(self, other: Any) -> Any:
        if not isinstance(other, (Range, RangeSet)):
            return NotImplemented
        return intersection(self, other)

    def __rand__(self, other: Any) -> Any:
        if not isinstance(other, Range):
            return NotImplemented
        return intersection(other, self)


def _as_rangeset(s: Union[Range, RangeSet, Iterable[RangeLike]]) -> RangeSet:
    if isinstance(s, RangeSet):
        return s
    if isinstance(s, Range):
        return RangeSet._from_sorted([s])
    return RangeSet(s)


def is_packed(s: RangeSet) -> bool:
    """Packed: every member valid, and each next member starts strictly
    after the previous one stops (touching members are not packed)."""
    prev: Optional[Range] = None
    for r in _as_rangeset(s):
        if not r.valid():
            return False
        if prev is not None and r.start <= prev.stop:
            return False
        prev = r
    return True


def is_valid(s: RangeSet) -> bool:
    return all(r.valid() for r in _as_rangeset(s))


@dataclass(frozen=True)
class PackReport:
    packed: RangeSet
    dropped: Tuple[Range, ...]


def pack_report(s: RangeSet) -> PackReport:
    """Pack ``s`` and report the invalid members that were discarded."""
    out: List[Range] = []
    dropped: List[Range] = []
    acc: Optional[Range] = None
    for r in _as_rangeset(s):
        if not r.valid():
            dropped.append(r)
            continue
        if acc is None:
            acc = r
            continue
        merged = acc + r
        if merged.valid():
            acc = merged
        else:
            out.append(acc)
            acc = r
    if acc is not None:
        out.append(acc)
    return PackReport(packed=RangeSet._from_sorted(out), dropped=tuple(dropped))


def pack(s: RangeSet) -> RangeSet:
    """Merge overlapping and touching members into a packed set.

    Invalid members contribute nothing and are dropped silently; use
    ``pack_report`` to see them.
    """
    return pack_report(s).packed


def union(left: Union[Range, RangeSet], right: Union[Range, RangeSet]) -> RangeSet:
    """Packed union. Operands are expected to be valid."""
    merged = heapq.merge(_as_rangeset(left), _as_rangeset(right))
    return pack(RangeSet(merged))


def difference(left: Union[Range, RangeSet], right: Union[Range, RangeSet]) -> RangeSet:
    """Subtract ``right`` from ``left``.

    An empty right operand returns a copy of ``left`` as given (not
    re-packed); otherwise the result is packed.
    """
    lset = _as_rangeset(left)
    rset = _as_rangeset(right)
    if not lset:
        return RangeSet()
    if not rset:
        return lset.copy()

    ls: Sequence[Range] = pack(lset)._ranges
    # empty cuts remove nothing but would split a range into touching pieces
    rs: Sequence[Range] = [r for r in pack(rset) if r.non_empty()]
    if not ls:
        return RangeSet()

    out: List[Range] = []
    li = ri = 0
    r = ls[0]
    while li < len(ls):
        if ri < len(rs):
            cut = rs[ri]
            rest = r - cut
            if rest.valid():
                r = rest
            else:
                # cut lies strictly inside r: keep the piece before it and
                # carry on with the piece after it
                before = Range(r.start, cut.start)
                if before.non_empty():
                    out.append(before)
                r = Range(cut.stop, r.stop)
            if ls[li].stop > cut.stop:
                ri += 1
                continue
        li += 1
        if li < len(ls):
            if r.non_empty():
                out.append(r)
            r = ls[li]
    if r.non_empty():
        out.append(r)
    return RangeSet._from_sorted(out)


def intersection(left: Union[Range, RangeSet], right: Union[Range, RangeSet]) -> RangeSet:
    """Packed intersection, by a merge scan over both packed operands."""
    ls = pack(_as_rangeset(left))._ranges
    rs = pack(_as_rangeset(right))._ranges
    out: List[Range] = []
    li = ri = 0
    while li < len(ls) and ri < len(rs):
        common = ls[li].intersect(rs[ri])
        if common.non_empty():
            out.append(common)
        if ls[li].stop < rs[ri].stop:
            li += 1
        else:
            ri += 1
    return RangeSet._from_sorted(out)
