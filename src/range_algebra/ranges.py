from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Tuple, TypeVar


T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Range(Generic[T]):
    """Half-open interval [start, stop).

    Validity is not enforced at construction. A range with start > stop is
    *invalid* and is the in-band marker for "no single-interval result":
    union of disjoint ranges, or a difference that would split the receiver
    in two. Callers check ``valid()`` / ``non_empty()`` after combining.

    Ordering is lexicographic on (start, stop), which is what RangeSet uses
    to sort and deduplicate its members.

    Instances are immutable: ``a += b`` and ``a -= b`` rebind ``a`` to a new
    range, the way they do for Python numbers.
    """

    start: T = 0  # type: ignore[assignment]
    stop: T = 0  # type: ignore[assignment]

    def valid(self) -> bool:
        return self.stop >= self.start

    def empty(self) -> bool:
        return self.stop == self.start

    def non_empty(self) -> bool:
        return self.stop > self.start

    def length(self) -> Any:
        return self.stop - self.start

    def as_tuple(self) -> Tuple[T, T]:
        return (self.start, self.stop)

    def contains(self, item: Any) -> bool:
        """Point or range containment.

        A scalar is inside when start <= x < stop (right-open). A range is
        inside only when it is non-empty and lies within the bounds, so an
        empty or invalid range is never contained in anything.
        """
        if isinstance(item, Range):
            return item.non_empty() and item.start >= self.start and item.stop <= self.stop
        return self.start <= item < self.stop

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def intersect(self, other: Range[T]) -> Range[T]:
        """Clamp to the overlap with ``other``.

        Disjoint ranges give the empty range at the clamped start, never an
        invalid one.
        """
        start = other.start if self.start < other.start else self.start
        stop = other.stop if self.stop > other.stop else self.stop
        if stop < start:
            stop = start
        return Range(start, stop)

    def _swapped(self) -> Range[T]:
        return Range(self.stop, self.start)

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Range):
            return NotImplemented
        if not self.valid():
            return other
        if not other.valid():
            return self
        if self.stop < other.start or self.start > other.stop:
            # an empty receiver gives way to the other operand
            if self.empty():
                return other
            return self._swapped()
        start = other.start if other.start < self.start else self.start
        stop = other.stop if other.stop > self.stop else self.stop
        return Range(start, stop)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Range):
            return NotImplemented
        if not self.valid():
            return other
        if not other.valid():
            return self
        if self.start < other.start:
            if self.stop > other.stop:
                return self._swapped()
            if self.stop > other.start:
                return Range(self.start, other.start)
            return self
        if self.stop < other.stop:
            return Range(self.start, self.start)
        if self.start < other.stop:
            return Range(other.stop, self.stop)
        return self

    def union(self, other: Range[T]) -> Optional[Range[T]]:
        """Union as a single interval, or None when it is not one."""
        r = self + other
        return r if r.valid() else None

    def difference(self, other: Range[T]) -> Optional[Range[T]]:
        """Difference as a single interval, or None when it would split."""
        r = self - other
        return r if r.valid() else None

    def __repr__(self) -> str:
        return f"Range({self.start!r}, {self.stop!r})"


def intersect(left: Range[T], right: Range[T]) -> Range[T]:
    return left.intersect(right)
