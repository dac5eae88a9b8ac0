from typing import Any, ClassVar, Iterable, Iterator, List, Tuple, Union as TypingUnion
import bisect

from range_rover.bounds import Range, as_int
from range_rover.builder import build_ranges
from range_rover.complement import BoundLike, clip_ranges, gaps_in_range


class RangeSet:
    # Invariant: ranges are sorted by start and no two of them overlap or
    # touch, i.e. each range ends at least two below where the next begins.
    ranges: List[Range]

    empty: ClassVar["RangeSet"]  # type: ignore

    def __init__(self, values: Iterable[TypingUnion[int, Range, Tuple[int, int]]] = ()):
        """
        Builds a set from any mix of integers, Ranges and (start, end) tuples.
        Integers are coalesced by build_ranges; spans are then folded in.
        """
        singles = []
        spans: List[Range] = []
        for value in values:
            if isinstance(value, (Range, tuple)):
                spans.append(Range.coerce(value))
            else:
                singles.append(as_int(value))

        self.ranges = _coalesce(sorted(build_ranges(singles) + spans))

    @classmethod
    def from_ranges(cls, ranges: List[Range]) -> "RangeSet":
        """Wraps a list that already satisfies the invariant, without checking it."""
        new_set = cls()
        new_set.ranges = ranges
        return new_set

    @property
    def size(self) -> int:
        """Count of integers in the set. May exceed sys.maxsize, so it is not __len__."""
        return sum(r.size for r in self.ranges)

    def union(self, other: "RangeSet") -> "RangeSet":
        return RangeSet.from_ranges(_coalesce(sorted(self.ranges + other.ranges)))

    def intersection(self, other: "RangeSet") -> "RangeSet":
        common: List[Range] = []
        mine = iter(self.ranges)
        theirs = iter(other.ranges)
        a = next(mine, None)
        b = next(theirs, None)
        while a is not None and b is not None:
            overlap = a.intersection(b)
            if overlap is not None:
                common.append(overlap)
            # whichever finishes first cannot meet anything further on
            if a.end < b.end:
                a = next(mine, None)
            else:
                b = next(theirs, None)
        return RangeSet.from_ranges(common)

    def __or__(self, other: "RangeSet") -> "RangeSet":
        if not isinstance(other, RangeSet):
            return NotImplemented
        return self.union(other)

    __add__ = __or__

    def __and__(self, other: "RangeSet") -> "RangeSet":
        if not isinstance(other, RangeSet):
            return NotImplemented
        return self.intersection(other)

    def clip(self, bound: BoundLike) -> "RangeSet":
        """The part of this set that lies within ``bound``."""
        return RangeSet.from_ranges(clip_ranges(self.ranges, bound))

    def complement(self, bound: BoundLike) -> "RangeSet":
        """The values within ``bound`` that are not in this set."""
        return RangeSet.from_ranges(gaps_in_range(clip_ranges(self.ranges, bound), bound))

    def __contains__(self, value: Any) -> bool:
        try:
            value = as_int(value)
        except TypeError:
            return False
        # last range starting at or below value
        i = bisect.bisect_right(self.ranges, value, key=lambda r: r.start) - 1
        return i >= 0 and value <= self.ranges[i].end

    def __iter__(self) -> Iterator[int]:
        for r in self.ranges:
            yield from r.values()

    def __bool__(self) -> bool:
        return bool(self.ranges)

    def __repr__(self) -> str:
        return f"RangeSet({[tuple(r) for r in self.ranges]!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(map(str, self.ranges)) + "}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RangeSet):
            return self.ranges == other.ranges
        return NotImplemented

    def __hash__(self) -> int:
        return hash((RangeSet, *self.ranges))


def _coalesce(ranges: Iterable[Range]) -> List[Range]:
    # ranges must arrive ordered by start
    out: List[Range] = []
    for r in ranges:
        if out and r.start - out[-1].end <= 1:
            if r.end > out[-1].end:
                out[-1] = Range(out[-1].start, r.end)
        else:
            out.append(r)
    return out


RangeSet.empty = RangeSet()
