from typing import Any, Iterable, List, Tuple, Union
import logging

from range_rover.bounds import Range
from range_rover.builder import build_ranges


BoundLike = Union[Range, Tuple[int, int]]


def clip_ranges(ranges: Iterable[Range], bound: BoundLike) -> List[Range]:
    """
    Intersects a sorted, disjoint list of ranges with ``bound``. Ranges
    entirely outside the bound are dropped; ranges crossing one of its edges
    are truncated to it.
    """
    bound = Range.coerce(bound)
    clipped: List[Range] = []
    for r in ranges:
        if r.end < bound.start:
            continue
        if r.start > bound.end:
            break
        clipped.append(Range(max(r.start, bound.start), min(r.end, bound.end)))
    return clipped


def gaps_in_range(ranges: Iterable[Range], bound: BoundLike) -> List[Range]:
    """
    Returns the ranges of integers inside ``bound`` not covered by ``ranges``,
    which must be sorted, disjoint and already clipped to ``bound``.
    """
    bound = Range.coerce(bound)
    gaps: List[Range] = []
    cursor = bound.start
    for r in ranges:
        if r.start > cursor:
            gaps.append(Range(cursor, r.start - 1))
        cursor = r.end + 1
    if cursor <= bound.end:
        gaps.append(Range(cursor, bound.end))
    return gaps


def complement_in_range(values: Iterable[Any], bound: BoundLike) -> List[Range]:
    """
    Computes the integers within ``bound`` that are absent from ``values``, as
    a sorted list of maximal inclusive ranges.

    Values outside the bound are ignored. ``bound`` is a ``Range`` or a
    ``(start, end)`` tuple; an inverted bound raises ``ValueError``.

    >>> complement_in_range([-1, -2, 2, 0, 7, 10, -4, 1, 3, 6, -3, 4, 9, 8], (-10, 20))
    [Range(-10, -5), Range(5, 5), Range(11, 20)]
    """
    bound = Range.coerce(bound)
    covered = clip_ranges(build_ranges(values), bound)
    gaps = gaps_in_range(covered, bound)
    logging.debug(f"Bound {bound}: {len(covered)} covered ranges, {len(gaps)} gaps")
    return gaps
