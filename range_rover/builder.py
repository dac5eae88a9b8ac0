from typing import Any, Iterable, List
import logging

from range_rover.bounds import Range, distinct_sorted


def build_ranges(values: Iterable[Any]) -> List[Range]:
    """
    Coalesces a finite collection of integers into the minimal sorted list of
    maximal inclusive ranges covering exactly those integers.

    Order and repeats in ``values`` do not matter. Any iterable works,
    including generators and NumPy integer arrays; it is consumed once and
    never modified.

    >>> build_ranges([-1, -2, 2, 0, 7, 10, -4, 1, 3, 6, -3, 4, 9, 8])
    [Range(-4, 4), Range(6, 10)]
    """
    distinct = distinct_sorted(values)
    if not distinct:
        return []

    ranges: List[Range] = []
    start = previous = distinct[0]
    for value in distinct[1:]:
        # Python ints, so previous + 1 cannot overflow even at a dtype's max
        if value - previous != 1:
            ranges.append(Range(start, previous))
            start = value
        previous = value
    ranges.append(Range(start, previous))

    logging.debug(f"Coalesced {len(distinct)} distinct values into {len(ranges)} ranges")
    return ranges
