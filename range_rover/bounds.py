from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass
import operator

import numpy as np


def as_int(value: Any) -> int:
    """
    Converts an integer-like value (``int`` or a NumPy integer scalar) to a
    plain Python ``int``. All range arithmetic happens on the result, so
    fixed-width extremes never wrap around.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Invalid value type: {value!r}. Must be an integer.")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"Invalid value type: {value!r}. Must be an integer.") from None


def distinct_sorted(values: Iterable[Any]) -> List[int]:
    """Deduplicates and sorts ``values``, returning plain ints."""
    if isinstance(values, np.ndarray) and values.dtype.kind != 'O':
        if values.dtype.kind not in 'iu':
            raise TypeError(f"Invalid array dtype: {values.dtype}. Must be an integer dtype.")
        # tolist() widens every element to a Python int
        return np.unique(values).tolist()
    # object arrays hold arbitrary Python objects, so each one is checked
    if isinstance(values, np.ndarray):
        values = values.ravel()
    return sorted({as_int(value) for value in values})


@dataclass(frozen=True, order=True)
class Range:
    # Inclusive on both ends: Range(3, 5) holds 3, 4 and 5.
    start: int
    end: int

    def __post_init__(self):
        start = as_int(self.start)
        end = as_int(self.end)
        if start > end:
            raise ValueError(
                f"Invalid range: start ({start}) cannot be greater than end ({end})"
            )
        object.__setattr__(self, 'start', start)
        object.__setattr__(self, 'end', end)

    @classmethod
    def coerce(cls, value: Union['Range', Tuple[int, int]]) -> 'Range':
        if isinstance(value, Range):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return cls(*value)
        raise TypeError(f"Invalid range: {value!r}. Must be a Range or tuple[int, int].")

    def __iter__(self) -> Iterator[int]:
        # Allows `start, end = r` and tuple(r)
        yield self.start
        yield self.end

    def __bool__(self) -> bool:
        return True

    @property
    def size(self) -> int:
        """Number of integers in the range. Unlike len() this is not capped at sys.maxsize."""
        return self.end - self.start + 1

    def __contains__(self, value: object) -> bool:
        try:
            value = as_int(value)
        except TypeError:
            return False
        return self.start <= value <= self.end

    def values(self) -> Iterator[int]:
        """Iterates over every integer in the range, ascending."""
        yield from range(self.start, self.end + 1)

    def is_adjacent_to(self, other: 'Range') -> bool:
        """True if the two ranges touch without overlapping."""
        return self.end + 1 == other.start or other.end + 1 == self.start

    def intersection(self, other: 'Range') -> Optional['Range']:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start > end:
            return None
        return Range(start, end)

    def __repr__(self) -> str:
        return f"Range({self.start}, {self.end})"

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"
