import numpy as np
import pytest

from range_rover.bounds import Range
from range_rover.rangeset import RangeSet


# the two runs produced by the mixed-sign sample in test_builder
TWO_RUNS = RangeSet([-1, -2, 2, 0, 7, 10, -4, 1, 3, 6, -3, 4, 9, 8])


def test_built_from_scattered_values():
    assert TWO_RUNS.ranges == [Range(-4, 4), Range(6, 10)]
    assert RangeSet([10, 10, 10]).ranges == [Range(10, 10)]


def test_spans_and_values_coalesce():
    s = RangeSet([(-20, -15), -14, Range(-12, -10), -11, (0, 0), 1])
    assert s.ranges == [Range(-20, -14), Range(-12, -10), Range(0, 1)]
    assert RangeSet([(5, 9), (1, 6), 0]).ranges == [Range(0, 9)]


def test_rejects_bad_members():
    with pytest.raises(ValueError):
        RangeSet([(0, -1)])
    with pytest.raises(TypeError):
        RangeSet([(1, 2, 3)])
    with pytest.raises(TypeError):
        RangeSet([2.5])


def test_membership():
    assert -4 in TWO_RUNS and 4 in TWO_RUNS and 10 in TWO_RUNS
    assert 5 not in TWO_RUNS
    assert -5 not in TWO_RUNS and 11 not in TWO_RUNS
    assert np.int16(7) in TWO_RUNS
    assert "7" not in TWO_RUNS
    assert 0 not in RangeSet.empty


def test_iteration_and_size():
    assert list(RangeSet([(-2, 0), 3])) == [-2, -1, 0, 3]
    assert TWO_RUNS.size == 14
    assert RangeSet.empty.size == 0
    assert not RangeSet.empty and TWO_RUNS


def test_size_beyond_maxsize():
    wide = RangeSet([(-2**63, 2**63 - 1)])
    assert wide.size == 2**64
    assert wide
    assert RangeSet([(0, 2**64)]).size == 2**64 + 1


def test_text_forms():
    s = RangeSet([-3, (5, 8)])
    assert repr(s) == "RangeSet([(-3, -3), (5, 8)])"
    assert str(s) == "{-3, 5-8}"
    assert RangeSet([(-3, -3), (5, 8)]) == s
    assert str(RangeSet.empty) == "{}"


def test_equality_and_hash():
    a = RangeSet([(6, 10), (-4, 4)])
    assert a == TWO_RUNS
    assert hash(a) == hash(TWO_RUNS)
    assert a != RangeSet([(-4, 4)])
    assert {a, TWO_RUNS} == {TWO_RUNS}


def test_union():
    assert TWO_RUNS | RangeSet([5]) == RangeSet([(-4, 10)])
    assert TWO_RUNS + RangeSet([(-8, -6), 12]) == RangeSet([(-8, -6), (-4, 4), (6, 10), 12])
    assert RangeSet([(1, 3), (7, 9), 15]) | RangeSet([(2, 4), 10, (14, 16)]) == RangeSet([(1, 4), (7, 10), (14, 16)])
    assert TWO_RUNS | RangeSet.empty == TWO_RUNS


def test_intersection():
    assert TWO_RUNS & RangeSet([(-10, -3), (3, 7)]) == RangeSet([(-4, -3), (3, 4), (6, 7)])
    assert TWO_RUNS & RangeSet([5, (11, 30)]) == RangeSet.empty
    assert TWO_RUNS.intersection(TWO_RUNS) == TWO_RUNS


@pytest.mark.parametrize("bound", [(-10, 20), (-4, 10), (0, 7), (5, 5), (-100, -50), (10, 10)])
def test_clip_and_complement_partition_bound(bound):
    clipped = TWO_RUNS.clip(bound)
    gaps = TWO_RUNS.complement(bound)
    assert clipped & gaps == RangeSet.empty
    assert clipped | gaps == RangeSet([bound])


def test_complement_values():
    assert TWO_RUNS.complement((-10, 20)) == RangeSet([(-10, -5), 5, (11, 20)])
    assert RangeSet.empty.complement(Range(0, 5)) == RangeSet([(0, 5)])
    with pytest.raises(ValueError):
        TWO_RUNS.complement((3, 2))
