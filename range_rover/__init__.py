from range_rover.bounds import Range
from range_rover.builder import build_ranges
from range_rover.complement import clip_ranges, complement_in_range, gaps_in_range
from range_rover.rangeset import RangeSet

__all__ = [
    'Range',
    'RangeSet',
    'build_ranges',
    'clip_ranges',
    'complement_in_range',
    'gaps_in_range',
]
