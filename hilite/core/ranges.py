"""Merge raw match positions into ordered, disjoint ranges."""

from collections.abc import Iterable, Sequence

from hilite.exceptions import InvalidRangeError
from hilite.models import MatchRange


def merge_ranges(indices: Iterable[int]) -> list[MatchRange]:
    """Turn an unordered multiset of positions into minimal half-open ranges.

    Consecutive positions collapse into one range, duplicates are ignored and
    negative positions are dropped. The covered positions of the result are
    exactly the distinct non-negative inputs.

    Args:
        indices: Matched character positions, in any order

    Returns:
        Sorted, pairwise disjoint, non-adjacent ranges
    """
    positions = sorted({i for i in indices if i >= 0})
    if not positions:
        return []

    ranges: list[MatchRange] = []
    start = positions[0]
    end = start + 1
    for position in positions[1:]:
        if position == end:
            end = position + 1
        else:
            ranges.append(MatchRange(start=start, end=end))
            start = position
            end = position + 1
    ranges.append(MatchRange(start=start, end=end))
    return ranges


def single_range(start: int, end: int) -> list[MatchRange]:
    """Match list holding one explicit span, empty when the span is empty."""
    start = max(start, 0)
    if start >= end:
        return []
    return [MatchRange(start=start, end=end)]


def flatten_ranges(ranges: Iterable[MatchRange]) -> list[int]:
    """Every position covered by ``ranges``, in order."""
    return [i for r in ranges for i in range(r.start, r.end)]


def validate_ranges(ranges: Sequence[MatchRange]) -> None:
    """Check that ``ranges`` are sorted and neither overlap nor touch.

    Raises:
        InvalidRangeError: For the first range that breaks the ordering
    """
    for index in range(1, len(ranges)):
        previous, current = ranges[index - 1], ranges[index]
        if current.start < previous.end:
            raise InvalidRangeError(index, current.as_tuple(), "overlaps or precedes the previous range")
        if current.start == previous.end:
            raise InvalidRangeError(index, current.as_tuple(), "is adjacent to the previous range")
