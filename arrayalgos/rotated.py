"""Binary searches over ascending sequences that have been rotated."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "search_rotated",
    "search_rotated_with_duplicates",
    "find_min_rotated",
    "rotation_count",
]


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target <= values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] <= target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def search_rotated_with_duplicates(values: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if values[low] == values[mid] == values[high]:
            low += 1
            high -= 1
            continue
        if values[low] <= values[mid]:
            if values[low] <= target <= values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] <= target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def _minimum_position(values: Sequence[int]) -> int:
    if not values:
        raise ValueError("sequence is empty")
    low, high = 0, len(values) - 1
    best = None
    index = 0
    while low <= high:
        mid = (low + high) // 2
        if values[low] <= values[high]:
            if best is None or values[low] < best:
                index, best = low, values[low]
            break
        if values[low] <= values[mid]:
            if best is None or values[low] < best:
                index, best = low, values[low]
            low = mid + 1
        else:
            if best is None or values[mid] < best:
                index, best = mid, values[mid]
            high = mid - 1
    return index


def find_min_rotated(values: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence; ValueError if it is empty."""
    return values[_minimum_position(values)]


def rotation_count(values: Sequence[int]) -> int:
    """How many places a sorted sequence of distinct values was rotated right.

    Equal to the index of its minimum. Raises ValueError if it is empty.
    """
    return _minimum_position(values)