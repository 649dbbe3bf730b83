"""Classic array problems: pair sums, subarray sums, majority votes, sign ordering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain

__all__ = [
    "has_pair_with_sum",
    "has_pair_with_sum_sorted",
    "longest_subarray_with_sum",
    "longest_subarray_with_sum_nonnegative",
    "majority_element",
    "rearrange_by_sign",
    "rearrange_by_sign_uneven",
]


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Return True if two distinct positions hold values adding up to ``target``."""
    seen: set[int] = set()
    for value in values:
        if target - value in seen:
            return True
        seen.add(value)
    return False


def has_pair_with_sum_sorted(values: Iterable[int], target: int) -> bool:
    """Two-pointer variant of :func:`has_pair_with_sum` working on a sorted copy."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    while left < right:
        total = ordered[left] + ordered[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def longest_subarray_with_sum(values: Iterable[int], k: int) -> int:
    """Length of the longest contiguous run summing to ``k``; negatives allowed."""
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for index, value in enumerate(values):
        total += value
        if total == k:
            best = max(best, index + 1)
        earlier = first_seen.get(total - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(total, index)
    return best


def longest_subarray_with_sum_nonnegative(values: Sequence[int], k: int) -> int:
    """Sliding-window version of :func:`longest_subarray_with_sum`.

    Correct only when every value is non-negative.
    """
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def majority_element(values: Iterable[int]) -> int | None:
    """Return the element occurring more than ``len // 2`` times, or None."""
    items = list(values)
    candidate = None
    count = 0
    for value in items:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if items and items.count(candidate) > len(items) // 2:
        return candidate
    return None


def _interleave(first: Sequence[int], second: Sequence[int]) -> list[int]:
    return list(chain.from_iterable(zip(first, second)))


def rearrange_by_sign(values: Iterable[int]) -> list[int]:
    """Alternate non-negatives (even positions) and negatives (odd positions).

    Relative order within each sign is kept. Both groups must be the same size.
    """
    items = list(values)
    positives = [v for v in items if v >= 0]
    negatives = [v for v in items if v < 0]
    if len(positives) != len(negatives):
        raise ValueError(
            f"need equal counts of non-negative and negative values, "
            f"got {len(positives)} and {len(negatives)}"
        )
    return _interleave(positives, negatives)


def rearrange_by_sign_uneven(values: Iterable[int]) -> list[int]:
    """Alternate positives and non-positives, appending whichever group is left over.

    The sequence always starts with a positive value when one exists.
    """
    items = list(values)
    positives = [v for v in items if v > 0]
    negatives = [v for v in items if v <= 0]
    paired = min(len(positives), len(negatives))
    return (
        _interleave(positives, negatives)
        + positives[paired:]
        + negatives[paired:]
    )