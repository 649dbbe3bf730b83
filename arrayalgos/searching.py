"""Binary searches over sorted sequences: exact lookup, bounds and occurrence counts."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "binary_search",
    "binary_search_recursive",
    "lower_bound",
    "upper_bound",
    "search_insert",
    "first_occurrence",
    "last_occurrence",
    "first_and_last_position",
    "count_occurrences",
]


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(values: Sequence[int], target: int) -> int | None:
    """Recursive form of :func:`binary_search`."""

    def _search(low: int, high: int) -> int | None:
        if low > high:
            return None
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            return _search(mid + 1, high)
        return _search(low, mid - 1)

    return _search(0, len(values) - 1)


def _first_index_where(values: Sequence[int], predicate) -> int:
    """Smallest index whose value satisfies a monotone ``predicate``, else ``len(values)``."""
    low, high = 0, len(values) - 1
    answer = len(values)
    while low <= high:
        mid = (low + high) // 2
        if predicate(values[mid]):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def lower_bound(values: Sequence[int], x: int) -> int:
    """Index of the first element not less than ``x``; ``len(values)`` if none."""
    return _first_index_where(values, lambda value: value >= x)


def upper_bound(values: Sequence[int], x: int) -> int:
    """Index of the first element greater than ``x``; ``len(values)`` if none."""
    return _first_index_where(values, lambda value: value > x)


def search_insert(values: Sequence[int], x: int) -> int:
    """Position where ``x`` is found or would be inserted to keep ``values`` sorted."""
    return lower_bound(values, x)


def first_occurrence(values: Sequence[int], x: int) -> int | None:
    """Index of the first ``x`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    first = None
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == x:
            first = mid
            high = mid - 1
        elif values[mid] < x:
            low = mid + 1
        else:
            high = mid - 1
    return first


def last_occurrence(values: Sequence[int], x: int) -> int | None:
    """Index of the last ``x`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    last = None
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == x:
            last = mid
            low = mid + 1
        elif values[mid] < x:
            low = mid + 1
        else:
            high = mid - 1
    return last


def first_and_last_position(values: Sequence[int], x: int) -> tuple[int, int] | None:
    """Indices of the first and last ``x``, or None if ``x`` does not occur."""
    first = first_occurrence(values, x)
    if first is None:
        return None
    last = last_occurrence(values, x)
    assert last is not None
    return first, last


def count_occurrences(values: Sequence[int], x: int) -> int:
    """Number of times ``x`` occurs in the ascending ``values``."""
    span = first_and_last_position(values, x)
    if span is None:
        return 0
    first, last = span
    return last - first + 1