# arrayalgos

Small, dependency-free implementations of classic array and binary-search
algorithms. Every function takes an ordinary Python sequence (or iterable, where
noted) and returns a plain value; the input is never modified.

Where a search finds nothing, the functions return `None` rather than a
sentinel index.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Array algorithms: `arrayalgos.arrays`

| Function | What it answers |
| --- | --- |
| `has_pair_with_sum(values, target)` | Do two elements at different positions add up to `target`? (hash-based) |
| `has_pair_with_sum_sorted(values, target)` | The same question, via a sorted copy and two pointers |
| `longest_subarray_with_sum(values, k)` | Length of the longest contiguous run summing to `k`; handles negatives |
| `longest_subarray_with_sum_nonnegative(values, k)` | The same, via a sliding window; correct only for non-negative input |
| `majority_element(values)` | The element occurring more than `len(values) // 2` times, or `None` |
| `rearrange_by_sign(values)` | Non-negatives at even positions, negatives at odd ones, order kept within each group; raises `ValueError` unless both groups are the same size |
| `rearrange_by_sign_uneven(values)` | Alternates positives and non-positives while both last, then appends the leftovers in order |

```python
from arrayalgos.arrays import has_pair_with_sum, majority_element, rearrange_by_sign

has_pair_with_sum([2, 6, 5, 8, 11], 14)     # True
majority_element([2, 2, 1, 1, 1, 2, 2])     # 2
majority_element([1, 2, 3])                 # None
rearrange_by_sign([1, 2, -4, -5])           # [1, -4, 2, -5]
```

## Sorted-array search: `arrayalgos.searching`

All of these expect `values` in ascending order.

| Function | Result |
| --- | --- |
| `binary_search(values, target)` | An index of `target`, or `None` |
| `binary_search_recursive(values, target)` | The same, recursive |
| `lower_bound(values, x)` | First index with `values[i] >= x` (or `len(values)`) |
| `upper_bound(values, x)` | First index with `values[i] > x` (or `len(values)`) |
| `search_insert(values, x)` | Index where `x` is, or would be inserted |
| `first_occurrence(values, x)` / `last_occurrence(values, x)` | First / last index of `x`, or `None` |
| `first_and_last_position(values, x)` | `(first, last)`, or `None` if `x` does not occur |
| `count_occurrences(values, x)` | How many times `x` appears |

```python
from arrayalgos.searching import lower_bound, count_occurrences

lower_bound([3, 5, 8, 15, 19], 9)                  # 3
count_occurrences([2, 4, 6, 8, 8, 8, 11, 13], 8)   # 3
```

## Rotated sorted arrays: `arrayalgos.rotated`

| Function | Result |
| --- | --- |
| `search_rotated(values, target)` | Index of `target` in a rotated array of distinct values, or `None` |
| `search_rotated_with_duplicates(values, target)` | Whether `target` is present; duplicates allowed |
| `find_min_rotated(values)` | Smallest element; `ValueError` if `values` is empty |
| `rotation_count(values)` | How many places the sorted array was rotated (the index of its minimum); `ValueError` if empty |

```python
from arrayalgos.rotated import search_rotated, rotation_count

search_rotated([7, 8, 9, 1, 2, 3, 4, 5, 6], 1)   # 3
rotation_count([4, 5, 6, 7, 0, 1, 2, 3])         # 4
```

## What it does not do

The package is a library only. It has no command-line program, and it does not
check that its inputs are sorted or rotated as each function expects.