from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arrayalgos.arrays import (
    has_pair_with_sum,
    has_pair_with_sum_sorted,
    longest_subarray_with_sum,
    longest_subarray_with_sum_nonnegative,
    majority_element,
    rearrange_by_sign,
    rearrange_by_sign_uneven,
)

ints = st.integers(min_value=-50, max_value=50)
nonneg = st.integers(min_value=0, max_value=20)


# --- pair sums -------------------------------------------------------------


@given(st.lists(ints), ints)
def test_pair_implementations_agree(values, target):
    assert has_pair_with_sum(values, target) == has_pair_with_sum_sorted(values, target)


@given(st.lists(ints), ints, ints, st.lists(ints))
def test_pair_found_when_planted(prefix, a, b, suffix):
    values = prefix + [a] + suffix + [b]
    assert has_pair_with_sum(values, a + b)
    assert has_pair_with_sum_sorted(values, a + b)


@pytest.mark.parametrize("func", [has_pair_with_sum, has_pair_with_sum_sorted])
def test_single_element_is_not_a_pair(func):
    assert func([7], 14) is False
    assert func([], 0) is False


@pytest.mark.parametrize("func", [has_pair_with_sum, has_pair_with_sum_sorted])
def test_pair_accepts_generator(func):
    assert func((v for v in [3, 9]), 12) is True


# --- longest subarray --------------------------------------------------------


def _window_sums_to(values, length, k):
    return any(
        sum(values[start:start + length]) == k
        for start in range(len(values) - length + 1)
    )


@given(st.lists(ints, max_size=30), st.integers(min_value=-100, max_value=100))
def test_longest_subarray_result_is_achievable(values, k):
    length = longest_subarray_with_sum(values, k)
    assert 0 <= length <= len(values)
    if length:
        assert _window_sums_to(values, length, k)


@given(st.lists(ints, max_size=30), st.integers(min_value=-100, max_value=100))
def test_longest_subarray_no_longer_window(values, k):
    length = longest_subarray_with_sum(values, k)
    assert 0 <= length <= len(values)
    assert not any(
        _window_sums_to(values, longer, k)
        for longer in range(length + 1, len(values) + 1)
    )


@given(st.lists(nonneg, max_size=30), st.integers(min_value=0, max_value=100))
def test_sliding_window_matches_prefix_map_on_nonnegatives(values, k):
    assert longest_subarray_with_sum_nonnegative(values, k) == longest_subarray_with_sum(
        values, k
    )


@given(st.lists(ints, min_size=1, max_size=30))
def test_whole_array_sum_gives_full_length(values):
    assert longest_subarray_with_sum(values, sum(values)) == len(values)


def test_longest_subarray_empty():
    assert longest_subarray_with_sum([], 5) == 0
    assert longest_subarray_with_sum_nonnegative([], 5) == 0


# --- majority ----------------------------------------------------------------


def test_majority_worked_example():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


@given(st.lists(st.integers(min_value=0, max_value=3), max_size=40))
def test_majority_invariant(values):
    result = majority_element(values)
    counts = Counter(values)
    majority = [v for v, c in counts.items() if c > len(values) // 2]
    if majority:
        assert result == majority[0]
    else:
        assert result is None


def test_majority_of_empty_is_none():
    assert majority_element([]) is None


# --- rearrange by sign -------------------------------------------------------


def test_rearrange_worked_example():
    assert rearrange_by_sign([1, 2, -4, -5]) == [1, -4, 2, -5]


@given(st.lists(st.integers(min_value=0, max_value=50), max_size=15), st.data())
def test_rearrange_alternates_and_keeps_order(positives, data):
    negatives = data.draw(
        st.lists(
            st.integers(min_value=-50, max_value=-1),
            min_size=len(positives),
            max_size=len(positives),
        )
    )
    mixed = data.draw(st.permutations(positives + negatives))
    result = rearrange_by_sign(mixed)
    assert Counter(result) == Counter(mixed)
    assert all(v >= 0 for v in result[0::2])
    assert all(v < 0 for v in result[1::2])
    assert result[0::2] == [v for v in mixed if v >= 0]
    assert result[1::2] == [v for v in mixed if v < 0]


def test_rearrange_unequal_counts_raises():
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, -3])


def test_rearrange_uneven_worked_example():
    assert rearrange_by_sign_uneven([1, 2, -4, -5, 3, 4]) == [1, -4, 2, -5, 3, 4]


@given(st.lists(ints, max_size=30))
def test_rearrange_uneven_invariants(values):
    result = rearrange_by_sign_uneven(values)
    positives = [v for v in values if v > 0]
    others = [v for v in values if v <= 0]
    paired = min(len(positives), len(others))
    assert Counter(result) == Counter(values)
    head = result[: 2 * paired]
    assert head[0::2] == positives[:paired]
    assert head[1::2] == others[:paired]
    assert result[2 * paired:] == positives[paired:] + others[paired:]


@given(st.lists(ints, max_size=30))
def test_rearrange_uneven_matches_even_case(values):
    positives = [v for v in values if v > 0]
    negatives = [-abs(v) - 1 for v in values if v > 0]
    balanced = positives + negatives
    assert rearrange_by_sign_uneven(balanced) == rearrange_by_sign(balanced)