import itertools
import math
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.arrays import (
    build_array,
    find_duplicate,
    find_max_consecutive_ones,
    get_concatenation,
    interleave_halves,
    longest_consecutive,
    majority_element,
    majority_elements,
    max_product,
    merge_sorted,
    next_permutation,
    number_game,
    product_except_self,
    remove_duplicates,
    rotate_array,
    sort_colors,
    target_indices,
    two_sum,
)

small_ints = st.lists(st.integers(-20, 20), max_size=30)


@given(st.lists(st.integers(-50, 50), min_size=2, max_size=20), st.data())
def test_two_sum_finds_valid_pair(nums, data):
    i, j = data.draw(
        st.tuples(st.integers(0, len(nums) - 1), st.integers(0, len(nums) - 1)).filter(
            lambda p: p[0] != p[1]
        )
    )
    target = nums[i] + nums[j]
    a, b = two_sum(nums, target)
    assert a < b
    assert nums[a] + nums[b] == target


def test_two_sum_without_solution():
    assert not two_sum([1, 2, 3], 100)


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


@given(st.integers(-100, 100), st.integers(1, 30), st.randoms())
def test_longest_consecutive_run(start, length, rng):
    nums = list(range(start, start + length)) * 2 + [start + length + 5]
    rng.shuffle(nums)
    assert longest_consecutive(nums) == length


@given(small_ints)
def test_longest_consecutive_bounds(nums):
    result = longest_consecutive(nums)
    assert result <= len(set(nums))
    assert (result >= 1) == bool(nums)


@given(st.lists(st.integers(1, 100), min_size=2, max_size=20))
def test_max_product_is_best_pair(nums):
    result = max_product(nums)
    products = {(a - 1) * (b - 1) for a, b in itertools.combinations(nums, 2)}
    assert result in products
    assert all(result >= p for p in products)


@given(st.lists(st.integers(), max_size=10))
def test_interleave_halves(half):
    nums = half + [v + 1 for v in half]
    result = interleave_halves(nums, len(half))
    assert result[0::2] == half
    assert result[1::2] == nums[len(half) :]


def test_interleave_halves_too_short():
    with pytest.raises(ValueError):
        interleave_halves([1, 2, 3], 2)


@given(st.integers(), small_ints)
def test_majority_element_found(value, others):
    nums = [value] * (len(others) + 1) + others
    assert majority_element(nums) == value


def test_majority_element_absent():
    assert majority_element([1, 2, 3]) is None


@given(small_ints, st.integers(0, 100))
def test_rotate_array(nums, k):
    original = list(nums)
    rotate_array(nums, k)
    n = len(original)
    assert all(nums[(i + k) % n] == original[i] for i in range(n))


@given(st.permutations(list(range(10))))
def test_build_array(perm):
    result = build_array(perm)
    assert all(result[i] == perm[perm[i]] for i in range(len(perm)))
    assert build_array(list(range(len(perm)))) == list(range(len(perm)))


def test_build_array_out_of_range():
    with pytest.raises(IndexError):
        build_array([0, 5])


@given(small_ints)
def test_get_concatenation(nums):
    original = list(nums)
    result = get_concatenation(nums)
    assert result[: len(nums)] == original
    assert result[len(nums) :] == original
    assert nums == original


@given(small_ints, st.integers(-20, 20))
def test_target_indices(nums, target):
    result = target_indices(nums, target)
    ordered = sorted(nums)
    assert len(result) == nums.count(target)
    assert all(ordered[i] == target for i in result)


@given(small_ints)
def test_majority_elements(nums):
    result = majority_elements(nums)
    counts = Counter(nums)
    threshold = len(nums) // 3
    assert len(result) == len(set(result))
    assert set(result) == {v for v, c in counts.items() if c > threshold}


@given(st.lists(st.integers(-5, 5), min_size=1, max_size=10))
def test_product_except_self_invariant(nums):
    total = math.prod(nums)
    result = product_except_self(nums)
    assert len(result) == len(nums)
    assert all(r * v == total for r, v in zip(result, nums))


def test_product_except_self_with_zero():
    assert product_except_self([-1, 1, 0, -3, 3]) == [0, 0, 9, 0, 0]


@given(st.integers(1, 30), st.data())
def test_find_duplicate(n, data):
    dup = data.draw(st.integers(1, n))
    nums = data.draw(st.permutations(list(range(1, n + 1)) + [dup]))
    assert find_duplicate(nums) == dup


def test_find_duplicate_empty():
    with pytest.raises(ValueError):
        find_duplicate([])


@pytest.mark.parametrize("values", [[1, 2, 3], [1, 1, 2, 3], [4, 2, 2, 1]])
def test_next_permutation_walks_all(values):
    perms = sorted(set(itertools.permutations(values)))
    for current, following in zip(perms, perms[1:] + perms[:1]):
        nums = list(current)
        next_permutation(nums)
        assert tuple(nums) == following


@given(small_ints)
def test_number_game(nums):
    result = number_game(nums)
    assert sorted(result) == sorted(nums)
    ordered = sorted(nums)
    pairs = len(nums) // 2
    assert result[1 : 2 * pairs : 2] == ordered[0 : 2 * pairs : 2]
    assert result[0 : 2 * pairs : 2] == ordered[1 : 2 * pairs : 2]
    if len(nums) % 2:
        assert result[-1] == ordered[-1]


@given(st.integers(0, 20), st.integers(0, 20))
def test_find_max_consecutive_ones(a, b):
    assert find_max_consecutive_ones([1] * a + [0] + [1] * b) == max(a, b)


@given(st.lists(st.sampled_from([0, 1, 2]), max_size=40))
def test_sort_colors(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])


@given(st.lists(st.integers(-5, 5), max_size=30))
def test_remove_duplicates(values):
    nums = sorted(values)
    k = remove_duplicates(nums)
    assert k == len(nums)
    assert nums == sorted(nums)
    assert Counter(nums) == Counter({v: min(c, 2) for v, c in Counter(values).items()})


@given(small_ints, small_ints)
def test_merge_sorted(a, b):
    nums1 = sorted(a) + [0] * len(b)
    merge_sorted(nums1, len(a), sorted(b), len(b))
    assert nums1 == sorted(a + b)


def test_merge_sorted_without_room():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)