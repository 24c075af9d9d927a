import pytest

from algoshelf.leetcode.linked_list import (
    ListNode,
    add_two_numbers,
    delete_middle,
    merge_two_lists,
    odd_even_list,
    pair_sum,
    remove_nth_from_end,
    reverse_list,
    swap_pairs,
)


def values(head):
    return list(head) if head is not None else []


def digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


@pytest.mark.parametrize("vals", [[], [7], [1, 2, 3, 4, 5]])
def test_from_iterable_round_trip(vals):
    assert values(ListNode.from_iterable(vals)) == vals


def test_from_iterable_empty_is_none():
    assert ListNode.from_iterable([]) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    vals = [10, 20, 30, 40, 50]
    result = values(remove_nth_from_end(ListNode.from_iterable(vals), n))
    assert len(result) == len(vals) - 1
    assert vals[-n] not in result
    assert [v for v in vals if v != vals[-n]] == result


def test_remove_only_node():
    assert remove_nth_from_end(ListNode.from_iterable([1]), 1) is None


@pytest.mark.parametrize("n", [0, 4])
def test_remove_nth_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(ListNode.from_iterable([1, 2, 3]), n)


@pytest.mark.parametrize(
    "a, b",
    [([2, 4, 3], [5, 6, 4]), ([0], [0]), ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9]), ([1], [])],
)
def test_add_two_numbers_sums(a, b):
    result = values(add_two_numbers(ListNode.from_iterable(a), ListNode.from_iterable(b)))
    assert digits_to_int(result) == digits_to_int(a) + digits_to_int(b)
    assert all(0 <= d <= 9 for d in result)


@pytest.mark.parametrize("vals", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(vals):
    assert values(reverse_list(ListNode.from_iterable(vals))) == vals[::-1]


@pytest.mark.parametrize("vals", [[1, 3, 4, 7, 1, 2, 6], [1, 2, 3, 4], [2, 1]])
def test_delete_middle(vals):
    result = values(delete_middle(ListNode.from_iterable(vals)))
    expected = list(vals)
    del expected[len(vals) // 2]
    assert result == expected


def test_delete_middle_single_node():
    assert delete_middle(ListNode.from_iterable([1])) is None


@pytest.mark.parametrize(
    "a, b", [([1, 2, 4], [1, 3, 4]), ([], []), ([], [0]), ([5, 6], [1, 2, 3])]
)
def test_merge_two_lists(a, b):
    merged = merge_two_lists(ListNode.from_iterable(a), ListNode.from_iterable(b))
    assert values(merged) == sorted(a + b)


def test_pair_sum_example():
    assert pair_sum(ListNode.from_iterable([5, 4, 2, 1])) == 6


def test_pair_sum_constant_list():
    assert pair_sum(ListNode.from_iterable([7] * 6)) == 14


@pytest.mark.parametrize("vals", [[1, 2, 3, 4], [1, 2, 3], [1], [1, 2, 3, 4, 5, 6]])
def test_swap_pairs_is_involution(vals):
    once = values(swap_pairs(ListNode.from_iterable(vals)))
    assert sorted(once) == sorted(vals)
    twice = values(swap_pairs(ListNode.from_iterable(once)))
    assert twice == vals


def test_swap_pairs_swaps_front():
    vals = [1, 2, 3, 4]
    result = values(swap_pairs(ListNode.from_iterable(vals)))
    assert result[0] == vals[1] and result[1] == vals[0]


def test_swap_pairs_empty():
    assert swap_pairs(None) is None


@pytest.mark.parametrize("vals", [[1, 2, 3, 4, 5], [2, 1, 3, 5, 6, 4, 7], [1], [1, 2], []])
def test_odd_even_list(vals):
    result = values(odd_even_list(ListNode.from_iterable(vals)))
    assert result == vals[0::2] + vals[1::2]