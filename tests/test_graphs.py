import pytest

from algoshelf.leetcode.graphs import can_visit_all_rooms, find_circle_num


@pytest.mark.parametrize("n", [1, 3, 6])
def test_identity_matrix_isolated_cities(n):
    matrix = [[int(i == j) for j in range(n)] for i in range(n)]
    assert find_circle_num(matrix) == n


@pytest.mark.parametrize("n", [1, 4])
def test_full_matrix_one_province(n):
    assert find_circle_num([[1] * n for _ in range(n)]) == 1


def test_circle_num_example():
    assert find_circle_num([[1, 1, 0], [1, 1, 0], [0, 0, 1]]) == 2


def test_circle_num_indirect_link():
    matrix = [
        [1, 1, 0, 0],
        [1, 1, 1, 0],
        [0, 1, 1, 0],
        [0, 0, 0, 1],
    ]
    assert find_circle_num(matrix) == 2


def test_all_rooms_reachable():
    assert can_visit_all_rooms([[1], [2], [3], []]) is True


def test_room_locked():
    assert can_visit_all_rooms([[1, 3], [3, 0, 1], [2], [0]]) is False


def test_single_room():
    assert can_visit_all_rooms([[]]) is True


def test_no_keys_in_first_room():
    assert can_visit_all_rooms([[], [0]]) is False