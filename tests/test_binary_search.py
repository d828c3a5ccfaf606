import pytest

from algodrills.binary_search import (
    aggressive_cows,
    allocate_books,
    binary_search,
    find_rotation_point,
    painters_partition,
    peak_index,
    search_rotated,
    single_element,
)


def test_aggressive_cows_example():
    stalls = [1, 2, 8, 4, 9]
    assert aggressive_cows(stalls, 3) == 3
    assert stalls == [1, 2, 8, 4, 9]


def test_aggressive_cows_two_cows_take_the_ends():
    stalls = [1, 2, 8, 4, 9]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_too_many_cows():
    assert aggressive_cows([1, 2, 8, 4, 9], 6) is None


def test_aggressive_cows_no_stalls():
    with pytest.raises(ValueError):
        aggressive_cows([], 2)


def test_allocate_books_example():
    assert allocate_books([2, 1, 3, 4], 2) == 6


def test_allocate_books_one_student_reads_all():
    books = [2, 1, 3, 4]
    assert allocate_books(books, 1) == sum(books)
    assert allocate_books(books, len(books)) == max(books)


def test_allocate_books_too_many_students():
    assert allocate_books([2, 1, 3, 4], 5) is None


def test_painters_partition_example():
    assert painters_partition([11, 8, 12, 22, 21], 2) == 31


def test_painters_partition_bounds():
    boards = [11, 8, 12, 22, 21]
    assert painters_partition(boards, 0) == sum(boards)
    assert painters_partition(boards, len(boards)) == max(boards)


def test_painters_partition_no_boards():
    with pytest.raises(ValueError):
        painters_partition([], 1)


@pytest.mark.parametrize(
    "values", [[0, 3, 8, 9, 5, 2], [24, 69, 100, 99, 79, 78, 67, 36, 26, 19]]
)
def test_peak_index_is_local_maximum(values):
    index = peak_index(values)
    assert values[index] > values[index - 1]
    assert values[index] > values[index + 1]
    assert values[index] == max(values)


def test_peak_index_absent_in_ascending():
    assert peak_index([1, 2, 3, 4]) is None


def test_binary_search_finds_every_value():
    values = [1, 3, 5, 7, 9, 11]
    for index, value in enumerate(values):
        assert binary_search(values, value) == index
    assert binary_search(values, 4) is None


def test_binary_search_respects_bounds():
    values = [1, 3, 5, 7, 9, 11]
    assert binary_search(values, 1, 2, 5) is None
    assert binary_search(values, 9, 2, 5) == values.index(9)


def test_find_rotation_point():
    values = [3, 4, 5, 6, 7, 0, 1, 2]
    point = find_rotation_point(values)
    assert values[point] < values[point - 1]
    assert values[point:] + values[:point] == sorted(values)


def test_find_rotation_point_unrotated():
    assert find_rotation_point([1, 2, 3, 4, 5]) is None


@pytest.mark.parametrize(
    "values", [[3, 4, 5, 6, 7, 0, 1, 2], [3, 1], [1, 2, 3, 4, 5], [7]]
)
def test_search_rotated_finds_every_value(values):
    for value in values:
        assert search_rotated(values, value) == values.index(value)


def test_search_rotated_missing():
    assert search_rotated([3, 4, 5, 6, 7, 0, 1, 2], 42) is None
    assert search_rotated([], 1) is None


@pytest.mark.parametrize(
    "values",
    [
        [1, 1, 2, 3, 3, 4, 4, 8, 8],
        [3, 3, 7, 7, 10, 11, 11],
        [1, 2, 2, 3, 3],
        [1, 1, 2, 2, 3],
        [5],
    ],
)
def test_single_element_appears_once(values):
    result = single_element(values)
    assert values.count(result) == 1


def test_single_element_empty():
    with pytest.raises(ValueError):
        single_element([])