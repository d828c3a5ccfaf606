import pytest

from algodrills.linked_list import (
    ListNode,
    from_iterable,
    has_cycle,
    merge_sort,
    merge_sorted,
    remove_cycle,
    reorder,
    reverse,
    reverse_between,
    reverse_k_group,
    to_list,
)


def _cyclic(values, start_index):
    head = from_iterable(values)
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    nodes[-1].next = nodes[start_index]
    return head


def test_round_trip():
    values = [5, 1, 3, 2, 9]
    assert to_list(from_iterable(values)) == values


def test_empty_list_is_none():
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_iteration_yields_values():
    head = from_iterable([7, 8, 9])
    assert list(head) == [7, 8, 9]


def test_str_uses_arrows():
    assert str(from_iterable([1, 2, 3])) == "[1 --> 2 --> 3]"


def test_str_single_node():
    assert str(ListNode(4)) == "[4]"


def test_has_cycle_detects_loop():
    head = _cyclic([1, 2, 3, 4, 5, 6, 7, 8], 2)
    assert has_cycle(head) is True


def test_has_cycle_on_plain_list():
    assert has_cycle(from_iterable([1, 2, 3, 4])) is False
    assert has_cycle(None) is False


def test_remove_cycle_restores_list():
    values = [1, 2, 3, 4, 5, 6, 7, 8]
    head = _cyclic(values, 2)
    assert remove_cycle(head) is True
    assert has_cycle(head) is False
    assert to_list(head) == values


def test_remove_cycle_starting_at_head():
    values = [1, 2, 3, 4]
    head = _cyclic(values, 0)
    assert remove_cycle(head) is True
    assert to_list(head) == values


def test_remove_cycle_without_cycle():
    head = from_iterable([1, 2, 3])
    assert remove_cycle(head) is False
    assert to_list(head) == [1, 2, 3]


def test_reverse():
    values = [5, 4, 3, 2, 1]
    assert to_list(reverse(from_iterable(values))) == list(reversed(values))


def test_reverse_empty():
    assert reverse(None) is None


def test_reverse_between_example():
    head = reverse_between(from_iterable([1, 2, 3, 4, 5]), 2, 4)
    assert to_list(head) == [1, 4, 3, 2, 5]


def test_reverse_between_whole_list_matches_reverse():
    values = [3, 1, 4, 1, 5]
    head = reverse_between(from_iterable(values), 1, len(values))
    assert to_list(head) == list(reversed(values))


def test_reverse_between_same_position_unchanged():
    values = [1, 2, 3]
    assert to_list(reverse_between(from_iterable(values), 2, 2)) == values


@pytest.mark.parametrize("left, right", [(0, 2), (3, 2), (2, 9)])
def test_reverse_between_rejects_bad_positions(left, right):
    with pytest.raises(ValueError):
        reverse_between(from_iterable([1, 2, 3, 4, 5]), left, right)


def test_reverse_k_group_example():
    head = reverse_k_group(from_iterable([1, 2, 3, 4, 5]), 3)
    assert to_list(head) == [3, 2, 1, 4, 5]


def test_reverse_k_group_one_is_identity():
    values = [1, 2, 3, 4]
    assert to_list(reverse_k_group(from_iterable(values), 1)) == values


def test_reverse_k_group_full_length_reverses():
    values = [1, 2, 3, 4]
    assert to_list(reverse_k_group(from_iterable(values), 4)) == list(reversed(values))


def test_reverse_k_group_longer_than_list_unchanged():
    values = [1, 2]
    assert to_list(reverse_k_group(from_iterable(values), 3)) == values


def test_reverse_k_group_rejects_zero():
    with pytest.raises(ValueError):
        reverse_k_group(from_iterable([1, 2]), 0)


def test_reorder_example():
    head = reorder(from_iterable([1, 2, 3, 4, 5]))
    assert to_list(head) == [1, 5, 2, 4, 3]


def test_reorder_keeps_elements_and_head():
    values = [10, 20, 30, 40, 50, 60]
    head = from_iterable(values)
    result = reorder(head)
    assert result is head
    out = to_list(result)
    assert sorted(out) == values
    assert out[0] == values[0]
    assert out[1] == values[-1]


def test_reorder_short_lists_unchanged():
    assert to_list(reorder(from_iterable([1, 2]))) == [1, 2]
    assert reorder(None) is None


def test_merge_sorted():
    first, second = [1, 4, 9], [2, 3, 10, 11]
    assert merge_sorted(first, second) == sorted(first + second)


def test_merge_sort_source_example():
    values = [5, 1, 3, 2, 9, 11, 8]
    assert merge_sort(values) == sorted(values)


def test_merge_sort_edge_cases():
    assert merge_sort([]) == []
    assert merge_sort([4]) == [4]
    assert merge_sort([3, 3, 1]) == sorted([3, 3, 1])