"""Singly linked lists: building, reversing, reordering, cycles and merge sort."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    value: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "[" + " --> ".join(str(value) for value in self) + "]"


def from_iterable(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order; None for no values."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[int]:
    """Values of an acyclic list, head first."""
    return list(head) if head is not None else []


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_cycle(head: ListNode | None) -> bool:
    """Break the cycle reachable from ``head``, if any; return whether one was broken."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False

    assert head is not None and fast is not None
    slow = head
    last: ListNode | None = None
    while slow is not fast:
        slow = slow.next  # type: ignore[assignment]
        last = fast
        fast = fast.next  # type: ignore[assignment]

    if last is None:
        # The cycle starts at the head: find the node that points back to it.
        last = head
        while last.next is not head:
            last = last.next  # type: ignore[assignment]
    last.next = None
    return True


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    curr = head
    while curr is not None:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    return prev


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``left`` to ``right``; return the head."""
    if left < 1 or right < left:
        raise ValueError("positions must satisfy 1 <= left <= right")
    length = sum(1 for _ in head) if head is not None else 0
    if right > length:
        raise ValueError("right position is beyond the end of the list")
    if left == right:
        return head

    dummy = ListNode(0, head)
    before = dummy
    for _ in range(left - 1):
        before = before.next  # type: ignore[assignment]
    start = before.next
    prev: ListNode | None = None
    curr = start
    for _ in range(right - left + 1):
        assert curr is not None
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    before.next = prev
    assert start is not None
    start.next = curr
    return dummy.next


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every full run of ``k`` nodes; a shorter tail is left as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: ListNode | None = group_prev
        for _ in range(k):
            kth = kth.next  # type: ignore[union-attr]
            if kth is None:
                return dummy.next
        assert kth is not None
        group_next = kth.next
        first = group_prev.next
        prev, curr = group_next, first
        while curr is not group_next:
            assert curr is not None
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        group_prev.next = kth
        assert first is not None
        group_prev = first


def reorder(head: ListNode | None) -> ListNode | None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place; return the head."""
    if head is None or head.next is None:
        return head

    slow: ListNode = head
    fast: ListNode | None = head
    prev: ListNode | None = None
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    assert prev is not None
    prev.next = None

    second = reverse(slow)
    first = head.next
    tail = head
    while first is not None and second is not None:
        tail.next = second
        tail = second
        second = second.next
        tail.next = first
        tail = first
        first = first.next
    tail.next = first if first is not None else second
    return head


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    return list(heapq.merge(first, second))


def merge_sort(values: Iterable[int]) -> list[int]:
    """A new ascending list of ``values``, sorted by splitting at the middle and merging."""
    items: Sequence[int] = list(values)
    if len(items) <= 1:
        return list(items)
    mid = len(items) // 2
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))