"""A binary max-heap and problems solved with priority queues."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import NamedTuple


def _sift_down(items: list[int], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


class MaxHeap:
    """A max-heap kept in a list laid out as a complete binary tree."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> MaxHeap:
        """Add ``value`` and return the heap, so pushes can be chained."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if items[child] <= items[parent]:
                break
            items[child], items[parent] = items[parent], items[child]
            child = parent
        return self

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        _sift_down(items, 0, len(items))
        return top

    def peek(self) -> int:
        """The largest value, left in place."""
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(values: Iterable[int]) -> list[int]:
    """A new ascending list of ``values``, sorted in place by heap sort."""
    items = list(values)
    n = len(items)
    for index in range(n // 2 - 1, -1, -1):
        _sift_down(items, index, n)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def min_rope_cost(ropes: Iterable[int]) -> int:
    """Least total cost of joining all ropes, each join costing the joined length."""
    heap = list(ropes)
    if not heap:
        raise ValueError("there must be at least one rope")
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


class Car(NamedTuple):
    """A position and its squared distance from the origin."""

    x: int
    y: int
    distance: int


def nearest_cars(positions: Sequence[tuple[int, int]], k: int) -> list[Car]:
    """The ``k`` positions closest to the origin, nearest first.

    Returns an empty list when ``k`` exceeds the number of positions.
    """
    if k > len(positions):
        return []
    cars = (Car(x, y, x * x + y * y) for x, y in positions)
    return heapq.nsmallest(k, cars, key=lambda car: car.distance)


def rank_by_score(
    records: Iterable[tuple[str, int]], descending: bool = True
) -> list[tuple[str, int]]:
    """``(name, score)`` records ordered by score, highest first by default."""
    return sorted(records, key=lambda record: record[1], reverse=descending)


def sliding_window_max(nums: Sequence[int], k: int) -> list[int]:
    """Largest value of every window of ``k`` consecutive elements.

    Returns an empty list when ``k`` exceeds the length of ``nums``.
    """
    if k < 1:
        raise ValueError("window size must be at least 1")
    if k > len(nums):
        return []
    heap = [(-nums[i], i) for i in range(k)]
    heapq.heapify(heap)
    result = [-heap[0][0]]
    for i in range(k, len(nums)):
        while heap and heap[0][1] <= i - k:
            heapq.heappop(heap)
        heapq.heappush(heap, (-nums[i], i))
        result.append(-heap[0][0])
    return result