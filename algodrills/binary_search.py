"""Binary search over sorted data and over answer spaces."""

from __future__ import annotations

from collections.abc import Sequence


def _can_place(stalls: Sequence[int], cows: int, gap: int) -> bool:
    placed = 1
    last = stalls[0]
    for position in stalls[1:]:
        if position - last >= gap:
            placed += 1
            last = position
        if placed == cows:
            return True
    return False


def aggressive_cows(stalls: Sequence[int], cows: int) -> int | None:
    """Largest minimum gap at which ``cows`` can be placed in the stalls.

    Returns None when no gap of at least one works.
    """
    if not stalls:
        raise ValueError("there must be at least one stall")
    ordered = sorted(stalls)
    start, end = 1, ordered[-1] - ordered[0]
    answer = None
    while start <= end:
        mid = start + (end - start) // 2
        if _can_place(ordered, cows, mid):
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def _fits_books(books: Sequence[int], students: int, limit: int) -> bool:
    readers = 1
    pages = 0
    for book in books:
        if book > limit:
            return False
        if pages + book > limit:
            readers += 1
            pages = book
        else:
            pages += book
    return readers <= students


def allocate_books(books: Sequence[int], students: int) -> int | None:
    """Smallest page limit letting ``students`` read contiguous runs of books.

    Returns None when there are more students than books.
    """
    if students > len(books):
        return None
    start, end = 0, sum(books)
    answer = None
    while start <= end:
        mid = start + (end - start) // 2
        if _fits_books(books, students, mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def _fits_boards(boards: Sequence[int], painters: int, limit: int) -> bool:
    extra = 0
    length = 0
    for board in boards:
        if board > limit:
            return False
        if length + board > limit:
            extra += 1
            length = board
        else:
            length += board
    return extra <= painters


def painters_partition(boards: Sequence[int], painters: int) -> int:
    """Smallest longest stretch when boards are split into at most painters + 1 runs."""
    if not boards:
        raise ValueError("there must be at least one board")
    start, end = max(boards), sum(boards)
    answer = end
    while start <= end:
        mid = start + (end - start) // 2
        if _fits_boards(boards, painters, mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def peak_index(values: Sequence[int]) -> int | None:
    """Index of the peak of a mountain array, ignoring the two ends; None if absent."""
    start, end = 1, len(values) - 2
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] > values[mid + 1] and values[mid] > values[mid - 1]:
            return mid
        if values[mid] > values[mid + 1]:
            end = mid - 1
        else:
            start = mid + 1
    return None


def binary_search(
    values: Sequence[int], target: int, start: int = 0, end: int | None = None
) -> int | None:
    """Index of ``target`` within ``values[start..end]`` (inclusive), or None."""
    if end is None:
        end = len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if target < values[mid]:
            end = mid - 1
        elif target > values[mid]:
            start = mid + 1
        else:
            return mid
    return None


def find_rotation_point(values: Sequence[int]) -> int | None:
    """Index where a rotated ascending sequence restarts; None if none is found."""
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if mid > start and values[mid] < values[mid - 1]:
            return mid
        if mid < end and values[mid] > values[mid + 1]:
            return mid + 1
        if values[mid] > values[start] and values[mid] > values[end]:
            start = mid + 1
        else:
            end = mid - 1
    return None


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in a rotated ascending sequence, or None."""
    if not values:
        return None
    pivot = find_rotation_point(values)
    if len(values) == 1 or pivot is None:
        return binary_search(values, target)
    result = binary_search(values, target, 0, pivot - 1)
    if result is None:
        result = binary_search(values, target, pivot, len(values) - 1)
    return result


def single_element(values: Sequence[int]) -> int | None:
    """The one value not paired with a neighbour in a sorted sequence of pairs."""
    if not values:
        raise ValueError("sequence must not be empty")
    n = len(values)
    if n == 1:
        return values[0]
    start, end = 0, n - 1
    while start <= end:
        mid = start + (end - start) // 2
        same_left = mid > 0 and values[mid] == values[mid - 1]
        same_right = mid < n - 1 and values[mid] == values[mid + 1]
        if not same_left and not same_right:
            return values[mid]
        if mid % 2 == 0:
            if same_left:
                end = mid - 1
            else:
                start = mid + 1
        elif same_left:
            start = mid + 1
        else:
            end = mid - 1
    return None