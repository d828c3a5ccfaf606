"""Queue rearrangements."""

from __future__ import annotations

from collections import deque


def interleave(queue: deque[int]) -> None:
    """Interleave the first half of ``queue`` with its second half, in place.

    For an odd length the first half is the shorter one.
    """
    first_half = deque(queue.popleft() for _ in range(len(queue) // 2))
    while first_half:
        queue.append(first_half.popleft())
        queue.append(queue.popleft())