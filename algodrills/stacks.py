"""Problems solved with a stack: brackets, histograms, spans and greater elements."""

from __future__ import annotations

from collections.abc import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}


def has_duplicate_parentheses(expression: str) -> bool:
    """Whether some pair of parentheses encloses nothing but another pair or nothing.

    Raises ValueError on a closing parenthesis with no opening one.
    """
    stack: list[str] = []
    for char in expression:
        if char != ")":
            stack.append(char)
            continue
        if not stack:
            raise ValueError("unmatched closing parenthesis")
        if stack[-1] == "(":
            return True
        while stack and stack[-1] != "(":
            stack.pop()
        if not stack:
            raise ValueError("unmatched closing parenthesis")
        stack.pop()
    return False


def nearest_smaller_left(heights: Sequence[int]) -> list[int]:
    """For each bar, the index of the nearest strictly lower bar to its left, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for index, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(index)
    return result


def nearest_smaller_right(heights: Sequence[int]) -> list[int]:
    """For each bar, the index of the nearest strictly lower bar to its right, or len."""
    n = len(heights)
    result = [n] * n
    stack: list[int] = []
    for index in reversed(range(n)):
        while stack and heights[stack[-1]] >= heights[index]:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(index)
    return result


def largest_rectangle(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram of unit-width bars."""
    left = nearest_smaller_left(heights)
    right = nearest_smaller_right(heights)
    return max(
        (height * (r - l - 1) for height, l, r in zip(heights, left, right)),
        default=0,
    )


def next_greater(nums: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for value in reversed(nums):
        while stack and stack[-1] <= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    result.reverse()
    return result


def push_at_bottom(stack: list[int], value: int) -> None:
    """Place ``value`` beneath every item of ``stack``, whose top is its last item."""
    stack.insert(0, value)


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, how many consecutive days up to it had a price no higher."""
    result: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        result.append(day + 1 if not stack else day - stack[-1])
        stack.append(day)
    return result


def is_valid_parentheses(text: str) -> bool:
    """Whether ``text`` is a balanced sequence of (), [] and {} brackets only."""
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack