"""Classic one-dimensional array problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, combinations
from operator import mul


def max_profit_brute_force(prices: Sequence[int]) -> int:
    """Best profit from one buy and a later sell, trying every pair."""
    best = max(
        (sell - buy for day, sell in enumerate(prices) for buy in prices[:day]),
        default=0,
    )
    return max(best, 0)


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy and a later sell, in a single pass."""
    profit = 0
    cheapest: float = float("inf")
    for price in prices:
        cheapest = min(cheapest, price)
        profit = max(profit, price - cheapest)
    return int(profit)


def max_water_brute_force(heights: Sequence[int]) -> int:
    """Largest container area between two lines; -1 for fewer than two lines."""
    return max(
        (
            min(left, right) * (j - i)
            for (i, left), (j, right) in combinations(enumerate(heights), 2)
        ),
        default=-1,
    )


def max_water(heights: Sequence[int]) -> int:
    """Largest container area found with two pointers; -1 for fewer than two lines."""
    i, j = 0, len(heights) - 1
    best = -1
    while i < j:
        best = max(best, min(heights[i], heights[j]) * (j - i))
        if heights[i] < heights[j]:
            i += 1
        else:
            j -= 1
    return best


def _require_values(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("sequence must not be empty")


def max_subarray_sum_brute_force(nums: Sequence[int]) -> int:
    """Largest contiguous subarray sum, summing every subarray from scratch."""
    _require_values(nums)
    n = len(nums)
    return max(
        sum(nums[start:stop]) for start in range(n) for stop in range(start + 1, n + 1)
    )


def max_subarray_sum_quadratic(nums: Sequence[int]) -> int:
    """Largest contiguous subarray sum, extending running sums from each start."""
    _require_values(nums)
    return max(max(accumulate(nums[start:])) for start in range(len(nums)))


def kadane(nums: Sequence[int]) -> int:
    """Largest contiguous subarray sum in linear time."""
    _require_values(nums)
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Candidate majority element by Moore's voting algorithm."""
    _require_values(nums)
    count = 0
    candidate = nums[0]
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two elements of an ascending sequence that add to ``target``."""
    i, j = 0, len(nums) - 1
    while i < j:
        total = nums[i] + nums[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None


def power(base: float, exponent: int) -> float:
    """``base`` raised to an integer ``exponent`` by binary exponentiation."""
    factor = float(base)
    remaining = exponent
    if remaining < 0:
        factor = 1 / factor
        remaining = -remaining
    result = 1.0
    while remaining > 0:
        if remaining & 1:
            result *= factor
        factor *= factor
        remaining >>= 1
    return result


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Product of every other element, built from prefix and suffix products."""
    if not nums:
        return []
    prefix = list(accumulate(nums[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def product_except_self_compact(nums: Sequence[int]) -> list[int]:
    """Product of every other element, keeping only one extra running value."""
    if not nums:
        return []
    answers = list(accumulate(nums[:-1], mul, initial=1))
    suffix = 1
    for i in reversed(range(len(nums) - 1)):
        suffix *= nums[i + 1]
        answers[i] *= suffix
    return answers


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of width one."""
    if len(heights) < 3:
        return 0
    left_max = list(accumulate(heights[:-1], max, initial=-1))
    right_max = list(accumulate(reversed(heights[1:]), max, initial=-1))[::-1]
    return sum(
        min(left, right) - bar
        for left, bar, right in zip(left_max[1:-1], heights[1:-1], right_max[1:-1])
        if left > bar and right > bar
    )