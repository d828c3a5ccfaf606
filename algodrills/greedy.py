"""Greedy strategies: knapsack, coin change, job sequencing, chains and pairings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def fractional_knapsack(
    prices: Sequence[int], weights: Sequence[int], capacity: int
) -> float:
    """Greatest value that fits in ``capacity`` when items may be split."""
    if len(prices) != len(weights):
        raise ValueError("prices and weights must have the same length")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")

    items = sorted(
        zip(prices, weights), key=lambda item: item[0] / item[1], reverse=True
    )
    remaining = capacity
    total = 0.0
    for price, weight in items:
        if remaining <= 0:
            break
        if weight <= remaining:
            total += price
            remaining -= weight
        else:
            total += price / weight * remaining
            remaining = 0
    return total


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Coins used when paying ``amount`` largest denomination first.

    Any part of ``amount`` that no denomination fits is left unpaid.
    """
    count = 0
    for coin in sorted(coins, reverse=True):
        if amount <= 0:
            break
        if coin <= amount:
            used, amount = divmod(amount, coin)
            count += used
    return count


def job_sequencing(jobs: Iterable[tuple[int, int]]) -> int:
    """Total profit of jobs taken, richest first, given ``(deadline, profit)`` pairs.

    A job is taken only if its deadline is beyond the last one taken.
    """
    ordered = sorted(jobs, key=lambda job: job[1], reverse=True)
    if not ordered:
        return 0
    deadline, total = ordered[0]
    safe_deadline = deadline + 1
    for deadline, profit in ordered[1:]:
        if deadline >= safe_deadline:
            total += profit
            safe_deadline = deadline + 1
    return total


def max_chain_length(pairs: Iterable[tuple[int, int]]) -> int:
    """Longest chain of pairs where each starts after the previous one ends."""
    ordered = sorted(pairs, key=lambda pair: pair[1])
    if not ordered:
        return 0
    chain = 1
    end = ordered[0][1]
    for start, stop in ordered[1:]:
        if start > end:
            chain += 1
            end = stop
    return chain


def min_absolute_diff(first: Iterable[int], second: Iterable[int]) -> int:
    """Smallest total absolute difference over a pairing of two equal-size groups."""
    left = sorted(first)
    right = sorted(second)
    if len(left) != len(right):
        raise ValueError("both groups must have the same size")
    return sum(abs(a - b) for a, b in zip(left, right))