"""A chained hash table and prefix-sum counting with a dictionary."""

from __future__ import annotations

from collections.abc import Iterable

_LOAD_THRESHOLD = 1


class HashTable:
    """String-keyed hash table with separate chaining.

    New entries go to the head of their bucket's chain. The table doubles
    its bucket count once it holds more entries than buckets.
    """

    def __init__(self, capacity: int = 50) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._table: list[list[tuple[str, int]]] = [[] for _ in range(capacity)]
        self._size = 0

    def _index(self, key: str) -> int:
        return sum(ord(char) * ord(char) for char in key) % len(self._table)

    def _rehash(self) -> None:
        entries = [entry for bucket in self._table for entry in bucket]
        self._table = [[] for _ in range(len(self._table) * 2)]
        self._size = 0
        for key, value in entries:
            self.insert(key, value)

    def insert(self, key: str, value: int) -> None:
        """Add an entry at the head of its bucket; an existing key is shadowed."""
        self._table[self._index(key)].insert(0, (key, value))
        self._size += 1
        if self._size / len(self._table) > _LOAD_THRESHOLD:
            self._rehash()

    def remove(self, key: str) -> None:
        """Remove the newest entry for ``key``; raise KeyError if there is none."""
        bucket = self._table[self._index(key)]
        for position, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[position]
                self._size -= 1
                return
        raise KeyError(key)

    def search(self, key: str) -> int:
        """Value of the newest entry for ``key``; raise KeyError if there is none."""
        for stored, value in self._table[self._index(key)]:
            if stored == key:
                return value
        raise KeyError(key)

    def keys(self) -> list[str]:
        """Keys of all entries, bucket by bucket, each chain from its head."""
        return [key for bucket in self._table for key, _ in bucket]

    def buckets(self) -> list[list[tuple[str, int]]]:
        """A copy of every bucket's chain of ``(key, value)`` pairs."""
        return [list(bucket) for bucket in self._table]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose elements add up to ``k``."""
    seen: dict[int, int] = {}
    running = 0
    count = 0
    for value in nums:
        running += value
        count += seen.get(running - k, 0)
        if running == k:
            count += 1
        seen[running] = seen.get(running, 0) + 1
    return count