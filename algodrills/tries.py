"""A prefix tree and word problems solved with it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cache


@dataclass
class _Node:
    freq: int = 0
    is_end: bool = False
    children: dict[str, _Node] = field(default_factory=dict)


class Trie:
    """A prefix tree that counts how many inserted words pass through each node."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the tree."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
            node.freq += 1
        node.is_end = True

    def _walk(self, text: str) -> _Node | None:
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


def shortest_unique_prefixes(words: Iterable[str]) -> list[str]:
    """For each word, its shortest prefix that no other word shares.

    A word that is itself a prefix of another word is returned whole.
    """
    words = list(words)
    trie = Trie(words)
    answers: list[str] = []
    for word in words:
        node = trie._root
        prefix = ""
        for char in word:
            node = node.children[char]
            prefix += char
            if node.freq == 1:
                break
        answers.append(prefix)
    return answers


def longest_word_with_all_prefixes(words: Iterable[str]) -> str:
    """Longest word every prefix of which is also a word.

    Ties go to the alphabetically smallest word; "" when there is none.
    """
    trie = Trie(words)
    best = ""

    def walk(node: _Node, prefix: str) -> None:
        nonlocal best
        for char, child in sorted(node.children.items()):
            if child.is_end:
                word = prefix + char
                if len(word) > len(best):
                    best = word
                walk(child, word)

    walk(trie._root, "")
    return best


def word_break(words: Iterable[str], key: str) -> bool:
    """Whether ``key`` can be split into a sequence of the given words."""
    trie = Trie(words)

    @cache
    def breakable(start: int) -> bool:
        if start == len(key):
            return True
        return any(
            trie.search(key[start:stop]) and breakable(stop)
            for stop in range(start + 1, len(key) + 1)
        )

    return breakable(0)