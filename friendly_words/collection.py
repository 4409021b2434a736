"""
Length-indexed word collection.

Words are grouped by length in one pass. Buckets keep the order in which each
length was first seen (not numeric order), and words keep their input order
inside a bucket.

``len()`` / ``count()`` report the number of length buckets, not the number
of words: ``WordCollection(["a", "b", "cc"]).count() == 2``. Use
``total_words()`` for the word total.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple


class WordCollection:
    __slots__ = ("_by_length", "_total")

    def __init__(self, words: Iterable[str]):
        by_length: Dict[int, List[str]] = {}
        total = 0
        for word in words:
            by_length.setdefault(len(word), []).append(word)
            total += 1
        self._by_length: Dict[int, Tuple[str, ...]] = {
            length: tuple(bucket) for length, bucket in by_length.items()
        }
        self._total = total

    def count(self) -> int:
        """Number of non-empty length buckets."""
        return len(self._by_length)

    def __len__(self) -> int:
        return self.count()

    def iterate(self) -> Iterator[str]:
        for bucket in self._by_length.values():
            yield from bucket

    def __iter__(self) -> Iterator[str]:
        return self.iterate()

    def of_length(self, length: int) -> Tuple[str, ...]:
        """Words of exactly ``length`` characters, in input order; empty if none."""
        return self._by_length.get(length, ())

    def lengths(self) -> Tuple[int, ...]:
        return tuple(self._by_length)

    def total_words(self) -> int:
        return self._total

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word in self._by_length.get(len(word), ())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordCollection):
            return NotImplemented
        # Bucket order is part of identity, so compare as ordered item lists.
        return list(self._by_length.items()) == list(other._by_length.items())

    def __hash__(self) -> int:
        return hash(tuple(self._by_length.items()))

    def __repr__(self) -> str:
        return f"WordCollection({list(self.iterate())!r})"
