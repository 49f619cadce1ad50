"""Ordering with heaps, stacks and queues, and a sorted multimap."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Person:
    """A named person with an age."""

    name: str
    age: int


class MultiMap:
    """A mapping ordered by key that may hold several values per key.

    Values under one key keep the order in which they were inserted.
    """

    def __init__(self, pairs: Iterable[tuple[Hashable, Any]] = ()) -> None:
        self._data: dict[Any, list[Any]] = {}
        for key, value in pairs:
            self.insert(key, value)

    def insert(self, key: Any, value: Any) -> None:
        """Add ``value`` under ``key``."""
        self._data.setdefault(key, []).append(value)

    def remove_first(self, key: Any) -> Any:
        """Remove and return the first value stored under ``key``.

        Raises KeyError if ``key`` is absent.
        """
        values = self._data[key]
        value = values.pop(0)
        if not values:
            del self._data[key]
        return value

    def remove_all(self, key: Any) -> int:
        """Remove every value under ``key`` and return how many were removed."""
        return len(self._data.pop(key, []))

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        for key in sorted(self._data):
            for value in self._data[key]:
                yield key, value

    def __len__(self) -> int:
        return sum(len(values) for values in self._data.values())

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.items()


def max_heap_order(values: Iterable[Any]) -> list[Any]:
    """Return the values in the order a max-heap pops them (descending)."""
    heap = [_Reversed(value) for value in values]
    heapq.heapify(heap)
    return [heapq.heappop(heap).value for _ in range(len(heap))]


def min_heap_order(values: Iterable[Any]) -> list[Any]:
    """Return the values in the order a min-heap pops them (ascending)."""
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def oldest_first(people: Sequence[Person], count: int) -> list[Person]:
    """Return the ``count`` oldest people, oldest first.

    Raises ValueError if ``count`` is negative or exceeds the number of people.
    """
    if count < 0 or count > len(people):
        raise ValueError(f"count must be between 0 and {len(people)}")
    heap = [(-person.age, index, person) for index, person in enumerate(people)]
    heapq.heapify(heap)
    return [heapq.heappop(heap)[2] for _ in range(count)]


def stack_order(values: Iterable[Any]) -> list[Any]:
    """Return the values in the order they leave a stack: last in, first out."""
    stack = list(values)
    popped = []
    while stack:
        popped.append(stack.pop())
    return popped


def queue_order(values: Iterable[Any]) -> list[Any]:
    """Return the values in the order they leave a queue: first in, first out."""
    queue = deque(values)
    popped = []
    while queue:
        popped.append(queue.popleft())
    return popped


class _Reversed:
    """Wrapper that inverts ordering so heapq behaves as a max-heap."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: _Reversed) -> bool:
        return other.value < self.value