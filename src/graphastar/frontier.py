from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import heapq
from typing import Generic, TypeVar

from .errors import EmptyQueueError

T = TypeVar("T")

Comparator = Callable[[T, T], float]


@dataclass
class _Entry(Generic[T]):
    item: T
    count: int
    compare: Comparator[T] = field(repr=False)

    def __lt__(self, other: _Entry[T]) -> bool:
        c = self.compare(self.item, other.item)
        if c != 0:
            return c < 0
        return self.count < other.count


class PriorityQueue(Generic[T]):
    """Binary heap ordered by a three-way comparator.

    ``compare(a, b)`` is negative when ``a`` should leave the queue before ``b``.
    Equal-ranked items leave in insertion order; callers must not rely on that.
    """

    def __init__(self, compare: Comparator[T]) -> None:
        self._compare = compare
        self._heap: list[_Entry[T]] = []
        self._counter = 0

    def add(self, item: T) -> None:
        heapq.heappush(self._heap, _Entry(item, self._counter, self._compare))
        self._counter += 1

    def dequeue(self) -> T:
        if not self._heap:
            raise EmptyQueueError()
        return heapq.heappop(self._heap).item

    def peek(self) -> T:
        if not self._heap:
            raise EmptyQueueError("peek into an empty priority queue")
        return self._heap[0].item

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
