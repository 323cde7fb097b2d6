"""Small container types: a min-priority queue, a FIFO queue and a stack."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Pops the value with the lowest priority first."""

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._counter = itertools.count()

    def push(self, value: T, priority: int) -> None:
        heapq.heappush(self._heap, [priority, next(self._counter), value])

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        return heapq.heappop(self._heap)[2]

    def update(self, value: T, priority: int) -> None:
        """Change the priority of the first entry holding this very value."""
        for entry in self._heap:
            if entry[2] is value:
                entry[0] = priority
                heapq.heapify(self._heap)
                return

    def __len__(self) -> int:
        return len(self._heap)


class Queue(Generic[T]):
    """First in, first out."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def shift(self) -> T:
        if not self._items:
            raise IndexError("shift from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class Stack(Generic[T]):
    """Last in, first out."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T | None:
        """The top item, or None when the stack is empty."""
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)