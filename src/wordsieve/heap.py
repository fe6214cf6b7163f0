#!/usr/bin/env python3
"""
heap.py — Binary heap ordered by a caller-supplied `less` function.

heapq only orders by the items themselves; ranking passes need to order
WordStats by whichever analysis key was selected, and to break ties by
collection order. The root is always the minimum under `less`, so a
max-first ranking passes less(a, b) = key(a) > key(b).

Usage:
    heap = Heap(lambda a, b: a.green > b.green)
    for stats in results:
        heap.push(stats)
    best = heap.pop()
"""

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar('T')


class Heap(Generic[T]):
    """Priority queue; pop() and peek() return None when empty."""

    def __init__(self, less: Callable[[T, T], bool], values: Optional[List[T]] = None):
        self.less = less
        self.values: List[T] = list(values) if values else []
        if self.values:
            self.init()

    def __len__(self) -> int:
        return len(self.values)

    def init(self):
        """Re-establish the heap invariant over all values in O(n)."""
        n = len(self.values)
        for i in range(n // 2 - 1, -1, -1):
            self._down(i, n)

    def push(self, value: T):
        self.values.append(value)
        self._up(len(self.values) - 1)

    def peek(self) -> Optional[T]:
        if not self.values:
            return None
        return self.values[0]

    def pop(self) -> Optional[T]:
        """Remove and return the minimum element in O(log n)."""
        if not self.values:
            return None
        n = len(self.values) - 1
        self._swap(0, n)
        self._down(0, n)
        return self.values.pop()

    def remove(self, i: int) -> Optional[T]:
        """Remove and return the element at index i."""
        if not 0 <= i < len(self.values):
            return None
        n = len(self.values) - 1
        if n != i:
            self._swap(i, n)
            if not self._down(i, n):
                self._up(i)
        return self.values.pop()

    def fix(self, i: int):
        """Restore ordering after the element at index i changed."""
        if not 0 <= i < len(self.values):
            return
        if not self._down(i, len(self.values)):
            self._up(i)

    def drain(self) -> Iterator[T]:
        """Pop every element, minimum first."""
        while self.values:
            yield self.pop()

    def _swap(self, i: int, j: int):
        self.values[i], self.values[j] = self.values[j], self.values[i]

    def _up(self, j: int):
        while j > 0:
            i = (j - 1) // 2  # parent
            if not self.less(self.values[j], self.values[i]):
                break
            self._swap(i, j)
            j = i

    def _down(self, i0: int, n: int) -> bool:
        i = i0
        while True:
            j1 = 2 * i + 1
            if j1 >= n:
                break
            j = j1  # left child
            j2 = j1 + 1
            if j2 < n and self.less(self.values[j2], self.values[j1]):
                j = j2  # right child
            if not self.less(self.values[j], self.values[i]):
                break
            self._swap(i, j)
            i = j
        return i > i0


class BoundedHeap(Heap[T]):
    """
    Heap that keeps at most `limit` items by evicting the root.

    To keep the K best items, order by "worse than" so the root is the
    weakest item kept; best_first() then returns them strongest first.
    A limit of 0 keeps everything.
    """

    def __init__(self, less: Callable[[T, T], bool], limit: int):
        super().__init__(less)
        self.limit = limit

    def push(self, value: T):
        super().push(value)
        if self.limit:
            while len(self.values) > self.limit:
                self.pop()

    def best_first(self) -> List[T]:
        kept = list(self.drain())
        kept.reverse()
        return kept
