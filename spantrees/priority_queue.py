"""Bounded binary min-heap of vertices keyed by priority."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """A vertex together with its priority."""

    vertex: int = 0
    priority: int = 0


class PriorityQueue:
    """A min-heap holding at most ``capacity`` nodes.

    Pushing onto a full queue drops the node.
    """

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self._heap: list[Node] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, node: Node) -> bool:
        """Insert ``node``; return False if the queue was full and it was dropped."""
        if len(self._heap) >= self.capacity:
            return False
        self._heap.append(node)
        self._sift_up(len(self._heap) - 1)
        return True

    def pop(self) -> Node:
        """Remove and return the node with the smallest priority."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority >= heap[parent].priority:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        count = len(heap)
        while 2 * index + 1 < count:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if heap[left].priority < heap[smallest].priority:
                smallest = left
            if right < count and heap[right].priority < heap[smallest].priority:
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest