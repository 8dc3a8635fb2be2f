from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator

from .ordering import Comparator
from .process import Process


class ProcessQueue(ABC):
    """Abstract container of process references used for every pool in a simulator."""

    @abstractmethod
    def enqueue(self, process: Process) -> None:
        """Insert a process; always succeeds."""

    @abstractmethod
    def dequeue(self) -> bool:
        """Remove the head. Returns False without mutating when empty."""

    @abstractmethod
    def peek(self) -> Process | None:
        """Return the head without removing it, or None when empty."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Process]:
        ...

    def pop(self) -> Process | None:
        """Remove and return the head, or None when empty."""
        head = self.peek()
        if head is not None:
            self.dequeue()
        return head

    def is_empty(self) -> bool:
        return len(self) == 0

    def count(self) -> int:
        return len(self)


class FifoQueue(ProcessQueue):
    """Insertion-ordered queue, used by policies with no intrinsic ordering."""

    def __init__(self) -> None:
        self._items: deque[Process] = deque()

    def enqueue(self, process: Process) -> None:
        self._items.append(process)

    def dequeue(self) -> bool:
        if not self._items:
            return False
        self._items.popleft()
        return True

    def front(self) -> Process | None:
        if not self._items:
            return None
        return self._items[0]

    def peek(self) -> Process | None:
        return self.front()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Process]:
        return iter(self._items)


class PriorityQueue(ProcessQueue):
    """Array-backed binary min-heap ordered by an injected strict comparator.

    The element at index ``i`` has its parent at ``(i - 1) // 2`` and its
    children at ``2i + 1`` and ``2i + 2``. After every public operation each
    parent satisfies ``not less_than(child, parent)``.
    """

    def __init__(self, less_than: Comparator) -> None:
        self._less_than = less_than
        self._heap: list[Process] = []

    @property
    def comparator(self) -> Comparator:
        return self._less_than

    def enqueue(self, process: Process) -> None:
        self._heap.append(process)
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> bool:
        if not self._heap:
            return False
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return True

    def top(self) -> Process | None:
        if not self._heap:
            return None
        return self._heap[0]

    def peek(self) -> Process | None:
        return self.top()

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Process]:
        # Backing storage order, not priority order.
        return iter(self._heap)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if not self._less_than(heap[index], heap[parent]):
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            if left >= size:
                return
            child = left
            right = left + 1
            if right < size and self._less_than(heap[right], heap[left]):
                child = right
            if not self._less_than(heap[child], heap[index]):
                return
            heap[index], heap[child] = heap[child], heap[index]
            index = child
