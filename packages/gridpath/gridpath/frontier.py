"""PriorityFrontier - indexed binary min-heap used as the A* open set."""
from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from gridpath.types import FrontierEmptyError, HeapInvariantError

T = TypeVar("T", bound=Hashable)


class PriorityFrontier(Generic[T]):
    """Min-heap of items keyed by priority, with O(log n) decrease-key.

    Each heap slot holds ``[priority, seq, item]``. ``seq`` is the insertion
    sequence number, so equal priorities come out in insertion order. A
    decrease-key keeps the original ``seq``. ``_index`` maps every queued
    item to its slot.
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._index: dict[T, int] = {}
        self._counter = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[T, float]]) -> PriorityFrontier[T]:
        """Build a frontier from ``(item, priority)`` pairs in O(n)."""
        frontier: PriorityFrontier[T] = cls()
        for item, priority in pairs:
            if item in frontier._index:
                raise ValueError(f"Duplicate item {item!r}")
            frontier._index[item] = len(frontier._heap)
            frontier._heap.append([priority, frontier._counter, item])
            frontier._counter += 1
        for pos in range(len(frontier._heap) // 2 - 1, -1, -1):
            frontier._sift_down(pos)
        return frontier

    # --- Queries ---

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def contains(self, item: T) -> bool:
        return item in self._index

    def priority(self, item: T) -> float:
        """Current priority of a queued item. Raises KeyError if absent."""
        return self._heap[self._index[item]][0]

    def peek(self) -> tuple[T, float]:
        if not self._heap:
            raise FrontierEmptyError("peek from an empty frontier")
        priority, _, item = self._heap[0]
        return item, priority

    def items(self) -> Iterator[tuple[T, float]]:
        """Queued ``(item, priority)`` pairs in heap-array order."""
        for priority, _, item in self._heap:
            yield item, priority

    # --- Mutation ---

    def insert(self, item: T, priority: float) -> None:
        if item in self._index:
            raise ValueError(f"{item!r} is already in the frontier")
        pos = len(self._heap)
        self._heap.append([priority, self._counter, item])
        self._index[item] = pos
        self._counter += 1
        self._sift_up(pos)

    def extract_min(self) -> T:
        if not self._heap:
            raise FrontierEmptyError("extract_min from an empty frontier")
        last = self._heap.pop()
        if not self._heap:
            del self._index[last[2]]
            return last[2]
        top = self._heap[0]
        self._heap[0] = last
        self._index[last[2]] = 0
        del self._index[top[2]]
        self._sift_down(0)
        return top[2]

    def decrease_key(self, item: T, priority: float) -> None:
        pos = self._index.get(item)
        if pos is None:
            raise KeyError(f"{item!r} is not in the frontier")
        entry = self._heap[pos]
        if priority > entry[0]:
            raise ValueError(
                f"New priority {priority} is greater than current {entry[0]}"
            )
        if priority == entry[0]:
            return
        entry[0] = priority
        self._sift_up(pos)

    def push(self, item: T, priority: float) -> bool:
        """Insert ``item`` or lower its priority. Returns True if anything changed.

        A queued item whose priority is already lower or equal is left alone.
        """
        pos = self._index.get(item)
        if pos is None:
            self.insert(item, priority)
            return True
        if priority < self._heap[pos][0]:
            self.decrease_key(item, priority)
            return True
        return False

    def clear(self) -> None:
        self._heap.clear()
        self._index.clear()

    # --- Invariants ---

    def check(self) -> None:
        """Verify heap order and the index map. Raises HeapInvariantError."""
        heap = self._heap
        if len(self._index) != len(heap):
            raise HeapInvariantError(
                f"Index holds {len(self._index)} items, heap holds {len(heap)}"
            )
        for pos, entry in enumerate(heap):
            if self._index.get(entry[2]) != pos:
                raise HeapInvariantError(f"{entry[2]!r} indexed at wrong slot")
            if pos and self._less(pos, (pos - 1) // 2):
                raise HeapInvariantError(f"Slot {pos} is smaller than its parent")

    # --- Internal ---

    def _less(self, a: int, b: int) -> bool:
        ea, eb = self._heap[a], self._heap[b]
        return (ea[0], ea[1]) < (eb[0], eb[1])

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        heap[a], heap[b] = heap[b], heap[a]
        self._index[heap[a][2]] = a
        self._index[heap[b][2]] = b

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._less(pos, parent):
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * pos + 1
            if left >= size:
                return
            smallest = left
            right = left + 1
            # The last parent may have a left child only.
            if right < size and self._less(right, left):
                smallest = right
            if not self._less(smallest, pos):
                return
            self._swap(pos, smallest)
            pos = smallest
