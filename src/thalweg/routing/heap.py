"""Binary min-heap with in-place priority decrease."""
from __future__ import annotations

from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K")


def _identity(item):
    return item


class _Entry(Generic[K]):
    __slots__ = ("priority", "seq", "item")

    def __init__(self, priority: float, seq: int, item: K) -> None:
        self.priority = priority
        self.seq = seq
        self.item = item

    def __lt__(self, other: "_Entry[K]") -> bool:
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.seq < other.seq


class PriorityHeap(Generic[K]):
    """Min-priority queue supporting decrease-key.

    ``heapq`` cannot locate an entry without a linear scan, so the heap keeps
    an item -> slot index that every swap updates. Equal priorities pop in
    insertion order.

    Args:
        key: Maps an item to the hashable value used for lookups. Defaults to
            the item itself.
    """

    def __init__(self, key: Optional[Callable[[K], Hashable]] = None) -> None:
        self._key = key or _identity
        self._heap: List[_Entry[K]] = []
        self._index: Dict[Hashable, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, item: K) -> bool:
        return self._key(item) in self._index

    def empty(self) -> bool:
        return not self._heap

    def priority(self, item: K) -> float:
        return self._heap[self._slot(item)].priority

    def peek(self) -> K:
        if not self._heap:
            raise IndexError("peek from an empty heap")
        return self._heap[0].item

    def push(self, item: K, priority: float) -> None:
        key = self._key(item)
        if key in self._index:
            raise ValueError(f"{item!r} is already in the heap")
        entry = _Entry(priority, self._counter, item)
        self._counter += 1
        self._heap.append(entry)
        self._index[key] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> K:
        if not self._heap:
            raise IndexError("pop from an empty heap")
        last = len(self._heap) - 1
        self._swap(0, last)
        entry = self._heap.pop()
        del self._index[self._key(entry.item)]
        if self._heap:
            self._sift_down(0)
        return entry.item

    def decrease_priority(self, item: K, new_priority: float) -> None:
        slot = self._slot(item)
        entry = self._heap[slot]
        if new_priority > entry.priority:
            raise ValueError(
                f"cannot raise priority of {item!r} from {entry.priority} to {new_priority}"
            )
        entry.priority = new_priority
        self._sift_up(slot)

    def _slot(self, item: K) -> int:
        try:
            return self._index[self._key(item)]
        except KeyError:
            raise KeyError(f"{item!r} is not in the heap") from None

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[self._key(heap[i].item)] = i
        self._index[self._key(heap[j].item)] = j

    def _sift_up(self, pos: int) -> None:
        heap = self._heap
        while pos > 0:
            parent = (pos - 1) // 2
            if not heap[pos] < heap[parent]:
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * pos + 1
            right = left + 1
            smallest = pos
            if left < size and heap[left] < heap[smallest]:
                smallest = left
            if right < size and heap[right] < heap[smallest]:
                smallest = right
            if smallest == pos:
                return
            self._swap(pos, smallest)
            pos = smallest
