"""A bounded min-heap of integers."""

from __future__ import annotations


def _sift_down(items: list[int], index: int, size: int) -> None:
    """Move ``items[index]`` down until the first ``size`` items form a min-heap."""
    while True:
        left = 2 * index + 1
        right = left + 1
        smallest = index
        if left < size and items[left] < items[smallest]:
            smallest = left
        if right < size and items[right] < items[smallest]:
            smallest = right
        if smallest == index:
            return
        items[index], items[smallest] = items[smallest], items[index]
        index = smallest


class IntMinHeap:
    """A min-heap of integers holding at most ``capacity`` items.

    ``minimum`` and ``extract_min`` return 0 on an empty heap.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "heap size 0:"
        body = ", ".join(str(item) for item in self._items)
        return f"heap size {len(self._items)}: {body}"

    def heapsort(self) -> list[int]:
        """Return the heap's items sorted by repeated root removal (largest first).

        The heap itself is left unchanged.
        """
        items = list(self._items)
        for end in range(len(items) - 1, 0, -1):
            items[0], items[end] = items[end], items[0]
            _sift_down(items, 0, end)
        return items

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if the heap is already full."""
        if self.is_full():
            return False
        self._items.append(key + 1)
        self.decrease_key(len(self._items) - 1, key)
        return True

    def minimum(self) -> int:
        """Return the smallest item, or 0 if the heap is empty."""
        return self._items[0] if self._items else 0

    def extract_min(self) -> int:
        """Remove and return the smallest item, or 0 if the heap is empty."""
        if not self._items:
            return 0
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items))
        return smallest

    def decrease_key(self, index: int, key: int) -> None:
        """Lower the item at ``index`` to ``key``.

        Does nothing if ``index`` is out of range or ``key`` is not smaller
        than the current item.
        """
        items = self._items
        if index < 0 or index >= len(items) or items[index] <= key:
            return
        items[index] = key
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity