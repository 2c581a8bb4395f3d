"""
Binary Min-Heap

Array-backed priority queue ordered by a caller-supplied comparator.
compare(a, b) < 0 means `a` comes out before `b`.

Heap invariant (holds after every insert/extract_min):
    compare(items[parent], items[child]) <= 0 for every parent/child pair

Items that compare equal are not kept in insertion order; callers needing
a stable order must break ties inside the comparator.
"""

from typing import Callable, Generic, Iterable, List, Optional, TypeVar


T = TypeVar('T')

Comparator = Callable[[T, T], int]


class BinaryHeap(Generic[T]):
    def __init__(self, compare: Comparator[T], items: Iterable[T] = ()) -> None:
        self._compare = compare
        self._items: List[T] = []
        for item in items:
            self.insert(item)

    def insert(self, item: T) -> None:
        """O(log n): append then sift up"""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> Optional[T]:
        """
        O(log n): remove and return the root

        Returns:
            The highest priority item, or None when the heap is empty
        """
        if not self._items:
            return None
        if len(self._items) == 1:
            return self._items.pop()

        root = self._items[0]
        self._items[0] = self._items.pop()
        self._sift_down(0)
        return root

    def peek_min(self) -> Optional[T]:
        return self._items[0] if self._items else None

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def to_list(self) -> List[T]:
        """Copy of the backing array, in heap (not sorted) order"""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(self._items[index], self._items[parent]) >= 0:
                return
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        length = len(self._items)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index

            if left < length and self._compare(self._items[left], self._items[smallest]) < 0:
                smallest = left
            if right < length and self._compare(self._items[right], self._items[smallest]) < 0:
                smallest = right

            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]
