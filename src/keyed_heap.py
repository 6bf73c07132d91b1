"""Array-backed binary heap of (key, data) entries with caller-held handles.

Storage is a 1-based list: index 0 holds a sentinel so the children of slot
``i`` are ``2 * i`` and ``2 * i + 1`` and its parent is ``i // 2``. Every entry
knows its own slot, which lets callers hand an entry back to ``decrease_key``
or ``delete_element`` without a search.

The ordering comes from a comparator ``(a, b) -> int``. ``natural_order``
gives a min-heap and ``reverse_order`` a max-heap.
"""

from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from heap_errors import EmptyError, InconsistentHandleError, NotEmptyError
from heap_logger import init_logger

K = TypeVar('K')
D = TypeVar('D')

Comparator = Callable[[Any, Any], int]

logger = init_logger(__name__)

_REMOVED = -1


def natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def reverse_order(a: Any, b: Any) -> int:
    return (a < b) - (a > b)


class HeapEntry(Generic[K, D]):
    """Handle to an element stored in a :class:`Heap`.

    ``position`` is the entry's current slot, or -1 once the heap has removed
    it. Only the owning heap changes these fields.
    """

    __slots__ = ('_key', '_data', '_position')

    def __init__(self, key: K, data: D, position: int) -> None:
        self._key = key
        self._data = data
        self._position = position

    @property
    def key(self) -> K:
        return self._key

    @property
    def data(self) -> D:
        return self._data

    @property
    def position(self) -> int:
        return self._position

    def __repr__(self) -> str:
        return f"HeapEntry(key={self._key!r}, data={self._data!r}, position={self._position})"

    def __str__(self) -> str:
        return f"({self._key},{self._data},{self._position})"


class Heap(Generic[K, D]):
    def __init__(self, comparator: Optional[Comparator] = None) -> None:
        self._comparator: Comparator = comparator if comparator is not None else natural_order
        # Slot 0 is never read by the heap logic.
        self._data: List[HeapEntry[K, D]] = [HeapEntry(None, None, 0)]
        self._count: int = 0
        self.comparisons: int = 0

    @property
    def count(self) -> int:
        return self._count

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def reset_comparisons(self) -> None:
        self.comparisons = 0

    def min(self) -> HeapEntry[K, D]:
        """Return the top-most entry without removing it."""
        if self._count == 0:
            raise EmptyError()
        return self._data[1]

    def insert(self, key: K, data: D) -> HeapEntry[K, D]:
        self._count += 1
        entry = HeapEntry(key, data, self._count)
        self._data.append(entry)
        self._sift_up(self._count)
        return entry

    def delete(self) -> HeapEntry[K, D]:
        """Remove and return the top-most entry."""
        if self._count == 0:
            raise EmptyError()
        root = self._data[1]
        self._remove_at(1)
        return root

    def build_heap(self, keys: Sequence[K], data: Sequence[D]) -> List[HeapEntry[K, D]]:
        """Fill an empty heap from parallel key and data sequences in O(n).

        Entries are laid out in input order, then every internal node is
        sifted down starting from the last one. Handles are returned in input
        order.
        """
        if self._count != 0:
            raise NotEmptyError()
        if len(keys) != len(data):
            raise ValueError(
                f"keys and data differ in length ({len(keys)} != {len(data)})"
            )
        handles: List[HeapEntry[K, D]] = []
        for key, value in zip(keys, data):
            self._count += 1
            entry = HeapEntry(key, value, self._count)
            self._data.append(entry)
            handles.append(entry)
        start_comparisons = self.comparisons
        for i in range(self._count // 2, 0, -1):
            self._sift_down(i)
        logger.debug(
            "built heap of %d entries with %d comparisons",
            self._count, self.comparisons - start_comparisons,
        )
        return handles

    def decrease_key(self, element: HeapEntry[K, D], new_key: K) -> None:
        """Replace the key of ``element`` and move it towards the root.

        ``new_key`` must not order after the current key. A key that would
        need to move down leaves the heap order broken; this is not checked.
        """
        self._check_handle(element)
        element._key = new_key
        self._sift_up(element._position)

    def delete_element(self, element: HeapEntry[K, D]) -> HeapEntry[K, D]:
        self._check_handle(element)
        self._remove_at(element._position)
        return element

    def kth_min_element(self, k: int) -> HeapEntry[K, D]:
        """Return the k-th entry in extraction order (1 is the root).

        The top ``k`` entries are extracted and then inserted again, so the
        heap holds the same key/data pairs afterwards but as new entries:
        handles to the extracted entries report position -1. The returned
        handle is the re-inserted k-th entry.
        """
        if self._count == 0:
            raise EmptyError()
        if k < 1 or k > self._count:
            raise IndexError(f"k must be between 1 and {self._count}, got {k}")
        logger.debug("kth_min_element(%d) on %d entries", k, self._count)

        extracted = [self.delete() for _ in range(k)]
        kth: Optional[HeapEntry[K, D]] = None
        for i, entry in enumerate(extracted, start=1):
            reinserted = self.insert(entry.key, entry.data)
            if i == k:
                kth = reinserted
        assert kth is not None
        return kth

    def clear(self) -> None:
        for i in range(1, self._count + 1):
            self._data[i]._position = _REMOVED
        logger.debug("cleared %d entries", self._count)
        del self._data[1:]
        self._count = 0

    def _compare(self, a: K, b: K) -> int:
        self.comparisons += 1
        return self._comparator(a, b)

    def _check_handle(self, element: HeapEntry[K, D]) -> None:
        position = element.position
        if position < 1 or position > self._count or self._data[position] is not element:
            raise InconsistentHandleError()

    def _remove_at(self, position: int) -> None:
        removed = self._data[position]
        last = self._data.pop()
        self._count -= 1
        removed._position = _REMOVED
        if position > self._count:
            return
        self._data[position] = last
        last._position = position
        parent = position // 2
        if position == 1 or self._compare(self._data[parent].key, last.key) < 0:
            self._sift_down(position)
        else:
            self._sift_up(position)

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]
        self._data[i]._position = i
        self._data[j]._position = j

    def _sift_up(self, index: int) -> None:
        while index > 1:
            parent = index // 2
            if self._compare(self._data[index].key, self._data[parent].key) < 0:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = self._count
        while True:
            left = 2 * index
            right = left + 1
            current = self._data[index].key
            if (right <= size
                    and self._compare(self._data[right].key, self._data[left].key) < 0
                    and self._compare(self._data[right].key, current) < 0):
                child = right
            elif left <= size and self._compare(self._data[left].key, current) < 0:
                child = left
            else:
                break
            self._swap(index, child)
            index = child

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __repr__(self) -> str:
        return f"Heap({self._data[1:]})"

    def __str__(self) -> str:
        return "[" + ",".join(str(entry) for entry in self._data[1:]) + "]"
