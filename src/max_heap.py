import operator
from typing import TypeVar, Generic, List, Iterable, Optional

from performance_tracker import PerformanceTracker

T = TypeVar('T')


class MaxHeap(Generic[T]):
    """Array-backed binary max-heap that reports its work to a tracker.

    Storage is a fixed-length list used as a buffer: ``len(self._data)`` is
    the capacity and slots past ``self._size`` hold ``None``. When the buffer
    is full it is replaced by one of ``2 * capacity + 1`` slots, so a run of
    inserts costs amortized O(1) copies each.

    Both sift procedures use the single-assignment form: the moving element
    is held in a local, blockers are shifted one level in a single direction,
    and the held element is written back exactly once. They report array
    accesses and comparisons but never swaps.
    """

    def __init__(self, capacity: int = 0,
                 tracker: Optional[PerformanceTracker] = None) -> None:
        if isinstance(capacity, bool):
            raise ValueError("capacity must be a non-negative integer")
        try:
            capacity = operator.index(capacity)
        except TypeError:
            raise ValueError("capacity must be a non-negative integer") from None
        if capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0
        self._tracker = tracker if tracker is not None else PerformanceTracker()

    @property
    def tracker(self) -> PerformanceTracker:
        return self._tracker

    def insert(self, value: T) -> None:
        if value is None:
            raise ValueError("insert: value must not be None")
        if self._size == len(self._data):
            self._ensure_capacity()
        self._data[self._size] = value
        self._tracker.report_array_accesses(1)
        self._sift_up(self._size)
        self._size += 1

    def extract_max(self) -> T:
        if self._size == 0:
            raise IndexError("extract_max from empty heap")
        result = self._data[0]
        last = self._size - 1
        self._data[0] = self._data[last]
        self._data[last] = None
        self._size = last
        self._tracker.report_array_accesses(3)
        if self._size > 0:
            self._sift_down(0)
        return result

    def peek(self) -> T:
        if self._size == 0:
            raise IndexError("peek from empty heap")
        self._tracker.report_array_accesses(1)
        return self._data[0]

    get_max = peek

    def increase_key(self, index: int, new_value: T) -> None:
        """Raise the element at ``index`` to ``new_value`` and restore order.

        The new value must be strictly greater than the current one; an
        equal or smaller value is rejected and the heap is left untouched.
        Only upward movement is needed, since the old value already
        dominated its subtree.
        """
        if index < 0 or index >= self._size:
            raise IndexError("increase_key: index out of range")
        if new_value is None:
            raise ValueError("increase_key: value must not be None")
        self._tracker.report_comparisons(1)
        if not new_value > self._data[index]:
            raise ValueError("increase_key: new value must be greater than current value")
        self._data[index] = new_value
        self._tracker.report_array_accesses(1)
        self._sift_up(index)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return len(self._data)

    @classmethod
    def from_array(cls, values: Iterable[T],
                   tracker: Optional[PerformanceTracker] = None) -> 'MaxHeap[T]':
        """Build a heap from an iterable in O(n).

        Note: copies the input; the source is never modified.
        """
        items = list(values)
        if any(v is None for v in items):
            raise ValueError("from_array: values must not contain None")
        heap: MaxHeap[T] = cls(len(items), tracker)
        heap._data[:len(items)] = items
        heap._size = len(items)
        heap._tracker.report_array_accesses(len(items))
        for i in range(heap._size // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    def _swap(self, i: int, j: int) -> None:
        """Exchange two live slots: one swap, two reads and two writes."""
        if i < 0 or i >= self._size or j < 0 or j >= self._size:
            raise IndexError("swap: index out of range")
        self._tracker.report_swaps(1)
        self._tracker.report_array_accesses(4)
        tmp = self._data[i]
        self._data[i] = self._data[j]
        self._data[j] = tmp

    def _ensure_capacity(self) -> None:
        old_capacity = len(self._data)
        new_data: List[Optional[T]] = [None] * (old_capacity * 2 + 1)
        for i in range(old_capacity):
            new_data[i] = self._data[i]
        self._tracker.report_array_accesses(old_capacity)
        self._data = new_data

    def _sift_up(self, index: int) -> None:
        value = self._data[index]
        self._tracker.report_array_accesses(1)
        while index > 0:
            parent = (index - 1) // 2
            self._tracker.report_comparisons(1)
            if not value > self._data[parent]:
                break
            self._data[index] = self._data[parent]
            self._tracker.report_array_accesses(1)
            index = parent
        self._data[index] = value
        self._tracker.report_array_accesses(1)

    def _sift_down(self, index: int) -> None:
        size = self._size
        half = size // 2
        value = self._data[index]
        self._tracker.report_array_accesses(1)
        # nodes at or past size // 2 are leaves
        while index < half:
            child = 2 * index + 1
            right = child + 1
            if right < size:
                self._tracker.report_comparisons(1)
                if self._data[right] > self._data[child]:
                    child = right
            self._tracker.report_comparisons(1)
            if not self._data[child] > value:
                break
            self._data[index] = self._data[child]
            self._tracker.report_array_accesses(1)
            index = child
        self._data[index] = value
        self._tracker.report_array_accesses(1)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"MaxHeap({self._data[:self._size]})"

    def __str__(self) -> str:
        return f"MaxHeap(size={self._size}, capacity={len(self._data)})"
