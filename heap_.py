from typing import Any, List, Optional

from heap_errors import InvalidComparatorError, InvalidModeError
from heap_logger import print_
from heap_utils import Comparator, naive_primitive_comparator
from mode_ import HeapMode, MaxHeap, MinHeap


class BinaryHeap:
    """
    Binary heap stored as a complete binary tree in a list.

    The children of index i live at 2i+1 and 2i+2. In MinHeap mode every
    parent compares <= 0 against its children, in MaxHeap mode >= 0.
    Emptiness is reported by is_empty(); peek() and remove() return None on
    an empty heap, which is ambiguous only when None itself is stored.
    """

    def __init__(self, mode: HeapMode = MinHeap, comparator: Comparator = naive_primitive_comparator):
        if mode not in (MinHeap, MaxHeap):
            raise InvalidModeError(mode)
        if not callable(comparator):
            raise InvalidComparatorError(comparator)

        self._mode = mode
        self._comparator = comparator
        self.data: List[Any] = []
        print_("heap created:", mode.value, getattr(comparator, "__name__", repr(comparator)))

    @property
    def mode(self) -> HeapMode:
        return self._mode

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    def insert(self, data) -> None:
        self.data.append(data)
        self._sift_up(len(self.data) - 1)

    def peek(self) -> Optional[Any]:
        if not self.data:
            return None
        return self.data[0]

    def remove(self) -> Optional[Any]:
        if not self.data:
            return None

        # Only a single element, nothing to re-heapify
        if len(self.data) == 1:
            return self.data.pop()

        # Get the root element and move the last element to the root
        root = self.data[0]
        self.data[0] = self.data.pop()
        self._sift_down(0)

        return root

    def length(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return not self.data

    def free(self) -> None:
        print_("heap freed:", len(self.data), "elements dropped")
        self.data = []

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"BinaryHeap(mode={self._mode.value}, size={len(self.data)})"

    # Comparator result read in MinHeap orientation: negative means `a`
    # belongs above `b`. MaxHeap flips the sign so both sifts share one test.
    def _effective_compare(self, a, b) -> int:
        result = self._comparator(a, b)
        return -result if self._mode is MaxHeap else result

    # Helper function to maintain heap property from child to parent
    def _sift_up(self, i):
        while i > 0:
            parent = (i - 1) // 2
            if self._effective_compare(self.data[i], self.data[parent]) >= 0:
                break
            self.data[i], self.data[parent] = self.data[parent], self.data[i]
            i = parent

    # Helper function to maintain heap property from parent to child
    def _sift_down(self, i):
        size = len(self.data)
        while True:
            left = 2 * i + 1
            right = 2 * i + 2

            # Leaf reached
            if left >= size:
                break

            # Compare against the child that most threatens the heap property.
            # Equal children: MinHeap takes the right one, MaxHeap the left.
            child = left
            if right < size:
                child_result = self._effective_compare(self.data[left], self.data[right])
                if child_result > 0 or (child_result == 0 and self._mode is MinHeap):
                    child = right

            if self._effective_compare(self.data[i], self.data[child]) <= 0:
                break

            self.data[i], self.data[child] = self.data[child], self.data[i]
            i = child


# Create a new BinaryHeap
def new_heap(mode: HeapMode = MinHeap, comparator: Comparator = naive_primitive_comparator) -> BinaryHeap:
    return BinaryHeap(mode=mode, comparator=comparator)
