from typing import Any, Callable, Sequence

from mode_ import HeapMode, MaxHeap

Comparator = Callable[[Any, Any], int]


def naive_primitive_comparator(a, b) -> int:
    """Three-way comparison for naturally ordered values (numbers, strings)."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def key_comparator(key: Callable[[Any], Any]) -> Comparator:
    """Build a comparator ordering elements by `key(element)`."""
    def compare(a, b) -> int:
        return naive_primitive_comparator(key(a), key(b))
    return compare


def is_heap(storage: Sequence, comparator: Comparator, mode: HeapMode) -> bool:
    """Check that every parent in `storage` is not worse than its children."""
    for parent in range(len(storage) // 2):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child >= len(storage):
                break
            result = comparator(storage[parent], storage[child])
            if mode is MaxHeap and result < 0:
                return False
            if mode is not MaxHeap and result > 0:
                return False
    return True
