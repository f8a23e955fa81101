class HeapError(Exception):
    pass


class InvalidModeError(HeapError, ValueError):
    def __init__(self, mode):
        super().__init__(f"Invalid mode {mode!r}: expected MinHeap or MaxHeap")
        self.mode = mode


class InvalidComparatorError(HeapError, TypeError):
    def __init__(self, comparator):
        super().__init__(f"Invalid comparator {comparator!r}: comparator must be callable")
        self.comparator = comparator
