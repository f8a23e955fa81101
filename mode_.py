from enum import Enum

from heap_errors import InvalidModeError


# Define HeapMode
class HeapMode(Enum):
    MIN = "min"
    MAX = "max"


MinHeap = HeapMode.MIN
MaxHeap = HeapMode.MAX


def parse_mode(value: str) -> HeapMode:
    """Map a configuration value ("min" / "max") to a HeapMode."""
    try:
        return HeapMode(str(value).strip().lower())
    except ValueError:
        raise InvalidModeError(value) from None
