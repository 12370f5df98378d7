"""
ID generation utilities.

Row and analysis identifiers are opaque: they only need to be unique within
a process. Generators are passed into the pipeline explicitly so tests can
use a deterministic sequence.
"""

import itertools
import threading
import uuid
from typing import Optional, Protocol


class IDGenerator(Protocol):
    """Anything that hands out unique string identifiers."""

    def new_id(self) -> str:
        """Return a fresh identifier."""
        ...


class UUIDGenerator:
    """Random UUID4 identifiers (default for production use)."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class CounterIDGenerator:
    """
    Monotonically increasing identifiers.

    Usage:
        ids = CounterIDGenerator(prefix="row")
        ids.new_id()  # 'row_1'
        ids.new_id()  # 'row_2'
    """

    def __init__(self, prefix: str = "id", start: int = 1):
        """
        Initialize counter.

        Args:
            prefix: Text placed before the sequence number
            start: First sequence number handed out
        """
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self.prefix}_{value}"


# Global ID generator instance
_id_generator: Optional[IDGenerator] = None


def get_id_generator() -> IDGenerator:
    """Get or create global ID generator instance."""
    global _id_generator
    if _id_generator is None:
        _id_generator = UUIDGenerator()
    return _id_generator


def reset_id_generator() -> None:
    """Reset global ID generator (for testing)."""
    global _id_generator
    _id_generator = None
