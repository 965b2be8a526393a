"""A reference that can be read and replaced safely from several threads."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class AtomicReference(Generic[T]):
    """Holds one shared value; loads and stores are serialised by a lock."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"AtomicReference({self.load()!r})"

    def store(self, value: T) -> None:
        """Replace the held value."""
        with self._lock:
            self._value = value

    def load(self) -> T:
        """Return the held value."""
        with self._lock:
            return self._value