"""A single-value slot with atomic exchange operations."""

from __future__ import annotations

import threading
from typing import Any


class AtomicSlot:
    """Holds at most one value; ``None`` marks the slot as empty.

    Every exchange happens under a lock, so producers and a consumer may share
    a slot safely.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"AtomicSlot({self._value!r})"

    def get(self) -> Any:
        """Return the held value, or ``None`` when the slot is empty."""
        return self._value

    def is_null(self) -> bool:
        """Return True if the slot is empty."""
        return self._value is None

    def swap_if_null(self, value: Any) -> bool:
        """Store ``value`` only if the slot is empty; return whether it was stored."""
        with self._lock:
            if self._value is not None:
                return False
            self._value = value
            return True

    def swap(self, value: Any) -> Any:
        """Store ``value`` and return the value previously held."""
        with self._lock:
            previous, self._value = self._value, value
        return previous

    def reset(self, value: Any = None) -> None:
        """Replace the held value, dropping the old one."""
        self.swap(value)