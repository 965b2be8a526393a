"""A bounded circular buffer for many producers and a single consumer."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Optional

from spantrace.atomic_slot import AtomicSlot
from spantrace.circular_buffer_range import CircularBufferRange


class CircularBuffer:
    """A circular buffer of :class:`AtomicSlot` cells.

    Any number of threads may call :meth:`add`; :meth:`peek`, :meth:`consume`
    and :meth:`clear` must only be called from one consumer thread.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._capacity = max_size + 1
        self._slots = [AtomicSlot() for _ in range(self._capacity)]
        self._head = 0
        self._tail = 0
        self._add_lock = threading.Lock()

    def peek(self) -> CircularBufferRange:
        """Return a range of the slots currently holding elements."""
        tail_index = self._tail % self._capacity
        head_index = self._head % self._capacity
        if head_index == tail_index:
            return CircularBufferRange()
        if tail_index < head_index:
            return CircularBufferRange(self._slots[tail_index:head_index])
        return CircularBufferRange(self._slots[tail_index:], self._slots[:head_index])

    def consume(
        self, n: int, callback: Optional[Callable[[CircularBufferRange], Any]] = None
    ) -> None:
        """Consume ``n`` elements from the tail.

        ``callback`` receives the range of consumed slots and must empty each
        of them. Without a callback the elements are dropped.
        """
        if n < 0 or n > len(self):
            raise ValueError(f"cannot consume {n} elements from a buffer of {len(self)}")
        window = self.peek().take(n)
        self._tail += n
        if callback is None:
            for slot in window:
                slot.reset()
        else:
            callback(window)

    def add(self, value: Any) -> bool:
        """Add an element; return False if the buffer is full."""
        if value is None:
            raise ValueError("cannot add None to a circular buffer")
        while True:
            with self._add_lock:
                if self._head - self._tail >= self._capacity - 1:
                    return False
                if self._slots[self._head % self._capacity].swap_if_null(value):
                    self._head += 1
                    return True
            # The consumer has advanced past this slot but not emptied it yet.
            time.sleep(0)

    def clear(self) -> None:
        """Drop every element in the buffer."""
        self.consume(len(self))

    def max_size(self) -> int:
        """Return the maximum number of elements the buffer can hold."""
        return self._capacity - 1

    def empty(self) -> bool:
        """Return True if the buffer holds no elements."""
        return self._head == self._tail

    def __len__(self) -> int:
        return self._head - self._tail

    def consumption_count(self) -> int:
        """Return the number of elements consumed so far."""
        return self._tail

    def production_count(self) -> int:
        """Return the number of elements added so far."""
        return self._head