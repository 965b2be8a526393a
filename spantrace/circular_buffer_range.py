"""A view over the elements of a circular buffer, in at most two pieces."""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterator, Sequence


class CircularBufferRange:
    """A non-owning view made of a first and an optional second sequence."""

    __slots__ = ("_first", "_second")

    def __init__(self, first: Sequence[Any] = (), second: Sequence[Any] = ()) -> None:
        self._first = first
        self._second = second

    def __repr__(self) -> str:
        return f"CircularBufferRange({list(self._first)!r}, {list(self._second)!r})"

    def __iter__(self) -> Iterator[Any]:
        return itertools.chain(self._first, self._second)

    def __len__(self) -> int:
        return len(self._first) + len(self._second)

    def for_each(self, callback: Callable[[Any], bool]) -> bool:
        """Call ``callback`` on each element until it returns a false value.

        Returns True if every element was visited.
        """
        return all(callback(value) for value in self)

    def empty(self) -> bool:
        """Return True if the range holds no elements."""
        return len(self._first) == 0

    def take(self, n: int) -> CircularBufferRange:
        """Return the subrange of the first ``n`` elements."""
        if n < 0 or n > len(self):
            raise ValueError(f"cannot take {n} elements from a range of {len(self)}")
        if len(self._first) >= n:
            return CircularBufferRange(self._first[:n])
        return CircularBufferRange(self._first, self._second[: n - len(self._first)])