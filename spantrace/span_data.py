"""A recordable that keeps every piece of span data in memory."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, Union

from spantrace.recordable import (
    INVALID_SPAN_ID,
    INVALID_TRACE_ID,
    SPAN_ID_SIZE,
    TRACE_ID_SIZE,
    Recordable,
    StatusCode,
)

Scalar = Union[bool, int, float, str]
AttributeValue = Union[Scalar, Tuple[Scalar, ...]]

_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 64) - 1


def _scalar_kind(value: Any) -> type:
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, str):
        return str
    raise TypeError(f"unsupported attribute value type: {type(value).__name__}")


def _check_int(value: int) -> int:
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer attribute out of 64-bit range: {value}")
    return int(value)


def convert_attribute(value: Any) -> AttributeValue:
    """Return an owned, immutable copy of an attribute value.

    Scalars are bool, int (64-bit signed or unsigned range), float or str.
    Sequences of one scalar type become tuples.
    """
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        kind = _scalar_kind(value)
        return _check_int(value) if kind is int else value
    items = tuple(value)
    if not items:
        return ()
    kind = _scalar_kind(items[0])
    for item in items:
        if _scalar_kind(item) is not kind:
            raise TypeError("attribute arrays must hold values of a single type")
    if kind is int:
        return tuple(_check_int(item) for item in items)
    return items


def _as_id(value: bytes, size: int, what: str) -> bytes:
    result = bytes(value)
    if len(result) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(result)}")
    return result


class SpanData(Recordable):
    """All data collected by a span, readable through properties."""

    __slots__ = (
        "_trace_id",
        "_span_id",
        "_parent_span_id",
        "_start_time",
        "_duration",
        "_name",
        "_status",
        "_description",
        "_attributes",
        "_events",
    )

    def __init__(self) -> None:
        self._trace_id = INVALID_TRACE_ID
        self._span_id = INVALID_SPAN_ID
        self._parent_span_id = INVALID_SPAN_ID
        self._start_time = 0
        self._duration = 0
        self._name = ""
        self._status = StatusCode.OK
        self._description = ""
        self._attributes: Dict[str, AttributeValue] = {}
        self._events: List[Tuple[str, int]] = []

    def __repr__(self) -> str:
        return (
            f"SpanData(name={self._name!r}, trace_id={self._trace_id.hex()}, "
            f"span_id={self._span_id.hex()}, start_time={self._start_time}, "
            f"duration={self._duration})"
        )

    @property
    def trace_id(self) -> bytes:
        return self._trace_id

    @property
    def span_id(self) -> bytes:
        return self._span_id

    @property
    def parent_span_id(self) -> bytes:
        return self._parent_span_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> StatusCode:
        return self._status

    @property
    def description(self) -> str:
        return self._description

    @property
    def start_time(self) -> int:
        """Start time in nanoseconds since the epoch."""
        return self._start_time

    @property
    def duration(self) -> int:
        """Duration in nanoseconds."""
        return self._duration

    @property
    def attributes(self) -> Mapping[str, AttributeValue]:
        """A read-only view of the span's attributes."""
        return MappingProxyType(self._attributes)

    @property
    def events(self) -> Tuple[Tuple[str, int], ...]:
        """The events added to the span, as (name, timestamp) pairs in order."""
        return tuple(self._events)

    def set_ids(self, trace_id: bytes, span_id: bytes, parent_span_id: bytes) -> None:
        self._trace_id = _as_id(trace_id, TRACE_ID_SIZE, "trace id")
        self._span_id = _as_id(span_id, SPAN_ID_SIZE, "span id")
        self._parent_span_id = _as_id(parent_span_id, SPAN_ID_SIZE, "parent span id")

    def set_attribute(self, key: str, value: Any) -> None:
        self._attributes[str(key)] = convert_attribute(value)

    def add_event(self, name: str, timestamp: int) -> None:
        self._events.append((str(name), int(timestamp)))

    def set_status(self, code: StatusCode, description: str) -> None:
        self._status = StatusCode(code)
        self._description = str(description)

    def set_name(self, name: str) -> None:
        self._name = str(name)

    def set_start_time(self, start_time: int) -> None:
        self._start_time = int(start_time)

    def set_duration(self, duration: int) -> None:
        self._duration = int(duration)