"""The interface a span record must offer to be filled in by a span."""

from __future__ import annotations

import abc
import enum
from typing import Any

TRACE_ID_SIZE = 16
SPAN_ID_SIZE = 8

INVALID_TRACE_ID = bytes(TRACE_ID_SIZE)
INVALID_SPAN_ID = bytes(SPAN_ID_SIZE)


class StatusCode(enum.IntEnum):
    """Canonical status codes a span can end with."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class Recordable(abc.ABC):
    """Receives the data of one span in a form an exporter can process.

    Identifiers are bytes (16 for a trace id, 8 for a span id); timestamps
    and durations are integer nanoseconds.
    """

    @abc.abstractmethod
    def set_ids(self, trace_id: bytes, span_id: bytes, parent_span_id: bytes) -> None:
        """Set the trace id, span id and parent span id of the span."""

    @abc.abstractmethod
    def set_attribute(self, key: str, value: Any) -> None:
        """Set one attribute of the span."""

    @abc.abstractmethod
    def add_event(self, name: str, timestamp: int) -> None:
        """Add an event to the span."""

    @abc.abstractmethod
    def set_status(self, code: StatusCode, description: str) -> None:
        """Set the status of the span."""

    @abc.abstractmethod
    def set_name(self, name: str) -> None:
        """Set the name of the span."""

    @abc.abstractmethod
    def set_start_time(self, start_time: int) -> None:
        """Set the start time of the span, in nanoseconds since the epoch."""

    @abc.abstractmethod
    def set_duration(self, duration: int) -> None:
        """Set the duration of the span, in nanoseconds."""