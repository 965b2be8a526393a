"""Span processors: hooks run when spans start and end."""

from __future__ import annotations

import abc
import logging
from typing import Optional

from spantrace.exporter import ExportResult, SpanExporter
from spantrace.recordable import Recordable

logger = logging.getLogger(__name__)


def _check_timeout(timeout: float) -> float:
    if timeout < 0:
        raise ValueError(f"timeout must not be negative, got {timeout}")
    return timeout


class SpanProcessor(abc.ABC):
    """Receives spans as they start and end and hands them on for export."""

    @abc.abstractmethod
    def make_recordable(self) -> Optional[Recordable]:
        """Return a new recordable from the associated exporter."""

    @abc.abstractmethod
    def on_start(self, span: Recordable) -> None:
        """Called when a span starts."""

    @abc.abstractmethod
    def on_end(self, span: Recordable) -> None:
        """Called when a span ends; the processor takes the recordable over."""

    @abc.abstractmethod
    def force_flush(self, timeout: float = 0.0) -> None:
        """Export every ended span not yet exported; 0 means no timeout."""

    @abc.abstractmethod
    def shutdown(self, timeout: float = 0.0) -> None:
        """Shut down, exporting ended spans first; 0 means no timeout."""


class SimpleSpanProcessor(SpanProcessor):
    """Passes each span to its exporter as soon as the span ends.

    Without an exporter it makes no recordables and exports nothing.
    """

    def __init__(self, exporter: Optional[SpanExporter]) -> None:
        self._exporter = exporter

    def make_recordable(self) -> Optional[Recordable]:
        if self._exporter is None:
            return None
        return self._exporter.make_recordable()

    def on_start(self, span: Recordable) -> None:
        """Check that a recordable was given; nothing is exported at start."""
        if not isinstance(span, Recordable):
            raise TypeError(f"expected a Recordable, got {type(span).__name__}")

    def on_end(self, span: Recordable) -> None:
        if self._exporter is None:
            return
        if self._exporter.export([span]) is ExportResult.FAILURE:
            logger.warning("span export failed")

    def force_flush(self, timeout: float = 0.0) -> None:
        """Spans are exported as they end, so only the timeout is checked."""
        _check_timeout(timeout)

    def shutdown(self, timeout: float = 0.0) -> None:
        _check_timeout(timeout)
        if self._exporter is not None:
            self._exporter.shutdown(timeout)