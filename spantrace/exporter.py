"""The interface that protocol-specific span exporters implement."""

from __future__ import annotations

import abc
import enum
from typing import Sequence

from spantrace.recordable import Recordable


class ExportResult(enum.Enum):
    """Outcome of exporting a batch of spans."""

    SUCCESS = 0
    # The batch must be dropped; it is not to be retried.
    FAILURE = 1


class SpanExporter(abc.ABC):
    """Turns batches of span recordables into some external form."""

    @abc.abstractmethod
    def make_recordable(self) -> Recordable:
        """Return a new recordable that :meth:`export` will later receive."""

    @abc.abstractmethod
    def export(self, spans: Sequence[Recordable]) -> ExportResult:
        """Export a batch of recordables.

        Not to be called concurrently on the same exporter.
        """

    @abc.abstractmethod
    def shutdown(self, timeout: float = 0.0) -> None:
        """Shut the exporter down; a timeout of 0 seconds means no timeout."""