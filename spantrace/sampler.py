"""The sampling interface: deciding whether a new span is recorded."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol


class Decision(enum.Enum):
    """A sampling decision for a span about to be created."""

    # The span is not recorded; its events and attributes are dropped.
    NOT_RECORD = 0
    # The span is recorded, but the sampled flag must not be set.
    RECORD = 1
    # The span is recorded and the sampled flag must be set.
    RECORD_AND_SAMPLE = 2


@dataclass(frozen=True)
class SamplingResult:
    """The outcome of :meth:`Sampler.should_sample`.

    ``attributes``, when not None, are added to the span as well.
    """

    decision: Decision
    attributes: Optional[Mapping[str, Any]] = None


class _ParentContext(Protocol):
    """What a sampler needs to know about the parent of a new span."""

    def is_sampled(self) -> bool: ...

    def has_remote_parent(self) -> bool: ...


class Sampler(abc.ABC):
    """Decides, just before a span is created, whether it is recorded."""

    @abc.abstractmethod
    def should_sample(
        self,
        parent_context: Optional[_ParentContext],
        trace_id: bytes,
        name: str,
        span_kind: Any,
        attributes: Mapping[str, Any],
    ) -> SamplingResult:
        """Return the sampling decision for a new span.

        ``parent_context`` is None for a root span.
        """

    @abc.abstractmethod
    def description(self) -> str:
        """Return the sampler's name or a short description of its settings."""