"""The built-in samplers."""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from spantrace.sampler import Decision, Sampler, SamplingResult, _ParentContext

_UINT32_MAX = 0xFFFFFFFF
_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


def calculate_threshold(probability: float) -> int:
    """Map a probability in [0, 1] to a threshold in [0, 2**64 - 1].

    Values outside the interval are clamped to its ends.
    """
    if math.isnan(probability):
        raise ValueError("probability must not be NaN")
    if probability <= 0.0:
        return 0
    if probability >= 1.0:
        return _UINT64_MAX
    # probability * (2**64 - 1) would round to 2**64 near 1, so build the
    # high and low 32 bits separately.
    product = _UINT32_MAX * probability
    fraction, hi_bits = math.modf(product)
    lo_bits = math.ldexp(fraction, 32) + product
    return ((int(hi_bits) << 32) + int(lo_bits)) & _UINT64_MAX


def threshold_from_trace_id(trace_id: bytes) -> int:
    """Return the threshold that the first 8 bytes of a trace id stand for."""
    head = bytes(trace_id[:8])
    if len(head) < 8:
        raise ValueError("trace id must be at least 8 bytes long")
    value = int.from_bytes(head, "little")
    return calculate_threshold(float(value) / float(_UINT64_MAX))


class AlwaysOnSampler(Sampler):
    """Records and samples every span."""

    def should_sample(
        self,
        parent_context: Optional[_ParentContext],
        trace_id: bytes,
        name: str,
        span_kind: Any,
        attributes: Mapping[str, Any],
    ) -> SamplingResult:
        return SamplingResult(Decision.RECORD_AND_SAMPLE)

    def description(self) -> str:
        return "AlwaysOnSampler"


class AlwaysOffSampler(Sampler):
    """Records no span, which switches tracing off."""

    def should_sample(
        self,
        parent_context: Optional[_ParentContext],
        trace_id: bytes,
        name: str,
        span_kind: Any,
        attributes: Mapping[str, Any],
    ) -> SamplingResult:
        return SamplingResult(Decision.NOT_RECORD)

    def description(self) -> str:
        return "AlwaysOffSampler"


class ParentOrElseSampler(Sampler):
    """Follows the parent's decision, or asks a delegate for root spans."""

    def __init__(self, delegate: Sampler) -> None:
        self._delegate = delegate
        self._description = f"ParentOrElse{{{delegate.description()}}}"

    def should_sample(
        self,
        parent_context: Optional[_ParentContext],
        trace_id: bytes,
        name: str,
        span_kind: Any,
        attributes: Mapping[str, Any],
    ) -> SamplingResult:
        if parent_context is None:
            return self._delegate.should_sample(
                parent_context, trace_id, name, span_kind, attributes
            )
        if parent_context.is_sampled():
            return SamplingResult(Decision.RECORD_AND_SAMPLE)
        return SamplingResult(Decision.NOT_RECORD)

    def description(self) -> str:
        return self._description


class ProbabilitySampler(Sampler):
    """Samples a fixed share of traces, chosen by their trace id.

    A local parent's decision is followed; probabilities outside [0, 1] are
    clamped.
    """

    def __init__(self, probability: float) -> None:
        self._threshold = calculate_threshold(probability)
        clamped = min(max(probability, 0.0), 1.0)
        self._description = f"ProbabilitySampler{{{clamped:.6f}}}"

    def should_sample(
        self,
        parent_context: Optional[_ParentContext],
        trace_id: bytes,
        name: str,
        span_kind: Any,
        attributes: Mapping[str, Any],
    ) -> SamplingResult:
        if parent_context is not None and not parent_context.has_remote_parent():
            if parent_context.is_sampled():
                return SamplingResult(Decision.RECORD_AND_SAMPLE)
            return SamplingResult(Decision.NOT_RECORD)
        if self._threshold == 0:
            return SamplingResult(Decision.NOT_RECORD)
        if threshold_from_trace_id(trace_id) <= self._threshold:
            return SamplingResult(Decision.RECORD_AND_SAMPLE)
        return SamplingResult(Decision.NOT_RECORD)

    def description(self) -> str:
        return self._description