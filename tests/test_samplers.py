from dataclasses import dataclass

import pytest

from spantrace.rng import generate_random_bytes
from spantrace.sampler import Decision
from spantrace.samplers import (
    AlwaysOffSampler,
    AlwaysOnSampler,
    ParentOrElseSampler,
    ProbabilitySampler,
    calculate_threshold,
    threshold_from_trace_id,
)

SPAN_KIND = "internal"
EMPTY_VIEW = {}


@dataclass(frozen=True)
class SpanContext:
    sampled: bool
    remote: bool

    def is_sampled(self):
        return self.sampled

    def has_remote_parent(self):
        return self.remote


def run_should_sample_count_decision(context, sampler, iterations):
    count = 0
    for _ in range(iterations):
        trace_id = generate_random_bytes(16)
        result = sampler.should_sample(context, trace_id, "", SPAN_KIND, EMPTY_VIEW)
        if result.decision is Decision.RECORD_AND_SAMPLE:
            count += 1
    return count


# AlwaysOffSampler


def test_always_off_should_sample():
    sampler = AlwaysOffSampler()
    result = sampler.should_sample(None, bytes(16), "", SPAN_KIND, EMPTY_VIEW)
    assert result.decision is Decision.NOT_RECORD
    assert result.attributes is None


def test_always_off_description():
    assert AlwaysOffSampler().description() == "AlwaysOffSampler"


# AlwaysOnSampler


def test_always_on_should_sample():
    sampler = AlwaysOnSampler()
    valid = bytes([0, 1, 2, 3, 4, 5, 6, 7, 0, 1, 2, 3, 4, 5, 6, 7])
    attributes = {"key": 0}

    result = sampler.should_sample(None, bytes(16), "invalid trace id test", "server", attributes)
    assert result.decision is Decision.RECORD_AND_SAMPLE
    assert result.attributes is None

    result = sampler.should_sample(None, valid, "valid trace id test", "server", attributes)
    assert result.decision is Decision.RECORD_AND_SAMPLE
    assert result.attributes is None


def test_always_on_description():
    assert AlwaysOnSampler().description() == "AlwaysOnSampler"


# ParentOrElseSampler


def test_parent_or_else_should_sample():
    sampler_off = ParentOrElseSampler(AlwaysOffSampler())
    sampler_on = ParentOrElseSampler(AlwaysOnSampler())
    trace_id = bytes(16)
    sampled = SpanContext(True, False)
    nonsampled = SpanContext(False, False)

    assert (
        sampler_off.should_sample(None, trace_id, "", SPAN_KIND, EMPTY_VIEW).decision
        is Decision.NOT_RECORD
    )
    assert (
        sampler_on.should_sample(None, trace_id, "", SPAN_KIND, EMPTY_VIEW).decision
        is Decision.RECORD_AND_SAMPLE
    )
    assert (
        sampler_off.should_sample(sampled, trace_id, "", SPAN_KIND, EMPTY_VIEW).decision
        is Decision.RECORD_AND_SAMPLE
    )
    assert (
        sampler_on.should_sample(nonsampled, trace_id, "", SPAN_KIND, EMPTY_VIEW).decision
        is Decision.NOT_RECORD
    )


def test_parent_or_else_description():
    assert ParentOrElseSampler(AlwaysOffSampler()).description() == "ParentOrElse{AlwaysOffSampler}"
    assert ParentOrElseSampler(AlwaysOnSampler()).description() == "ParentOrElse{AlwaysOnSampler}"


# ProbabilitySampler


def test_probability_should_sample_without_context():
    invalid_trace_id = bytes(16)
    s1 = ProbabilitySampler(0.01)

    result = s1.should_sample(None, invalid_trace_id, "", SPAN_KIND, EMPTY_VIEW)
    assert result.decision is Decision.RECORD_AND_SAMPLE
    assert result.attributes is None

    valid_trace_id = bytes([0, 0, 0, 0, 0, 0, 0, 0x80, 0, 0, 0, 0, 0, 0, 0, 0])

    result = s1.should_sample(None, valid_trace_id, "", SPAN_KIND, EMPTY_VIEW)
    assert result.decision is Decision.NOT_RECORD
    assert result.attributes is None

    result = ProbabilitySampler(0.50000001).should_sample(
        None, valid_trace_id, "", SPAN_KIND, EMPTY_VIEW
    )
    assert result.decision is Decision.RECORD_AND_SAMPLE

    result = ProbabilitySampler(0.49999999).should_sample(
        None, valid_trace_id, "", SPAN_KIND, EMPTY_VIEW
    )
    assert result.decision is Decision.NOT_RECORD

    result = ProbabilitySampler(0.50000000).should_sample(
        None, valid_trace_id, "", SPAN_KIND, EMPTY_VIEW
    )
    assert result.decision is Decision.RECORD_AND_SAMPLE
    assert result.attributes is None


def test_probability_should_sample_with_context():
    trace_id = bytes(16)
    c1 = SpanContext(False, False)
    c2 = SpanContext(True, False)
    c3 = SpanContext(False, True)
    c4 = SpanContext(True, True)
    s1 = ProbabilitySampler(0.01)

    assert s1.should_sample(c1, trace_id, "", SPAN_KIND, EMPTY_VIEW).decision is Decision.NOT_RECORD
    assert (
        s1.should_sample(c2, trace_id, "", SPAN_KIND, EMPTY_VIEW).decision
        is Decision.RECORD_AND_SAMPLE
    )
    assert (
        s1.should_sample(c3, trace_id, "", SPAN_KIND, EMPTY_VIEW).decision
        is Decision.RECORD_AND_SAMPLE
    )
    result = s1.should_sample(c4, trace_id, "", SPAN_KIND, EMPTY_VIEW)
    assert result.decision is Decision.RECORD_AND_SAMPLE
    assert result.attributes is None


@pytest.mark.parametrize("probability", [0.5, 0.01])
def test_probability_sampler_rate(probability):
    iterations = 100000
    expected = int(iterations * probability)
    variance = int(iterations * 0.01)
    actual = run_should_sample_count_decision(
        SpanContext(True, True), ProbabilitySampler(probability), iterations
    )
    assert expected - variance < actual < expected + variance


def test_probability_sampler_all():
    iterations = 100000
    actual = run_should_sample_count_decision(
        SpanContext(True, True), ProbabilitySampler(1.0), iterations
    )
    assert actual == iterations


def test_probability_sampler_none():
    actual = run_should_sample_count_decision(
        SpanContext(True, True), ProbabilitySampler(0.0), 100000
    )
    assert actual == 0


@pytest.mark.parametrize(
    "probability, expected",
    [
        (0.01, "ProbabilitySampler{0.010000}"),
        (0.00, "ProbabilitySampler{0.000000}"),
        (1.00, "ProbabilitySampler{1.000000}"),
        (0.102030405, "ProbabilitySampler{0.102030}"),
        (3.00, "ProbabilitySampler{1.000000}"),
        (-3.00, "ProbabilitySampler{0.000000}"),
        (1.00000000001, "ProbabilitySampler{1.000000}"),
        (-1.00000000001, "ProbabilitySampler{0.000000}"),
        (0.50, "ProbabilitySampler{0.500000}"),
    ],
)
def test_probability_description(probability, expected):
    assert ProbabilitySampler(probability).description() == expected


# Threshold helpers


def test_threshold_bounds():
    assert calculate_threshold(0.0) == 0
    assert calculate_threshold(-1.0) == 0
    assert calculate_threshold(1.0) == 0xFFFFFFFFFFFFFFFF
    assert calculate_threshold(2.0) == 0xFFFFFFFFFFFFFFFF


def test_threshold_is_monotonic_and_in_range():
    values = [calculate_threshold(p / 100) for p in range(101)]
    assert values == sorted(values)
    assert all(0 <= v <= 0xFFFFFFFFFFFFFFFF for v in values)


def test_threshold_near_one_does_not_wrap():
    assert calculate_threshold(1 - 2.0**-53) > calculate_threshold(0.5)


def test_threshold_rejects_nan():
    with pytest.raises(ValueError):
        calculate_threshold(float("nan"))


def test_threshold_from_trace_id_uses_first_eight_bytes():
    head = bytes([0, 0, 0, 0, 0, 0, 0, 0x80])
    assert threshold_from_trace_id(head + bytes(8)) == threshold_from_trace_id(head + b"\xff" * 8)
    assert threshold_from_trace_id(head + bytes(8)) == calculate_threshold(0.5)
    assert threshold_from_trace_id(bytes(16)) == 0


def test_threshold_from_short_trace_id_raises():
    with pytest.raises(ValueError):
        threshold_from_trace_id(bytes(7))