# spantrace

Dependency-free building blocks for tracing. It has span records, samplers
that decide which spans to keep, and a span processor that passes finished
span records to an exporter. It also has the thread-safe helpers and the
random number generator that these parts use.

## Installation

```
pip install spantrace
```

## Recording and exporting a span

`SpanExporter` is the interface that exporters implement. `SpanData` is an
in-memory span record. `SimpleSpanProcessor` hands each record to its
exporter as soon as `on_end` is called.

```python
import time

from spantrace.exporter import ExportResult, SpanExporter
from spantrace.processor import SimpleSpanProcessor
from spantrace.rng import generate_random_bytes
from spantrace.span_data import SpanData


class ListExporter(SpanExporter):
    def __init__(self):
        self.spans = []

    def make_recordable(self):
        return SpanData()

    def export(self, spans):
        self.spans.extend(spans)
        return ExportResult.SUCCESS

    def shutdown(self, timeout=0.0):
        pass


exporter = ListExporter()
processor = SimpleSpanProcessor(exporter)

record = processor.make_recordable()
processor.on_start(record)
record.set_ids(generate_random_bytes(16), generate_random_bytes(8), bytes(8))
record.set_name("load")
record.set_attribute("retries", 3)
record.set_start_time(time.time_ns())
record.set_duration(1500)
processor.on_end(record)

assert exporter.spans[0].name == "load"
assert exporter.spans[0].attributes["retries"] == 3
```

## Modules

- `spantrace.recordable` defines `Recordable`, the abstract interface for a
  span record, and `StatusCode`, the canonical status codes. Identifiers
  are bytes: 16 for a trace id and 8 for a span id. Times and durations are
  integer nanoseconds.
- `spantrace.span_data` defines `SpanData`. It exposes read-only
  properties: `trace_id`, `span_id`, `parent_span_id`, `name`, `status`,
  `description`, `start_time`, `duration`, `attributes` and `events`.
  `convert_attribute(value)` makes an owned copy of an attribute value.
  The value may be a bool, an int in the 64-bit range, a float or a str,
  or a sequence of one of these types, which becomes a tuple. Other values
  raise `TypeError` or `OverflowError`.
- `spantrace.exporter` defines `SpanExporter` and `ExportResult`
  (`SUCCESS` or `FAILURE`).
- `spantrace.processor` defines `SpanProcessor` and `SimpleSpanProcessor`.
  When an export fails, the simple processor logs a warning. If it was
  given no exporter (`None`), it makes no records and exports nothing.
  `shutdown(timeout)` shuts the exporter down. A negative timeout raises
  `ValueError`.
- `spantrace.sampler` defines `Sampler`, `SamplingResult` (a decision plus
  optional attributes) and `Decision` (`NOT_RECORD`, `RECORD`,
  `RECORD_AND_SAMPLE`).
- `spantrace.samplers` provides the built-in samplers:
  - `AlwaysOnSampler` always returns `RECORD_AND_SAMPLE`.
  - `AlwaysOffSampler` always returns `NOT_RECORD`.
  - `ParentOrElseSampler(delegate)` follows the parent's sampled flag and
    asks `delegate` only when there is no parent.
  - `ProbabilitySampler(probability)` follows a local parent's decision.
    Otherwise it compares the first 8 bytes of the trace id with a
    threshold. Probabilities outside [0, 1] are clamped, and its
    description reads like `ProbabilitySampler{0.250000}`.

  The module also has `calculate_threshold` and `threshold_from_trace_id`.
- `spantrace.rng` provides `FastRandomNumberGenerator`, an xorshift128+
  generator, together with `generate_random64()` and
  `generate_random_bytes(size)`. The last two use a per-thread generator
  that is seeded from the operating system and reseeded after a fork.
- `spantrace.circular_buffer.CircularBuffer` is a bounded buffer. Many
  threads can add to it and one consumer can drain it. Each cell is an
  `spantrace.atomic_slot.AtomicSlot`, and `peek()` returns a
  `spantrace.circular_buffer_range.CircularBufferRange` over those cells.
- `spantrace.atomic_ref.AtomicReference` holds a value that threads can
  load and store under a lock.

## Sampling example

```python
from spantrace.rng import generate_random_bytes
from spantrace.sampler import Decision
from spantrace.samplers import ProbabilitySampler

sampler = ProbabilitySampler(0.25)
result = sampler.should_sample(None, generate_random_bytes(16), "request", None, {})
keep = result.decision is Decision.RECORD_AND_SAMPLE
```

A parent context passed to a sampler is any object with `is_sampled()` and
`has_remote_parent()` methods.

## What this package does not do

The package has no tracer, no tracer provider and no live span object. The
caller creates records, fills them in and passes them to a processor.
Nothing measures durations or assigns ids automatically. The package comes
with no ready-made exporter and installs no command-line program.