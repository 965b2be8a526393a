"""Building blocks for tracing: span records, samplers, span processors and exporters."""

__version__ = "0.1.0"