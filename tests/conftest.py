"""Pytest configuration and fixtures for budflow tests."""

from __future__ import annotations

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Tracer

from budflow import Flow, FlowSpanProcessor, OpenTelemetryTracer

# ============ OpenTelemetry Fixtures ============


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """Exporter collecting finished spans in memory."""
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    """Local SDK provider, never installed globally.

    No FlowSpanProcessor, so span attributes come from Flow alone.
    """
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def tagging_tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    """Local SDK provider with FlowSpanProcessor registered first."""
    provider = TracerProvider()
    provider.add_span_processor(FlowSpanProcessor())
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def otel_tracer(tracer_provider: TracerProvider) -> Tracer:
    return tracer_provider.get_tracer("budflow-tests")


@pytest.fixture
def tagging_tracer(tagging_tracer_provider: TracerProvider) -> Tracer:
    return tagging_tracer_provider.get_tracer("budflow-tests")


@pytest.fixture
def otel_flow() -> Flow:
    return Flow(OpenTelemetryTracer())
