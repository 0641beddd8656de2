"""Tracer collaborator interface for BudFlow SDK.

Flow never talks to a tracing library directly. It asks a FlowTracer for
the active span and works against the FlowSpan surface only:

    Flow -> FlowTracer.active_span() -> FlowSpan
                                        ├─ trace_id
                                        ├─ baggage (propagated)
                                        └─ tags (local)

OpenTelemetryTracer is the default implementation. Active span lookup is
ambient (OTEL context, backed by contextvars), so it is correct per thread
and per asyncio task without any locking here.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from opentelemetry import baggage as otel_baggage
from opentelemetry import context as otel_context
from opentelemetry import trace as otel_trace
from opentelemetry.trace import Span, format_trace_id

# Context key holding the trace id resolved in this context, inherited by child spans
_RESOLVED_TRACE_KEY = otel_context.create_key("budflow-resolved-trace")


@runtime_checkable
class FlowSpan(Protocol):
    """The span operations Flow needs from a tracer."""

    @property
    def trace_id(self) -> str:
        """Identifier of the span's trace, stable for the whole trace."""
        ...

    @property
    def resolved(self) -> bool:
        """Whether a flow id has been resolved for this span or an enclosing span of its trace."""
        ...

    def get_baggage_item(self, key: str) -> str | None: ...

    def set_baggage_item(self, key: str, value: str) -> None: ...

    def set_tag(self, key: str, value: Any) -> None: ...

    def mark_resolved(self) -> None: ...


@runtime_checkable
class FlowTracer(Protocol):
    """Ambient lookup of the currently active span."""

    def active_span(self) -> FlowSpan | None: ...


class OpenTelemetrySpan:
    """FlowSpan backed by an OTEL span and the current OTEL context.

    Baggage lives in the OTEL context rather than on the span. Writes attach
    a new context on top of the span's activation, so they are released when
    the scope that activated the span exits.
    """

    def __init__(self, span: Span) -> None:
        """Initialize the adapter.

        Args:
            span: The currently active OTEL span. Its span context must be valid.
        """
        self._span = span
        self._span_context = span.get_span_context()

    @property
    def span(self) -> Span:
        """Get the underlying OTEL span."""
        return self._span

    @property
    def trace_id(self) -> str:
        """Trace id as 32 lowercase hex characters."""
        return format_trace_id(self._span_context.trace_id)

    @property
    def resolved(self) -> bool:
        return otel_context.get_value(_RESOLVED_TRACE_KEY) == self._span_context.trace_id

    def get_baggage_item(self, key: str) -> str | None:
        value = otel_baggage.get_baggage(key)
        if value is None:
            return None
        return str(value)

    def set_baggage_item(self, key: str, value: str) -> None:
        otel_context.attach(otel_baggage.set_baggage(key, value))

    def set_tag(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def mark_resolved(self) -> None:
        otel_context.attach(otel_context.set_value(_RESOLVED_TRACE_KEY, self._span_context.trace_id))


class OpenTelemetryTracer:
    """FlowTracer over the ambient OTEL context.

    Works with any TracerProvider, the global one or a locally created SDK
    provider, because it only reads the current context.

    Example:
        >>> tracer = OpenTelemetryTracer()
        >>> with trace.get_tracer(__name__).start_as_current_span("request"):
        ...     span = tracer.active_span()
    """

    def active_span(self) -> OpenTelemetrySpan | None:
        """Get the active span, or None when no valid span is current."""
        span = otel_trace.get_current_span()
        if not span.get_span_context().is_valid:
            return None
        return OpenTelemetrySpan(span)


__all__ = [
    "FlowSpan",
    "FlowTracer",
    "OpenTelemetrySpan",
    "OpenTelemetryTracer",
]
