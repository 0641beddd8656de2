"""Flow - resolves and propagates the flow id of the active span.

Resolution precedence, applied once per span by read_from():
1. Baggage: a flow id already propagated into the trace always wins.
   It is recorded as a tag, baggage is left untouched.
2. Header: an inbound header value is written to baggage and tag.
3. Trace id: nothing is written, the trace id is recoverable from the span.

Per span state machine: UNRESOLVED -> RESOLVED on the first read_from().
Child spans started inside a resolved span of the same trace are RESOLVED
too and read the inherited baggage. current_id(), write_to() and write()
fail while UNRESOLVED, so the value they return can never change within
a span.
"""

from __future__ import annotations

import structlog

from budflow._internal.config import FlowConfig, get_default_config
from budflow._internal.exceptions import FlowNotResolvedError, NoActiveSpanError
from budflow._internal.tracer import FlowSpan, FlowTracer, OpenTelemetryTracer
from budflow.types import HeaderFactory, HeaderLookup, HeaderSink, T

logger = structlog.get_logger(__name__)


class Flow:
    """Flow id resolver bound to a tracer.

    Holds no state of its own besides the tracer and configuration; all
    mutable state lives on the active span.

    Example:
        >>> flow = Flow(OpenTelemetryTracer())
        >>> with tracer.start_as_current_span("request"):
        ...     flow.read_from(request.headers.get)
        ...     flow.current_id()
    """

    def __init__(self, tracer: FlowTracer | None = None, config: FlowConfig | None = None) -> None:
        """Initialize Flow.

        Args:
            tracer: Tracer providing the active span. Defaults to OpenTelemetryTracer.
            config: Key names to use. Defaults to the global configuration.
        """
        self._tracer = tracer or OpenTelemetryTracer()
        self._config = config or get_default_config()

    @property
    def tracer(self) -> FlowTracer:
        """Get the tracer this flow is bound to."""
        return self._tracer

    @property
    def config(self) -> FlowConfig:
        """Get the key configuration."""
        return self._config

    def _active_span(self, operation: str) -> FlowSpan:
        span = self._tracer.active_span()
        if span is None:
            raise NoActiveSpanError(operation)
        return span

    def read_from(self, lookup: HeaderLookup) -> None:
        """Resolve the flow id for the active span.

        Calling it again for an already resolved span, or inside a child of
        one, does nothing.

        Args:
            lookup: Maps a header name to its value, or None if absent.

        Raises:
            NoActiveSpanError: If no span is active.
        """
        span = self._active_span("read_from")

        if span.resolved:
            logger.debug("Flow id already resolved for span", trace_id=span.trace_id)
            return

        baggage_flow_id = span.get_baggage_item(self._config.baggage_key)

        if baggage_flow_id:
            span.set_tag(self._config.tag_key, baggage_flow_id)
            logger.debug("Flow id resolved", source="baggage", flow_id=baggage_flow_id)
        else:
            header_flow_id = lookup(self._config.header_name)
            trace_id = span.trace_id

            if header_flow_id and header_flow_id != trace_id:
                span.set_baggage_item(self._config.baggage_key, header_flow_id)
                span.set_tag(self._config.tag_key, header_flow_id)
                logger.debug("Flow id resolved", source="header", flow_id=header_flow_id)
            else:
                logger.debug("Flow id resolved", source="trace_id", flow_id=trace_id)

        span.mark_resolved()

    def current_id(self) -> str:
        """Get the flow id of the active span.

        Re-derived on every call from the span: the baggage value if set,
        otherwise the trace id.

        Raises:
            NoActiveSpanError: If no span is active.
            FlowNotResolvedError: If read_from() was not called for the active span.
        """
        return self._current_id("current_id")

    def _current_id(self, operation: str) -> str:
        span = self._active_span(operation)
        if not span.resolved:
            raise FlowNotResolvedError(operation, span.trace_id)
        return span.get_baggage_item(self._config.baggage_key) or span.trace_id

    def write_to(self, sink: HeaderSink) -> None:
        """Emit the flow id header into sink.

        Args:
            sink: Called once with (header name, flow id), e.g. ``headers.__setitem__``.
        """
        sink(self._config.header_name, self._current_id("write_to"))

    def write(self, factory: HeaderFactory[T]) -> T:
        """Build a container holding the flow id header.

        Args:
            factory: Called with (header name, flow id), e.g. ``lambda k, v: {k: v}``.

        Returns:
            Whatever factory returns.
        """
        return factory(self._config.header_name, self._current_id("write"))


def create(tracer: FlowTracer | None = None, config: FlowConfig | None = None) -> Flow:
    """Create a Flow bound to tracer.

    Args:
        tracer: Tracer providing the active span. Defaults to OpenTelemetryTracer.
        config: Key names to use. Defaults to the global configuration.
    """
    return Flow(tracer=tracer, config=config)


_default_flow: Flow | None = None


def get_default_flow() -> Flow:
    """Get the global Flow over the ambient OTEL context.

    Created lazily on first access.
    """
    global _default_flow
    if _default_flow is None:
        _default_flow = Flow()
    return _default_flow


__all__ = [
    "Flow",
    "create",
    "get_default_flow",
]
