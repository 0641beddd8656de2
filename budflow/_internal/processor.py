"""FlowSpanProcessor - copies the flow id baggage entry to span attributes.

Flow.read_from() tags only the span that was active when the flow id was
resolved. This processor runs on every span start and tags child spans
too, so any span of the trace can be filtered by flow id.
"""

from __future__ import annotations

from opentelemetry import baggage, context
from opentelemetry.sdk.trace import ReadableSpan, Span, SpanProcessor

from budflow._internal.config import FlowConfig, get_default_config


class FlowSpanProcessor(SpanProcessor):
    """SpanProcessor that copies the flow id from W3C Baggage to span attributes.

    Usage:
        from budflow import FlowSpanProcessor

        tracer_provider = TracerProvider(...)
        tracer_provider.add_span_processor(FlowSpanProcessor())
    """

    def __init__(self, config: FlowConfig | None = None) -> None:
        self._config = config or get_default_config()

    def on_start(self, span: Span, parent_context: context.Context | None = None) -> None:
        """Copy the flow id baggage entry to the span when it starts.

        Args:
            span: The span that is starting
            parent_context: The parent context, or None to use current context
        """
        ctx = parent_context if parent_context is not None else context.get_current()
        value = baggage.get_baggage(self._config.baggage_key, context=ctx)
        if value:
            span.set_attribute(self._config.tag_key, str(value))

    def on_end(self, span: ReadableSpan) -> None:
        pass

    def shutdown(self) -> None:
        pass

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        """No buffering, always returns True."""
        return True
