"""BudFlow - flow id propagation for Bud-Stack services.

A flow id identifies one business flow across every service it touches.
BudFlow reads it from an inbound header or the trace baggage (falling back
to the trace id), keeps baggage and span attributes in sync, and writes it
to outbound headers. Built on OpenTelemetry.

Example:
    >>> import budflow
    >>> flow = budflow.create()
    >>> with tracer.start_as_current_span("request"):
    ...     flow.read_from(request.headers.get)
    ...     headers = flow.write(lambda name, value: {name: value})

Configuration:
    Environment variables:
        BUDFLOW_HEADER_NAME: Header name (default X-Flow-ID)
        BUDFLOW_BAGGAGE_KEY: Baggage key (default flow_id)
        BUDFLOW_TAG_KEY: Span attribute key (default flow_id)
"""

from budflow._internal.config import GLOBAL_CONFIG, FlowConfig, get_default_config
from budflow._internal.constants import FLOW_ID_BAGGAGE, FLOW_ID_HEADER, FLOW_ID_TAG
from budflow._internal.exceptions import FlowException, FlowNotResolvedError, NoActiveSpanError
from budflow._internal.flow import Flow, create, get_default_flow
from budflow._internal.logging import FlowLogProcessor, configure_logging
from budflow._internal.processor import FlowSpanProcessor
from budflow._internal.tracer import FlowSpan, FlowTracer, OpenTelemetryTracer
from budflow._internal.version import __version__

__all__ = [
    "FLOW_ID_BAGGAGE",
    "FLOW_ID_HEADER",
    "FLOW_ID_TAG",
    "GLOBAL_CONFIG",
    "Flow",
    "FlowConfig",
    "FlowException",
    "FlowLogProcessor",
    "FlowNotResolvedError",
    "FlowSpan",
    "FlowSpanProcessor",
    "FlowTracer",
    "NoActiveSpanError",
    "OpenTelemetryTracer",
    "__version__",
    "configure_logging",
    "create",
    "get_default_config",
    "get_default_flow",
]
