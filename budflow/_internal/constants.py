"""Key constants for BudFlow SDK.

The flow id travels under three names:
- an HTTP header on the wire between services
- a W3C baggage entry inside the trace context
- a span attribute (tag) on the local span, for querying traces

Centralized constants ensure consistency and prevent typos. All three
names can be overridden through FlowConfig.
"""

from __future__ import annotations

# Default key names
FLOW_ID_HEADER = "X-Flow-ID"
FLOW_ID_BAGGAGE = "flow_id"
FLOW_ID_TAG = "flow_id"

# Environment variables
ENV_HEADER_NAME = "BUDFLOW_HEADER_NAME"
ENV_BAGGAGE_KEY = "BUDFLOW_BAGGAGE_KEY"
ENV_TAG_KEY = "BUDFLOW_TAG_KEY"

# Log event key added by FlowLogProcessor
LOG_FLOW_ID = "flow_id"

__all__ = [
    "ENV_BAGGAGE_KEY",
    "ENV_HEADER_NAME",
    "ENV_TAG_KEY",
    "FLOW_ID_BAGGAGE",
    "FLOW_ID_HEADER",
    "FLOW_ID_TAG",
    "LOG_FLOW_ID",
]
