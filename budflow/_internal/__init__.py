"""Internal implementation details for BudFlow SDK.

WARNING: This module is internal and should not be imported directly.
All public API is exported from the top-level budflow package.

- flow.py: Flow resolver and the global instance
- tracer.py: Tracer interface and OpenTelemetry adapter
- config.py: Key name configuration
- constants.py: Default key names and environment variables
- exceptions.py: Error types
- processor.py: Span processor tagging child spans
- logging.py: structlog integration
"""

from __future__ import annotations

__all__: list[str] = []
