"""Test utilities for BudFlow SDK.

An in-memory tracer for testing code that uses Flow without setting up an
OpenTelemetry SDK. Baggage and tags are plain dictionaries that tests can
inspect directly.

Example:
    >>> from budflow.testing import MockTracer
    >>> tracer = MockTracer()
    >>> flow = budflow.create(tracer)
    >>> span = tracer.start_span("test")
    >>> with tracer.activate(span):
    ...     flow.read_from({"X-Flow-ID": "abc"}.get)
    ...     assert span.tags["flow_id"] == "abc"
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4


class MockSpan:
    """In-memory span implementing the FlowSpan interface."""

    def __init__(
        self,
        operation_name: str,
        trace_id: str | None = None,
        baggage: dict[str, str] | None = None,
        resolved: bool = False,
    ) -> None:
        self.operation_name = operation_name
        self.trace_id = trace_id or uuid4().hex
        self.span_id = uuid4().hex[:16]
        self.baggage: dict[str, str] = dict(baggage or {})
        self.tags: dict[str, Any] = {}
        self._resolved = resolved

    @property
    def resolved(self) -> bool:
        return self._resolved

    def get_baggage_item(self, key: str) -> str | None:
        return self.baggage.get(key)

    def set_baggage_item(self, key: str, value: str) -> None:
        self.baggage[key] = value

    def set_tag(self, key: str, value: Any) -> None:
        self.tags[key] = value

    def mark_resolved(self) -> None:
        self._resolved = True

    def __repr__(self) -> str:
        return f"MockSpan(operation_name={self.operation_name!r}, trace_id={self.trace_id!r})"


class MockTracer:
    """In-memory tracer implementing the FlowTracer interface.

    Each tracer tracks its own active span in a ContextVar, so activation is
    isolated per thread and per asyncio task.
    """

    def __init__(self) -> None:
        self._active: ContextVar[MockSpan | None] = ContextVar(f"budflow-mock-span-{id(self)}", default=None)

    def start_span(self, operation_name: str, child_of: MockSpan | None = None) -> MockSpan:
        """Create a span, inheriting trace id, baggage and resolution from child_of.

        The span is not activated, use activate() for that.
        """
        if child_of is None:
            return MockSpan(operation_name)
        return MockSpan(
            operation_name,
            trace_id=child_of.trace_id,
            baggage=child_of.baggage,
            resolved=child_of.resolved,
        )

    def active_span(self) -> MockSpan | None:
        return self._active.get()

    @contextmanager
    def activate(self, span: MockSpan) -> Iterator[MockSpan]:
        """Make span the active span for the duration of the block.

        The previously active span is restored on exit, including when the
        block raises.
        """
        token = self._active.set(span)
        try:
            yield span
        finally:
            self._active.reset(token)


__all__ = [
    "MockSpan",
    "MockTracer",
]
