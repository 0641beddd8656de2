"""Custom exceptions for BudFlow SDK."""

from __future__ import annotations

from typing import Any


class FlowException(Exception):
    """Base exception for all flow id errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NoActiveSpanError(FlowException):
    """Flow id operation invoked outside of an active span.

    This is a usage error: the caller must activate a span before reading
    or writing the flow id.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"No active span found for {operation}",
            details={"operation": operation},
        )
        self.operation = operation


class FlowNotResolvedError(FlowException):
    """Flow id requested before read_from() was called for the active span."""

    def __init__(self, operation: str, trace_id: str) -> None:
        super().__init__(
            f"Flow id has not been resolved for the active span, call read_from() before {operation}",
            details={"operation": operation, "trace_id": trace_id},
        )
        self.operation = operation
        self.trace_id = trace_id
