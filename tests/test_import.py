"""Basic import tests for BudFlow SDK.

These tests verify that the package structure is correct and all
modules can be imported without errors.
"""

from __future__ import annotations


def test_import_budflow() -> None:
    """Test that budflow package can be imported."""
    import budflow

    assert budflow is not None


def test_import_version() -> None:
    """Test that version is accessible."""
    from budflow import __version__

    assert isinstance(__version__, str)
    assert __version__ == "0.1.0"


def test_import_types() -> None:
    """Test that types module can be imported."""
    from budflow.types import HeaderFactory, HeaderLookup, HeaderSink

    assert HeaderLookup is not None
    assert HeaderSink is not None
    assert HeaderFactory is not None


def test_import_internal_constants() -> None:
    """Test that internal constants module can be imported."""
    from budflow._internal import constants

    assert constants.FLOW_ID_HEADER == "X-Flow-ID"
    assert constants.FLOW_ID_BAGGAGE == "flow_id"
    assert constants.FLOW_ID_TAG == "flow_id"


def test_exception_hierarchy() -> None:
    """Test that all errors share the FlowException base."""
    from budflow import FlowException, FlowNotResolvedError, NoActiveSpanError

    assert issubclass(NoActiveSpanError, FlowException)
    assert issubclass(FlowNotResolvedError, FlowException)
    assert str(NoActiveSpanError("current_id")) == (
        "No active span found for current_id | Details: {'operation': 'current_id'}"
    )


def test_default_flow_singleton() -> None:
    """Test that the global Flow is created once."""
    from budflow import OpenTelemetryTracer, get_default_flow

    assert get_default_flow() is get_default_flow()
    assert isinstance(get_default_flow().tracer, OpenTelemetryTracer)
