"""Flow id propagation utilities for BudFlow SDK.

Adapters between header mappings (HTTP headers, message queue metadata)
and Flow's lookup/sink callables.

Example:
    >>> from budflow.propagate import extract_flow, inject_flow
    >>> extract_flow(incoming_headers)  # Resolve on receiver
    >>> headers = inject_flow({})  # Add flow id to outbound headers
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping

from budflow._internal.flow import Flow, get_default_flow
from budflow.types import HeaderLookup


def header_lookup(headers: Mapping[str, str]) -> HeaderLookup:
    """Build a case-insensitive lookup over headers.

    HTTP header names are case-insensitive, so ``x-flow-id`` matches
    ``X-Flow-ID``. Exact matches take priority.

    Args:
        headers: Any mapping of header name to value.

    Returns:
        A callable returning the header value, or None if absent.
    """

    def lookup(name: str) -> str | None:
        value = headers.get(name)
        if value is not None:
            return value
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                return candidate
        return None

    return lookup


def extract_flow(headers: Mapping[str, str], flow: Flow | None = None) -> None:
    """Resolve the flow id of the active span from inbound headers.

    Args:
        headers: Inbound headers.
        flow: Flow to resolve with. Defaults to the global Flow.
    """
    (flow or get_default_flow()).read_from(header_lookup(headers))


def inject_flow(headers: MutableMapping[str, str], flow: Flow | None = None) -> MutableMapping[str, str]:
    """Add the flow id header of the active span to outbound headers.

    Args:
        headers: Outbound headers, modified in place.
        flow: Flow to read from. Defaults to the global Flow.

    Returns:
        The same headers mapping.
    """
    (flow or get_default_flow()).write_to(headers.__setitem__)
    return headers


__all__ = [
    "extract_flow",
    "header_lookup",
    "inject_flow",
]
