"""Public type definitions for BudFlow SDK.

Example:
    >>> from budflow.types import HeaderLookup, HeaderSink
    >>> def forward(lookup: HeaderLookup, sink: HeaderSink) -> None:
    ...     pass
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

# Inbound: header name -> value, None when the header is absent
HeaderLookup = Callable[[str], str | None]

# Outbound: receives (header name, value)
HeaderSink = Callable[[str, str], object]

# Outbound: builds a caller-chosen container from (header name, value)
HeaderFactory = Callable[[str, str], T]

__all__ = [
    "HeaderFactory",
    "HeaderLookup",
    "HeaderSink",
]
