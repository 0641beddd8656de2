"""Structured logging with flow ids.

Provides a structlog processor that stamps every log event emitted inside
a resolved span with its flow id, and a helper that installs it in a
console (debug) or JSON (production) processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from budflow._internal.constants import LOG_FLOW_ID
from budflow._internal.exceptions import FlowException
from budflow._internal.flow import Flow, get_default_flow


class FlowLogProcessor:
    """structlog processor adding the current flow id to log events.

    Events logged outside an active span, or before read_from() was called
    for it, are passed through unchanged.
    """

    def __init__(self, flow: Flow | None = None, key: str = LOG_FLOW_ID) -> None:
        """Initialize the processor.

        Args:
            flow: Flow to read the id from. Defaults to the global Flow.
            key: Event dictionary key to store the flow id under.
        """
        self._flow = flow
        self._key = key

    def __call__(
        self, logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        flow = self._flow or get_default_flow()
        try:
            event_dict.setdefault(self._key, flow.current_id())
        except FlowException:
            pass
        return event_dict


def configure_logging(
    debug: bool = False,
    log_level: int | str = logging.INFO,
    flow: Flow | None = None,
) -> None:
    """Configure structlog for structured logging with flow ids.

    Args:
        debug: Colored console output instead of JSON.
        log_level: Level for the standard library root logger.
        flow: Flow the log processor reads from. Defaults to the global Flow.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        FlowLogProcessor(flow),
    ]

    if debug:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
