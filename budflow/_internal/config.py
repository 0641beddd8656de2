"""Configuration management for BudFlow SDK.

Key names can come from multiple sources, in priority order:
1. Explicit programmatic configuration via merge_with() (highest)
2. Environment variables (BUDFLOW_*)
3. Default values (lowest)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import overload

from budflow._internal.constants import (
    ENV_BAGGAGE_KEY,
    ENV_HEADER_NAME,
    ENV_TAG_KEY,
    FLOW_ID_BAGGAGE,
    FLOW_ID_HEADER,
    FLOW_ID_TAG,
)


@overload
def _get_env(*keys: str, default: str) -> str: ...


@overload
def _get_env(*keys: str, default: None = None) -> str | None: ...


def _get_env(
    *keys: str,
    default: str | None = None,
) -> str | None:
    """Get the first non-empty environment variable from the given keys.

    Args:
        *keys: Environment variable names to check in order.
        default: Default value if none found.

    Returns:
        The first non-empty value found, or the default.
    """
    for key in keys:
        value = os.environ.get(key)
        if value:
            return value
    return default


@dataclass(frozen=True)
class FlowConfig:
    """Configuration for BudFlow SDK.

    Attributes:
        header_name: Transport header carrying the flow id between services.
        baggage_key: Baggage entry carrying the flow id inside the trace.
        tag_key: Span attribute the flow id is recorded under.
    """

    header_name: str = FLOW_ID_HEADER
    baggage_key: str = FLOW_ID_BAGGAGE
    tag_key: str = FLOW_ID_TAG

    @classmethod
    def from_environment(cls) -> FlowConfig:
        """Create configuration from environment variables.

        Environment variables:
            BUDFLOW_HEADER_NAME: Header name (default X-Flow-ID)
            BUDFLOW_BAGGAGE_KEY: Baggage key (default flow_id)
            BUDFLOW_TAG_KEY: Span attribute key (default flow_id)

        Returns:
            A new FlowConfig populated from environment variables.
        """
        return cls(
            header_name=_get_env(ENV_HEADER_NAME, default=FLOW_ID_HEADER),
            baggage_key=_get_env(ENV_BAGGAGE_KEY, default=FLOW_ID_BAGGAGE),
            tag_key=_get_env(ENV_TAG_KEY, default=FLOW_ID_TAG),
        )

    def merge_with(
        self,
        *,
        header_name: str | None = None,
        baggage_key: str | None = None,
        tag_key: str | None = None,
    ) -> FlowConfig:
        """Create a new config by merging explicit values with this config.

        Explicit values (non-empty) override existing values.

        Returns:
            A new FlowConfig with merged values.
        """
        return FlowConfig(
            header_name=header_name or self.header_name,
            baggage_key=baggage_key or self.baggage_key,
            tag_key=tag_key or self.tag_key,
        )


# Created at module load with environment defaults
GLOBAL_CONFIG = FlowConfig.from_environment()


def get_default_config() -> FlowConfig:
    """Get the global default configuration."""
    return GLOBAL_CONFIG
