"""Tests for FlowConfig and environment handling."""

from __future__ import annotations

import os
from unittest.mock import patch

from budflow import FLOW_ID_BAGGAGE, FLOW_ID_HEADER, FLOW_ID_TAG, GLOBAL_CONFIG, Flow, FlowConfig, get_default_config
from budflow._internal.config import _get_env
from budflow.testing import MockTracer


class TestEnvironmentHelpers:
    """Tests for environment variable helpers."""

    def test_get_env_first_non_empty(self) -> None:
        with patch.dict(os.environ, {"BUDFLOW_A": "", "BUDFLOW_B": "value"}):
            assert _get_env("BUDFLOW_A", "BUDFLOW_B") == "value"

    def test_get_env_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _get_env("BUDFLOW_MISSING", default="fallback") == "fallback"
            assert _get_env("BUDFLOW_MISSING") is None


class TestFlowConfig:
    """Tests for FlowConfig."""

    def test_defaults(self) -> None:
        config = FlowConfig()

        assert config.header_name == "X-Flow-ID"
        assert config.baggage_key == "flow_id"
        assert config.tag_key == "flow_id"

    def test_from_environment(self) -> None:
        """Test that environment variables override defaults."""
        env = {
            "BUDFLOW_HEADER_NAME": "X-Correlation-ID",
            "BUDFLOW_BAGGAGE_KEY": "correlation_id",
            "BUDFLOW_TAG_KEY": "bud.correlation.id",
        }
        with patch.dict(os.environ, env):
            config = FlowConfig.from_environment()

        assert config == FlowConfig("X-Correlation-ID", "correlation_id", "bud.correlation.id")

    def test_from_environment_ignores_empty_values(self) -> None:
        with patch.dict(os.environ, {"BUDFLOW_HEADER_NAME": "", "BUDFLOW_TAG_KEY": ""}, clear=True):
            config = FlowConfig.from_environment()

        assert config == FlowConfig(FLOW_ID_HEADER, FLOW_ID_BAGGAGE, FLOW_ID_TAG)

    def test_merge_with(self) -> None:
        """Test that explicit values override and missing ones are kept."""
        config = FlowConfig().merge_with(header_name="X-Trace-Flow", tag_key="")

        assert config.header_name == "X-Trace-Flow"
        assert config.baggage_key == FLOW_ID_BAGGAGE
        assert config.tag_key == FLOW_ID_TAG

    def test_global_config(self) -> None:
        assert get_default_config() is GLOBAL_CONFIG

    def test_flow_uses_global_config_by_default(self) -> None:
        assert Flow(MockTracer()).config is GLOBAL_CONFIG
