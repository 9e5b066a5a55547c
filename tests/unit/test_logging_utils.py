"""Tests for logging_utils processors and configuration."""

import os
from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import pytest
import structlog
from structlog.testing import capture_logs

from ap_portal_client.logging_utils import (
    add_client_context,
    configure_client_logging,
    create_client_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestAddClientContext:
    """Tests for the add_client_context processor."""

    def test_adds_identity_from_env(self) -> None:
        """Verify service.name and deployment.environment come from the environment."""
        # Arrange
        event_dict: dict[str, Any] = {"event": "Session started", "username": "admin"}

        # Act
        with patch.dict(os.environ, {"SERVICE_NAME": "portal", "ENVIRONMENT": "staging"}):
            result = add_client_context(None, "info", event_dict)

        # Assert
        assert result["service.name"] == "portal"
        assert result["deployment.environment"] == "staging"
        assert result["username"] == "admin"

    def test_defaults_when_env_missing(self) -> None:
        """Verify defaults when neither variable is set."""
        with patch.dict(os.environ, {}, clear=True):
            result = add_client_context(None, "info", {"event": "x"})

        assert result["service.name"] == "unknown"
        assert result["deployment.environment"] == "development"


class TestConfigureClientLogging:
    """Tests for renderer selection."""

    @pytest.mark.parametrize(
        "env, environment, expected_renderer",
        [
            ({"LOG_FORMAT": "json"}, "development", structlog.processors.JSONRenderer),
            ({}, "production", structlog.processors.JSONRenderer),
            ({}, "development", structlog.dev.ConsoleRenderer),
            ({"LOG_FORMAT": "console"}, "production", structlog.dev.ConsoleRenderer),
        ],
    )
    def test_renderer_follows_format_and_environment(
        self, env: dict[str, str], environment: str, expected_renderer: type
    ) -> None:
        with patch.dict(os.environ, env, clear=True):
            configure_client_logging("ap-portal-client", environment=environment)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], expected_renderer)
        assert add_client_context in processors

    def test_sets_service_name_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            configure_client_logging("ap-portal-client", environment="development")
            assert os.environ["SERVICE_NAME"] == "ap-portal-client"
            assert os.environ["ENVIRONMENT"] == "development"


def test_create_client_logger_binds_name() -> None:
    with capture_logs() as logs:
        create_client_logger("gateway").info("Request succeeded", status_code=200)

    assert logs == [
        {
            "event": "Request succeeded",
            "status_code": 200,
            "logger_name": "gateway",
            "log_level": "info",
        }
    ]
