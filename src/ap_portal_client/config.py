"""
Configuration for the An Phuc portal client.

Uses Pydantic settings for environment-based configuration. Every value can be
overridden with an ``AP_PORTAL_`` prefixed environment variable or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ap_portal_client.enums import Environment


class PortalClientSettings(BaseSettings):
    """Configuration settings for the portal client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AP_PORTAL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Client identity
    SERVICE_NAME: str = "ap-portal-client"

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment for the client",
    )

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Portal API
    API_BASE_URL: str = Field(
        default="http://localhost:8080/api",
        description="Base URL prefixed to every relative request path",
    )

    # Routes owned by the presentation layer
    LOGIN_ROUTE: str = Field(default="/", description="Route of the login page")
    FIRST_LOGIN_ROUTE: str = Field(
        default="/first-login",
        description="Route prefix of the first-login password setup page",
    )

    # HTTP Client Timeouts
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="HTTP client request timeout in seconds",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="HTTP client connection timeout in seconds",
    )

    # Session persistence
    CREDENTIAL_STORE_PATH: Path | None = Field(
        default=None,
        description="JSON file used to persist the session; in-memory when unset",
    )


# Global settings instance
settings = PortalClientSettings()
