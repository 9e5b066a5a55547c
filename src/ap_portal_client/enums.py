"""
ap_portal_client.enums - Shared enumerations for the portal client.
"""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Defines client runtime environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ErrorCategory(str, Enum):
    """
    Classification of a normalized gateway failure.

    NETWORK_ERROR is reserved for calls that never received an HTTP response.
    """

    NETWORK_ERROR = "NETWORK_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    SERVER_ERROR = "SERVER_ERROR"
    UNKNOWN = "UNKNOWN"


class FilterValueType(str, Enum):
    """
    Data type of a filterable field, as declared by the server.

    ENUM fields are multi-select from a value list, TEXT fields take free input.
    """

    ENUM = "ENUM"
    TEXT = "TEXT"


class FilterOperator(str, Enum):
    """Comparison operators the filter engine knows how to evaluate."""

    IN = "IN"
    CONTAINS = "CONTAINS"


class CallOutcome(str, Enum):
    """Terminal states of a single gateway call."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    FAILED_REDIRECTED = "failed_redirected"
