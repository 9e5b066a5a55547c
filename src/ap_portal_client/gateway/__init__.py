"""HTTP gateway: request building, credential injection and error normalization."""

from ap_portal_client.gateway.errors import (
    DEFAULT_ERROR_MESSAGE,
    ApiGatewayError,
    NormalizedError,
    classify_status,
)
from ap_portal_client.gateway.http_gateway import ApiGateway
from ap_portal_client.gateway.redirect_guard import UnauthorizedRedirectGuard
from ap_portal_client.gateway.request_spec import RequestSpec, build_url

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "ApiGateway",
    "ApiGatewayError",
    "NormalizedError",
    "RequestSpec",
    "UnauthorizedRedirectGuard",
    "build_url",
    "classify_status",
]
