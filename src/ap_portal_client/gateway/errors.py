"""
Gateway error model and normalization.

Every failure leaving the gateway is converted exactly once into a
``NormalizedError`` and raised as ``ApiGatewayError``. The message lookup order
below is user-visible and must not be reordered.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from ap_portal_client.enums import ErrorCategory

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

NETWORK_STATUS_CODE = 0


def classify_status(status_code: int) -> ErrorCategory:
    """Map a normalized status code onto the error taxonomy."""
    if status_code == NETWORK_STATUS_CODE:
        return ErrorCategory.NETWORK_ERROR
    if status_code == 400:
        return ErrorCategory.VALIDATION
    if status_code == 401:
        return ErrorCategory.UNAUTHORIZED
    if status_code == 403:
        return ErrorCategory.FORBIDDEN
    if status_code == 404:
        return ErrorCategory.NOT_FOUND
    if status_code >= 500:
        return ErrorCategory.SERVER_ERROR
    return ErrorCategory.UNKNOWN


class NormalizedError(BaseModel):
    """The single error shape produced by every gateway failure path.

    ``status_code == 0`` means no HTTP response was received.
    """

    status_code: int
    message: str
    details: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def category(self) -> ErrorCategory:
        return classify_status(self.status_code)


class ApiGatewayError(Exception):
    """Exception carrying a ``NormalizedError``.

    ``redirected`` records whether the unauthorized guard sent the user back
    to the login page while handling this failure.
    """

    def __init__(self, error: NormalizedError, *, redirected: bool = False) -> None:
        self.error = error
        self.redirected = redirected
        super().__init__(f"[{error.status_code}] {error.message}")

    @property
    def status_code(self) -> int:
        return self.error.status_code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def details(self) -> dict[str, Any] | None:
        return self.error.details

    @property
    def category(self) -> ErrorCategory:
        return self.error.category


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text.

    Returns None for an empty body.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def extract_message(body: Any, transport_message: str | None) -> str:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    if isinstance(body, str) and body.strip():
        return body
    if transport_message:
        return transport_message
    return DEFAULT_ERROR_MESSAGE


def extract_details(body: Any) -> dict[str, Any] | None:
    if not isinstance(body, dict):
        return None
    rest = {key: value for key, value in body.items() if key != "message"}
    return rest or None


def normalize_http_error(response: httpx.Response) -> NormalizedError:
    """Normalize an error response (4xx/5xx)."""
    body = decode_body(response)
    transport_message = (
        f"Http failure response for {response.request.url}: "
        f"{response.status_code} {response.reason_phrase}"
    )
    return NormalizedError(
        status_code=response.status_code,
        message=extract_message(body, transport_message),
        details=extract_details(body),
    )


def normalize_transport_error(exc: httpx.RequestError) -> NormalizedError:
    """Normalize a failure where no response was received."""
    return NormalizedError(
        status_code=NETWORK_STATUS_CODE,
        message=extract_message(None, str(exc).strip() or None),
    )
