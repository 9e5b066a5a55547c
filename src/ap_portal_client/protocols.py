"""
Protocols for the portal client.

Defines the seams used for dependency injection. The gateway, services and
filter engine depend on these protocols, not on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ap_portal_client.models.auth import Session


class CredentialStoreProtocol(Protocol):
    """Process-wide session persistence.

    Implementations never raise; absence is returned as ``None``.
    """

    def set(self, token: str | None, user: dict[str, Any] | None) -> None:
        """Replace the stored session."""
        ...

    def clear(self) -> None:
        """Remove the stored session. Safe to call when already empty."""
        ...

    def get_token(self) -> str | None:
        """Return the bearer token, if any."""
        ...

    def get_user(self) -> dict[str, Any] | None:
        """Return the stored user profile, if any."""
        ...

    def get_session(self) -> Session:
        """Return a snapshot of the whole session."""
        ...


class NavigatorProtocol(Protocol):
    """Current-route signal and navigation sink owned by the presentation layer."""

    @property
    def current_route(self) -> str:
        """Route currently displayed, including any query string."""
        ...

    def navigate_by_url(self, url: str) -> None:
        """Navigate to ``url``."""
        ...


class ApiGatewayProtocol(Protocol):
    """HTTP gateway used by domain services and the filter engine."""

    async def get(
        self,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        requires_auth: bool = True,
        suppress_auth_redirect: bool = False,
    ) -> Any:
        """Send GET request and return the decoded body."""
        ...

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        requires_auth: bool = True,
        suppress_auth_redirect: bool = False,
    ) -> Any:
        """Send POST request and return the decoded body."""
        ...

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        requires_auth: bool = True,
        suppress_auth_redirect: bool = False,
    ) -> Any:
        """Send PUT request and return the decoded body."""
        ...

    async def delete(
        self,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        requires_auth: bool = True,
        suppress_auth_redirect: bool = False,
    ) -> Any:
        """Send DELETE request and return the decoded body."""
        ...
