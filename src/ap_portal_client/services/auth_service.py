"""Authentication flows: login, first-login password setup, password change."""

from __future__ import annotations

from typing import Any

from ap_portal_client.logging_utils import create_client_logger
from ap_portal_client.models.auth import FirstLoginValidation, LoginResult
from ap_portal_client.protocols import (
    ApiGatewayProtocol,
    CredentialStoreProtocol,
    NavigatorProtocol,
)
from ap_portal_client.services._utils import unwrap_data

logger = create_client_logger("auth_service")


class AuthService:
    """Session lifecycle on top of the gateway.

    The credential store is written on a successful login or password setup
    and cleared on logout.
    """

    def __init__(
        self,
        gateway: ApiGatewayProtocol,
        credential_store: CredentialStoreProtocol,
        navigator: NavigatorProtocol,
        *,
        login_route: str = "/",
    ) -> None:
        self._gateway = gateway
        self._credential_store = credential_store
        self._navigator = navigator
        self._login_route = login_route

    async def login(self, username: str, password: str) -> LoginResult:
        """Authenticate and start a session.

        A 401 here means bad credentials, not an expired session, so the
        unauthorized redirect is suppressed.

        Raises:
            ApiGatewayError: On any failed call
        """
        response = await self._gateway.post(
            "/auth/login",
            {"username": username, "password": password},
            requires_auth=False,
            suppress_auth_redirect=True,
        )
        result = LoginResult.model_validate(unwrap_data(response) or {})

        if result.requires_password_setup:
            logger.info("Login requires password setup, session not stored", username=username)
            return result

        if result.token:
            self._credential_store.set(result.token, result.user)
            logger.info("Session started", username=username)
        else:
            logger.warning("Login response carried no token", username=username)
        return result

    async def validate_first_login_token(self, token: str) -> FirstLoginValidation:
        response = await self._gateway.get(
            "/auth/first-login/validate",
            query={"token": token},
            requires_auth=False,
        )
        return FirstLoginValidation.model_validate(unwrap_data(response) or {})

    async def set_first_login_password(
        self, token: str, new_password: str, confirm_password: str
    ) -> dict[str, Any]:
        """Set the initial password. A returned token starts a session."""
        response = await self._gateway.post(
            "/auth/first-login/set-password",
            {"token": token, "newPassword": new_password, "confirmPassword": confirm_password},
            requires_auth=False,
        )
        data = unwrap_data(response) or {}
        if isinstance(data, dict) and data.get("token"):
            user = {
                key: data[key] for key in ("id", "username", "email", "role") if key in data
            }
            self._credential_store.set(data["token"], user or None)
            logger.info("Session started after first-login password setup")
        return data

    async def change_password(
        self, username: str, current_password: str, new_password: str
    ) -> Any:
        return await self._gateway.post(
            "/auth/change-password",
            {
                "username": username,
                "currentPassword": current_password,
                "newPassword": new_password,
            },
        )

    def logout(self) -> None:
        self._credential_store.clear()
        self._navigator.navigate_by_url(self._login_route)
        logger.info("Session ended")
