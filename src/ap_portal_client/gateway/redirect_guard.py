"""Unauthorized-redirect guard.

On a 401 the session is wiped and the user is sent to the login page with the
route they were on as ``next``. Redirecting from the login or first-login page
back to itself is the one forbidden transition, which also makes a second
racing 401 a no-op: by the time it arrives the route is already the login page.
"""

from __future__ import annotations

from ap_portal_client.gateway.errors import NormalizedError
from ap_portal_client.gateway.request_spec import RequestSpec
from ap_portal_client.logging_utils import create_client_logger
from ap_portal_client.navigation import build_login_redirect, is_auth_route
from ap_portal_client.protocols import CredentialStoreProtocol, NavigatorProtocol

logger = create_client_logger("gateway.redirect_guard")

UNAUTHORIZED_STATUS_CODE = 401


class UnauthorizedRedirectGuard:
    def __init__(
        self,
        credential_store: CredentialStoreProtocol,
        navigator: NavigatorProtocol,
        *,
        login_route: str = "/",
        first_login_route: str = "/first-login",
    ) -> None:
        self._credential_store = credential_store
        self._navigator = navigator
        self._login_route = login_route
        self._first_login_route = first_login_route

    def should_redirect(self, error: NormalizedError, spec: RequestSpec) -> bool:
        if error.status_code != UNAUTHORIZED_STATUS_CODE:
            return False
        if spec.suppress_auth_redirect:
            return False
        return not is_auth_route(
            self._navigator.current_route,
            login_route=self._login_route,
            first_login_route=self._first_login_route,
        )

    def handle(self, error: NormalizedError, spec: RequestSpec) -> bool:
        """Redirect to login when ``error`` calls for it.

        Returns True when a redirect was issued. Must not await between the
        route check and the navigation.
        """
        if not self.should_redirect(error, spec):
            return False

        previous_route = self._navigator.current_route
        self._credential_store.clear()
        target = build_login_redirect(self._login_route, previous_route)
        logger.info(
            "Session expired, redirecting to login",
            path=spec.path,
            previous_route=previous_route,
            target=target,
        )
        self._navigator.navigate_by_url(target)
        return True
