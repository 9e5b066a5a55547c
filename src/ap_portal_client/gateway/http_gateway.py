"""HTTP gateway for the portal API.

Builds outbound requests on top of the credential store, normalizes every
failure into ``NormalizedError`` and owns the unauthorized-redirect decision.
Each call moves through Building -> Sent -> Succeeded | Failed, and a Failed
call ends as Failed+Redirected only under the 401 rule in
``UnauthorizedRedirectGuard``.
"""

from __future__ import annotations

from typing import Any

import httpx

from ap_portal_client.enums import CallOutcome, HttpMethod
from ap_portal_client.gateway.errors import (
    ApiGatewayError,
    NormalizedError,
    decode_body,
    normalize_http_error,
    normalize_transport_error,
)
from ap_portal_client.gateway.redirect_guard import UnauthorizedRedirectGuard
from ap_portal_client.gateway.request_spec import RequestSpec, build_url
from ap_portal_client.logging_utils import create_client_logger
from ap_portal_client.protocols import CredentialStoreProtocol, NavigatorProtocol

logger = create_client_logger("gateway")


class ApiGateway:
    """Authenticated JSON client for the portal API.

    The gateway never retries. Callers receive either the decoded response
    body or an ``ApiGatewayError``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        credential_store: CredentialStoreProtocol,
        navigator: NavigatorProtocol,
        *,
        base_url: str,
        login_route: str = "/",
        first_login_route: str = "/first-login",
    ) -> None:
        """Initialize the gateway.

        Args:
            http_client: Shared httpx AsyncClient instance
            credential_store: Source of the bearer token
            navigator: Current-route signal and navigation sink
            base_url: Prefix for every relative request path
            login_route: Route of the login page
            first_login_route: Route prefix of the first-login page
        """
        self._client = http_client
        self._credential_store = credential_store
        self._base_url = base_url
        self._redirect_guard = UnauthorizedRedirectGuard(
            credential_store,
            navigator,
            login_route=login_route,
            first_login_route=first_login_route,
        )

    async def get(
        self,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        requires_auth: bool = True,
        suppress_auth_redirect: bool = False,
    ) -> Any:
        return await self.request(
            RequestSpec(
                method=HttpMethod.GET,
                path=path,
                query=query,
                headers=headers,
                requires_auth=requires_auth,
                suppress_auth_redirect=suppress_auth_redirect,
            )
        )

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
        return await self.request(
            RequestSpec(
                method=HttpMethod.POST,
                path=path,
                body=body,
                query=query,
                headers=headers,
                requires_auth=requires_auth,
                suppress_auth_redirect=suppress_auth_redirect,
            )
        )

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
        return await self.request(
            RequestSpec(
                method=HttpMethod.PUT,
                path=path,
                body=body,
                query=query,
                headers=headers,
                requires_auth=requires_auth,
                suppress_auth_redirect=suppress_auth_redirect,
            )
        )

    async def delete(
        self,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        requires_auth: bool = True,
        suppress_auth_redirect: bool = False,
    ) -> Any:
        return await self.request(
            RequestSpec(
                method=HttpMethod.DELETE,
                path=path,
                query=query,
                headers=headers,
                requires_auth=requires_auth,
                suppress_auth_redirect=suppress_auth_redirect,
            )
        )

    async def request(self, spec: RequestSpec) -> Any:
        """Execute ``spec`` and return the decoded response body.

        Raises:
            ApiGatewayError: On transport failure (status_code 0) or any
                non-2xx response
        """
        url = build_url(self._base_url, spec.path)
        headers = self.build_headers(spec)

        try:
            response = await self._client.request(
                spec.method.value,
                url,
                params=spec.query,
                json=spec.body,
                headers=headers,
            )
        except httpx.RequestError as e:
            raise self._fail(spec, url, normalize_transport_error(e)) from e

        if response.is_error:
            raise self._fail(spec, url, normalize_http_error(response))

        logger.debug(
            "Gateway call completed",
            method=spec.method.value,
            url=url,
            status_code=response.status_code,
            outcome=CallOutcome.SUCCEEDED.value,
        )
        return decode_body(response)

    def build_headers(self, spec: RequestSpec) -> dict[str, str]:
        """Merge caller headers with the bearer credential when required."""
        headers = dict(spec.headers or {})
        if spec.requires_auth:
            token = self._credential_store.get_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def _fail(self, spec: RequestSpec, url: str, error: NormalizedError) -> ApiGatewayError:
        redirected = self._redirect_guard.handle(error, spec)
        outcome = CallOutcome.FAILED_REDIRECTED if redirected else CallOutcome.FAILED
        logger.warning(
            "Gateway call failed",
            method=spec.method.value,
            url=url,
            status_code=error.status_code,
            category=error.category.value,
            error_message=error.message,
            outcome=outcome.value,
        )
        return ApiGatewayError(error, redirected=redirected)
