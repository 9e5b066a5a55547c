"""Dependency injection providers for the portal client.

Provides a Dishka provider with APP-scoped infrastructure (settings, HTTP
client, credential store, navigator, gateway, services) and REQUEST-scoped
screen state (filter engine, occupation catalog).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from ap_portal_client.catalog import OccupationCatalog
from ap_portal_client.config import PortalClientSettings, settings
from ap_portal_client.credential_store import InMemoryCredentialStore, JsonFileCredentialStore
from ap_portal_client.filtering.engine import FilterEngine
from ap_portal_client.filtering.predicates import OCCUPATION_FIELD_ALIASES
from ap_portal_client.gateway.http_gateway import ApiGateway
from ap_portal_client.logging_utils import configure_client_logging, create_client_logger
from ap_portal_client.navigation import InMemoryNavigator
from ap_portal_client.protocols import (
    ApiGatewayProtocol,
    CredentialStoreProtocol,
    NavigatorProtocol,
)
from ap_portal_client.services.auth_service import AuthService
from ap_portal_client.services.occupation_service import OccupationService

logger = create_client_logger("di")


class PortalClientProvider(Provider):
    """Infrastructure provider for the portal client.

    A presentation layer passes its own navigator; otherwise an
    ``InMemoryNavigator`` is used.
    """

    scope = Scope.APP

    def __init__(
        self,
        config: PortalClientSettings | None = None,
        navigator: NavigatorProtocol | None = None,
    ) -> None:
        super().__init__()
        self._config = config or settings
        self._navigator = navigator

    @provide
    def get_config(self) -> PortalClientSettings:
        return self._config

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, config: PortalClientSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            ),
            follow_redirects=True,
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_credential_store(self, config: PortalClientSettings) -> CredentialStoreProtocol:
        if config.CREDENTIAL_STORE_PATH is not None:
            logger.debug("Using file credential store", path=str(config.CREDENTIAL_STORE_PATH))
            return JsonFileCredentialStore(config.CREDENTIAL_STORE_PATH)
        return InMemoryCredentialStore()

    @provide(scope=Scope.APP)
    def provide_navigator(self) -> NavigatorProtocol:
        return self._navigator or InMemoryNavigator()

    @provide(scope=Scope.APP)
    def provide_gateway(
        self,
        config: PortalClientSettings,
        http_client: httpx.AsyncClient,
        credential_store: CredentialStoreProtocol,
        navigator: NavigatorProtocol,
    ) -> ApiGatewayProtocol:
        return ApiGateway(
            http_client,
            credential_store,
            navigator,
            base_url=config.API_BASE_URL,
            login_route=config.LOGIN_ROUTE,
            first_login_route=config.FIRST_LOGIN_ROUTE,
        )

    @provide(scope=Scope.APP)
    def provide_auth_service(
        self,
        config: PortalClientSettings,
        gateway: ApiGatewayProtocol,
        credential_store: CredentialStoreProtocol,
        navigator: NavigatorProtocol,
    ) -> AuthService:
        return AuthService(gateway, credential_store, navigator, login_route=config.LOGIN_ROUTE)

    @provide(scope=Scope.APP)
    def provide_occupation_service(self, gateway: ApiGatewayProtocol) -> OccupationService:
        return OccupationService(gateway)

    @provide(scope=Scope.REQUEST)
    def provide_filter_engine(self, gateway: ApiGatewayProtocol) -> FilterEngine:
        return FilterEngine(gateway=gateway, field_aliases=OCCUPATION_FIELD_ALIASES)

    @provide(scope=Scope.REQUEST)
    def provide_occupation_catalog(
        self, service: OccupationService, engine: FilterEngine
    ) -> OccupationCatalog:
        return OccupationCatalog(service, engine)


def create_container(
    config: PortalClientSettings | None = None,
    navigator: NavigatorProtocol | None = None,
    *,
    configure_logging: bool = True,
) -> AsyncContainer:
    """Build the client container, configuring logging from ``config`` first."""
    config = config or settings
    if configure_logging:
        configure_client_logging(
            config.SERVICE_NAME,
            environment=config.ENVIRONMENT.value,
            log_level=config.LOG_LEVEL,
        )
    return make_async_container(PortalClientProvider(config, navigator))
