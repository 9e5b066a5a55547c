"""Tests for the Dishka container wiring."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
from dishka import AsyncContainer
from respx import MockRouter

from ap_portal_client.catalog import OccupationCatalog
from ap_portal_client.config import PortalClientSettings
from ap_portal_client.credential_store import InMemoryCredentialStore, JsonFileCredentialStore
from ap_portal_client.di import create_container
from ap_portal_client.filtering.engine import FilterEngine
from ap_portal_client.gateway.http_gateway import ApiGateway
from ap_portal_client.navigation import InMemoryNavigator
from ap_portal_client.protocols import (
    ApiGatewayProtocol,
    CredentialStoreProtocol,
    NavigatorProtocol,
)
from ap_portal_client.services.auth_service import AuthService
from ap_portal_client.services.occupation_service import OccupationService
from tests.conftest import BASE_URL, OCCUPATION_VIEW_ROUTE


@pytest.fixture
def test_settings() -> PortalClientSettings:
    return PortalClientSettings(SERVICE_NAME="ap-portal-client-test", API_BASE_URL=BASE_URL)


@pytest.fixture
async def container(test_settings: PortalClientSettings) -> AsyncIterator[AsyncContainer]:
    container = create_container(
        test_settings, InMemoryNavigator(OCCUPATION_VIEW_ROUTE), configure_logging=False
    )
    yield container
    await container.close()


class TestContainer:
    @pytest.mark.asyncio
    async def test_resolves_app_scoped_components(self, container: AsyncContainer) -> None:
        gateway = await container.get(ApiGatewayProtocol)

        assert isinstance(gateway, ApiGateway)
        assert isinstance(await container.get(CredentialStoreProtocol), InMemoryCredentialStore)
        assert isinstance(await container.get(AuthService), AuthService)
        assert isinstance(await container.get(OccupationService), OccupationService)
        assert await container.get(ApiGatewayProtocol) is gateway

    @pytest.mark.asyncio
    async def test_catalog_is_request_scoped(self, container: AsyncContainer) -> None:
        async with container() as first:
            catalog = await first.get(OccupationCatalog)
            engine = await first.get(FilterEngine)
        async with container() as second:
            other = await second.get(OccupationCatalog)

        assert catalog.engine is engine
        assert other is not catalog
        assert other.engine is not engine

    @pytest.mark.asyncio
    async def test_file_credential_store_when_path_configured(self, tmp_path: Path) -> None:
        settings = PortalClientSettings(
            API_BASE_URL=BASE_URL, CREDENTIAL_STORE_PATH=tmp_path / "session.json"
        )
        container = create_container(settings, configure_logging=False)
        try:
            store = await container.get(CredentialStoreProtocol)
        finally:
            await container.close()

        assert isinstance(store, JsonFileCredentialStore)
        assert store.path == tmp_path / "session.json"


class TestWiredFlows:
    @pytest.mark.asyncio
    async def test_unauthorized_list_redirects_through_shared_navigator(
        self, container: AsyncContainer, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{BASE_URL}/occupations/list").mock(
            return_value=httpx.Response(401, json={"message": "Token expired"})
        )
        store = await container.get(CredentialStoreProtocol)
        store.set("stale", None)

        async with container() as request_container:
            catalog = await request_container.get(OccupationCatalog)
            loaded = await catalog.load()

        navigator = await container.get(NavigatorProtocol)
        assert loaded is False
        assert catalog.last_error is not None
        assert catalog.last_error.message == "Token expired"
        assert store.get_token() is None
        assert navigator.current_route == "/?next=%2Fsettings%2Foccupation%2Fview"
