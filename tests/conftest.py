"""
Shared test configuration for the portal client.

Provides a real httpx client for respx mocking, an in-memory credential store
and navigator, and a gateway wired to them.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from ap_portal_client.credential_store import InMemoryCredentialStore
from ap_portal_client.gateway.http_gateway import ApiGateway
from ap_portal_client.models.occupation import Occupation
from ap_portal_client.navigation import InMemoryNavigator

BASE_URL = "http://portal.test/api"
OCCUPATION_VIEW_ROUTE = "/settings/occupation/view"


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def navigator() -> InMemoryNavigator:
    """Navigator parked on an authenticated page."""
    return InMemoryNavigator(OCCUPATION_VIEW_ROUTE)


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real HTTP client for respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def gateway(
    http_client: httpx.AsyncClient,
    credential_store: InMemoryCredentialStore,
    navigator: InMemoryNavigator,
) -> ApiGateway:
    return ApiGateway(http_client, credential_store, navigator, base_url=BASE_URL)


@pytest.fixture
def occupations() -> list[Occupation]:
    return [
        Occupation(occ_code="1", occ_name="Kỹ sư phần mềm", description="Phát triển phần mềm"),
        Occupation(occ_code="2", occ_name="Bác sĩ", description="Khám chữa bệnh"),
        Occupation(occ_code="3", occ_name="Giáo viên", description=None),
        Occupation(occ_code="4", occ_name="Kế toán", description="Quản lý sổ sách"),
        Occupation(occ_code="5", occ_name="Luật sư", description="Tư vấn pháp lý"),
    ]
