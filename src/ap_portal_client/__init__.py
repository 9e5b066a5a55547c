"""Async client for the An Phuc personnel portal API.

Exposes the HTTP gateway, the credential store, the metadata-driven filter
engine and the domain services built on top of them.
"""

from ap_portal_client.catalog import OccupationCatalog
from ap_portal_client.config import PortalClientSettings, settings
from ap_portal_client.credential_store import InMemoryCredentialStore, JsonFileCredentialStore
from ap_portal_client.enums import ErrorCategory, FilterOperator, FilterValueType
from ap_portal_client.filtering import FilterColumn, FilterCondition, FilterEngine, search
from ap_portal_client.gateway import ApiGateway, ApiGatewayError, NormalizedError, RequestSpec
from ap_portal_client.navigation import InMemoryNavigator
from ap_portal_client.services import AuthService, OccupationService

__all__ = [
    "ApiGateway",
    "ApiGatewayError",
    "AuthService",
    "ErrorCategory",
    "FilterColumn",
    "FilterCondition",
    "FilterEngine",
    "FilterOperator",
    "FilterValueType",
    "InMemoryCredentialStore",
    "InMemoryNavigator",
    "JsonFileCredentialStore",
    "NormalizedError",
    "OccupationCatalog",
    "OccupationService",
    "PortalClientSettings",
    "RequestSpec",
    "search",
    "settings",
]
