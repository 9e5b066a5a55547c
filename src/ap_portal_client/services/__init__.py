"""Domain services built on the HTTP gateway."""

from ap_portal_client.services.auth_service import AuthService
from ap_portal_client.services.occupation_service import OccupationService

__all__ = ["AuthService", "OccupationService"]
