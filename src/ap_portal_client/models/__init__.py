"""Data models exchanged with the portal API."""

from ap_portal_client.models.auth import FirstLoginValidation, LoginResult, Session
from ap_portal_client.models.employee import Branch, Employee, Organization
from ap_portal_client.models.occupation import Occupation, OccupationRequest

__all__ = [
    "Branch",
    "Employee",
    "FirstLoginValidation",
    "LoginResult",
    "Occupation",
    "OccupationRequest",
    "Organization",
    "Session",
]
