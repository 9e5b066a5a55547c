"""Shared helpers for portal API responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def unwrap_data(response: Any) -> Any:
    """Return ``response["data"]`` when present, else the response itself."""
    if isinstance(response, Mapping) and response.get("data") is not None:
        return response["data"]
    return response
