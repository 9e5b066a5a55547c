"""Occupation endpoints of the portal API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ap_portal_client.filtering.engine import parse_option_values
from ap_portal_client.filtering.models import FilterColumn
from ap_portal_client.logging_utils import create_client_logger
from ap_portal_client.models.occupation import Occupation, OccupationRequest
from ap_portal_client.protocols import ApiGatewayProtocol
from ap_portal_client.services._utils import unwrap_data

logger = create_client_logger("occupation_service")


class OccupationService:
    """CRUD and filter metadata for occupations.

    All methods raise ``ApiGatewayError`` unchanged on failure.
    """

    def __init__(self, gateway: ApiGatewayProtocol) -> None:
        self._gateway = gateway

    async def list_occupations(self) -> list[Occupation]:
        response = await self._gateway.get("/occupations/list")
        items = response.get("data") if isinstance(response, dict) else None
        return [Occupation.from_api(item) for item in items or []]

    async def create(self, payload: OccupationRequest) -> Occupation:
        response = await self._gateway.post("/occupations", payload.model_dump(exclude_none=True))
        return Occupation.from_api(_data_object(response))

    async def update(self, occupation_id: str, payload: OccupationRequest) -> Occupation:
        response = await self._gateway.put(
            f"/occupations/{occupation_id}", payload.model_dump(exclude_none=True)
        )
        return Occupation.from_api(_data_object(response), fallback_code=occupation_id)

    async def delete(self, occupation_id: str) -> Any:
        return await self._gateway.delete(f"/occupations/{occupation_id}")

    async def get_filter_metadata(self) -> list[FilterColumn]:
        """Fetch the filterable columns.

        Entries the client cannot parse are skipped.
        """
        response = await self._gateway.get("/occupations/filter-metadata")
        items = unwrap_data(response)
        if not isinstance(items, list):
            return []

        columns: list[FilterColumn] = []
        for item in items:
            try:
                columns.append(FilterColumn.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping unparseable filter column", item=item, error=str(e))
        return columns

    async def get_filter_values(self, endpoint: str) -> list[str]:
        return parse_option_values(await self._gateway.get(endpoint))


def _data_object(response: Any) -> dict[str, Any]:
    data = response.get("data") if isinstance(response, dict) else None
    return data if isinstance(data, dict) else {}
