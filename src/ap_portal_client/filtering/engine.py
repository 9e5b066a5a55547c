"""Metadata-driven filter engine.

The engine holds the server-declared filter columns and the list of active
conditions. At most one condition is active: adding a condition replaces the
whole list. Degraded metadata or option lookups never raise; they produce an
empty-but-present condition or no change at all.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ap_portal_client.enums import FilterOperator
from ap_portal_client.filtering.models import FilterColumn, FilterCondition
from ap_portal_client.filtering.predicates import (
    EMPLOYEE_SEARCH_FIELDS,
    SELECT_ALL_SENTINEL,
    apply_conditions,
    effective_selection,
)
from ap_portal_client.filtering.predicates import search as search_rows
from ap_portal_client.gateway.errors import ApiGatewayError
from ap_portal_client.logging_utils import create_client_logger
from ap_portal_client.protocols import ApiGatewayProtocol

logger = create_client_logger("filter_engine")


def parse_option_values(response: Any) -> list[str]:
    """Extract the option list from a values endpoint response (``{"data": [...]}``)."""
    data = response.get("data") if isinstance(response, Mapping) else response
    if not isinstance(data, list):
        return []
    return [str(value) for value in data if value is not None]


class FilterEngine:
    """Compiles active filter conditions into a row predicate."""

    def __init__(
        self,
        columns: Iterable[FilterColumn] = (),
        *,
        gateway: ApiGatewayProtocol | None = None,
        fallback_options: Mapping[str, Sequence[str]] | None = None,
        field_aliases: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            columns: Declared filter columns
            gateway: Used to fetch membership options from ``values_endpoint``
            fallback_options: Local option sets for columns without an endpoint
            field_aliases: Maps column field names onto row attributes
        """
        self._columns: list[FilterColumn] = list(columns)
        self._gateway = gateway
        self._fallback_options = dict(fallback_options or {})
        self._field_aliases = dict(field_aliases or {})
        self._conditions: list[FilterCondition] = []
        # Bumped on every list replacement so a slow option fetch cannot
        # overwrite a condition added after it started.
        self._generation = 0

    @property
    def columns(self) -> list[FilterColumn]:
        return list(self._columns)

    @property
    def conditions(self) -> list[FilterCondition]:
        return list(self._conditions)

    def load_columns(self, columns: Iterable[FilterColumn]) -> None:
        self._columns = list(columns)

    def find_column(self, field: str) -> FilterColumn | None:
        return next((c for c in self._columns if c.field == field), None)

    async def add_condition(self, field: str) -> FilterCondition | None:
        """Replace the condition list with a new condition on ``field``.

        Returns the new condition, or None when nothing was added.
        """
        column = self.find_column(field)
        if column is None:
            logger.debug("Ignoring condition for undeclared field", field=field)
            return None
        if not column.operators:
            logger.warning("Filter column declares no operators", field=field)
            return None

        operator = column.operators[0]
        if operator == FilterOperator.IN.value:
            # The previous condition stops filtering while options load.
            self._conditions = []
            self._generation += 1
            generation = self._generation
            options = await self._resolve_options(column)
            if generation != self._generation:
                logger.debug("Discarding superseded condition", field=field)
                return None
            condition = FilterCondition(
                field=column.field,
                label=column.label,
                value_type=column.value_type,
                operator=operator,
                selected_values=[],
                options=options,
            )
        elif operator == FilterOperator.CONTAINS.value:
            condition = FilterCondition(
                field=column.field,
                label=column.label,
                value_type=column.value_type,
                operator=operator,
                text_value="",
            )
        else:
            logger.warning("Unsupported filter operator", field=field, operator=operator)
            return None

        self._generation += 1
        self._conditions = [condition]
        return condition

    def remove_condition(self, index: int) -> None:
        if 0 <= index < len(self._conditions):
            del self._conditions[index]
            self._generation += 1

    def clear(self) -> None:
        self._conditions = []
        self._generation += 1

    def set_selected_values(self, index: int, values: Iterable[str]) -> None:
        """Set the selection of the membership condition at ``index``."""
        if not 0 <= index < len(self._conditions):
            return
        condition = self._conditions[index]
        if condition.is_membership:
            condition.selected_values = list(values)

    def set_text_value(self, index: int, text: str) -> None:
        """Set the text of the free-text condition at ``index``."""
        if not 0 <= index < len(self._conditions):
            return
        condition = self._conditions[index]
        if condition.is_free_text:
            condition.text_value = text

    @staticmethod
    def toggle_select_all(condition: FilterCondition) -> None:
        """Select every option, or clear the selection if all are selected."""
        if not condition.options or condition.selected_values is None:
            return
        selected = effective_selection(condition)
        if all(option in selected for option in condition.options):
            condition.selected_values = []
        else:
            condition.selected_values = [o for o in condition.options if o != SELECT_ALL_SENTINEL]

    def apply_filters(self, rows: Iterable[Any]) -> list[Any]:
        """Return the rows passing every active condition, in input order."""
        return apply_conditions(rows, self._conditions, field_aliases=self._field_aliases)

    @staticmethod
    def search(
        rows: Iterable[Any], query: str, fields: Sequence[str] = EMPLOYEE_SEARCH_FIELDS
    ) -> list[Any]:
        return search_rows(rows, query, fields)

    async def _resolve_options(self, column: FilterColumn) -> list[str]:
        if not column.values_endpoint:
            return list(self._fallback_options.get(column.field, ()))
        if self._gateway is None:
            logger.warning("No gateway configured for option lookup", field=column.field)
            return []

        try:
            response = await self._gateway.get(column.values_endpoint)
        except ApiGatewayError as e:
            logger.warning(
                "Failed to fetch filter values, continuing without options",
                field=column.field,
                endpoint=column.values_endpoint,
                status_code=e.status_code,
            )
            return []
        return parse_option_values(response)
