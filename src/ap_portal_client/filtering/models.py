"""Filter metadata and condition models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ap_portal_client.enums import FilterOperator, FilterValueType


class FilterColumn(BaseModel):
    """A filterable field as declared by the server's filter metadata.

    Read-only to the engine. ``operators`` keeps the server's order; the first
    entry is the one a new condition starts with.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field: str
    label: str
    value_type: FilterValueType = Field(alias="type")
    operators: tuple[str, ...] = ()
    values_endpoint: str | None = Field(default=None, alias="valuesEndpoint")


class FilterCondition(BaseModel):
    """An active filter condition.

    Membership (``IN``) conditions carry ``options`` and ``selected_values``;
    free-text (``CONTAINS``) conditions carry ``text_value``.
    """

    field: str
    label: str
    value_type: FilterValueType
    operator: str
    selected_values: list[str] | None = None
    text_value: str | None = None
    options: list[str] | None = None

    @property
    def is_membership(self) -> bool:
        return self.operator == FilterOperator.IN.value

    @property
    def is_free_text(self) -> bool:
        return self.operator == FilterOperator.CONTAINS.value
