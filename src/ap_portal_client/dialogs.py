"""Dialog requests emitted by view-models.

The core never opens dialogs. It returns a tagged ``DialogRequest`` and the
presentation layer decides how to render it, using ``kind`` as the tag.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ap_portal_client.models.occupation import Occupation

SelectionAction = Literal["export", "view_history", "edit", "delete"]


class NoSelectionDialog(BaseModel):
    """The action needs at least one selected row."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["no_selection"] = "no_selection"
    action: SelectionAction


class SelectionLimitDialog(BaseModel):
    """The action works on one row but several are selected."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["selection_limit"] = "selection_limit"
    action: SelectionAction
    selected_count: int


class ConfirmDeleteDialog(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["confirm_delete"] = "confirm_delete"
    occupation_code: str
    occupation_name: str


class EditOccupationDialog(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["edit_occupation"] = "edit_occupation"
    occupation: Occupation


class AddOccupationDialog(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["add_occupation"] = "add_occupation"


DialogRequest = Annotated[
    Union[
        NoSelectionDialog,
        SelectionLimitDialog,
        ConfirmDeleteDialog,
        EditOccupationDialog,
        AddOccupationDialog,
    ],
    Field(discriminator="kind"),
]
