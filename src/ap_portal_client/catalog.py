"""Occupation catalog view-model.

Composes the occupation service and the filter engine into the state a list
screen needs: the loaded rows, the filtered projection, the row selection and
the dialog requests for row actions.
"""

from __future__ import annotations

from ap_portal_client.dialogs import (
    AddOccupationDialog,
    ConfirmDeleteDialog,
    DialogRequest,
    EditOccupationDialog,
    NoSelectionDialog,
    SelectionLimitDialog,
)
from ap_portal_client.filtering.engine import FilterEngine
from ap_portal_client.gateway.errors import ApiGatewayError, NormalizedError
from ap_portal_client.logging_utils import create_client_logger
from ap_portal_client.models.occupation import Occupation
from ap_portal_client.services.occupation_service import OccupationService

logger = create_client_logger("occupation_catalog")


class OccupationCatalog:
    """State holder for the occupation list screen.

    Failed calls are recorded in ``last_error`` for the display layer instead
    of being raised; a redirect on 401 has already happened in the gateway by
    then.
    """

    def __init__(self, service: OccupationService, engine: FilterEngine) -> None:
        self._service = service
        self._engine = engine
        self._rows: list[Occupation] = []
        self._visible: list[Occupation] = []
        self._selected: set[str] = set()
        self.last_error: NormalizedError | None = None
        self.is_loading = False

    @property
    def engine(self) -> FilterEngine:
        return self._engine

    @property
    def rows(self) -> list[Occupation]:
        return list(self._rows)

    @property
    def visible_rows(self) -> list[Occupation]:
        return list(self._visible)

    @property
    def selected_codes(self) -> set[str]:
        return set(self._selected)

    async def load(self) -> bool:
        self.is_loading = True
        self.last_error = None
        try:
            self._rows = await self._service.list_occupations()
        except ApiGatewayError as e:
            self.last_error = e.error
            logger.warning("Failed to load occupations", status_code=e.status_code)
            return False
        finally:
            self.is_loading = False

        self._visible = list(self._rows)
        return True

    async def load_filter_metadata(self) -> bool:
        try:
            columns = await self._service.get_filter_metadata()
        except ApiGatewayError as e:
            logger.warning("Failed to load filter metadata", status_code=e.status_code)
            return False
        self._engine.load_columns(columns)
        return True

    def apply_filters(self) -> list[Occupation]:
        self._visible = self._engine.apply_filters(self._rows)
        return self.visible_rows

    # Selection

    def is_selected(self, occupation: Occupation) -> bool:
        return occupation.occ_code in self._selected

    def select(self, occupation: Occupation, checked: bool) -> None:
        if checked:
            self._selected.add(occupation.occ_code)
        else:
            self._selected.discard(occupation.occ_code)

    def select_all(self, checked: bool) -> None:
        if checked:
            self._selected.update(o.occ_code for o in self._visible)
        else:
            self._selected.clear()

    def is_all_selected(self) -> bool:
        if not self._visible:
            return False
        return all(o.occ_code in self._selected for o in self._visible)

    def is_some_selected(self) -> bool:
        if not self._visible:
            return False
        count = sum(1 for o in self._visible if o.occ_code in self._selected)
        return 0 < count < len(self._visible)

    def selected_rows(self) -> list[Occupation]:
        """Selected rows in catalog order, e.g. for export."""
        return [o for o in self._rows if o.occ_code in self._selected]

    # Row actions

    def request_export(self) -> DialogRequest | None:
        if not self._selected:
            return NoSelectionDialog(action="export")
        return None

    def request_view_history(self) -> DialogRequest | None:
        if not self._selected:
            return NoSelectionDialog(action="view_history")
        return None

    def request_add(self) -> DialogRequest:
        return AddOccupationDialog()

    def request_edit(self, occupation: Occupation) -> DialogRequest:
        if len(self._selected) > 1:
            return SelectionLimitDialog(action="edit", selected_count=len(self._selected))
        return EditOccupationDialog(occupation=occupation)

    def request_delete(self, occupation: Occupation) -> DialogRequest:
        if len(self._selected) > 1:
            return SelectionLimitDialog(action="delete", selected_count=len(self._selected))
        return ConfirmDeleteDialog(
            occupation_code=occupation.occ_code,
            occupation_name=occupation.occ_name,
        )

    def replace_row(self, updated: Occupation) -> None:
        """Swap in an edited row, keeping its position."""
        self._rows = [updated if o.occ_code == updated.occ_code else o for o in self._rows]
        self._visible = [updated if o.occ_code == updated.occ_code else o for o in self._visible]

    async def confirm_delete(self, occupation_code: str) -> bool:
        self.is_loading = True
        self.last_error = None
        try:
            await self._service.delete(occupation_code)
        except ApiGatewayError as e:
            self.last_error = e.error
            logger.warning(
                "Failed to delete occupation",
                occupation_code=occupation_code,
                status_code=e.status_code,
            )
            return False
        finally:
            self.is_loading = False

        self._selected.discard(occupation_code)
        self._rows = [o for o in self._rows if o.occ_code != occupation_code]
        self._visible = [o for o in self._visible if o.occ_code != occupation_code]
        return True
