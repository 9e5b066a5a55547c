"""Pure predicate evaluation over row snapshots.

Nothing here mutates its inputs. Filtering returns a new list that keeps the
original relative order of the rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ap_portal_client.filtering.models import FilterCondition

SELECT_ALL_SENTINEL = "__SELECT_ALL__"

# Server-side field names of the occupation filter metadata, mapped to the
# attributes of ``Occupation`` rows.
OCCUPATION_FIELD_ALIASES: Mapping[str, str] = {
    "id": "occ_code",
    "name": "occ_name",
    "description": "description",
}

EMPLOYEE_SEARCH_FIELDS: tuple[str, ...] = (
    "full_name",
    "emp_id",
    "email",
    "phone",
    "occupation.occ_name",
    "organization.org_label",
    "branch.branch_name",
)


def get_field_value(row: Any, field: str) -> Any:
    """Read ``field`` from a mapping or attribute-style row.

    Dotted paths walk nested records. A missing segment yields None.
    """
    value = row
    for part in field.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def effective_selection(condition: FilterCondition) -> list[str]:
    return [v for v in condition.selected_values or [] if v != SELECT_ALL_SENTINEL]


def evaluate_condition(row: Any, condition: FilterCondition, *, field: str | None = None) -> bool:
    """Evaluate one condition against one row.

    Args:
        row: Row to test
        condition: Active filter condition
        field: Row attribute to read; defaults to ``condition.field``
    """
    value = get_field_value(row, field or condition.field)

    if condition.is_membership:
        selected = effective_selection(condition)
        if not selected:
            return True
        return value is not None and str(value) in selected

    if condition.is_free_text:
        text = condition.text_value or ""
        if not text.strip():
            return True
        if value is None:
            return False
        return text.lower() in str(value).lower()

    return True


def apply_conditions(
    rows: Iterable[Any],
    conditions: Sequence[FilterCondition],
    *,
    field_aliases: Mapping[str, str] | None = None,
) -> list[Any]:
    """Return the rows satisfying every condition (logical AND)."""
    if not conditions:
        return list(rows)

    aliases = field_aliases or {}
    return [
        row
        for row in rows
        if all(
            evaluate_condition(row, condition, field=aliases.get(condition.field))
            for condition in conditions
        )
    ]


def matches_query(row: Any, query: str, fields: Sequence[str]) -> bool:
    if not query:
        return True
    needle = query.lower()
    for field in fields:
        value = get_field_value(row, field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def search(
    rows: Iterable[Any], query: str, fields: Sequence[str] = EMPLOYEE_SEARCH_FIELDS
) -> list[Any]:
    """Global free-text search, independent of the structured filters."""
    return [row for row in rows if matches_query(row, query, fields)]
