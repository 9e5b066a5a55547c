"""Dynamic filter engine driven by server-declared column metadata."""

from ap_portal_client.filtering.engine import FilterEngine, parse_option_values
from ap_portal_client.filtering.models import FilterColumn, FilterCondition
from ap_portal_client.filtering.predicates import (
    EMPLOYEE_SEARCH_FIELDS,
    OCCUPATION_FIELD_ALIASES,
    SELECT_ALL_SENTINEL,
    apply_conditions,
    evaluate_condition,
    get_field_value,
    search,
)

__all__ = [
    "EMPLOYEE_SEARCH_FIELDS",
    "OCCUPATION_FIELD_ALIASES",
    "SELECT_ALL_SENTINEL",
    "FilterColumn",
    "FilterCondition",
    "FilterEngine",
    "apply_conditions",
    "evaluate_condition",
    "get_field_value",
    "parse_option_values",
    "search",
]
