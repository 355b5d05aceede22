"""Advisory cross-field consistency checks.

Warnings are shown to the client and the reviewing attorney; they never
change step status or block submission.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from lexintake.payload.assertions import unwrap
from lexintake.schema.definitions.common import ASSET_DETAIL_FIELDS, DEBT_DETAIL_FIELDS

CHILD_ENTRY_FIELDS: tuple[str, ...] = (
    "child_full_name",
    "child_dob",
    "child_current_residence",
    "biological_relation",
)

REPEATABLE_GROUPS: dict[str, tuple[str, ...]] = {
    "child_object": CHILD_ENTRY_FIELDS,
    "asset_object": ASSET_DETAIL_FIELDS,
    "debt_object": DEBT_DETAIL_FIELDS,
}


class ConsistencyWarning(BaseModel):
    """A contradiction between answers, with the field paths involved."""

    key: str = Field(..., description="Stable warning identifier")
    message: str = Field(..., description="Client-facing explanation")
    paths: list[str] = Field(default_factory=list, description="Field keys involved")


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    if value is None or value == "":
        return []
    return [value]


def run_consistency_checks(payload: Mapping[str, Any]) -> list[ConsistencyWarning]:
    """Return every consistency warning for a payload."""
    values = {key: unwrap(value) for key, value in payload.items()}
    warnings: list[ConsistencyWarning] = []

    if values.get("currently_cohabitating") is True and _text(values.get("date_of_separation")):
        warnings.append(
            ConsistencyWarning(
                key="cohabitating_with_separation",
                message="Currently cohabitating is marked Yes, but a separation date is provided.",
                paths=["currently_cohabitating", "date_of_separation"],
            )
        )

    has_children_entries = any(_as_list(values.get(key)) for key in CHILD_ENTRY_FIELDS)
    if _text(values.get("custody_type_requested")) and not has_children_entries:
        warnings.append(
            ConsistencyWarning(
                key="custody_without_children",
                message="Custody type is selected, but no child entries are listed.",
                paths=["custody_type_requested", "child_full_name"],
            )
        )

    allegations = [item for item in _as_list(values.get("fault_allegations")) if _text(item)]
    if allegations and values.get("uploaded") is not True:
        warnings.append(
            ConsistencyWarning(
                key="fault_allegations_without_uploads",
                message="Fault allegations are listed, but documents are marked as not uploaded.",
                paths=["fault_allegations", "uploaded"],
            )
        )

    if values.get("dv_present") is False and values.get("protective_order_exists") is True:
        warnings.append(
            ConsistencyWarning(
                key="protective_order_without_dv",
                message="Protective order is marked Yes, but domestic violence is marked No.",
                paths=["dv_present", "protective_order_exists"],
            )
        )

    for group, keys in REPEATABLE_GROUPS.items():
        lengths = {
            key: len(values[key]) for key in keys if isinstance(values.get(key), list)
        }
        if len(set(lengths.values())) > 1:
            warnings.append(
                ConsistencyWarning(
                    key=f"{group}_length_mismatch",
                    message="Some entries are only partly filled in.",
                    paths=sorted(lengths),
                )
            )

    return warnings
