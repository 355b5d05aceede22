"""Field validators and the completeness evaluator."""

from lexintake.validation.completeness import (
    expected_entry_count,
    is_field_required,
    missing_fields_for_section,
    should_show_field,
    to_list,
)
from lexintake.validation.validators import (
    ValidationOutcome,
    Validator,
    format_label,
    has_value,
    validate_address,
    validate_date,
    validate_email,
    validate_enum_membership,
    validate_phone,
    validate_positive_count,
    validate_zip,
)

__all__ = [
    "ValidationOutcome",
    "Validator",
    "expected_entry_count",
    "format_label",
    "has_value",
    "is_field_required",
    "missing_fields_for_section",
    "should_show_field",
    "to_list",
    "validate_address",
    "validate_date",
    "validate_email",
    "validate_enum_membership",
    "validate_phone",
    "validate_positive_count",
    "validate_zip",
]
