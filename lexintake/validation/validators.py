"""Stateless field validators and the type-dispatched presence check.

Validators take the raw (unwrapped) value and return a `ValidationOutcome`;
they never raise on odd input. The orchestrator only calls them for values
that already pass `has_value`.
"""

import math
import re
from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lexintake.observability.logging import get_logger
from lexintake.payload.assertions import unwrap
from lexintake.schema.enums import FieldType
from lexintake.schema.models import SchemaDef

logger = get_logger(__name__)

ZIP_PATTERN = re.compile(r"^[0-9]{5}$|^[0-9]{5}-[0-9]{4}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-().]+$", re.ASCII)
MIN_PHONE_DIGITS = 10

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)


class ValidationOutcome(BaseModel):
    """Result of a single validator call."""

    model_config = ConfigDict(frozen=True)

    valid: bool = Field(..., description="Whether the value passed")
    message: str | None = Field(default=None, description="Client-facing reason when invalid")


Validator = Callable[[Any], ValidationOutcome]

VALID = ValidationOutcome(valid=True)


def _invalid(message: str) -> ValidationOutcome:
    return ValidationOutcome(valid=False, message=message)


def validate_zip(value: Any) -> ValidationOutcome:
    if not isinstance(value, str) or not ZIP_PATTERN.match(value.strip()):
        return _invalid("ZIP code must be 5 digits (or ZIP+4).")
    return VALID


def validate_email(value: Any) -> ValidationOutcome:
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value.strip()):
        return _invalid("Please enter a valid email address.")
    return VALID


def validate_phone(value: Any) -> ValidationOutcome:
    """Digits with optional + - ( ) . and space separators, at least 10 digits."""
    if not isinstance(value, str) or not PHONE_PATTERN.match(value.strip()):
        return _invalid("Please enter a valid phone number.")
    if len(re.sub(r"[^0-9]", "", value)) < MIN_PHONE_DIGITS:
        return _invalid("Phone number must have at least 10 digits.")
    return VALID


def validate_address(value: Any) -> ValidationOutcome:
    """Validate a structured address.

    Requires street (or line1), city, state and zip. Failures are reported
    for the address as a whole; callers attach them to the parent field key.
    """
    address = unwrap(value)
    if not isinstance(address, Mapping):
        return _invalid("Address must include street, city, state and ZIP code.")

    street = address.get("street") or address.get("line1")
    parts = {
        "street": street,
        "city": address.get("city"),
        "state": address.get("state"),
        "zip": address.get("zip"),
    }
    missing = [name for name, part in parts.items() if not _has_text(part)]
    if missing:
        return _invalid(f"Address is missing: {', '.join(missing)}.")

    zip_outcome = validate_zip(parts["zip"])
    if not zip_outcome.valid:
        return zip_outcome
    return VALID


def validate_date(value: Any) -> ValidationOutcome:
    """Validate an ISO 8601 date or datetime string."""
    if isinstance(value, (date, datetime)):
        return VALID
    if not isinstance(value, str):
        return _invalid("Please enter a date like 2024-01-15.")

    text = value.strip()
    for fmt in DATE_FORMATS:
        try:
            datetime.strptime(text, fmt)
            return VALID
        except ValueError:
            continue
    return _invalid("Please enter a date like 2024-01-15.")


def validate_positive_count(value: Any) -> ValidationOutcome:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return _invalid("Please enter a whole number of 1 or more.")
    if isinstance(value, float) and (math.isnan(value) or not value.is_integer()):
        return _invalid("Please enter a whole number of 1 or more.")
    if value < 1:
        return _invalid("Please enter a whole number of 1 or more.")
    return VALID


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def has_value(value: Any, field_type: FieldType | str) -> bool:
    """Type-dispatched presence check on an unwrapped value."""
    field_type = FieldType(field_type)

    if field_type == FieldType.BOOLEAN:
        return value is True or value is False
    if field_type == FieldType.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return not (isinstance(value, float) and math.isnan(value))
    if field_type in (FieldType.MULTISELECT, FieldType.LIST):
        return isinstance(value, list) and len(value) > 0
    if field_type == FieldType.STRUCTURED:
        return isinstance(value, Mapping)
    # text, date, enum
    return _has_text(value)


def validate_enum_membership(
    schema: SchemaDef, payload: Mapping[str, Any]
) -> dict[str, list[str]]:
    """Report enum and multiselect values outside the declared options.

    Returns a mapping of section id to offending field keys. Fields with no
    declared options (county pickers) and absent values are skipped.
    """
    problems: dict[str, list[str]] = {}
    for section in schema.sections:
        for field in section.fields:
            if not field.enum_values or field.key not in payload:
                continue
            value = unwrap(payload[field.key])
            if field.type == FieldType.ENUM:
                values = value if section.repeatable and isinstance(value, list) else [value]
            elif field.type == FieldType.MULTISELECT:
                values = value if isinstance(value, list) else [value]
            else:
                continue
            if any(
                item not in (None, "") and item not in field.enum_values
                for item in (unwrap(entry) for entry in values)
            ):
                problems.setdefault(section.id, []).append(field.key)

    if problems:
        logger.debug(
            "enum_membership_violations",
            sections=sorted(problems),
            field_count=sum(len(keys) for keys in problems.values()),
        )
    return problems


def format_label(key: str) -> str:
    """Turn a field key into a display label: `client_dob` -> `Client Dob`."""
    return " ".join(part[:1].upper() + part[1:] for part in key.split("_"))
