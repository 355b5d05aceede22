"""Enums for the intake schema domain."""

from enum import Enum


class IntakeMode(str, Enum):
    """Legal-matter mode of an intake.

    This enum is the only place the legal mode strings are listed.
    Callers validate external strings with `is_valid_intake_type`.
    """

    CUSTODY_UNMARRIED = "custody_unmarried"
    DIVORCE_NO_CHILDREN = "divorce_no_children"
    DIVORCE_WITH_CHILDREN = "divorce_with_children"


class FieldType(str, Enum):
    """Declared shape of a schema field value."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    ENUM = "enum"
    MULTISELECT = "multiselect"
    STRUCTURED = "structured"
    LIST = "list"
