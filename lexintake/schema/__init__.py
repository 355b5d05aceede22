"""Intake schema definitions and registry."""

from lexintake.schema.enums import FieldType, IntakeMode
from lexintake.schema.models import FieldDef, Requiredness, SchemaDef, SectionDef
from lexintake.schema.registry import (
    field_index,
    get_reveals,
    get_schema,
    get_section,
    is_valid_intake_type,
    list_intake_types,
    resolve_mode,
    section_for_field,
)
from lexintake.schema.reveals import (
    RevealRule,
    RevealTable,
    build_reveal_index,
    rules_for_controlling_field,
    validate_reveal_table,
)

__all__ = [
    "FieldDef",
    "FieldType",
    "IntakeMode",
    "Requiredness",
    "RevealRule",
    "RevealTable",
    "SchemaDef",
    "SectionDef",
    "build_reveal_index",
    "field_index",
    "get_reveals",
    "get_schema",
    "get_section",
    "is_valid_intake_type",
    "list_intake_types",
    "resolve_mode",
    "rules_for_controlling_field",
    "section_for_field",
    "validate_reveal_table",
]
