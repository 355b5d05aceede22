"""Schema registry: mode string -> immutable schema definition."""

from types import MappingProxyType
from typing import Any

from lexintake.exceptions import UnknownModeError
from lexintake.schema.definitions import (
    custody_unmarried,
    divorce_no_children,
    divorce_with_children,
)
from lexintake.schema.enums import IntakeMode
from lexintake.schema.models import FieldDef, SchemaDef, SectionDef
from lexintake.schema.reveals import RevealTable

_SCHEMAS = MappingProxyType(
    {
        IntakeMode.CUSTODY_UNMARRIED: custody_unmarried.SCHEMA,
        IntakeMode.DIVORCE_NO_CHILDREN: divorce_no_children.SCHEMA,
        IntakeMode.DIVORCE_WITH_CHILDREN: divorce_with_children.SCHEMA,
    }
)

_REVEALS = MappingProxyType(
    {
        IntakeMode.CUSTODY_UNMARRIED: custody_unmarried.FIELD_REVEALS,
        IntakeMode.DIVORCE_NO_CHILDREN: divorce_no_children.FIELD_REVEALS,
        IntakeMode.DIVORCE_WITH_CHILDREN: divorce_with_children.FIELD_REVEALS,
    }
)


def is_valid_intake_type(value: Any) -> bool:
    """Return True if `value` names a supported intake mode."""
    if isinstance(value, IntakeMode):
        return True
    if not isinstance(value, str):
        return False
    return value in IntakeMode._value2member_map_


def resolve_mode(mode: IntakeMode | str) -> IntakeMode:
    """Coerce a mode string to `IntakeMode`.

    Raises:
        UnknownModeError: If the string is not a supported mode
    """
    if not is_valid_intake_type(mode):
        raise UnknownModeError(mode)
    return IntakeMode(mode)


def list_intake_types() -> list[str]:
    return [mode.value for mode in IntakeMode]


def get_schema(mode: IntakeMode | str) -> SchemaDef:
    """Return the schema for a mode.

    Raises:
        UnknownModeError: If the mode is not supported
    """
    return _SCHEMAS[resolve_mode(mode)]


def get_reveals(mode: IntakeMode | str) -> RevealTable:
    """Return the reveal table shared by the evaluator and prompt generator."""
    return _REVEALS[resolve_mode(mode)]


def get_section(schema: SchemaDef, section_id: str) -> SectionDef | None:
    return schema.section(section_id)


def field_index(schema: SchemaDef) -> dict[str, FieldDef]:
    return schema.field_index()


def section_for_field(schema: SchemaDef, key: str) -> SectionDef | None:
    return schema.section_for_field(key)
