"""Schema definition models.

Schemas are data: immutable pydantic models built once at import time.
Structural invariants (unique section ids, unique field keys across the
whole schema) are checked on construction so a broken definition fails
the import instead of a request.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lexintake.exceptions import SchemaDefinitionError
from lexintake.schema.enums import FieldType

Requiredness = bool | Literal["depends"]


class FieldDef(BaseModel):
    """Single question in a schema section."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Payload key, unique within the schema")
    type: FieldType = Field(..., description="Declared value shape")
    required: Requiredness = Field(
        default=False,
        description='True, False, or "depends" (required only while revealed)',
    )
    is_system: bool = Field(default=False, description="Set by the platform, never asked")
    enum_values: tuple[str, ...] | None = Field(default=None, description="Allowed enum values")
    notes: str | None = Field(default=None, description="Authoring notes")


class SectionDef(BaseModel):
    """Ordered group of fields; one schema step."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Section id, used as the schema step key")
    title: str = Field(..., description="Display title")
    fields: tuple[FieldDef, ...] = Field(default=(), description="Ordered fields")
    repeatable: bool = Field(
        default=False,
        description="Fields hold parallel arrays, one element per entity",
    )

    def field(self, key: str) -> FieldDef | None:
        """Return the field with the given key, if declared here."""
        for entry in self.fields:
            if entry.key == key:
                return entry
        return None


class SchemaDef(BaseModel):
    """Versioned, immutable intake schema for one mode."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Schema version label")
    sections: tuple[SectionDef, ...] = Field(..., min_length=1, description="Ordered sections")

    @model_validator(mode="after")
    def _check_unique_keys(self) -> "SchemaDef":
        section_ids: set[str] = set()
        field_keys: dict[str, str] = {}
        for section in self.sections:
            if section.id in section_ids:
                raise SchemaDefinitionError(f"Duplicate section id: {section.id}")
            section_ids.add(section.id)
            for field in section.fields:
                if field.key in field_keys:
                    raise SchemaDefinitionError(
                        f"Field {field.key!r} declared in both "
                        f"{field_keys[field.key]!r} and {section.id!r}"
                    )
                field_keys[field.key] = section.id
        return self

    @property
    def section_ids(self) -> list[str]:
        return [section.id for section in self.sections]

    def section(self, section_id: str) -> SectionDef | None:
        """Return the section with the given id, or None."""
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def field_index(self) -> dict[str, FieldDef]:
        """Map every field key to its definition."""
        return {field.key: field for section in self.sections for field in section.fields}

    def section_for_field(self, key: str) -> SectionDef | None:
        """Return the section declaring `key`, or None."""
        for section in self.sections:
            if section.field(key) is not None:
                return section
        return None


def text(key: str, required: Requiredness = False, **kwargs: Any) -> FieldDef:
    return FieldDef(key=key, type=FieldType.TEXT, required=required, **kwargs)


def number(key: str, required: Requiredness = False, **kwargs: Any) -> FieldDef:
    return FieldDef(key=key, type=FieldType.NUMBER, required=required, **kwargs)


def date(key: str, required: Requiredness = False, **kwargs: Any) -> FieldDef:
    return FieldDef(key=key, type=FieldType.DATE, required=required, **kwargs)


def boolean(key: str, required: Requiredness = False, **kwargs: Any) -> FieldDef:
    return FieldDef(key=key, type=FieldType.BOOLEAN, required=required, **kwargs)


def enum(
    key: str,
    values: tuple[str, ...] | None = None,
    required: Requiredness = False,
    **kwargs: Any,
) -> FieldDef:
    return FieldDef(
        key=key, type=FieldType.ENUM, required=required, enum_values=values, **kwargs
    )


def multiselect(
    key: str,
    values: tuple[str, ...],
    required: Requiredness = False,
    **kwargs: Any,
) -> FieldDef:
    return FieldDef(
        key=key, type=FieldType.MULTISELECT, required=required, enum_values=values, **kwargs
    )


def structured(key: str, required: Requiredness = False, **kwargs: Any) -> FieldDef:
    return FieldDef(key=key, type=FieldType.STRUCTURED, required=required, **kwargs)


def listing(key: str, required: Requiredness = False, **kwargs: Any) -> FieldDef:
    return FieldDef(key=key, type=FieldType.LIST, required=required, **kwargs)
