"""Completeness evaluation: which required fields of a section are missing."""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from lexintake.payload.assertions import unwrap
from lexintake.schema.models import FieldDef, Requiredness, SchemaDef, SectionDef
from lexintake.schema.reveals import RevealRule
from lexintake.validation.validators import has_value


def is_field_required(required: Requiredness, is_system: bool = False) -> bool:
    """System fields are never required of the client.

    A "depends" field counts as required here; `should_show_field` decides
    whether it is currently in play.
    """
    if is_system:
        return False
    return required is True or required == "depends"


def should_show_field(
    field_key: str, payload: Mapping[str, Any], reveals: Iterable[RevealRule] = ()
) -> bool:
    """True unless a reveal rule controls the field and none currently matches."""
    controlling = [rule for rule in reveals if field_key in rule.reveals]
    if not controlling:
        return True
    return any(rule.matches(unwrap(payload.get(rule.controlling_field))) for rule in controlling)


def to_list(value: Any) -> list[Any]:
    """Read a repeatable value as a list; a lone scalar counts as one entry."""
    value = unwrap(value)
    if isinstance(value, list):
        return value
    if value is None or value == "":
        return []
    return [value]


def _declared_count(payload: Mapping[str, Any], count_field: str | None) -> int:
    if count_field is None:
        return 0
    count = unwrap(payload.get(count_field))
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        return 0
    if isinstance(count, float) and (math.isnan(count) or not count.is_integer()):
        return 0
    return max(int(count), 0)


def expected_entry_count(
    payload: Mapping[str, Any],
    section: SectionDef,
    repeat_count_field: str | None = None,
) -> int:
    """Entries a repeatable section must hold.

    The longest array started in the section, or the declared count when
    that is larger.
    """
    longest = max((len(to_list(payload.get(field.key))) for field in section.fields), default=0)
    return max(longest, _declared_count(payload, repeat_count_field))


def _repeatable_field_missing(entries: list[Any], field: FieldDef, expected: int) -> bool:
    if not entries or len(entries) < expected:
        return True
    return any(not has_value(unwrap(entry), field.type) for entry in entries)


def missing_fields_for_section(
    payload: Mapping[str, Any],
    schema: SchemaDef,
    section_id: str,
    reveals: Iterable[RevealRule] = (),
    repeat_count_field: str | None = None,
) -> list[str]:
    """Return the keys of required, currently shown fields that have no value.

    Unknown section ids yield an empty list. In repeatable sections a field
    is missing when its array is empty, shorter than the expected entry
    count, or holds any entry without a value. A repeatable section with a
    count field also needs that count declared, so the section cannot be
    complete before the number of entries is known.
    """
    section = schema.section(section_id)
    if section is None:
        return []

    reveals = tuple(reveals)
    expected = (
        expected_entry_count(payload, section, repeat_count_field) if section.repeatable else 0
    )

    missing: list[str] = []
    if section.repeatable and repeat_count_field is not None:
        if _declared_count(payload, repeat_count_field) < 1:
            missing.append(repeat_count_field)

    for field in section.fields:
        if not is_field_required(field.required, field.is_system):
            continue
        if not should_show_field(field.key, payload, reveals):
            continue
        if section.repeatable:
            if _repeatable_field_missing(to_list(payload.get(field.key)), field, expected):
                missing.append(field.key)
        elif not has_value(unwrap(payload.get(field.key)), field.type):
            missing.append(field.key)
    return missing
