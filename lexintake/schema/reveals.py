"""Progressive-disclosure tables.

A `RevealRule` says: when `controlling_field` holds `when_value`, the
fields in `reveals` become askable (prompt generator) and, if declared
required, required (completeness evaluator). Both consumers read the same
table for a mode; neither keeps its own copy of the conditions.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ConfigDict, Field

from lexintake.exceptions import SchemaDefinitionError
from lexintake.schema.models import SchemaDef
from lexintake.wire import WireModel

RevealTable = tuple["RevealRule", ...]


class RevealRule(WireModel):
    """One controlling-field → revealed-fields entry."""

    model_config = ConfigDict(frozen=True)

    controlling_field: str = Field(..., description="Field whose value drives disclosure")
    when_value: Any = Field(..., description="Value that reveals the dependent fields")
    reveals: tuple[str, ...] = Field(..., min_length=1, description="Fields revealed")

    def matches(self, value: Any) -> bool:
        """Strict comparison: `1` does not match `True`, `"true"` does not either."""
        return type(value) is type(self.when_value) and value == self.when_value


def build_reveal_index(reveals: Iterable[RevealRule]) -> Mapping[str, tuple[RevealRule, ...]]:
    """Index rules by revealed field key."""
    index: dict[str, list[RevealRule]] = {}
    for rule in reveals:
        if rule.controlling_field in rule.reveals:
            raise SchemaDefinitionError(
                f"Reveal rule on {rule.controlling_field!r} reveals itself"
            )
        for key in rule.reveals:
            index.setdefault(key, []).append(rule)
    return MappingProxyType({key: tuple(rules) for key, rules in index.items()})


def rules_for_controlling_field(
    reveals: Iterable[RevealRule], field_key: str
) -> tuple[RevealRule, ...]:
    """Every rule the field controls, in table order."""
    return tuple(rule for rule in reveals if rule.controlling_field == field_key)


def validate_reveal_table(schema: SchemaDef, reveals: Iterable[RevealRule]) -> None:
    """Fail fast when a reveal table does not fit its schema.

    Every controlling and revealed field must exist, and system fields may
    not be revealed since they are never asked.
    """
    fields = schema.field_index()
    problems: list[str] = []
    for rule in reveals:
        if rule.controlling_field not in fields:
            problems.append(f"unknown controlling field {rule.controlling_field!r}")
        for key in rule.reveals:
            field = fields.get(key)
            if field is None:
                problems.append(f"{rule.controlling_field!r} reveals unknown field {key!r}")
            elif field.is_system:
                problems.append(f"{rule.controlling_field!r} reveals system field {key!r}")
    if problems:
        raise SchemaDefinitionError(
            f"Reveal table does not match schema {schema.version}: {'; '.join(problems)}"
        )
