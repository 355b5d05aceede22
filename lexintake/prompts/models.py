"""Guided-chat prompt models."""

from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, Field

from lexintake.schema.enums import FieldType
from lexintake.schema.reveals import RevealRule
from lexintake.validation.completeness import should_show_field
from lexintake.wire import WireModel


class NarrativePrompt(WireModel):
    """Optional free-text prompt offered once per section."""

    model_config = ConfigDict(frozen=True)

    id: str
    prompt: str
    helper_text: str
    optional: bool = True


class FieldPrompt(WireModel):
    """Chat question for one non-system field."""

    model_config = ConfigDict(frozen=True)

    field_key: str
    field_type: FieldType
    prompt: str
    helper_text: str
    ask_if_missing: bool = Field(..., description="Field is required or conditionally required")
    reveals: tuple[RevealRule, ...] = Field(
        default=(), description="Rules this field controls"
    )
    revealed_by: tuple[RevealRule, ...] = Field(
        default=(), description="Rules that make this field askable"
    )


class SectionPromptSet(WireModel):
    """Prompts for one schema section."""

    model_config = ConfigDict(frozen=True)

    section_id: str
    section_title: str
    narrative_prompt: NarrativePrompt | None = None
    field_prompts: dict[str, FieldPrompt] = Field(default_factory=dict)


class PromptLibrary(WireModel):
    """Prompts for a whole schema, keyed by section id."""

    model_config = ConfigDict(frozen=True)

    version: str
    sections: dict[str, SectionPromptSet] = Field(default_factory=dict)
    reveal_rules: tuple[RevealRule, ...] = ()

    def field_prompt(self, field_key: str) -> FieldPrompt | None:
        for section in self.sections.values():
            prompt = section.field_prompts.get(field_key)
            if prompt is not None:
                return prompt
        return None

    def is_revealed(self, field_key: str, payload: Mapping[str, Any]) -> bool:
        """Whether the field is currently askable given the payload."""
        return should_show_field(field_key, payload, self.reveal_rules)
