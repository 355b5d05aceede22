"""Derive guided-chat prompts from a schema.

Libraries are built once per mode at import time, never per request. The
reveal annotations come from the same table the completeness evaluator
reads, so "askable when" and "required when" cannot drift apart.
"""

from collections.abc import Iterable

from lexintake.exceptions import PromptCoverageError
from lexintake.prompts.models import FieldPrompt, NarrativePrompt, PromptLibrary, SectionPromptSet
from lexintake.schema.enums import FieldType
from lexintake.schema.models import FieldDef, SchemaDef, SectionDef
from lexintake.schema.reveals import RevealRule, build_reveal_index, rules_for_controlling_field
from lexintake.validation.validators import format_label

DEFAULT_HELPER_TEXT = "You can say \"I'm not sure\" or skip for now."
BOOLEAN_HELPER_TEXT = "You can reply yes or no, or say \"I'm not sure\"."
NARRATIVE_HELPER_TEXT = "You can skip this or say \"I'm not sure\"."


def _narrative_prompt(section: SectionDef) -> NarrativePrompt:
    return NarrativePrompt(
        id=f"{section.id}:narrative",
        prompt=(
            "If you'd like, share any context about "
            f"{section.title.lower()} in your own words."
        ),
        helper_text=NARRATIVE_HELPER_TEXT,
    )


# Prompt templates by field type; {label} is the title-cased field key
PROMPT_TEMPLATES: dict[FieldType, tuple[str, str]] = {
    FieldType.DATE: (
        "What is the date for {label}?",
        f"{DEFAULT_HELPER_TEXT} Example: 2024-01-15.",
    ),
    FieldType.NUMBER: ("What is the estimated {label}?", DEFAULT_HELPER_TEXT),
    FieldType.BOOLEAN: ("Is {lower_label} true for your situation?", BOOLEAN_HELPER_TEXT),
    FieldType.ENUM: (
        "Which option best fits for {label}?",
        f"{DEFAULT_HELPER_TEXT} You can also choose from the form options.",
    ),
    FieldType.MULTISELECT: ("Which of these apply for {label}?", DEFAULT_HELPER_TEXT),
    FieldType.STRUCTURED: (
        "Do you know the address for {label}? If so, please enter it in the form.",
        DEFAULT_HELPER_TEXT,
    ),
    FieldType.LIST: ("Are there any {lower_label} to add?", DEFAULT_HELPER_TEXT),
    FieldType.TEXT: ("What should we record for {label}?", DEFAULT_HELPER_TEXT),
}


def _phrase(field: FieldDef) -> tuple[str, str]:
    """Return (prompt, helper_text) for a field's declared type."""
    label = format_label(field.key)
    template, helper_text = PROMPT_TEMPLATES.get(field.type, PROMPT_TEMPLATES[FieldType.TEXT])
    return template.format(label=label, lower_label=label.lower()), helper_text


def generate_prompts_from_schema(
    schema: SchemaDef, reveals: Iterable[RevealRule] = ()
) -> PromptLibrary:
    """Build the prompt library for a schema and its reveal table."""
    reveals = tuple(reveals)
    revealed_by = build_reveal_index(reveals)
    sections: dict[str, SectionPromptSet] = {}

    for section in schema.sections:
        field_prompts: dict[str, FieldPrompt] = {}
        for field in section.fields:
            if field.is_system:
                continue
            prompt, helper_text = _phrase(field)
            field_prompts[field.key] = FieldPrompt(
                field_key=field.key,
                field_type=field.type,
                prompt=prompt,
                helper_text=helper_text,
                ask_if_missing=field.required is not False,
                reveals=rules_for_controlling_field(reveals, field.key),
                revealed_by=revealed_by.get(field.key, ()),
            )

        sections[section.id] = SectionPromptSet(
            section_id=section.id,
            section_title=section.title,
            narrative_prompt=_narrative_prompt(section),
            field_prompts=field_prompts,
        )

    return PromptLibrary(version=schema.version, sections=sections, reveal_rules=reveals)


def find_missing_prompts(schema: SchemaDef, library: PromptLibrary) -> list[str]:
    """List every section, field or narrative prompt the library lacks."""
    missing: list[str] = []
    for section in schema.sections:
        prompts = library.sections.get(section.id)
        if prompts is None:
            missing.append(f"section:{section.id}")
            continue
        for field in section.fields:
            if not field.is_system and field.key not in prompts.field_prompts:
                missing.append(f"{section.id}.{field.key}")
        if prompts.narrative_prompt is None:
            missing.append(f"{section.id}.narrative")
    return missing


def assert_prompt_coverage(schema: SchemaDef, library: PromptLibrary) -> None:
    """Fail fast when a library does not cover its schema.

    Raises:
        PromptCoverageError: Listing every uncovered section or field
    """
    missing = find_missing_prompts(schema, library)
    if missing:
        raise PromptCoverageError(missing)
