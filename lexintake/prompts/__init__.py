"""Guided-chat prompt generation and the chat system prompt."""

from lexintake.prompts.generator import (
    assert_prompt_coverage,
    find_missing_prompts,
    generate_prompts_from_schema,
)
from lexintake.prompts.library import assert_all_prompt_coverage, get_prompt_library
from lexintake.prompts.models import FieldPrompt, NarrativePrompt, PromptLibrary, SectionPromptSet
from lexintake.prompts.system_prompt import build_system_prompt, render_form_state

__all__ = [
    "FieldPrompt",
    "NarrativePrompt",
    "PromptLibrary",
    "SectionPromptSet",
    "assert_all_prompt_coverage",
    "assert_prompt_coverage",
    "build_system_prompt",
    "find_missing_prompts",
    "generate_prompts_from_schema",
    "get_prompt_library",
    "render_form_state",
]
