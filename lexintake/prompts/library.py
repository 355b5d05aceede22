"""Per-mode prompt libraries, generated once at import."""

from types import MappingProxyType

from lexintake.prompts.generator import assert_prompt_coverage, generate_prompts_from_schema
from lexintake.prompts.models import PromptLibrary
from lexintake.schema.enums import IntakeMode
from lexintake.schema.registry import get_reveals, get_schema, resolve_mode

_LIBRARIES = MappingProxyType(
    {mode: generate_prompts_from_schema(get_schema(mode), get_reveals(mode)) for mode in IntakeMode}
)


def get_prompt_library(mode: IntakeMode | str) -> PromptLibrary:
    """Return the prompt library for a mode.

    Raises:
        UnknownModeError: If the mode is not supported
    """
    return _LIBRARIES[resolve_mode(mode)]


def assert_all_prompt_coverage() -> None:
    """Check every mode's library against its schema; run once at startup."""
    for mode, library in _LIBRARIES.items():
        assert_prompt_coverage(get_schema(mode), library)
