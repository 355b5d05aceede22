"""Mode-keyed facade over the orchestrator.

Every caller outside this package goes through these functions with an
intake mode string; the per-mode descriptors stay private to `modes`.
"""

from collections.abc import Mapping
from typing import Any

from lexintake.config.models.orchestrator import OrchestratorSettings
from lexintake.orchestration import engine
from lexintake.orchestration.models import (
    ChatPromptFields,
    OrchestratorConfig,
    OrchestratorResult,
    PostureResult,
    SidebarStep,
    StepState,
    StepStatusInput,
    UiStepDef,
)
from lexintake.orchestration.modes import DEFAULT_STEP_LABEL, MODE_CONFIGS, STEP_LABELS
from lexintake.payload.assertions import unwrap
from lexintake.prompts.library import get_prompt_library
from lexintake.schema.enums import IntakeMode
from lexintake.schema.registry import is_valid_intake_type, resolve_mode

__all__ = [
    "build_sidebar_steps",
    "find_ui_step_for_schema_step",
    "get_chat_prompt_fields",
    "get_config",
    "get_first_schema_step",
    "get_step_label",
    "get_ui_steps",
    "is_ui_step_complete",
    "is_valid_intake_type",
    "orchestrate",
    "validate_intake_type_posture",
]


def get_config(mode: IntakeMode | str) -> OrchestratorConfig:
    """Return the descriptor for a mode.

    Raises:
        UnknownModeError: If the mode is not supported
    """
    return MODE_CONFIGS[resolve_mode(mode)]


def orchestrate(
    mode: IntakeMode | str,
    payload: Mapping[str, Any] | None,
    settings: OrchestratorSettings | None = None,
) -> OrchestratorResult:
    """Evaluate a stored payload for the given mode.

    Raises:
        UnknownModeError: If the mode is not supported
    """
    config = get_config(mode)
    log_evaluation = settings.log_evaluations if settings is not None else False
    return engine.orchestrate(config, payload, log_evaluation=log_evaluation)


def get_step_label(schema_step: str) -> str:
    return STEP_LABELS.get(schema_step, DEFAULT_STEP_LABEL)


def get_ui_steps(mode: IntakeMode | str) -> tuple[UiStepDef, ...]:
    return get_config(mode).ui_steps


def get_first_schema_step(mode: IntakeMode | str) -> str:
    return get_config(mode).schema_def.sections[0].id


def find_ui_step_for_schema_step(mode: IntakeMode | str, schema_step: str) -> UiStepDef | None:
    """Return the UI step that contains a schema step, or None."""
    return engine.find_ui_step_for_schema_step(get_ui_steps(mode), schema_step)


def _status_of(entry: Any) -> Any:
    if isinstance(entry, Mapping):
        return entry.get("status")
    return entry


def is_ui_step_complete(
    mode: IntakeMode | str, ui_step_key: str, step_status_map: StepStatusInput
) -> bool:
    """True if every schema step of the UI step is marked complete.

    Schema steps with no entry in `step_status_map` count as incomplete.
    """
    for ui_step in get_ui_steps(mode):
        if ui_step.key == ui_step_key:
            return all(
                _status_of(step_status_map.get(step)) == StepState.COMPLETE.value
                for step in ui_step.schema_steps
            )
    return False


def build_sidebar_steps(
    mode: IntakeMode | str,
    current_step_key: str,
    step_status_map: StepStatusInput,
) -> list[SidebarStep]:
    """Build the sidebar entries from stored step statuses.

    Args:
        mode: Intake mode
        current_step_key: Current schema step key
        step_status_map: Schema step key -> status string or {"status": ...}

    Returns:
        One entry per UI step, in display order
    """
    ui_steps = get_ui_steps(mode)
    active = engine.find_ui_step_for_schema_step(ui_steps, current_step_key)
    return [
        SidebarStep(
            id=ui_step.key,
            label=ui_step.label,
            is_completed=is_ui_step_complete(mode, ui_step.key, step_status_map),
            is_active=active is not None and ui_step.key == active.key,
        )
        for ui_step in ui_steps
    ]


def _children_count(payload: Mapping[str, Any]) -> float:
    count = unwrap(payload.get("children_count"))
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        return 0
    return count


def validate_intake_type_posture(
    mode: IntakeMode | str, payload: Mapping[str, Any] | None
) -> PostureResult:
    """Check whether the payload's children answers fit the chosen mode.

    Reports a conflict whenever `orchestrate` would block on the gate. A
    mode that excludes children also conflicts with a positive
    `children_count`. Unanswered payloads are valid.

    Raises:
        UnknownModeError: If the mode is not supported
    """
    config = get_config(mode)
    if not isinstance(payload, Mapping):
        payload = {}
    gate = config.gate
    if gate is None:
        return PostureResult(valid=True)

    conflicting = engine.gate_contradicted(gate, payload) or (
        not gate.required_value and _children_count(payload) > 0
    )
    if not conflicting:
        return PostureResult(valid=True)
    return PostureResult(
        valid=False,
        suggested_type=gate.suggested_mode,
        reason=gate.posture_reason or gate.blocked_reason,
    )


def get_chat_prompt_fields(
    mode: IntakeMode | str, result: OrchestratorResult
) -> ChatPromptFields:
    """Select the prompts the chat should ask for the current step.

    Prompts follow the section's field order. A blocked flow yields no
    prompts; the chat explains the routing message instead.
    """
    library = get_prompt_library(mode)
    step_key = result.current_schema_step
    section_prompts = library.sections.get(step_key)

    prompts = []
    if section_prompts is not None and not result.flow_blocked:
        missing = set(result.current_step_missing_fields)
        prompts = [
            prompt
            for key, prompt in section_prompts.field_prompts.items()
            if key in missing
        ]

    return ChatPromptFields(
        step_key=step_key,
        step_label=get_step_label(step_key),
        prompts=prompts,
        missing_fields=list(result.current_step_missing_fields),
        validation_errors=list(result.current_step_validation_errors),
        flow_blocked=result.flow_blocked,
        flow_blocked_reason=result.flow_blocked_reason,
    )
